"""
Address API endpoints.

Routes:
- GET /addresses/cep/{cep} - Resolve address (local first, ViaCEP fallback)
- GET /addresses/street - Search by street fragment
- GET /addresses/city - Search by city
- GET /addresses/city/count - Count addresses in a city
- GET /addresses/state/{uf} - Search by state
- GET /addresses/neighborhood - Search by neighborhood and city
- GET /addresses - List all addresses
- POST /addresses - Create address
- PUT /addresses/{cep} - Replace address
- DELETE /addresses/{cep} - Delete address

Dependencies: cep_api.application.services, cep_api.models
System role: Address management HTTP API
"""

import logging
from typing import Literal

from fastapi import APIRouter, Depends, Path, Query, Response, status

from cep_api.api.deps.dependencies import get_address_service
from cep_api.application.services import AddressService
from cep_api.core.pagination import DEFAULT_PAGE_SIZE, DEFAULT_SORT
from cep_api.models.address import AddressRequest, AddressResponse, CityCountResponse
from cep_api.models.common import ErrorResponse, PageResponse

from .address_error_handling import handle_address_errors
from .address_responses import map_address_to_response, map_page_to_response

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/addresses", tags=["addresses"])

NOT_FOUND = {404: {"model": ErrorResponse, "description": "CEP não encontrado"}}
BAD_REQUEST = {400: {"model": ErrorResponse, "description": "Parâmetros inválidos"}}
CONFLICT = {409: {"model": ErrorResponse, "description": "CEP já cadastrado"}}

PageQuery = Query(0, description="Número da página (inicia em 0)")
SizeQuery = Query(DEFAULT_PAGE_SIZE, description="Quantidade de itens por página")
SortQuery = Query(DEFAULT_SORT, description="Campo para ordenação")
DirectionQuery = Query("asc", description="Direção da ordenação")


@router.get(
    "/cep/{cep}",
    response_model=AddressResponse,
    summary="Buscar endereço por CEP",
    responses={**NOT_FOUND, **BAD_REQUEST},
)
@handle_address_errors
async def get_by_cep(
    cep: str = Path(..., description="CEP com 8 dígitos", examples=["01310100"]),
    service: AddressService = Depends(get_address_service),
) -> AddressResponse:
    """
    Return the address for a CEP.

    Served from local storage when present; otherwise resolved at ViaCEP,
    stored, and returned.

    Raises:
        HTTPException(404): Neither storage nor ViaCEP know the CEP
        HTTPException(400): Malformed CEP
    """
    record = (await service.resolve(cep)).unwrap()
    return map_address_to_response(record)


@router.get(
    "/street",
    response_model=PageResponse[AddressResponse],
    summary="Buscar endereços por logradouro",
    responses=BAD_REQUEST,
)
@handle_address_errors
async def search_by_street(
    street: str = Query(..., description="Trecho do logradouro", examples=["Paulista"]),
    page: int = PageQuery,
    size: int = SizeQuery,
    sort: str = SortQuery,
    direction: Literal["asc", "desc"] = DirectionQuery,
    service: AddressService = Depends(get_address_service),
) -> PageResponse[AddressResponse]:
    """Paginated addresses whose street contains the given text."""
    result = await service.search_by_street(
        street, page=page, size=size, sort=sort, descending=direction == "desc"
    )
    return map_page_to_response(result.unwrap())


@router.get(
    "/city/count",
    response_model=CityCountResponse,
    summary="Contar endereços de uma cidade",
    responses=BAD_REQUEST,
)
@handle_address_errors
async def count_by_city(
    city: str = Query(..., description="Nome da cidade", examples=["São Paulo"]),
    service: AddressService = Depends(get_address_service),
) -> CityCountResponse:
    """Number of stored addresses in a city."""
    total = (await service.count_by_city(city)).unwrap()
    return CityCountResponse(city=city, total=total)


@router.get(
    "/city",
    response_model=PageResponse[AddressResponse],
    summary="Buscar endereços por cidade",
    responses=BAD_REQUEST,
)
@handle_address_errors
async def search_by_city(
    city: str = Query(..., description="Nome da cidade", examples=["São Paulo"]),
    page: int = PageQuery,
    size: int = SizeQuery,
    sort: str = SortQuery,
    direction: Literal["asc", "desc"] = DirectionQuery,
    service: AddressService = Depends(get_address_service),
) -> PageResponse[AddressResponse]:
    """Paginated addresses of one city (case-insensitive)."""
    result = await service.search_by_city(
        city, page=page, size=size, sort=sort, descending=direction == "desc"
    )
    return map_page_to_response(result.unwrap())


@router.get(
    "/state/{uf}",
    response_model=PageResponse[AddressResponse],
    summary="Buscar endereços por UF",
    responses=BAD_REQUEST,
)
@handle_address_errors
async def search_by_state(
    uf: str = Path(..., description="Sigla do estado", examples=["SP"]),
    page: int = PageQuery,
    size: int = SizeQuery,
    sort: str = SortQuery,
    direction: Literal["asc", "desc"] = DirectionQuery,
    service: AddressService = Depends(get_address_service),
) -> PageResponse[AddressResponse]:
    """Paginated addresses of one state."""
    result = await service.search_by_state(
        uf, page=page, size=size, sort=sort, descending=direction == "desc"
    )
    return map_page_to_response(result.unwrap())


@router.get(
    "/neighborhood",
    response_model=PageResponse[AddressResponse],
    summary="Buscar endereços por bairro e cidade",
    responses=BAD_REQUEST,
)
@handle_address_errors
async def search_by_neighborhood(
    neighborhood: str = Query(..., description="Nome do bairro", examples=["Bela Vista"]),
    city: str = Query(..., description="Nome da cidade", examples=["São Paulo"]),
    page: int = PageQuery,
    size: int = SizeQuery,
    sort: str = SortQuery,
    direction: Literal["asc", "desc"] = DirectionQuery,
    service: AddressService = Depends(get_address_service),
) -> PageResponse[AddressResponse]:
    result = await service.search_by_neighborhood(
        neighborhood, city, page=page, size=size, sort=sort, descending=direction == "desc"
    )
    return map_page_to_response(result.unwrap())


@router.get(
    "",
    response_model=PageResponse[AddressResponse],
    summary="Listar todos os endereços",
    responses=BAD_REQUEST,
)
@handle_address_errors
async def list_addresses(
    page: int = PageQuery,
    size: int = SizeQuery,
    sort: str = SortQuery,
    direction: Literal["asc", "desc"] = DirectionQuery,
    service: AddressService = Depends(get_address_service),
) -> PageResponse[AddressResponse]:
    """Paginated listing of every stored address."""
    logger.info("Listing addresses", extra={"page": page, "size": size, "sort": sort})
    result = await service.list_all(
        page=page, size=size, sort=sort, descending=direction == "desc"
    )
    return map_page_to_response(result.unwrap())


@router.post(
    "",
    response_model=AddressResponse,
    status_code=status.HTTP_201_CREATED,
    summary="Criar novo endereço",
    responses={**BAD_REQUEST, **CONFLICT},
)
@handle_address_errors
async def create_address(
    request: AddressRequest,
    service: AddressService = Depends(get_address_service),
) -> AddressResponse:
    """
    Register a new CEP.

    Raises:
        HTTPException(409): CEP already registered
        HTTPException(400/422): Invalid payload
    """
    record = (await service.create(request.model_dump())).unwrap()
    logger.info(
        "Address created successfully",
        extra={"postal_code": record.postal_code, "address_id": record.id},
    )
    return map_address_to_response(record)


@router.put(
    "/{cep}",
    response_model=AddressResponse,
    summary="Atualizar endereço existente",
    responses={**NOT_FOUND, **BAD_REQUEST, **CONFLICT},
)
@handle_address_errors
async def update_address(
    request: AddressRequest,
    cep: str = Path(..., description="CEP do endereço a ser atualizado", examples=["01310100"]),
    service: AddressService = Depends(get_address_service),
) -> AddressResponse:
    """
    Replace every field of an existing address.

    Raises:
        HTTPException(404): CEP not registered
        HTTPException(409): New CEP already used by another address
    """
    record = (await service.update(cep, request.model_dump())).unwrap()
    return map_address_to_response(record)


@router.delete(
    "/{cep}",
    status_code=status.HTTP_204_NO_CONTENT,
    response_class=Response,
    summary="Deletar endereço",
    responses=NOT_FOUND,
)
@handle_address_errors
async def delete_address(
    cep: str = Path(..., description="CEP do endereço a ser deletado", examples=["01310100"]),
    service: AddressService = Depends(get_address_service),
) -> Response:
    """
    Remove an address.

    Raises:
        HTTPException(404): CEP not registered
    """
    (await service.delete(cep)).unwrap()
    return Response(status_code=status.HTTP_204_NO_CONTENT)
