"""API request/response schemas."""

from cep_api.models.address import AddressRequest, AddressResponse, CityCountResponse
from cep_api.models.common import ErrorResponse, PageResponse

__all__ = [
    "AddressRequest",
    "AddressResponse",
    "CityCountResponse",
    "ErrorResponse",
    "PageResponse",
]
