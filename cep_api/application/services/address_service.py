"""
Address service orchestrator.

Read-through CEP lookup with origin fallback, plus CRUD and search over
the address storage port. Every operation returns a ServiceResult; domain
failures never leave this layer as exceptions.

Dependencies: cep_api.core, cep_api.boundary.viacep
System role: Address use case orchestration
"""

import functools
import logging
from typing import Any, Awaitable, Callable, Mapping, TypeVar

from cep_api.boundary.viacep.client import OriginClient
from cep_api.boundary.viacep.schemas import ViaCepResponse
from cep_api.core.address import ADDRESS_FIELDS, AddressRecord
from cep_api.core.exceptions import DuplicatePostalCodeError, ValidationError
from cep_api.core.pagination import DEFAULT_PAGE_SIZE, DEFAULT_SORT, Page, PageRequest
from cep_api.core.result import ErrorKind, ServiceResult
from cep_api.core.storage_port import AddressStoragePort
from cep_api.core.validation import (
    normalize_postal_code,
    require_text,
    strip_postal_code,
    validate_address_fields,
    validate_postal_code,
    validate_state_code,
)

logger = logging.getLogger(__name__)

F = TypeVar("F", bound=Callable[..., Awaitable[ServiceResult]])


def returns_validation_failures(func: F) -> F:
    """Turn a ValidationError raised by input checks into a VALIDATION result."""

    @functools.wraps(func)
    async def wrapper(*args: Any, **kwargs: Any) -> ServiceResult:
        try:
            return await func(*args, **kwargs)
        except ValidationError as e:
            logger.warning(
                "Rejected invalid input",
                extra={"operation": func.__name__, "field": e.field, "error": e.message},
            )
            return ServiceResult.from_exception(e)

    return wrapper  # type: ignore[return-value]


def map_origin_to_record(payload: ViaCepResponse) -> AddressRecord:
    """
    Build a new, unsaved AddressRecord from a ViaCEP payload.

    The CEP loses its formatting ("01310-100" -> "01310100"); empty
    optional fields become None.
    """
    return AddressRecord(
        postal_code=strip_postal_code(payload.cep or ""),
        street=payload.logradouro or "",
        complement=payload.complemento or None,
        neighborhood=payload.bairro or "",
        city=payload.localidade or "",
        state_code=payload.uf or "",
        region_code=payload.ibge or None,
        tax_region_code=payload.gia or None,
        area_code=payload.ddd or None,
        finance_region_code=payload.siafi or None,
    )


class AddressService:
    """Address service orchestrator."""

    def __init__(self, store: AddressStoragePort, origin: OriginClient) -> None:
        """
        Args:
            store: Address storage adapter
            origin: External provider consulted on local misses
        """
        self.store = store
        self.origin = origin

    @staticmethod
    def _not_found(code: str) -> ServiceResult:
        return ServiceResult.fail(
            ErrorKind.NOT_FOUND,
            f"Endereço não encontrado para o CEP: {code}",
            postal_code=code,
        )

    @staticmethod
    def _conflict(code: str, message: str | None = None) -> ServiceResult:
        return ServiceResult.fail(
            ErrorKind.CONFLICT,
            message or f"CEP já cadastrado no sistema: {code}",
            postal_code=code,
        )

    @returns_validation_failures
    async def resolve(self, code: str) -> ServiceResult[AddressRecord]:
        """
        Find an address by CEP, falling back to the origin on a local miss.

        Local storage is authoritative: a stored record is returned as-is and
        the origin is not called. On a miss the origin result is mapped,
        saved and returned. A concurrent resolver that saved the same CEP
        first wins; this call then returns the winner's row.

        Args:
            code: CEP, with or without formatting

        Returns:
            ServiceResult[AddressRecord]: NOT_FOUND when neither storage nor
            the origin can resolve the CEP
        """
        code = normalize_postal_code(code)
        logger.info("Resolving address", extra={"postal_code": code})

        record = await self.store.find_by_code(code)
        if record is not None:
            return ServiceResult.ok(record)

        logger.info("CEP not in local storage, querying origin", extra={"postal_code": code})
        lookup = await self.origin.lookup(code)
        if not lookup.resolved:
            logger.info(
                "Origin could not resolve CEP",
                extra={"postal_code": code, "status": lookup.status.value, "reason": lookup.reason},
            )
            return self._not_found(code)

        candidate = map_origin_to_record(lookup.payload)
        try:
            validate_postal_code(candidate.postal_code)
            validate_state_code(candidate.state_code)
        except ValidationError as e:
            logger.warning(
                "Origin returned an unusable address",
                extra={"postal_code": code, "field": e.field, "error": e.message},
            )
            return self._not_found(code)

        try:
            saved = await self.store.save(candidate)
        except DuplicatePostalCodeError:
            logger.info(
                "CEP persisted concurrently, reading stored row",
                extra={"postal_code": candidate.postal_code},
            )
            winner = await self.store.find_by_code(candidate.postal_code)
            return ServiceResult.ok(winner) if winner else self._not_found(code)

        logger.info(
            "Address cached from origin",
            extra={"postal_code": saved.postal_code, "address_id": saved.id},
        )
        return ServiceResult.ok(saved)

    @returns_validation_failures
    async def create(self, data: Mapping[str, Any]) -> ServiceResult[AddressRecord]:
        """
        Register a new address.

        Returns:
            ServiceResult[AddressRecord]: CONFLICT when the CEP is taken,
            VALIDATION when a field is malformed
        """
        validate_address_fields(data)
        code = data["postal_code"]
        logger.info("Creating address", extra={"postal_code": code})

        if await self.store.exists_by_code(code):
            return self._conflict(code)

        record = AddressRecord(**{name: data.get(name) for name in ADDRESS_FIELDS})
        try:
            saved = await self.store.save(record)
        except DuplicatePostalCodeError:
            return self._conflict(code)

        logger.info("Address created", extra={"postal_code": code, "address_id": saved.id})
        return ServiceResult.ok(saved)

    @returns_validation_failures
    async def update(
        self, code: str, data: Mapping[str, Any]
    ) -> ServiceResult[AddressRecord]:
        """
        Replace every field of the address stored under ``code``.

        The uniqueness check only runs when the CEP itself changes.

        Returns:
            ServiceResult[AddressRecord]: NOT_FOUND when ``code`` is absent,
            CONFLICT when the new CEP belongs to another record
        """
        code = normalize_postal_code(code)
        validate_address_fields(data)
        logger.info("Updating address", extra={"postal_code": code})

        current = await self.store.find_by_code(code)
        if current is None:
            return self._not_found(code)

        new_code = data["postal_code"]
        if new_code != current.postal_code and await self.store.exists_by_code_excluding_id(
            new_code, current.id
        ):
            return self._conflict(new_code, f"O novo CEP já está cadastrado: {new_code}")

        try:
            saved = await self.store.save(current.apply(dict(data)))
        except DuplicatePostalCodeError:
            return self._conflict(new_code, f"O novo CEP já está cadastrado: {new_code}")

        logger.info(
            "Address updated",
            extra={"postal_code": saved.postal_code, "address_id": saved.id},
        )
        return ServiceResult.ok(saved)

    @returns_validation_failures
    async def delete(self, code: str) -> ServiceResult[None]:
        """Permanently remove the address stored under ``code``."""
        code = normalize_postal_code(code)
        logger.info("Deleting address", extra={"postal_code": code})

        current = await self.store.find_by_code(code)
        if current is None:
            return self._not_found(code)

        await self.store.delete(current)
        logger.info("Address deleted", extra={"postal_code": code})
        return ServiceResult.ok(None)

    @returns_validation_failures
    async def list_all(
        self,
        page: int = 0,
        size: int = DEFAULT_PAGE_SIZE,
        sort: str = DEFAULT_SORT,
        descending: bool = False,
    ) -> ServiceResult[Page[AddressRecord]]:
        request = PageRequest(page=page, size=size, sort=sort, descending=descending)
        return ServiceResult.ok(await self.store.list_all(request))

    @returns_validation_failures
    async def search_by_street(
        self,
        fragment: str,
        page: int = 0,
        size: int = DEFAULT_PAGE_SIZE,
        sort: str = DEFAULT_SORT,
        descending: bool = False,
    ) -> ServiceResult[Page[AddressRecord]]:
        """Addresses whose street contains ``fragment`` (case-insensitive)."""
        fragment = require_text(fragment, "street")
        request = PageRequest(page=page, size=size, sort=sort, descending=descending)
        logger.info("Searching by street", extra={"fragment": fragment})
        return ServiceResult.ok(await self.store.search_by_street_fragment(fragment, request))

    @returns_validation_failures
    async def search_by_city(
        self,
        city: str,
        page: int = 0,
        size: int = DEFAULT_PAGE_SIZE,
        sort: str = DEFAULT_SORT,
        descending: bool = False,
    ) -> ServiceResult[Page[AddressRecord]]:
        """Addresses in ``city`` (case-insensitive exact match)."""
        city = require_text(city, "city")
        request = PageRequest(page=page, size=size, sort=sort, descending=descending)
        logger.info("Searching by city", extra={"city": city})
        return ServiceResult.ok(await self.store.search_by_city(city, request))

    @returns_validation_failures
    async def search_by_state(
        self,
        state_code: str,
        page: int = 0,
        size: int = DEFAULT_PAGE_SIZE,
        sort: str = DEFAULT_SORT,
        descending: bool = False,
    ) -> ServiceResult[Page[AddressRecord]]:
        """Addresses in a UF; the code is matched case-insensitively."""
        state_code = validate_state_code(require_text(state_code, "state_code").upper())
        request = PageRequest(page=page, size=size, sort=sort, descending=descending)
        return ServiceResult.ok(await self.store.search_by_state(state_code, request))

    @returns_validation_failures
    async def search_by_neighborhood(
        self,
        neighborhood: str,
        city: str,
        page: int = 0,
        size: int = DEFAULT_PAGE_SIZE,
        sort: str = DEFAULT_SORT,
        descending: bool = False,
    ) -> ServiceResult[Page[AddressRecord]]:
        neighborhood = require_text(neighborhood, "neighborhood")
        city = require_text(city, "city")
        request = PageRequest(page=page, size=size, sort=sort, descending=descending)
        return ServiceResult.ok(
            await self.store.search_by_neighborhood_and_city(neighborhood, city, request)
        )

    @returns_validation_failures
    async def count_by_city(self, city: str) -> ServiceResult[int]:
        city = require_text(city, "city")
        return ServiceResult.ok(await self.store.count_by_city(city))
