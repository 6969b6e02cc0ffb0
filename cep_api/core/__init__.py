"""
Domain core: exceptions, result types, validation, pagination and the
address storage port.
"""

from cep_api.core.exceptions import (
    AddressNotFoundError,
    CepApiException,
    DuplicatePostalCodeError,
    PostalCodeConflictError,
    ValidationError,
)
from cep_api.core.address import ADDRESS_FIELDS, AddressRecord
from cep_api.core.pagination import Page, PageRequest
from cep_api.core.result import ErrorKind, ServiceResult
from cep_api.core.storage_port import AddressStoragePort

__all__ = [
    "ADDRESS_FIELDS",
    "AddressRecord",
    "AddressNotFoundError",
    "AddressStoragePort",
    "CepApiException",
    "DuplicatePostalCodeError",
    "ErrorKind",
    "Page",
    "PageRequest",
    "PostalCodeConflictError",
    "ServiceResult",
    "ValidationError",
]
