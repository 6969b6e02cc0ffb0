"""
Explicit success/failure results for service operations.

Service methods return ServiceResult instead of raising, so the possible
outcomes (ok, validation, not found, conflict) are part of the signature.
The HTTP boundary calls unwrap() to turn a failure into the matching
domain exception.

Dependencies: cep_api.core.exceptions
System role: Service-layer outcome contract
"""

from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Generic, TypeVar

from cep_api.core.exceptions import (
    AddressNotFoundError,
    CepApiException,
    PostalCodeConflictError,
    ValidationError,
)

T = TypeVar("T")


class ErrorKind(str, Enum):
    """Failure categories a service operation can report."""

    VALIDATION = "validation"
    NOT_FOUND = "not_found"
    CONFLICT = "conflict"


@dataclass(frozen=True)
class ServiceResult(Generic[T]):
    """
    Outcome of a service operation.

    Attributes:
        value: Payload on success (may be None for operations without one)
        error: ErrorKind on failure, None on success
        message: Human-readable failure message
        details: Failure context (postal_code, field, ...)
    """

    value: T | None = None
    error: ErrorKind | None = None
    message: str = ""
    details: dict[str, Any] = field(default_factory=dict)

    @classmethod
    def ok(cls, value: T | None = None) -> "ServiceResult[T]":
        return cls(value=value)

    @classmethod
    def fail(
        cls,
        error: ErrorKind,
        message: str,
        **details: Any,
    ) -> "ServiceResult[T]":
        return cls(error=error, message=message, details=details)

    @classmethod
    def from_exception(cls, exc: CepApiException) -> "ServiceResult[T]":
        """Build a failed result from a domain exception."""
        if isinstance(exc, ValidationError):
            kind = ErrorKind.VALIDATION
        elif isinstance(exc, AddressNotFoundError):
            kind = ErrorKind.NOT_FOUND
        elif isinstance(exc, PostalCodeConflictError):
            kind = ErrorKind.CONFLICT
        else:
            raise TypeError(f"No ErrorKind for {type(exc).__name__}")
        return cls(error=kind, message=exc.message, details=dict(exc.details))

    @property
    def is_ok(self) -> bool:
        return self.error is None

    def unwrap(self) -> T:
        """
        Return the value or raise the domain exception for the failure.

        Raises:
            ValidationError: error is VALIDATION
            AddressNotFoundError: error is NOT_FOUND
            PostalCodeConflictError: error is CONFLICT
        """
        if self.error is None:
            return self.value  # type: ignore[return-value]

        postal_code = str(self.details.get("postal_code", ""))
        if self.error is ErrorKind.NOT_FOUND:
            exc: CepApiException = AddressNotFoundError(postal_code)
        elif self.error is ErrorKind.CONFLICT:
            exc = PostalCodeConflictError(postal_code)
        else:
            exc = ValidationError(self.message, field=self.details.get("field"))
        exc.message = self.message or exc.message
        exc.args = (exc.message,)
        raise exc
