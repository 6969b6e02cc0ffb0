"""
Exception hierarchy for the CEP address service.

Provides layered exception structure for domain-specific errors.
All exceptions include context for observability and debugging.

Dependencies: None (pure domain layer)
System role: Centralized exception handling across the application
"""

from typing import Any


class CepApiException(Exception):
    """Base exception for all CEP address service errors."""

    def __init__(self, message: str, details: dict[str, Any] | None = None) -> None:
        """
        Initialize base exception with message and optional context.

        Args:
            message: Human-readable error message
            details: Optional dictionary of additional context for debugging
        """
        self.message = message
        self.details = details or {}
        super().__init__(message)

    def __str__(self) -> str:
        """Return string representation including details."""
        if self.details:
            return f"{self.message} | Details: {self.details}"
        return self.message


class ValidationError(CepApiException):
    """Raised when input validation fails."""

    def __init__(
        self,
        message: str,
        field: str | None = None,
        details: dict[str, Any] | None = None,
    ) -> None:
        """
        Initialize validation error.

        Args:
            message: Error message
            field: Field name that failed validation
            details: Additional context
        """
        details = details or {}
        if field:
            details["field"] = field
        self.field = field
        super().__init__(message, details)


class AddressNotFoundError(CepApiException):
    """Raised when no address exists (locally or at the origin) for a CEP."""

    def __init__(self, postal_code: str, details: dict[str, Any] | None = None) -> None:
        details = details or {}
        details["postal_code"] = postal_code
        self.postal_code = postal_code
        super().__init__(f"Endereço não encontrado para o CEP: {postal_code}", details)


class PostalCodeConflictError(CepApiException):
    """Raised when a CEP is already registered to another address."""

    def __init__(self, postal_code: str, details: dict[str, Any] | None = None) -> None:
        details = details or {}
        details["postal_code"] = postal_code
        self.postal_code = postal_code
        super().__init__(f"CEP já cadastrado no sistema: {postal_code}", details)


class DuplicatePostalCodeError(CepApiException):
    """
    Raised by storage adapters when a write hits the CEP uniqueness constraint.

    Distinct from PostalCodeConflictError: this is the storage-level signal
    (e.g. two concurrent read-through writes), which the service layer
    decides how to answer.
    """

    def __init__(self, postal_code: str, details: dict[str, Any] | None = None) -> None:
        details = details or {}
        details["postal_code"] = postal_code
        self.postal_code = postal_code
        super().__init__(f"Unique constraint violated for CEP {postal_code}", details)

