"""
Address error handling utilities.

Provides a decorator that turns domain exceptions (raised at the boundary
by ServiceResult.unwrap) into HTTP responses with consistent logging.
"""

import functools
import logging
from typing import Any, Callable, TypeVar

from fastapi import HTTPException, status
from pydantic import ValidationError as PydanticValidationError

from cep_api.core.exceptions import (
    AddressNotFoundError,
    PostalCodeConflictError,
    ValidationError,
)
from cep_api.observability.log_utils import log_exception_with_context

logger = logging.getLogger(__name__)

# Type for the decorated function
F = TypeVar("F", bound=Callable[..., Any])


def handle_address_errors(func: F) -> F:
    """
    Decorator to map address errors onto HTTPExceptions.

    - AddressNotFoundError -> 404
    - PostalCodeConflictError -> 409
    - ValidationError (domain) -> 400
    - pydantic ValidationError -> 422
    - anything else -> 500
    """
    @functools.wraps(func)
    async def wrapper(*args: Any, **kwargs: Any) -> Any:
        try:
            return await func(*args, **kwargs)

        except HTTPException:
            raise

        except AddressNotFoundError as e:
            logger.warning(
                "Address not found",
                extra={"postal_code": e.postal_code, "error": e.message},
            )
            raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=e.message)

        except PostalCodeConflictError as e:
            logger.warning(
                "Postal code conflict",
                extra={"postal_code": e.postal_code, "error": e.message},
            )
            raise HTTPException(status_code=status.HTTP_409_CONFLICT, detail=e.message)

        except ValidationError as e:
            logger.warning(
                "Invalid address request",
                extra={"field": e.field, "error": e.message},
            )
            raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=e.message)

        except PydanticValidationError as e:
            logger.warning("Pydantic validation error", extra={"error": str(e)})
            raise HTTPException(
                status_code=status.HTTP_422_UNPROCESSABLE_ENTITY,
                detail=e.errors(include_url=False),
            )

        except Exception as e:
            log_exception_with_context(
                logger, "Unexpected failure in address operation", e, operation=func.__name__
            )
            raise HTTPException(
                status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
                detail="An internal error occurred during address operation",
            )

    return wrapper  # type: ignore
