"""
Test suite for ServiceResult and ErrorKind.

System role: Verification of the explicit service outcome contract
"""

import pytest

from cep_api.core.exceptions import (
    AddressNotFoundError,
    PostalCodeConflictError,
    ValidationError,
)
from cep_api.core.result import ErrorKind, ServiceResult


def test_ok_result_unwraps_to_value() -> None:
    result = ServiceResult.ok(42)

    assert result.is_ok
    assert result.error is None
    assert result.unwrap() == 42


def test_not_found_unwraps_to_address_not_found() -> None:
    result = ServiceResult.fail(ErrorKind.NOT_FOUND, "Endereço não encontrado", postal_code="00000000")

    assert not result.is_ok
    with pytest.raises(AddressNotFoundError) as exc_info:
        result.unwrap()
    assert exc_info.value.postal_code == "00000000"
    assert exc_info.value.message == "Endereço não encontrado"


def test_conflict_unwraps_to_conflict_error() -> None:
    result = ServiceResult.fail(ErrorKind.CONFLICT, "CEP já cadastrado", postal_code="01310100")

    with pytest.raises(PostalCodeConflictError):
        result.unwrap()


def test_validation_unwraps_with_field() -> None:
    result = ServiceResult.fail(ErrorKind.VALIDATION, "size deve ser maior que 0", field="size")

    with pytest.raises(ValidationError) as exc_info:
        result.unwrap()
    assert exc_info.value.field == "size"


@pytest.mark.parametrize(
    "exc, kind",
    [
        (ValidationError("bad", field="page"), ErrorKind.VALIDATION),
        (AddressNotFoundError("12345678"), ErrorKind.NOT_FOUND),
        (PostalCodeConflictError("12345678"), ErrorKind.CONFLICT),
    ],
)
def test_from_exception_maps_kind(exc, kind: ErrorKind) -> None:
    result = ServiceResult.from_exception(exc)

    assert result.error is kind
    assert result.message == exc.message
