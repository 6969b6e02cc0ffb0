"""
Test suite for address input validation.

System role: Verification of postal code, state code and record field rules
"""

import pytest

from cep_api.core.exceptions import ValidationError
from cep_api.core.validation import (
    normalize_postal_code,
    require_text,
    strip_postal_code,
    validate_address_fields,
    validate_postal_code,
    validate_state_code,
)


class TestPostalCode:
    """Test suite for CEP normalization and validation."""

    @pytest.mark.parametrize(
        "raw, expected",
        [("01310-100", "01310100"), ("01.310-100", "01310100"), (" 01310100 ", "01310100")],
    )
    def test_strip_removes_formatting(self, raw: str, expected: str) -> None:
        assert strip_postal_code(raw) == expected

    def test_validate_accepts_eight_digits(self) -> None:
        assert validate_postal_code("01310100") == "01310100"

    @pytest.mark.parametrize("code", ["0131010", "013101000", "0131010a", "", "０１３１０１００"])
    def test_validate_rejects_malformed(self, code: str) -> None:
        with pytest.raises(ValidationError) as exc_info:
            validate_postal_code(code)
        assert exc_info.value.field == "postal_code"

    def test_validate_rejects_none(self) -> None:
        with pytest.raises(ValidationError):
            validate_postal_code(None)  # type: ignore[arg-type]

    def test_normalize_strips_then_validates(self) -> None:
        assert normalize_postal_code("01310-100") == "01310100"
        with pytest.raises(ValidationError):
            normalize_postal_code("0131-010")


class TestStateCode:
    """Test suite for UF validation."""

    def test_accepts_two_uppercase_letters(self) -> None:
        assert validate_state_code("SP") == "SP"

    @pytest.mark.parametrize("uf", ["sp", "S", "SPX", "S1", ""])
    def test_rejects_malformed(self, uf: str) -> None:
        with pytest.raises(ValidationError) as exc_info:
            validate_state_code(uf)
        assert exc_info.value.field == "state_code"


class TestAddressFields:
    """Test suite for validate_address_fields()."""

    def test_valid_payload_passes(self, sample_address_data: dict) -> None:
        validate_address_fields(sample_address_data)

    @pytest.mark.parametrize("field", ["street", "neighborhood", "city"])
    def test_blank_required_field_is_rejected(self, sample_address_data: dict, field: str) -> None:
        sample_address_data[field] = "   "
        with pytest.raises(ValidationError) as exc_info:
            validate_address_fields(sample_address_data)
        assert exc_info.value.field == field

    def test_street_longer_than_255_is_rejected(self, sample_address_data: dict) -> None:
        sample_address_data["street"] = "x" * 256
        with pytest.raises(ValidationError):
            validate_address_fields(sample_address_data)

    @pytest.mark.parametrize(
        "field, value",
        [("area_code", "1234"), ("region_code", "35A"), ("finance_region_code", "12345678901")],
    )
    def test_optional_code_fields_follow_patterns(
        self, sample_address_data: dict, field: str, value: str
    ) -> None:
        sample_address_data[field] = value
        with pytest.raises(ValidationError) as exc_info:
            validate_address_fields(sample_address_data)
        assert exc_info.value.field == field

    def test_empty_optional_codes_are_allowed(self, sample_address_data: dict) -> None:
        sample_address_data.update(region_code="", tax_region_code="", area_code="")
        validate_address_fields(sample_address_data)


def test_require_text_trims_and_rejects_blank() -> None:
    assert require_text("  Paulista ", "street") == "Paulista"
    with pytest.raises(ValidationError):
        require_text("   ", "street")
    with pytest.raises(ValidationError):
        require_text(None, "city")
