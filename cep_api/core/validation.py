"""
Address input validation.

Business-rule checks applied by the service before anything reaches
storage, independent of the HTTP schema layer.

Dependencies: re, cep_api.core.exceptions
System role: Defensive validation of postal codes, state codes and records
"""

import re
from typing import Any, Mapping

from cep_api.core.exceptions import ValidationError

POSTAL_CODE_PATTERN = re.compile(r"[0-9]{8}")
STATE_CODE_PATTERN = re.compile(r"[A-Z]{2}")
FORMATTING_CHARS = re.compile(r"[\s.\-]")

# (field, max length) for required text fields
REQUIRED_TEXT_FIELDS: tuple[tuple[str, int], ...] = (
    ("street", 255),
    ("neighborhood", 100),
    ("city", 100),
)

# (field, pattern) for optional fields
OPTIONAL_FIELD_PATTERNS: tuple[tuple[str, re.Pattern[str]], ...] = (
    ("complement", re.compile(r".{0,100}", re.DOTALL)),
    ("region_code", re.compile(r"[0-9]{0,20}")),
    ("tax_region_code", re.compile(r"[0-9]{0,20}")),
    ("area_code", re.compile(r"[0-9]{0,3}")),
    ("finance_region_code", re.compile(r"[0-9]{0,10}")),
)


def strip_postal_code(raw: str) -> str:
    """Remove formatting punctuation from a CEP ("01310-100" -> "01310100")."""
    return FORMATTING_CHARS.sub("", raw or "")


def validate_postal_code(code: str, field: str = "postal_code") -> str:
    """
    Ensure a CEP is exactly 8 ASCII digits.

    Args:
        code: Candidate CEP, already stripped of punctuation
        field: Field name reported in the error

    Returns:
        str: The validated code

    Raises:
        ValidationError: If the code is not 8 digits
    """
    if not isinstance(code, str) or not POSTAL_CODE_PATTERN.fullmatch(code):
        raise ValidationError(
            "CEP deve conter exatamente 8 dígitos numéricos",
            field=field,
            details={"value": code},
        )
    return code


def normalize_postal_code(raw: str, field: str = "postal_code") -> str:
    """Strip formatting and validate in one step."""
    return validate_postal_code(strip_postal_code(raw), field=field)


def validate_state_code(state_code: str) -> str:
    """
    Ensure a UF is exactly two uppercase ASCII letters.

    Raises:
        ValidationError: If the state code is malformed
    """
    if not isinstance(state_code, str) or not STATE_CODE_PATTERN.fullmatch(state_code):
        raise ValidationError(
            "UF deve conter exatamente 2 letras maiúsculas",
            field="state_code",
            details={"value": state_code},
        )
    return state_code


def validate_address_fields(fields: Mapping[str, Any]) -> None:
    """
    Validate a full set of address fields before it is written.

    Args:
        fields: Mapping with postal_code, street, neighborhood, city,
            state_code and the optional code fields

    Raises:
        ValidationError: On the first field that breaks a rule
    """
    validate_postal_code(fields.get("postal_code"))
    validate_state_code(fields.get("state_code"))

    for name, max_length in REQUIRED_TEXT_FIELDS:
        value = fields.get(name)
        if not isinstance(value, str) or not value.strip():
            raise ValidationError(f"{name} é obrigatório", field=name)
        if len(value) > max_length:
            raise ValidationError(
                f"{name} deve ter no máximo {max_length} caracteres", field=name
            )

    for name, pattern in OPTIONAL_FIELD_PATTERNS:
        value = fields.get(name)
        if value is None:
            continue
        if not isinstance(value, str) or not pattern.fullmatch(value):
            raise ValidationError(f"{name} inválido", field=name, details={"value": value})


def require_text(value: str | None, field: str) -> str:
    """Reject empty or whitespace-only search terms."""
    if value is None or not value.strip():
        raise ValidationError(f"{field} não pode ser vazio", field=field)
    return value.strip()
