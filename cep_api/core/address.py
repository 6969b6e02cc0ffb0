"""
Address record domain type.

Storage-agnostic representation of one persisted CEP address. Storage
adapters translate between this and their native rows.

Dependencies: dataclasses
System role: Entity passed across the storage port
"""

from dataclasses import dataclass, replace
from datetime import datetime
from typing import Any

# Fields a client may write; id and timestamps are owned by storage.
ADDRESS_FIELDS: tuple[str, ...] = (
    "postal_code",
    "street",
    "complement",
    "neighborhood",
    "city",
    "state_code",
    "region_code",
    "tax_region_code",
    "area_code",
    "finance_region_code",
)


@dataclass
class AddressRecord:
    """
    One address keyed by CEP.

    Attributes:
        postal_code: 8-digit CEP, unique across records
        street: Logradouro
        neighborhood: Bairro
        city: Cidade (localidade)
        state_code: UF, two uppercase letters
        complement: Complemento
        region_code: IBGE municipality code
        tax_region_code: GIA code
        area_code: DDD telephone area code
        finance_region_code: SIAFI code
        id: Surrogate key, None until first save
        created_at: Set once on insert
        updated_at: Set on every later save, None until then
    """

    postal_code: str
    street: str
    neighborhood: str
    city: str
    state_code: str
    complement: str | None = None
    region_code: str | None = None
    tax_region_code: str | None = None
    area_code: str | None = None
    finance_region_code: str | None = None
    id: int | None = None
    created_at: datetime | None = None
    updated_at: datetime | None = None

    def writable_fields(self) -> dict[str, Any]:
        return {name: getattr(self, name) for name in ADDRESS_FIELDS}

    def apply(self, fields: dict[str, Any]) -> "AddressRecord":
        """Return a copy with every writable field replaced (full replacement)."""
        return replace(self, **{name: fields.get(name) for name in ADDRESS_FIELDS})
