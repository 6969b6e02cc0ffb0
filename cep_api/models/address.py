"""
Address request/response schemas.

Request constraints mirror the domain validation rules so malformed
payloads are rejected (422) before they reach the service.

Dependencies: pydantic
System role: Address API contracts
"""

from datetime import datetime

from pydantic import BaseModel, ConfigDict, Field


class AddressRequest(BaseModel):
    """Request schema for creating or fully replacing an address."""

    postal_code: str = Field(
        ...,
        pattern=r"^\d{8}$",
        description="CEP com exatamente 8 dígitos numéricos",
        examples=["01310100"],
    )
    street: str = Field(..., min_length=1, max_length=255, description="Logradouro")
    complement: str | None = Field(None, max_length=100, description="Complemento")
    neighborhood: str = Field(..., min_length=1, max_length=100, description="Bairro")
    city: str = Field(..., min_length=1, max_length=100, description="Cidade")
    state_code: str = Field(
        ..., pattern=r"^[A-Z]{2}$", description="UF com 2 letras maiúsculas", examples=["SP"]
    )
    region_code: str | None = Field(None, pattern=r"^\d{0,20}$", description="Código IBGE")
    tax_region_code: str | None = Field(None, pattern=r"^\d{0,20}$", description="Código GIA")
    area_code: str | None = Field(None, pattern=r"^\d{0,3}$", description="DDD")
    finance_region_code: str | None = Field(
        None, pattern=r"^\d{0,10}$", description="Código SIAFI"
    )


class AddressResponse(BaseModel):
    """Response schema for address operations."""

    model_config = ConfigDict(from_attributes=True)

    id: int
    postal_code: str
    street: str
    complement: str | None = None
    neighborhood: str
    city: str
    state_code: str
    region_code: str | None = None
    tax_region_code: str | None = None
    area_code: str | None = None
    finance_region_code: str | None = None
    created_at: datetime
    updated_at: datetime | None = None


class CityCountResponse(BaseModel):
    """Number of stored addresses in a city."""

    city: str
    total: int
