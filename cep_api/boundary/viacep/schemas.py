"""
ViaCEP payload and lookup result schemas.

Dependencies: pydantic
System role: Origin response contract
"""

from dataclasses import dataclass
from enum import Enum

from pydantic import BaseModel, ConfigDict, field_validator


class ViaCepResponse(BaseModel):
    """
    JSON body returned by GET /ws/{cep}/json/.

    Unknown keys (estado, regiao, unidade, ...) are ignored. A miss is
    reported as {"erro": true}; some deployments send the string "true".
    """

    model_config = ConfigDict(extra="ignore")

    cep: str | None = None
    logradouro: str | None = None
    complemento: str | None = None
    bairro: str | None = None
    localidade: str | None = None
    uf: str | None = None
    ibge: str | None = None
    gia: str | None = None
    ddd: str | None = None
    siafi: str | None = None
    erro: bool = False

    @field_validator("erro", mode="before")
    @classmethod
    def _coerce_erro(cls, value):
        if isinstance(value, str):
            return value.strip().lower() == "true"
        return bool(value)


class LookupStatus(str, Enum):
    FOUND = "found"
    NOT_FOUND = "not_found"
    ERROR = "error"


@dataclass(frozen=True)
class OriginLookupResult:
    """
    Outcome of one origin lookup.

    NOT_FOUND means the provider answered that the CEP does not exist;
    ERROR covers timeouts, connection failures, 5xx and malformed bodies.
    Callers that only care whether the CEP was resolved use ``resolved``.
    """

    postal_code: str
    status: LookupStatus
    payload: ViaCepResponse | None = None
    reason: str | None = None

    @property
    def resolved(self) -> bool:
        return self.status is LookupStatus.FOUND and self.payload is not None

    @classmethod
    def found(cls, postal_code: str, payload: ViaCepResponse) -> "OriginLookupResult":
        return cls(postal_code=postal_code, status=LookupStatus.FOUND, payload=payload)

    @classmethod
    def not_found(cls, postal_code: str, reason: str | None = None) -> "OriginLookupResult":
        return cls(postal_code=postal_code, status=LookupStatus.NOT_FOUND, reason=reason)

    @classmethod
    def error(cls, postal_code: str, reason: str) -> "OriginLookupResult":
        return cls(postal_code=postal_code, status=LookupStatus.ERROR, reason=reason)
