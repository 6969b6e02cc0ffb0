"""ViaCEP origin client (https://viacep.com.br)."""

from cep_api.boundary.viacep.client import ViaCepClient
from cep_api.boundary.viacep.schemas import LookupStatus, OriginLookupResult, ViaCepResponse

__all__ = ["LookupStatus", "OriginLookupResult", "ViaCepClient", "ViaCepResponse"]
