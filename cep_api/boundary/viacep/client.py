"""
ViaCEP HTTP client.

Wraps one long-lived httpx.AsyncClient (connection pool, base URL,
timeout). lookup() makes exactly one request and never raises for
transport or protocol problems: they come back as an ERROR result.

Dependencies: httpx, pydantic, cep_api.boundary.viacep.schemas
System role: Origin provider for the address read-through
"""

import logging
from typing import Protocol

import httpx

from cep_api.boundary.viacep.schemas import OriginLookupResult, ViaCepResponse
from cep_api.observability.log_utils import log_with_context

logger = logging.getLogger(__name__)


class OriginClient(Protocol):
    """Anything that can resolve a CEP at an external provider."""

    async def lookup(self, code: str) -> OriginLookupResult: ...


class ViaCepClient:
    """
    Client for https://viacep.com.br/ws/{cep}/json/.

    Usage:
        async with ViaCepClient("https://viacep.com.br/ws", timeout_seconds=5) as client:
            result = await client.lookup("01310100")
    """

    def __init__(
        self,
        base_url: str,
        timeout_seconds: float = 10.0,
        transport: httpx.AsyncBaseTransport | None = None,
    ) -> None:
        """
        Args:
            base_url: Provider base URL, without trailing slash
            timeout_seconds: Total per-request timeout
            transport: Optional httpx transport (tests pass httpx.MockTransport)
        """
        self.base_url = base_url.rstrip("/")
        self.timeout_seconds = timeout_seconds
        self._client = httpx.AsyncClient(
            base_url=self.base_url,
            timeout=httpx.Timeout(timeout_seconds),
            headers={"Accept": "application/json"},
            follow_redirects=True,
            transport=transport,
        )

    async def lookup(self, code: str) -> OriginLookupResult:
        """
        Resolve a CEP at ViaCEP.

        Args:
            code: 8-digit CEP

        Returns:
            OriginLookupResult: FOUND with payload, NOT_FOUND when ViaCEP
            answers erro/400, ERROR for anything else
        """
        logger.info("Consultando ViaCEP", extra={"postal_code": code})

        try:
            response = await self._client.get(f"/{code}/json/")
            if response.status_code == httpx.codes.BAD_REQUEST:
                # ViaCEP answers 400 for CEPs it considers malformed
                return OriginLookupResult.not_found(code, reason="HTTP 400")
            response.raise_for_status()
            payload = ViaCepResponse.model_validate(response.json())
        except (httpx.HTTPError, ValueError) as e:
            # ValueError covers JSON decode errors and pydantic validation errors
            log_with_context(
                logger,
                logging.ERROR,
                "Erro ao consultar ViaCEP",
                postal_code=code,
                error_type=type(e).__name__,
                error_msg=str(e),
            )
            return OriginLookupResult.error(code, reason=f"{type(e).__name__}: {e}")

        if payload.erro:
            logger.info("ViaCEP reported CEP as nonexistent", extra={"postal_code": code})
            return OriginLookupResult.not_found(code, reason="erro")

        if not payload.cep:
            logger.error("ViaCEP payload without cep field", extra={"postal_code": code})
            return OriginLookupResult.error(code, reason="missing cep")

        return OriginLookupResult.found(code, payload)

    async def aclose(self) -> None:
        """Close the underlying connection pool."""
        await self._client.aclose()

    async def __aenter__(self) -> "ViaCepClient":
        return self

    async def __aexit__(self, *exc_info) -> None:
        await self.aclose()
