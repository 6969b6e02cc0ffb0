"""
FastAPI application with assembled routers.

Initializes FastAPI app with all API routers and configures uvicorn server.

Dependencies: fastapi, uvicorn, cep_api.api.routers, cep_api.observability
System role: API entry point with router assembly and server launch
"""

import logging
from contextlib import asynccontextmanager

import uvicorn
from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from cep_api import __version__
from cep_api.api.deps.dependencies import get_service_cache
from cep_api.boundary.db import dispose_engine
from cep_api.boundary.db.create_tables import create_all_tables
from cep_api.configs import get_settings
from cep_api.observability.logger import configure_logging
from cep_api.observability.middleware import CorrelationMiddleware, RequestLoggingMiddleware
from .routers import addresses_router, health_router, home_router

logger = logging.getLogger(__name__)

DESCRIPTION = (
    "API REST para gerenciamento e consulta de CEPs e endereços brasileiros. "
    "Consultas por CEP usam a base local e, quando o CEP não está cadastrado, "
    "buscam o endereço no ViaCEP e o armazenam."
)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """
    Application lifespan context manager.

    Startup: logging, schema creation (sql backend), origin client warm-up.
    Shutdown: closes the ViaCEP connection pool and the database engine.
    """
    settings = get_settings()
    configure_logging(settings.log_level)
    logger.info(
        "Application startup",
        extra={"environment": settings.environment, "storage_backend": settings.storage.backend},
    )

    if settings.storage.backend.lower() == "sql" and settings.database.create_tables_on_startup:
        await create_all_tables()

    cache = get_service_cache()
    _ = cache.origin_client

    yield

    await cache.aclose()
    await dispose_engine()
    logger.info("Application shutdown complete")


def create_app() -> FastAPI:
    """
    Create and configure FastAPI application with routers.

    Returns:
        FastAPI: Configured application instance with all routers registered
    """
    settings = get_settings()

    app = FastAPI(
        title="API de Consulta de CEP",
        description=DESCRIPTION,
        version=__version__,
        contact={"name": "Equipe API CEP", "email": "contato@apicep.com.br"},
        license_info={"name": "MIT License", "url": "https://opensource.org/licenses/MIT"},
        debug=settings.debug,
        lifespan=lifespan,
    )
    app.state.api_prefix = settings.api_prefix

    app.add_middleware(
        CORSMiddleware,
        allow_origins=["*"],
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    # Added last so it runs first and request logs carry the correlation ID
    app.add_middleware(RequestLoggingMiddleware)
    app.add_middleware(CorrelationMiddleware)

    app.include_router(home_router)
    app.include_router(health_router, prefix=settings.api_prefix)
    app.include_router(addresses_router, prefix=settings.api_prefix)

    return app


app = create_app()


if __name__ == "__main__":
    uvicorn.run(
        "cep_api.api.main:app",
        host="0.0.0.0",
        port=8000,
    )
