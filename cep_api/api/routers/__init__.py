"""API routers."""

from .addresses import router as addresses_router
from .health import router as health_router
from .home import router as home_router

__all__ = [
    "addresses_router",
    "health_router",
    "home_router",
]
