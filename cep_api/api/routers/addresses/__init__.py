"""
Addresses router package.

Exports the router for CEP address endpoints.
"""

from .addresses_router import router

__all__ = ["router"]
