"""
CRUD operations for database models.

Exports base CRUD class and model-specific CRUD implementations
with pre-instantiated singletons for direct use.

Usage:
    from cep_api.boundary.db.CRUD import address_crud

    address = await address_crud.get_by_cep(db, "01310100")
"""

from cep_api.boundary.db.CRUD.base_crud import BaseCRUD
from cep_api.boundary.db.CRUD.address_crud import AddressCRUD, address_crud

__all__ = [
    "BaseCRUD",
    "AddressCRUD",
    "address_crud",
]
