"""
Database boundary layer: ORM models, CRUD operations, connection management
and the relational address store.

Exports:
  - Base, IdMixin, TimestampMixin: Model building blocks
  - get_async_engine(), get_async_session_factory(): Connection management
  - AddressModel: CEP address entity
  - AddressCRUD, address_crud: Address queries
  - SqlAddressStore: AddressStoragePort over SQLAlchemy

Dependencies: sqlalchemy, cep_api.configs
System role: Database adapter providing persistent storage for addresses
"""

from cep_api.boundary.db.base import Base, IdMixin, TimestampMixin
from cep_api.boundary.db.connection import (
    dispose_engine,
    get_async_engine,
    get_async_session_factory,
)
from cep_api.boundary.db.models.address_model import AddressModel
from cep_api.boundary.db.CRUD import AddressCRUD, BaseCRUD, address_crud
from cep_api.boundary.db.address_store import SqlAddressStore

__all__ = [
    # Base classes
    "Base",
    "IdMixin",
    "TimestampMixin",
    # Connection
    "dispose_engine",
    "get_async_engine",
    "get_async_session_factory",
    # Models
    "AddressModel",
    # CRUD
    "BaseCRUD",
    "AddressCRUD",
    "address_crud",
    # Storage adapter
    "SqlAddressStore",
]
