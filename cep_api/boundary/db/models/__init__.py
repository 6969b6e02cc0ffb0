"""
Database models package.

Exports:
  - AddressModel: CEP address ORM model (table tb_enderecos)

Dependencies: sqlalchemy, cep_api.boundary.db.base
System role: Database model definitions for domain entities
"""

from cep_api.boundary.db.models.address_model import AddressModel

__all__ = ["AddressModel"]
