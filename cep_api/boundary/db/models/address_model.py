"""
Address ORM model.

One row per CEP. Column names follow the Brazilian field names used by
ViaCEP; Python attributes use the service's English names.

Dependencies: sqlalchemy, cep_api.boundary.db.base
System role: Address persistence
"""

from sqlalchemy import Index, String
from sqlalchemy.orm import Mapped, mapped_column

from cep_api.boundary.db.base import Base, IdMixin, TimestampMixin
from cep_api.core.address import AddressRecord


class AddressModel(Base, IdMixin, TimestampMixin):
    """
    Address ORM model.

    Attributes:
        id: Integer primary key (auto-generated)
        postal_code: CEP, 8 digits, unique (column ``cep``)
        street: Logradouro
        complement: Complemento (optional)
        neighborhood: Bairro
        city: Cidade
        state_code: UF
        region_code: IBGE code (optional)
        tax_region_code: GIA code (optional)
        area_code: DDD (optional)
        finance_region_code: SIAFI code (optional)
        created_at: Set once on insert
        updated_at: Set on each update
    """

    __tablename__ = "tb_enderecos"
    postal_code: Mapped[str] = mapped_column("cep", String(8), nullable=False)
    street: Mapped[str] = mapped_column("logradouro", String(255), nullable=False)
    complement: Mapped[str | None] = mapped_column("complemento", String(100), nullable=True)
    neighborhood: Mapped[str] = mapped_column("bairro", String(100), nullable=False)
    city: Mapped[str] = mapped_column("cidade", String(100), nullable=False)
    state_code: Mapped[str] = mapped_column("uf", String(2), nullable=False)
    region_code: Mapped[str | None] = mapped_column("ibge", String(20), nullable=True)
    tax_region_code: Mapped[str | None] = mapped_column("gia", String(20), nullable=True)
    area_code: Mapped[str | None] = mapped_column("ddd", String(3), nullable=True)
    finance_region_code: Mapped[str | None] = mapped_column("siafi", String(10), nullable=True)

    def to_record(self) -> AddressRecord:
        """Detach the row into a plain AddressRecord."""
        return AddressRecord(
            id=self.id,
            postal_code=self.postal_code,
            street=self.street,
            complement=self.complement,
            neighborhood=self.neighborhood,
            city=self.city,
            state_code=self.state_code,
            region_code=self.region_code,
            tax_region_code=self.tax_region_code,
            area_code=self.area_code,
            finance_region_code=self.finance_region_code,
            created_at=self.created_at,
            updated_at=self.updated_at,
        )

    def __repr__(self) -> str:
        return f"<AddressModel id={self.id} cep={self.postal_code}>"


Index("idx_cep", AddressModel.postal_code, unique=True)
Index("idx_cidade", AddressModel.city)
