# app/adapters/outbound/persistence/models/access_model.py

"""
Modelo de tipo de acesso.

Lookup table of named permissions/actions ("SearchUser", "CreateUser", ...).
The default rows are inserted by the migration that creates the table.
"""

from sqlalchemy import String
from sqlalchemy.orm import relationship, Mapped, mapped_column
from app.adapters.outbound.persistence.models.base_model import Base, IdType


class Access(Base):
    """
    Named permission that can be granted to users.

    Attributes:
        id: Engine-assigned identifier
        access_name: Name of the permission (ex: "GetUser")
        grants: UserAccess rows referencing this access kind
    """
    __tablename__ = "access"

    id: Mapped[int] = mapped_column(IdType, primary_key=True, autoincrement=True)
    access_name: Mapped[str] = mapped_column(String(255), nullable=False)

    # Deletes and key changes are cascaded by the database
    grants = relationship(
        "UserAccess",
        back_populates="access",
        passive_deletes=True,
        passive_updates=True,
    )

    def __repr__(self) -> str:
        """Representação em string do objeto Access."""
        return f"<Access(id={self.id}, access_name={self.access_name})>"
