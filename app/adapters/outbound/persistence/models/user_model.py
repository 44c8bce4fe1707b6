# app/adapters/outbound/persistence/models/user_model.py

"""
Mapping of the external users table.

The ``users`` table is owned by the user management system. Only its
primary key is mapped here, as the target of ``user_access.user_id``.
"""

from sqlalchemy.orm import Mapped, mapped_column, relationship
from app.adapters.outbound.persistence.models.base_model import Base, IdType


class User(Base):
    """
    Read-only view of a row in the external ``users`` table.

    Attributes:
        id: User identifier
        access_grants: UserAccess rows granted to this user
    """
    __tablename__ = "users"
    __table_args__ = {"info": {"external": True}}

    id: Mapped[int] = mapped_column(IdType, primary_key=True)

    access_grants = relationship(
        "UserAccess",
        back_populates="user",
        passive_deletes=True,
        passive_updates=True,
    )

    def __repr__(self) -> str:
        return f"<User(id={self.id})>"
