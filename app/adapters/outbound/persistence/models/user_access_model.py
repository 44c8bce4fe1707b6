# app/adapters/outbound/persistence/models/user_access_model.py

from typing import Optional
from sqlalchemy import ForeignKey, String
from sqlalchemy.orm import relationship, Mapped, mapped_column
from app.adapters.outbound.persistence.models.base_model import Base, IdType

########################################################################
# Associação many-to-many entre usuários e tipos de acesso
########################################################################


class UserAccess(Base):
    """
    Grant of one access kind to one user.

    Attributes:
        permission_id: Identifier of the grant
        access_id: Granted access kind
        user_id: User receiving the grant
        permission_level: Optional opaque qualifier of the grant
    """
    __tablename__ = "user_access"

    permission_id: Mapped[int] = mapped_column(IdType, primary_key=True, autoincrement=True)
    access_id: Mapped[int] = mapped_column(
        IdType,
        ForeignKey("access.id", ondelete="CASCADE", onupdate="CASCADE"),
        nullable=False,
    )
    user_id: Mapped[int] = mapped_column(
        IdType,
        ForeignKey("users.id", ondelete="CASCADE", onupdate="CASCADE"),
        nullable=False,
    )
    permission_level: Mapped[Optional[str]] = mapped_column(String(255), nullable=True)

    access = relationship("Access", back_populates="grants")
    user = relationship("User", back_populates="access_grants")

    def __repr__(self) -> str:
        return (
            f"<UserAccess(permission_id={self.permission_id}, access_id={self.access_id}, "
            f"user_id={self.user_id})>"
        )
