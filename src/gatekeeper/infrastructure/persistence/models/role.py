"""SQLAlchemy model for the roles table."""

from sqlalchemy import Integer, String
from sqlalchemy.orm import Mapped, mapped_column

from gatekeeper.infrastructure.persistence.database import Base


class RoleModel(Base):
    """SQLAlchemy model for the roles table.

    Attributes:
        id: Auto-incrementing primary key.
        name: Unique role name.
    """

    __tablename__ = "roles"

    id: Mapped[int] = mapped_column(
        Integer,
        primary_key=True,
        autoincrement=True,
    )
    name: Mapped[str] = mapped_column(
        String(50),
        nullable=False,
        unique=True,
        index=True,
        comment="Role name (e.g., 'ADMIN')",
    )

    def __repr__(self) -> str:
        return f"<Role(id={self.id}, name={self.name})>"
