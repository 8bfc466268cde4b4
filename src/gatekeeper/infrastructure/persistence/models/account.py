"""SQLAlchemy model for the accounts table.

Accounts are uniquely identified by their id and by their lowercased email.
"""

from datetime import datetime

from sqlalchemy import DateTime, Integer, String, func
from sqlalchemy.orm import Mapped, mapped_column, relationship

from gatekeeper.infrastructure.persistence.database import Base


class AccountModel(Base):
    """SQLAlchemy model for the accounts table.

    Attributes:
        id: Auto-incrementing primary key.
        email: Account email address (unique, lowercased).
        password_hash: Encoded password hash.
        created_at: Timestamp when the account was created.
        updated_at: Timestamp when the account was last updated.
    """

    __tablename__ = "accounts"

    id: Mapped[int] = mapped_column(
        Integer,
        primary_key=True,
        autoincrement=True,
    )
    email: Mapped[str] = mapped_column(
        String(255),
        nullable=False,
        unique=True,
        index=True,
        comment="Account email address (lowercased)",
    )
    password_hash: Mapped[str] = mapped_column(
        String(255),
        nullable=False,
        comment="Encoded password hash (argon2)",
    )
    created_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True),
        nullable=False,
        server_default=func.now(),
    )
    updated_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True),
        nullable=False,
        server_default=func.now(),
        onupdate=func.now(),
    )

    # Relationships
    roles: Mapped[list["RoleModel"]] = relationship(  # noqa: F821
        "RoleModel",
        secondary="account_roles",
    )

    def __repr__(self) -> str:
        return f"<Account(id={self.id}, email={self.email})>"
