"""SQLAlchemy model for the account_roles junction table.

Implements the many-to-many relationship between accounts and roles.
"""

from sqlalchemy import ForeignKey, Integer
from sqlalchemy.orm import Mapped, mapped_column

from gatekeeper.infrastructure.persistence.database import Base


class AccountRolesModel(Base):
    """Junction table for many-to-many relationship between accounts and roles.

    Attributes:
        account_id: Foreign key to accounts table.
        role_id: Foreign key to roles table.
    """

    __tablename__ = "account_roles"

    account_id: Mapped[int] = mapped_column(
        Integer,
        ForeignKey("accounts.id", ondelete="CASCADE"),
        primary_key=True,
        comment="Foreign key to accounts table",
    )
    role_id: Mapped[int] = mapped_column(
        Integer,
        ForeignKey("roles.id", ondelete="CASCADE"),
        primary_key=True,
        comment="Foreign key to roles table",
    )

    def __repr__(self) -> str:
        return f"<AccountRoles(account_id={self.account_id}, role_id={self.role_id})>"
