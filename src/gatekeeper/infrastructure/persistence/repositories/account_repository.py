"""Account repository for database operations."""

from sqlalchemy import and_, delete, select
from sqlalchemy.exc import IntegrityError
from sqlalchemy.ext.asyncio import AsyncSession
from sqlalchemy.orm import selectinload

from gatekeeper.core.exceptions import NotFoundError, ValidationError
from gatekeeper.core.logging import get_logger
from gatekeeper.infrastructure.persistence.models import (
    AccountModel,
    AccountRolesModel,
    RoleModel,
)

logger = get_logger(__name__)


class AccountRepository:
    """Repository for account and role-membership database operations."""

    def __init__(self, session: AsyncSession) -> None:
        """Initialize the repository.

        Args:
            session: SQLAlchemy async session.
        """
        self.session = session

    async def create(self, email: str, password_hash: str) -> AccountModel:
        """Create a new account.

        Args:
            email: Account email address. Stored lowercased.
            password_hash: Encoded password hash.

        Returns:
            Created account model.

        Raises:
            ValidationError: If the email is already registered.
        """
        account = AccountModel(email=email.lower(), password_hash=password_hash)
        self.session.add(account)
        try:
            await self.session.commit()
        except IntegrityError as e:
            await self.session.rollback()
            logger.info("Account creation rejected: email already registered")
            raise ValidationError(
                "Not able to validate the data sent in the request",
                "email must be unique",
            ) from e
        await self.session.refresh(account)
        return account

    async def delete(self, account_id: int) -> int:
        """Delete an account and its role memberships.

        Args:
            account_id: ID of the account to delete.

        Returns:
            Number of account rows deleted (0 if none existed).
        """
        await self.session.execute(
            delete(AccountRolesModel).where(AccountRolesModel.account_id == account_id)
        )
        result = await self.session.execute(
            delete(AccountModel).where(AccountModel.id == account_id)
        )
        await self.session.commit()
        return result.rowcount or 0

    async def get_by_id(self, account_id: int) -> AccountModel | None:
        """Get an account by ID.

        Args:
            account_id: Account ID.

        Returns:
            Account model if found, None otherwise.
        """
        result = await self.session.execute(
            select(AccountModel).where(AccountModel.id == account_id)
        )
        return result.scalar_one_or_none()

    async def get_by_email(self, email: str) -> AccountModel | None:
        """Get an account by email, case-insensitively.

        Args:
            email: Email address to look up.

        Returns:
            Account model if found, None otherwise.
        """
        result = await self.session.execute(
            select(AccountModel).where(AccountModel.email == email.lower())
        )
        return result.scalar_one_or_none()

    async def has_role(self, account_id: int, role_name: str) -> bool:
        """Check whether an account holds a role.

        Args:
            account_id: Account ID.
            role_name: Name of the role.

        Returns:
            True if the membership exists, False otherwise (including when
            the role itself does not exist).
        """
        result = await self.session.execute(
            select(AccountRolesModel.account_id)
            .join(RoleModel, RoleModel.id == AccountRolesModel.role_id)
            .where(
                and_(
                    AccountRolesModel.account_id == account_id,
                    RoleModel.name == role_name,
                )
            )
            .limit(1)
        )
        return result.scalar_one_or_none() is not None

    async def grant_role(self, account_id: int, role_name: str) -> bool:
        """Attach a role to an account.

        Args:
            account_id: Account ID.
            role_name: Name of an existing role.

        Returns:
            True if the membership was created, False if it already existed.

        Raises:
            NotFoundError: If the account or the role does not exist.
        """
        account_result = await self.session.execute(
            select(AccountModel)
            .options(selectinload(AccountModel.roles))
            .execution_options(populate_existing=True)
            .where(AccountModel.id == account_id)
        )
        account = account_result.scalar_one_or_none()
        if account is None:
            raise NotFoundError(explanation=f"No account with id {account_id}")

        role_result = await self.session.execute(
            select(RoleModel).where(RoleModel.name == role_name)
        )
        role = role_result.scalar_one_or_none()
        if role is None:
            raise NotFoundError(explanation=f"No role named '{role_name}'")

        if any(held.id == role.id for held in account.roles):
            return False

        account.roles.append(role)
        await self.session.commit()
        return True
