"""SQLAlchemy models for Gatekeeper tables.

All models inherit from the Base class defined in database.py and are
created on application startup in development mode.
"""

from gatekeeper.infrastructure.persistence.models.account import AccountModel
from gatekeeper.infrastructure.persistence.models.account_roles import AccountRolesModel
from gatekeeper.infrastructure.persistence.models.role import RoleModel

__all__ = [
    "AccountModel",
    "AccountRolesModel",
    "RoleModel",
]
