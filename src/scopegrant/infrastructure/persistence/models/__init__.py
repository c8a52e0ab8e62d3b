"""SQLAlchemy models for the scopegrant IAM tables.

All models inherit from the Base class defined in database.py.
"""

from scopegrant.infrastructure.persistence.models.role import RoleModel
from scopegrant.infrastructure.persistence.models.role_grant import RoleGrantModel
from scopegrant.infrastructure.persistence.models.scope import ScopeModel

__all__ = [
    "RoleGrantModel",
    "RoleModel",
    "ScopeModel",
]
