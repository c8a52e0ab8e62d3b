"""Scope entity.

Scopes are the organizational boundaries that own roles and grants. They
form a hierarchy: the global scope contains organizations, and each
organization contains projects.
"""

from dataclasses import dataclass
from enum import Enum


class ScopeType(str, Enum):
    """Kinds of scope known to the IAM layer."""

    GLOBAL = "global"
    ORGANIZATION = "organization"
    PROJECT = "project"


# Scope kinds a role grant may be attached to
GRANTABLE_SCOPE_TYPES = frozenset({ScopeType.ORGANIZATION.value, ScopeType.PROJECT.value})


@dataclass
class Scope:
    """Scope entity.

    The type is kept as a plain string so that a scope of an unknown kind
    can still be represented and then rejected by validation.

    Attributes:
        public_id: Unique identifier of the scope.
        type: Scope kind (see ScopeType), or None if unset.
        name: Optional display name.
        description: Optional description.
        parent_id: Public id of the enclosing scope, None for the global scope.
    """

    public_id: str
    type: str | None
    name: str | None = None
    description: str | None = None
    parent_id: str | None = None

    def get_public_id(self) -> str:
        """Return the scope's public id."""
        return self.public_id

    @property
    def is_grantable(self) -> bool:
        """Whether role grants may be attached to this scope."""
        return _type_value(self.type) in GRANTABLE_SCOPE_TYPES


def _type_value(scope_type: str | ScopeType | None) -> str | None:
    if isinstance(scope_type, ScopeType):
        return scope_type.value
    return scope_type
