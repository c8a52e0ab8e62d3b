"""Domain entities for scopegrant.

Entities are Python dataclasses that represent core IAM concepts.
"""

from scopegrant.domain.entities.resource import (
    Action,
    Clonable,
    OpType,
    Resource,
    ResourceType,
    VetForWriter,
    WriteOptions,
    crud_actions,
)
from scopegrant.domain.entities.role import Role
from scopegrant.domain.entities.role_grant import (
    RoleGrant,
    RoleGrantOptions,
    RoleGrantRecord,
    new_role_grant,
)
from scopegrant.domain.entities.scope import Scope, ScopeType

__all__ = [
    "Action",
    "Clonable",
    "OpType",
    "Resource",
    "ResourceType",
    "Role",
    "RoleGrant",
    "RoleGrantOptions",
    "RoleGrantRecord",
    "Scope",
    "ScopeType",
    "VetForWriter",
    "WriteOptions",
    "crud_actions",
    "new_role_grant",
]
