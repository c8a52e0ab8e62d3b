"""Role entity for authorization.

A role is a named bundle of grants defined within a scope.
"""

from dataclasses import dataclass


@dataclass
class Role:
    """Role entity.

    Attributes:
        public_id: Unique identifier of the role.
        scope_id: Public id of the scope the role is defined in.
        name: Optional role name.
        description: Optional description of the role's purpose.
    """

    public_id: str
    scope_id: str
    name: str | None = None
    description: str | None = None
