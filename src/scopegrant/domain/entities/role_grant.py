"""RoleGrant entity.

A role grant attaches an opaque grant string to a role within an
organization or project scope. The grant string itself is never parsed here;
this module only guarantees that the record is well formed and attached to a
valid scope and role before it is written.
"""

from __future__ import annotations

from dataclasses import dataclass, field, replace

from sqlalchemy.ext.asyncio import AsyncSession

from scopegrant.core.config import get_settings
from scopegrant.domain.entities.resource import (
    Action,
    OpType,
    ResourceType,
    WriteOptions,
    crud_actions,
)
from scopegrant.domain.entities.role import Role
from scopegrant.domain.entities.scope import Scope
from scopegrant.domain.exceptions import IdentityGenerationError, ValidationError
from scopegrant.domain.services import public_id_generator, scope_resolver

DEFAULT_TABLE_NAME = "iam_role_grant"

# Fields that may never be changed by an update
IMMUTABLE_FIELDS = frozenset({"public_id"})


@dataclass
class RoleGrantRecord:
    """Persisted fields of a role grant.

    Attributes:
        public_id: Unique identifier, assigned at creation.
        scope_id: Public id of the owning organization or project scope.
        role_id: Public id of the role the grant belongs to.
        grant: Opaque authorization rule string.
        name: Optional label, set only at construction.
    """

    public_id: str = ""
    scope_id: str = ""
    role_id: str = ""
    grant: str = ""
    name: str | None = None


@dataclass
class RoleGrantOptions:
    """Options accepted by new_role_grant.

    Attributes:
        name: Optional label; ignored when empty.
    """

    name: str | None = None


@dataclass
class RoleGrant:
    """Role grant entity.

    Wraps a RoleGrantRecord and adds construction, validation and copy
    behaviour. Satisfies the Resource, Clonable and VetForWriter protocols.
    """

    record: RoleGrantRecord = field(default_factory=RoleGrantRecord)
    _table_name: str = field(default="", repr=False, compare=False)

    @classmethod
    def alloc(cls) -> RoleGrant:
        """Allocate an empty role grant, e.g. to load a stored row into."""
        return cls(record=RoleGrantRecord())

    @property
    def public_id(self) -> str:
        return self.record.public_id

    @property
    def scope_id(self) -> str:
        return self.record.scope_id

    @scope_id.setter
    def scope_id(self, value: str) -> None:
        self.record.scope_id = value

    @property
    def role_id(self) -> str:
        return self.record.role_id

    @role_id.setter
    def role_id(self, value: str) -> None:
        self.record.role_id = value

    @property
    def grant(self) -> str:
        return self.record.grant

    @grant.setter
    def grant(self, value: str) -> None:
        self.record.grant = value

    @property
    def name(self) -> str | None:
        return self.record.name

    def clone(self) -> RoleGrant:
        """Create an independent copy of the grant's persisted fields.

        The table name override is not persisted state and is not copied.
        """
        return RoleGrant(record=replace(self.record))

    async def vet_for_write(
        self,
        reader: AsyncSession,
        op_type: OpType,
        options: WriteOptions | None = None,
    ) -> None:
        """Validate the grant immediately before it is written.

        Must run inside the same transaction as the write. The owning scope
        is looked up again on every call; scope errors from the lookup are
        raised unchanged.

        Raises:
            ValidationError: If an invariant does not hold.
        """
        if not self.public_id:
            raise ValidationError("public id is empty string for grant write")
        if not self.scope_id:
            raise ValidationError("scope id not set for grant write")
        if op_type == OpType.UPDATE and options is not None:
            immutable = IMMUTABLE_FIELDS.intersection(options.field_mask_paths)
            if immutable:
                raise ValidationError(
                    f"cannot update immutable grant fields: {', '.join(sorted(immutable))}"
                )
        await self._scope_is_valid(reader)

    async def _scope_is_valid(self, reader: AsyncSession) -> None:
        scope = await scope_resolver.lookup_scope(reader, self)
        if not scope.is_grantable:
            raise ValidationError("scope is not an organization or project for the grant")

    async def get_scope(self, reader: AsyncSession) -> Scope:
        """Return the grant's current owning scope."""
        return await scope_resolver.lookup_scope(reader, self)

    def resource_type(self) -> ResourceType:
        return ResourceType.ROLE_GRANT

    def actions(self) -> dict[str, Action]:
        return crud_actions()

    def table_name(self) -> str:
        """Return the table this grant is stored in."""
        if self._table_name:
            return self._table_name
        return DEFAULT_TABLE_NAME

    def set_table_name(self, name: str) -> None:
        """Override the table this grant is stored in; empty names are ignored."""
        if name:
            self._table_name = name


def new_role_grant(
    scope: Scope | None,
    role: Role | None,
    grant: str,
    options: RoleGrantOptions | None = None,
) -> RoleGrant:
    """Create a new role grant within an organization or project scope.

    Args:
        scope: Scope the grant is created in.
        role: Role the grant belongs to.
        grant: Grant string, stored verbatim.
        options: Optional construction options.

    Returns:
        The new, not yet persisted, role grant.

    Raises:
        ValidationError: If the scope or role is missing or invalid.
        IdentityGenerationError: If a public id could not be generated.
    """
    opts = options or RoleGrantOptions()
    if scope is None:
        raise ValidationError("role grant scope is nil")
    if not scope.is_grantable:
        raise ValidationError("grant scope must be organization or project")
    if role is None:
        raise ValidationError("role is nil")
    if not role.public_id:
        raise ValidationError("role id unset")

    length = get_settings().public_id_length
    try:
        public_id = public_id_generator.generate_public_id(
            public_id_generator.ROLE_GRANT_PREFIX, length
        )
    except Exception as e:
        raise IdentityGenerationError(
            "error generating public id for new role grant"
        ) from e

    rg = RoleGrant(
        record=RoleGrantRecord(
            public_id=public_id,
            scope_id=scope.get_public_id(),
            role_id=role.public_id,
            grant=grant,
            name=opts.name or None,
        )
    )
    return rg
