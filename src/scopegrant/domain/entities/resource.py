"""Resource and action registry shared by IAM entities.

Defines the resource taxonomy, the action set entities report, the write
operation kinds and the capability protocols entities implement.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import TYPE_CHECKING, Any, Protocol, runtime_checkable

if TYPE_CHECKING:
    from sqlalchemy.ext.asyncio import AsyncSession


class ResourceType(str, Enum):
    """Kinds of resource in the IAM taxonomy."""

    UNKNOWN = "unknown"
    SCOPE = "scope"
    ROLE = "role"
    ROLE_GRANT = "role-grant"


class Action(str, Enum):
    """Actions that may be performed on a resource."""

    CREATE = "create"
    READ = "read"
    UPDATE = "update"
    DELETE = "delete"


def crud_actions() -> dict[str, Action]:
    """Return the standard create/read/update/delete action set.

    A new dict is returned on every call so callers may modify it freely.
    """
    return {action.value: action for action in Action}


class OpType(str, Enum):
    """Kind of write a pre-write check is guarding."""

    CREATE = "create"
    UPDATE = "update"


@dataclass
class WriteOptions:
    """Options passed through to pre-write checks.

    Attributes:
        field_mask_paths: Fields an update intends to change.
    """

    field_mask_paths: list[str] = field(default_factory=list)


@runtime_checkable
class Resource(Protocol):
    """An entity that lives within a scope and reports its type and actions."""

    def resource_type(self) -> ResourceType: ...

    def actions(self) -> dict[str, Action]: ...

    async def get_scope(self, reader: AsyncSession) -> Any: ...


@runtime_checkable
class Clonable(Protocol):
    """An entity that can produce an independent copy of itself."""

    def clone(self) -> Any: ...


@runtime_checkable
class VetForWriter(Protocol):
    """An entity that validates its own invariants before being written."""

    async def vet_for_write(
        self,
        reader: AsyncSession,
        op_type: OpType,
        options: WriteOptions | None = None,
    ) -> None: ...
