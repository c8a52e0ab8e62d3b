"""Scope resolution service.

Resolves the owning scope of any resource that carries a ``scope_id``.
Lookups run on the caller's session so they observe the same transaction
as the write they are guarding.
"""

from typing import Protocol

from sqlalchemy.ext.asyncio import AsyncSession

from scopegrant.core.logging import get_logger
from scopegrant.domain.entities.scope import Scope
from scopegrant.domain.exceptions import ScopeNotFoundError, ValidationError
from scopegrant.infrastructure.persistence.repositories.scope_repository import (
    ScopeRepository,
)

logger = get_logger(__name__)


class ScopedResource(Protocol):
    """Anything that names its owning scope."""

    scope_id: str


async def lookup_scope(reader: AsyncSession, resource: ScopedResource) -> Scope:
    """Look up the scope that owns a resource.

    Errors raised by the session (including cancellation) propagate unchanged.

    Args:
        reader: Session used for the lookup.
        resource: Resource whose scope should be resolved.

    Returns:
        The owning scope.

    Raises:
        ValidationError: If the resource is None or has no scope id.
        ScopeNotFoundError: If the scope id does not resolve to a scope.
    """
    if resource is None:
        raise ValidationError("resource is nil for scope lookup")
    scope_id = resource.scope_id
    if not scope_id:
        raise ValidationError("resource has no scope id for scope lookup")

    model = await ScopeRepository(reader).get_by_id(scope_id)
    if model is None:
        logger.debug("Scope lookup found no scope", scope_id=scope_id)
        raise ScopeNotFoundError(scope_id)

    return Scope(
        public_id=model.public_id,
        type=model.type,
        name=model.name,
        description=model.description,
        parent_id=model.parent_id,
    )
