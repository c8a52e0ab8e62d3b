"""Scope repository for database operations."""

from sqlalchemy import select, update
from sqlalchemy.ext.asyncio import AsyncSession

from scopegrant.infrastructure.persistence.models import ScopeModel


class ScopeRepository:
    """Repository for scope database operations."""

    def __init__(self, session: AsyncSession) -> None:
        """Initialize the repository.

        Args:
            session: SQLAlchemy async session.
        """
        self.session = session

    async def create(self, scope: ScopeModel) -> ScopeModel:
        """Create a new scope.

        Args:
            scope: Scope model to create.

        Returns:
            Created scope model.
        """
        self.session.add(scope)
        await self.session.flush()
        return scope

    async def get_by_id(self, public_id: str) -> ScopeModel | None:
        """Get a scope by public id.

        Always reloads the row, so a scope the session already holds is
        refreshed with the current database values.

        Args:
            public_id: Scope public id.

        Returns:
            Scope model if found, None otherwise.
        """
        result = await self.session.execute(
            select(ScopeModel)
            .where(ScopeModel.public_id == public_id)
            .execution_options(populate_existing=True)
        )
        return result.scalar_one_or_none()

    async def update_type(self, public_id: str, scope_type: str) -> int:
        """Change the kind of a scope.

        Args:
            public_id: Scope public id.
            scope_type: New scope kind.

        Returns:
            Number of rows updated.
        """
        result = await self.session.execute(
            update(ScopeModel)
            .where(ScopeModel.public_id == public_id)
            .values(type=scope_type)
        )
        return result.rowcount
