"""Role grant repository for database operations.

Every write vets the grant first, on the same session, so the scope check
and the write share a transaction. Statements are issued against the table
named by ``RoleGrant.table_name()``, which lets callers redirect a grant to a
table with the same layout as ``iam_role_grant``.
"""

from typing import Any

from sqlalchemy import column, delete, func, insert, select, table, update
from sqlalchemy.ext.asyncio import AsyncSession
from sqlalchemy.sql.expression import TableClause

from scopegrant.core.logging import get_logger
from scopegrant.domain.entities.resource import OpType, WriteOptions
from scopegrant.domain.entities.role_grant import (
    DEFAULT_TABLE_NAME,
    RoleGrant,
    RoleGrantRecord,
)
from scopegrant.domain.exceptions import ValidationError

logger = get_logger(__name__)

# Fields an update may change
UPDATABLE_FIELDS = frozenset({"grant"})


def _grant_table(name: str) -> TableClause:
    return table(
        name,
        column("public_id"),
        column("scope_id"),
        column("role_id"),
        column("grant"),
        column("name"),
        column("updated_at"),
    )


def _row_to_entity(row: Any, table_name: str) -> RoleGrant:
    data = row._mapping
    rg = RoleGrant(
        record=RoleGrantRecord(
            public_id=data["public_id"],
            scope_id=data["scope_id"],
            role_id=data["role_id"],
            grant=data["grant"],
            name=data["name"],
        )
    )
    rg.set_table_name(table_name)
    return rg


class RoleGrantRepository:
    """Repository for role grant database operations."""

    def __init__(self, session: AsyncSession) -> None:
        """Initialize the repository.

        Args:
            session: SQLAlchemy async session.
        """
        self.session = session

    async def create(self, grant: RoleGrant) -> RoleGrant:
        """Vet and insert a new role grant.

        Args:
            grant: Grant to insert.

        Returns:
            The inserted grant.

        Raises:
            ValidationError: If the grant fails its pre-write check.
        """
        await grant.vet_for_write(self.session, OpType.CREATE)

        tbl = _grant_table(grant.table_name())
        await self.session.execute(
            insert(tbl).values(
                public_id=grant.public_id,
                scope_id=grant.scope_id,
                role_id=grant.role_id,
                grant=grant.grant,
                name=grant.name,
            )
        )
        logger.info(
            "Role grant created",
            public_id=grant.public_id,
            role_id=grant.role_id,
            scope_id=grant.scope_id,
            table=grant.table_name(),
        )
        return grant

    async def update(self, grant: RoleGrant, field_mask_paths: list[str]) -> int:
        """Vet and update the masked fields of a role grant.

        Args:
            grant: Grant carrying the new field values.
            field_mask_paths: Names of the fields to write.

        Returns:
            Number of rows updated.

        Raises:
            ValidationError: If the mask is empty or names a field that
                cannot be updated, or if the grant fails its pre-write check.
        """
        if not field_mask_paths:
            raise ValidationError("field mask is required for grant update")

        await grant.vet_for_write(
            self.session,
            OpType.UPDATE,
            WriteOptions(field_mask_paths=list(field_mask_paths)),
        )

        invalid = set(field_mask_paths) - UPDATABLE_FIELDS
        if invalid:
            raise ValidationError(
                f"invalid field mask paths for grant update: {', '.join(sorted(invalid))}"
            )

        values = {path: getattr(grant, path) for path in field_mask_paths}
        tbl = _grant_table(grant.table_name())
        result = await self.session.execute(
            update(tbl)
            .where(tbl.c.public_id == grant.public_id)
            .values(**values, updated_at=func.now())
        )
        logger.info(
            "Role grant updated",
            public_id=grant.public_id,
            fields=sorted(values),
            rows=result.rowcount,
        )
        return result.rowcount

    async def get_by_id(
        self, public_id: str, table_name: str = DEFAULT_TABLE_NAME
    ) -> RoleGrant | None:
        """Get a role grant by public id.

        Args:
            public_id: Grant public id.
            table_name: Table to read from.

        Returns:
            The grant if found, None otherwise.
        """
        tbl = _grant_table(table_name)
        result = await self.session.execute(
            select(tbl).where(tbl.c.public_id == public_id)
        )
        row = result.one_or_none()
        if row is None:
            return None
        return _row_to_entity(row, table_name)

    async def list_by_role(
        self, role_id: str, table_name: str = DEFAULT_TABLE_NAME
    ) -> list[RoleGrant]:
        """List the grants attached to a role, ordered by public id.

        Args:
            role_id: Role public id.
            table_name: Table to read from.

        Returns:
            List of grants.
        """
        tbl = _grant_table(table_name)
        result = await self.session.execute(
            select(tbl).where(tbl.c.role_id == role_id).order_by(tbl.c.public_id)
        )
        return [_row_to_entity(row, table_name) for row in result.all()]

    async def delete(self, grant: RoleGrant) -> int:
        """Delete a role grant.

        Args:
            grant: Grant to delete.

        Returns:
            Number of rows deleted.
        """
        tbl = _grant_table(grant.table_name())
        result = await self.session.execute(
            delete(tbl).where(tbl.c.public_id == grant.public_id)
        )
        logger.info("Role grant deleted", public_id=grant.public_id, rows=result.rowcount)
        return result.rowcount
