"""Unit tests for scope resolution."""

import pytest
import pytest_asyncio

from scopegrant.core.config import Settings
from scopegrant.domain.entities import OpType, Role, Scope, new_role_grant
from scopegrant.domain.exceptions import ScopeNotFoundError, ValidationError
from scopegrant.domain.services.scope_resolver import lookup_scope
from scopegrant.infrastructure.persistence.database import DatabaseManager
from scopegrant.infrastructure.persistence.models import ScopeModel
from scopegrant.infrastructure.persistence.repositories.scope_repository import (
    ScopeRepository,
)


@pytest.mark.asyncio
async def test_lookup_scope(seeded_session):
    """The owning scope is resolved from the resource's scope id."""
    role = Role(public_id="r_1234567890", scope_id="p_1234567890")

    scope = await lookup_scope(seeded_session, role)

    assert scope == Scope(
        public_id="p_1234567890",
        type="project",
        name="Rockets",
        parent_id="o_1234567890",
    )


@pytest.mark.asyncio
async def test_lookup_scope_sees_uncommitted_changes(seeded_session):
    """Lookups observe changes made earlier in the same transaction."""
    await ScopeRepository(seeded_session).update_type("o_1234567890", "global")
    role = Role(public_id="r_1234567890", scope_id="o_1234567890")

    scope = await lookup_scope(seeded_session, role)

    assert scope.type == "global"
    assert scope.is_grantable is False


@pytest.mark.asyncio
async def test_lookup_missing_scope(seeded_session):
    role = Role(public_id="r_1234567890", scope_id="o_missing")

    with pytest.raises(ScopeNotFoundError) as exc_info:
        await lookup_scope(seeded_session, role)

    assert exc_info.value.scope_id == "o_missing"


@pytest.mark.asyncio
async def test_lookup_without_scope_id(seeded_session):
    with pytest.raises(ValidationError, match="no scope id"):
        await lookup_scope(seeded_session, Role(public_id="r_1", scope_id=""))


@pytest.mark.asyncio
async def test_lookup_nil_resource(seeded_session):
    with pytest.raises(ValidationError, match="resource is nil"):
        await lookup_scope(seeded_session, None)


@pytest_asyncio.fixture
async def file_db(tmp_path):
    """Database shared by independent sessions."""
    manager = DatabaseManager(
        Settings(database_url=f"sqlite+aiosqlite:///{tmp_path}/scopegrant.db")
    )
    await manager.create_tables()
    yield manager
    await manager.disconnect()


@pytest.mark.asyncio
async def test_held_scope_is_reloaded_after_another_commit(file_db):
    """A scope kind changed and committed elsewhere is seen by the next lookup."""
    async with file_db.session() as held:
        scope = ScopeModel(public_id="o_1234567890", type="organization")
        held.add(scope)
        await held.commit()

        async with file_db.session() as other:
            await ScopeRepository(other).update_type("o_1234567890", "global")
            await other.commit()

        role = Role(public_id="r_1234567890", scope_id="o_1234567890")
        resolved = await lookup_scope(held, role)

        assert resolved.type == "global"
        assert scope.type == "global"


@pytest.mark.asyncio
async def test_vet_for_write_rejects_scope_changed_in_another_session(file_db):
    """The pre-write check sees the committed scope kind, not the session's copy."""
    async with file_db.session() as held:
        held.add(ScopeModel(public_id="o_1234567890", type="organization"))
        await held.commit()

        org = Scope(public_id="o_1234567890", type="organization")
        rg = new_role_grant(org, Role(public_id="r_1234567890", scope_id=org.public_id), "id=*")
        await rg.vet_for_write(held, OpType.CREATE)

        async with file_db.session() as other:
            await ScopeRepository(other).update_type("o_1234567890", "global")
            await other.commit()

        with pytest.raises(ValidationError, match="not an organization or project"):
            await rg.vet_for_write(held, OpType.CREATE)
