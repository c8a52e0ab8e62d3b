"""Pytest configuration for unit tests."""

from typing import AsyncGenerator

import pytest
import pytest_asyncio
from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker, create_async_engine
from sqlalchemy.pool import StaticPool

from scopegrant.domain.entities import Role, Scope
from scopegrant.infrastructure.persistence.database import Base
from scopegrant.infrastructure.persistence.models import RoleModel, ScopeModel

GLOBAL_SCOPE_ID = "global"
ORG_SCOPE_ID = "o_1234567890"
PROJECT_SCOPE_ID = "p_1234567890"
ROLE_ID = "r_1234567890"


@pytest_asyncio.fixture
async def db_session() -> AsyncGenerator[AsyncSession, None]:
    """Create a test database session.

    Uses an in-memory SQLite database for testing.
    """
    engine = create_async_engine(
        "sqlite+aiosqlite:///:memory:",
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
        echo=False,
    )

    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)

    async_session_maker = async_sessionmaker(
        engine,
        class_=AsyncSession,
        expire_on_commit=False,
    )

    async with async_session_maker() as session:
        yield session
        await session.rollback()

    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.drop_all)

    await engine.dispose()


@pytest_asyncio.fixture
async def seeded_session(db_session: AsyncSession) -> AsyncSession:
    """Session with a global scope, an organization, a project and a role."""
    db_session.add_all(
        [
            ScopeModel(public_id=GLOBAL_SCOPE_ID, type="global", name="Global"),
            ScopeModel(
                public_id=ORG_SCOPE_ID,
                type="organization",
                parent_id=GLOBAL_SCOPE_ID,
                name="Acme",
            ),
            ScopeModel(
                public_id=PROJECT_SCOPE_ID,
                type="project",
                parent_id=ORG_SCOPE_ID,
                name="Rockets",
            ),
        ]
    )
    await db_session.flush()
    db_session.add(RoleModel(public_id=ROLE_ID, scope_id=ORG_SCOPE_ID, name="deployer"))
    await db_session.flush()
    return db_session


@pytest.fixture
def org_scope() -> Scope:
    return Scope(public_id=ORG_SCOPE_ID, type="organization", parent_id=GLOBAL_SCOPE_ID)


@pytest.fixture
def project_scope() -> Scope:
    return Scope(public_id=PROJECT_SCOPE_ID, type="project", parent_id=ORG_SCOPE_ID)


@pytest.fixture
def role() -> Role:
    return Role(public_id=ROLE_ID, scope_id=ORG_SCOPE_ID, name="deployer")
