"""
Fixtures for integration tests.

Provides:
- In-memory SQLite database with the card table
- Test client for the FastAPI app with the card repository overridden
- Test client whose store is missing the card table (every query fails)
- Test client whose repository raises an unexpected error
"""

from typing import AsyncGenerator

import pytest
import pytest_asyncio
from httpx import AsyncClient, ASGITransport
from sqlalchemy import MetaData, Table
from sqlalchemy.ext.asyncio import AsyncEngine, create_async_engine
from sqlalchemy.pool import StaticPool

from card_gateway.main import app
from card_gateway.core.dependencies import get_card_repository
from card_gateway.infrastructure.database import (
    DatabaseSessionManager,
    build_cards_table,
)
from card_gateway.infrastructure.repositories import SqlCardRepository


# =============================================================================
# Database Fixtures
# =============================================================================

@pytest_asyncio.fixture
async def test_engine() -> AsyncGenerator[AsyncEngine, None]:
    """Create an in-memory SQLite async engine for testing."""
    engine = create_async_engine(
        "sqlite+aiosqlite:///:memory:",
        echo=False,
        poolclass=StaticPool,
        connect_args={"check_same_thread": False},
    )

    yield engine

    await engine.dispose()


@pytest.fixture
def cards_metadata() -> MetaData:
    return MetaData()


@pytest.fixture
def cards_table(cards_metadata: MetaData) -> Table:
    """Card table definition using the default table name."""
    return build_cards_table(metadata=cards_metadata)


@pytest_asyncio.fixture
async def db_manager(
    test_engine: AsyncEngine,
    cards_metadata: MetaData,
    cards_table: Table,
) -> DatabaseSessionManager:
    """Session manager over a database that has the card table."""
    async with test_engine.begin() as conn:
        await conn.run_sync(cards_metadata.create_all)

    return DatabaseSessionManager(test_engine)


@pytest.fixture
def card_repository(
    db_manager: DatabaseSessionManager,
    cards_table: Table,
) -> SqlCardRepository:
    return SqlCardRepository(db_manager, cards_table)


# =============================================================================
# App Client Fixtures
# =============================================================================

@pytest_asyncio.fixture
async def client(
    card_repository: SqlCardRepository,
) -> AsyncGenerator[AsyncClient, None]:
    """
    Create a test client backed by the in-memory card table.

    The lifespan does not run under ASGITransport, so the repository
    dependency is overridden instead of reading the pool from app.state.
    """
    async def override_get_card_repository():
        return card_repository

    app.dependency_overrides[get_card_repository] = override_get_card_repository

    transport = ASGITransport(app=app)
    async with AsyncClient(transport=transport, base_url="http://test") as ac:
        yield ac

    app.dependency_overrides.clear()


@pytest_asyncio.fixture
async def client_with_missing_table(
    test_engine: AsyncEngine,
    cards_table: Table,
) -> AsyncGenerator[AsyncClient, None]:
    """Create a test client whose store has no card table, so every statement fails."""
    broken_repository = SqlCardRepository(DatabaseSessionManager(test_engine), cards_table)

    async def override_get_card_repository():
        return broken_repository

    app.dependency_overrides[get_card_repository] = override_get_card_repository

    transport = ASGITransport(app=app)
    async with AsyncClient(transport=transport, base_url="http://test") as ac:
        yield ac

    app.dependency_overrides.clear()


class CrashingCardRepository:
    """Repository that fails with an error no handler knows about."""

    async def list_all(self):
        raise RuntimeError("driver crashed")


@pytest_asyncio.fixture
async def client_with_crashing_store() -> AsyncGenerator[AsyncClient, None]:
    """Create a test client whose repository raises an unexpected error."""
    async def override_get_card_repository():
        return CrashingCardRepository()

    app.dependency_overrides[get_card_repository] = override_get_card_repository

    transport = ASGITransport(app=app)
    async with AsyncClient(transport=transport, base_url="http://test") as ac:
        yield ac

    app.dependency_overrides.clear()


# =============================================================================
# Helper Fixtures
# =============================================================================

@pytest.fixture
def ace_card() -> dict:
    """Request body for a valid card."""
    return {
        "card_name": "Ace",
        "card_pic": "ace.png",
    }


@pytest.fixture
def king_card() -> dict:
    return {
        "card_name": "King",
        "card_pic": "https://cdn.example.com/cards/king.png",
    }
