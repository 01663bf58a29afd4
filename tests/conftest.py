import os

# Settings require a database url at import time; tests run on in-memory SQLite.
os.environ.setdefault("DATABASE_URL", "sqlite+aiosqlite://")

from unittest.mock import AsyncMock  # noqa: E402

import pytest  # noqa: E402
import pytest_asyncio  # noqa: E402
from httpx import ASGITransport, AsyncClient  # noqa: E402
from sqlalchemy.ext.asyncio import AsyncSession, create_async_engine  # noqa: E402
from sqlalchemy.pool import StaticPool  # noqa: E402

from lore_archive.app import app  # noqa: E402
from lore_archive.domain.ports.repositories.book_repository import BookRepository  # noqa: E402
from lore_archive.domain.ports.repositories.character_repository import CharacterRepository  # noqa: E402
from lore_archive.domain.ports.repositories.poi_repository import PoiRepository  # noqa: E402
from lore_archive.domain.ports.repositories.species_repository import SpeciesRepository  # noqa: E402
from lore_archive.infrastructure.config.dependencies import get_settings  # noqa: E402
from lore_archive.infrastructure.config.settings import Settings  # noqa: E402
from lore_archive.infrastructure.persistence.database import get_session  # noqa: E402
from lore_archive.infrastructure.persistence.models import table_registry  # noqa: E402

TEST_DATABASE_URL = "sqlite+aiosqlite://"


class BaseIntegrationTest:
    """Base class for integration tests with common setup"""

    max_page_limit = 100

    @pytest_asyncio.fixture
    async def sqlite_engine(self):
        """Create an in-memory database shared by every connection of the test"""
        engine = create_async_engine(
            TEST_DATABASE_URL, connect_args={"check_same_thread": False}, poolclass=StaticPool
        )

        async with engine.begin() as conn:
            await conn.run_sync(table_registry.metadata.create_all)

        yield engine

        async with engine.begin() as conn:
            await conn.run_sync(table_registry.metadata.drop_all)
        await engine.dispose()

    @pytest_asyncio.fixture
    async def test_session(self, sqlite_engine):
        """Create test database session"""
        async with AsyncSession(sqlite_engine, expire_on_commit=False) as session:
            yield session

    @pytest_asyncio.fixture
    async def client(self, test_session):
        """Create test HTTP client with database and settings overrides"""

        async def override_get_session():
            yield test_session

        def override_get_settings():
            return Settings(DATABASE_URL=TEST_DATABASE_URL, MAX_PAGE_LIMIT=self.max_page_limit)

        app.dependency_overrides[get_session] = override_get_session
        app.dependency_overrides[get_settings] = override_get_settings

        transport = ASGITransport(app=app, raise_app_exceptions=False)
        async with AsyncClient(transport=transport, base_url="http://test") as ac:
            yield ac

        app.dependency_overrides.clear()


# Shared fixtures for use case testing
@pytest.fixture
def mock_book_repository():
    return AsyncMock(spec=BookRepository)


@pytest.fixture
def mock_character_repository():
    return AsyncMock(spec=CharacterRepository)


@pytest.fixture
def mock_poi_repository():
    return AsyncMock(spec=PoiRepository)


@pytest.fixture
def mock_species_repository():
    return AsyncMock(spec=SpeciesRepository)
