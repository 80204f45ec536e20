"""Pytest configuration and fixtures."""

import pytest
from typing import AsyncGenerator

from httpx import ASGITransport, AsyncClient

from config import Config
from shortener.database.memory import URLShortenerMemoryDB
from shortener.service import URLShortenerService
from shortener.shortid import ShortIdGenerator
from shortener.common.logging_config import setup_logging
from web_app import create_app


@pytest.fixture
def logger():
    """Create test logger."""
    return setup_logging(level="DEBUG")


@pytest.fixture
async def test_db(logger) -> AsyncGenerator[URLShortenerMemoryDB, None]:
    """Create in-memory store instance."""
    db = URLShortenerMemoryDB(logger=logger)

    yield db

    await db.close()


@pytest.fixture
def short_id_generator():
    """Create short id generator."""
    return ShortIdGenerator(default_length=6)


@pytest.fixture
def service(test_db, short_id_generator, logger) -> URLShortenerService:
    """Create service instance."""
    return URLShortenerService(
        db=test_db,
        cache=None,
        short_id_generator=short_id_generator,
        logger=logger,
        store_timeout_seconds=1.0,
    )


@pytest.fixture
def test_config():
    """Configuration for app tests."""
    return Config(
        database_url="memory://",
        base_url="http://testserver",
    )


@pytest.fixture
def app(test_db, service, test_config):
    """Create test FastAPI app."""
    return create_app(
        db_instance=test_db,
        cache_instance=None,
        service_instance=service,
        config=test_config,
    )


@pytest.fixture
async def client(app):
    """Create test client."""
    transport = ASGITransport(app=app)
    async with AsyncClient(transport=transport, base_url="http://testserver") as ac:
        yield ac


@pytest.fixture
def sample_urls():
    """Sample URLs for testing."""
    return [
        "https://example.com/page",
        "https://github.com/user/repo",
        "https://stackoverflow.com/questions/123456",
    ]
