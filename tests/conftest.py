"""Root conftest: shared test configuration and database fixtures."""

import os

# Keep tests off real databases and real client secrets
os.environ.setdefault("DATABASE_URL", "sqlite+aiosqlite:///:memory:")
os.environ.setdefault("OAUTH2_CLIENT_ID", "clientId")
os.environ.setdefault("OAUTH2_CLIENT_SECRET", "clientSecret")
os.environ.setdefault("LOG_FORMAT", "text")

import pytest  # noqa: E402

from customer_service.infrastructure.customer_repository import (  # noqa: E402
    SqlAlchemyCustomerRepository,
)
from customer_service.infrastructure.database import DatabaseSessionManager  # noqa: E402


@pytest.fixture
async def db_manager():
    """Fresh in-memory SQLite database with the schema created."""
    manager = DatabaseSessionManager("sqlite+aiosqlite:///:memory:")
    await manager.create_schema()
    yield manager
    await manager.dispose()


@pytest.fixture
def repository(db_manager):
    return SqlAlchemyCustomerRepository(db_manager)
