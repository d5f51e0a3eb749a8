"""API test fixtures: FastAPI app over in-memory SQLite with a fresh token store.

Invariants:
    - get_db_manager and get_token_store overridden per test
    - health checks read the module-level db_manager, so it is patched too
    - lifespan is not run by ASGITransport; everything it sets up is faked here
"""

import pytest
from httpx import ASGITransport, AsyncClient

import customer_service.infrastructure.database as db_module
from customer_service.infrastructure.database import get_db_manager
from customer_service.infrastructure.token_store import InMemoryTokenStore, get_token_store
from customer_service.main import app

CLIENT_ID = "clientId"
CLIENT_SECRET = "clientSecret"


@pytest.fixture
def token_store():
    return InMemoryTokenStore(CLIENT_ID, CLIENT_SECRET, ["read", "write"], ttl_seconds=300)


@pytest.fixture
async def client(db_manager, token_store, monkeypatch):
    """Unauthenticated test client."""
    app.dependency_overrides[get_db_manager] = lambda: db_manager
    app.dependency_overrides[get_token_store] = lambda: token_store
    monkeypatch.setattr(db_module, "db_manager", db_manager)

    async with AsyncClient(
        transport=ASGITransport(app=app), base_url="http://test",
    ) as c:
        yield c

    app.dependency_overrides.clear()


@pytest.fixture
def auth_headers(token_store):
    token = token_store.issue(CLIENT_ID)
    return {"Authorization": f"Bearer {token.access_token}"}
