"""Database session manager: error mapping, rollback, schema and health checks."""

from uuid import uuid4

import pytest
from sqlalchemy import select, text
from sqlalchemy.exc import InvalidRequestError

from customer_service.core.errors import StorageError
from customer_service.infrastructure import database as db_module
from customer_service.infrastructure.database import DatabaseSessionManager
from customer_service.models.customer import CustomerRecord


async def test_operational_error_maps_to_storage_error(db_manager):
    with pytest.raises(StorageError) as exc_info:
        async with db_manager.session() as db:
            await db.execute(text("SELECT * FROM no_such_table"))
    assert exc_info.value.operation == "execute"
    assert exc_info.value.__cause__ is not None


async def test_non_driver_error_maps_to_unknown_operation(db_manager):
    with pytest.raises(StorageError) as exc_info:
        async with db_manager.session():
            raise InvalidRequestError("session misuse")
    assert exc_info.value.operation == "unknown"
    assert isinstance(exc_info.value.__cause__, InvalidRequestError)


async def test_integrity_error_rolls_back(db_manager):
    with pytest.raises(StorageError) as exc_info:
        async with db_manager.session() as db:
            db.add(CustomerRecord(id=uuid4(), customer_type=None))
            await db.commit()
    assert exc_info.value.operation == "commit"

    async with db_manager.session() as db:
        assert (await db.scalars(select(CustomerRecord))).all() == []


async def test_create_schema_is_repeatable(db_manager):
    await db_manager.create_schema()
    async with db_manager.session() as db:
        await db.execute(select(CustomerRecord))


async def test_health_check_ok(db_manager):
    assert await db_manager.health_check() is True


def test_get_db_manager_requires_init(monkeypatch):
    monkeypatch.setattr(db_module, "db_manager", None)
    with pytest.raises(RuntimeError):
        db_module.get_db_manager()


async def test_init_db_sets_singleton(monkeypatch):
    monkeypatch.setattr(db_module, "db_manager", None)
    manager = db_module.init_db("sqlite+aiosqlite:///:memory:")
    try:
        assert db_module.get_db_manager() is manager
        assert isinstance(manager, DatabaseSessionManager)
    finally:
        await manager.dispose()
