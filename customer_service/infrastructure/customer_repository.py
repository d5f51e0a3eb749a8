"""Customer Repository: SQLAlchemy implementation of the CustomerRepository protocol.

Invariants:
    - Each operation is its own unit of work: one session, committed or rolled back
    - save() without id assigns a new CustomerId; with id it replaces the whole row
    - save() is a single INSERT .. ON CONFLICT DO UPDATE statement, so concurrent
      saves of one id never collide on the primary key; last write wins
    - find_by_id / exists_by_id report absence as None / False
    - find_all streams rows; its session closes when the iterator is exhausted
      or closed (wrap it in contextlib.aclosing when stopping early)
    - delete_by_id on an unknown id is a no-op
    - Storage failures arrive as StorageError via DatabaseSessionManager.session()

Design Decisions:
    - Entities are rebuilt through their builders, so a row without a
      customer_type raises the same ConfigurationError as an in-memory build
"""

import dataclasses
import logging
from typing import AsyncIterator

from sqlalchemy import delete, exists, func, select
from sqlalchemy.dialects import postgresql, sqlite

from customer_service.core.address import Address
from customer_service.core.customer import Customer
from customer_service.core.domain_types import (
    CustomerId, CustomerType, Gender, MaritalStatus, PhoneType, new_customer_id,
)
from customer_service.core.errors import StorageError
from customer_service.infrastructure.database import DatabaseSessionManager
from customer_service.models.customer import CustomerRecord

logger = logging.getLogger(__name__)

_UPSERT_INSERTS = {
    "postgresql": postgresql.insert,
    "sqlite": sqlite.insert,
}


class SqlAlchemyCustomerRepository:
    """Async CRUD over the customers table."""

    def __init__(self, db: DatabaseSessionManager):
        self._db = db

    async def save(self, customer: Customer) -> Customer:
        if customer.id is None:
            customer = Customer.from_customer(customer).with_id(new_customer_id()).build()
        async with self._db.session() as db:
            await db.execute(self._upsert(to_row(customer)))
            await db.commit()
        logger.info(
            f"Customer {customer.id} saved",
            extra={"customer_id": customer.id, "operation": "save"},
        )
        return customer

    def _upsert(self, row: dict):
        dialect = self._db.engine.dialect.name
        insert = _UPSERT_INSERTS.get(dialect)
        if insert is None:
            raise StorageError(f"no upsert support for dialect {dialect}", "save")
        stmt = insert(CustomerRecord).values(**row)
        return stmt.on_conflict_do_update(
            index_elements=[CustomerRecord.id],
            set_={column: stmt.excluded[column] for column in row if column != "id"},
        )

    async def find_by_id(self, customer_id: CustomerId) -> Customer | None:
        async with self._db.session() as db:
            record = await db.get(CustomerRecord, customer_id)
            return to_entity(record) if record else None

    async def exists_by_id(self, customer_id: CustomerId) -> bool:
        async with self._db.session() as db:
            found = await db.scalar(
                select(exists().where(CustomerRecord.id == customer_id)),
            )
        return bool(found)

    async def find_all(self) -> AsyncIterator[Customer]:
        async with self._db.session() as db:
            records = await db.stream_scalars(select(CustomerRecord))
            try:
                async for record in records:
                    yield to_entity(record)
            finally:
                await records.close()

    async def count(self) -> int:
        async with self._db.session() as db:
            total = await db.scalar(
                select(func.count()).select_from(CustomerRecord),
            )
        return total or 0

    async def delete(self, customer: Customer) -> None:
        if customer.id is None:
            return
        await self.delete_by_id(customer.id)

    async def delete_by_id(self, customer_id: CustomerId) -> None:
        async with self._db.session() as db:
            await db.execute(
                delete(CustomerRecord).where(CustomerRecord.id == customer_id),
            )
            await db.commit()
        logger.info(
            f"Customer {customer_id} deleted",
            extra={"customer_id": customer_id, "operation": "delete"},
        )

    async def delete_all(self) -> None:
        async with self._db.session() as db:
            await db.execute(delete(CustomerRecord))
            await db.commit()
        logger.warning("All customers deleted", extra={"operation": "delete_all"})


# ─── Record <-> Entity mapping ──────────────────────────────────

def to_row(customer: Customer) -> dict:
    """Column values for one customers row."""
    phones = customer.phones
    return dict(
        id=customer.id,
        customer_type=customer.customer_type.value,
        first_name=customer.first_name,
        last_name=customer.last_name,
        gender=customer.gender.value if customer.gender else None,
        birth_date=customer.birth_date,
        marital_status=(
            customer.marital_status.value if customer.marital_status else None
        ),
        address=dataclasses.asdict(customer.address) if customer.address else None,
        phones=(
            {phone_type.value: number for phone_type, number in phones.items()}
            if phones is not None else None
        ),
        email=customer.email,
    )


def to_entity(record: CustomerRecord) -> Customer:
    builder = (
        Customer.of_type(
            CustomerType(record.customer_type) if record.customer_type else None,
        )
        .with_id(CustomerId(record.id))
        .with_first_name(record.first_name)
        .with_last_name(record.last_name)
        .with_gender(Gender(record.gender) if record.gender else None)
        .with_birth_date(record.birth_date)
        .with_marital_status(
            MaritalStatus(record.marital_status) if record.marital_status else None,
        )
        .with_address(_address_from_json(record.address))
        .with_email(record.email)
    )
    for phone_type, number in (record.phones or {}).items():
        builder.with_phone(PhoneType(phone_type), number)
    return builder.build()


def _address_from_json(data: dict | None) -> Address | None:
    if data is None:
        return None
    return (
        Address.of_country(data.get("country"))
        .with_street_number(data.get("street_number"))
        .with_street_name(data.get("street_name"))
        .with_city(data.get("city"))
        .with_state_or_province(data.get("state_or_province"))
        .with_zipcode(data.get("zipcode"))
        .build()
    )
