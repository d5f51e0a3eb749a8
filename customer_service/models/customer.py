"""Customer ORM: one row per customer, address and phones embedded as JSON.

Invariants:
    - id is a UUID primary key, assigned by the repository (never by the database)
    - customer_type is non-nullable; every other column is nullable
    - enum columns store the member name (CustomerType.PERSON -> "PERSON")
    - address is a JSON object with Address field names; phones maps
      PhoneType names to numbers

Design Decisions:
    - JSON columns for the embedded Address and the phone mapping: they are
      only ever read and written together with their customer
    - none_as_null: an absent address or phone map is SQL NULL, not JSON null
    - Generic Uuid type: the same model runs on PostgreSQL and on SQLite in tests
"""

import uuid
from datetime import date

from sqlalchemy import String, Date, JSON, Uuid
from sqlalchemy.orm import Mapped, mapped_column

from customer_service.db.base import Base


class CustomerRecord(Base):
    """Persisted customer row."""
    __tablename__ = "customers"

    id: Mapped[uuid.UUID] = mapped_column(Uuid, primary_key=True)
    customer_type: Mapped[str] = mapped_column(String(20), nullable=False)
    first_name: Mapped[str | None] = mapped_column(String(200), nullable=True)
    last_name: Mapped[str | None] = mapped_column(String(200), nullable=True)
    gender: Mapped[str | None] = mapped_column(String(20), nullable=True)
    birth_date: Mapped[date | None] = mapped_column(Date, nullable=True)
    marital_status: Mapped[str | None] = mapped_column(String(20), nullable=True)
    address: Mapped[dict | None] = mapped_column(JSON(none_as_null=True), nullable=True)
    phones: Mapped[dict | None] = mapped_column(JSON(none_as_null=True), nullable=True)
    email: Mapped[str | None] = mapped_column(String(320), nullable=True)
