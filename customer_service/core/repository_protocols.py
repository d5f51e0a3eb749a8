"""Boundary Protocols: storage contract between the core and the shell.

Invariants:
    - Core NEVER imports from shell; implementations live in infrastructure/
    - Every operation is a coroutine (or an async iterator for find_all)
    - Absence is a value (None / False), never an exception
    - save() is a whole-entity replace keyed by id, last write wins
    - Deletes are idempotent: unknown ids are not an error
    - Backing-store failures surface as StorageError, without retries

Design Decisions:
    - Protocol over ABC: structural subtyping, tests can pass any fake
"""

from typing import AsyncIterator, Protocol

from customer_service.core.customer import Customer
from customer_service.core.domain_types import CustomerId


class CustomerRepository(Protocol):
    """Contract for customer persistence, implemented by shell."""

    async def save(self, customer: Customer) -> Customer:
        """Insert (no id: a new one is assigned) or replace (id present).

        Returns the persisted customer, identifier included.
        """
        ...

    async def find_by_id(self, customer_id: CustomerId) -> Customer | None: ...

    async def exists_by_id(self, customer_id: CustomerId) -> bool: ...

    def find_all(self) -> AsyncIterator[Customer]:
        """One-shot async iteration over every stored customer, unordered.

        Rows are read lazily. A caller that may stop early wraps the iterator
        in contextlib.aclosing so the underlying session is released.
        """
        ...

    async def count(self) -> int: ...

    async def delete(self, customer: Customer) -> None: ...

    async def delete_by_id(self, customer_id: CustomerId) -> None: ...

    async def delete_all(self) -> None: ...
