"""Customer: immutable person-or-company record, with its fluent builder.

Invariants:
    - customer_type is never None: CustomerBuilder refuses to exist without one
    - COMPANY customers keep the company name in last_name; first_name, gender,
      birth_date and marital_status are unused for them but not cleared
    - Customer.phones returns a new dict on every access, never internal state
    - from_customer() gives the builder its own copy of the phone mapping, so
      the builder, the source entity and the built entity never share it
    - build() performs no validation and no IO

Design Decisions:
    - Phones held as a sorted tuple of (PhoneType, number) pairs: the frozen
      dataclass stays hashable and two customers with the same phones compare equal
    - Only customer_type is checked; email, phone and date formats are left
      to the callers

Example:
    >>> ken = Customer.of_type(CustomerType.PERSON).with_first_name("Ken").build()
    >>> bison = Customer.from_customer(ken).with_first_name("Bison").build()
"""

from dataclasses import dataclass
from datetime import date

from customer_service.core.address import Address
from customer_service.core.domain_types import (
    CustomerId, CustomerType, Gender, MaritalStatus, PhoneType,
)
from customer_service.core.errors import ConfigurationError


PhoneEntries = tuple[tuple[PhoneType, str], ...]


@dataclass(frozen=True)
class Customer:
    """Customer value. Build with Customer.of_type(...)."""
    customer_type: CustomerType
    id: CustomerId | None = None
    first_name: str | None = None
    last_name: str | None = None
    gender: Gender | None = None
    birth_date: date | None = None
    marital_status: MaritalStatus | None = None
    address: Address | None = None
    phone_entries: PhoneEntries | None = None
    email: str | None = None

    @property
    def phones(self) -> dict[PhoneType, str] | None:
        """Copy of the phone mapping; None when no phone was ever set."""
        if self.phone_entries is None:
            return None
        return dict(self.phone_entries)

    @staticmethod
    def of_type(customer_type: CustomerType) -> "CustomerBuilder":
        """Start a builder for a customer of the given type.

        For CustomerType.COMPANY the last name holds the company's name and
        first_name, gender, birth_date and marital_status are not relevant.

        Raises:
            ConfigurationError: customer_type is None
        """
        return CustomerBuilder(customer_type)

    @staticmethod
    def from_customer(customer: "Customer") -> "CustomerBuilder":
        """Start a builder holding a copy of every field of customer, id included."""
        builder = (
            CustomerBuilder(customer.customer_type)
            .with_id(customer.id)
            .with_first_name(customer.first_name)
            .with_last_name(customer.last_name)
            .with_gender(customer.gender)
            .with_birth_date(customer.birth_date)
            .with_marital_status(customer.marital_status)
            .with_address(customer.address)
            .with_email(customer.email)
        )
        builder._phones = customer.phones
        return builder


class CustomerBuilder:
    """Mutable accumulator producing one Customer per build() call."""

    def __init__(self, customer_type: CustomerType):
        if customer_type is None:
            raise ConfigurationError(
                "Customer type can not be null.", field="customer_type",
            )
        self._customer_type = customer_type
        self._id: CustomerId | None = None
        self._first_name: str | None = None
        self._last_name: str | None = None
        self._gender: Gender | None = None
        self._birth_date: date | None = None
        self._marital_status: MaritalStatus | None = None
        self._address: Address | None = None
        self._phones: dict[PhoneType, str] | None = None
        self._email: str | None = None

    def with_id(self, customer_id: CustomerId | None) -> "CustomerBuilder":
        self._id = customer_id
        return self

    def with_first_name(self, first_name: str | None) -> "CustomerBuilder":
        self._first_name = first_name
        return self

    def with_last_name(self, last_name: str | None) -> "CustomerBuilder":
        self._last_name = last_name
        return self

    def with_gender(self, gender: Gender | None) -> "CustomerBuilder":
        self._gender = gender
        return self

    def with_birth_date(self, birth_date: date | None) -> "CustomerBuilder":
        self._birth_date = birth_date
        return self

    def with_marital_status(self, marital_status: MaritalStatus | None) -> "CustomerBuilder":
        self._marital_status = marital_status
        return self

    def with_address(self, address: Address | None) -> "CustomerBuilder":
        self._address = address
        return self

    def with_phone(self, phone_type: PhoneType, number: str) -> "CustomerBuilder":
        """Add a (type, number) phone; a second number for the same type replaces the first."""
        if self._phones is None:
            self._phones = {}
        self._phones[phone_type] = number
        return self

    def with_email(self, email: str | None) -> "CustomerBuilder":
        self._email = email
        return self

    def build(self) -> Customer:
        return Customer(
            customer_type=self._customer_type,
            id=self._id,
            first_name=self._first_name,
            last_name=self._last_name,
            gender=self._gender,
            birth_date=self._birth_date,
            marital_status=self._marital_status,
            address=self._address,
            phone_entries=_freeze_phones(self._phones),
            email=self._email,
        )


def _freeze_phones(phones: dict[PhoneType, str] | None) -> PhoneEntries | None:
    if phones is None:
        return None
    return tuple(sorted(phones.items(), key=lambda entry: entry[0].value))
