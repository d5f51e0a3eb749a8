"""Address: immutable postal address embedded in a Customer, with its builder.

Invariants:
    - country is never None: AddressBuilder refuses to exist without one
    - Address instances are frozen; updates go through from_address() + build()
    - No other field is validated (formats are left to callers)

Example:
    >>> home = Address.of_country("Shadaloo").with_city("Shadaloo City").build()
    >>> moved = Address.from_address(home).with_zipcode("654321").build()
"""

from dataclasses import dataclass

from customer_service.core.errors import ConfigurationError


@dataclass(frozen=True)
class Address:
    """Postal address value. Build with Address.of_country(...)."""
    country: str
    street_number: int | None = None
    street_name: str | None = None
    city: str | None = None
    state_or_province: str | None = None
    zipcode: str | None = None

    @staticmethod
    def of_country(country: str) -> "AddressBuilder":
        return AddressBuilder(country)

    @staticmethod
    def from_address(address: "Address") -> "AddressBuilder":
        """Start a builder holding a copy of every field of address."""
        return (
            AddressBuilder(address.country)
            .with_street_number(address.street_number)
            .with_street_name(address.street_name)
            .with_city(address.city)
            .with_state_or_province(address.state_or_province)
            .with_zipcode(address.zipcode)
        )


class AddressBuilder:
    """Mutable accumulator producing one Address per build() call."""

    def __init__(self, country: str):
        if country is None:
            raise ConfigurationError("Country can not be null.", field="country")
        self._country = country
        self._street_number: int | None = None
        self._street_name: str | None = None
        self._city: str | None = None
        self._state_or_province: str | None = None
        self._zipcode: str | None = None

    def with_street_number(self, street_number: int | None) -> "AddressBuilder":
        self._street_number = street_number
        return self

    def with_street_name(self, street_name: str | None) -> "AddressBuilder":
        self._street_name = street_name
        return self

    def with_city(self, city: str | None) -> "AddressBuilder":
        self._city = city
        return self

    def with_state_or_province(self, state_or_province: str | None) -> "AddressBuilder":
        self._state_or_province = state_or_province
        return self

    def with_zipcode(self, zipcode: str | None) -> "AddressBuilder":
        self._zipcode = zipcode
        return self

    def build(self) -> Address:
        return Address(
            country=self._country,
            street_number=self._street_number,
            street_name=self._street_name,
            city=self._city,
            state_or_province=self._state_or_province,
            zipcode=self._zipcode,
        )
