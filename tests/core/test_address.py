"""Address builder: construction, copy-then-override, and the country rule.

Tests:
    - of_country(...).build() carries every field set, others stay None
    - from_address copies all fields; overriding one leaves the rest intact
    - of_country(None) fails at builder creation with the documented message
    - Address instances are frozen
"""

import dataclasses

import pytest

from customer_service.core.address import Address
from customer_service.core.errors import ConfigurationError, ErrorCategory


def _shadaloo() -> Address:
    return (
        Address.of_country("Shadaloo")
        .with_street_number(110)
        .with_street_name("Bison street")
        .with_city("Shadaloo City")
        .with_zipcode("123456")
        .build()
    )


def test_builds_an_address():
    address = _shadaloo()

    assert address.country == "Shadaloo"
    assert address.street_number == 110
    assert address.street_name == "Bison street"
    assert address.city == "Shadaloo City"
    assert address.state_or_province is None
    assert address.zipcode == "123456"


def test_country_only_address_leaves_other_fields_unset():
    address = Address.of_country("Shadaloo").build()
    assert address == Address(country="Shadaloo")


def test_from_address_overrides_one_field():
    original = _shadaloo()

    updated = Address.from_address(original).with_street_number(2000).build()

    assert updated.street_number == 2000
    assert dataclasses.replace(updated, street_number=110) == original


def test_from_address_leaves_source_untouched():
    original = _shadaloo()
    Address.from_address(original).with_city("Metro City").build()
    assert original.city == "Shadaloo City"


def test_from_address_without_changes_is_equal():
    original = _shadaloo()
    assert Address.from_address(original).build() == original


def test_fails_if_country_is_null():
    with pytest.raises(ConfigurationError, match="Country can not be null.") as exc_info:
        Address.of_country(None)
    assert exc_info.value.category == ErrorCategory.CONFIGURATION
    assert exc_info.value.field == "country"


def test_empty_country_is_accepted():
    """Only None is rejected; formats are not the builder's concern."""
    assert Address.of_country("").build().country == ""


def test_address_is_immutable():
    address = _shadaloo()
    with pytest.raises(dataclasses.FrozenInstanceError):
        address.city = "Metro City"
