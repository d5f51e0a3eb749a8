"""Customer wire schema: naming, omission of None, dates, ids, unknown fields.

Tests:
    - Serialized customers use snake_case keys and omit None fields
    - Dates render as ISO-8601, the id as a string, enums by name
    - Unknown incoming fields are ignored
    - Missing customer_type / country fail with the builders' messages
"""

from datetime import date
from uuid import uuid4

import pytest

from customer_service.core.address import Address
from customer_service.core.customer import Customer
from customer_service.core.domain_types import (
    CustomerId, CustomerType, Gender, PhoneType,
)
from customer_service.core.errors import ConfigurationError
from customer_service.schemas.customer import AddressPayload, CustomerPayload


def _dump(customer: Customer) -> dict:
    return CustomerPayload.from_domain(customer).model_dump(mode="json", exclude_none=True)


def test_serializes_with_snake_case_and_omits_none():
    customer_id = CustomerId(uuid4())
    customer = (
        Customer.of_type(CustomerType.PERSON)
        .with_id(customer_id)
        .with_first_name("Ken")
        .with_birth_date(date(1990, 8, 16))
        .with_address(Address.of_country("Shadaloo").with_street_number(110).build())
        .with_phone(PhoneType.CELLULAR, "222222222")
        .build()
    )

    assert _dump(customer) == {
        "id": str(customer_id),
        "first_name": "Ken",
        "birth_date": "1990-08-16",
        "address": {"country": "Shadaloo", "street_number": 110},
        "phones": {"CELLULAR": "222222222"},
        "customer_type": "PERSON",
    }


def test_reads_wire_form_into_entity():
    payload = CustomerPayload.model_validate({
        "first_name": "Ken",
        "gender": "MALE",
        "birth_date": "1990-03-16",
        "phones": {"HOME": "111111111", "FAX": "444444444"},
        "address": {"country": "Shadaloo", "state_or_province": "North"},
        "customer_type": "PERSON",
        "favourite_color": "red",
    })

    customer = payload.to_domain()

    assert customer.gender == Gender.MALE
    assert customer.birth_date == date(1990, 3, 16)
    assert customer.phones == {PhoneType.HOME: "111111111", PhoneType.FAX: "444444444"}
    assert customer.address.state_or_province == "North"
    assert customer.id is None


def test_unknown_address_fields_are_ignored():
    payload = AddressPayload.model_validate({"country": "Shadaloo", "planet": "Earth"})
    assert payload.to_domain() == Address(country="Shadaloo")


def test_round_trip_through_wire_form():
    customer = (
        Customer.of_type(CustomerType.COMPANY)
        .with_id(CustomerId(uuid4()))
        .with_last_name("Acme Corp.")
        .with_phone(PhoneType.OFFICE, "333333333 Ext123")
        .build()
    )
    wire = _dump(customer)
    assert CustomerPayload.model_validate(wire).to_domain() == customer


def test_malformed_id_is_read_as_no_id():
    payload = CustomerPayload(id="5c8a1d5b0190b214360dc031", customer_type=CustomerType.PERSON)
    assert payload.to_domain().id is None


def test_missing_customer_type_fails_with_builder_message():
    payload = CustomerPayload.model_validate({"first_name": "Ken"})
    with pytest.raises(ConfigurationError, match="Customer type can not be null."):
        payload.to_domain()


def test_missing_country_fails_with_builder_message():
    payload = CustomerPayload.model_validate({
        "customer_type": "PERSON", "address": {"city": "Shadaloo City"},
    })
    with pytest.raises(ConfigurationError, match="Country can not be null."):
        payload.to_domain()
