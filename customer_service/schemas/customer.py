"""Customer Schemas: JSON shape of Customer and Address, with domain converters.

Invariants:
    - customer_type and country are optional HERE so that a missing
      discriminator reaches the builders and fails with their message
      ("Customer type can not be null." / "Country can not be null.")
    - Dates travel as ISO-8601 calendar strings, the id as a string token
    - Enum values travel as their names; phones as {"HOME": "..."}
    - A malformed id token in a body is read as "no id"
"""

from datetime import date

from pydantic import BaseModel, ConfigDict

from customer_service.core.address import Address
from customer_service.core.customer import Customer
from customer_service.core.domain_types import (
    CustomerType, Gender, MaritalStatus, PhoneType, parse_customer_id,
)


class AddressPayload(BaseModel):
    """Wire form of Address."""
    model_config = ConfigDict(extra="ignore")

    country: str | None = None
    street_number: int | None = None
    street_name: str | None = None
    city: str | None = None
    state_or_province: str | None = None
    zipcode: str | None = None

    def to_domain(self) -> Address:
        """Raises ConfigurationError when country is missing."""
        return (
            Address.of_country(self.country)
            .with_street_number(self.street_number)
            .with_street_name(self.street_name)
            .with_city(self.city)
            .with_state_or_province(self.state_or_province)
            .with_zipcode(self.zipcode)
            .build()
        )

    @classmethod
    def from_domain(cls, address: Address) -> "AddressPayload":
        return cls(
            country=address.country,
            street_number=address.street_number,
            street_name=address.street_name,
            city=address.city,
            state_or_province=address.state_or_province,
            zipcode=address.zipcode,
        )


class CustomerPayload(BaseModel):
    """Wire form of Customer, used for request and response bodies."""
    model_config = ConfigDict(
        extra="ignore",
        json_schema_extra={
            "example": {
                "first_name": "Ken",
                "last_name": "Masters",
                "gender": "MALE",
                "birth_date": "1990-03-16",
                "marital_status": "SINGLE",
                "address": {
                    "country": "Shadaloo",
                    "street_number": 110,
                    "street_name": "Bison street",
                    "city": "Shadaloo City",
                    "zipcode": "123456",
                },
                "phones": {"HOME": "111111111", "CELLULAR": "222222222"},
                "email": "kmasters@streetf.com",
                "customer_type": "PERSON",
            }
        },
    )

    id: str | None = None
    first_name: str | None = None
    last_name: str | None = None
    gender: Gender | None = None
    birth_date: date | None = None
    marital_status: MaritalStatus | None = None
    address: AddressPayload | None = None
    phones: dict[PhoneType, str] | None = None
    email: str | None = None
    customer_type: CustomerType | None = None

    def to_domain(self) -> Customer:
        """Raises ConfigurationError when customer_type (or address country) is missing."""
        builder = (
            Customer.of_type(self.customer_type)
            .with_id(parse_customer_id(self.id) if self.id else None)
            .with_first_name(self.first_name)
            .with_last_name(self.last_name)
            .with_gender(self.gender)
            .with_birth_date(self.birth_date)
            .with_marital_status(self.marital_status)
            .with_address(self.address.to_domain() if self.address else None)
            .with_email(self.email)
        )
        for phone_type, number in (self.phones or {}).items():
            builder.with_phone(phone_type, number)
        return builder.build()

    @classmethod
    def from_domain(cls, customer: Customer) -> "CustomerPayload":
        return cls(
            id=str(customer.id) if customer.id else None,
            first_name=customer.first_name,
            last_name=customer.last_name,
            gender=customer.gender,
            birth_date=customer.birth_date,
            marital_status=customer.marital_status,
            address=(
                AddressPayload.from_domain(customer.address)
                if customer.address else None
            ),
            phones=customer.phones,
            email=customer.email,
            customer_type=customer.customer_type,
        )
