"""Domain Types: identifier and enumerations shared by entities, schemas and storage.

Invariants:
    - CustomerId wraps a UUID; it is assigned by the repository, never by callers
    - Enum values equal member names (the wire and the database store the name)
    - parse_customer_id never raises: a malformed token is an unknown customer

Design Decisions:
    - NewType over a wrapper class: zero runtime cost, full type-checker support
    - str Enums: serialize to JSON without custom encoders
"""

from enum import Enum
from typing import NewType
from uuid import UUID, uuid4


# ─── Identity Types ──────────────────────────────────────────────

CustomerId = NewType("CustomerId", UUID)


def new_customer_id() -> CustomerId:
    """Allocate a fresh, globally-unique customer identifier."""
    return CustomerId(uuid4())


def parse_customer_id(token: str) -> CustomerId | None:
    """Read an identifier from its string form, None when it is not one."""
    try:
        return CustomerId(UUID(token))
    except (ValueError, TypeError, AttributeError):
        return None


# ─── Enums ───────────────────────────────────────────────────────

class CustomerType(str, Enum):
    """Discriminator: a COMPANY keeps its name in last_name."""
    PERSON = "PERSON"
    COMPANY = "COMPANY"


class Gender(str, Enum):
    MALE = "MALE"
    FEMALE = "FEMALE"


class MaritalStatus(str, Enum):
    SINGLE = "SINGLE"
    MARRIED = "MARRIED"
    SEPARATED = "SEPARATED"
    DIVORCED = "DIVORCED"
    WIDOWED = "WIDOWED"


class PhoneType(str, Enum):
    """Key of the phone mapping: one number per type."""
    HOME = "HOME"
    CELLULAR = "CELLULAR"
    OFFICE = "OFFICE"
    FAX = "FAX"
