"""ORM Models: SQLAlchemy declarative models for persisted entities.

Invariants:
    - All models inherit from Base (db/base.py)
    - All models imported here so Base.metadata is complete before create_all
"""

from customer_service.models.customer import CustomerRecord  # noqa: F401
