"""Pydantic Schemas: wire contracts for the HTTP boundary.

Invariants:
    - Wire field names are lower_snake_case; None fields are omitted on output
    - Unknown incoming fields are ignored, never rejected

Design Decisions:
    - Separate from core entities: schemas are API contracts, entities are the domain
"""
