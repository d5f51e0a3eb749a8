"""Core Layer: entities, builders, identifiers and boundary contracts.

Invariants:
    - No module in core/ imports from api/, infrastructure/, models/ or db/
    - Nothing in core/ performs IO; repository contracts are Protocols only
"""
