"""Infrastructure Layer: database access, token storage and logging.

Invariants:
    - Storage failures are mapped to StorageError before leaving this layer
"""
