"""Customer Service Package: immutable customer entities behind an async CRUD API.

Invariants:
    - Package root contains no executable code (import side-effects prohibited)
"""
