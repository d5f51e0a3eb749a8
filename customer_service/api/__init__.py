"""API Layer: FastAPI routes, dependencies and error handlers.

Invariants:
    - Routes registered explicitly in main.py (no auto-discovery)
    - Routes translate between wire schemas and core entities; storage goes
      through the CustomerRepository protocol
"""
