"""Services Layer - auth gate, resolver facade, and demo seed.

Invariants:
    - Registrar is the only component the API layer talks to
    - All shared state is owned by one Registrar instance (no module globals)

Design Decisions:
    - One file per concern for locality
"""
