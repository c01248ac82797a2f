"""Infrastructure Layer - third-party wrappers and cross-cutting concerns.

Invariants:
    - Infrastructure never imports from core/ domain logic
    - Library exceptions are mapped before crossing into services/

Design Decisions:
    - Thin wrappers over bcrypt and python-jose so both can be swapped in one place
"""
