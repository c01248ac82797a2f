"""API Layer - GraphQL schema, REST health checks, and error handlers.

Invariants:
    - Routers registered explicitly in main.py (no auto-discovery)
    - Resolvers contain no business logic; they delegate to the Registrar

Design Decisions:
    - Thin resolvers over the Registrar facade
"""
