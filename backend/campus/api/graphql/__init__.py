"""GraphQL Transport - strawberry types, inputs, context, and schema.

Invariants:
    - Only schema.py builds the strawberry Schema
    - Domain errors reach clients with extensions.code set (see DomainErrorExtension)
"""
