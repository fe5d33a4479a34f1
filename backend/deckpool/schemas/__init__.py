"""Pydantic Schemas: request/response validation for API endpoints.

Invariants:
    - Schemas validate at the system boundary (user input, API responses)

Design Decisions:
    - Separate from core/pool_snapshot.py: schemas are API contracts, snapshots are the on-disk record
"""
