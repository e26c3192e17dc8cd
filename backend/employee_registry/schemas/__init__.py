"""Pydantic Schemas — request body validation for API endpoints.

Invariants:
    - Schemas validate at system boundary (request bodies only)

Design Decisions:
    - Separate from core/: schemas are API contracts, records are plain dicts
"""
