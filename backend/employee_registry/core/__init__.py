"""Core Layer — record store and outcome types, no IO, no async, no FastAPI.

Invariants:
    - No module in core/ imports from services/, api/, or infrastructure/

Design Decisions:
    - Functional core separated from the HTTP shell (ADR: impureim sandwich)
"""
