"""API Layer — FastAPI routes, error handlers and request logging.

Invariants:
    - Routes registered explicitly in main.py (no auto-discovery)
    - All endpoints return JSON responses

Design Decisions:
    - Thin routes delegate to services/employee_adapter.py
"""
