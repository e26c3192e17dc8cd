"""Infrastructure Layer — process-wide resources and cross-cutting concerns.

Invariants:
    - Owns creation of the record store and logging setup
    - Never implements domain rules (those live in core/)
"""
