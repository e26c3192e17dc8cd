"""Record Store Provider — creates the store and hands it to route handlers.

Invariants:
    - Exactly one RecordStore per application, created in the lifespan
    - Routes obtain the store only through the get_record_store dependency

Design Decisions:
    - Store kept on app.state instead of a module-level singleton: ownership is
      explicit and tests swap it via app.dependency_overrides
"""

import logging

from fastapi import FastAPI, Request

from employee_registry.core.record_store import RecordStore

logger = logging.getLogger(__name__)


def init_record_store(app: FastAPI) -> RecordStore:
    """Create an empty store and attach it to the application."""
    store = RecordStore()
    app.state.record_store = store
    logger.info("Record store initialized")
    return store


def get_record_store(request: Request) -> RecordStore:
    """FastAPI dependency — the store owned by the running application."""
    return request.app.state.record_store
