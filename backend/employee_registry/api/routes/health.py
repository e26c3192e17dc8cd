"""Health Probe — liveness endpoint for container orchestration.

Invariants:
    - GET /api/health always returns 200 if the process is up
    - Reports the current number of stored employees
"""

from fastapi import APIRouter, Depends, status

from employee_registry import __version__
from employee_registry.core.record_store import RecordStore
from employee_registry.infrastructure.record_store_provider import get_record_store

router = APIRouter(prefix="/api/health", tags=["health"])


@router.get("", status_code=status.HTTP_200_OK)
async def health_check(store: RecordStore = Depends(get_record_store)):
    """Basic liveness probe. Returns 200 if the process is up."""
    return {
        "status": "healthy",
        "service": "employee-registry",
        "version": __version__,
        "employees": len(store),
    }
