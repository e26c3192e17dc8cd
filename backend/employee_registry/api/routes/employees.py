"""Employee Routes — list, read, create, update and delete employee records.

Invariants:
    - Each route extracts path/query/body and makes exactly one adapter call
    - POST returns 201; GET, PATCH and DELETE return 200
    - A missing body is an empty record (POST) or an empty merge (PATCH)
    - Failures surface through the global error handlers (409, 404, 500)

Design Decisions:
    - Partial update is PATCH, not PUT: the body is merged, never replaces the record
    - Store injected with Depends(get_record_store) so tests can swap it
"""

from fastapi import APIRouter, Depends, Query, status

from employee_registry.core.record_store import RecordStore
from employee_registry.infrastructure.record_store_provider import get_record_store
from employee_registry.schemas.employee import EmployeeCreate, EmployeeUpdate
from employee_registry.services import employee_adapter

router = APIRouter(prefix="/api/employees", tags=["employees"])


@router.get("")
async def list_employees(
    department: str | None = Query(None),
    store: RecordStore = Depends(get_record_store),
):
    """List all employees, optionally only those in one department.

    An empty ?department= means no filter.
    """
    return employee_adapter.list_employees(store, department or None)


@router.post("", status_code=status.HTTP_201_CREATED)
async def create_employee(
    body: EmployeeCreate | None = None,
    store: RecordStore = Depends(get_record_store),
):
    """Create an employee; the server assigns an id when none is given."""
    candidate = body.to_record() if body is not None else {}
    return employee_adapter.create_employee(store, candidate)


@router.get("/{employee_id}")
async def get_employee(
    employee_id: str, store: RecordStore = Depends(get_record_store),
):
    return employee_adapter.get_employee(store, employee_id)


@router.patch("/{employee_id}")
async def update_employee(
    employee_id: str,
    body: EmployeeUpdate | None = None,
    store: RecordStore = Depends(get_record_store),
):
    """Merge the given attributes into an existing employee."""
    changes = body.to_changes() if body is not None else {}
    return employee_adapter.update_employee(store, employee_id, changes)


@router.delete("/{employee_id}")
async def delete_employee(
    employee_id: str, store: RecordStore = Depends(get_record_store),
):
    """Delete an employee and return the removed record."""
    return employee_adapter.delete_employee(store, employee_id)
