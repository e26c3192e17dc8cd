"""Record Store — in-memory employee records keyed by identifier.

Invariants:
    - Every stored record's "id" equals the key it is stored under
    - add never overwrites: a taken identifier yields ALREADY_EXISTS
    - update and delete on a missing identifier yield NOT_FOUND and change nothing
    - The identifier is immutable after creation (update ignores "id")
    - Records handed to callers are shallow copies; the mapping is only
      mutated through the four operations

Design Decisions:
    - dict keeps insertion order, so get_all lists records in creation order
      without a separate index (callers must not rely on it)
    - Expected failures are returned as Failure values, not raised
      (see core/outcome.py)
    - A single lock guards the mapping: check-and-insert in add stays atomic
      even if handlers run on a thread pool instead of the event loop
"""

import threading
from typing import Any
from uuid import uuid4

from employee_registry.core.domain_types import EmployeeId, Record
from employee_registry.core.outcome import (
    Outcome, Success, already_exists, not_found,
)

ID_FIELD = "id"
DEPARTMENT_FIELD = "department"


def generate_employee_id() -> EmployeeId:
    """Random 128-bit identifier in canonical UUID text form."""
    return EmployeeId(str(uuid4()))


class RecordStore:
    """Process-lifetime mapping of employee id → record."""

    def __init__(self) -> None:
        self._records: dict[EmployeeId, Record] = {}
        self._lock = threading.Lock()

    def __len__(self) -> int:
        return len(self._records)

    def __contains__(self, employee_id: object) -> bool:
        return employee_id in self._records

    def add(self, record: Record) -> Outcome[Record]:
        """Insert a new record, assigning an id when the caller omitted one."""
        candidate = dict(record)
        raw_id = candidate.get(ID_FIELD)
        employee_id = (
            generate_employee_id() if raw_id is None else EmployeeId(raw_id)
        )
        with self._lock:
            if employee_id in self._records:
                return already_exists(employee_id)
            candidate[ID_FIELD] = employee_id
            self._records[employee_id] = candidate
        return Success(dict(candidate))

    def get_all(self, department: str | None = None) -> Outcome[list[Record]]:
        """Snapshot of all records, narrowed to an exact department match."""
        with self._lock:
            records = [dict(r) for r in self._records.values()]
        if department is not None:
            records = [
                r for r in records if r.get(DEPARTMENT_FIELD) == department
            ]
        return Success(records)

    def get(self, employee_id: str) -> Outcome[Record]:
        with self._lock:
            existing = self._records.get(EmployeeId(employee_id))
        if existing is None:
            return not_found(employee_id)
        return Success(dict(existing))

    def update(
        self, employee_id: str, changes: dict[str, Any],
    ) -> Outcome[Record]:
        """Shallow-merge changes over the stored record."""
        with self._lock:
            existing = self._records.get(EmployeeId(employee_id))
            if existing is None:
                return not_found(employee_id)
            existing.update(
                (k, v) for k, v in changes.items() if k != ID_FIELD
            )
            return Success(dict(existing))

    def delete(self, employee_id: str) -> Outcome[Record]:
        """Remove the record and return it as it was stored."""
        with self._lock:
            removed = self._records.pop(EmployeeId(employee_id), None)
        if removed is None:
            return not_found(employee_id)
        return Success(removed)
