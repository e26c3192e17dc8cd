"""Boundary Protocols — contract between the request adapter and the record store.

Invariants:
    - The adapter depends on EmployeeStore, never on RecordStore directly
    - Every method returns an Outcome; none raises for expected failures

Design Decisions:
    - Protocol over ABC: structural subtyping, RecordStore needs no base class
    - Synchronous methods: the in-memory store never awaits, so each call is
      atomic relative to other requests on the event loop
"""

from typing import Any, Protocol

from employee_registry.core.domain_types import Record
from employee_registry.core.outcome import Outcome


class EmployeeStore(Protocol):
    """Contract for employee record storage — implemented by RecordStore."""
    def add(self, record: Record) -> Outcome[Record]: ...
    def get_all(self, department: str | None = None) -> Outcome[list[Record]]: ...
    def get(self, employee_id: str) -> Outcome[Record]: ...
    def update(
        self, employee_id: str, changes: dict[str, Any],
    ) -> Outcome[Record]: ...
    def delete(self, employee_id: str) -> Outcome[Record]: ...
