"""Employee Adapter — maps the four HTTP actions onto record store calls.

Invariants:
    - One function per action, each making exactly one store call
    - Success values are returned unchanged to the route
    - Failure kinds are translated exhaustively: ALREADY_EXISTS → 409,
      NOT_FOUND → 404, INTERNAL → 500
    - Never touches HTTP objects — routes extract path/query/body first

Design Decisions:
    - Adapter is the sole translator from Failure to EmployeeRegistryError;
      the store stays free of HTTP concerns (ADR: functional core, imperative shell)
    - match over FailureKind instead of isinstance chains: a new kind without
      a case lands in the catch-all branch rather than passing silently
"""

import logging
from typing import Any, TypeVar

from employee_registry.core.domain_types import Record
from employee_registry.core.errors import (
    EmployeeAlreadyExistsError,
    EmployeeNotFoundError,
    EmployeeRegistryError,
    InternalRegistryError,
)
from employee_registry.core.outcome import Failure, FailureKind, Outcome
from employee_registry.core.repository_protocols import EmployeeStore

logger = logging.getLogger(__name__)

T = TypeVar("T")


def to_http_error(failure: Failure) -> EmployeeRegistryError:
    """Translate a store Failure into the error the API layer renders."""
    match failure.kind:
        case FailureKind.ALREADY_EXISTS:
            return EmployeeAlreadyExistsError(failure.message, failure.identifier)
        case FailureKind.NOT_FOUND:
            return EmployeeNotFoundError(failure.message, failure.identifier)
        case _:
            return InternalRegistryError()


def unwrap(outcome: Outcome[T]) -> T:
    """Return the success value or raise the translated error."""
    if isinstance(outcome, Failure):
        raise to_http_error(outcome)
    return outcome.value


def list_employees(
    store: EmployeeStore, department: str | None = None,
) -> list[Record]:
    return unwrap(store.get_all(department))


def get_employee(store: EmployeeStore, employee_id: str) -> Record:
    return unwrap(store.get(employee_id))


def create_employee(store: EmployeeStore, candidate: Record) -> Record:
    created = unwrap(store.add(candidate))
    logger.info(
        "Employee created", extra={"employee_id": created["id"]},
    )
    return created


def update_employee(
    store: EmployeeStore, employee_id: str, changes: dict[str, Any],
) -> Record:
    return unwrap(store.update(employee_id, changes))


def delete_employee(store: EmployeeStore, employee_id: str) -> Record:
    deleted = unwrap(store.delete(employee_id))
    logger.info("Employee deleted", extra={"employee_id": employee_id})
    return deleted
