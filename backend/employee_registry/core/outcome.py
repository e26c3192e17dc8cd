"""Store Outcomes — tagged success/failure values returned by the record store.

Invariants:
    - Every store operation returns exactly one of Success or Failure
    - Failure.kind is a FailureKind member — no raw string matching
    - Failure.message is human-readable and names the offending identifier

Design Decisions:
    - Return values over exceptions: the store never raises for expected
      failures, the adapter decides how each kind surfaces (ADR: functional core)
    - Frozen dataclasses: outcomes are values, never mutated after creation
"""

from dataclasses import dataclass
from enum import Enum
from typing import Generic, TypeVar, Union

T = TypeVar("T")


class FailureKind(str, Enum):
    """Failure kinds the store can report."""
    ALREADY_EXISTS = "already_exists"
    NOT_FOUND = "not_found"
    INTERNAL = "internal"


@dataclass(frozen=True)
class Success(Generic[T]):
    """Operation completed — value holds the result."""
    value: T

    @property
    def ok(self) -> bool:
        return True


@dataclass(frozen=True)
class Failure:
    """Operation rejected — kind says why, identifier says which record."""
    kind: FailureKind
    message: str
    identifier: str | None = None

    @property
    def ok(self) -> bool:
        return False


Outcome = Union[Success[T], Failure]


def already_exists(identifier: str) -> Failure:
    return Failure(
        FailureKind.ALREADY_EXISTS,
        f"Employee with id {identifier} already exists",
        identifier,
    )


def not_found(identifier: str) -> Failure:
    return Failure(
        FailureKind.NOT_FOUND,
        f"Employee with id {identifier} not found",
        identifier,
    )
