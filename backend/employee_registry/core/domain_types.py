"""Domain Types — named types for employee records and their identifiers.

Invariants:
    - EmployeeId wraps the string identifier — never a bare str in store signatures
    - Record is an open JSON object: "id" and "department" are the only
      attributes the core interprets

Design Decisions:
    - NewType over dataclass wrappers: zero runtime cost, full type-checker support
    - Record stays a plain dict: attribute set is open, contents are not validated
"""

from typing import Any, NewType


# ─── Identity Types ──────────────────────────────────────────────

EmployeeId = NewType("EmployeeId", str)


# ─── Value Types ─────────────────────────────────────────────────

Record = dict[str, Any]
