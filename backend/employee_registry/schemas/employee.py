"""Employee Schemas — Pydantic models for request bodies at the API boundary.

Invariants:
    - Bodies must be JSON objects; anything else is a validation error
    - "id", when sent, must be a string; "department", when sent, a string or null
    - Unknown attributes are accepted and stored as-is (open attribute set)

Design Decisions:
    - extra="allow" over a fixed field list: the record shape belongs to clients,
      the core only interprets "id" and "department"
    - to_record() uses exclude_unset so omitted fields stay omitted; a partial
      update must not reset attributes the client never mentioned
"""

from typing import Any

from pydantic import BaseModel, ConfigDict


class EmployeeCreate(BaseModel):
    """Candidate record — id optional, server assigns one when omitted."""
    model_config = ConfigDict(extra="allow")

    id: str | None = None
    department: str | None = None

    def to_record(self) -> dict[str, Any]:
        return self.model_dump(exclude_unset=True)


class EmployeeUpdate(BaseModel):
    """Partial record — only the attributes present are merged."""
    model_config = ConfigDict(extra="allow")

    id: str | None = None  # ignored by the store: ids are immutable
    department: str | None = None

    def to_changes(self) -> dict[str, Any]:
        return self.model_dump(exclude_unset=True)
