from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Mapping


@dataclass(frozen=True)
class Employee:
    """Employee record as returned by the backend.

    Immutable on the client: it is only created or deleted, never updated.
    """

    id: int
    full_name: str
    email: str
    department: str

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> "Employee":
        return cls(
            id=int(data["id"]),
            full_name=str(data.get("full_name") or ""),
            email=str(data.get("email") or ""),
            department=str(data.get("department") or ""),
        )

    def to_dict(self) -> dict:
        return {
            "id": self.id,
            "full_name": self.full_name,
            "email": self.email,
            "department": self.department,
        }
