from __future__ import annotations

from dataclasses import dataclass
from datetime import date
from typing import Any, Mapping

from ..common.datetime_utils import format_iso_date, parse_iso_date


@dataclass(frozen=True)
class AttendanceRecord:
    """One employee's status for one calendar day.

    `status` stays a plain string so unrecognised values from the backend are kept.
    """

    employee_id: int
    date: date
    status: str

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> "AttendanceRecord":
        raw_date = data["date"]
        return cls(
            employee_id=int(data["employee_id"]),
            date=raw_date if isinstance(raw_date, date) else parse_iso_date(str(raw_date)),
            status=str(data.get("status") or ""),
        )

    def to_dict(self) -> dict:
        return {
            "employee_id": self.employee_id,
            "date": format_iso_date(self.date),
            "status": self.status,
        }


@dataclass(frozen=True)
class EmployeeAttendance:
    """Body of the per-employee attendance endpoint."""

    employee_name: str
    attendance: tuple[AttendanceRecord, ...]

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> "EmployeeAttendance":
        return cls(
            employee_name=str(data.get("employee_name") or ""),
            attendance=tuple(AttendanceRecord.from_dict(r) for r in data.get("attendance") or []),
        )
