"""Attendance analytics.

Pure, deterministic transformations over a roster and a collection of attendance
records. Nothing here touches the network; every function returns a new frozen
snapshot.
"""

from __future__ import annotations

import math
from dataclasses import asdict, dataclass
from datetime import date, timedelta
from typing import Iterable, Optional, Sequence

from ..common.datetime_utils import day_name, format_iso_date, long_label, short_label
from ..core.constants import DEFAULT_RECENT_EMPLOYEES, DEFAULT_TREND_DAYS, NO_DATA_LABEL
from ..core.enums import AttendanceStatus
from ..employees.model import Employee
from .model import AttendanceRecord


@dataclass(frozen=True)
class StatusStyle:
    bgcolor: str
    color: str
    chart_color: str


STATUS_STYLES: dict[str, StatusStyle] = {
    AttendanceStatus.PRESENT.value: StatusStyle(bgcolor="#F0FDF4", color="#16A34A", chart_color="#2563EB"),
    AttendanceStatus.ABSENT.value: StatusStyle(bgcolor="#FEF2F2", color="#DC2626", chart_color="#DC2626"),
    AttendanceStatus.LATE.value: StatusStyle(bgcolor="#FFFBEB", color="#D97706", chart_color="#D97706"),
}
NEUTRAL_STYLE = StatusStyle(bgcolor="#F8FAFC", color="#64748B", chart_color="#94A3B8")


def status_style(status: str) -> StatusStyle:
    """Display style for a status; unknown strings get the neutral style."""
    return STATUS_STYLES.get(str(status), NEUTRAL_STYLE)


@dataclass(frozen=True)
class StatusTally:
    present: int = 0
    absent: int = 0
    late: int = 0

    @classmethod
    def of(cls, records: Iterable[AttendanceRecord]) -> "StatusTally":
        present = absent = late = 0
        for r in records:
            if r.status == AttendanceStatus.PRESENT:
                present += 1
            elif r.status == AttendanceStatus.ABSENT:
                absent += 1
            elif r.status == AttendanceStatus.LATE:
                late += 1
        return cls(present=present, absent=absent, late=late)


@dataclass(frozen=True)
class TodaySnapshot:
    date: date
    present: int
    absent: int
    late: int
    total: int

    @property
    def rate(self) -> Optional[float]:
        """Share of today's records marked Present; None when there are none."""
        if self.total == 0:
            return None
        return self.present / self.total

    @property
    def rate_percent(self) -> Optional[int]:
        rate = self.rate
        if rate is None:
            return None
        return int(math.floor(rate * 100 + 0.5))

    @property
    def rate_label(self) -> str:
        pct = self.rate_percent
        return NO_DATA_LABEL if pct is None else f"{pct}%"

    def to_dict(self) -> dict:
        return {
            "date": format_iso_date(self.date),
            "present": self.present,
            "absent": self.absent,
            "late": self.late,
            "total": self.total,
            "rate": self.rate,
            "rate_label": self.rate_label,
        }


@dataclass(frozen=True)
class DayTrend:
    date: date
    label: str
    day_name: str
    present: int
    absent: int
    late: int

    def to_dict(self) -> dict:
        return {
            "date": format_iso_date(self.date),
            "label": self.label,
            "day_name": self.day_name,
            "Present": self.present,
            "Absent": self.absent,
            "Late": self.late,
        }


@dataclass(frozen=True)
class StatusCount:
    status: str
    count: int

    @property
    def style(self) -> StatusStyle:
        return status_style(self.status)

    def to_dict(self) -> dict:
        return {"name": self.status, "value": self.count, "color": self.style.chart_color}


@dataclass(frozen=True)
class DepartmentCount:
    department: str
    count: int

    def to_dict(self) -> dict:
        return {"dept": self.department, "count": self.count}


@dataclass(frozen=True)
class EmployeeHistory:
    employee_name: str
    records: tuple[AttendanceRecord, ...]
    present: int
    absent: int
    late: int

    @property
    def is_empty(self) -> bool:
        return not self.records

    def to_dict(self) -> dict:
        return {
            "employee_name": self.employee_name,
            "totals": {"Present": self.present, "Absent": self.absent, "Late": self.late},
            "records": [
                {
                    **r.to_dict(),
                    "label": long_label(r.date),
                    "day_name": day_name(r.date),
                    "style": asdict(status_style(r.status)),
                }
                for r in self.records
            ],
        }


@dataclass(frozen=True)
class DashboardSnapshot:
    today: TodaySnapshot
    trend: tuple[DayTrend, ...]
    statuses: tuple[StatusCount, ...]
    departments: tuple[DepartmentCount, ...]
    total_employees: int
    recent_employees: tuple[Employee, ...]

    @property
    def department_count(self) -> int:
        return len(self.departments)

    def to_dict(self) -> dict:
        return {
            "total_employees": self.total_employees,
            "department_count": self.department_count,
            "today": self.today.to_dict(),
            "trend": [d.to_dict() for d in self.trend],
            "statuses": [s.to_dict() for s in self.statuses],
            "departments": [d.to_dict() for d in self.departments],
            "recent_employees": [e.to_dict() for e in self.recent_employees],
        }


def today_snapshot(records: Iterable[AttendanceRecord], today: date) -> TodaySnapshot:
    todays = [r for r in records if r.date == today]
    tally = StatusTally.of(todays)
    return TodaySnapshot(
        date=today,
        present=tally.present,
        absent=tally.absent,
        late=tally.late,
        total=len(todays),
    )


def weekly_trend(
    records: Iterable[AttendanceRecord],
    today: date,
    days: int = DEFAULT_TREND_DAYS,
) -> tuple[DayTrend, ...]:
    """Dense per-day counts for the `days` calendar days ending today, oldest first."""
    by_date: dict[date, list[AttendanceRecord]] = {}
    for r in records:
        by_date.setdefault(r.date, []).append(r)

    out = []
    for i in range(days):
        d = today - timedelta(days=days - 1 - i)
        tally = StatusTally.of(by_date.get(d, ()))
        out.append(
            DayTrend(
                date=d,
                label=short_label(d),
                day_name=day_name(d),
                present=tally.present,
                absent=tally.absent,
                late=tally.late,
            )
        )
    return tuple(out)


def status_distribution(records: Iterable[AttendanceRecord]) -> tuple[StatusCount, ...]:
    """Sparse all-time counts keyed by the literal status string, first-seen order."""
    counts: dict[str, int] = {}
    for r in records:
        counts[r.status] = counts.get(r.status, 0) + 1
    return tuple(StatusCount(status=s, count=c) for s, c in counts.items())


def department_distribution(employees: Iterable[Employee]) -> tuple[DepartmentCount, ...]:
    counts: dict[str, int] = {}
    for e in employees:
        counts[e.department] = counts.get(e.department, 0) + 1
    return tuple(DepartmentCount(department=d, count=c) for d, c in counts.items())


def sort_history(records: Iterable[AttendanceRecord]) -> tuple[AttendanceRecord, ...]:
    """Most recent first; equal dates keep their input order."""
    return tuple(sorted(records, key=lambda r: r.date, reverse=True))


def employee_history(records: Iterable[AttendanceRecord], employee_name: str = "") -> EmployeeHistory:
    items = list(records)
    tally = StatusTally.of(items)
    return EmployeeHistory(
        employee_name=employee_name,
        records=sort_history(items),
        present=tally.present,
        absent=tally.absent,
        late=tally.late,
    )


def build_dashboard(
    employees: Sequence[Employee],
    records: Sequence[AttendanceRecord],
    today: date,
    *,
    recent_limit: int = DEFAULT_RECENT_EMPLOYEES,
) -> DashboardSnapshot:
    return DashboardSnapshot(
        today=today_snapshot(records, today),
        trend=weekly_trend(records, today),
        statuses=status_distribution(records),
        departments=department_distribution(employees),
        total_employees=len(employees),
        recent_employees=tuple(employees[:recent_limit]),
    )
