from __future__ import annotations

import contextvars
from concurrent.futures import ThreadPoolExecutor
from datetime import date
from typing import Callable, Optional, Protocol

from ..common.datetime_utils import today_in
from ..common.validators import require_choice
from ..core.constants import DEFAULT_FANOUT_WORKERS
from ..core.enums import AttendanceStatus
from ..core.exceptions import ApiError, SessionExpiredError, ValidationError
from ..employees.directory import EmployeeDirectory
from .aggregation import DashboardSnapshot, EmployeeHistory, build_dashboard, employee_history
from .model import AttendanceRecord, EmployeeAttendance


class AttendanceGateway(Protocol):
    def mark_attendance(self, *, employee_id: int, work_date: date, status: str) -> AttendanceRecord:
        raise NotImplementedError

    def get_attendance(self, employee_id: int) -> EmployeeAttendance:
        raise NotImplementedError


class AttendanceService:
    """Use cases: mark attendance, view one employee's history, load the dashboard."""

    def __init__(
        self,
        gateway: AttendanceGateway,
        directory: EmployeeDirectory,
        *,
        clock: Optional[Callable[[], date]] = None,
        max_workers: int = DEFAULT_FANOUT_WORKERS,
        debug: bool = False,
    ):
        self._gateway = gateway
        self._directory = directory
        self._clock = clock or today_in
        self._max_workers = max(1, int(max_workers))
        self._debug = debug

    def today(self) -> date:
        return self._clock()

    def mark(
        self,
        employee_id: Optional[int],
        *,
        work_date: Optional[date] = None,
        status: str = AttendanceStatus.PRESENT.value,
    ) -> AttendanceRecord:
        if not employee_id:
            raise ValidationError("Employee is required")
        status = require_choice(str(status), "Status", AttendanceStatus)
        return self._gateway.mark_attendance(
            employee_id=int(employee_id),
            work_date=work_date or self.today(),
            status=status,
        )

    def history(self, employee_id: int) -> EmployeeHistory:
        try:
            data = self._gateway.get_attendance(int(employee_id))
        except SessionExpiredError:
            raise
        except ApiError as e:
            self._log(f"history for employee {employee_id} unavailable: {e}")
            return employee_history(())
        return employee_history(data.attendance, data.employee_name)

    def _records_for(self, employee_id: int) -> tuple[AttendanceRecord, ...]:
        try:
            return self._gateway.get_attendance(employee_id).attendance
        except SessionExpiredError:
            raise
        except ApiError as e:
            # One employee's failure must not abort the aggregate.
            self._log(f"attendance for employee {employee_id} skipped: {e}")
            return ()

    def load_dashboard(self) -> DashboardSnapshot:
        employees = self._directory.load()
        records: list[AttendanceRecord] = []
        expired: Optional[SessionExpiredError] = None
        if employees:
            workers = min(self._max_workers, len(employees))
            with ThreadPoolExecutor(max_workers=workers) as pool:
                # Each task runs in a copy of the caller's context so a forced logout
                # can still reach the request-bound token store.
                futures = [
                    pool.submit(contextvars.copy_context().run, self._records_for, e.id)
                    for e in employees
                ]
                for future in futures:
                    try:
                        records.extend(future.result())
                    except SessionExpiredError as e:
                        expired = e
        if expired is not None:
            raise expired
        return build_dashboard(employees, records, self.today())

    def _log(self, message: str) -> None:
        if self._debug:
            print(f"[hr-console] {message}")
