from __future__ import annotations

from typing import Optional, Protocol

from ..common.validators import require_non_empty
from ..core.enums import SessionState
from ..core.exceptions import ApiError, SessionExpiredError
from .model import Employee


class EmployeeGateway(Protocol):
    def list_employees(self) -> list[Employee]:
        raise NotImplementedError

    def create_employee(self, *, full_name: str, email: str, department: str) -> Employee:
        raise NotImplementedError

    def delete_employee(self, employee_id: int) -> None:
        raise NotImplementedError


class EmployeeDirectory:
    """Holds the last-loaded roster and answers filter queries without re-fetching."""

    def __init__(self, gateway: EmployeeGateway, *, debug: bool = False):
        self._gateway = gateway
        self._employees: tuple[Employee, ...] = ()
        self._debug = debug

    @property
    def employees(self) -> tuple[Employee, ...]:
        return self._employees

    def on_session_change(self, state: SessionState) -> None:
        """Drop the cached roster once the session ends."""
        if state == SessionState.ANONYMOUS:
            self._employees = ()

    def load(self) -> list[Employee]:
        """Replace the roster with a fresh fetch; keep the old one on failure.

        Session expiry still propagates so the caller can send the user to login.
        """
        try:
            self._employees = tuple(self._gateway.list_employees())
        except SessionExpiredError:
            raise
        except ApiError as e:
            if self._debug:
                print(f"[hr-console] roster load failed, keeping {len(self._employees)} cached: {e}")
        return list(self._employees)

    def filter(self, query: Optional[str]) -> list[Employee]:
        q = (query or "").strip().lower()
        if not q:
            return list(self._employees)
        return [
            e
            for e in self._employees
            if q in e.full_name.lower() or q in e.email.lower() or q in e.department.lower()
        ]

    def create(self, *, full_name: str, email: str, department: str) -> Employee:
        employee = self._gateway.create_employee(
            full_name=require_non_empty(full_name, "Full name"),
            email=require_non_empty(email, "Email"),
            department=require_non_empty(department, "Department"),
        )
        self.load()
        return employee

    def delete(self, employee_id: int) -> None:
        self._gateway.delete_employee(int(employee_id))
        self.load()
