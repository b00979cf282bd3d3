from __future__ import annotations

from datetime import date
from typing import Any, Callable, Optional, TypeVar

import requests

from ..attendance.model import AttendanceRecord, EmployeeAttendance
from ..common.datetime_utils import format_iso_date
from ..core.constants import DEFAULT_REQUEST_TIMEOUT, LOGIN_FAILED_MESSAGE
from ..core.exceptions import ApiError, AuthenticationError, SessionExpiredError, TransportError
from ..employees.model import Employee
from ..session.manager import SessionManager


def _error_detail(resp: requests.Response) -> Optional[str]:
    try:
        body = resp.json()
    except ValueError:
        return None
    if isinstance(body, dict) and body.get("detail"):
        detail = body["detail"]
        # FastAPI validation errors come as a list of {loc, msg, ...}.
        if isinstance(detail, list):
            return "; ".join(str(d.get("msg", d)) if isinstance(d, dict) else str(d) for d in detail)
        return str(detail)
    return None


T = TypeVar("T")


def _parse(resp: requests.Response, build: Callable[[Any], T], what: str) -> T:
    """Decode a 2xx body; a malformed body counts as a failed call."""
    try:
        return build(resp.json())
    except (ValueError, KeyError, TypeError, AttributeError) as e:
        raise ApiError(f"malformed {what} response: {e}", status_code=resp.status_code) from e


class ApiGateway:
    """Single choke point for every call to the REST backend.

    The bearer token is read from the session at send time. A 401 on any call
    resets the session before the error reaches the caller.
    """

    def __init__(
        self,
        base_url: str,
        session: SessionManager,
        *,
        http: Optional[requests.Session] = None,
        timeout: float = DEFAULT_REQUEST_TIMEOUT,
    ):
        self._base_url = base_url.rstrip("/")
        self._session = session
        self._http = http or requests.Session()
        self._timeout = timeout

    @property
    def session(self) -> SessionManager:
        return self._session

    def _headers(self) -> dict[str, str]:
        token = self._session.token
        return {"Authorization": f"Bearer {token}"} if token else {}

    def request(self, method: str, path: str, **kwargs: Any) -> requests.Response:
        headers = {**kwargs.pop("headers", {}), **self._headers()}
        try:
            resp = self._http.request(
                method,
                f"{self._base_url}{path}",
                headers=headers,
                timeout=self._timeout,
                **kwargs,
            )
        except requests.RequestException as e:
            raise TransportError(f"{method} {path} failed: {e}") from e

        if resp.status_code == 401:
            self._session.expire()
            raise SessionExpiredError(
                f"{method} {path} unauthorized",
                status_code=401,
                detail=_error_detail(resp),
            )
        if not resp.ok:
            raise ApiError(
                f"{method} {path} returned {resp.status_code}",
                status_code=resp.status_code,
                detail=_error_detail(resp),
            )
        return resp

    # Auth
    def authenticate(self, username: str, password: str) -> str:
        try:
            resp = self._http.post(
                f"{self._base_url}/auth/login",
                data={"username": username, "password": password},
                headers={"Content-Type": "application/x-www-form-urlencoded"},
                timeout=self._timeout,
            )
        except requests.RequestException as e:
            raise TransportError(f"POST /auth/login failed: {e}") from e

        if not resp.ok:
            raise AuthenticationError(_error_detail(resp) or LOGIN_FAILED_MESSAGE)
        return _parse(resp, lambda body: str(body["access_token"]), "login")

    # Employees
    def list_employees(self) -> list[Employee]:
        resp = self.request("GET", "/employees/")
        return _parse(resp, lambda body: [Employee.from_dict(e) for e in body], "employee list")

    def create_employee(self, *, full_name: str, email: str, department: str) -> Employee:
        resp = self.request(
            "POST",
            "/employees/",
            json={"full_name": full_name, "email": email, "department": department},
        )
        return _parse(resp, Employee.from_dict, "employee")

    def delete_employee(self, employee_id: int) -> None:
        self.request("DELETE", f"/employees/{int(employee_id)}")

    # Attendance
    def mark_attendance(self, *, employee_id: int, work_date: date, status: str) -> AttendanceRecord:
        resp = self.request(
            "POST",
            "/attendance/",
            json={"employee_id": int(employee_id), "date": format_iso_date(work_date), "status": status},
        )
        return _parse(resp, AttendanceRecord.from_dict, "attendance")

    def get_attendance(self, employee_id: int) -> EmployeeAttendance:
        resp = self.request("GET", f"/attendance/employee/{int(employee_id)}")
        return _parse(resp, EmployeeAttendance.from_dict, "attendance history")
