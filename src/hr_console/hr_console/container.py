from __future__ import annotations

from dataclasses import dataclass
from typing import Optional

import requests

from .api.client import ApiGateway
from .attendance.service import AttendanceService
from .common.datetime_utils import today_in
from .core.constants import DEFAULT_FANOUT_WORKERS, DEFAULT_REQUEST_TIMEOUT
from .employees.directory import EmployeeDirectory
from .session.manager import SessionManager
from .session.store import TokenStore


@dataclass(frozen=True)
class Container:
    session: SessionManager
    gateway: ApiGateway
    directory: EmployeeDirectory
    attendance_service: AttendanceService


def build_container(
    *,
    api_url: str,
    token_store: TokenStore,
    http: Optional[requests.Session] = None,
    timeout: float = DEFAULT_REQUEST_TIMEOUT,
    timezone: str = "UTC",
    fanout_workers: int = DEFAULT_FANOUT_WORKERS,
    debug: bool = False,
) -> Container:
    session = SessionManager(token_store)
    gateway = ApiGateway(api_url, session, http=http, timeout=timeout)
    session.bind(gateway.authenticate)

    directory = EmployeeDirectory(gateway, debug=debug)
    session.subscribe(directory.on_session_change)
    attendance_service = AttendanceService(
        gateway,
        directory,
        clock=lambda: today_in(timezone),
        max_workers=fanout_workers,
        debug=debug,
    )

    return Container(
        session=session,
        gateway=gateway,
        directory=directory,
        attendance_service=attendance_service,
    )
