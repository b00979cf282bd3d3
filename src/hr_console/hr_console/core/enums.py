from __future__ import annotations

from enum import Enum


class SessionState(str, Enum):
    """The two states of the client session."""

    ANONYMOUS = "anonymous"
    AUTHENTICATED = "authenticated"


class AttendanceStatus(str, Enum):
    """Attendance statuses the backend accepts.

    Records keep their raw status string, so values outside this enum still flow
    through aggregation untouched.
    """

    PRESENT = "Present"
    ABSENT = "Absent"
    LATE = "Late"
