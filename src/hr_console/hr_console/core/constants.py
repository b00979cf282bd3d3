"""Constants and defaults.

Note: Keep constants here to avoid magic numbers spread across code.
"""

TOKEN_KEY = "token"
DEFAULT_TREND_DAYS = 7
DEFAULT_RECENT_EMPLOYEES = 6
DEFAULT_REQUEST_TIMEOUT = 10
DEFAULT_FANOUT_WORKERS = 8

NO_DATA_LABEL = "—"
LOGIN_FAILED_MESSAGE = "Invalid credentials. Please try again."
CREATE_FAILED_MESSAGE = "Failed to create employee."
MARK_FAILED_MESSAGE = "Failed to mark attendance."
