import os

SECRET_KEY = os.getenv("SECRET_KEY", "dev-secret-key")

# REST backend that stores employees/attendance
API_URL = os.getenv("API_URL", "http://localhost:8000")
REQUEST_TIMEOUT = float(os.getenv("REQUEST_TIMEOUT", "10"))

# Parallel attendance fetches when building the dashboard
FANOUT_WORKERS = int(os.getenv("FANOUT_WORKERS", "8"))

# Canonical timezone for "today" and day bucketing
TIMEZONE = os.getenv("TIMEZONE", "UTC")

# Token file used by the command-line scripts
TOKEN_FILE = os.getenv("TOKEN_FILE", os.path.expanduser("~/.hr_console/session.json"))

DEBUG = True
