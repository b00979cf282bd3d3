import os

SECRET_KEY = os.getenv("SECRET_KEY", "please-set-SECRET_KEY")

API_URL = os.getenv("API_URL", "http://localhost:8000")
REQUEST_TIMEOUT = float(os.getenv("REQUEST_TIMEOUT", "10"))

FANOUT_WORKERS = int(os.getenv("FANOUT_WORKERS", "8"))

TIMEZONE = os.getenv("TIMEZONE", "UTC")

TOKEN_FILE = os.getenv("TOKEN_FILE", os.path.expanduser("~/.hr_console/session.json"))

DEBUG = False
