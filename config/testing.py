SECRET_KEY = "test-secret"

API_URL = "http://backend.test"
REQUEST_TIMEOUT = 5

FANOUT_WORKERS = 4

TIMEZONE = "UTC"

TOKEN_FILE = "session.test.json"

DEBUG = False
TESTING = True
