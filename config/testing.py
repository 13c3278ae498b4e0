SECRET_KEY = "test-secret"

DEBUG = False
TESTING = True
LOG_LEVEL = "WARNING"

DEFAULT_HOURLY_RATE = 20.0

ENTRIES_CSV_PATH = ""
