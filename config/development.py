import os

SECRET_KEY = os.getenv("SECRET_KEY", "dev-secret-key")

DEBUG = True
LOG_LEVEL = os.getenv("LOG_LEVEL", "DEBUG")

DEFAULT_HOURLY_RATE = float(os.getenv("DEFAULT_HOURLY_RATE", "0"))

# Empty keeps entries in memory only
ENTRIES_CSV_PATH = os.getenv("ENTRIES_CSV_PATH", "data/shift_entries.csv")
