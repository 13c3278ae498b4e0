import os

SECRET_KEY = os.getenv("SECRET_KEY", "please-set-SECRET_KEY")

DEBUG = False
LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO")

DEFAULT_HOURLY_RATE = float(os.getenv("DEFAULT_HOURLY_RATE", "0"))

ENTRIES_CSV_PATH = os.getenv("ENTRIES_CSV_PATH", "data/shift_entries.csv")
