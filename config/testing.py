import os

SHEETS_CONFIG = {
    "url": "",
    "timeout_seconds": 5.0,
    "late_tolerance_field": os.getenv("LATE_TOLERANCE_FIELD", "grace_period"),
}

HOST = "127.0.0.1"
PORT = 3000

DEBUG = False
TESTING = True
LOG_LEVEL = "WARNING"
