import os

# Google Apps Script web app that serves the logs/employees/shifts sheets
SHEETS_CONFIG = {
    "url": os.getenv("SHEETS_URL", ""),
    "timeout_seconds": float(os.getenv("SHEETS_TIMEOUT_SECONDS", "30")),
    # grace_period | late_threshold: which shift column is the late tolerance
    "late_tolerance_field": os.getenv("LATE_TOLERANCE_FIELD", "grace_period"),
}

HOST = os.getenv("HOST", "127.0.0.1")
PORT = int(os.getenv("PORT", "3000"))

DEBUG = True
LOG_LEVEL = os.getenv("LOG_LEVEL", "DEBUG")
