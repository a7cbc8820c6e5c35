import os

SHEETS_CONFIG = {
    "url": os.getenv("SHEETS_URL", ""),
    "timeout_seconds": float(os.getenv("SHEETS_TIMEOUT_SECONDS", "30")),
    "late_tolerance_field": os.getenv("LATE_TOLERANCE_FIELD", "grace_period"),
}

HOST = os.getenv("HOST", "0.0.0.0")
PORT = int(os.getenv("PORT", "3000"))

DEBUG = False
LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO")
