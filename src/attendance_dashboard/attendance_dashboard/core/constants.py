"""Constants and defaults.

Note: Keep constants here to avoid magic numbers spread across code.
"""

MIN_ROW_CELLS = 2
STAFF_ID_SCAN_CELLS = 5

BUDDHIST_ERA_OFFSET = 543
BUDDHIST_ERA_MIN_YEAR = 2500
TWO_DIGIT_YEAR_BASE = 2000

# Placeholder used for a missing clock-in/out time on synthetic roster rows.
NO_TIME = "-"

# Cell values that a spreadsheet export produces for a missing staff id.
INVALID_STAFF_IDS = frozenset({"", "undefined"})

DEFAULT_SHEETS_TIMEOUT_SECONDS = 30.0
UPSTREAM_ERROR_EXCERPT = 500
INVALID_JSON_EXCERPT = 200
