"""Constants and defaults.

Note: Keep constants here to avoid magic numbers spread across code.
"""

DEFAULT_SHIFT_TOKEN = "GS"
DEFAULT_ALLOWED_LATE_COUNT = 2

ACTIVE_STATUS = "Active"
NO_PUNCH_SENTINELS = frozenset({"", "00:00", "NA"})

MINUTES_PER_DAY = 1440
BREAK_DEDUCTION_MINUTES = 60
EFFECTIVE_BASELINE_MINUTES = 8 * 60
GROSS_BASELINE_MINUTES = 9 * 60

ZERO_TIME = "00:00"
NO_DEVIATION = "-"
DEFAULT_LEGAL_ENTITY = "N/A"
