import os

SECRET_KEY = os.getenv("SECRET_KEY", "dev-secret-key")

DEBUG = True
LOG_LEVEL = os.getenv("LOG_LEVEL", "DEBUG")

# Shift token used when a punch row has no shift
DEFAULT_SHIFT_TOKEN = os.getenv("DEFAULT_SHIFT_TOKEN", "GS")
# Used when a request omits weeklyOffs (0=Sunday .. 6=Saturday)
DEFAULT_WEEKLY_OFFS = [int(d) for d in os.getenv("DEFAULT_WEEKLY_OFFS", "0").split(",") if d.strip()]
