SECRET_KEY = "test-secret"

DEBUG = False
TESTING = True
LOG_LEVEL = "WARNING"

DEFAULT_SHIFT_TOKEN = "GS"
DEFAULT_WEEKLY_OFFS = [0]
