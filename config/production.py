import os

SECRET_KEY = os.getenv("SECRET_KEY", "please-set-SECRET_KEY")

DEBUG = False
LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO")

DEFAULT_SHIFT_TOKEN = os.getenv("DEFAULT_SHIFT_TOKEN", "GS")
DEFAULT_WEEKLY_OFFS = [int(d) for d in os.getenv("DEFAULT_WEEKLY_OFFS", "0").split(",") if d.strip()]
