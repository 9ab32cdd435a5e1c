# PATH: apps/api/config/settings/test.py
# pytest 전용: SQLite in-memory, 빠른 해셔
from .base import *

DEBUG = False

DATABASES = {
    "default": {
        "ENGINE": "django.db.backends.sqlite3",
        "NAME": ":memory:",
    }
}

PASSWORD_HASHERS = [
    "django.contrib.auth.hashers.MD5PasswordHasher",
]

LOGGING["loggers"]["acadex"]["level"] = "WARNING"
