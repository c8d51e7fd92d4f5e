from .base import *

DEBUG = False
ALLOWED_HOSTS = ["testserver", "localhost"]

SECRET_KEY = "test-secret-key"
TELEGRAM_BOT_TOKEN = "123456:TEST-bot-token"
TELEGRAM_AUTH_MAX_AGE = 0

# File-backed so threaded tests share one database with real write locking
DATABASES = {
    "default": {
        "ENGINE": "django.db.backends.sqlite3",
        "NAME": BASE_DIR / "test.sqlite3",
        "OPTIONS": {"transaction_mode": "IMMEDIATE", "timeout": 20},
        "TEST": {"NAME": BASE_DIR / "test_vendetta.sqlite3"},
    }
}

STORAGES["staticfiles"] = {
    "BACKEND": "django.contrib.staticfiles.storage.StaticFilesStorage"
}
