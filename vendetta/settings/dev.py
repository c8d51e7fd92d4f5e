from .base import *

DEBUG = True
ALLOWED_HOSTS = ["*"]

# For quick local dev without Docker: use SQLite if no DB env is set
if os.getenv("USE_SQLITE", "1") == "1":
    DATABASES["default"] = {
        "ENGINE": "django.db.backends.sqlite3",
        "NAME": BASE_DIR / "db.sqlite3",
        # writers take the lock up front so review appends serialize
        "OPTIONS": {"transaction_mode": "IMMEDIATE", "timeout": 20},
    }

STORAGES["staticfiles"] = {
    "BACKEND": "django.contrib.staticfiles.storage.StaticFilesStorage"
}
