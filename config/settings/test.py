from .base import *  # noqa: F401,F403

DATABASES = {
    "default": {
        "ENGINE": "django.db.backends.sqlite3",
        "NAME": ":memory:",
    }
}

ORDER_STORE = {
    "BACKEND": "orders.stores.DatabaseOrderStore",
    "OPTIONS": {},
}

PASSWORD_HASHERS = ["django.contrib.auth.hashers.MD5PasswordHasher"]

LOGGING["root"]["level"] = "CRITICAL"  # noqa: F405
LOGGING["loggers"]["orders"]["level"] = "CRITICAL"  # noqa: F405
LOGGING["loggers"]["bookings"]["level"] = "CRITICAL"  # noqa: F405
