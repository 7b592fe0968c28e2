"""Django settings for the skill marketplace API.

Values come from the environment; a .env file next to manage.py is loaded
first if present.
"""

import os
from pathlib import Path

from dotenv import load_dotenv

from config.logging_config import get_logging_config

BASE_DIR = Path(__file__).resolve().parent.parent

load_dotenv(BASE_DIR / ".env")


def env_bool(name: str, default: bool) -> bool:
    value = os.getenv(name)
    if value is None:
        return default
    return value.strip().lower() in ("1", "true", "yes", "on")


SECRET_KEY = os.getenv("DJANGO_SECRET_KEY", "django-insecure-local-development-key")
DEBUG = env_bool("DJANGO_DEBUG", True)
ALLOWED_HOSTS = [h for h in os.getenv("DJANGO_ALLOWED_HOSTS", "127.0.0.1,localhost,testserver").split(",") if h]

INSTALLED_APPS = [
    "django.contrib.contenttypes",
    "django.contrib.auth",
    "rest_framework",
    "marketplace",
]

MIDDLEWARE = [
    "marketplace.middleware.RequestLogMiddleware",
    "django.middleware.security.SecurityMiddleware",
    "django.middleware.common.CommonMiddleware",
]

ROOT_URLCONF = "config.urls"
WSGI_APPLICATION = "config.wsgi.application"

DATABASES = {
    "default": {
        "ENGINE": "django.db.backends.sqlite3",
        "NAME": os.getenv("DJANGO_DB_PATH", str(BASE_DIR / "db.sqlite3")),
        # select_for_update is a no-op on SQLite; BEGIN IMMEDIATE serializes ledger writers.
        "OPTIONS": {"transaction_mode": "IMMEDIATE", "timeout": 20},
    }
}

DEFAULT_AUTO_FIELD = "django.db.models.BigAutoField"

LANGUAGE_CODE = "en-us"
TIME_ZONE = "UTC"
USE_I18N = False
USE_TZ = True

REST_FRAMEWORK = {
    # Identity is the configured current user; no credentials are checked.
    "DEFAULT_AUTHENTICATION_CLASSES": [],
    "DEFAULT_PERMISSION_CLASSES": ["rest_framework.permissions.AllowAny"],
    "UNAUTHENTICATED_USER": None,
    "DEFAULT_RENDERER_CLASSES": ["rest_framework.renderers.JSONRenderer"],
    "DEFAULT_PARSER_CLASSES": ["rest_framework.parsers.JSONParser"],
    "EXCEPTION_HANDLER": "marketplace.handlers.exceptions.domain_exception_handler",
    "TEST_REQUEST_DEFAULT_FORMAT": "json",
}

# "memory" keeps records for the process lifetime; "django" persists them in DATABASES.
MARKETPLACE_STORE = os.getenv("MARKETPLACE_STORE", "memory")
MARKETPLACE_CURRENT_USERNAME = os.getenv("MARKETPLACE_CURRENT_USERNAME", "testuser")
MARKETPLACE_SEED_DEMO_DATA = env_bool("MARKETPLACE_SEED_DEMO_DATA", True)

LOGGING = get_logging_config(os.getenv("LOG_LEVEL", "INFO").upper())
