"""
Django settings for the suburb property dashboard backend.

Values can be overridden through environment variables.
"""
import os
from pathlib import Path

BASE_DIR = Path(__file__).resolve().parent.parent

SECRET_KEY = os.environ.get("DJANGO_SECRET_KEY", "dev-only-insecure-key")
DEBUG = os.environ.get("DJANGO_DEBUG", "true").lower() in ("1", "true", "yes")
ALLOWED_HOSTS = [
    host.strip()
    for host in os.environ.get("DJANGO_ALLOWED_HOSTS", "localhost,127.0.0.1,testserver").split(",")
    if host.strip()
]

INSTALLED_APPS = [
    "api",
]

MIDDLEWARE = [
    "django.middleware.security.SecurityMiddleware",
    "django.contrib.sessions.middleware.SessionMiddleware",
    "django.middleware.common.CommonMiddleware",
]

ROOT_URLCONF = "dashboard.urls"
WSGI_APPLICATION = "dashboard.wsgi.application"

# No persistence: the last search lives in a signed cookie.
DATABASES = {}
SESSION_ENGINE = "django.contrib.sessions.backends.signed_cookies"

USE_TZ = True
TIME_ZONE = "Australia/Sydney"

# Upstream listings API
LISTINGS_API_URL = os.environ.get(
    "LISTINGS_API_URL",
    "https://www.microburbs.com.au/report_generator/api/suburb/properties",
)
LISTINGS_API_TOKEN = os.environ.get("LISTINGS_API_TOKEN", "test")
LISTINGS_API_TIMEOUT = float(os.environ.get("LISTINGS_API_TIMEOUT", "30"))

DEFAULT_SUBURB = os.environ.get("DEFAULT_SUBURB", "Belmont North")
DEFAULT_PROPERTY_TYPE = os.environ.get("DEFAULT_PROPERTY_TYPE", "house")
TABLE_PREVIEW_LIMIT = int(os.environ.get("TABLE_PREVIEW_LIMIT", "10"))

LOG_LEVEL = os.environ.get("LOG_LEVEL", "INFO")

LOGGING = {
    "version": 1,
    "disable_existing_loggers": False,
    "formatters": {
        "simple": {"format": "%(asctime)s %(levelname)s %(name)s: %(message)s"},
    },
    "handlers": {
        "console": {"class": "logging.StreamHandler", "formatter": "simple"},
    },
    "loggers": {
        "api": {"handlers": ["console"], "level": LOG_LEVEL},
        "helpers": {"handlers": ["console"], "level": LOG_LEVEL},
    },
}
