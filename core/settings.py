"""
Django settings for the practice billing console.

Works for local dev and Render deployment.
"""

from pathlib import Path
import os
from dotenv import load_dotenv

from core.logging import build_logging_config, configure_structlog

# -------------------------------------------------------------------
# Paths
# -------------------------------------------------------------------
BASE_DIR = Path(__file__).resolve().parent.parent
load_dotenv()

# -------------------------------------------------------------------
# Core security / runtime config
#   - In production, set these in environment variables
# -------------------------------------------------------------------
SECRET_KEY = os.getenv("SECRET_KEY", "dev-insecure-key-change-me")
DEBUG = os.getenv("DEBUG", "True").lower() == "true"

# Hosts & CSRF
ALLOWED_HOSTS = ["localhost", "127.0.0.1", "testserver"]
ALLOWED_HOSTS += [h.strip() for h in os.getenv("ALLOWED_HOSTS", "").split(",") if h.strip()]

# Render convenience: it sets RENDER_EXTERNAL_HOSTNAME
RENDER_HOST = os.getenv("RENDER_EXTERNAL_HOSTNAME")
if RENDER_HOST:
    ALLOWED_HOSTS.append(RENDER_HOST)
    CSRF_TRUSTED_ORIGINS = [f"https://{RENDER_HOST}"]
else:
    # Allow optional explicit list, e.g. https://example.com
    CSRF_TRUSTED_ORIGINS = [o for o in os.getenv("CSRF_TRUSTED_ORIGINS", "").split(",") if o]

# -------------------------------------------------------------------
# Applications
#   - No ORM models: records live in core.store repositories
# -------------------------------------------------------------------
INSTALLED_APPS = [
    "django.contrib.messages",
    "django.contrib.staticfiles",
    "django_htmx",
    "dashboard",
    "claims",
    "invoices",
    "inventory",
    "profiles",
]

# -------------------------------------------------------------------
# Middleware
#   - WhiteNoise must be right after SecurityMiddleware
# -------------------------------------------------------------------
MIDDLEWARE = [
    "django.middleware.security.SecurityMiddleware",
    "whitenoise.middleware.WhiteNoiseMiddleware",  # static file serving in prod
    "django.middleware.common.CommonMiddleware",
    "django.middleware.csrf.CsrfViewMiddleware",
    "django.contrib.messages.middleware.MessageMiddleware",
    "django.middleware.clickjacking.XFrameOptionsMiddleware",
    "django_htmx.middleware.HtmxMiddleware",
]

ROOT_URLCONF = "core.urls"

# -------------------------------------------------------------------
# Templates
#   - Adds project-level templates directory
# -------------------------------------------------------------------
TEMPLATES = [
    {
        "BACKEND": "django.template.backends.django.DjangoTemplates",
        "DIRS": [BASE_DIR / "templates"],
        "APP_DIRS": True,
        "OPTIONS": {
            "context_processors": [
                "django.template.context_processors.request",
                "django.contrib.messages.context_processors.messages",
            ],
        },
    },
]

WSGI_APPLICATION = "core.wsgi.application"

# -------------------------------------------------------------------
# Database
#   - None: every screen works on in-memory mock records
# -------------------------------------------------------------------
DATABASES = {}

# Without sessions, flash messages ride in a signed cookie
MESSAGE_STORAGE = "django.contrib.messages.storage.cookie.CookieStorage"

# -------------------------------------------------------------------
# I18N / TZ
# -------------------------------------------------------------------
LANGUAGE_CODE = "en-us"
TIME_ZONE = "UTC"
USE_I18N = True
USE_TZ = True

# -------------------------------------------------------------------
# Static files
#   - WhiteNoise + Django 5 storage settings
# -------------------------------------------------------------------
STATIC_URL = "/static/"
STATIC_ROOT = BASE_DIR / "staticfiles"           # where collectstatic puts files
STATICFILES_DIRS = [BASE_DIR / "static"]         # your source static assets

STORAGES = {
    "default": {"BACKEND": "django.core.files.storage.FileSystemStorage"},
    "staticfiles": {"BACKEND": "whitenoise.storage.CompressedManifestStaticFilesStorage"},
}

# -------------------------------------------------------------------
# Logging
#   - structlog on top of stdlib handlers; LOG_JSON=true for production
# -------------------------------------------------------------------
LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO").upper()
LOG_JSON = os.getenv("LOG_JSON", "False").lower() == "true"
LOGGING = build_logging_config(LOG_LEVEL, json_logs=LOG_JSON)
configure_structlog()

# -------------------------------------------------------------------
# Security behind proxy (Render)
# -------------------------------------------------------------------
SECURE_PROXY_SSL_HEADER = ("HTTP_X_FORWARDED_PROTO", "https")
CSRF_COOKIE_SECURE = not DEBUG

# -------------------------------------------------------------------
# Practice console
# -------------------------------------------------------------------
PRACTICE_CURRENCY = os.getenv("PRACTICE_CURRENCY", "$")
PRACTICE_EXPIRING_SOON_DAYS = int(os.getenv("PRACTICE_EXPIRING_SOON_DAYS", "90"))
PRACTICE_REMINDER_AFTER_DAYS = int(os.getenv("PRACTICE_REMINDER_AFTER_DAYS", "15"))
PRACTICE_MAX_TAX_RATE = 50
PRACTICE_CURRENT_USER_ID = os.getenv("PRACTICE_CURRENT_USER_ID", "EMP001")

# Swap BACKEND for an API-backed class exposing get/find/all/save/delete
PRACTICE_REPOSITORIES = {
    "patients": {"SEED": "core.directory.seed_patients"},
    "services": {"SEED": "core.directory.seed_services", "OPTIONS": {"key": "code"}},
    "claims": {"SEED": "claims.fixtures.seed_claims"},
    "providers": {"SEED": "claims.fixtures.seed_providers"},
    "invoices": {"SEED": "invoices.fixtures.seed_invoices"},
    "templates": {"SEED": "invoices.fixtures.seed_templates"},
    "inventory": {"SEED": "inventory.fixtures.seed_inventory"},
    "profiles": {"SEED": "profiles.fixtures.seed_profiles"},
}
