"""
Django settings for the Paystack client project.

This is the single settings file for all environments. Configuration is driven
by environment variables using django-environ, following the 12-factor app
methodology.

Environment files:
    - .env.development: Local development settings (test keys, DEBUG=True)

The Paystack client reads only the PAYSTACK dict below; it is converted once
into paystack_client.conf.PaystackConfig.

For more information on this file, see:
https://docs.djangoproject.com/en/5.2/topics/settings/
"""

import os
from pathlib import Path

import environ

# =============================================================================
# Path Configuration
# =============================================================================
BASE_DIR = Path(__file__).resolve().parent.parent

# =============================================================================
# Environment Configuration
# =============================================================================
env = environ.Env(
    DEBUG=(bool, False),  # Default to False for safety
    ALLOWED_HOSTS=(list, []),
    LOG_LEVEL=(str, "INFO"),
    PAYSTACK_TIMEOUT=(float, 30),
    PAYSTACK_CONNECT_TIMEOUT=(float, 10),
    PAYSTACK_VERIFY_SSL=(bool, True),
    PAYSTACK_PRODUCTION=(bool, False),
    PAYSTACK_LOGGING_ENABLED=(bool, False),
    PAYSTACK_CACHE_ENABLED=(bool, True),
    PAYSTACK_CACHE_TTL=(int, 3600),
)

# Note: In Docker, env vars are passed directly; .env files are for local dev
env_file = os.environ.get("ENV_FILE", BASE_DIR.parent / ".env.development")
if Path(env_file).exists():
    environ.Env.read_env(env_file)

# =============================================================================
# Core Settings
# =============================================================================
# SECURITY WARNING: keep the secret key used in production secret!
SECRET_KEY = env("SECRET_KEY", default="django-insecure-paystack-client-dev-key")

# SECURITY WARNING: don't run with debug turned on in production!
DEBUG = env("DEBUG")

ALLOWED_HOSTS = env("ALLOWED_HOSTS")

# =============================================================================
# Application Definition
# =============================================================================
INSTALLED_APPS = [
    "django.contrib.contenttypes",
    "django.contrib.auth",
    # Local apps
    "paystack_client",
]

MIDDLEWARE = [
    "django.middleware.security.SecurityMiddleware",
    "django.middleware.common.CommonMiddleware",
    "django.middleware.csrf.CsrfViewMiddleware",
]

ROOT_URLCONF = "config.urls"

WSGI_APPLICATION = "config.wsgi.application"

# =============================================================================
# Database Configuration
# =============================================================================
# The client keeps no state of its own; the database only backs Django itself
DATABASES = {
    "default": env.db("DATABASE_URL", default=f"sqlite:///{BASE_DIR / 'db.sqlite3'}"),
}

# =============================================================================
# Cache Configuration
# =============================================================================
# https://docs.djangoproject.com/en/5.2/topics/cache/
# Backs the Paystack response cache; point CACHE_URL at Redis/Memcached in
# multi-process deployments.
CACHES = {
    "default": env.cache("CACHE_URL", default="locmemcache://paystack"),
}

# =============================================================================
# Internationalization
# =============================================================================
LANGUAGE_CODE = "en-us"
TIME_ZONE = "UTC"
USE_I18N = True
USE_TZ = True

DEFAULT_AUTO_FIELD = "django.db.models.BigAutoField"

# =============================================================================
# Paystack Configuration
# =============================================================================
# https://paystack.com/docs/api/
PAYSTACK = {
    "SECRET_KEY": env("PAYSTACK_SECRET_KEY", default=""),
    "PUBLIC_KEY": env("PAYSTACK_PUBLIC_KEY", default=""),
    "BASE_URL": env("PAYSTACK_BASE_URL", default="https://api.paystack.co"),
    "TIMEOUT": env("PAYSTACK_TIMEOUT"),
    "CONNECT_TIMEOUT": env("PAYSTACK_CONNECT_TIMEOUT"),
    "VERIFY_SSL": env("PAYSTACK_VERIFY_SSL"),
    "PRODUCTION": env("PAYSTACK_PRODUCTION"),
    "LOGGING_ENABLED": env("PAYSTACK_LOGGING_ENABLED"),
    "LOGGING_CHANNEL": env("PAYSTACK_LOGGING_CHANNEL", default="paystack"),
    "CACHE_ENABLED": env("PAYSTACK_CACHE_ENABLED"),
    "CACHE_TTL": env("PAYSTACK_CACHE_TTL"),
    "CACHE_PREFIX": env("PAYSTACK_CACHE_PREFIX", default="paystack"),
    # Paystack signs webhooks with the secret key unless told otherwise
    "WEBHOOK_SECRET": env("PAYSTACK_WEBHOOK_SECRET", default=env("PAYSTACK_SECRET_KEY", default="")),
    "CURRENCY": env("PAYSTACK_CURRENCY", default="NGN"),
    "MERCHANT_EMAIL": env("PAYSTACK_MERCHANT_EMAIL", default=""),
    "CALLBACK_URL": env("PAYSTACK_CALLBACK_URL", default=""),
}

# =============================================================================
# Logging Configuration
# =============================================================================
LOG_LEVEL = env("LOG_LEVEL")

LOGGING = {
    "version": 1,
    "disable_existing_loggers": False,
    "formatters": {
        "verbose": {
            "format": "{levelname} {asctime} {module} {process:d} {thread:d} {message}",
            "style": "{",
        },
        "simple": {
            "format": "{levelname} {message}",
            "style": "{",
        },
    },
    "handlers": {
        "console": {
            "class": "logging.StreamHandler",
            "formatter": "verbose",
        },
    },
    "root": {
        "handlers": ["console"],
        "level": LOG_LEVEL,
    },
    "loggers": {
        "django": {
            "handlers": ["console"],
            "level": LOG_LEVEL,
            "propagate": False,
        },
        # Request/response logging (PAYSTACK_LOGGING_ENABLED)
        "paystack": {
            "handlers": ["console"],
            "level": "INFO",
            "propagate": False,
        },
    },
}
