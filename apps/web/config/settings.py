"""
Django settings for the Thompson Digital site.

Configuration comes from environment variables - never hardcode credentials.
Run with: python apps/web/manage.py runserver
"""

from pathlib import Path

import environ  # type: ignore[import-untyped]

# Build paths inside the project like this: BASE_DIR / 'subdir'.
BASE_DIR = Path(__file__).resolve().parent.parent

# Initialize environ
env = environ.Env(
    DEBUG=(bool, False),
    ALLOWED_HOSTS=(list, []),
    LOG_LEVEL=(str, "INFO"),
    CORS_ALLOW_ORIGIN=(str, "*"),
)

# SECURITY WARNING: keep the secret key used in production secret!
# The fallback only exists for local development and the test suite.
SECRET_KEY = env("SECRET_KEY", default="django-insecure-local-development-only")

# SECURITY WARNING: don't run with debug turned on in production!
DEBUG = env("DEBUG")

ALLOWED_HOSTS = env("ALLOWED_HOSTS")

# Application definition
INSTALLED_APPS = [
    "django.contrib.staticfiles",
    # Local apps
    "apps.web.core",
    "apps.web.contact",
    "apps.web.pages",
]

MIDDLEWARE = [
    "django.middleware.security.SecurityMiddleware",
    "django.middleware.common.CommonMiddleware",
    "django.middleware.csrf.CsrfViewMiddleware",
    "django.middleware.clickjacking.XFrameOptionsMiddleware",
    # Custom middleware
    "apps.web.core.middleware.RequestLoggingMiddleware",
]

ROOT_URLCONF = "apps.web.config.urls"

TEMPLATES = [
    {
        "BACKEND": "django.template.backends.django.DjangoTemplates",
        "DIRS": [BASE_DIR / "templates"],
        "APP_DIRS": True,
        "OPTIONS": {
            "context_processors": [
                "django.template.context_processors.debug",
                "django.template.context_processors.request",
                "apps.web.pages.context_processors.site",
            ],
        },
    },
]

WSGI_APPLICATION = "apps.web.config.wsgi.application"

# No database: contact submissions are logged, never stored.
DATABASES: dict[str, dict[str, str]] = {}

# Internationalization
LANGUAGE_CODE = "en-us"
TIME_ZONE = "UTC"
USE_I18N = False
USE_TZ = True

# Static files (CSS, JavaScript, Images)
STATIC_URL = "static/"
STATIC_ROOT = BASE_DIR.parent.parent / "staticfiles"  # /app/staticfiles in production

# Public API
CORS_ALLOW_ORIGIN = env("CORS_ALLOW_ORIGIN")

# Logging
LOG_LEVEL = env("LOG_LEVEL")

LOGGING = {
    "version": 1,
    "disable_existing_loggers": False,
    "formatters": {
        "verbose": {
            "format": "[{levelname}] {asctime} {name} {message}",
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
        "level": "WARNING",
    },
    "loggers": {
        "apps": {
            "level": LOG_LEVEL,
        },
        "django.request": {
            "handlers": ["console"],
            "level": "ERROR",
            "propagate": False,
        },
    },
}
