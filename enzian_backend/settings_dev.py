"""
Development settings for the Enzian backend.

Usage:
    export DJANGO_SETTINGS_MODULE=enzian_backend.settings_dev
    python manage.py runserver
"""

from __future__ import annotations

from .settings import *  # noqa: F403,F405

# ---------------------------------------------------------
# DEVELOPMENT OVERRIDES
# ---------------------------------------------------------

DEBUG = True
ALLOWED_HOSTS = ["localhost", "127.0.0.1", "[::1]", "*"]

REST_FRAMEWORK = {
    **REST_FRAMEWORK,
    "DEFAULT_RENDERER_CLASSES": (
        "rest_framework.renderers.JSONRenderer",
        "rest_framework.renderers.BrowsableAPIRenderer",  # DEV only
    ),
    "DEFAULT_PARSER_CLASSES": (
        "rest_framework.parsers.JSONParser",
        "rest_framework.parsers.FormParser",
        "rest_framework.parsers.MultiPartParser",
    ),
}

# The form-driven UI runs on its own dev server.
CORS_ALLOW_ALL_ORIGINS = True
CORS_ALLOW_CREDENTIALS = True

# Verbose logging in dev
LOGGING["root"]["level"] = "INFO"
LOGGING["loggers"]["enzian_backend"]["level"] = "DEBUG"

# Security relaxed
SECURE_SSL_REDIRECT = False
SESSION_COOKIE_SECURE = False
CSRF_COOKIE_SECURE = False
SECURE_HSTS_SECONDS = 0

CACHES = {
    "default": {
        "BACKEND": "django.core.cache.backends.locmem.LocMemCache",
        "LOCATION": "enzian-dev",
    }
}
