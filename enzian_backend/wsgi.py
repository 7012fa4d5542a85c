"""
WSGI config for the Enzian backend.

It exposes the WSGI callable as a module-level variable named ``application``.
"""

import os

from django.core.wsgi import get_wsgi_application

# Deployments should set DJANGO_SETTINGS_MODULE (e.g. enzian_backend.settings_prod).
os.environ.setdefault("DJANGO_SETTINGS_MODULE", "enzian_backend.settings")

application = get_wsgi_application()
