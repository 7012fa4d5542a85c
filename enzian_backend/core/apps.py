"""
Core App Configuration
"""

from django.apps import AppConfig


class CoreConfig(AppConfig):
    """Shared infrastructure: audit trail, errors, health, seed data."""
    default_auto_field = 'django.db.models.BigAutoField'
    name = 'enzian_backend.core'
    verbose_name = 'Core (Auditoria & Infraestrutura)'
