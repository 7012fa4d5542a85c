"""
Doctors App Configuration
"""

from django.apps import AppConfig


class DoctorsConfig(AppConfig):
    """Registry of doctors (recording clinicians)."""
    default_auto_field = 'django.db.models.BigAutoField'
    name = 'enzian_backend.doctors'
    verbose_name = 'Médicos'
