"""
Patients App Configuration
"""

from django.apps import AppConfig


class PatientsConfig(AppConfig):
    """Registry of patients under a responsible doctor."""
    default_auto_field = 'django.db.models.BigAutoField'
    name = 'enzian_backend.patients'
    verbose_name = 'Pacientes'
