"""
Diagnoses App Configuration
"""

from django.apps import AppConfig


class DiagnosesConfig(AppConfig):
    """Enzian classification records, history and printable reports."""
    default_auto_field = 'django.db.models.BigAutoField'
    name = 'enzian_backend.diagnoses'
    verbose_name = 'Diagnósticos (Classificação de Enzian)'
