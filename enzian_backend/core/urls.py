"""Core App URLs.

Prefix: /api/
Routes:
    GET   /api/health/  - Health check
    POST  /api/seed/    - Reset to the demo dataset
"""

from django.urls import path

from enzian_backend.core.views import SeedView, health

app_name = 'core'

urlpatterns = [
    path('health/', health, name='health'),
    path('seed/', SeedView.as_view(), name='seed'),
]
