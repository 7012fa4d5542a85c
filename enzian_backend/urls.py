"""Enzian backend URL configuration.

API routes:
    /api/health/     - Health check (core)
    /api/seed/       - Demo dataset reset (core)
    /api/doctors/    - Doctor registry (doctors)
    /api/patients/   - Patient registry + history (patients)
    /api/diagnoses/  - Diagnoses + printable report (diagnoses)
"""

from django.http import HttpResponse
from django.urls import include, path

from enzian_backend.core.admin import enzian_admin_site


def root(request):
    """Plain-text liveness response for non-API clients."""
    return HttpResponse("Enzian classification backend is running.")


urlpatterns = [
    path("", root, name="root"),
    path("admin/", enzian_admin_site.urls),

    path("api/", include("enzian_backend.core.urls")),
    path("api/", include("enzian_backend.doctors.urls")),
    path("api/", include("enzian_backend.patients.urls")),
    path("api/", include("enzian_backend.diagnoses.urls")),
]
