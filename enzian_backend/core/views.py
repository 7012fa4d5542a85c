"""Core app views.

Contains:
- health: Health check endpoint
- SeedView: Destructive reset to the demo dataset
"""

import logging

from django.db import connection
from django.http import JsonResponse

from rest_framework.response import Response
from rest_framework.views import APIView

from enzian_backend.core.seeders import seed_demo_data
from enzian_backend.doctors.serializers import DoctorSerializer
from enzian_backend.patients.serializers import PatientSerializer

logger = logging.getLogger(__name__)


def health(request):
    """Health check endpoint with a database round trip."""
    try:
        with connection.cursor() as cursor:
            cursor.execute('SELECT 1;')
    except Exception as exc:
        logger.warning('Health check failed: %s', exc)
        return JsonResponse({'status': 'error'}, status=503)

    return JsonResponse({'status': 'ok'})


class SeedView(APIView):
    """Delete all records and insert the demo dataset.

    POST /api/seed/
    Returns: {"message": "...", "doctors": [...], "patients": [...]}
    """

    def post(self, request, *args, **kwargs):
        created = seed_demo_data()
        logger.info(
            'Demo data seeded (doctors=%s, patients=%s, diagnoses=%s)',
            len(created['doctors']),
            len(created['patients']),
            len(created['diagnoses']),
        )
        return Response(
            {
                'message': 'Dados de exemplo criados com sucesso',
                'doctors': DoctorSerializer(created['doctors'], many=True).data,
                'patients': PatientSerializer(created['patients'], many=True).data,
            }
        )
