from django.http import HttpResponse
from rest_framework import generics, serializers, status
from rest_framework.response import Response
from rest_framework.views import APIView

from enzian_backend.diagnoses import services
from enzian_backend.diagnoses.reports import render_report
from enzian_backend.diagnoses.serializers import (
    DiagnosisCreateSerializer,
    DiagnosisSerializer,
    PatientDiagnosisSerializer,
)
from enzian_backend.patients.services import get_patient


class DiagnosisListCreateView(generics.ListCreateAPIView):
    """List diagnoses (``?patientId=``) or record a new one."""

    def get_queryset(self):
        return services.list_diagnoses(self.request.query_params.get('patientId'))

    def get_serializer_class(self):
        if self.request.method == 'POST':
            return DiagnosisCreateSerializer
        return DiagnosisSerializer

    def create(self, request, *args, **kwargs):
        serializer = self.get_serializer(data=request.data)
        serializer.is_valid(raise_exception=True)
        diagnosis = services.create_diagnosis(serializer.validated_data)
        return Response(DiagnosisSerializer(diagnosis).data, status=status.HTTP_201_CREATED)


class DiagnosisDetailView(generics.GenericAPIView):
    serializer_class = DiagnosisSerializer

    def get(self, request, pk, *args, **kwargs):
        return Response(DiagnosisSerializer(services.get_diagnosis(pk)).data)


class DiagnosisReportView(APIView):
    """Printable HTML report of one diagnosis."""

    def get(self, request, pk, *args, **kwargs):
        diagnosis = services.get_diagnosis(pk)
        html = render_report(diagnosis, diagnosis.patient, diagnosis.doctor)
        return HttpResponse(html, content_type='text/html; charset=utf-8')


class HistoryEntrySerializer(serializers.Serializer):
    diagnosis = PatientDiagnosisSerializer(read_only=True)
    severity = serializers.SerializerMethodField()
    trend = serializers.SerializerMethodField()

    def get_severity(self, obj):
        return obj.severity.to_dict()

    def get_trend(self, obj):
        return obj.trend.value if obj.trend else None


class PatientHistoryView(APIView):
    """Diagnosis history of one patient, newest first, with trends."""

    def get(self, request, pk, *args, **kwargs):
        patient = get_patient(pk)
        history = services.patient_history(patient)
        latest_severity = history.latest_severity
        return Response({
            'patient': {
                'id': patient.pk,
                'name': patient.name,
                'medicalRecord': patient.medical_record,
            },
            'total': history.total,
            'latestClassification': history.latest_classification,
            'latestSeverity': latest_severity.to_dict() if latest_severity else None,
            'entries': HistoryEntrySerializer(history.entries, many=True).data,
        })
