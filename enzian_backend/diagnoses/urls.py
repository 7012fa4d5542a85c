"""Diagnoses App URLs.

Prefix: /api/
Routes:
    GET/POST  /api/diagnoses/               - List (?patientId=) / record diagnoses
    GET       /api/diagnoses/<pk>/          - Retrieve one diagnosis
    GET       /api/diagnoses/<pk>/report/   - Printable HTML report
    GET       /api/patients/<pk>/history/   - Patient history with trends
"""

from django.urls import path

from enzian_backend.diagnoses import views

app_name = 'diagnoses'

urlpatterns = [
    path('diagnoses/', views.DiagnosisListCreateView.as_view(), name='list'),
    path('diagnoses/<int:pk>/', views.DiagnosisDetailView.as_view(), name='detail'),
    path('diagnoses/<int:pk>/report/', views.DiagnosisReportView.as_view(), name='report'),
    path('patients/<int:pk>/history/', views.PatientHistoryView.as_view(), name='patient-history'),
]
