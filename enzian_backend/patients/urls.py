"""Patients App URLs.

Prefix: /api/
Routes:
    GET/POST              /api/patients/       - List (?search=) / create patients
    GET/PUT/PATCH/DELETE  /api/patients/<pk>/  - Retrieve with diagnoses / update / delete
"""

from django.urls import path

from enzian_backend.patients.views import PatientDetailView, PatientListCreateView

app_name = 'patients'

urlpatterns = [
    path('patients/', PatientListCreateView.as_view(), name='list'),
    path('patients/<int:pk>/', PatientDetailView.as_view(), name='detail'),
]
