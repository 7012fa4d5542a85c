"""Doctors App URLs.

Prefix: /api/
Routes:
    GET/POST              /api/doctors/       - List (?search=) / create doctors
    GET/PUT/PATCH/DELETE  /api/doctors/<pk>/  - Retrieve / partial update / delete
"""

from django.urls import path

from enzian_backend.doctors.views import DoctorDetailView, DoctorListCreateView

app_name = 'doctors'

urlpatterns = [
    path('doctors/', DoctorListCreateView.as_view(), name='list'),
    path('doctors/<int:pk>/', DoctorDetailView.as_view(), name='detail'),
]
