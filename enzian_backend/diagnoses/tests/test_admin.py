from __future__ import annotations

from django.contrib.auth.models import User
from django.test import RequestFactory, TestCase

from enzian_backend.core.admin import enzian_admin_site
from enzian_backend.diagnoses.models import Diagnosis
from enzian_backend.doctors.models import Doctor
from enzian_backend.patients.models import Patient


class DiagnosisAdminTest(TestCase):
    """Diagnoses are immutable in the back-office, even for superusers."""

    def setUp(self):
        doctor = Doctor.objects.create(
            name="Dr. João Silva",
            email="joao.silva@exemplo.com",
            crm="123456",
            specialty="Ginecologia e Obstetrícia",
        )
        patient = Patient.objects.create(name="Maria Santos", doctor=doctor)
        self.diagnosis = Diagnosis.objects.create(
            patient=patient,
            doctor=doctor,
            peritoneum="P2",
            ovary="O1",
            tube="T1",
            deep_endometriosis="B",
            observations="Dor pélvica crônica.",
            final_classification="P2O1T1B",
        )

        self.request = RequestFactory().get("/admin/diagnoses/diagnosis/")
        self.request.user = User.objects.create_superuser(
            username="admin", email="admin@exemplo.com", password="DummyPass123!"
        )
        self.model_admin = enzian_admin_site._registry[Diagnosis]

    def test_no_add_change_or_delete_permission(self):
        self.assertFalse(self.model_admin.has_add_permission(self.request))
        self.assertFalse(self.model_admin.has_change_permission(self.request))
        self.assertFalse(self.model_admin.has_change_permission(self.request, self.diagnosis))
        self.assertFalse(self.model_admin.has_delete_permission(self.request))
        self.assertFalse(self.model_admin.has_delete_permission(self.request, self.diagnosis))

    def test_observations_read_only(self):
        readonly = self.model_admin.get_readonly_fields(self.request, self.diagnosis)

        self.assertIn("observations", readonly)
        self.assertIn("final_classification", readonly)

    def test_still_viewable(self):
        self.assertTrue(self.model_admin.has_view_permission(self.request, self.diagnosis))
