from __future__ import annotations

from datetime import date
from unittest.mock import patch

from django.test import TestCase

from rest_framework.test import APIClient

from enzian_backend.diagnoses.models import Diagnosis
from enzian_backend.doctors.models import Doctor
from enzian_backend.patients.models import Patient


class PatientAPITest(TestCase):
    """Tests for /api/patients/ endpoints."""

    def setUp(self):
        self.doctor = Doctor.objects.create(
            name="Dr. João Silva",
            email="joao.silva@exemplo.com",
            crm="123456",
            specialty="Ginecologia e Obstetrícia",
        )
        self.other_doctor = Doctor.objects.create(
            name="Dra. Maria Santos",
            email="maria.santos@exemplo.com",
            crm="789012",
            specialty="Reprodução Humana",
        )
        self.patient = Patient.objects.create(
            name="Maria Santos",
            email="maria.santos@email.com",
            phone="(11) 91234-5678",
            date_of_birth=date(1990, 5, 15),
            medical_record="MS001",
            doctor=self.doctor,
        )

        self.client = APIClient()
        self.client.defaults["HTTP_HOST"] = "localhost"

    def _add_diagnosis(self, code=("P2", "O1", "T1", "B")):
        peritoneum, ovary, tube, deep = code
        return Diagnosis.objects.create(
            patient=self.patient,
            doctor=self.doctor,
            peritoneum=peritoneum,
            ovary=ovary,
            tube=tube,
            deep_endometriosis=deep,
            final_classification="".join(code),
        )

    # ========== LIST TESTS ==========

    def test_list_embeds_doctor_contact(self):
        """List items embed the doctor's id, name and email."""
        response = self.client.get("/api/patients/")

        self.assertEqual(response.status_code, 200)
        self.assertEqual(len(response.data), 1)
        item = response.data[0]
        self.assertEqual(item["medicalRecord"], "MS001")
        self.assertEqual(item["dateOfBirth"], "1990-05-15")
        self.assertEqual(
            item["doctor"],
            {"id": self.doctor.id, "name": "Dr. João Silva", "email": "joao.silva@exemplo.com"},
        )

    def test_list_search_by_medical_record(self):
        Patient.objects.create(name="Ana Oliveira", medical_record="AO002", doctor=self.doctor)

        response = self.client.get("/api/patients/", {"search": "ao0"})

        self.assertEqual([p["name"] for p in response.data], ["Ana Oliveira"])

    def test_list_search_by_name(self):
        Patient.objects.create(name="Ana Oliveira", doctor=self.doctor)

        response = self.client.get("/api/patients/", {"search": "santos"})

        self.assertEqual([p["id"] for p in response.data], [self.patient.id])

    # ========== CREATE TESTS ==========

    @patch("enzian_backend.patients.services.log_record_action")
    def test_create_success(self, mock_log):
        """Create returns 201 with the doctor profile projection."""
        data = {
            "name": "Ana Oliveira",
            "email": "ana.oliveira@email.com",
            "dateOfBirth": "1985-08-22",
            "medicalRecord": "AO002",
            "doctorId": self.other_doctor.id,
        }

        response = self.client.post("/api/patients/", data, format="json")

        self.assertEqual(response.status_code, 201)
        self.assertEqual(response.data["doctor"]["crm"], "789012")
        self.assertEqual(response.data["doctor"]["specialty"], "Reprodução Humana")
        self.assertEqual(response.data["diagnoses"], [])
        mock_log.assert_called_once_with(
            "patient_created", patient_id=response.data["id"], doctor_id=self.other_doctor.id
        )

    def test_create_with_empty_optional_fields_stores_null(self):
        """Empty strings for optional fields are stored as NULL, so they never collide."""
        data = {
            "name": "Carla Pereira",
            "email": "",
            "phone": "",
            "dateOfBirth": "",
            "medicalRecord": "",
            "doctorId": self.doctor.id,
        }

        first = self.client.post("/api/patients/", data, format="json")
        second = self.client.post("/api/patients/", {**data, "name": "Outra"}, format="json")

        self.assertEqual(first.status_code, 201)
        self.assertEqual(second.status_code, 201)
        created = Patient.objects.get(id=first.data["id"])
        self.assertIsNone(created.email)
        self.assertIsNone(created.medical_record)
        self.assertIsNone(created.date_of_birth)

    def test_create_missing_doctor_id(self):
        response = self.client.post("/api/patients/", {"name": "Ana"}, format="json")

        self.assertEqual(response.status_code, 400)
        self.assertEqual(response.data, {"error": "Name and doctorId are required"})

    def test_create_unknown_doctor_is_bad_request(self):
        """A doctorId that does not exist is a 400, not a 404."""
        response = self.client.post(
            "/api/patients/", {"name": "Ana", "doctorId": 99999}, format="json"
        )

        self.assertEqual(response.status_code, 400)
        self.assertEqual(response.data["error"], "Doctor not found")
        self.assertEqual(Patient.objects.count(), 1)

    def test_create_duplicate_email(self):
        response = self.client.post(
            "/api/patients/",
            {"name": "Outra", "email": "maria.santos@email.com", "doctorId": self.doctor.id},
            format="json",
        )

        self.assertEqual(response.status_code, 400)
        self.assertEqual(response.data["error"], "Email already registered")

    def test_create_duplicate_medical_record(self):
        response = self.client.post(
            "/api/patients/",
            {"name": "Outra", "medicalRecord": "MS001", "doctorId": self.doctor.id},
            format="json",
        )

        self.assertEqual(response.status_code, 400)
        self.assertEqual(response.data["error"], "Medical record already registered")
        self.assertEqual(Patient.objects.count(), 1)

    # ========== RETRIEVE TESTS ==========

    def test_retrieve_includes_diagnoses_newest_first(self):
        older = self._add_diagnosis(("P1", "O1", "T1", "A"))
        newer = self._add_diagnosis(("P3", "O3", "T3", "C"))

        response = self.client.get(f"/api/patients/{self.patient.id}/")

        self.assertEqual(response.status_code, 200)
        self.assertEqual([d["id"] for d in response.data["diagnoses"]], [newer.id, older.id])
        self.assertEqual(response.data["diagnoses"][0]["doctor"]["email"], "joao.silva@exemplo.com")
        self.assertNotIn("patient", response.data["diagnoses"][0])
        self.assertEqual(response.data["doctor"]["crm"], "123456")

    def test_retrieve_unknown_returns_404(self):
        response = self.client.get("/api/patients/99999/")

        self.assertEqual(response.status_code, 404)
        self.assertEqual(response.data, {"error": "Patient not found"})

    # ========== UPDATE TESTS ==========

    @patch("enzian_backend.patients.services.log_record_action")
    def test_update_without_changes_is_not_audited(self, mock_log):
        """Resubmitting the stored values writes no audit entry."""
        response = self.client.put(
            f"/api/patients/{self.patient.id}/",
            {"name": "Maria Santos", "medicalRecord": "MS001", "doctorId": self.doctor.id},
            format="json",
        )

        self.assertEqual(response.status_code, 200)
        mock_log.assert_not_called()

    @patch("enzian_backend.patients.services.log_record_action")
    def test_update_audits_changed_doctor(self, mock_log):
        response = self.client.put(
            f"/api/patients/{self.patient.id}/",
            {"name": "Maria Santos", "doctorId": self.other_doctor.id},
            format="json",
        )

        self.assertEqual(response.status_code, 200)
        self.assertEqual(response.data["doctor"]["id"], self.other_doctor.id)
        mock_log.assert_called_once_with(
            "patient_updated",
            patient_id=self.patient.id,
            doctor_id=self.other_doctor.id,
            meta={"fields": ["doctor_id"]},
        )

    def test_update_with_own_email_and_record_succeeds(self):
        """Uniqueness excludes the record being updated."""
        data = {
            "name": "Maria Santos Lima",
            "email": "maria.santos@email.com",
            "medicalRecord": "MS001",
            "doctorId": self.doctor.id,
        }

        response = self.client.put(f"/api/patients/{self.patient.id}/", data, format="json")

        self.assertEqual(response.status_code, 200)
        self.patient.refresh_from_db()
        self.assertEqual(self.patient.name, "Maria Santos Lima")

    def test_update_keeps_absent_fields(self):
        response = self.client.put(
            f"/api/patients/{self.patient.id}/",
            {"name": "Maria Santos", "doctorId": self.other_doctor.id},
            format="json",
        )

        self.assertEqual(response.status_code, 200)
        self.patient.refresh_from_db()
        self.assertEqual(self.patient.doctor_id, self.other_doctor.id)
        self.assertEqual(self.patient.phone, "(11) 91234-5678")
        self.assertEqual(self.patient.medical_record, "MS001")

    def test_update_requires_name_and_doctor(self):
        response = self.client.patch(
            f"/api/patients/{self.patient.id}/", {"phone": "(11) 90000-0000"}, format="json"
        )

        self.assertEqual(response.status_code, 400)
        self.assertEqual(response.data["error"], "Name and doctorId are required")

    def test_update_to_taken_medical_record(self):
        Patient.objects.create(name="Ana Oliveira", medical_record="AO002", doctor=self.doctor)

        response = self.client.put(
            f"/api/patients/{self.patient.id}/",
            {"name": "Maria Santos", "medicalRecord": "AO002", "doctorId": self.doctor.id},
            format="json",
        )

        self.assertEqual(response.status_code, 400)
        self.assertEqual(response.data["error"], "Medical record already registered")

    def test_update_unknown_doctor_is_bad_request(self):
        response = self.client.put(
            f"/api/patients/{self.patient.id}/",
            {"name": "Maria Santos", "doctorId": 99999},
            format="json",
        )

        self.assertEqual(response.status_code, 400)
        self.assertEqual(response.data["error"], "Doctor not found")

    # ========== DELETE TESTS ==========

    def test_delete_cascades_diagnoses(self):
        """Deleting a patient removes all of its diagnoses."""
        self._add_diagnosis()
        self._add_diagnosis(("P3", "O3", "T3", "C"))

        response = self.client.delete(f"/api/patients/{self.patient.id}/")

        self.assertEqual(response.status_code, 200)
        self.assertEqual(response.data, {"message": "Patient deleted successfully"})
        self.assertFalse(Patient.objects.filter(id=self.patient.id).exists())
        self.assertEqual(Diagnosis.objects.filter(patient_id=self.patient.id).count(), 0)
        self.assertTrue(Doctor.objects.filter(id=self.doctor.id).exists())

    def test_delete_unknown_returns_404(self):
        response = self.client.delete("/api/patients/99999/")

        self.assertEqual(response.status_code, 404)
        self.assertEqual(response.data["error"], "Patient not found")
