from __future__ import annotations

from unittest.mock import patch

from django.test import TestCase

from rest_framework.test import APIClient

from enzian_backend.diagnoses.models import Diagnosis
from enzian_backend.doctors.models import Doctor
from enzian_backend.patients.models import Patient


class DiagnosisAPITest(TestCase):
    """Tests for /api/diagnoses/ and /api/patients/<pk>/history/."""

    def setUp(self):
        self.doctor = Doctor.objects.create(
            name="Dr. João Silva",
            email="joao.silva@exemplo.com",
            crm="123456",
            specialty="Ginecologia e Obstetrícia",
        )
        self.patient = Patient.objects.create(
            name="Maria Santos",
            medical_record="MS001",
            doctor=self.doctor,
        )
        self.other_patient = Patient.objects.create(name="Ana Oliveira", doctor=self.doctor)

        self.client = APIClient()
        self.client.defaults["HTTP_HOST"] = "localhost"

    def _payload(self, **overrides):
        data = {
            "patientId": self.patient.id,
            "doctorId": self.doctor.id,
            "peritoneum": "P2",
            "peritoneumSize": "3-7cm",
            "ovary": "O1",
            "ovarySize": "<3cm",
            "tube": "T1",
            "tubeSize": "",
            "deepEndometriosis": "B",
            "observations": "Paciente apresenta dor pélvica crônica.",
        }
        data.update(overrides)
        return data

    # ========== CREATE TESTS ==========

    @patch("enzian_backend.diagnoses.services.log_record_action")
    def test_create_composes_classification(self, mock_log):
        """The server composes finalClassification from the four axes."""
        response = self.client.post("/api/diagnoses/", self._payload(), format="json")

        self.assertEqual(response.status_code, 201)
        self.assertEqual(response.data["finalClassification"], "P2O1T1B")
        self.assertEqual(response.data["severity"]["label"], "Leve")
        self.assertEqual(response.data["patient"]["medicalRecord"], "MS001")
        self.assertEqual(response.data["doctor"], {"id": self.doctor.id, "name": "Dr. João Silva", "crm": "123456"})
        self.assertIsNone(response.data["tubeSize"])
        self.assertIsNone(response.data["deepEndometriosisSize"])
        mock_log.assert_called_once()
        self.assertEqual(mock_log.call_args.args[0], "diagnosis_created")

    def test_client_supplied_classification_ignored(self):
        response = self.client.post(
            "/api/diagnoses/", self._payload(finalClassification="P3O3T3C"), format="json"
        )

        self.assertEqual(response.status_code, 201)
        self.assertEqual(Diagnosis.objects.get().final_classification, "P2O1T1B")

    def test_create_missing_axis_rejected(self):
        """A missing axis is a 400 and no diagnosis row is written."""
        data = self._payload()
        del data["ovary"]

        response = self.client.post("/api/diagnoses/", data, format="json")

        self.assertEqual(response.status_code, 400)
        self.assertEqual(response.data, {"error": "Missing required fields"})
        self.assertEqual(Diagnosis.objects.count(), 0)

    def test_create_blank_axis_rejected(self):
        response = self.client.post("/api/diagnoses/", self._payload(tube=""), format="json")

        self.assertEqual(response.status_code, 400)
        self.assertEqual(response.data["error"], "Missing required fields")
        self.assertEqual(Diagnosis.objects.count(), 0)

    def test_create_invalid_axis_code_rejected(self):
        response = self.client.post("/api/diagnoses/", self._payload(peritoneum="P4"), format="json")

        self.assertEqual(response.status_code, 400)
        self.assertTrue(response.data["error"].startswith("peritoneum: "))
        self.assertEqual(Diagnosis.objects.count(), 0)

    def test_create_invalid_size_rejected(self):
        response = self.client.post("/api/diagnoses/", self._payload(ovarySize="10cm"), format="json")

        self.assertEqual(response.status_code, 400)
        self.assertTrue(response.data["error"].startswith("ovarySize: "))

    def test_create_unknown_patient_is_bad_request(self):
        response = self.client.post("/api/diagnoses/", self._payload(patientId=99999), format="json")

        self.assertEqual(response.status_code, 400)
        self.assertEqual(response.data["error"], "Patient not found")
        self.assertEqual(Diagnosis.objects.count(), 0)

    def test_create_unknown_doctor_is_bad_request(self):
        response = self.client.post("/api/diagnoses/", self._payload(doctorId=99999), format="json")

        self.assertEqual(response.status_code, 400)
        self.assertEqual(response.data["error"], "Doctor not found")

    # ========== LIST / RETRIEVE TESTS ==========

    def test_list_by_patient_round_trip(self):
        """A created diagnosis is found by patientId with its classification."""
        created = self.client.post("/api/diagnoses/", self._payload(), format="json")
        self.client.post(
            "/api/diagnoses/", self._payload(patientId=self.other_patient.id), format="json"
        )

        response = self.client.get("/api/diagnoses/", {"patientId": self.patient.id})

        self.assertEqual(response.status_code, 200)
        self.assertEqual(len(response.data), 1)
        self.assertEqual(response.data[0]["id"], created.data["id"])
        self.assertEqual(response.data[0]["finalClassification"], "P2O1T1B")

    def test_list_newest_first(self):
        first = self.client.post("/api/diagnoses/", self._payload(), format="json")
        second = self.client.post(
            "/api/diagnoses/",
            self._payload(peritoneum="P3", ovary="O3", tube="T3", deepEndometriosis="C"),
            format="json",
        )

        response = self.client.get("/api/diagnoses/")

        self.assertEqual([d["id"] for d in response.data], [second.data["id"], first.data["id"]])

    def test_list_invalid_patient_id(self):
        response = self.client.get("/api/diagnoses/", {"patientId": "abc"})

        self.assertEqual(response.status_code, 400)
        self.assertEqual(response.data["error"], "patientId must be an integer")

    def test_retrieve(self):
        created = self.client.post("/api/diagnoses/", self._payload(), format="json")

        response = self.client.get(f"/api/diagnoses/{created.data['id']}/")

        self.assertEqual(response.status_code, 200)
        self.assertEqual(response.data["observations"], "Paciente apresenta dor pélvica crônica.")

    def test_retrieve_unknown_returns_404(self):
        response = self.client.get("/api/diagnoses/99999/")

        self.assertEqual(response.status_code, 404)
        self.assertEqual(response.data, {"error": "Diagnosis not found"})

    # ========== REPORT TESTS ==========

    def test_report_is_html(self):
        created = self.client.post("/api/diagnoses/", self._payload(), format="json")

        response = self.client.get(f"/api/diagnoses/{created.data['id']}/report/")

        self.assertEqual(response.status_code, 200)
        self.assertTrue(response["Content-Type"].startswith("text/html"))
        content = response.content.decode("utf-8")
        self.assertIn("P2O1T1B", content)
        self.assertIn("Maria Santos", content)
        self.assertIn("MS001", content)

    def test_report_unknown_returns_404(self):
        response = self.client.get("/api/diagnoses/99999/report/")

        self.assertEqual(response.status_code, 404)

    # ========== HISTORY TESTS ==========

    def test_history_with_trend(self):
        self.client.post(
            "/api/diagnoses/",
            self._payload(peritoneum="P1", ovary="O1", tube="T1", deepEndometriosis="A"),
            format="json",
        )
        latest = self.client.post(
            "/api/diagnoses/",
            self._payload(peritoneum="P3", ovary="O3", tube="T3", deepEndometriosis="C"),
            format="json",
        )

        response = self.client.get(f"/api/patients/{self.patient.id}/history/")

        self.assertEqual(response.status_code, 200)
        self.assertEqual(response.data["total"], 2)
        self.assertEqual(response.data["latestClassification"], "P3O3T3C")
        self.assertEqual(response.data["latestSeverity"]["label"], "Grave")
        entries = response.data["entries"]
        self.assertEqual(entries[0]["diagnosis"]["id"], latest.data["id"])
        self.assertEqual(entries[0]["trend"], "worsening")
        self.assertIsNone(entries[1]["trend"])
        self.assertEqual(entries[1]["severity"]["label"], "Leve")

    def test_history_empty(self):
        response = self.client.get(f"/api/patients/{self.other_patient.id}/history/")

        self.assertEqual(response.status_code, 200)
        self.assertEqual(response.data["total"], 0)
        self.assertIsNone(response.data["latestClassification"])
        self.assertIsNone(response.data["latestSeverity"])
        self.assertEqual(response.data["entries"], [])

    def test_history_unknown_patient_returns_404(self):
        response = self.client.get("/api/patients/99999/history/")

        self.assertEqual(response.status_code, 404)
        self.assertEqual(response.data["error"], "Patient not found")
