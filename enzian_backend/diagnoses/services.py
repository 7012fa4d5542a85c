"""
Diagnosis services.

Diagnoses are create-only. The final classification is composed here from
the four validated axis codes and stored with the record.
"""

from __future__ import annotations

import logging

from django.db import transaction
from django.db.models import QuerySet

from enzian_backend.core.exceptions import (
    InvalidReference,
    MissingRequiredFields,
    RecordNotFound,
    RegistryError,
)
from enzian_backend.core.utils import log_record_action
from enzian_backend.diagnoses.classification import (
    IncompleteClassification,
    final_classification,
)
from enzian_backend.diagnoses.history import PatientHistory, build_history
from enzian_backend.diagnoses.models import Diagnosis
from enzian_backend.doctors.models import Doctor
from enzian_backend.patients.models import Patient

logger = logging.getLogger(__name__)


def list_diagnoses(patient_id=None) -> QuerySet[Diagnosis]:
    """All diagnoses newest first, optionally for one patient."""
    qs = Diagnosis.objects.select_related('patient', 'doctor').order_by('-created_at', '-id')
    if patient_id not in (None, ''):
        try:
            patient_id = int(patient_id)
        except (TypeError, ValueError):
            raise RegistryError('patientId must be an integer')
        qs = qs.filter(patient_id=patient_id)
    return qs


def get_diagnosis(pk) -> Diagnosis:
    try:
        return Diagnosis.objects.select_related('patient', 'doctor').get(pk=pk)
    except Diagnosis.DoesNotExist:
        raise RecordNotFound('Diagnosis not found')


def create_diagnosis(data: dict) -> Diagnosis:
    """Record a diagnosis for an existing patient and doctor."""
    try:
        patient = Patient.objects.get(pk=data['patient_id'])
    except Patient.DoesNotExist:
        raise InvalidReference('Patient not found')
    try:
        doctor = Doctor.objects.get(pk=data['doctor_id'])
    except Doctor.DoesNotExist:
        raise InvalidReference('Doctor not found')

    try:
        code = final_classification(
            data.get('peritoneum'),
            data.get('ovary'),
            data.get('tube'),
            data.get('deep_endometriosis'),
        )
    except IncompleteClassification:
        raise MissingRequiredFields()

    with transaction.atomic():
        diagnosis = Diagnosis.objects.create(
            patient=patient,
            doctor=doctor,
            peritoneum=data['peritoneum'],
            peritoneum_size=data.get('peritoneum_size'),
            ovary=data['ovary'],
            ovary_size=data.get('ovary_size'),
            tube=data['tube'],
            tube_size=data.get('tube_size'),
            deep_endometriosis=data['deep_endometriosis'],
            deep_endometriosis_size=data.get('deep_endometriosis_size'),
            observations=data.get('observations'),
            final_classification=code,
        )

    logger.info(
        'Diagnosis recorded (id=%s, patient_id=%s, classification=%s)',
        diagnosis.pk,
        patient.pk,
        code,
    )
    log_record_action(
        'diagnosis_created',
        patient_id=patient.pk,
        doctor_id=doctor.pk,
        meta={'diagnosis_id': diagnosis.pk, 'classification': code},
    )
    return diagnosis


def patient_history(patient: Patient) -> PatientHistory:
    diagnoses = (
        patient.diagnoses.select_related('doctor')
        .order_by('-created_at', '-id')
    )
    return build_history(diagnoses)
