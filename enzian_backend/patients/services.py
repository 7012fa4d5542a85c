"""
Patient registry services.

Every patient belongs to exactly one doctor. email and medical_record are
optional but unique when present. Deleting a patient removes its diagnoses
in the same transaction.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from datetime import date

from django.db import transaction
from django.db.models import Q, QuerySet

from enzian_backend.core.exceptions import DuplicateRecord, InvalidReference, RecordNotFound
from enzian_backend.core.patch import UNSET, Patch
from enzian_backend.core.utils import log_record_action
from enzian_backend.doctors.models import Doctor
from enzian_backend.patients.models import Patient

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class PatientPatch(Patch):
    name: str = UNSET
    email: str | None = UNSET
    phone: str | None = UNSET
    date_of_birth: date | None = UNSET
    medical_record: str | None = UNSET
    doctor_id: int = UNSET


def list_patients(search: str | None = None) -> QuerySet[Patient]:
    """All patients with their doctor, optionally filtered by name or medical record."""
    qs = Patient.objects.select_related('doctor')
    search = (search or '').strip()
    if search:
        qs = qs.filter(Q(name__icontains=search) | Q(medical_record__icontains=search))
    return qs


def get_patient(pk) -> Patient:
    try:
        return Patient.objects.select_related('doctor').get(pk=pk)
    except (Patient.DoesNotExist, ValueError, TypeError):
        raise RecordNotFound('Patient not found')


def _resolve_doctor(doctor_id) -> Doctor:
    try:
        return Doctor.objects.get(pk=doctor_id)
    except (Doctor.DoesNotExist, ValueError, TypeError):
        raise InvalidReference('Doctor not found')


def _ensure_unique(
    *, email: str | None, medical_record: str | None, exclude_id: int | None = None
) -> None:
    qs = Patient.objects.all()
    if exclude_id is not None:
        qs = qs.exclude(pk=exclude_id)

    if email and qs.filter(email__iexact=email).exists():
        raise DuplicateRecord('email', 'Email already registered')
    if medical_record and qs.filter(medical_record=medical_record).exists():
        raise DuplicateRecord('medical_record', 'Medical record already registered')


def create_patient(data: dict) -> Patient:
    doctor = _resolve_doctor(data['doctor_id'])
    _ensure_unique(email=data.get('email'), medical_record=data.get('medical_record'))

    with transaction.atomic():
        patient = Patient.objects.create(
            name=data['name'],
            email=data.get('email'),
            phone=data.get('phone'),
            date_of_birth=data.get('date_of_birth'),
            medical_record=data.get('medical_record'),
            doctor=doctor,
        )

    logger.info('Patient created (id=%s, doctor_id=%s)', patient.pk, doctor.pk)
    log_record_action('patient_created', patient_id=patient.pk, doctor_id=doctor.pk)
    return patient


def update_patient(patient: Patient, patch: PatientPatch) -> Patient:
    """Apply an update; fields absent from ``patch`` keep their stored value."""
    doctor = None
    if patch.is_set('doctor_id') and patch.doctor_id != patient.doctor_id:
        doctor = _resolve_doctor(patch.doctor_id)

    _ensure_unique(
        email=patch.email if patch.is_set('email') else None,
        medical_record=patch.medical_record if patch.is_set('medical_record') else None,
        exclude_id=patient.pk,
    )

    changed = patch.apply_to(patient)
    if not changed:
        return patient
    if doctor is not None:
        patient.doctor = doctor

    with transaction.atomic():
        patient.save(update_fields=[*changed, 'updated_at'])

    logger.info('Patient updated (id=%s, fields=%s)', patient.pk, ','.join(changed))
    log_record_action(
        'patient_updated',
        patient_id=patient.pk,
        doctor_id=patient.doctor_id,
        meta={'fields': changed},
    )
    return patient


def delete_patient(patient: Patient) -> None:
    """Delete a patient together with all of its diagnoses."""
    patient_id = patient.pk
    doctor_id = patient.doctor_id
    with transaction.atomic():
        diagnoses = patient.diagnoses.count()
        patient.delete()

    logger.info('Patient deleted (id=%s, diagnoses=%s)', patient_id, diagnoses)
    log_record_action(
        'patient_deleted',
        patient_id=patient_id,
        doctor_id=doctor_id,
        meta={'diagnoses': diagnoses},
    )
