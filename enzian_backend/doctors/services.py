"""
Doctor registry services.

Business rules for the doctor registry live here; views delegate to these
functions and the project exception handler translates the raised
``RegistryError`` subclasses into HTTP responses.

Uniqueness checks are check-then-act. The database unique constraints on
``email`` and ``crm`` still reject a duplicate that slips through a race.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass

from django.db import transaction
from django.db.models import Q, QuerySet

from enzian_backend.core.exceptions import (
    DependentRecordsExist,
    DuplicateRecord,
    RecordNotFound,
)
from enzian_backend.core.patch import UNSET, Patch
from enzian_backend.core.utils import log_record_action
from enzian_backend.doctors.models import Doctor

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class DoctorPatch(Patch):
    name: str = UNSET
    email: str = UNSET
    crm: str = UNSET
    specialty: str = UNSET
    phone: str | None = UNSET


def list_doctors(search: str | None = None) -> QuerySet[Doctor]:
    """All doctors, optionally filtered by a case-insensitive substring."""
    qs = Doctor.objects.all()
    search = (search or '').strip()
    if search:
        qs = qs.filter(
            Q(name__icontains=search)
            | Q(email__icontains=search)
            | Q(crm__icontains=search)
        )
    return qs


def get_doctor(pk) -> Doctor:
    try:
        return Doctor.objects.get(pk=pk)
    except (Doctor.DoesNotExist, ValueError, TypeError):
        raise RecordNotFound('Doctor not found')


def _ensure_unique(*, email: str | None, crm: str | None, exclude_id: int | None = None) -> None:
    qs = Doctor.objects.all()
    if exclude_id is not None:
        qs = qs.exclude(pk=exclude_id)

    if email and qs.filter(email__iexact=email).exists():
        raise DuplicateRecord('email', 'Email already registered')
    if crm and qs.filter(crm=crm).exists():
        raise DuplicateRecord('crm', 'CRM already registered')


def create_doctor(data: dict) -> Doctor:
    _ensure_unique(email=data['email'], crm=data['crm'])

    with transaction.atomic():
        doctor = Doctor.objects.create(
            name=data['name'],
            email=data['email'],
            crm=data['crm'],
            specialty=data['specialty'],
            phone=data.get('phone') or None,
        )

    logger.info('Doctor created (id=%s, crm=%s)', doctor.pk, doctor.crm)
    log_record_action('doctor_created', doctor_id=doctor.pk)
    return doctor


def update_doctor(doctor: Doctor, patch: DoctorPatch) -> Doctor:
    """Apply a partial update; only fields present in ``patch`` change."""
    email = patch.email if patch.is_set('email') and patch.email != doctor.email else None
    crm = patch.crm if patch.is_set('crm') and patch.crm != doctor.crm else None
    _ensure_unique(email=email, crm=crm, exclude_id=doctor.pk)

    changed = patch.apply_to(doctor)
    if not changed:
        return doctor

    with transaction.atomic():
        doctor.save(update_fields=[*changed, 'updated_at'])

    logger.info('Doctor updated (id=%s, fields=%s)', doctor.pk, ','.join(changed))
    log_record_action('doctor_updated', doctor_id=doctor.pk, meta={'fields': changed})
    return doctor


def delete_doctor(doctor: Doctor) -> None:
    """Delete a doctor unless patients or diagnoses still reference it."""
    patients = doctor.patients.count()
    diagnoses = doctor.diagnoses.count()
    if patients or diagnoses:
        logger.warning(
            'Refused to delete doctor %s (patients=%s, diagnoses=%s)',
            doctor.pk,
            patients,
            diagnoses,
        )
        raise DependentRecordsExist(
            'Cannot delete doctor with associated patients or diagnoses',
            patients=patients,
            diagnoses=diagnoses,
        )

    doctor_id = doctor.pk
    with transaction.atomic():
        doctor.delete()

    logger.info('Doctor deleted (id=%s)', doctor_id)
    log_record_action('doctor_deleted', doctor_id=doctor_id)
