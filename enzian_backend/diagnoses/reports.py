"""
Printable diagnosis report.

``render_report`` fills the ``diagnoses/report.html`` template from a
diagnosis, its patient and the responsible doctor. The resulting HTML is
meant for the browser's print dialog; no PDF is produced here.
"""

from __future__ import annotations

from datetime import date

from django.template.loader import render_to_string
from django.utils import timezone

from enzian_backend.diagnoses.classification import AXES, describe_axes, severity_tier

REPORT_TEMPLATE = 'diagnoses/report.html'

REFERENCE = (
    'Keckstein J, et al. The #Enzian classification: a comprehensive system '
    'for classifying endometriosis. Hum Reprod Open. 2021.'
)


def _format_date(value: date | None) -> str | None:
    return value.strftime('%d/%m/%Y') if value else None


def build_report_context(diagnosis, patient, doctor, *, generated_on: date | None = None) -> dict:
    generated_on = generated_on or timezone.localdate()
    axes = describe_axes(diagnosis.final_classification)
    for axis, row in zip(AXES, axes):
        row['size'] = getattr(diagnosis, f'{axis.key}_size', None)

    return {
        'generated_on': _format_date(generated_on),
        'patient': {
            'name': patient.name,
            'medical_record': patient.medical_record or 'Não informado',
            'date_of_birth': _format_date(patient.date_of_birth) or 'Não informada',
            'contact': patient.phone or patient.email or 'Não informado',
        },
        'doctor': {
            'name': doctor.name,
            'specialty': doctor.specialty,
            'crm': doctor.crm,
            'email': doctor.email,
        },
        'classification': diagnosis.final_classification,
        'severity': severity_tier(diagnosis.final_classification),
        'axes': axes,
        'observations': (diagnosis.observations or '').strip(),
        'reference': REFERENCE,
    }


def render_report(diagnosis, patient, doctor, *, generated_on: date | None = None) -> str:
    """Render the printable HTML report for one diagnosis."""
    context = build_report_context(diagnosis, patient, doctor, generated_on=generated_on)
    return render_to_string(REPORT_TEMPLATE, context)
