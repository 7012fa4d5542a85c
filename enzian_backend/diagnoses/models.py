from django.db import models

from enzian_backend.diagnoses.classification import (
    DeepEndometriosisCode,
    LesionSize,
    OvaryCode,
    PeritoneumCode,
    SeverityTier,
    TubeCode,
    severity_tier,
)
from enzian_backend.doctors.models import Doctor
from enzian_backend.patients.models import Patient


class Diagnosis(models.Model):
    """One Enzian classification recorded during a consultation.

    final_classification is computed once at creation and stored; it is
    never recomputed from the axis fields. Diagnoses have no update path and
    are removed only together with their patient.
    """

    patient = models.ForeignKey(
        Patient,
        on_delete=models.CASCADE,
        related_name='diagnoses',
    )
    doctor = models.ForeignKey(
        Doctor,
        on_delete=models.PROTECT,
        related_name='diagnoses',
    )

    peritoneum = models.CharField(max_length=2, choices=PeritoneumCode.choices)
    peritoneum_size = models.CharField(max_length=8, choices=LesionSize.choices, null=True, blank=True)
    ovary = models.CharField(max_length=2, choices=OvaryCode.choices)
    ovary_size = models.CharField(max_length=8, choices=LesionSize.choices, null=True, blank=True)
    tube = models.CharField(max_length=2, choices=TubeCode.choices)
    tube_size = models.CharField(max_length=8, choices=LesionSize.choices, null=True, blank=True)
    deep_endometriosis = models.CharField(max_length=1, choices=DeepEndometriosisCode.choices)
    deep_endometriosis_size = models.CharField(
        max_length=8, choices=LesionSize.choices, null=True, blank=True
    )

    observations = models.TextField(null=True, blank=True)
    final_classification = models.CharField(max_length=7, db_index=True)
    created_at = models.DateTimeField(auto_now_add=True, db_index=True)

    class Meta:
        db_table = 'diagnoses'
        ordering = ['-created_at', '-id']
        verbose_name = 'Diagnosis'
        verbose_name_plural = 'Diagnoses'
        indexes = [
            models.Index(fields=['patient', 'created_at'], name='diagnoses_patient_created_idx'),
        ]

    def __str__(self) -> str:
        return f"{self.final_classification} (patient_id={self.patient_id})"

    @property
    def severity(self) -> SeverityTier:
        return severity_tier(self.final_classification)
