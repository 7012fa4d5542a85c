from django.db import models

from enzian_backend.doctors.models import Doctor


class Patient(models.Model):
    """Patient under the care of a responsible doctor.

    email and medical_record are optional but unique when present; absent
    values are stored as NULL so several patients may omit them. Deleting a
    patient deletes its diagnoses.
    """

    name = models.CharField(max_length=200)
    email = models.EmailField(unique=True, null=True, blank=True)
    phone = models.CharField(max_length=50, null=True, blank=True)
    date_of_birth = models.DateField(null=True, blank=True)
    medical_record = models.CharField(max_length=64, unique=True, null=True, blank=True)
    doctor = models.ForeignKey(
        Doctor,
        on_delete=models.PROTECT,
        related_name='patients',
    )
    created_at = models.DateTimeField(auto_now_add=True)
    updated_at = models.DateTimeField(auto_now=True)

    class Meta:
        db_table = 'patients'
        ordering = ['name', 'id']
        verbose_name = 'Patient'
        verbose_name_plural = 'Patients'

    def __str__(self) -> str:
        if self.medical_record:
            return f"{self.name} ({self.medical_record})"
        return self.name

    @property
    def contact(self) -> str | None:
        """Preferred contact: phone, else email."""
        return self.phone or self.email
