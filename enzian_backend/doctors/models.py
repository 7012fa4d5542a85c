from django.db import models


class Doctor(models.Model):
    """Registered doctor.

    email and crm (Brazilian medical-license number) are unique. Patients
    and diagnoses reference a doctor with PROTECT, so a doctor with
    dependents cannot be deleted at the database level either.
    """

    name = models.CharField(max_length=200)
    email = models.EmailField(unique=True)
    crm = models.CharField('CRM', max_length=32, unique=True)
    specialty = models.CharField(max_length=200)
    phone = models.CharField(max_length=50, null=True, blank=True)
    created_at = models.DateTimeField(auto_now_add=True)
    updated_at = models.DateTimeField(auto_now=True)

    class Meta:
        db_table = 'doctors'
        ordering = ['name', 'id']
        verbose_name = 'Doctor'
        verbose_name_plural = 'Doctors'

    def __str__(self) -> str:
        return f"{self.name} (CRM {self.crm})"
