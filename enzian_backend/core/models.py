from django.db import models


class AuditLog(models.Model):
    """Audit log for registry and diagnosis actions.

    patient_id and doctor_id are plain integers (not FKs) so entries
    survive deletion of the records they describe.
    """

    action = models.CharField(max_length=50, db_index=True)
    patient_id = models.IntegerField(null=True, blank=True, db_index=True)
    doctor_id = models.IntegerField(null=True, blank=True, db_index=True)
    timestamp = models.DateTimeField(auto_now_add=True, db_index=True)
    meta = models.JSONField(null=True, blank=True)

    class Meta:
        db_table = 'core_auditlog'
        ordering = ['-timestamp', '-id']
        verbose_name = 'Audit Log'
        verbose_name_plural = 'Audit Logs'
        indexes = [
            models.Index(fields=['action', 'timestamp'], name='core_auditl_action_5b1f0e_idx'),
            models.Index(fields=['patient_id', 'timestamp'], name='core_auditl_patient_9c2d41_idx'),
        ]

    def __str__(self) -> str:
        return f"{self.timestamp} {self.action} (patient_id={self.patient_id}, doctor_id={self.doctor_id})"
