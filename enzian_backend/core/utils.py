import logging

from .models import AuditLog

logger = logging.getLogger(__name__)


def log_record_action(action, patient_id=None, doctor_id=None, meta=None):
    """Write an audit entry for a registry or diagnosis action.

    Audit failures are logged and never propagate into the request.
    """

    try:
        AuditLog.objects.create(
            action=action,
            patient_id=patient_id,
            doctor_id=doctor_id,
            meta=meta,
        )
    except Exception:
        logger.exception(
            'AuditLog write failed (action=%s, patient_id=%s, doctor_id=%s)',
            action,
            patient_id,
            doctor_id,
        )
