"""
Domain exceptions for the record API and their translation to HTTP.

Service functions raise these exceptions; ``api_exception_handler`` (wired as
DRF's ``EXCEPTION_HANDLER``) turns them, and any other error reaching a view,
into the ``{"error": "<message>"}`` response shape.
"""

from __future__ import annotations

import logging
from typing import Any

from django.db import IntegrityError
from django.http import Http404

from rest_framework import exceptions as drf_exceptions
from rest_framework import status
from rest_framework.response import Response
from rest_framework.views import exception_handler as drf_exception_handler

logger = logging.getLogger(__name__)


class RegistryError(Exception):
    """Base exception for all record API errors."""

    status_code = status.HTTP_400_BAD_REQUEST
    default_message = 'Invalid request'

    def __init__(self, message: str | None = None):
        self.message = message or self.default_message
        super().__init__(self.message)

    def to_dict(self) -> dict[str, Any]:
        return {'error': self.message}


class RecordNotFound(RegistryError):
    """The primary resource addressed by the URL does not exist."""

    status_code = status.HTTP_404_NOT_FOUND
    default_message = 'Not found'


class InvalidReference(RegistryError):
    """A foreign key in the request body points to a missing record."""

    default_message = 'Referenced record not found'


class MissingRequiredFields(RegistryError):
    default_message = 'Missing required fields'


class DuplicateRecord(RegistryError):
    """A unique field (email, CRM, medical record) is already taken."""

    def __init__(self, field: str, message: str | None = None):
        self.field = field
        super().__init__(message or f'{field} already registered')


class DependentRecordsExist(RegistryError):
    """Deletion refused because other records still reference this one."""

    def __init__(self, message: str, *, patients: int = 0, diagnoses: int = 0):
        self.patients = patients
        self.diagnoses = diagnoses
        super().__init__(message)


def _first_message(data: Any) -> str:
    """Reduce a DRF error payload to a single human-readable message."""
    if isinstance(data, dict):
        if not data:
            return RegistryError.default_message
        key, value = next(iter(data.items()))
        message = _first_message(value)
        if key in ('non_field_errors', 'detail'):
            return message
        return f'{key}: {message}'
    if isinstance(data, (list, tuple)):
        return _first_message(data[0]) if data else RegistryError.default_message
    return str(data)


def api_exception_handler(exc, context):
    """DRF exception handler producing ``{"error": ...}`` bodies.

    - RegistryError subclasses: their own status and message
    - IntegrityError (unique constraint lost a race): 400
    - DRF/Django API exceptions: their status, flattened message
    - anything else: logged, 500 with a generic message
    """
    if isinstance(exc, RegistryError):
        return Response(exc.to_dict(), status=exc.status_code)

    if isinstance(exc, IntegrityError):
        logger.warning('Integrity error surfaced to the API: %s', exc)
        return Response(
            {'error': 'Record conflicts with an existing record'},
            status=status.HTTP_400_BAD_REQUEST,
        )

    response = drf_exception_handler(exc, context)
    if response is not None:
        if isinstance(exc, (Http404, drf_exceptions.NotFound)):
            response.data = {'error': 'Not found'}
        else:
            response.data = {'error': _first_message(response.data)}
        return response

    view = context.get('view') if context else None
    logger.error(
        'Unhandled error in %s',
        view.__class__.__name__ if view is not None else 'unknown view',
        exc_info=exc,
    )
    return Response(
        {'error': 'Internal server error'},
        status=status.HTTP_500_INTERNAL_SERVER_ERROR,
    )
