"""
Error types and the unified API exception handler.

Store-level failures are plain Python exceptions raised by the service
layer and handled in the views.  Authentication and authorisation
failures are DRF ``APIException`` subclasses so the permission and
authentication machinery can raise them directly.
"""
import logging
from contextlib import contextmanager

from django.db import DatabaseError
from rest_framework import exceptions, status
from rest_framework.response import Response

logger = logging.getLogger(__name__)


class StorageError(Exception):
    """A persistence call failed."""


class DuplicateEmail(StorageError):
    """A principal with this email already exists for its kind."""

    def __init__(self, kind: str, email: str):
        super().__init__(f"{kind} with email {email!r} already exists")
        self.kind = kind
        self.email = email


class InvalidToken(exceptions.APIException):
    status_code = status.HTTP_400_BAD_REQUEST
    default_detail = 'Invalid token.'
    default_code = 'invalid_token'


class Forbidden(exceptions.PermissionDenied):
    default_detail = 'Access forbidden. Admins only.'
    default_code = 'forbidden'


def _first_message(data):
    if isinstance(data, dict):
        for value in data.values():
            return _first_message(value)
        return ''
    if isinstance(data, (list, tuple)):
        return _first_message(data[0]) if data else ''
    return str(data)


def api_exception_handler(exc, context):
    # rest_framework.views resolves DEFAULT_AUTHENTICATION_CLASSES on import,
    # and students.authentication imports this module.
    from rest_framework.views import exception_handler as drf_exception_handler

    if isinstance(exc, exceptions.NotAuthenticated):
        exc.detail = 'Access denied. No token provided.'
    resp = drf_exception_handler(exc, context)
    if resp is None:
        view = context.get('view')
        logger.exception("Unhandled error in %s", getattr(view, '__name__', view), exc_info=exc)
        return Response({'error': 'Internal Server Error'}, status=500)
    # normalize response
    if isinstance(exc, exceptions.ValidationError):
        body = {'message': _first_message(resp.data), 'errors': resp.data}
    elif isinstance(resp.data, dict) and 'detail' in resp.data:
        body = {'message': str(resp.data['detail'])}
    else:
        body = {'message': _first_message(resp.data)}
    resp.data = body
    return resp


@contextmanager
def storage_errors():
    """Translate database driver errors into :class:`StorageError`."""
    try:
        yield
    except DatabaseError as exc:
        raise StorageError(str(exc)) from exc
