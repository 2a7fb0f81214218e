"""
Domain errors and the unified API exception handler.

Services raise the exceptions below; DRF renders them through
:func:`api_exception_handler` as ``{'ok': False, 'error': {...}}``.
"""
import logging

from django.http import Http404
from rest_framework import exceptions, status
from rest_framework.response import Response

logger = logging.getLogger(__name__)

# Malformed request bodies are reported by serializers.
ValidationFailure = exceptions.ValidationError


class DuplicateEmail(exceptions.APIException):
    status_code = status.HTTP_400_BAD_REQUEST
    default_detail = 'Email already exists!'
    default_code = 'duplicate_email'


class NotFound(exceptions.NotFound):
    default_detail = 'Not found.'
    default_code = 'not_found'


class PendingApproval(exceptions.APIException):
    status_code = status.HTTP_403_FORBIDDEN
    default_detail = 'Your account is pending admin approval. Please wait for verification.'
    default_code = 'pending_approval'


class InvalidCredentials(exceptions.APIException):
    status_code = status.HTTP_401_UNAUTHORIZED
    default_detail = 'Invalid username or password'
    default_code = 'invalid_credentials'


def _error_code(exc) -> str:
    if isinstance(exc, Http404):
        return 'not_found'
    if isinstance(exc, exceptions.ValidationError):
        return 'invalid'
    return getattr(exc, 'default_code', None) or 'api_error'


def api_exception_handler(exc, context):
    # rest_framework.views resolves the authentication classes on import
    from rest_framework.views import exception_handler as drf_exception_handler

    resp = drf_exception_handler(exc, context)
    if resp is None:
        view = context.get('view')
        logger.exception('unhandled error view=%s', view.__class__.__name__ if view else None, exc_info=exc)
        return Response({'ok': False, 'error': {'code': 'server_error', 'message': str(exc)}}, status=500)
    # normalize response
    detail = None
    if isinstance(resp.data, dict):
        detail = resp.data.get('detail') or resp.data
    else:
        detail = resp.data
    if resp.status_code >= 500:
        logger.error('api error status=%s detail=%s', resp.status_code, detail)
    else:
        logger.info('api error status=%s code=%s', resp.status_code, _error_code(exc))
    return Response(
        {'ok': False, 'error': {'code': _error_code(exc), 'message': detail}},
        status=resp.status_code,
        headers={k: v for k, v in resp.items() if k in ('WWW-Authenticate', 'Retry-After')},
    )
