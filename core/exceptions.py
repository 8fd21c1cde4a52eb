# exceptions.py
from rest_framework.views import exception_handler
from rest_framework.response import Response
from rest_framework import status
from rest_framework.exceptions import APIException, ValidationError
from django.core.exceptions import ValidationError as DjangoValidationError
from django.db import DatabaseError, IntegrityError
import logging
from django.conf import settings

logger = logging.getLogger(__name__)


# =============== DOMAIN ERRORS ===============

class CoffeeShopError(APIException):
    """Base class for errors raised by lifecycle transitions and invariant checks"""


class NotFound(CoffeeShopError):
    status_code = status.HTTP_404_NOT_FOUND
    default_detail = 'Item not found'
    default_code = 'not_found'


class NotDeleted(CoffeeShopError):
    """Restore requested on a record that is still active"""
    status_code = status.HTTP_400_BAD_REQUEST
    default_detail = 'Item is not deleted'
    default_code = 'not_deleted'


class StillActive(CoffeeShopError):
    """Hard delete requested on a record that was never soft-deleted"""
    status_code = status.HTTP_400_BAD_REQUEST
    default_detail = 'Cannot hard delete active item'
    default_code = 'still_active'


class Conflict(CoffeeShopError):
    status_code = status.HTTP_409_CONFLICT
    default_detail = 'A record with these values already exists'
    default_code = 'conflict'


class StorageFailure(CoffeeShopError):
    status_code = status.HTTP_500_INTERNAL_SERVER_ERROR
    default_detail = 'The operation could not be completed'
    default_code = 'storage_failure'


class ShapeInvalid(ValidationError):
    default_code = 'invalid'


STATUS_MESSAGES = {
    400: 'Validation error',
    404: 'Resource not found',
    405: 'Method not allowed',
    409: 'Conflict',
    415: 'Unsupported media type',
    500: 'Internal server error',
}


def _translate(exc):
    """Turn Django and database exceptions into API exceptions"""
    if isinstance(exc, IntegrityError):
        logger.warning(f"Integrity Error: {exc}")
        return Conflict()
    if isinstance(exc, DatabaseError):
        logger.exception(f"Storage Error: {exc}")
        return StorageFailure()
    if isinstance(exc, DjangoValidationError):
        logger.error(f"Validation Error: {exc}")
        return ShapeInvalid({'non_field_errors': exc.messages})
    return exc


def custom_exception_handler(exc, context):
    """
    Custom exception handler for the coffee shop API.

    Every failure is rendered in the same envelope so callers can tell the
    conditions apart by ``status_code`` and ``code``.
    """
    exc = _translate(exc)

    # Call REST framework's default exception handler first
    response = exception_handler(exc, context)

    if response is None:
        logger.exception(f"Unexpected Error: {exc}", exc_info=exc)
        return Response({
            'error': True,
            'code': 'server_error',
            'message': 'An unexpected error occurred',
            'details': {'error': str(exc)} if settings.DEBUG else {},
            'status_code': 500
        }, status=status.HTTP_500_INTERNAL_SERVER_ERROR)

    if isinstance(exc, CoffeeShopError):
        message = str(exc.detail)
        details = {} if isinstance(exc, StorageFailure) else response.data
    else:
        message = STATUS_MESSAGES.get(response.status_code, 'An error occurred')
        details = response.data

    response.data = {
        'error': True,
        'code': getattr(exc, 'default_code', 'error'),
        'message': message,
        'details': details,
        'status_code': response.status_code
    }
    return response
