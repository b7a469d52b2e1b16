"""
Custom exception handlers for DRF.
"""
from rest_framework import status
from rest_framework.response import Response
from rest_framework.views import exception_handler

from shared.domain.exceptions import (
    AuthRequiredError,
    DomainException,
    EntityNotFoundError,
    InvalidOperationError,
    PersistenceError,
    ValidationError,
)
from .notifications import get_notifier


def _respond(exc, context, body: dict, status_code: int) -> Response:
    body = {'error': exc.message, 'code': exc.code, **body}
    request = context.get('request')
    if request is not None:
        body['notifications'] = get_notifier(request).as_list()
    return Response(body, status=status_code)


def custom_exception_handler(exc, context):
    """Handle custom domain exceptions."""
    # Call REST framework's default exception handler first
    response = exception_handler(exc, context)

    if isinstance(exc, EntityNotFoundError):
        return _respond(
            exc, context,
            {'entity': exc.entity_name, 'entity_id': exc.entity_id},
            status.HTTP_404_NOT_FOUND,
        )

    if isinstance(exc, ValidationError):
        return _respond(exc, context, {'field': exc.field}, status.HTTP_400_BAD_REQUEST)

    if isinstance(exc, AuthRequiredError):
        return _respond(exc, context, {'action': exc.action}, status.HTTP_401_UNAUTHORIZED)

    if isinstance(exc, InvalidOperationError):
        return _respond(
            exc, context,
            {'operation': exc.operation, 'state': exc.state},
            status.HTTP_409_CONFLICT,
        )

    if isinstance(exc, PersistenceError):
        return _respond(
            exc, context, {'operation': exc.operation}, status.HTTP_503_SERVICE_UNAVAILABLE
        )

    if isinstance(exc, DomainException):
        return _respond(exc, context, {}, status.HTTP_400_BAD_REQUEST)

    return response
