"""
Base view classes and the DRF exception handler
"""

import logging

from django.db import DatabaseError
from rest_framework import generics
from rest_framework.views import exception_handler

from core.exceptions import FitbookError, PersistenceError
from core.responses import SuccessResponse, ErrorResponse

logger = logging.getLogger(__name__)


class BaseAPIView(generics.GenericAPIView):
    """
    Base API view with standardized responses
    """

    def success_response(self, data=None, message="Operation successful", status_code=200):
        return SuccessResponse(data=data, message=message, status_code=status_code)

    def error_response(self, message="Operation failed", errors=None, status_code=400):
        return ErrorResponse(message=message, errors=errors, status_code=status_code)

    def service_error_response(self, exc: FitbookError):
        """Translate a service exception into an error envelope"""
        if exc.status_code >= 500:
            logger.error(f"{self.__class__.__name__}: {exc.message}")
        return ErrorResponse.from_exception(exc)


def fitbook_exception_handler(exc, context):
    """
    Wrap everything that escapes a view in the standard error envelope
    """
    if isinstance(exc, FitbookError):
        if exc.status_code >= 500:
            logger.error(f"Unhandled service error in {context.get('view').__class__.__name__}: {exc.message}")
        return ErrorResponse.from_exception(exc)

    if isinstance(exc, DatabaseError):
        logger.error(f"Storage error in {context.get('view').__class__.__name__}: {str(exc)}")
        return ErrorResponse.from_exception(PersistenceError(str(exc)))

    response = exception_handler(exc, context)
    if response is None:
        return None

    detail = response.data
    if isinstance(detail, dict) and 'detail' in detail:
        message = str(detail['detail'])
        errors = None
    else:
        message = "Invalid data"
        errors = detail
    wrapped = ErrorResponse(message=message, errors=errors, status_code=response.status_code)
    for header in ('WWW-Authenticate', 'Retry-After'):
        if header in response:
            wrapped[header] = response[header]
    return wrapped
