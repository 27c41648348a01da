"""
Domain exceptions for Fitbook services

Services raise these; views translate them into ErrorResponse payloads
using the status code carried by each exception.
"""
from rest_framework import status


class FitbookError(Exception):
    """Base class for all errors raised by the service layer"""

    status_code = status.HTTP_400_BAD_REQUEST
    default_message = "Operation failed"
    # Server-side errors are logged and never echoed back to the client
    expose_message = True

    def __init__(self, message=None, errors=None):
        self.message = message or self.default_message
        self.errors = errors
        super().__init__(self.message)

    @property
    def public_message(self):
        if self.expose_message:
            return self.message
        return self.default_message


class NotFound(FitbookError):
    status_code = status.HTTP_404_NOT_FOUND
    default_message = "Resource not found"


class Conflict(FitbookError):
    """Request is well-formed but clashes with current state"""
    status_code = status.HTTP_400_BAD_REQUEST
    default_message = "Request conflicts with current state"


class AlreadyBooked(Conflict):
    default_message = "You have already booked this class"


class ClassFull(Conflict):
    default_message = "Class is already full"


class InsufficientMinutes(Conflict):
    default_message = "Not enough remaining minutes to book this class"


class ValidationError(FitbookError):
    default_message = "Invalid data"


class PaymentNotSucceeded(FitbookError):
    default_message = "Payment has not succeeded"


class ExternalServiceError(FitbookError):
    status_code = status.HTTP_502_BAD_GATEWAY
    default_message = "Payment provider request failed"
    expose_message = False


class PersistenceError(FitbookError):
    status_code = status.HTTP_500_INTERNAL_SERVER_ERROR
    default_message = "Server error"
    expose_message = False
