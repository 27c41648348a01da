"""
Standardized API response envelopes
"""

from rest_framework.response import Response
from rest_framework import status
from typing import Any, Dict, Optional


class SuccessResponse(Response):
    """
    Success envelope: {"success": true, "message": ..., **data}
    """
    def __init__(
        self,
        data: Any = None,
        message: str = "Operation successful",
        status_code: int = status.HTTP_200_OK,
        **kwargs
    ):
        response_data = {
            "success": True,
            "message": message,
        }

        if data is not None:
            if isinstance(data, dict):
                response_data.update(data)
            else:
                response_data["data"] = data

        super().__init__(data=response_data, status=status_code, **kwargs)


class ErrorResponse(Response):
    """
    Error envelope: {"success": false, "message": ..., "errors": {...}}
    """
    def __init__(
        self,
        message: str = "Operation failed",
        errors: Optional[Dict] = None,
        status_code: int = status.HTTP_400_BAD_REQUEST,
        **kwargs
    ):
        response_data = {
            "success": False,
            "message": message,
        }

        if errors:
            response_data["errors"] = errors

        super().__init__(data=response_data, status=status_code, **kwargs)

    @classmethod
    def from_exception(cls, exc):
        """Build an error response from a FitbookError"""
        return cls(
            message=exc.public_message,
            errors=exc.errors,
            status_code=exc.status_code,
        )
