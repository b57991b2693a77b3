"""
LMS Service Exceptions

This module provides the exception hierarchy for domain errors raised by the
LMS services, and the DRF exception handler that turns them into API responses.

Every service error carries a human-readable message (the text the dashboard
shows to the user), an HTTP status code and a stable error code, so the
frontend can react without parsing messages.

Author: DevMastery Development Team
Version: 1.0.0
"""

import logging
from typing import Any, Dict, Optional

from rest_framework import status
from rest_framework.response import Response
from rest_framework.views import exception_handler

logger = logging.getLogger(__name__)


class LmsServiceException(Exception):
    """
    Base exception class for all LMS service errors.

    Attributes:
        message (str): Human-readable error message
        status_code (int): HTTP status code used for the API response
        error_code (str): Stable machine-readable error code
        details (Dict[str, Any]): Additional error details

    Example:
        >>> try:
        ...     enroll_student(batch, student)
        ... except LmsServiceException as e:
        ...     logger.warning(f"Enrollment failed: {e.message}")
    """

    default_status_code = status.HTTP_400_BAD_REQUEST
    default_error_code = "lms_error"

    def __init__(
        self,
        message: str,
        status_code: Optional[int] = None,
        error_code: Optional[str] = None,
        details: Optional[Dict[str, Any]] = None,
    ) -> None:
        self.message = message
        self.status_code = status_code or self.default_status_code
        self.error_code = error_code or self.default_error_code
        self.details = details or {}
        super().__init__(self.message)

    def to_dict(self) -> Dict[str, Any]:
        """
        Convert exception to dictionary for serialization.

        Returns:
            Dictionary representation of the exception
        """
        return {
            "detail": self.message,
            "error_code": self.error_code,
            "details": self.details,
        }


class ValidationFailed(LmsServiceException):
    """Raised when input is missing or malformed, e.g. a blank title."""

    default_error_code = "validation_failed"


class ResourceNotFound(LmsServiceException):
    """Raised when a requested object does not exist or is not visible."""

    default_status_code = status.HTTP_404_NOT_FOUND
    default_error_code = "not_found"


class StateConflict(LmsServiceException):
    """
    Raised when an operation conflicts with the current state of an object.

    Examples are a duplicate enrollment or deciding an enrollment request
    that has already been approved or rejected.
    """

    default_status_code = status.HTTP_409_CONFLICT
    default_error_code = "conflict"


def lms_exception_handler(exc: Exception, context: Dict[str, Any]) -> Optional[Response]:
    """
    DRF exception handler that knows about LmsServiceException.

    Service exceptions become ``{"detail", "error_code", "details"}`` responses;
    everything else is delegated to DRF's default handler.

    Args:
        exc: The raised exception
        context: DRF handler context (view, request, ...)

    Returns:
        Response or None if the exception is not handled
    """
    if isinstance(exc, LmsServiceException):
        view = context.get("view")
        logger.warning(
            f"{exc.__class__.__name__} in {view.__class__.__name__ if view else 'unknown view'}: "
            f"{exc.message}"
        )
        return Response(exc.to_dict(), status=exc.status_code)

    return exception_handler(exc, context)
