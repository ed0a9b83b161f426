# =============================================================================
# API ERRORS
# =============================================================================
"""
Typed API errors and the REST framework exception handler.

Every error leaves the API as ``{"message": "..."}``; validation errors also
name the offending ``field`` when there is one.
"""
import logging

from django.db.models import ProtectedError
from django.db.utils import IntegrityError
from django.http import Http404
from rest_framework import exceptions, status
from rest_framework.response import Response
from rest_framework.settings import api_settings
from rest_framework.views import exception_handler, set_rollback

logger = logging.getLogger(__name__)


class ReferencedObjectConflict(exceptions.APIException):
    status_code = status.HTTP_409_CONFLICT
    default_detail = "Cannot delete: referenced by existing bookings"
    default_code = "referenced"


class DataConflict(exceptions.APIException):
    status_code = status.HTTP_409_CONFLICT
    default_detail = "Conflicts with existing data"
    default_code = "conflict"


class InvalidStatusTransition(exceptions.APIException):
    """Raised when a booking is moved to a status its current one does not allow."""
    status_code = status.HTTP_409_CONFLICT
    default_detail = "Status transition not allowed"
    default_code = "invalid_transition"

    def __init__(self, current=None, target=None):
        self.current = current
        self.target = target
        detail = None
        if current is not None and target is not None:
            detail = f"Cannot change booking status from {current} to {target}"
        super().__init__(detail)


class UploadError(exceptions.APIException):
    status_code = status.HTTP_400_BAD_REQUEST
    default_detail = "No file uploaded"
    default_code = "upload_error"


class PayloadTooLarge(UploadError):
    status_code = status.HTTP_413_REQUEST_ENTITY_TOO_LARGE
    default_detail = "File too large"
    default_code = "too_large"


class UnsupportedMediaType(UploadError):
    status_code = status.HTTP_415_UNSUPPORTED_MEDIA_TYPE
    default_detail = "Only image files are allowed"
    default_code = "unsupported_media_type"


def first_error(detail, field=None):
    """
    Walk a serializer error structure and return its first message.

    Args:
        detail: ``ValidationError.detail`` (dict, list or string)
        field: Top-level field name collected so far

    Returns:
        Tuple of (field name or None, message)
    """
    if isinstance(detail, dict):
        for key, value in detail.items():
            if field is None and key != api_settings.NON_FIELD_ERRORS_KEY:
                return first_error(value, str(key))
            return first_error(value, field)
        return field, "Invalid input"
    if isinstance(detail, (list, tuple)):
        for item in detail:
            return first_error(item, field)
        return field, "Invalid input"
    return field, str(detail)


def api_exception_handler(exc, context):
    """Render every API failure as a flat JSON ``message`` body."""
    if isinstance(exc, ProtectedError):
        exc = ReferencedObjectConflict()
    elif isinstance(exc, IntegrityError):
        logger.warning(f"Integrity error in API request: {exc}")
        exc = DataConflict()

    response = exception_handler(exc, context)

    if response is None:
        view = context.get("view")
        logger.error(
            f"Unhandled API error in {view.__class__.__name__ if view else 'unknown view'}: {exc}",
            exc_info=exc,
        )
        set_rollback()
        return Response({"message": "Internal Error"}, status=status.HTTP_500_INTERNAL_SERVER_ERROR)

    if isinstance(exc, exceptions.ValidationError):
        field, message = first_error(exc.detail)
        data = {"message": message}
        if field:
            data["field"] = field
    elif isinstance(exc, (Http404, exceptions.NotFound)):
        data = {"message": "Not found"}
    elif isinstance(exc, exceptions.NotAuthenticated):
        data = {"message": "Not authenticated"}
    else:
        data = {"message": str(getattr(exc, "detail", exc))}

    response.data = data
    return response
