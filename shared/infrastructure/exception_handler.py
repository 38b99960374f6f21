"""DRF exception handler translating domain errors into HTTP responses."""

from __future__ import annotations

import logging

from rest_framework import status  # type: ignore
from rest_framework.response import Response  # type: ignore
from rest_framework.views import exception_handler  # type: ignore

from shared.domain.exceptions import BookingConflictError, ResourceNotFoundError

logger = logging.getLogger(__name__)


def api_exception_handler(exc, context):  # type: ignore
    """Map NotFound/Conflict domain errors to 404/409, defer the rest to DRF."""

    if isinstance(exc, ResourceNotFoundError):
        return Response({"detail": str(exc)}, status=status.HTTP_404_NOT_FOUND)
    if isinstance(exc, BookingConflictError):
        logger.info("Booking conflict: %s", exc)
        return Response({"detail": str(exc)}, status=status.HTTP_409_CONFLICT)
    return exception_handler(exc, context)
