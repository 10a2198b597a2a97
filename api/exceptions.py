import logging

from rest_framework import status
from rest_framework.response import Response
from rest_framework.views import exception_handler as drf_exception_handler

from comments.exceptions import NotFoundError, ValidationError

logger = logging.getLogger(__name__)


def exception_handler(exc, context):
    """
    Map comment service errors to HTTP responses:
    - ValidationError -> 400
    - NotFoundError -> 404
    Anything else goes through DRF's default handler (unhandled errors become 500).
    """
    if isinstance(exc, NotFoundError):
        return Response({'error': exc.message}, status=status.HTTP_404_NOT_FOUND)

    if isinstance(exc, ValidationError):
        logger.warning(f"Validation failed: {exc.message}")
        return Response({'error': exc.message}, status=status.HTTP_400_BAD_REQUEST)

    return drf_exception_handler(exc, context)
