import logging

from rest_framework import status
from rest_framework.decorators import api_view, permission_classes
from rest_framework.permissions import AllowAny
from rest_framework.response import Response

from .apps import get_database_handle

logger = logging.getLogger(__name__)


@api_view(["GET"])
@permission_classes([AllowAny])
def health_check(request):
    """Health check endpoint that doesn't require authentication."""
    database_ready = get_database_handle().is_ready()
    body = {
        "status": "pass" if database_ready else "fail",
        "checks": {"database": "pass" if database_ready else "fail"},
    }
    if not database_ready:
        return Response(body, status=status.HTTP_503_SERVICE_UNAVAILABLE)
    return Response(body)
