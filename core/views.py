import logging

from django.conf import settings
from django.db import DatabaseError, connection
from django.utils import timezone
from django.views.static import serve
from rest_framework.decorators import api_view, permission_classes
from rest_framework.parsers import FormParser, MultiPartParser
from rest_framework.permissions import AllowAny
from rest_framework.response import Response
from rest_framework.throttling import ScopedRateThrottle
from rest_framework.views import APIView

from .exceptions import UploadError
from .uploads import store_upload
from .utils import get_client_ip

logger = logging.getLogger(__name__)


class ImageUploadView(APIView):
    """Accept a single image in the ``image`` multipart field."""
    permission_classes = [AllowAny]
    parser_classes = [MultiPartParser, FormParser]
    throttle_classes = [ScopedRateThrottle]
    throttle_scope = "uploads"

    def post(self, request):
        upload = request.FILES.get("image")
        try:
            image_url = store_upload(upload)
        except UploadError as e:
            logger.warning(f"Rejected upload from {get_client_ip(request)}: {e.detail}")
            raise
        return Response({
            "success": True,
            "imageUrl": image_url,
            "message": "File uploaded successfully",
        })


@api_view(["GET"])
@permission_classes([AllowAny])
def health_check(request):
    """Health check endpoint for monitoring."""
    try:
        with connection.cursor() as cursor:
            cursor.execute("SELECT 1")
    except DatabaseError as e:
        logger.exception("Health check failed")
        return Response({
            "status": "unhealthy",
            "error": str(e),
            "timestamp": timezone.now().isoformat(),
        }, status=503)

    return Response({
        "status": "healthy",
        "timestamp": timezone.now().isoformat(),
    })


def serve_upload(request, path):
    """Stream a stored upload from the current upload root."""
    return serve(request, path, document_root=settings.MEDIA_ROOT)
