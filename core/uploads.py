"""
Image upload pass-through: validate, store under a random name, return the URL.
"""
import logging
import os
import uuid

from django.conf import settings
from django.core.files.storage import default_storage

from .exceptions import PayloadTooLarge, UnsupportedMediaType, UploadError

logger = logging.getLogger(__name__)


def validate_image_upload(upload):
    """
    Check size, extension and declared MIME type of an uploaded image.

    The file content itself is not inspected.

    Returns:
        The lower-cased extension including its leading dot
    """
    if upload is None:
        raise UploadError()

    if upload.size > settings.UPLOAD_MAX_BYTES:
        raise PayloadTooLarge(
            f"File too large (limit is {settings.UPLOAD_MAX_BYTES // (1024 * 1024)} MB)"
        )

    allowed = settings.UPLOAD_ALLOWED_EXTENSIONS
    ext = os.path.splitext(upload.name or "")[1].lower()
    content_type = (upload.content_type or "").lower()
    main_type, _, sub_type = content_type.partition("/")

    if ext.lstrip(".") not in allowed or main_type != "image" or sub_type not in allowed:
        raise UnsupportedMediaType()

    return ext


def store_upload(upload):
    """Persist a validated upload and return its public URL."""
    ext = validate_image_upload(upload)
    name = default_storage.save(f"{uuid.uuid4().hex}{ext}", upload)
    logger.info(f"Stored upload {name} ({upload.size} bytes)")
    return default_storage.url(name)
