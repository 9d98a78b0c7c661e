"""Photo helpers: selection checks, data-URI encoding and base64 extraction.

Streamlit hands us an `UploadedFile`; `photo_from_upload` wraps it into a
`PhotoFile` so the rest of the code never touches widget objects.
"""
from __future__ import annotations
import base64
import logging
from typing import Any, Tuple

from domain.constants import (IMAGE_MIME_PREFIX, MAX_PHOTO_BYTES,
                              MSG_IMAGE_TOO_LARGE, MSG_INVALID_IMAGE)
from domain.models import PhotoFile

logger = logging.getLogger(__name__)


class PhotoError(Exception):
    """Base class for photo handling failures."""
    pass


class PhotoRejected(PhotoError):
    """Selected file is not an acceptable image."""
    pass


class PhotoReadError(PhotoError):
    """Selected file could not be read."""
    pass


def photo_from_upload(upload: Any) -> PhotoFile:
    return PhotoFile(
        name=getattr(upload, 'name', '') or '',
        mime_type=getattr(upload, 'type', '') or '',
        size=int(getattr(upload, 'size', 0) or 0),
        read=upload.getvalue,
    )


def validate_photo(photo: PhotoFile):
    """Raise PhotoRejected unless the file is an image of at most 5 MiB."""
    if not (photo.mime_type or '').startswith(IMAGE_MIME_PREFIX):
        logger.info("Photo rejected name=%s type=%s", photo.name, photo.mime_type)
        raise PhotoRejected(MSG_INVALID_IMAGE)
    if photo.size > MAX_PHOTO_BYTES:
        logger.info("Photo rejected name=%s size=%d", photo.name, photo.size)
        raise PhotoRejected(MSG_IMAGE_TOO_LARGE)


def to_data_uri(photo: PhotoFile) -> str:
    try:
        data = photo.read()
    except (OSError, ValueError) as e:
        logger.warning("Photo read failed name=%s: %s", photo.name, e)
        raise PhotoReadError(str(e)) from e
    if data is None:
        raise PhotoReadError("no data")
    b64 = base64.b64encode(data).decode('utf-8')
    return f"data:{photo.mime_type};base64,{b64}"


def strip_data_uri(data_uri: str) -> str:
    """Return the base64 payload after the `data:*;base64,` prefix."""
    _, sep, payload = data_uri.partition(',')
    return payload if sep else data_uri


def accept_photo(photo: PhotoFile) -> Tuple[PhotoFile, str]:
    """Validate a freshly selected photo and build its preview data-URI."""
    validate_photo(photo)
    return photo, to_data_uri(photo)
