# =============================================================================
# app/uploads.py - Shared Upload Handling
# =============================================================================
# Every section of the site has an upload endpoint (album covers, videos,
# hero video, biography image). They differ only in form field, target
# folder and media kind, so validation and storage live here.
# =============================================================================

import logging
from typing import Literal

from fastapi import UploadFile

from app.config import settings
from app.exceptions import (
    FileTooLargeError,
    InvalidFileTypeError,
    NoFileUploadedError,
)
from core.models import UploadResponse
from core.services.storage_service import StorageService

logger = logging.getLogger(__name__)

MediaKind = Literal["image", "video"]


def file_extension(filename: str) -> str:
    """Lower-cased extension without the dot ('' if none)."""
    return filename.rsplit(".", 1)[-1].lower() if "." in filename else ""


async def read_media_upload(
    file: UploadFile | None,
    field: str,
    kind: MediaKind,
) -> tuple[bytes, str, str]:
    """
    Validate an uploaded file and read it into memory.

    Both the extension and the declared content type must agree with the
    expected media kind.

    Returns:
        (content, extension, content_type)

    Raises:
        NoFileUploadedError: If the form field is missing or empty
        InvalidFileTypeError: If extension or content type is not allowed
        FileTooLargeError: If the file exceeds MAX_UPLOAD_SIZE_MB
    """
    if file is None or not file.filename:
        raise NoFileUploadedError(field)

    filename = file.filename
    extension = file_extension(filename)
    content_type = (file.content_type or "").lower()
    allowed = settings.allowed_extensions_list

    if extension not in allowed or not content_type.startswith(f"{kind}/"):
        raise InvalidFileTypeError(filename, allowed)

    content = await file.read()
    size_bytes = len(content)

    if size_bytes > settings.max_upload_size_bytes:
        raise FileTooLargeError(size_bytes / (1024 * 1024), settings.MAX_UPLOAD_SIZE_MB)

    logger.info(f"Processing upload: {filename} ({size_bytes / (1024 * 1024):.2f}MB)")
    return content, extension, content_type


async def store_media_upload(
    file: UploadFile | None,
    field: str,
    kind: MediaKind,
    folder: str,
) -> UploadResponse:
    """Validate, upload to storage, and describe the stored file."""
    content, extension, content_type = await read_media_upload(file, field, kind)

    stored = StorageService.upload_media(
        content=content,
        folder=folder,
        extension=extension,
        content_type=content_type,
        resource_type=kind,
    )
    return UploadResponse(**stored)
