# =============================================================================
# core/services/storage_service.py - Supabase Storage Operations
# =============================================================================
# Handles media uploads (album covers, videos, hero video, biography image)
# to Supabase Storage. Files are stored in a public bucket and the public
# URL is handed back to the admin UI, which saves it on the document.
# =============================================================================

import logging
from uuid import uuid4

from lib.supabase_client import SupabaseClient
from app.config import settings
from app.exceptions import StorageUploadError

logger = logging.getLogger(__name__)


class StorageService:
    """
    Service for Supabase Storage operations.

    Single attempt per upload: no retries are layered on top of the
    storage client's own behaviour.
    """

    @staticmethod
    def build_path(folder: str, extension: str) -> str:
        """Unique object path inside a folder, e.g. videos/hero/3f2a....mp4"""
        return f"{folder.strip('/')}/{uuid4().hex}.{extension}"

    @staticmethod
    def upload_media(
        content: bytes,
        folder: str,
        extension: str,
        content_type: str,
        resource_type: str,
    ) -> dict:
        """
        Upload a file and return its public URL plus metadata.

        Args:
            content: File bytes
            folder: Folder inside the bucket (e.g. "images/albums")
            extension: File extension without the dot
            content_type: MIME type sent with the object
            resource_type: "image" or "video" (used in messages)

        Returns:
            Dict with url, public_id, format, bytes and resource_type

        Raises:
            StorageUploadError: If upload fails
        """
        path = StorageService.build_path(folder, extension)

        try:
            client = SupabaseClient.get_client()
            bucket = client.storage.from_(settings.STORAGE_BUCKET)
            bucket.upload(
                path=path,
                file=content,
                file_options={"content-type": content_type, "upsert": "false"}
            )
            url = bucket.get_public_url(path)

        except Exception as e:
            logger.error(f"Storage upload failed for {path}: {e}")
            raise StorageUploadError(resource_type, str(e))

        logger.info(f"Uploaded {resource_type} to storage: {path} ({len(content)} bytes)")
        return {
            "url": url,
            "public_id": path,
            "format": extension,
            "bytes": len(content),
            "resource_type": resource_type,
        }
