# =============================================================================
# core/models/media.py - Upload Schemas
# =============================================================================

from pydantic import BaseModel, Field


class UploadResponse(BaseModel):
    """
    Returned by every upload endpoint.

    `url` is what the admin UI stores in the album/video/hero document.
    """
    url: str = Field(..., description="Public URL of the uploaded file")
    public_id: str = Field(..., description="Path of the file inside the storage bucket")
    format: str = Field(..., description="File extension, e.g. 'jpg' or 'mp4'")
    bytes: int = Field(..., ge=0, description="File size in bytes")
    resource_type: str = Field(..., description="'image' or 'video'")
