# =============================================================================
# app/routers/music.py - Album CRUD Endpoints
# =============================================================================
# Endpoints:
# - GET /music: List albums (newest first)
# - GET /music/{album_id}: Get one album
# - POST /music/upload: Upload an album cover image
# - POST /music: Create an album
# - PUT /music/{album_id}: Partially update an album
# - DELETE /music/{album_id}: Delete an album
# =============================================================================

from typing import Annotated

from fastapi import APIRouter, File, Path, UploadFile

from app.uploads import store_media_upload
from core.models import (
    AlbumCreate,
    AlbumResponse,
    AlbumUpdate,
    MessageResponse,
    UploadResponse,
)
from core.services.document_service import AlbumService

router = APIRouter()

AlbumId = Annotated[str, Path(description="Album ID")]


@router.get("", response_model=list[AlbumResponse])
async def list_albums():
    """List all albums, newest first."""
    return AlbumService.list()


@router.get("/{album_id}", response_model=AlbumResponse)
async def get_album(album_id: AlbumId):
    """
    Get a single album.

    Returns 400 for a malformed id and 404 if no album has that id.
    """
    return AlbumService.get(album_id)


@router.post("/upload", response_model=UploadResponse)
async def upload_album_image(
    image: Annotated[UploadFile | None, File(description="Album cover or hover image")] = None,
):
    """
    Upload an album image.

    Store the returned `url` as the album's `image` or `hoverImage`.
    """
    return await store_media_upload(image, field="image", kind="image", folder="images/albums")


@router.post("", response_model=AlbumResponse, status_code=201)
async def create_album(request: AlbumCreate):
    """
    Create an album.

    `title` and `image` are required; `description` falls back to a
    placeholder when omitted.
    """
    return AlbumService.create(request.model_dump(mode="json"))


@router.put("/{album_id}", response_model=AlbumResponse)
async def update_album(album_id: AlbumId, request: AlbumUpdate):
    """Update only the fields present in the body."""
    return AlbumService.update(album_id, request.model_dump(mode="json", exclude_unset=True))


@router.delete("/{album_id}", response_model=MessageResponse)
async def delete_album(album_id: AlbumId):
    """Delete an album."""
    AlbumService.delete(album_id)
    return MessageResponse(message="Album deleted successfully")
