# =============================================================================
# app/routers/about.py - Biography Endpoints
# =============================================================================

from typing import Annotated

from fastapi import APIRouter, File, UploadFile

from app.uploads import store_media_upload
from core.models import AboutResponse, AboutUpdate, UploadResponse
from core.services.singleton_service import AboutService

router = APIRouter()


@router.get("", response_model=AboutResponse)
async def get_about():
    """Get the biography (created with the default text on first read)."""
    return AboutService.get_or_create()


@router.post("/upload", response_model=UploadResponse)
async def upload_about_image(
    image: Annotated[UploadFile | None, File(description="Biography image")] = None,
):
    """Upload a biography image; send the returned `url` as `image`."""
    return await store_media_upload(image, field="image", kind="image", folder="images/about")


@router.put("", response_model=AboutResponse)
async def update_about(request: AboutUpdate):
    """Update only the fields present in the body."""
    return AboutService.update(request.model_dump(mode="json", exclude_unset=True))
