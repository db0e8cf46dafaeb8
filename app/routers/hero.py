# =============================================================================
# app/routers/hero.py - Hero Video Endpoints
# =============================================================================
# The hero video plays behind the homepage header. There is exactly one;
# it is created with a default YouTube video on first read.
# =============================================================================

from typing import Annotated

from fastapi import APIRouter, File, UploadFile

from app.uploads import store_media_upload
from core.models import HeroResponse, HeroUpdate, UploadResponse
from core.services.video_service import HeroService

router = APIRouter()


@router.get("", response_model=HeroResponse)
async def get_hero():
    """Get the hero video (created with defaults if it doesn't exist yet)."""
    return HeroService.get_or_create()


@router.post("/upload", response_model=UploadResponse)
async def upload_hero_video(
    video: Annotated[UploadFile | None, File(description="Hero video file")] = None,
):
    """Upload a hero video file; send the returned `url` as `videoUrl`."""
    return await store_media_upload(video, field="video", kind="video", folder="videos/hero")


@router.put("", response_model=HeroResponse)
async def update_hero(request: HeroUpdate):
    """
    Replace the hero video.

    Send either `videoUrl` (an uploaded file) or a YouTube `videoId` /
    `youtubeUrl`. A malformed `videoId` is replaced by the ID found in
    `youtubeUrl`.
    """
    return HeroService.replace_source(request.model_dump(mode="json"))
