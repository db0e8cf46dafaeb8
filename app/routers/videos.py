# =============================================================================
# app/routers/videos.py - Video CRUD Endpoints
# =============================================================================
# Endpoints:
# - GET /videos: List videos (newest first)
# - GET /videos/{video_id}: Get one video
# - POST /videos/upload: Upload a video file
# - POST /videos: Create a video (YouTube ID/URL or uploaded file URL)
# - PUT /videos/{video_id}: Partially update a video
# - DELETE /videos/{video_id}: Delete a video
#
# Note: the path parameter is the document id, not the YouTube video ID.
# =============================================================================

from typing import Annotated

from fastapi import APIRouter, File, Path, UploadFile

from app.uploads import store_media_upload
from core.models import (
    MessageResponse,
    UploadResponse,
    VideoCreate,
    VideoResponse,
    VideoUpdate,
)
from core.services.video_service import VideoService

router = APIRouter()

DocumentId = Annotated[str, Path(description="Video document ID")]


@router.get("", response_model=list[VideoResponse])
async def list_videos():
    """List all videos, newest first."""
    return VideoService.list()


@router.get("/{video_id}", response_model=VideoResponse)
async def get_video(video_id: DocumentId):
    """Get a single video."""
    return VideoService.get(video_id)


@router.post("/upload", response_model=UploadResponse)
async def upload_video(
    video: Annotated[UploadFile | None, File(description="Video file (mp4, mov, avi, webm)")] = None,
):
    """
    Upload a video file.

    Create the video with the returned `url` as `videoUrl`.
    """
    return await store_media_upload(video, field="video", kind="video", folder="videos")


@router.post("", response_model=VideoResponse, status_code=201)
async def create_video(request: VideoCreate):
    """
    Create a video.

    Precedence: `videoUrl` (uploaded file) > `videoId` > ID extracted from
    `youtubeUrl`. Returns 400 if none of them yields a source.
    """
    return VideoService.create(request.model_dump(mode="json"))


@router.put("/{video_id}", response_model=VideoResponse)
async def update_video(video_id: DocumentId, request: VideoUpdate):
    """
    Update only the fields present in the body.

    Sending `youtubeUrl` without `videoId` re-derives the ID from the URL.
    """
    return VideoService.update(video_id, request.model_dump(mode="json", exclude_unset=True))


@router.delete("/{video_id}", response_model=MessageResponse)
async def delete_video(video_id: DocumentId):
    """Delete a video."""
    VideoService.delete(video_id)
    return MessageResponse(message="Video deleted successfully")
