# =============================================================================
# core/models/video.py - Video and Hero Video Schemas
# =============================================================================
# Videos and the homepage hero video share the same three source fields:
# - video_id / youtube_url: a YouTube video
# - video_url: a file uploaded to our media storage
#
# Exactly one source is stored; see lib/video_reference.py for the rules.
# The hero video is a singleton document, created with HERO_DEFAULTS on
# first access.
# =============================================================================

from pydantic import Field, field_validator

from .base import CamelModel, DocumentResponse

DEFAULT_VIDEO_TITLE = "Video Title"

DEFAULT_HERO_VIDEO_ID = "8ufRrmc6Bj4"

HERO_DEFAULTS = {
    "video_id": DEFAULT_HERO_VIDEO_ID,
    "youtube_url": f"https://www.youtube.com/watch?v={DEFAULT_HERO_VIDEO_ID}",
    "video_url": None,
}


class VideoSource(CamelModel):
    """The three interchangeable ways of pointing at a video."""

    video_id: str | None = Field(
        default=None,
        description="YouTube video ID",
        examples=["8ufRrmc6Bj4"]
    )

    youtube_url: str | None = Field(
        default=None,
        description="YouTube video URL (watch, youtu.be or embed form)",
        examples=["https://www.youtube.com/watch?v=8ufRrmc6Bj4"]
    )

    video_url: str | None = Field(
        default=None,
        description="URL of a video uploaded through the upload endpoint"
    )


class VideoCreate(VideoSource):
    """
    Schema for creating a video.

    Example:
        {"title": "Ni Forever (Official Video)", "youtubeUrl": "https://youtu.be/abcdefghijk"}
    """

    title: str = Field(
        default=DEFAULT_VIDEO_TITLE,
        description="Video title"
    )

    @field_validator("title")
    @classmethod
    def default_blank_title(cls, value: str) -> str:
        return value or DEFAULT_VIDEO_TITLE


class VideoUpdate(VideoSource):
    """Schema for a partial video update; omitted fields are left untouched."""

    title: str = Field(default=None, min_length=1)


class VideoResponse(DocumentResponse):
    """Schema for returning a video to clients."""

    title: str
    video_id: str | None = None
    youtube_url: str | None = None
    video_url: str | None = None


class HeroUpdate(VideoSource):
    """
    Schema for replacing the hero video.

    Unlike a video update this always yields a complete source: the stored
    hero ends up with either a YouTube video or a hosted file, never both.
    """


class HeroResponse(DocumentResponse):
    """Schema for returning the hero video to clients."""

    video_id: str | None = None
    youtube_url: str | None = None
    video_url: str | None = None
