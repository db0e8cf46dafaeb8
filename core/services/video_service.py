# =============================================================================
# core/services/video_service.py - Video and Hero Video Logic
# =============================================================================
# Videos and the hero video store a normalized source (YouTube or hosted
# file). This module applies lib/video_reference.py on the way in:
# - VideoService.create: full normalization
# - VideoService.update: stored source + patch, then full normalization
# - HeroService.replace_source: strict normalization, then singleton update
# =============================================================================

import logging
from typing import Any
from uuid import UUID

from lib.video_reference import (
    SOURCE_FIELDS,
    VideoReference,
    VideoReferenceError,
    merge_video_patch,
    normalize_video_reference,
)
from app.exceptions import VideoSourceRequiredError
from core.models import HERO_DEFAULTS
from core.services.document_service import DocumentService
from core.services.singleton_service import SingletonService

logger = logging.getLogger(__name__)


def _normalize(source: dict[str, Any], strict: bool = False) -> VideoReference:
    try:
        return normalize_video_reference(
            **{field: source.get(field) for field in SOURCE_FIELDS},
            strict=strict,
        )
    except VideoReferenceError as e:
        raise VideoSourceRequiredError(e.message)


class VideoService(DocumentService):
    """Videos shown in the video section, newest first."""
    table = "videos"
    entity = "video"
    plural = "videos"

    @classmethod
    def create(cls, data: dict[str, Any]) -> dict[str, Any]:
        """
        Create a video from a title and any one of the source fields.

        Raises:
            VideoSourceRequiredError: If no video ID can be found and no
                hosted file URL was given
        """
        reference = _normalize(data)
        return super().create({**data, **reference.to_dict()})

    @classmethod
    def update(cls, document_id: str | UUID, patch: dict[str, Any]) -> dict[str, Any]:
        """
        Partially update a video.

        When the patch touches the source, it is merged onto the stored
        source and the result normalized like a new video; all three source
        fields are then written. A youtube_url without a video_id re-derives
        the ID, and switching between a YouTube and a hosted source clears
        the other one.

        Raises:
            VideoSourceRequiredError: If the merged source has neither a
                video ID nor a hosted file URL
        """
        if any(field in patch for field in SOURCE_FIELDS):
            current = cls.get(document_id)
            reference = _normalize(merge_video_patch(current, patch))
            patch = {**patch, **reference.to_dict()}

        return super().update(document_id, patch)


class HeroService(SingletonService):
    """The video playing behind the homepage header."""
    table = "hero"
    entity = "hero video"
    defaults = HERO_DEFAULTS

    @classmethod
    def replace_source(cls, data: dict[str, Any]) -> dict[str, Any]:
        """
        Point the hero at a new video.

        Uses the strict rules: a video ID that is not a well-formed
        11-character ID is replaced by the one in youtube_url.

        Raises:
            VideoSourceRequiredError: If no source can be derived
        """
        reference = _normalize(data, strict=True)

        logger.debug(f"Hero source normalized: hosted={reference.is_hosted}")
        return cls.update(reference.to_dict())
