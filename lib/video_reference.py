# =============================================================================
# lib/video_reference.py - Video Source Normalization
# =============================================================================
# Clients describe a video in one of three ways:
# - a YouTube video ID ("8ufRrmc6Bj4")
# - a YouTube URL (watch, short link or embed form)
# - a URL to a file uploaded to our own media storage
#
# This module turns any of those into one of exactly two stored shapes:
#   {video_url, video_id: None, youtube_url: None}      (hosted file)
#   {video_id, youtube_url, video_url: None}            (YouTube)
#
# Usage:
#   from lib.video_reference import normalize_video_reference
#   ref = normalize_video_reference(youtube_url="https://youtu.be/abc")
#   row = ref.to_dict()
# =============================================================================

from __future__ import annotations

import re
from dataclasses import asdict, dataclass
from typing import Any

# Canonical watch URL synthesized when only an ID is supplied
YOUTUBE_WATCH_URL = "https://www.youtube.com/watch?v={video_id}"

# Capture runs until the first &, newline, ?, # or end of string
_ID_CAPTURE = r"([^&\n?#]+)"

# Evaluated in order; the first pattern that matches wins
VIDEO_URL_PATTERNS: tuple[re.Pattern[str], ...] = (
    re.compile(r"youtube\.com/watch\?v=" + _ID_CAPTURE),
    re.compile(r"youtu\.be/" + _ID_CAPTURE),
    re.compile(r"youtube\.com/embed/" + _ID_CAPTURE),
)

VIDEO_ID_FORMAT = re.compile(r"^[a-zA-Z0-9_-]{11}$")

MISSING_SOURCE_MESSAGE = "Video ID or video file is required"

SOURCE_FIELDS = ("video_id", "youtube_url", "video_url")


class VideoReferenceError(ValueError):
    """Raised when no usable video source can be derived from the input."""

    def __init__(self, message: str = MISSING_SOURCE_MESSAGE):
        super().__init__(message)
        self.message = message


@dataclass(frozen=True)
class VideoReference:
    """A normalized video source, ready to be written to a row."""
    video_id: str | None = None
    youtube_url: str | None = None
    video_url: str | None = None

    @property
    def is_hosted(self) -> bool:
        return self.video_url is not None

    def to_dict(self) -> dict[str, Any]:
        return asdict(self)


def extract_video_id(url: str | None) -> str | None:
    """
    Pull the video ID out of a YouTube URL.

    Returns None when no known URL shape matches; a malformed URL is
    treated as "no ID found", never as an error.

    Example:
        extract_video_id("https://youtu.be/XYZ98765432?t=5")  # "XYZ98765432"
    """
    if not url:
        return None
    for pattern in VIDEO_URL_PATTERNS:
        match = pattern.search(url)
        if match:
            return match.group(1)
    return None


def is_valid_video_id(video_id: str | None) -> bool:
    """True for an 11-character ID of letters, digits, '-' and '_'."""
    return bool(video_id) and VIDEO_ID_FORMAT.match(video_id) is not None


def normalize_video_reference(
    video_id: str | None = None,
    youtube_url: str | None = None,
    video_url: str | None = None,
    strict: bool = False,
) -> VideoReference:
    """
    Derive the canonical stored shape for a video source.

    Precedence:
    1. A hosted video_url wins; the YouTube fields are cleared.
    2. A supplied video_id is kept; youtube_url defaults to the watch URL.
    3. Otherwise the ID is extracted from youtube_url.

    In strict mode a supplied video_id that fails the 11-character format
    check is replaced by the ID extracted from youtube_url, when one can be
    extracted.

    Raises:
        VideoReferenceError: If no video_url or video ID can be found
    """
    if video_url:
        return VideoReference(video_url=video_url)

    resolved_id = video_id or None
    needs_derivation = not resolved_id or (strict and not is_valid_video_id(resolved_id))

    if youtube_url and needs_derivation:
        derived = extract_video_id(youtube_url)
        if derived:
            resolved_id = derived

    if not resolved_id:
        raise VideoReferenceError()

    return VideoReference(
        video_id=resolved_id,
        youtube_url=youtube_url or YOUTUBE_WATCH_URL.format(video_id=resolved_id),
    )


def merge_video_patch(current: dict[str, Any], patch: dict[str, Any]) -> dict[str, Any]:
    """
    Combine a stored video source with a partial update.

    Returns the three source fields the row would hold after the patch,
    ready for normalize_video_reference. Neither argument is mutated.

    - Patched source fields replace stored ones; the rest are kept.
    - A youtube_url without a video_id re-derives video_id from the URL;
      if no pattern matches the stored video_id is kept.
    - Touching video_id or youtube_url without sending video_url switches
      the row to YouTube, so the stored video_url is dropped.

    Example:
        merge_video_patch(
            {"video_id": None, "youtube_url": None, "video_url": "https://cdn/x.mp4"},
            {"youtube_url": "https://youtu.be/XYZ98765432"},
        )
        # {"video_id": "XYZ98765432", "youtube_url": "https://youtu.be/XYZ98765432", "video_url": None}
    """
    merged = {field: current.get(field) for field in SOURCE_FIELDS}
    merged.update({field: patch[field] for field in SOURCE_FIELDS if field in patch})

    if patch.get("youtube_url") and not patch.get("video_id"):
        merged["video_id"] = extract_video_id(patch["youtube_url"]) or merged["video_id"]

    if "video_url" not in patch and ("video_id" in patch or "youtube_url" in patch):
        merged["video_url"] = None

    return merged
