# =============================================================================
# core/models/ - Pydantic Data Models
# =============================================================================
# This package contains Pydantic schemas for data validation:
# - album.py: Music section (albums)
# - video.py: Videos and the homepage hero video
# - tour.py: Tour dates
# - site_settings.py: Website settings singleton
# - about.py: Biography singleton
# - media.py: Upload responses
#
# These models define the "contract" between API and clients.
# =============================================================================

from .base import CamelModel, DocumentResponse, MessageResponse

from .album import (
    DEFAULT_ALBUM_DESCRIPTION,
    AlbumCreate,
    AlbumResponse,
    AlbumUpdate,
)

from .video import (
    DEFAULT_VIDEO_TITLE,
    HERO_DEFAULTS,
    HeroResponse,
    HeroUpdate,
    VideoCreate,
    VideoResponse,
    VideoSource,
    VideoUpdate,
)

from .tour import TourCreate, TourResponse, TourUpdate

from .site_settings import (
    SITE_SETTINGS_DEFAULTS,
    SOCIAL_PLATFORMS,
    SiteSettingsResponse,
    SiteSettingsUpdate,
    SocialMedia,
    SocialMediaUpdate,
)

from .about import ABOUT_DEFAULTS, DEFAULT_BIOGRAPHY, AboutResponse, AboutUpdate

from .media import UploadResponse

__all__ = [
    # Base
    "CamelModel",
    "DocumentResponse",
    "MessageResponse",
    # Album
    "DEFAULT_ALBUM_DESCRIPTION",
    "AlbumCreate",
    "AlbumResponse",
    "AlbumUpdate",
    # Video / Hero
    "DEFAULT_VIDEO_TITLE",
    "HERO_DEFAULTS",
    "HeroResponse",
    "HeroUpdate",
    "VideoCreate",
    "VideoResponse",
    "VideoSource",
    "VideoUpdate",
    # Tour
    "TourCreate",
    "TourResponse",
    "TourUpdate",
    # Settings
    "SITE_SETTINGS_DEFAULTS",
    "SOCIAL_PLATFORMS",
    "SiteSettingsResponse",
    "SiteSettingsUpdate",
    "SocialMedia",
    "SocialMediaUpdate",
    # About
    "ABOUT_DEFAULTS",
    "DEFAULT_BIOGRAPHY",
    "AboutResponse",
    "AboutUpdate",
    # Media
    "UploadResponse",
]
