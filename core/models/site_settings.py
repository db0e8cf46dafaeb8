# =============================================================================
# core/models/site_settings.py - Website Settings Schemas
# =============================================================================
# The website settings document is a singleton: page title, meta
# description, contact email and the artist's social profile links.
# =============================================================================

from pydantic import Field

from .base import CamelModel, DocumentResponse

SOCIAL_PLATFORMS = (
    "facebook",
    "twitter",
    "instagram",
    "youtube",
    "spotify",
    "apple_music",
    "soundcloud",
)


class SocialMedia(CamelModel):
    """Profile URL per social platform; empty string when not set."""

    facebook: str = ""
    twitter: str = ""
    instagram: str = ""
    youtube: str = ""
    spotify: str = ""
    apple_music: str = ""
    soundcloud: str = ""


class SocialMediaUpdate(CamelModel):
    """Only the platforms present are changed; others keep their links."""

    facebook: str = None
    twitter: str = None
    instagram: str = None
    youtube: str = None
    spotify: str = None
    apple_music: str = None
    soundcloud: str = None


SITE_SETTINGS_DEFAULTS = {
    "site_title": "Theben | Official Website",
    "site_description": "Official website for theben",
    "email": "contact@theben.com",
    "social_media": SocialMedia().model_dump(),
}


class SiteSettingsUpdate(CamelModel):
    """
    Schema for PUT /api/settings.

    Example:
        {"siteTitle": "The Ben", "socialMedia": {"instagram": "https://instagram.com/thebenmusic"}}
    """

    site_title: str = Field(default=None, description="Site title")
    site_description: str = Field(default=None, description="Site description")
    email: str = Field(default=None, description="Contact email")
    social_media: SocialMediaUpdate = Field(default=None, description="Social profile links")


class SiteSettingsResponse(DocumentResponse):
    """Schema for returning the website settings to clients."""

    site_title: str
    site_description: str
    email: str
    social_media: SocialMedia = Field(default_factory=SocialMedia)
