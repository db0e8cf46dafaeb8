# =============================================================================
# core/models/album.py - Album Schemas
# =============================================================================
# These models define the API contract for the music section:
# - AlbumCreate: Input for POST /api/music
# - AlbumUpdate: Input for PUT /api/music/{id} (partial)
# - AlbumResponse: Output for every album endpoint
#
# An album is a cover image plus title, with an optional second image shown
# on hover and an optional link to a streaming service.
# =============================================================================

from pydantic import Field

from .base import CamelModel, DocumentResponse

DEFAULT_ALBUM_DESCRIPTION = "Album description or release date"


class AlbumCreate(CamelModel):
    """
    Schema for creating an album.

    title and image are required; there is no server-side fallback for
    either, so omitting one fails validation.

    Example:
        {
            "title": "Ni Forever",
            "image": "https://<project>.supabase.co/storage/v1/object/public/media/images/albums/abc.jpg",
            "link": "https://open.spotify.com/album/..."
        }
    """

    title: str = Field(
        ...,
        min_length=1,
        description="Album title",
        examples=["New Album"]
    )

    description: str = Field(
        default=DEFAULT_ALBUM_DESCRIPTION,
        description="Album description or release date"
    )

    image: str = Field(
        ...,
        min_length=1,
        description="Album cover image URL"
    )

    hover_image: str | None = Field(
        default=None,
        description="Image displayed when the user hovers over the album"
    )

    link: str | None = Field(
        default=None,
        description="Listening link (Spotify, YouTube, Apple Music, ...)"
    )


class AlbumUpdate(CamelModel):
    """
    Schema for a partial album update.

    Omitted fields are left untouched. Stored NOT NULL fields may be
    replaced but not cleared: an explicit null is rejected, as is an empty
    title or image. Only hover_image and link accept null.
    """

    title: str = Field(default=None, min_length=1)
    description: str = Field(default=None)
    image: str = Field(default=None, min_length=1)
    hover_image: str | None = None
    link: str | None = None


class AlbumResponse(DocumentResponse):
    """Schema for returning an album to clients."""

    title: str
    description: str | None = None
    image: str
    hover_image: str | None = None
    link: str | None = None
