# =============================================================================
# core/models/about.py - Biography Schemas
# =============================================================================
# The about page is a singleton document holding the artist biography.
# =============================================================================

from pydantic import Field

from .base import CamelModel, DocumentResponse

DEFAULT_BIOGRAPHY = (
    'Born Benjamin Mugisha on January 9, 1987, "The Ben" is a prominent figure in the '
    'East African music scene. He has produced numerous popular songs, such as "Ndaje", '
    '"Ni Forever", and "Naremeye", and often collaborates with other African artists. '
    'He was recently awarded the "East Africa Best Act/Song" award at the Pipo Music '
    'Awards for his song "True Love". He and his wife, Uwicyeza Pamella, welcomed their '
    'first child in early 2025. The Ben is also preparing for a highly anticipated '
    'concert with fellow Rwandan artist Bruce Melodie in January 2026, which has '
    'generated significant buzz in the local entertainment industry.'
)

ABOUT_DEFAULTS = {
    "biography": DEFAULT_BIOGRAPHY,
    "image": "/theben.jfif",
    "title": "Biography",
}


class AboutUpdate(CamelModel):
    """Schema for PUT /api/about; the biography may be replaced but not cleared."""

    biography: str = Field(default=None, min_length=1, description="Biography text")
    image: str = Field(default=None, description="Biography image URL")
    title: str = Field(default=None, description="Biography title")


class AboutResponse(DocumentResponse):
    """Schema for returning the biography to clients."""

    biography: str
    image: str | None = None
    title: str = "Biography"
