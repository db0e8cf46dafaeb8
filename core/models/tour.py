# =============================================================================
# core/models/tour.py - Tour Date Schemas
# =============================================================================
# A tour entry is one concert: where, when, and where to buy tickets.
# Tours are listed in date order (soonest first).
# =============================================================================

import datetime as dt

from pydantic import Field

from .base import CamelModel, DocumentResponse


class TourCreate(CamelModel):
    """
    Schema for creating a tour date.

    Example:
        {
            "title": "Live in Kigali",
            "location": "BK Arena, Kigali",
            "date": "2026-01-01",
            "ticketUrl": "https://tickets.example.com/kigali"
        }
    """

    title: str = Field(..., min_length=1, description="Tour title")
    location: str = Field(..., min_length=1, description="Tour location")
    date: dt.date = Field(..., description="Tour date")
    description: str = Field(default="", description="Tour description")
    ticket_url: str = Field(default="#", description="Ticket purchase URL")


class TourUpdate(CamelModel):
    """Schema for a partial tour update; fields that are sent may not be null."""

    title: str = Field(default=None, min_length=1)
    location: str = Field(default=None, min_length=1)
    date: dt.date = Field(default=None)
    description: str = Field(default=None)
    ticket_url: str = Field(default=None)


class TourResponse(DocumentResponse):
    """Schema for returning a tour date to clients."""

    title: str
    location: str
    date: dt.date
    description: str | None = None
    ticket_url: str | None = None
