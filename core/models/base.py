# =============================================================================
# core/models/base.py - Shared Model Configuration
# =============================================================================
# The website's admin UI speaks camelCase JSON (videoId, siteTitle, ...)
# while table columns and Python attributes are snake_case.
# CamelModel bridges the two: it accepts either spelling on input and
# FastAPI serializes responses by alias, i.e. in camelCase.
# =============================================================================

from datetime import datetime

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel


class CamelModel(BaseModel):
    """Base model with camelCase aliases and snake_case attribute names."""

    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
    )


class DocumentResponse(CamelModel):
    """Fields every stored document carries."""

    id: str = Field(
        ...,
        description="Document unique identifier",
        examples=["550e8400-e29b-41d4-a716-446655440000"],
    )

    created_at: datetime | None = Field(
        default=None,
        description="Creation timestamp"
    )

    updated_at: datetime | None = Field(
        default=None,
        description="Last update timestamp"
    )


class MessageResponse(BaseModel):
    """Plain confirmation message, e.g. after a delete."""
    message: str = Field(..., examples=["Album deleted successfully"])
