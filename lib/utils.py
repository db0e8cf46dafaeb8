# =============================================================================
# lib/utils.py - Shared Utilities
# =============================================================================
# Common utilities used across the application.
# =============================================================================

from datetime import datetime, timezone
from uuid import UUID


# =============================================================================
# UUID Utilities
# =============================================================================

def normalize_uuid(value: str | UUID) -> str:
    """
    Normalize a UUID to string format.

    Handles both string and UUID objects, ensuring consistent string output.

    Example:
        album_id = normalize_uuid(uuid_obj)  # "550e8400-..."
        album_id = normalize_uuid("550e8400-...")  # "550e8400-..."
    """
    return str(value) if isinstance(value, UUID) else value


def is_valid_uuid(value: str | UUID | None) -> bool:
    """
    Check whether a value is a syntactically valid document identifier.

    Documents are keyed by UUIDs generated by the database, so anything
    that does not parse as a UUID can never match a row.

    Example:
        is_valid_uuid("550e8400-e29b-41d4-a716-446655440000")  # True
        is_valid_uuid("not-an-id")  # False
    """
    if isinstance(value, UUID):
        return True
    if not value or not isinstance(value, str):
        return False
    try:
        UUID(value)
    except ValueError:
        return False
    return True


# =============================================================================
# Time Utilities
# =============================================================================

def utc_now_iso() -> str:
    """Current UTC time as an ISO-8601 string (for updated_at columns)."""
    return datetime.now(timezone.utc).isoformat()
