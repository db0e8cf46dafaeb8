# =============================================================================
# lib/ - Standalone Utility Modules
# =============================================================================
# This package contains reusable utilities:
# - supabase_client.py: Typed Supabase wrapper for document operations
# - video_reference.py: YouTube / hosted video source normalization
# - utils.py: Shared utilities (UUID validation, timestamps)
#
# These modules are self-contained and can be tested in isolation.
# =============================================================================

from lib.supabase_client import SupabaseClient, SupabaseClientError
from lib.video_reference import (
    VideoReference,
    VideoReferenceError,
    extract_video_id,
    is_valid_video_id,
    merge_video_patch,
    normalize_video_reference,
)
from lib.utils import is_valid_uuid, normalize_uuid, utc_now_iso

__all__ = [
    # Supabase
    "SupabaseClient",
    "SupabaseClientError",
    # Video sources
    "VideoReference",
    "VideoReferenceError",
    "extract_video_id",
    "is_valid_video_id",
    "merge_video_patch",
    "normalize_video_reference",
    # Utils
    "is_valid_uuid",
    "normalize_uuid",
    "utc_now_iso",
]
