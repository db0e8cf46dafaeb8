# =============================================================================
# core/services/singleton_service.py - Singleton Document Logic
# =============================================================================
# Website settings, the hero video and the biography each live in their own
# table but must only ever have one row. Rows are created lazily: the first
# read inserts the defaults.
#
# Every singleton table carries a `kind` column with a UNIQUE constraint and
# a constant value (the table name). Creation is an
# INSERT ... ON CONFLICT (kind) DO NOTHING followed by a read, so two first
# requests racing each other still end up with one row.
# =============================================================================

import logging
from typing import Any

from lib.supabase_client import SupabaseClient, SupabaseClientError
from app.exceptions import OperationFailedError
from core.models import ABOUT_DEFAULTS, SITE_SETTINGS_DEFAULTS, SocialMedia

logger = logging.getLogger(__name__)

KIND_COLUMN = "kind"


class SingletonService:
    """
    Service for a document type that has exactly one live instance.

    Subclasses name the table, the label used in error messages, and the
    default field values used when the row is first created.
    """

    table: str = ""
    entity: str = "document"
    defaults: dict[str, Any] = {}

    @classmethod
    def _find(cls) -> dict[str, Any] | None:
        return SupabaseClient.find_one(cls.table, {KIND_COLUMN: cls.table})

    @classmethod
    def _find_or_insert(cls, defaults: dict[str, Any]) -> dict[str, Any]:
        existing = cls._find()
        if existing:
            return existing

        SupabaseClient.insert_if_absent(
            cls.table,
            {**defaults, KIND_COLUMN: cls.table},
            on_conflict=KIND_COLUMN,
        )

        created = cls._find()
        if not created:
            raise SupabaseClientError(
                message=f"No {cls.table} row after insert",
                code="SINGLETON_MISSING",
                details={"table": cls.table}
            )

        logger.info(f"Created {cls.entity} document with defaults")
        return created

    @classmethod
    def get_or_create(cls, defaults: dict[str, Any] | None = None) -> dict[str, Any]:
        """
        Return the single document, creating it from defaults if absent.

        Safe to call repeatedly: once the row exists it is returned
        unchanged and `defaults` is ignored.

        Args:
            defaults: Field values for a first-time insert (the service's
                standard defaults when None)

        Raises:
            OperationFailedError: If the database fails
        """
        try:
            return cls._find_or_insert(cls.defaults if defaults is None else defaults)
        except SupabaseClientError as e:
            logger.error(f"Failed to fetch {cls.entity}: {e}")
            raise OperationFailedError(f"Failed to fetch {cls.entity}", str(e))

    @classmethod
    def merge_patch(cls, current: dict[str, Any], patch: dict[str, Any]) -> dict[str, Any]:
        """Hook for nested merges; the base merge is shallow."""
        return patch

    @classmethod
    def update(cls, patch: dict[str, Any]) -> dict[str, Any]:
        """
        Shallow-merge `patch` onto the single document.

        The document is created with the standard defaults first if needed.
        Patch fields overwrite same-named stored fields; everything else is
        left as stored. The write is a single UPDATE of the patched columns.

        Raises:
            OperationFailedError: If the database fails
        """
        try:
            current = cls._find_or_insert(cls.defaults)
            patch = cls.merge_patch(current, patch)

            if not patch:
                return current  # Nothing to update

            updated = SupabaseClient.update_by_id(cls.table, current["id"], patch)
            if not updated:
                raise SupabaseClientError(
                    message=f"{cls.table} row disappeared during update",
                    code="SINGLETON_MISSING",
                    details={"table": cls.table, "id": current["id"]}
                )

        except SupabaseClientError as e:
            logger.error(f"Failed to update {cls.entity}: {e}")
            raise OperationFailedError(f"Failed to update {cls.entity}", str(e))

        logger.info(f"Updated {cls.entity}: {sorted(patch)}")
        return updated


class SiteSettingsService(SingletonService):
    """Website title, description, contact email and social links."""
    table = "settings"
    entity = "settings"
    defaults = SITE_SETTINGS_DEFAULTS

    @classmethod
    def merge_patch(cls, current: dict[str, Any], patch: dict[str, Any]) -> dict[str, Any]:
        """Platforms missing from a social_media patch keep their stored links."""
        if patch.get("social_media") is None:
            return patch

        social_media = {
            **SocialMedia().model_dump(),
            **(current.get("social_media") or {}),
            **patch["social_media"],
        }
        return {**patch, "social_media": social_media}


class AboutService(SingletonService):
    """The biography shown on the about page."""
    table = "about"
    entity = "biography"
    defaults = ABOUT_DEFAULTS
