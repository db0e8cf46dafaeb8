# =============================================================================
# core/services/document_service.py - Collection CRUD Logic
# =============================================================================
# Handles list/get/create/update/delete for the multi-document collections
# (albums, videos, tours). Separates HTTP concerns from database logic.
#
# Each collection is a subclass that only names its table, the singular and
# plural labels used in messages, and its sort order.
# =============================================================================

import logging
from typing import Any
from uuid import UUID

from lib.supabase_client import SupabaseClient, SupabaseClientError
from lib.utils import is_valid_uuid, normalize_uuid
from app.exceptions import (
    DocumentNotFoundError,
    InvalidIdentifierError,
    OperationFailedError,
)

logger = logging.getLogger(__name__)


class DocumentService:
    """
    Service for one document collection.

    Identifiers are validated before any lookup, so a malformed id is a
    400 (InvalidIdentifierError) and a well-formed but unknown id a 404
    (DocumentNotFoundError). Database failures become OperationFailedError
    with a generic message; the cause is logged.
    """

    table: str = ""
    entity: str = "document"
    plural: str = "documents"
    order_by: str = "created_at"
    descending: bool = True

    @classmethod
    def _check_id(cls, document_id: str | UUID) -> str:
        if not is_valid_uuid(document_id):
            raise InvalidIdentifierError(cls.entity, str(document_id))
        return normalize_uuid(document_id)

    @classmethod
    def _failed(cls, action: str, error: SupabaseClientError, subject: str | None = None) -> OperationFailedError:
        subject = subject or cls.entity
        logger.error(f"Failed to {action} {subject}: {error}")
        return OperationFailedError(f"Failed to {action} {subject}", str(error))

    @classmethod
    def list(cls) -> list[dict[str, Any]]:
        """
        List every document in the collection, in the collection's order.

        Raises:
            OperationFailedError: If the query fails
        """
        try:
            return SupabaseClient.find(cls.table, order_by=cls.order_by, desc=cls.descending)
        except SupabaseClientError as e:
            raise cls._failed("fetch", e, subject=cls.plural)

    @classmethod
    def get(cls, document_id: str | UUID) -> dict[str, Any]:
        """
        Get one document by id.

        Raises:
            InvalidIdentifierError: If the id is not a UUID
            DocumentNotFoundError: If no document has that id
            OperationFailedError: If the query fails
        """
        document_id = cls._check_id(document_id)

        try:
            document = SupabaseClient.find_by_id(cls.table, document_id)
        except SupabaseClientError as e:
            raise cls._failed("fetch", e)

        if not document:
            raise DocumentNotFoundError(cls.entity, document_id)
        return document

    @classmethod
    def create(cls, data: dict[str, Any]) -> dict[str, Any]:
        """
        Insert a new document.

        Args:
            data: Validated field values (defaults already applied)

        Returns:
            Created document with id and timestamps
        """
        try:
            document = SupabaseClient.insert(cls.table, data)
        except SupabaseClientError as e:
            raise cls._failed("create", e)

        logger.info(f"Created {cls.entity}: {document.get('id')}")
        return document

    @classmethod
    def update(cls, document_id: str | UUID, patch: dict[str, Any]) -> dict[str, Any]:
        """
        Apply a partial update.

        Fields in `patch` overwrite stored values; fields not in `patch`
        are left untouched.

        Raises:
            InvalidIdentifierError: If the id is not a UUID
            DocumentNotFoundError: If no document has that id
            OperationFailedError: If the update fails
        """
        document_id = cls._check_id(document_id)

        if not patch:
            return cls.get(document_id)  # Nothing to update

        try:
            document = SupabaseClient.update_by_id(cls.table, document_id, patch)
        except SupabaseClientError as e:
            raise cls._failed("update", e)

        if not document:
            raise DocumentNotFoundError(cls.entity, document_id)

        logger.info(f"Updated {cls.entity}: {document_id}")
        return document

    @classmethod
    def delete(cls, document_id: str | UUID) -> dict[str, Any]:
        """
        Delete a document.

        Returns:
            The deleted document

        Raises:
            InvalidIdentifierError: If the id is not a UUID
            DocumentNotFoundError: If no document has that id
            OperationFailedError: If the delete fails
        """
        document_id = cls._check_id(document_id)

        try:
            document = SupabaseClient.delete_by_id(cls.table, document_id)
        except SupabaseClientError as e:
            raise cls._failed("delete", e)

        if not document:
            raise DocumentNotFoundError(cls.entity, document_id)

        logger.info(f"Deleted {cls.entity}: {document_id}")
        return document


class AlbumService(DocumentService):
    """Albums shown in the music section, newest first."""
    table = "albums"
    entity = "album"
    plural = "albums"


class TourService(DocumentService):
    """Tour dates, soonest first."""
    table = "tours"
    entity = "tour"
    plural = "tours"
    order_by = "date"
    descending = False
