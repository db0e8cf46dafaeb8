# =============================================================================
# lib/supabase_client.py - Supabase Client Wrapper
# =============================================================================
# This module provides a typed wrapper for Supabase database operations.
# It implements the singleton pattern to reuse a single client connection
# and exposes the handful of document operations the site needs:
# - find / find_one / find_by_id for reads
# - insert / insert_if_absent for creates
# - update_by_id / delete_by_id for writes
#
# Each table is treated as a document collection: rows are plain dicts,
# keyed by a database-generated UUID `id`.
#
# Usage:
#   from lib.supabase_client import SupabaseClient
#   albums = SupabaseClient.find("albums", order_by="created_at", desc=True)
# =============================================================================

from __future__ import annotations

import logging
from typing import Any
from uuid import UUID

from supabase import create_client, Client

from app.config import settings
from lib.utils import normalize_uuid, utc_now_iso

# Set up logging for this module
logger = logging.getLogger(__name__)

# PostgREST code returned by .single() when no row matches
NO_ROWS_CODE = "PGRST116"


class SupabaseClientError(Exception):
    """
    Error during Supabase operations.

    Carries the table and operation so the service layer can log the cause
    while returning a generic message to the client.
    """

    def __init__(
        self,
        message: str,
        code: str = "SUPABASE_ERROR",
        suggestion: str | None = None,
        details: dict[str, Any] | None = None,
    ):
        super().__init__(message)
        self.code = code
        self.message = message
        self.suggestion = suggestion
        self.details = details or {}

    def __str__(self) -> str:
        result = f"[{self.code}] {self.message}"
        if self.suggestion:
            result += f" Suggestion: {self.suggestion}"
        return result


class SupabaseClient:
    """
    Typed wrapper for Supabase database operations.

    Implements singleton pattern - one client instance is shared across
    the application. All methods are class methods for easy access without
    instantiation.

    Example:
        tours = SupabaseClient.find("tours", order_by="date")
        album = SupabaseClient.find_by_id("albums", album_id)
    """

    _instance: Client | None = None

    @classmethod
    def get_client(cls) -> Client:
        """
        Get or create the singleton Supabase client.

        Uses service_role key which bypasses Row Level Security (RLS).
        This is appropriate for server-side operations.

        Raises:
            SupabaseClientError: If client creation fails
        """
        if cls._instance is None:
            try:
                cls._instance = create_client(
                    settings.SUPABASE_URL,
                    settings.SUPABASE_SERVICE_KEY
                )
                logger.info("Supabase client initialized successfully")
            except Exception as e:
                raise SupabaseClientError(
                    message=f"Failed to create Supabase client: {e}",
                    code="CLIENT_INIT_FAILED",
                    suggestion="Check SUPABASE_URL and SUPABASE_SERVICE_KEY in your .env file"
                )
        return cls._instance

    # -------------------------------------------------------------------------
    # Reads
    # -------------------------------------------------------------------------

    @classmethod
    def find(
        cls,
        table: str,
        order_by: str = "created_at",
        desc: bool = False,
    ) -> list[dict[str, Any]]:
        """
        Fetch every row of a table, sorted by one column.

        Args:
            table: Table name (e.g. "albums")
            order_by: Column to sort on
            desc: Sort descending when True

        Returns:
            List of row dicts (empty if the table is empty)

        Raises:
            SupabaseClientError: If query fails
        """
        client = cls.get_client()

        try:
            response = (
                client.table(table)
                .select("*")
                .order(order_by, desc=desc)
                .execute()
            )
            rows = response.data or []
            logger.debug(f"Fetched {len(rows)} rows from {table}")
            return rows

        except Exception as e:
            raise SupabaseClientError(
                message=f"Failed to list {table}: {e}",
                code="FIND_FAILED",
                details={"table": table, "order_by": order_by}
            )

    @classmethod
    def find_by_id(cls, table: str, row_id: str | UUID) -> dict[str, Any] | None:
        """
        Fetch one row by its primary key.

        Returns:
            Row dict, or None if not found

        Raises:
            SupabaseClientError: If query fails
        """
        client = cls.get_client()
        row_id_str = normalize_uuid(row_id)

        try:
            response = (
                client.table(table)
                .select("*")
                .eq("id", row_id_str)
                .single()
                .execute()
            )

            return response.data

        except Exception as e:
            # Check if it's a "not found" error
            if NO_ROWS_CODE in str(e):
                return None
            raise SupabaseClientError(
                message=f"Failed to fetch {table} row: {e}",
                code="FIND_BY_ID_FAILED",
                details={"table": table, "id": row_id_str}
            )

    @classmethod
    def find_one(cls, table: str, filters: dict[str, Any]) -> dict[str, Any] | None:
        """
        Fetch the first row matching equality filters.

        Args:
            table: Table name
            filters: Column -> value pairs, combined with AND

        Returns:
            First matching row dict, or None

        Raises:
            SupabaseClientError: If query fails
        """
        client = cls.get_client()

        try:
            query = client.table(table).select("*")
            for column, value in filters.items():
                query = query.eq(column, value)

            response = query.limit(1).execute()
            rows = response.data or []
            return rows[0] if rows else None

        except Exception as e:
            raise SupabaseClientError(
                message=f"Failed to query {table}: {e}",
                code="FIND_ONE_FAILED",
                details={"table": table, "filters": filters}
            )

    # -------------------------------------------------------------------------
    # Writes
    # -------------------------------------------------------------------------

    @classmethod
    def insert(cls, table: str, data: dict[str, Any]) -> dict[str, Any]:
        """
        Insert a row and return it with its generated id and timestamps.

        Raises:
            SupabaseClientError: If insert fails or returns nothing
        """
        client = cls.get_client()

        try:
            response = (
                client.table(table)
                .insert(data)
                .execute()
            )

            if response.data:
                return response.data[0]
            raise SupabaseClientError(
                message="Insert returned no data",
                code="INSERT_NO_DATA",
                details={"table": table}
            )

        except SupabaseClientError:
            raise
        except Exception as e:
            raise SupabaseClientError(
                message=f"Failed to insert into {table}: {e}",
                code="INSERT_FAILED",
                details={"table": table}
            )

    @classmethod
    def insert_if_absent(
        cls,
        table: str,
        data: dict[str, Any],
        on_conflict: str,
    ) -> None:
        """
        Insert a row unless one already holds the same unique key.

        Issues `INSERT ... ON CONFLICT (on_conflict) DO NOTHING`, so two
        concurrent callers can never create two rows for the same key.
        The caller reads the surviving row back afterwards.

        Raises:
            SupabaseClientError: If the upsert fails
        """
        client = cls.get_client()

        try:
            (
                client.table(table)
                .upsert(data, on_conflict=on_conflict, ignore_duplicates=True)
                .execute()
            )
        except Exception as e:
            raise SupabaseClientError(
                message=f"Failed to insert into {table}: {e}",
                code="INSERT_IF_ABSENT_FAILED",
                details={"table": table, "on_conflict": on_conflict}
            )

    @classmethod
    def update_by_id(
        cls,
        table: str,
        row_id: str | UUID,
        data: dict[str, Any],
    ) -> dict[str, Any] | None:
        """
        Overwrite the given columns of one row; other columns are untouched.

        `updated_at` is always refreshed.

        Returns:
            Updated row dict, or None if no row has that id

        Raises:
            SupabaseClientError: If update fails
        """
        client = cls.get_client()
        row_id_str = normalize_uuid(row_id)

        try:
            response = (
                client.table(table)
                .update({**data, "updated_at": utc_now_iso()})
                .eq("id", row_id_str)
                .execute()
            )

            rows = response.data or []
            if rows:
                logger.debug(f"Updated {table} row {row_id_str}")
                return rows[0]
            return None

        except Exception as e:
            raise SupabaseClientError(
                message=f"Failed to update {table} row: {e}",
                code="UPDATE_FAILED",
                details={"table": table, "id": row_id_str}
            )

    @classmethod
    def delete_by_id(cls, table: str, row_id: str | UUID) -> dict[str, Any] | None:
        """
        Delete one row by primary key.

        Returns:
            The deleted row dict, or None if no row has that id

        Raises:
            SupabaseClientError: If delete fails
        """
        client = cls.get_client()
        row_id_str = normalize_uuid(row_id)

        try:
            response = (
                client.table(table)
                .delete()
                .eq("id", row_id_str)
                .execute()
            )

            rows = response.data or []
            return rows[0] if rows else None

        except Exception as e:
            raise SupabaseClientError(
                message=f"Failed to delete {table} row: {e}",
                code="DELETE_FAILED",
                details={"table": table, "id": row_id_str}
            )
