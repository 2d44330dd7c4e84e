"""
Base repository classes for database access.

Provides a common abstraction layer for all repositories, encapsulating
Supabase client access and the owner-scoped queries shared by every
user-owned table.
"""

from datetime import datetime, timezone
from typing import Any, Generic, Optional, TypeVar

from postgrest.exceptions import APIError
from supabase import Client


T = TypeVar("T")

# Postgres error codes surfaced by PostgREST
UNIQUE_VIOLATION = "23505"
INVALID_TEXT_REPRESENTATION = "22P02"


def utc_now_iso() -> str:
    """Current UTC time as an ISO-8601 string, the format stored in timestamptz columns."""
    return datetime.now(timezone.utc).isoformat()


def is_unique_violation(error: APIError) -> bool:
    return error.code == UNIQUE_VIOLATION


class BaseRepository(Generic[T]):
    """
    Base class for all repositories.

    Provides common functionality for database operations:
    - Supabase client access via self._db
    - Generic type parameter for model type hints

    Subclasses should implement domain-specific data access methods
    and handle dict-to-Pydantic model mapping internally.
    """

    def __init__(self, db: Client) -> None:
        """
        Initialize the repository with a Supabase client.

        Args:
            db: Supabase client instance for database operations.
        """
        self._db = db


class OwnedResourceRepository(BaseRepository[T]):
    """
    Repository for tables whose rows belong to a single user (``user_id``).

    Mutations are conditional writes filtered by both the row id and the
    owner id, so an ownership check and the write it guards happen in one
    statement. A write that matches nothing returns None / False and the
    caller decides whether that was "missing" or "not yours".

    Note: This repository does NOT raise authorization errors.
    The service layer is responsible for explaining a rejected write.
    """

    table: str = ""

    def list_for_owner(self, user_id: str) -> list[T]:
        """List a user's rows, most recently created first."""
        result = (
            self._db.table(self.table)
            .select("*")
            .eq("user_id", user_id)
            .order("created_at", desc=True)
            .execute()
        )
        return [self._map(row) for row in result.data]

    def get_by_id(self, resource_id: str) -> Optional[T]:
        """Get a row by id regardless of owner, or None if it doesn't exist."""
        try:
            result = self._db.table(self.table).select("*").eq("id", resource_id).execute()
        except APIError as e:
            if e.code == INVALID_TEXT_REPRESENTATION:
                return None
            raise

        if not result.data:
            return None
        return self._map(result.data[0])

    def create(self, data: dict[str, Any]) -> T:
        """Insert a row and return it with generated id and timestamps."""
        result = self._db.table(self.table).insert(data).execute()
        return self._map(result.data[0])

    def update_owned(
        self,
        resource_id: str,
        user_id: str,
        changes: dict[str, Any],
    ) -> Optional[T]:
        """
        Apply changes only if the row exists and belongs to user_id.

        Returns:
            The updated row, or None if no row matched both filters.
        """
        data = {**changes, "updated_at": utc_now_iso()}
        try:
            result = (
                self._db.table(self.table)
                .update(data)
                .eq("id", resource_id)
                .eq("user_id", user_id)
                .execute()
            )
        except APIError as e:
            if e.code == INVALID_TEXT_REPRESENTATION:
                return None
            raise

        if not result.data:
            return None
        return self._map(result.data[0])

    def delete_owned(self, resource_id: str, user_id: str) -> bool:
        """
        Delete the row only if it belongs to user_id.

        Returns:
            True if a row was deleted.
        """
        try:
            result = (
                self._db.table(self.table)
                .delete()
                .eq("id", resource_id)
                .eq("user_id", user_id)
                .execute()
            )
        except APIError as e:
            if e.code == INVALID_TEXT_REPRESENTATION:
                return False
            raise

        return bool(result.data)

    def _map(self, row: dict[str, Any]) -> T:
        """Map a database row to the repository's model."""
        raise NotImplementedError
