"""
User repository for database access.

Encapsulates all Supabase queries and data mapping for the ``users`` table.
"""

from typing import Optional, Any

from postgrest.exceptions import APIError

from shared.models import AuthenticatedUser
from shared.repository import BaseRepository, INVALID_TEXT_REPRESENTATION, utc_now_iso
from .models import Identity, DEFAULT_DISPLAY_NAME


# Everything except pin_hash
PUBLIC_COLUMNS = "id, email, name, created_at, updated_at"


class UserRepository(BaseRepository[Identity]):
    """
    Repository for user identities.

    Uniqueness of ``email`` is enforced by a unique index; a violating insert
    raises ``postgrest.exceptions.APIError`` with code 23505 which the
    credential store translates.
    """

    table = "users"

    def create(self, email: str, pin_hash: str, name: Optional[str] = None) -> Identity:
        """
        Insert a new user.

        Args:
            email: Email address, stored exactly as given.
            pin_hash: bcrypt hash of the PIN (never the PIN itself).
            name: Display name, defaults to "User".

        Returns:
            Created Identity with generated ID and timestamps.
        """
        data = {
            "email": email,
            "pin_hash": pin_hash,
            "name": name or DEFAULT_DISPLAY_NAME,
        }
        result = self._db.table(self.table).insert(data).execute()
        return self._map_to_identity(result.data[0])

    def get_by_email(self, email: str) -> Optional[Identity]:
        """Get a user (including PIN hash) by exact email."""
        result = self._db.table(self.table).select("*").eq("email", email).execute()
        if not result.data:
            return None
        return self._map_to_identity(result.data[0])

    def get_by_id(self, user_id: str) -> Optional[AuthenticatedUser]:
        """Get a user by ID without the PIN hash column."""
        try:
            result = self._db.table(self.table).select(PUBLIC_COLUMNS).eq("id", user_id).execute()
        except APIError as e:
            if e.code == INVALID_TEXT_REPRESENTATION:
                return None
            raise

        if not result.data:
            return None
        return self._map_to_user(result.data[0])

    def update_pin_hash(self, user_id: str, pin_hash: str) -> bool:
        """Replace a user's PIN hash. Returns True if the user existed."""
        data = {"pin_hash": pin_hash, "updated_at": utc_now_iso()}
        result = self._db.table(self.table).update(data).eq("id", user_id).execute()
        return bool(result.data)

    # -------------------------------------------------------------------------
    # Private mapping methods
    # -------------------------------------------------------------------------

    def _map_to_identity(self, data: dict[str, Any]) -> Identity:
        """Map database row to Identity model."""
        return Identity(
            id=str(data["id"]),
            email=data["email"],
            name=data.get("name") or DEFAULT_DISPLAY_NAME,
            pin_hash=data["pin_hash"],
            created_at=data.get("created_at"),
            updated_at=data.get("updated_at"),
        )

    def _map_to_user(self, data: dict[str, Any]) -> AuthenticatedUser:
        """Map a public-column row to AuthenticatedUser."""
        return AuthenticatedUser(
            id=str(data["id"]),
            email=data["email"],
            name=data.get("name") or DEFAULT_DISPLAY_NAME,
            created_at=data.get("created_at"),
        )
