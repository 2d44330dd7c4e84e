"""
Note repository for database access.
"""

from typing import Any

from shared.repository import OwnedResourceRepository
from .models import Note


class NoteRepository(OwnedResourceRepository[Note]):
    """Repository for the ``notes`` table."""

    table = "notes"

    def _map(self, row: dict[str, Any]) -> Note:
        return Note(
            id=str(row["id"]),
            user_id=str(row["user_id"]),
            title=row["title"],
            content=row["content"],
            created_at=row["created_at"],
            updated_at=row["updated_at"],
        )
