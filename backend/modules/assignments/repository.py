"""
Assignment repository for database access.
"""

from typing import Any

from shared.repository import OwnedResourceRepository
from .models import Assignment


class AssignmentRepository(OwnedResourceRepository[Assignment]):
    """Repository for the ``assignments`` table."""

    table = "assignments"

    def _map(self, row: dict[str, Any]) -> Assignment:
        """Map database row to Assignment model."""
        return Assignment(
            id=str(row["id"]),
            user_id=str(row["user_id"]),
            title=row["title"],
            subject=row["subject"],
            due_date=row.get("due_date"),
            status=row.get("status") or "pending",
            priority=row.get("priority") or "medium",
            description=row.get("description"),
            created_at=row["created_at"],
            updated_at=row["updated_at"],
        )
