"""
Ownership module data models.
"""

from datetime import datetime, timezone
from enum import Enum
from pydantic import BaseModel, Field

from shared.models import CamelModel


class ResourceOperation(str, Enum):
    """Operations the ownership policy distinguishes."""

    READ = "read"
    CREATE = "create"
    UPDATE = "update"
    DELETE = "delete"


# Operations that require the acting identity to own the resource
MUTATIONS = frozenset({ResourceOperation.UPDATE, ResourceOperation.DELETE})


class OwnedResource(CamelModel):
    """A record that belongs to exactly one user."""

    id: str = Field(..., description="Resource ID (UUID)")
    user_id: str = Field(..., description="Owning user ID")
    created_at: datetime = Field(
        default_factory=lambda: datetime.now(timezone.utc),
        description="When the resource was created",
    )
    updated_at: datetime = Field(
        default_factory=lambda: datetime.now(timezone.utc),
        description="When the resource was last changed",
    )


class DeletedResponse(BaseModel):
    """Returned by DELETE endpoints."""

    id: str
    message: str
