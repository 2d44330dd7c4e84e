"""
Assignments module data models.
"""

from datetime import date
from enum import Enum
from typing import Optional
from pydantic import Field, model_validator

from shared.models import CamelModel
from modules.ownership.models import OwnedResource


class AssignmentStatus(str, Enum):
    """Assignment completion status."""

    PENDING = "pending"
    COMPLETED = "completed"


class AssignmentPriority(str, Enum):
    """Assignment priority."""

    HIGH = "high"
    MEDIUM = "medium"
    LOW = "low"


class Assignment(OwnedResource):
    """A student's assignment."""

    title: str = Field(..., description="Assignment title")
    subject: str = Field(..., description="Subject / course name")
    due_date: Optional[date] = Field(None, description="Due date")
    status: AssignmentStatus = Field(default=AssignmentStatus.PENDING)
    priority: AssignmentPriority = Field(default=AssignmentPriority.MEDIUM)
    description: Optional[str] = Field(None, description="Free-text details")


class CreateAssignmentRequest(CamelModel):
    """
    Body of POST /api/assignments.

    title and subject are required; presence is checked by the service so
    the error message matches the rest of the API.
    """

    title: Optional[str] = None
    subject: Optional[str] = None
    due_date: Optional[date] = None
    priority: AssignmentPriority = AssignmentPriority.MEDIUM
    description: Optional[str] = None


class UpdateAssignmentRequest(CamelModel):
    """Body of PUT /api/assignments/{id}. Only fields sent are changed."""

    title: Optional[str] = Field(None, min_length=1)
    subject: Optional[str] = Field(None, min_length=1)
    due_date: Optional[date] = None
    status: Optional[AssignmentStatus] = None
    priority: Optional[AssignmentPriority] = None
    description: Optional[str] = None

    @model_validator(mode="after")
    def reject_null_required_fields(self) -> "UpdateAssignmentRequest":
        """title, subject, status and priority may be omitted but not cleared."""
        for name in ("title", "subject", "status", "priority"):
            if name in self.model_fields_set and getattr(self, name) is None:
                raise ValueError(f"{name} cannot be null")
        return self
