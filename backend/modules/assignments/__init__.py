"""
Assignments module.

Owner-scoped CRUD for student assignments.
"""

from .models import (
    Assignment,
    AssignmentStatus,
    AssignmentPriority,
    CreateAssignmentRequest,
    UpdateAssignmentRequest,
)

__all__ = [
    "Assignment",
    "AssignmentStatus",
    "AssignmentPriority",
    "CreateAssignmentRequest",
    "UpdateAssignmentRequest",
]
