"""
Notes module.

Owner-scoped CRUD for student notes.
"""

from .models import Note, CreateNoteRequest, UpdateNoteRequest

__all__ = [
    "Note",
    "CreateNoteRequest",
    "UpdateNoteRequest",
]
