"""
Notes module data models.
"""

from typing import Optional
from pydantic import Field, model_validator

from shared.models import CamelModel
from modules.ownership.models import OwnedResource


class Note(OwnedResource):
    """A student's note."""

    title: str = Field(..., description="Note title")
    content: str = Field(..., description="Note body")


class CreateNoteRequest(CamelModel):
    """Body of POST /api/notes. Both fields are required."""

    title: Optional[str] = None
    content: Optional[str] = None


class UpdateNoteRequest(CamelModel):
    """Body of PUT /api/notes/{id}. Only fields sent are changed."""

    title: Optional[str] = Field(None, min_length=1)
    content: Optional[str] = Field(None, min_length=1)

    @model_validator(mode="after")
    def reject_null_fields(self) -> "UpdateNoteRequest":
        for name in ("title", "content"):
            if name in self.model_fields_set and getattr(self, name) is None:
                raise ValueError(f"{name} cannot be null")
        return self
