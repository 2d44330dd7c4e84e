"""
Error response models.

Every error the API returns has the same JSON shape.
"""

from pydantic import BaseModel
from typing import Optional


class ErrorResponse(BaseModel):
    """Standard error response format."""

    message: str
    stack: Optional[str] = None
