"""
Shared data models used across modules.

These models are shared infrastructure, not business logic.
Module-specific models should stay in their respective module directories.
"""

from datetime import datetime
from typing import Optional
from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel


class AuthenticatedUser(BaseModel):
    """
    The acting identity for a request.

    Resolved by the access guard from a verified token plus a store lookup,
    and handed to route handlers via dependency injection. It never carries
    the PIN hash.
    """

    id: str = Field(..., description="User ID")
    email: str = Field(..., description="User's email address")
    name: str = Field(default="User", description="Display name")

    created_at: Optional[datetime] = Field(None, description="Account creation time")

    model_config = {
        "frozen": True,  # Make immutable for safety
        "extra": "ignore",
    }


class CamelModel(BaseModel):
    """Base for API models: camelCase on the wire, snake_case in Python."""

    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
    )
