"""
Saarthi API package.

Provides the FastAPI application for the Saarthi assignments, notes and
voice command service.
"""

from .app import app, create_app

__all__ = ["app", "create_app"]
