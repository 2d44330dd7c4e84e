"""
Feature modules for the Saarthi backend.

Each module is self-contained with its own:
- models.py: Pydantic models for data transfer
- service.py: Business logic implementation
- repository.py: Supabase table access
- routes.py: FastAPI route handlers
- exceptions.py: Module-specific exceptions, where it has any

auth and ownership are shared by the assignments, notes and voice modules.
"""
