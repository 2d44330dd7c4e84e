"""
Dependency injection setup for FastAPI.

This module provides the "container" that wires together all module
implementations. Each module exposes its service through an interface,
and this file creates the concrete implementations.
"""

from typing import TYPE_CHECKING

# Type checking imports for interfaces (avoids circular imports)
if TYPE_CHECKING:
    from modules.auth.credentials import CredentialStore
    from modules.auth.interfaces import IAuthService, ITokenService
    from modules.auth.repository import UserRepository
    from modules.assignments.service import AssignmentService
    from modules.notes.service import NoteService
    from modules.voice.service import VoiceService


class ServiceContainer:
    """
    Container for all service instances.

    Services are created lazily on first access and cached as singletons
    within the container. Use reset() to clear them for testing.
    """

    def __init__(self) -> None:
        self._user_repository: "UserRepository | None" = None
        self._credential_store: "CredentialStore | None" = None
        self._token_service: "ITokenService | None" = None
        self._auth_service: "IAuthService | None" = None
        self._assignment_service: "AssignmentService | None" = None
        self._note_service: "NoteService | None" = None
        self._voice_service: "VoiceService | None" = None

    @property
    def user_repository(self) -> "UserRepository":
        """Get the user repository instance."""
        if self._user_repository is None:
            from modules.auth.repository import UserRepository
            from shared.database import get_supabase_client
            self._user_repository = UserRepository(get_supabase_client())
        return self._user_repository

    @property
    def credential_store(self) -> "CredentialStore":
        """Get the credential store instance."""
        if self._credential_store is None:
            from modules.auth.credentials import CredentialStore
            self._credential_store = CredentialStore(self.user_repository)
        return self._credential_store

    @property
    def token_service(self) -> "ITokenService":
        """Get the token service instance."""
        if self._token_service is None:
            from modules.auth.tokens import TokenService
            self._token_service = TokenService.from_settings()
        return self._token_service

    @property
    def auth(self) -> "IAuthService":
        """Get the auth service instance."""
        if self._auth_service is None:
            from modules.auth.service import AuthService
            self._auth_service = AuthService(
                store=self.credential_store,
                tokens=self.token_service,
            )
        return self._auth_service

    @property
    def assignments(self) -> "AssignmentService":
        """Get the assignment service instance."""
        if self._assignment_service is None:
            from modules.assignments.repository import AssignmentRepository
            from modules.assignments.service import AssignmentService
            from shared.database import get_supabase_client
            self._assignment_service = AssignmentService(
                AssignmentRepository(get_supabase_client())
            )
        return self._assignment_service

    @property
    def notes(self) -> "NoteService":
        """Get the note service instance."""
        if self._note_service is None:
            from modules.notes.repository import NoteRepository
            from modules.notes.service import NoteService
            from shared.database import get_supabase_client
            self._note_service = NoteService(NoteRepository(get_supabase_client()))
        return self._note_service

    @property
    def voice(self) -> "VoiceService":
        """Get the voice service instance."""
        if self._voice_service is None:
            from modules.voice.service import VoiceService
            self._voice_service = VoiceService(
                assignments=self.assignments,
                notes=self.notes,
            )
        return self._voice_service

    def reset(self) -> None:
        """
        Reset all cached services.

        This is primarily for testing - allows tests to get fresh
        service instances with different mock dependencies.
        """
        self._user_repository = None
        self._credential_store = None
        self._token_service = None
        self._auth_service = None
        self._assignment_service = None
        self._note_service = None
        self._voice_service = None


# Module-level container singleton
_container: ServiceContainer | None = None


def get_container() -> ServiceContainer:
    """Get the singleton service container."""
    global _container
    if _container is None:
        _container = ServiceContainer()
    return _container


def reset_container() -> None:
    """
    Reset the service container.

    The next call to get_container() creates a fresh container with new
    service instances. Primarily used for testing.
    """
    global _container
    _container = None


# FastAPI dependency functions
# These are the functions that should be used in route Depends() calls


def get_auth_service() -> "IAuthService":
    """FastAPI dependency for auth service."""
    return get_container().auth


def get_assignment_service() -> "AssignmentService":
    """FastAPI dependency for assignment service."""
    return get_container().assignments


def get_note_service() -> "NoteService":
    """FastAPI dependency for note service."""
    return get_container().notes


def get_voice_service() -> "VoiceService":
    """FastAPI dependency for voice service."""
    return get_container().voice
