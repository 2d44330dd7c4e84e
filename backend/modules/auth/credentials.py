"""
Credential store: registration, lookup and PIN verification.
"""

import logging
from typing import Optional

from postgrest.exceptions import APIError

from shared.models import AuthenticatedUser
from shared.repository import is_unique_violation

from .exceptions import DuplicateEmailError, UserNotFoundError
from .models import Identity
from .pins import hash_pin, check_pin
from .repository import UserRepository

logger = logging.getLogger(__name__)


class CredentialStore:
    """
    Implementation of ICredentialStore on top of UserRepository.

    PINs are hashed here, before anything reaches the repository.
    """

    def __init__(self, repository: UserRepository):
        self._repository = repository

    def register(self, email: str, pin: str, name: Optional[str] = None) -> Identity:
        if self._repository.get_by_email(email) is not None:
            raise DuplicateEmailError(email)

        try:
            identity = self._repository.create(email, hash_pin(pin), name)
        except APIError as e:
            # Lost a race with a concurrent signup for the same email
            if is_unique_violation(e):
                raise DuplicateEmailError(email)
            raise

        logger.info("Registered user %s", identity.id)
        return identity

    def find_by_email(self, email: str) -> Optional[Identity]:
        return self._repository.get_by_email(email)

    def verify_pin(self, identity: Identity, supplied_pin: str) -> bool:
        return check_pin(supplied_pin, identity.pin_hash)

    def change_pin(self, identity_id: str, new_pin: str) -> None:
        """Store a freshly salted hash for a new PIN."""
        if not self._repository.update_pin_hash(identity_id, hash_pin(new_pin)):
            raise UserNotFoundError(identity_id)
        logger.info("PIN changed for user %s", identity_id)

    def get_identity(self, identity_id: str) -> Optional[AuthenticatedUser]:
        return self._repository.get_by_id(identity_id)
