"""
Owner-scoped CRUD service shared by assignments and notes.
"""

import logging
from typing import Any, Generic, NoReturn, Optional, TypeVar

from shared.models import AuthenticatedUser
from shared.repository import OwnedResourceRepository

from .exceptions import ResourceNotFoundError
from .models import OwnedResource, ResourceOperation
from .policy import OwnershipPolicy

logger = logging.getLogger(__name__)

R = TypeVar("R", bound=OwnedResource)

# Columns a client can never set through create/update payloads
PROTECTED_FIELDS = frozenset({"id", "user_id", "created_at", "updated_at"})


class OwnedResourceService(Generic[R]):
    """
    CRUD for resources that belong to a single user.

    Updates and deletes are one conditional write (id AND owner). When the
    write touches nothing, the record is looked up to report NotFound before
    Forbidden; the record itself is never modified on a rejection.
    """

    resource_type: str = "resource"

    def __init__(
        self,
        repository: OwnedResourceRepository[R],
        policy: Optional[OwnershipPolicy] = None,
    ):
        self._repository = repository
        self._policy = policy or OwnershipPolicy(self.resource_type)

    async def list_resources(self, user: AuthenticatedUser) -> list[R]:
        """List the user's resources, newest first."""
        return self._repository.list_for_owner(user.id)

    async def list_for_user_id(self, user_id: str) -> list[R]:
        """
        List resources for a caller-supplied user ID.

        Used only by the legacy unauthenticated routes: the ID is trusted
        as given.
        """
        return self._repository.list_for_owner(user_id)

    async def get_resource(self, user: AuthenticatedUser, resource_id: str) -> R:
        """Get one of the user's resources."""
        resource = self._repository.get_by_id(resource_id)
        if resource is None or resource.user_id != user.id:
            raise ResourceNotFoundError(self.resource_type, resource_id)
        return resource

    async def create_resource(self, user: AuthenticatedUser, data: dict[str, Any]) -> R:
        """Insert a resource owned by the acting user."""
        row = {k: v for k, v in data.items() if k not in PROTECTED_FIELDS}
        row["user_id"] = user.id
        resource = self._repository.create(row)
        logger.info("User %s created %s %s", user.id, self.resource_type, resource.id)
        return resource

    async def update_resource(
        self,
        user: AuthenticatedUser,
        resource_id: str,
        changes: dict[str, Any],
    ) -> R:
        """
        Apply changes to a resource the user owns.

        Raises:
            ResourceNotFoundError: If the ID doesn't exist
            ResourceAccessDeniedError: If it belongs to someone else
        """
        changes = {k: v for k, v in changes.items() if k not in PROTECTED_FIELDS}
        updated = self._repository.update_owned(resource_id, user.id, changes)
        if updated is None:
            self._explain_rejected_write(user, resource_id, ResourceOperation.UPDATE)
        return updated

    async def delete_resource(self, user: AuthenticatedUser, resource_id: str) -> None:
        """
        Delete a resource the user owns.

        Raises:
            ResourceNotFoundError: If the ID doesn't exist
            ResourceAccessDeniedError: If it belongs to someone else
        """
        if not self._repository.delete_owned(resource_id, user.id):
            self._explain_rejected_write(user, resource_id, ResourceOperation.DELETE)
        logger.info("User %s deleted %s %s", user.id, self.resource_type, resource_id)

    def _explain_rejected_write(
        self,
        user: AuthenticatedUser,
        resource_id: str,
        operation: ResourceOperation,
    ) -> NoReturn:
        existing = self._repository.get_by_id(resource_id)
        if existing is None:
            raise ResourceNotFoundError(self.resource_type, resource_id)

        self._policy.authorize(user, existing, operation)
        # Owned by the user yet unmatched: it vanished between write and lookup
        raise ResourceNotFoundError(self.resource_type, resource_id)
