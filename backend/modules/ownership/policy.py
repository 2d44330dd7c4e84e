"""
Ownership policy for user-owned resources.
"""

import logging
from typing import Optional

from shared.exceptions import AuthenticationError
from shared.models import AuthenticatedUser

from .exceptions import ResourceAccessDeniedError
from .models import OwnedResource, ResourceOperation, MUTATIONS

logger = logging.getLogger(__name__)


class OwnershipPolicy:
    """
    Decides whether an identity may perform an operation on a resource.

    Reads and creates are scoped to the acting identity by the queries
    themselves, so only mutations are checked here.
    """

    def __init__(self, resource_type: str = "resource"):
        self.resource_type = resource_type

    def authorize(
        self,
        acting: Optional[AuthenticatedUser],
        resource: OwnedResource,
        operation: ResourceOperation,
    ) -> bool:
        """
        Allow the operation or raise.

        Raises:
            AuthenticationError: If there is no acting identity
            ResourceAccessDeniedError: If a mutation targets someone else's resource
        """
        if acting is None:
            raise AuthenticationError("Not authorized", code="UNAUTHENTICATED")

        if operation in MUTATIONS and resource.user_id != acting.id:
            logger.warning(
                "User %s denied %s on %s %s",
                acting.id,
                operation.value,
                self.resource_type,
                resource.id,
            )
            raise ResourceAccessDeniedError(
                self.resource_type, resource.id, acting.id, operation.value
            )

        return True
