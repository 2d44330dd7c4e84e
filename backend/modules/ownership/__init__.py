"""
Ownership module.

Enforces that only the owner of a resource can change or delete it, and
provides the owner-scoped CRUD service the resource modules build on.

Public API:
- OwnershipPolicy: authorize(acting, resource, operation)
- OwnedResourceService: Generic owner-scoped CRUD
- OwnedResource, ResourceOperation: Models
- ResourceNotFoundError, ResourceAccessDeniedError: Exceptions
"""

from .models import OwnedResource, ResourceOperation, DeletedResponse
from .policy import OwnershipPolicy
from .service import OwnedResourceService
from .exceptions import ResourceNotFoundError, ResourceAccessDeniedError

__all__ = [
    "OwnedResource",
    "ResourceOperation",
    "DeletedResponse",
    "OwnershipPolicy",
    "OwnedResourceService",
    "ResourceNotFoundError",
    "ResourceAccessDeniedError",
]
