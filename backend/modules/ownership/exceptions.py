"""
Ownership module exceptions.
"""

from shared.exceptions import NotFoundError, AuthorizationError


class ResourceNotFoundError(NotFoundError):
    """Raised when a resource ID does not resolve to any record."""

    def __init__(self, resource_type: str, resource_id: str):
        super().__init__(
            f"{resource_type.capitalize()} not found",
            code=f"{resource_type.upper()}_NOT_FOUND",
            details={"resource_id": resource_id},
        )


class ResourceAccessDeniedError(AuthorizationError):
    """Raised when a user tries to change a resource they don't own."""

    def __init__(self, resource_type: str, resource_id: str, user_id: str, operation: str):
        super().__init__(
            f"Not authorized to {operation} this {resource_type}",
            code=f"{resource_type.upper()}_ACCESS_DENIED",
            details={"resource_id": resource_id, "user_id": user_id},
        )
