"""Ownership authorization policy."""

from forum.domain.error import AuthorizationError
from forum.domain.value import UserId

from .base import Service


class OwnershipPolicy(Service):
    """Allows a mutation only when the requester owns the resource.

    Ownership is strict equality of user IDs. There is no role or admin
    override; such rules belong in a separate policy object.
    """

    def verify_owner(
        self,
        resource_owner_id: UserId,
        requesting_user_id: UserId,
        resource: str = "resource",
        resource_id: str | None = None,
    ) -> None:
        """Check that the requesting user owns the resource.

        Args:
            resource_owner_id: Owner recorded on the resource
            requesting_user_id: Authenticated user attempting the mutation
            resource: Resource kind, used in the error
            resource_id: Resource ID, used in the error

        Raises:
            AuthorizationError: If the IDs differ
        """
        if resource_owner_id != requesting_user_id:
            raise AuthorizationError(requesting_user_id, resource, resource_id)
