"""Domain layer errors."""


class DomainError(Exception):
    """Base domain error."""

    pass


class ValidationError(DomainError):
    """Raised when a payload does not satisfy an entity's shape.

    The code is stable and machine readable, e.g.
    ``ADDED_THREAD.NOT_CONTAIN_NEEDED_PROPERTY``.
    """

    def __init__(self, entity: str, kind: str):
        self.entity = entity
        self.kind = kind
        self.code = f"{entity}.{kind}"
        super().__init__(self.code)


class MalformedRecordError(DomainError):
    """Raised when a repository returns a record that violates an entity's shape."""

    def __init__(self, entity: str, code: str):
        self.entity = entity
        self.code = code
        super().__init__(f"Malformed {entity} record: {code}")


class AuthorizationError(DomainError):
    """Raised when a user attempts to modify content they don't own."""

    def __init__(
        self,
        user_id: str,
        resource: str = "resource",
        resource_id: str | None = None,
    ):
        self.user_id = user_id
        self.resource = resource
        self.resource_id = resource_id
        target = f"{resource} {resource_id}" if resource_id else resource
        super().__init__(f"User {user_id} is not authorized to modify {target}")


class NotFoundError(DomainError):
    """Raised when a requested resource is not found or has been soft-deleted."""

    def __init__(self, resource: str, identifier: str):
        self.resource = resource
        self.identifier = identifier
        super().__init__(f"{resource} not found: {identifier}")
