"""Persistence layer errors."""


class PersistenceError(Exception):
    """Base persistence error."""

    pass


class IntegrityError(PersistenceError):
    """Raised when a write would violate a uniqueness constraint."""

    pass
