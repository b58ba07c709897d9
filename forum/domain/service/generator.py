"""Identifier and time capabilities injected into repositories."""

from abc import ABC, abstractmethod
from datetime import datetime, timezone
from uuid import uuid4

from forum.domain.value import IdPrefix

from .base import Service


class IdGenerator(Service, ABC):
    """Generates unique entity identifiers."""

    @abstractmethod
    def generate(self, prefix: IdPrefix) -> str:
        """Return a new identifier such as ``thread-9f2c...``."""
        pass


class Clock(Service, ABC):
    """Provides the current timestamp."""

    @abstractmethod
    def now(self) -> datetime:
        pass


class UuidIdGenerator(IdGenerator):
    """Identifier generator backed by random UUIDs."""

    def __init__(self, length: int = 16) -> None:
        """Initialize generator.

        Args:
            length: Number of hex characters kept after the prefix (max 32)
        """
        self.length = length

    def generate(self, prefix: IdPrefix) -> str:
        return f"{prefix.value}-{uuid4().hex[: self.length]}"


class SystemClock(Clock):
    """Wall clock in UTC."""

    def now(self) -> datetime:
        return datetime.now(timezone.utc)
