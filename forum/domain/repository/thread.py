"""Thread repository interface."""

from abc import ABC, abstractmethod
from typing import Any

from forum.domain.model.thread import NewThread, Thread
from forum.domain.value import ThreadId


class ThreadRepository(ABC):
    """Repository for Thread entity.

    Defines the contract for thread persistence operations.
    Implementations live in the persistence layer.
    """

    @abstractmethod
    async def add_thread(self, new_thread: NewThread) -> dict[str, Any]:
        """Persist a new thread.

        Args:
            new_thread: Validated thread payload

        Returns:
            Record with the generated ``id`` plus ``title`` and ``owner``
        """
        pass

    @abstractmethod
    async def get_thread_by_id(self, thread_id: ThreadId) -> Thread:
        """Get a thread by ID.

        Args:
            thread_id: The thread's unique identifier

        Returns:
            The thread

        Raises:
            NotFoundError: If the thread does not exist
        """
        pass

    @abstractmethod
    async def verify_thread_exists(self, thread_id: ThreadId) -> None:
        """Check that a thread exists.

        Args:
            thread_id: The thread's unique identifier

        Raises:
            NotFoundError: If the thread does not exist
        """
        pass
