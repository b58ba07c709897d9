"""In-memory thread repository."""

from typing import Any

import logfire

from forum.domain.error import NotFoundError
from forum.domain.model.thread import NewThread, Thread
from forum.domain.repository.thread import ThreadRepository
from forum.domain.service.generator import Clock, IdGenerator
from forum.domain.value import IdPrefix, ThreadId


class InMemoryThreadRepository(ThreadRepository):
    """In-memory implementation of ThreadRepository."""

    def __init__(self, id_generator: IdGenerator, clock: Clock) -> None:
        self.id_generator = id_generator
        self.clock = clock
        self._threads: dict[ThreadId, Thread] = {}

    async def add_thread(self, new_thread: NewThread) -> dict[str, Any]:
        """Store a thread with a generated ID and creation date."""
        with logfire.span("thread_repository.add_thread", owner=new_thread.owner):
            thread = Thread(
                id=self.id_generator.generate(IdPrefix.THREAD),
                title=new_thread.title,
                body=new_thread.body,
                owner=new_thread.owner,
                date=self.clock.now(),
            )
            self._threads[thread.id] = thread
            logfire.info("Thread added", thread_id=thread.id, owner=thread.owner)
            return {"id": thread.id, "title": thread.title, "owner": thread.owner}

    async def get_thread_by_id(self, thread_id: ThreadId) -> Thread:
        """Get a thread by ID."""
        thread = self._threads.get(thread_id)
        if thread is None:
            logfire.warn("Thread not found", thread_id=thread_id)
            raise NotFoundError("thread", thread_id)
        return thread

    async def verify_thread_exists(self, thread_id: ThreadId) -> None:
        """Check that a thread exists."""
        await self.get_thread_by_id(thread_id)
