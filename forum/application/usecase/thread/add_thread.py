"""Add thread use case."""

from typing import Any

from pydantic import BaseModel

from forum.application.usecase.base import BaseUseCase, merge_payload
from forum.domain.model.thread import AddedThread, NewThread
from forum.domain.repository import ThreadRepository


class AddThreadRequest(BaseModel):
    """Add thread request."""

    payload: Any = None  # Raw request body, not necessarily an object
    owner: str  # User ID from authenticated user


class AddThreadUseCase(BaseUseCase):
    """Use case for starting a new thread."""

    def __init__(self, thread_repository: ThreadRepository) -> None:
        """Initialize add thread use case.

        Args:
            thread_repository: Thread repository
        """
        self.thread_repository = thread_repository

    async def execute(self, request: AddThreadRequest) -> AddedThread:
        """Execute add thread flow.

        Args:
            request: Add thread request

        Returns:
            The added thread

        Raises:
            ValidationError: If the payload is missing fields or mistyped
        """
        new_thread = NewThread.model_validate(
            merge_payload(request.payload, owner=request.owner)
        )
        record = await self.thread_repository.add_thread(new_thread)
        return AddedThread.from_record(record)
