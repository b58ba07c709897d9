"""Base use case."""

from abc import ABC, abstractmethod
from collections.abc import Mapping
from typing import Any


class BaseUseCase(ABC):
    """Base use case for orchestrating entities, policies and repositories."""

    @abstractmethod
    async def execute(self, request: Any) -> Any:
        pass


def merge_payload(payload: Any, **fields: Any) -> Any:
    """Merge server-side fields (owner, parent IDs) into a raw payload.

    An absent body is treated as an empty object. Any other non-object body is
    returned unchanged so the entity reports it as a type violation.
    """
    if payload is None:
        return dict(fields)
    if isinstance(payload, Mapping):
        return {**payload, **fields}
    return payload
