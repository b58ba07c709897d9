"""Test configuration and fixtures."""

import logfire
import pytest

from forum.domain.service import OwnershipPolicy
from tests.harness import SequentialIdGenerator, SteppingClock

# The app module instruments FastAPI on import, so Logfire must be configured first
logfire.configure(send_to_logfire=False, console=False)


@pytest.fixture
def id_generator() -> SequentialIdGenerator:
    return SequentialIdGenerator()


@pytest.fixture
def clock() -> SteppingClock:
    return SteppingClock()


@pytest.fixture
def ownership_policy() -> OwnershipPolicy:
    return OwnershipPolicy()

