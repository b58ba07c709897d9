"""Unit tests for provider selection and container wiring."""

import pytest

from forum.application.usecase.thread import AddThreadRequest, AddThreadUseCase
from forum.domain.error import NotFoundError
from forum.domain.repository import (
    CommentRepository,
    ReplyRepository,
    ThreadRepository,
)
from forum.domain.service import OwnershipPolicy
from forum.util.di import (
    PersistenceProvider,
    ProdConfigProvider,
    ProdPersistenceProvider,
    get_provider,
)
from tests.di import MockPersistenceProvider, build_test_container


class TestGetProvider:
    """Tests for get_provider."""

    def test_concrete_provider_is_returned_as_is(self):
        assert get_provider(ProdConfigProvider) is ProdConfigProvider

    def test_production_implementation_selected(self):
        assert get_provider(PersistenceProvider) is ProdPersistenceProvider

    def test_mock_implementation_selected(self):
        assert get_provider(PersistenceProvider, use_mock=True) is MockPersistenceProvider


class TestBuildTestContainer:
    """Tests for build_test_container."""

    def test_unknown_component_rejected(self):
        with pytest.raises(ValueError, match="Unknown components"):
            build_test_container(unmock={"search"})  # type: ignore[arg-type]

    @pytest.mark.asyncio
    async def test_mock_persistence_is_fresh_per_request(self):
        container = build_test_container()

        async with container() as request_container:
            use_case = await request_container.get(AddThreadUseCase)
            added = await use_case.execute(
                AddThreadRequest(payload={"title": "T", "body": "B"}, owner="user-1")
            )
            repo = await request_container.get(ThreadRepository)
            await repo.verify_thread_exists(added.id)

        async with container() as request_container:
            repo = await request_container.get(ThreadRepository)
            with pytest.raises(NotFoundError):
                await repo.verify_thread_exists(added.id)

        await container.close()

    @pytest.mark.asyncio
    async def test_production_persistence_is_shared_across_requests(self):
        container = build_test_container(unmock={"persistence"})

        async with container() as request_container:
            use_case = await request_container.get(AddThreadUseCase)
            added = await use_case.execute(
                AddThreadRequest(payload={"title": "T", "body": "B"}, owner="user-1")
            )

        async with container() as request_container:
            repo = await request_container.get(ThreadRepository)
            thread = await repo.get_thread_by_id(added.id)
            assert thread.title == "T"

        await container.close()

    @pytest.mark.asyncio
    async def test_repositories_share_the_provided_ownership_policy(self):
        container = build_test_container()

        async with container() as request_container:
            policy = await request_container.get(OwnershipPolicy)
            comment_repo = await request_container.get(CommentRepository)
            reply_repo = await request_container.get(ReplyRepository)

            assert comment_repo.ownership_policy is policy
            assert reply_repo.ownership_policy is policy

        await container.close()
