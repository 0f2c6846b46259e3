"""Unit tests for the comment use cases."""

import pytest

from dojo.application.usecase.comment import (
    AddCommentRequest,
    AddCommentUseCase,
    ListCommentsRequest,
    ListCommentsUseCase,
    ToggleLikeRequest,
    ToggleLikeUseCase,
)
from dojo.domain.error import NotFoundError
from dojo.domain.repository import EventRepository, UserRepository
from tests.conftest import seed_event, seed_user
from tests.harness import create_env_fixture

unit_env = create_env_fixture()


@pytest.fixture
def add_request():
    def _make(comment="Great seminar", parent_id=None, user_id=10, event_id=1):
        return AddCommentRequest(
            event_id=event_id,
            comment=comment,
            user_id=user_id,
            parent_id=parent_id,
        )

    return _make


async def _seed(env):
    await seed_event(await env.get(EventRepository), 1)
    user_repo = await env.get(UserRepository)
    await seed_user(user_repo, 10, name="Member 10")
    await seed_user(user_repo, 11, name="Member 11")


class TestAddCommentUseCase:
    """Tests for AddCommentUseCase."""

    @pytest.mark.asyncio
    async def test_returns_item_with_zero_aggregates(self, unit_env, add_request):
        """A new comment has no likes, no replies and a fresh timestamp."""
        await _seed(unit_env)
        use_case = await unit_env.get(AddCommentUseCase)

        item = await use_case.execute(add_request())

        assert item.id > 0
        assert item.comment == "Great seminar"
        assert item.parent_id is None
        assert item.total_likes == 0
        assert item.is_liked is False
        assert item.replies_count == 0
        assert item.replies == []
        assert item.user.id == 10
        assert item.user.name == "Member 10"
        assert item.created_human == "just now"

    @pytest.mark.asyncio
    async def test_reply_to_reply_reports_root_parent(self, unit_env, add_request):
        """The returned parent_id is the flattened one."""
        await _seed(unit_env)
        use_case = await unit_env.get(AddCommentUseCase)
        root = await use_case.execute(add_request("Root"))
        reply = await use_case.execute(add_request("Reply", parent_id=root.id))

        nested = await use_case.execute(add_request("Nested", parent_id=reply.id))

        assert nested.parent_id == root.id

    @pytest.mark.asyncio
    async def test_unknown_event(self, unit_env, add_request):
        await _seed(unit_env)
        use_case = await unit_env.get(AddCommentUseCase)

        with pytest.raises(NotFoundError):
            await use_case.execute(add_request(event_id=77))


class TestToggleLikeUseCase:
    """Tests for ToggleLikeUseCase."""

    @pytest.mark.asyncio
    async def test_like_then_unlike(self, unit_env, add_request):
        await _seed(unit_env)
        comment = await (await unit_env.get(AddCommentUseCase)).execute(add_request())
        use_case = await unit_env.get(ToggleLikeUseCase)

        liked = await use_case.execute(ToggleLikeRequest(comment_id=comment.id, user_id=11))
        unliked = await use_case.execute(
            ToggleLikeRequest(comment_id=comment.id, user_id=11)
        )

        assert (liked.liked, liked.total_likes) == (True, 1)
        assert (unliked.liked, unliked.total_likes) == (False, 0)


class TestListCommentsUseCase:
    """Tests for ListCommentsUseCase."""

    @pytest.mark.asyncio
    async def test_response_shape(self, unit_env, add_request):
        """The listing nests replies and counts only root comments in total."""
        await _seed(unit_env)
        add = await unit_env.get(AddCommentUseCase)
        root = await add.execute(add_request("Root"))
        await add.execute(add_request("Reply 1", parent_id=root.id, user_id=11))
        await add.execute(add_request("Reply 2", parent_id=root.id))
        await (await unit_env.get(ToggleLikeUseCase)).execute(
            ToggleLikeRequest(comment_id=root.id, user_id=11)
        )
        use_case = await unit_env.get(ListCommentsUseCase)

        response = await use_case.execute(ListCommentsRequest(event_id=1, viewer_id=11))

        assert response.event_id == 1
        assert response.total == 1
        item = response.comments[0]
        assert item.comment == "Root"
        assert item.total_likes == 1
        assert item.is_liked is True
        assert item.replies_count == 2
        assert [r.comment for r in item.replies] == ["Reply 1", "Reply 2"]
        assert item.replies[0].user.name == "Member 11"
        assert item.replies[0].replies == []

    @pytest.mark.asyncio
    async def test_anonymous_viewer(self, unit_env, add_request):
        await _seed(unit_env)
        root = await (await unit_env.get(AddCommentUseCase)).execute(add_request())
        await (await unit_env.get(ToggleLikeUseCase)).execute(
            ToggleLikeRequest(comment_id=root.id, user_id=10)
        )
        use_case = await unit_env.get(ListCommentsUseCase)

        response = await use_case.execute(ListCommentsRequest(event_id=1))

        assert response.comments[0].is_liked is False
        assert response.comments[0].total_likes == 1
