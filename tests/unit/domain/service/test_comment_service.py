"""Unit tests for CommentService."""

import asyncio

import pytest

from dojo.domain.error import InvalidReferenceError, NotFoundError, ValidationError
from dojo.domain.repository import CommentRepository, EventRepository, UserRepository
from dojo.domain.service import CommentService
from dojo.domain.value import CommentId, EventId, UserId
from tests.conftest import seed_event, seed_user
from tests.harness import create_env_fixture

# Unit test fixture - everything mocked, no database needed
unit_env = create_env_fixture()


async def _setup(env, event_ids=(1,), user_ids=(10, 11)):
    """Seed events and users, return the comment service."""
    event_repo = await env.get(EventRepository)
    user_repo = await env.get(UserRepository)
    for event_id in event_ids:
        await seed_event(event_repo, event_id, name=f"Event {event_id}")
    for user_id in user_ids:
        await seed_user(user_repo, user_id, name=f"Member {user_id}")
    return await env.get(CommentService)


class TestAddComment:
    """Tests for add_comment method."""

    @pytest.mark.asyncio
    async def test_root_comment_has_no_parent(self, unit_env):
        """A comment without parent_id is stored as a root comment."""
        service = await _setup(unit_env)

        comment = await service.add_comment(
            event_id=EventId(1), user_id=UserId(10), body="See you at the seminar"
        )

        assert comment.parent_id is None
        assert comment.is_root
        assert comment.event_id == 1
        assert comment.author_id == 10
        assert comment.is_active

    @pytest.mark.asyncio
    async def test_body_is_trimmed(self, unit_env):
        """Surrounding whitespace is removed before storing."""
        service = await _setup(unit_env)

        comment = await service.add_comment(
            event_id=EventId(1), user_id=UserId(10), body="  Oss!  \n"
        )

        assert comment.body == "Oss!"

    @pytest.mark.asyncio
    async def test_reply_to_root_keeps_parent(self, unit_env):
        """A reply to a root comment points at that root."""
        service = await _setup(unit_env)
        root = await service.add_comment(EventId(1), UserId(10), "Who is driving?")

        reply = await service.add_comment(
            EventId(1), UserId(11), "I can take two people", parent_id=root.id
        )

        assert reply.parent_id == root.id

    @pytest.mark.asyncio
    async def test_reply_to_reply_is_flattened_to_root(self, unit_env):
        """Replying to a reply attaches the new comment to the root."""
        service = await _setup(unit_env)
        a = await service.add_comment(EventId(1), UserId(10), "A")
        b = await service.add_comment(EventId(1), UserId(11), "B", parent_id=a.id)

        c = await service.add_comment(EventId(1), UserId(10), "C", parent_id=b.id)

        assert b.parent_id == a.id
        assert c.parent_id == a.id

    @pytest.mark.asyncio
    async def test_blank_body_rejected(self, unit_env):
        """Whitespace-only comments are a validation error."""
        service = await _setup(unit_env)
        comment_repo = await unit_env.get(CommentRepository)

        with pytest.raises(ValidationError):
            await service.add_comment(EventId(1), UserId(10), "   ")

        assert await comment_repo.list_for_event(EventId(1)) == []

    @pytest.mark.asyncio
    async def test_missing_event_rejected(self, unit_env):
        """Commenting on an unknown event raises NotFoundError."""
        service = await _setup(unit_env)

        with pytest.raises(NotFoundError) as exc_info:
            await service.add_comment(EventId(999), UserId(10), "Hello")

        assert exc_info.value.resource == "event"
        assert str(exc_info.value) == "Event not found"

    @pytest.mark.asyncio
    async def test_missing_parent_rejected(self, unit_env):
        """Replying to an unknown comment raises NotFoundError."""
        service = await _setup(unit_env)

        with pytest.raises(NotFoundError) as exc_info:
            await service.add_comment(
                EventId(1), UserId(10), "Hello", parent_id=CommentId(404)
            )

        assert str(exc_info.value) == "Parent comment not found"

    @pytest.mark.asyncio
    async def test_parent_from_other_event_rejected(self, unit_env):
        """A parent on a different event is an invalid reference."""
        service = await _setup(unit_env, event_ids=(1, 2))
        other = await service.add_comment(EventId(2), UserId(10), "Other event")

        with pytest.raises(InvalidReferenceError):
            await service.add_comment(
                EventId(1), UserId(11), "Wrong thread", parent_id=other.id
            )

    @pytest.mark.asyncio
    async def test_cross_event_check_uses_replied_comment(self, unit_env):
        """A reply on another event is rejected before flattening."""
        service = await _setup(unit_env, event_ids=(1, 2))
        root = await service.add_comment(EventId(2), UserId(10), "Root")
        reply = await service.add_comment(
            EventId(2), UserId(11), "Reply", parent_id=root.id
        )

        with pytest.raises(InvalidReferenceError):
            await service.add_comment(
                EventId(1), UserId(10), "Wrong thread", parent_id=reply.id
            )


class TestToggleLike:
    """Tests for toggle_like method."""

    @pytest.mark.asyncio
    async def test_first_toggle_likes(self, unit_env):
        """Toggling an unliked comment likes it."""
        service = await _setup(unit_env)
        comment = await service.add_comment(EventId(1), UserId(10), "Nice kata")

        result = await service.toggle_like(comment.id, UserId(11))

        assert result.liked is True
        assert result.total_likes == 1

    @pytest.mark.asyncio
    async def test_toggle_pair_restores_state(self, unit_env):
        """Two toggles by the same user leave the comment unliked."""
        service = await _setup(unit_env)
        comment_repo = await unit_env.get(CommentRepository)
        comment = await service.add_comment(EventId(1), UserId(10), "Nice kata")

        await service.toggle_like(comment.id, UserId(11))
        result = await service.toggle_like(comment.id, UserId(11))

        assert result.liked is False
        assert result.total_likes == 0
        assert not await comment_repo.like_exists(comment.id, UserId(11))

    @pytest.mark.asyncio
    async def test_likes_from_different_users_add_up(self, unit_env):
        """Each user contributes at most one like."""
        service = await _setup(unit_env, user_ids=(10, 11, 12))
        comment = await service.add_comment(EventId(1), UserId(10), "Nice kata")

        await service.toggle_like(comment.id, UserId(11))
        result = await service.toggle_like(comment.id, UserId(12))

        assert result.liked is True
        assert result.total_likes == 2

    @pytest.mark.asyncio
    async def test_missing_comment_rejected(self, unit_env):
        """Liking an unknown comment raises NotFoundError."""
        service = await _setup(unit_env)

        with pytest.raises(NotFoundError):
            await service.toggle_like(CommentId(404), UserId(10))

    @pytest.mark.asyncio
    async def test_unknown_user_rejected(self, unit_env):
        """Liking as a user that does not exist names the user, not the comment."""
        service = await _setup(unit_env)
        comment_repo = await unit_env.get(CommentRepository)
        comment = await service.add_comment(EventId(1), UserId(10), "Nice kata")

        with pytest.raises(NotFoundError) as exc_info:
            await service.toggle_like(comment.id, UserId(999))

        assert exc_info.value.resource == "user"
        assert exc_info.value.identifier == 999
        assert not await comment_repo.like_exists(comment.id, UserId(999))
        assert (await comment_repo.find_by_id(comment.id)).total_likes == 0

    @pytest.mark.asyncio
    async def test_concurrent_toggles_keep_single_like(self, unit_env):
        """Concurrent toggles from one user never create duplicate likes."""
        service = await _setup(unit_env)
        comment_repo = await unit_env.get(CommentRepository)
        comment = await service.add_comment(EventId(1), UserId(10), "Nice kata")

        await asyncio.gather(
            *(service.toggle_like(comment.id, UserId(11)) for _ in range(5))
        )

        stored = await comment_repo.find_by_id(comment.id)
        assert stored.total_likes <= 1
        # An odd number of toggles ends liked
        assert await comment_repo.like_exists(comment.id, UserId(11))
        assert stored.total_likes == 1


class TestListComments:
    """Tests for list_comments method."""

    @pytest.mark.asyncio
    async def test_empty_event(self, unit_env):
        """An event without comments lists nothing."""
        service = await _setup(unit_env)

        assert await service.list_comments(EventId(1)) == []

    @pytest.mark.asyncio
    async def test_roots_newest_first_with_replies(self, unit_env):
        """Roots come newest first, replies oldest first under their root."""
        service = await _setup(unit_env)
        first = await service.add_comment(EventId(1), UserId(10), "First")
        second = await service.add_comment(EventId(1), UserId(11), "Second")
        r1 = await service.add_comment(EventId(1), UserId(11), "R1", parent_id=first.id)
        r2 = await service.add_comment(EventId(1), UserId(10), "R2", parent_id=r1.id)

        views = await service.list_comments(EventId(1))

        assert [v.id for v in views] == [second.id, first.id]
        first_view = views[1]
        assert [r.id for r in first_view.replies] == [r1.id, r2.id]
        assert first_view.replies_count == 2
        assert all(r.parent_id == first.id for r in first_view.replies)
        assert all(r.replies == [] for r in first_view.replies)
        assert all(r.replies_count == 0 for r in first_view.replies)
        assert views[0].replies == []
        assert views[0].replies_count == 0

    @pytest.mark.asyncio
    async def test_author_summary_included(self, unit_env):
        """Every node carries its author's id and name."""
        service = await _setup(unit_env)
        root = await service.add_comment(EventId(1), UserId(10), "Root")
        await service.add_comment(EventId(1), UserId(11), "Reply", parent_id=root.id)

        views = await service.list_comments(EventId(1))

        assert views[0].author.id == 10
        assert views[0].author.name.root == "Member 10"
        assert views[0].replies[0].author.id == 11

    @pytest.mark.asyncio
    async def test_viewer_flag(self, unit_env):
        """is_liked reflects the viewer, and is false without one."""
        service = await _setup(unit_env)
        root = await service.add_comment(EventId(1), UserId(10), "Root")
        reply = await service.add_comment(
            EventId(1), UserId(10), "Reply", parent_id=root.id
        )
        await service.toggle_like(reply.id, UserId(11))

        as_liker = await service.list_comments(EventId(1), viewer_id=UserId(11))
        as_author = await service.list_comments(EventId(1), viewer_id=UserId(10))
        anonymous = await service.list_comments(EventId(1))

        assert as_liker[0].is_liked is False
        assert as_liker[0].replies[0].is_liked is True
        assert as_liker[0].replies[0].total_likes == 1
        assert as_author[0].replies[0].is_liked is False
        assert anonymous[0].replies[0].is_liked is False

    @pytest.mark.asyncio
    async def test_inactive_comments_hidden(self, unit_env):
        """Inactive roots and replies are left out of the listing."""
        service = await _setup(unit_env)
        comment_repo = await unit_env.get(CommentRepository)
        hidden_root = await service.add_comment(EventId(1), UserId(10), "Hidden")
        root = await service.add_comment(EventId(1), UserId(10), "Visible")
        hidden_reply = await service.add_comment(
            EventId(1), UserId(11), "Hidden reply", parent_id=root.id
        )
        await service.add_comment(EventId(1), UserId(11), "Reply", parent_id=root.id)
        await comment_repo.deactivate(hidden_root.id)
        await comment_repo.deactivate(hidden_reply.id)

        views = await service.list_comments(EventId(1))

        assert [v.id for v in views] == [root.id]
        assert [r.body for r in views[0].replies] == ["Reply"]
        assert views[0].replies_count == 1

    @pytest.mark.asyncio
    async def test_other_events_not_listed(self, unit_env):
        """Only the requested event's comments are returned."""
        service = await _setup(unit_env, event_ids=(1, 2))
        await service.add_comment(EventId(2), UserId(10), "Elsewhere")

        assert await service.list_comments(EventId(1)) == []
