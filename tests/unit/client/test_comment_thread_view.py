"""Unit tests for CommentThreadView against a fake API client."""

import pytest

from gallery.adapter.error import ApiResponseError, NetworkFailureError
from gallery.adapter.gallery_api import GalleryApiClient
from gallery.client import CommentThreadView, CurrentUser, MutationRevertedError
from gallery.domain.value import CommentId, PhotoId, UserId
from tests.conftest import make_comment


class FakeGalleryApiClient(GalleryApiClient):
    """Keeps comments in a list and records calls."""

    def __init__(self, comments=()):
        self.comments = list(comments)
        self.calls = []
        self.fail_with: Exception | None = None

    def _maybe_fail(self):
        if self.fail_with is not None:
            raise self.fail_with

    async def list_comments(self, photo_id):
        self.calls.append(("list", photo_id))
        return [c for c in self.comments if c.photo_id == photo_id]

    async def latest_comments(self, limit):
        return sorted(self.comments, key=lambda c: c.created_at, reverse=True)[:limit]

    async def post_comment(self, photo_id, author, text, parent_id=None):
        self.calls.append(("post", photo_id, author, text, parent_id))
        self._maybe_fail()
        comment = make_comment(
            f"c{len(self.comments) + 1}",
            parent_id=parent_id,
            photo_id=photo_id,
            author=author,
            text=text,
            minute=len(self.comments),
        )
        self.comments.append(comment)
        return comment

    async def toggle_reaction(self, comment_id, emoji, user_id):
        self.calls.append(("toggle", comment_id, emoji, user_id))
        self._maybe_fail()

    async def delete_comment(self, comment_id):
        self.calls.append(("delete", comment_id))
        self._maybe_fail()
        self.comments = [c for c in self.comments if c.id != comment_id]


@pytest.fixture
def alice():
    return CurrentUser(id=UserId("u1"), name="Alice")


class TestCommentThreadView:
    @pytest.mark.asyncio
    async def test_open_loads_photo_comments(self, alice):
        api = FakeGalleryApiClient(
            [make_comment("c1", photo_id="p1"), make_comment("c2", photo_id="p2")]
        )
        view = CommentThreadView(api, alice)

        comments = await view.open(PhotoId("p1"))

        assert [c.id for c in comments] == ["c1"]
        assert view.photo_id == "p1"

    @pytest.mark.asyncio
    async def test_post_reply_reloads_and_nests(self, alice):
        api = FakeGalleryApiClient([make_comment("c1")])
        view = CommentThreadView(api, alice)
        await view.open(PhotoId("p1"))

        reply = await view.post_comment("Agreed", parent_id=CommentId("c1"))

        assert reply.author == "Alice"
        assert len(view.comments) == 2
        assert [r.comment.id for r in view.forest[0].replies] == [reply.id]

    @pytest.mark.asyncio
    async def test_blank_comment_is_not_sent(self, alice):
        api = FakeGalleryApiClient()
        view = CommentThreadView(api, alice)
        await view.open(PhotoId("p1"))

        assert await view.post_comment("   ") is None
        assert not any(call[0] == "post" for call in api.calls)

    @pytest.mark.asyncio
    async def test_toggle_reaction_is_applied_immediately(self, alice):
        api = FakeGalleryApiClient([make_comment("c1")])
        view = CommentThreadView(api, alice)
        await view.open(PhotoId("p1"))

        await view.toggle_reaction(CommentId("c1"), "🔥")

        assert view.comments[0].reactions == {"🔥": frozenset({"u1"})}
        assert api.calls[-1] == ("toggle", "c1", "🔥", "u1")

    @pytest.mark.asyncio
    async def test_failed_toggle_is_reverted(self, alice):
        api = FakeGalleryApiClient([make_comment("c1", reactions={"🔥": {"u1"}})])
        view = CommentThreadView(api, alice)
        await view.open(PhotoId("p1"))
        before = view.comments
        api.fail_with = NetworkFailureError("offline")

        with pytest.raises(MutationRevertedError):
            await view.toggle_reaction(CommentId("c1"), "🔥")

        assert view.comments is before
        assert view.error == "offline"

    @pytest.mark.asyncio
    async def test_delete_reloads(self, alice):
        api = FakeGalleryApiClient([make_comment("c1", author="Alice")])
        view = CommentThreadView(api, alice)
        await view.open(PhotoId("p1"))

        assert view.can_delete(view.comments[0])
        await view.delete_comment(CommentId("c1"))

        assert view.comments == ()

    @pytest.mark.asyncio
    async def test_failed_delete_propagates(self, alice):
        api = FakeGalleryApiClient([make_comment("c1")])
        view = CommentThreadView(api, alice)
        await view.open(PhotoId("p1"))
        api.fail_with = ApiResponseError(500, "Failed to delete comment")

        with pytest.raises(ApiResponseError):
            await view.delete_comment(CommentId("c1"))

        assert [c.id for c in view.comments] == ["c1"]
