"""Client-side view of one photo's comment threads."""

from typing import Sequence

import logfire

from gallery.adapter.gallery_api import GalleryApiClient
from gallery.client.optimistic import OptimisticOutcome, OptimisticUpdateCoordinator
from gallery.client.session import CurrentUser
from gallery.client.state import LocalState
from gallery.domain.model import Comment
from gallery.domain.service.comment_tree import CommentTreeNode, build_comment_forest
from gallery.domain.value import CommentId, PhotoId

Comments = tuple[Comment, ...]


def toggle_comment_reaction(
    comments: Sequence[Comment], comment_id: CommentId, emoji: str, user_id: str
) -> Comments:
    """Return ``comments`` with one reaction flipped on the matching comment.

    Unknown comment ids leave the sequence unchanged.
    """
    return tuple(
        comment.with_reaction_toggled(emoji, user_id) if comment.id == comment_id else comment
        for comment in comments
    )


class CommentThreadView:
    """Comments of the photo currently open in the lightbox.

    Reaction toggles are applied optimistically; posting and deleting wait
    for the server and then reload the list.
    """

    def __init__(self, api: GalleryApiClient, current_user: CurrentUser) -> None:
        self.api = api
        self.current_user = current_user
        self.state: LocalState[Comments] = LocalState(())
        self.photo_id: PhotoId | None = None
        self.error: str | None = None
        self._coordinator = OptimisticUpdateCoordinator(
            self.state, on_error=self._record_error
        )

    def _record_error(self, error: Exception) -> None:
        self.error = str(error)

    @property
    def comments(self) -> Comments:
        return self.state.value

    @property
    def forest(self) -> list[CommentTreeNode]:
        return build_comment_forest(self.state.value)

    async def open(self, photo_id: PhotoId) -> Comments:
        """Switch to a photo and load its comments."""
        self.photo_id = photo_id
        self.state.set(())
        return await self.refresh()

    async def refresh(self) -> Comments:
        """Reload the open photo's comments from the server."""
        if self.photo_id is None:
            return self.state.value
        comments = tuple(await self.api.list_comments(self.photo_id))
        self.state.set(comments)
        self.error = None
        return comments

    def can_delete(self, comment: Comment) -> bool:
        return self.current_user.can_delete(comment)

    async def post_comment(
        self, text: str, parent_id: CommentId | None = None
    ) -> Comment | None:
        """Post as the current user, then reload.

        Blank text is ignored and nothing is sent.
        """
        if self.photo_id is None or not text.strip():
            return None
        comment = await self.api.post_comment(
            self.photo_id, self.current_user.name, text, parent_id
        )
        await self.refresh()
        return comment

    async def delete_comment(self, comment_id: CommentId) -> None:
        """Delete a comment with its replies, then reload."""
        await self.api.delete_comment(comment_id)
        logfire.info("Comment deleted", comment_id=str(comment_id))
        await self.refresh()

    async def toggle_reaction(
        self, comment_id: CommentId, emoji: str
    ) -> OptimisticOutcome[Comments]:
        """Flip the current user's reaction locally, then confirm it.

        Raises:
            MutationRevertedError: If the server call failed; the comments
                are back to what they were before the toggle
        """
        user_id = self.current_user.id
        return await self._coordinator.run(
            mutate=lambda comments: toggle_comment_reaction(
                comments, comment_id, emoji, user_id
            ),
            request=lambda: self.api.toggle_reaction(comment_id, emoji, user_id),
            name="toggle_reaction",
        )
