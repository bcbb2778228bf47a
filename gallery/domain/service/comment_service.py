"""Comment domain service."""

import logfire
import pydantic

from gallery.domain.error import NotFoundError, ValidationError
from gallery.domain.model.comment import Comment, utcnow
from gallery.domain.repository import CommentRepository, PhotoRepository
from gallery.domain.value import CommentId, PhotoId, new_comment_id
from gallery.domain.value.types import AuthorName

from .base import Service


class CommentService(Service):
    """Domain service for comment operations."""

    def __init__(
        self,
        comment_repository: CommentRepository,
        photo_repository: PhotoRepository,
    ) -> None:
        """Initialize comment service.

        Args:
            comment_repository: Comment repository
            photo_repository: Photo catalog
        """
        self.comment_repository = comment_repository
        self.photo_repository = photo_repository

    async def create_comment(
        self,
        photo_id: PhotoId,
        author: str,
        text: str,
        parent_id: CommentId | None = None,
    ) -> Comment:
        """Post a comment on a photo or reply to another comment.

        Args:
            photo_id: Photo being discussed
            author: Display name of the poster
            text: Comment text
            parent_id: Comment being replied to (None for top-level)

        Returns:
            Created comment with an empty reaction map

        Raises:
            ValidationError: If author or text is blank, or the parent is on
                another photo
            NotFoundError: If the photo or the parent comment does not exist
        """
        with logfire.span(
            "comment_service.create_comment",
            photo_id=str(photo_id),
            author=author,
            parent_id=str(parent_id) if parent_id else None,
        ):
            if not text or not text.strip():
                raise ValidationError("Comment text must not be blank")
            try:
                author = AuthorName(author).root
            except pydantic.ValidationError as e:
                raise ValidationError(str(e)) from e

            if not await self.photo_repository.exists(photo_id):
                logfire.warn("Comment on unknown photo", photo_id=str(photo_id))
                raise NotFoundError("Photo", str(photo_id))

            if parent_id:
                parent = await self.comment_repository.find_by_id(parent_id)
                if not parent:
                    logfire.error(
                        "Parent comment not found",
                        parent_id=str(parent_id),
                        photo_id=str(photo_id),
                    )
                    raise NotFoundError("Comment", str(parent_id))
                if parent.photo_id != photo_id:
                    logfire.error(
                        "Parent comment does not belong to photo",
                        parent_id=str(parent_id),
                        parent_photo_id=str(parent.photo_id),
                        target_photo_id=str(photo_id),
                    )
                    raise ValidationError("Parent comment does not belong to this photo")

            try:
                comment = Comment(
                    id=new_comment_id(),
                    photo_id=photo_id,
                    author=author,
                    text=text,
                    parent_id=parent_id,
                    created_at=utcnow(),
                )
            except pydantic.ValidationError as e:
                raise ValidationError(str(e)) from e

            saved = await self.comment_repository.save(comment)
            logfire.info(
                "Comment created",
                comment_id=str(saved.id),
                photo_id=str(photo_id),
                author=author,
                is_reply=saved.is_reply,
            )
            return saved

    async def get_comments_for_photo(self, photo_id: PhotoId) -> list[Comment]:
        """Get all comments for a photo, oldest first.

        Args:
            photo_id: Photo ID

        Returns:
            Flat list of comments with their reactions
        """
        with logfire.span(
            "comment_service.get_comments_for_photo", photo_id=str(photo_id)
        ):
            comments = await self.comment_repository.find_by_photo(photo_id)
            logfire.info(
                "Comments retrieved for photo",
                photo_id=str(photo_id),
                count=len(comments),
            )
            return comments

    async def get_comment_by_id(self, comment_id: CommentId) -> Comment:
        """Get a comment by ID.

        Raises:
            NotFoundError: If the comment does not exist
        """
        with logfire.span(
            "comment_service.get_comment_by_id", comment_id=str(comment_id)
        ):
            comment = await self.comment_repository.find_by_id(comment_id)
            if not comment:
                logfire.warn("Comment not found", comment_id=str(comment_id))
                raise NotFoundError("Comment", str(comment_id))
            return comment
