"""Application layer DI providers."""

from dishka import Scope, provide

from gallery.application.usecase.comment import (
    CreateCommentUseCase,
    DeleteCommentUseCase,
    GetCommentTreeUseCase,
    GetCommentsUseCase,
)
from gallery.application.usecase.feed import GetLatestCommentsUseCase
from gallery.application.usecase.reaction import ToggleReactionUseCase
from gallery.domain.service import (
    CascadeDeleteService,
    CommentService,
    FeedService,
    ReactionService,
)
from gallery.util.di.base import ProviderBase


class ProdApplicationProvider(ProviderBase):
    """Production application use cases provider - concrete, no mocks needed."""

    scope = Scope.REQUEST

    @provide
    def get_get_comments_use_case(
        self, comment_service: CommentService
    ) -> GetCommentsUseCase:
        return GetCommentsUseCase(comment_service=comment_service)

    @provide
    def get_get_comment_tree_use_case(
        self, comment_service: CommentService
    ) -> GetCommentTreeUseCase:
        return GetCommentTreeUseCase(comment_service=comment_service)

    @provide
    def get_create_comment_use_case(
        self, comment_service: CommentService
    ) -> CreateCommentUseCase:
        return CreateCommentUseCase(comment_service=comment_service)

    @provide
    def get_delete_comment_use_case(
        self, cascade_delete_service: CascadeDeleteService
    ) -> DeleteCommentUseCase:
        return DeleteCommentUseCase(cascade_delete_service=cascade_delete_service)

    @provide
    def get_toggle_reaction_use_case(
        self, reaction_service: ReactionService
    ) -> ToggleReactionUseCase:
        return ToggleReactionUseCase(reaction_service=reaction_service)

    @provide
    def get_get_latest_comments_use_case(
        self, feed_service: FeedService
    ) -> GetLatestCommentsUseCase:
        return GetLatestCommentsUseCase(feed_service=feed_service)
