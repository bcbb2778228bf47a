"""Domain layer DI providers."""

from dishka import Scope, provide

from gallery.config import FeedSettings
from gallery.domain.repository import (
    CommentRepository,
    PhotoRepository,
    ReactionRepository,
    TransactionManager,
)
from gallery.domain.service import (
    CascadeDeleteService,
    CommentService,
    FeedService,
    ReactionService,
)
from gallery.util.di.base import ProviderBase


class ProdDomainProvider(ProviderBase):
    """Production domain services provider - concrete, no mocks needed.

    Domain services are REQUEST-scoped to align with repository/session lifecycle.
    """

    scope = Scope.REQUEST

    @provide
    def get_comment_service(
        self,
        comment_repository: CommentRepository,
        photo_repository: PhotoRepository,
    ) -> CommentService:
        """Provide comment domain service."""
        return CommentService(
            comment_repository=comment_repository,
            photo_repository=photo_repository,
        )

    @provide
    def get_reaction_service(
        self,
        reaction_repository: ReactionRepository,
        comment_repository: CommentRepository,
    ) -> ReactionService:
        """Provide reaction domain service."""
        return ReactionService(
            reaction_repository=reaction_repository,
            comment_repository=comment_repository,
        )

    @provide
    def get_cascade_delete_service(
        self,
        comment_repository: CommentRepository,
        reaction_repository: ReactionRepository,
        transaction_manager: TransactionManager,
    ) -> CascadeDeleteService:
        """Provide cascade delete domain service."""
        return CascadeDeleteService(
            comment_repository=comment_repository,
            reaction_repository=reaction_repository,
            transaction_manager=transaction_manager,
        )

    @provide
    def get_feed_service(
        self, comment_repository: CommentRepository, feed_settings: FeedSettings
    ) -> FeedService:
        """Provide latest-comments feed domain service."""
        return FeedService(
            comment_repository=comment_repository,
            default_limit=feed_settings.default_limit,
            max_limit=feed_settings.max_limit,
        )
