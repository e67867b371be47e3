"""Domain layer DI providers."""

from dishka import Scope, provide

from discuss.config import AuthSettings, DiscussionSettings
from discuss.domain.repository import (
    CommentRepository,
    ThreadRepository,
    VoteRepository,
)
from discuss.domain.service import (
    CommentService,
    EntityResolver,
    JWTService,
    ModerationService,
    PermissionOracle,
    ThreadService,
    VoteService,
)
from discuss.util.di.base import ProviderBase


class ProdDomainProvider(ProviderBase):
    """Production domain services provider - concrete, no mocks needed.

    Domain services are REQUEST-scoped to align with repository/session lifecycle.
    Each HTTP request gets fresh service instances with their own transaction.
    """

    scope = Scope.REQUEST

    @provide
    def get_jwt_service(self, auth_settings: AuthSettings) -> JWTService:
        """Provide JWT token domain service."""
        return JWTService(auth_settings=auth_settings)

    @provide
    def get_thread_service(
        self, thread_repository: ThreadRepository, entity_resolver: EntityResolver
    ) -> ThreadService:
        """Provide thread domain service."""
        return ThreadService(
            thread_repository=thread_repository, entity_resolver=entity_resolver
        )

    @provide
    def get_moderation_service(
        self,
        permission_oracle: PermissionOracle,
        thread_service: ThreadService,
        comment_repository: CommentRepository,
        discussion_settings: DiscussionSettings,
    ) -> ModerationService:
        """Provide moderation domain service."""
        return ModerationService(
            permission_oracle=permission_oracle,
            thread_service=thread_service,
            comment_repository=comment_repository,
            discussion_settings=discussion_settings,
        )

    @provide
    def get_comment_service(
        self,
        comment_repository: CommentRepository,
        vote_repository: VoteRepository,
        thread_service: ThreadService,
        moderation_service: ModerationService,
        discussion_settings: DiscussionSettings,
    ) -> CommentService:
        """Provide comment domain service."""
        return CommentService(
            comment_repository=comment_repository,
            vote_repository=vote_repository,
            thread_service=thread_service,
            moderation_service=moderation_service,
            discussion_settings=discussion_settings,
        )

    @provide
    def get_vote_service(self, vote_repository: VoteRepository) -> VoteService:
        """Provide vote domain service."""
        return VoteService(vote_repository=vote_repository)
