"""Application layer DI providers."""

from dishka import Scope, provide

from discuss.application.usecase.comment import (
    CreateCommentUseCase,
    DeleteCommentUseCase,
    EditCommentUseCase,
    ReplyToCommentUseCase,
)
from discuss.application.usecase.discussion import (
    ListDiscussionUseCase,
    ListRepliesUseCase,
)
from discuss.application.usecase.moderation import (
    HideCommentUseCase,
    LockThreadUseCase,
    PinCommentUseCase,
)
from discuss.application.usecase.vote import VoteCommentUseCase
from discuss.domain.service import (
    CommentService,
    ModerationService,
    ThreadService,
    VoteService,
)
from discuss.util.di.base import ProviderBase


class ProdApplicationProvider(ProviderBase):
    """Production application provider - concrete, no mocks needed.

    Use cases are REQUEST-scoped like the domain services they orchestrate.
    """

    scope = Scope.REQUEST

    @provide
    def get_list_discussion_use_case(
        self,
        thread_service: ThreadService,
        comment_service: CommentService,
        moderation_service: ModerationService,
    ) -> ListDiscussionUseCase:
        """Provide list discussion use case."""
        return ListDiscussionUseCase(
            thread_service=thread_service,
            comment_service=comment_service,
            moderation_service=moderation_service,
        )

    @provide
    def get_list_replies_use_case(
        self,
        thread_service: ThreadService,
        comment_service: CommentService,
        moderation_service: ModerationService,
    ) -> ListRepliesUseCase:
        """Provide list replies use case."""
        return ListRepliesUseCase(
            thread_service=thread_service,
            comment_service=comment_service,
            moderation_service=moderation_service,
        )

    @provide
    def get_create_comment_use_case(
        self, thread_service: ThreadService, comment_service: CommentService
    ) -> CreateCommentUseCase:
        """Provide create comment use case."""
        return CreateCommentUseCase(
            thread_service=thread_service, comment_service=comment_service
        )

    @provide
    def get_reply_to_comment_use_case(
        self, thread_service: ThreadService, comment_service: CommentService
    ) -> ReplyToCommentUseCase:
        """Provide reply to comment use case."""
        return ReplyToCommentUseCase(
            thread_service=thread_service, comment_service=comment_service
        )

    @provide
    def get_edit_comment_use_case(
        self, comment_service: CommentService
    ) -> EditCommentUseCase:
        """Provide edit comment use case."""
        return EditCommentUseCase(comment_service=comment_service)

    @provide
    def get_delete_comment_use_case(
        self, comment_service: CommentService
    ) -> DeleteCommentUseCase:
        """Provide delete comment use case."""
        return DeleteCommentUseCase(comment_service=comment_service)

    @provide
    def get_vote_comment_use_case(
        self, vote_service: VoteService
    ) -> VoteCommentUseCase:
        """Provide vote use case."""
        return VoteCommentUseCase(vote_service=vote_service)

    @provide
    def get_hide_comment_use_case(
        self, moderation_service: ModerationService
    ) -> HideCommentUseCase:
        """Provide hide comment use case."""
        return HideCommentUseCase(moderation_service=moderation_service)

    @provide
    def get_pin_comment_use_case(
        self, moderation_service: ModerationService
    ) -> PinCommentUseCase:
        """Provide pin comment use case."""
        return PinCommentUseCase(moderation_service=moderation_service)

    @provide
    def get_lock_thread_use_case(
        self, moderation_service: ModerationService
    ) -> LockThreadUseCase:
        """Provide lock thread use case."""
        return LockThreadUseCase(moderation_service=moderation_service)
