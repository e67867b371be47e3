"""Moderation domain service."""

from typing import Optional

import logfire

from discuss.config import DiscussionSettings
from discuss.domain.error import CommentNotFoundError, InsufficientPermissionError
from discuss.domain.model.comment import Comment
from discuss.domain.model.thread import Thread
from discuss.domain.repository import CommentRepository
from discuss.domain.value import CommentId, ThreadId, UserId

from .base import Service, storage_errors
from .ports import PermissionOracle
from .thread_service import ThreadService


class ModerationService(Service):
    """Domain service for moderation actions.

    Hide, pin and lock take explicit target values, so replaying a request
    leaves the same state. The acting user needs the configured moderator
    tier on the profile named in the request, and the target must belong
    to a thread owned by that profile.
    """

    def __init__(
        self,
        permission_oracle: PermissionOracle,
        thread_service: ThreadService,
        comment_repository: CommentRepository,
        discussion_settings: DiscussionSettings,
    ) -> None:
        """Initialize moderation service.

        Args:
            permission_oracle: Membership lookups on profiles
            thread_service: Thread domain service
            comment_repository: Comment repository
            discussion_settings: Discussion policy (moderator tier)
        """
        self.permission_oracle = permission_oracle
        self.thread_service = thread_service
        self.comment_repository = comment_repository
        self.settings = discussion_settings

    async def can_moderate(self, user_id: Optional[UserId], profile_slug: str) -> bool:
        """Check whether a user may moderate a profile's discussions.

        Anonymous viewers never moderate.
        """
        if user_id is None:
            return False
        with storage_errors("can_moderate"):
            return await self.permission_oracle.has_access(
                user_id, profile_slug, self.settings.moderator_tier
            )

    async def ensure_owned_by(
        self,
        thread: Thread,
        profile_slug: str,
        action: str,
        resource_id: str,
        user_id: UserId,
    ) -> None:
        """Check that a thread belongs to the profile a moderator acts for.

        Raises:
            InsufficientPermissionError: If another profile owns the thread
        """
        owner = await self.thread_service.owner_profile_slug(thread)
        if owner != profile_slug:
            logfire.warn(
                "Moderation outside owning profile",
                action=action,
                thread_id=str(thread.id),
                profile_slug=profile_slug,
                owner_profile_slug=owner,
            )
            raise InsufficientPermissionError(action, resource_id, str(user_id))

    async def _authorize(
        self, user_id: UserId, profile_slug: str, action: str, resource_id: str
    ) -> None:
        if not await self.can_moderate(user_id, profile_slug):
            logfire.warn(
                "Moderation denied",
                action=action,
                resource_id=resource_id,
                user_id=str(user_id),
                profile_slug=profile_slug,
            )
            raise InsufficientPermissionError(action, resource_id, str(user_id))

    async def _moderated_comment(
        self, comment_id: CommentId, user_id: UserId, profile_slug: str, action: str
    ) -> Comment:
        await self._authorize(user_id, profile_slug, action, str(comment_id))

        with storage_errors(action):
            comment = await self.comment_repository.find_by_id(comment_id)
        if comment is None or comment.is_deleted:
            raise CommentNotFoundError(str(comment_id))

        thread = await self.thread_service.get_thread(comment.thread_id)
        await self.ensure_owned_by(
            thread, profile_slug, action, str(comment_id), user_id
        )
        return comment

    async def hide_comment(
        self,
        comment_id: CommentId,
        acting_user_id: UserId,
        profile_slug: str,
        is_hidden: bool,
    ) -> Comment:
        """Hide or unhide a comment.

        Args:
            comment_id: Target comment
            acting_user_id: Moderator's user ID
            profile_slug: Profile the moderator acts for
            is_hidden: Desired hidden state

        Returns:
            The updated comment

        Raises:
            InsufficientPermissionError: If the user cannot moderate the profile
            CommentNotFoundError: If the comment is missing or deleted
        """
        with logfire.span(
            "moderation_service.hide_comment",
            comment_id=str(comment_id),
            user_id=str(acting_user_id),
            is_hidden=is_hidden,
        ):
            await self._moderated_comment(
                comment_id, acting_user_id, profile_slug, "hide"
            )
            with storage_errors("hide_comment"):
                updated = await self.comment_repository.set_hidden(
                    comment_id, is_hidden
                )
            if updated is None:
                raise CommentNotFoundError(str(comment_id))

            logfire.info(
                "Comment visibility changed",
                comment_id=str(comment_id),
                is_hidden=is_hidden,
            )
            return updated

    async def pin_comment(
        self,
        comment_id: CommentId,
        acting_user_id: UserId,
        profile_slug: str,
        is_pinned: bool,
    ) -> Comment:
        """Pin or unpin a comment.

        Several comments may be pinned in the same thread.

        Raises:
            InsufficientPermissionError: If the user cannot moderate the profile
            CommentNotFoundError: If the comment is missing or deleted
        """
        with logfire.span(
            "moderation_service.pin_comment",
            comment_id=str(comment_id),
            user_id=str(acting_user_id),
            is_pinned=is_pinned,
        ):
            await self._moderated_comment(
                comment_id, acting_user_id, profile_slug, "pin"
            )
            with storage_errors("pin_comment"):
                updated = await self.comment_repository.set_pinned(
                    comment_id, is_pinned
                )
            if updated is None:
                raise CommentNotFoundError(str(comment_id))

            logfire.info(
                "Comment pin changed", comment_id=str(comment_id), is_pinned=is_pinned
            )
            return updated

    async def lock_thread(
        self,
        thread_id: ThreadId,
        acting_user_id: UserId,
        profile_slug: str,
        is_locked: bool,
    ) -> Thread:
        """Lock or unlock a thread.

        Existing comments stay readable, editable and votable while locked.

        Raises:
            InsufficientPermissionError: If the user cannot moderate the profile
            ThreadNotFoundError: If the thread does not exist
        """
        with logfire.span(
            "moderation_service.lock_thread",
            thread_id=str(thread_id),
            user_id=str(acting_user_id),
            is_locked=is_locked,
        ):
            await self._authorize(acting_user_id, profile_slug, "lock", str(thread_id))

            thread = await self.thread_service.get_thread(thread_id)
            await self.ensure_owned_by(
                thread, profile_slug, "lock", str(thread_id), acting_user_id
            )

            updated = await self.thread_service.set_locked(thread_id, is_locked)
            logfire.info(
                "Thread lock changed", thread_id=str(thread_id), is_locked=is_locked
            )
            return updated
