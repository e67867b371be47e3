"""Lock thread use case."""

from uuid import UUID

from pydantic import BaseModel

from discuss.application.usecase.common import ThreadItem
from discuss.domain.service import ModerationService
from discuss.domain.value import ThreadId, UserId


class LockThreadRequest(BaseModel):
    """Lock thread request."""

    thread_id: str  # UUID string
    user_id: str  # Moderator's user ID
    profile_slug: str  # Profile the moderator acts for
    is_locked: bool


class LockThreadResponse(BaseModel):
    """Lock thread response."""

    thread: ThreadItem


class LockThreadUseCase:
    """Use case for locking or unlocking a thread."""

    def __init__(self, moderation_service: ModerationService) -> None:
        self.moderation_service = moderation_service

    async def execute(self, request: LockThreadRequest) -> LockThreadResponse:
        """Execute lock flow.

        Raises:
            InsufficientPermissionError: If the user cannot moderate the profile
            ThreadNotFoundError: If the thread does not exist
        """
        thread = await self.moderation_service.lock_thread(
            thread_id=ThreadId(UUID(request.thread_id)),
            acting_user_id=UserId(UUID(request.user_id)),
            profile_slug=request.profile_slug,
            is_locked=request.is_locked,
        )
        return LockThreadResponse(thread=ThreadItem.from_thread(thread))
