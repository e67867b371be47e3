"""Moderation use cases."""

from .lock_thread import LockThreadRequest, LockThreadResponse, LockThreadUseCase
from .moderate_comment import (
    HideCommentRequest,
    HideCommentUseCase,
    ModerateCommentResponse,
    PinCommentRequest,
    PinCommentUseCase,
)

__all__ = [
    "HideCommentRequest",
    "HideCommentUseCase",
    "LockThreadRequest",
    "LockThreadResponse",
    "LockThreadUseCase",
    "ModerateCommentResponse",
    "PinCommentRequest",
    "PinCommentUseCase",
]
