"""Domain services."""

from .base import Service, storage_errors
from .comment_service import CommentService
from .jwt_service import JWTService
from .moderation_service import ModerationService
from .ports import EntityResolver, PermissionOracle
from .thread_service import ThreadService
from .vote_service import VoteService

__all__ = [
    "CommentService",
    "EntityResolver",
    "JWTService",
    "ModerationService",
    "PermissionOracle",
    "Service",
    "ThreadService",
    "VoteService",
    "storage_errors",
]
