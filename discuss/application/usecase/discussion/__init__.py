"""Discussion reading use cases."""

from .list_discussion import (
    ListDiscussionRequest,
    ListDiscussionResponse,
    ListDiscussionUseCase,
)
from .list_replies import ListRepliesRequest, ListRepliesResponse, ListRepliesUseCase

__all__ = [
    "ListDiscussionRequest",
    "ListDiscussionResponse",
    "ListDiscussionUseCase",
    "ListRepliesRequest",
    "ListRepliesResponse",
    "ListRepliesUseCase",
]
