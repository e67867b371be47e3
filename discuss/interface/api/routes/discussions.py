"""Entity discussion routes.

Discussions are addressed by the story or profile they belong to:
/stories/{slug}/discussions and /profiles/{slug}/discussions.
"""

from enum import Enum
from uuid import UUID

from dishka.integrations.fastapi import DishkaRoute, FromDishka
from fastapi import APIRouter, Cookie, status
from pydantic import BaseModel

from discuss.application.usecase.comment import (
    CreateCommentRequest,
    CreateCommentResponse,
    CreateCommentUseCase,
    ReplyToCommentRequest,
    ReplyToCommentResponse,
    ReplyToCommentUseCase,
)
from discuss.application.usecase.discussion import (
    ListDiscussionRequest,
    ListDiscussionResponse,
    ListDiscussionUseCase,
)
from discuss.domain.service import JWTService
from discuss.domain.value import EntityKind, SortMode
from discuss.interface.api.auth import require_user_id

router = APIRouter(tags=["discussions"], route_class=DishkaRoute)


class EntityCollection(str, Enum):
    """URL collection of the entities that carry discussions."""

    STORIES = "stories"
    PROFILES = "profiles"

    @property
    def kind(self) -> EntityKind:
        return EntityKind.STORY if self is EntityCollection.STORIES else EntityKind.PROFILE


class CommentContentAPIRequest(BaseModel):
    """API request carrying comment content.

    Length limits are enforced by the comment service.
    """

    content: str


@router.get("/{collection}/{slug}/discussions", response_model=ListDiscussionResponse)
async def list_discussion(
    collection: EntityCollection,
    slug: str,
    use_case: FromDishka[ListDiscussionUseCase],
    jwt_service: FromDishka[JWTService],
    sort: SortMode | None = None,
    limit: int | None = None,
    offset: int = 0,
    auth_token: str | None = Cookie(default=None),
) -> ListDiscussionResponse:
    """List the top-level comments of a story or profile.

    Anonymous viewers are allowed. Moderators also receive hidden comments.

    Args:
        collection: "stories" or "profiles"
        slug: Entity slug
        use_case: List discussion use case from DI
        jwt_service: JWT service for token verification (injected)
        sort: hot (default), top, new or oldest
        limit: Page size
        offset: Number of comments to skip
        auth_token: JWT token from cookie (optional)
    """
    return await use_case.execute(
        ListDiscussionRequest(
            entity_kind=collection.kind,
            slug=slug,
            viewer_user_id=jwt_service.get_user_id_from_token(auth_token),
            sort=sort,
            limit=limit,
            offset=offset,
        )
    )


@router.post(
    "/{collection}/{slug}/discussions/comments",
    response_model=CreateCommentResponse,
    status_code=status.HTTP_201_CREATED,
)
async def create_comment(
    collection: EntityCollection,
    slug: str,
    request: CommentContentAPIRequest,
    use_case: FromDishka[CreateCommentUseCase],
    jwt_service: FromDishka[JWTService],
    auth_token: str | None = Cookie(default=None),
) -> CreateCommentResponse:
    """Post a top-level comment on a story or profile.

    Requires authentication.
    """
    user_id = require_user_id(jwt_service, auth_token)
    return await use_case.execute(
        CreateCommentRequest(
            entity_kind=collection.kind,
            slug=slug,
            author_user_id=user_id,
            content=request.content,
        )
    )


@router.post(
    "/{collection}/{slug}/discussions/comments/{comment_id}/replies",
    response_model=ReplyToCommentResponse,
    status_code=status.HTTP_201_CREATED,
)
async def reply_in_discussion(
    collection: EntityCollection,
    slug: str,
    comment_id: UUID,
    request: CommentContentAPIRequest,
    use_case: FromDishka[ReplyToCommentUseCase],
    jwt_service: FromDishka[JWTService],
    auth_token: str | None = Cookie(default=None),
) -> ReplyToCommentResponse:
    """Reply to a comment of this story's or profile's discussion.

    Returns 404 if the comment belongs to another discussion.
    Requires authentication.
    """
    user_id = require_user_id(jwt_service, auth_token)
    return await use_case.execute(
        ReplyToCommentRequest(
            parent_id=str(comment_id),
            author_user_id=user_id,
            content=request.content,
            entity_kind=collection.kind,
            slug=slug,
        )
    )
