"""Comment routes addressed by comment ID."""

from uuid import UUID

from dishka.integrations.fastapi import DishkaRoute, FromDishka
from fastapi import APIRouter, Cookie, status
from pydantic import BaseModel

from discuss.application.usecase.comment import (
    DeleteCommentRequest,
    DeleteCommentResponse,
    DeleteCommentUseCase,
    EditCommentRequest,
    EditCommentResponse,
    EditCommentUseCase,
    ReplyToCommentRequest,
    ReplyToCommentResponse,
    ReplyToCommentUseCase,
)
from discuss.application.usecase.discussion import (
    ListRepliesRequest,
    ListRepliesResponse,
    ListRepliesUseCase,
)
from discuss.application.usecase.vote import (
    VoteCommentRequest,
    VoteCommentResponse,
    VoteCommentUseCase,
)
from discuss.domain.service import JWTService
from discuss.domain.value import SortMode
from discuss.interface.api.auth import require_user_id
from discuss.interface.api.routes.discussions import CommentContentAPIRequest

router = APIRouter(
    prefix="/discussions/comments", tags=["comments"], route_class=DishkaRoute
)


class VoteAPIRequest(BaseModel):
    """API request for voting on a comment."""

    direction: int  # +1 or -1


@router.get("/{comment_id}/replies", response_model=ListRepliesResponse)
async def list_replies(
    comment_id: UUID,
    use_case: FromDishka[ListRepliesUseCase],
    jwt_service: FromDishka[JWTService],
    sort: SortMode | None = None,
    limit: int | None = None,
    offset: int = 0,
    auth_token: str | None = Cookie(default=None),
) -> ListRepliesResponse:
    """List the direct replies to a comment."""
    return await use_case.execute(
        ListRepliesRequest(
            comment_id=str(comment_id),
            viewer_user_id=jwt_service.get_user_id_from_token(auth_token),
            sort=sort,
            limit=limit,
            offset=offset,
        )
    )


@router.post(
    "/{comment_id}/replies",
    response_model=ReplyToCommentResponse,
    status_code=status.HTTP_201_CREATED,
)
async def reply_to_comment(
    comment_id: UUID,
    request: CommentContentAPIRequest,
    use_case: FromDishka[ReplyToCommentUseCase],
    jwt_service: FromDishka[JWTService],
    auth_token: str | None = Cookie(default=None),
) -> ReplyToCommentResponse:
    """Reply to a comment. Requires authentication."""
    user_id = require_user_id(jwt_service, auth_token)
    return await use_case.execute(
        ReplyToCommentRequest(
            parent_id=str(comment_id),
            author_user_id=user_id,
            content=request.content,
        )
    )


@router.patch("/{comment_id}", response_model=EditCommentResponse)
async def edit_comment(
    comment_id: UUID,
    request: CommentContentAPIRequest,
    use_case: FromDishka[EditCommentUseCase],
    jwt_service: FromDishka[JWTService],
    auth_token: str | None = Cookie(default=None),
) -> EditCommentResponse:
    """Edit a comment's content. Only the author can edit."""
    user_id = require_user_id(jwt_service, auth_token)
    return await use_case.execute(
        EditCommentRequest(
            comment_id=str(comment_id), user_id=user_id, content=request.content
        )
    )


@router.delete("/{comment_id}", response_model=DeleteCommentResponse)
async def delete_comment(
    comment_id: UUID,
    use_case: FromDishka[DeleteCommentUseCase],
    jwt_service: FromDishka[JWTService],
    profile_slug: str | None = None,
    auth_token: str | None = Cookie(default=None),
) -> DeleteCommentResponse:
    """Delete a comment.

    Authors can delete their own comments. Moderators pass the profile
    they act for as profile_slug.
    """
    user_id = require_user_id(jwt_service, auth_token)
    return await use_case.execute(
        DeleteCommentRequest(
            comment_id=str(comment_id), user_id=user_id, profile_slug=profile_slug
        )
    )


@router.post("/{comment_id}/vote", response_model=VoteCommentResponse)
async def vote_comment(
    comment_id: UUID,
    request: VoteAPIRequest,
    use_case: FromDishka[VoteCommentUseCase],
    jwt_service: FromDishka[JWTService],
    auth_token: str | None = Cookie(default=None),
) -> VoteCommentResponse:
    """Vote on a comment.

    Voting the same direction again withdraws the vote.
    Requires authentication.
    """
    user_id = require_user_id(jwt_service, auth_token)
    return await use_case.execute(
        VoteCommentRequest(
            comment_id=str(comment_id), user_id=user_id, direction=request.direction
        )
    )
