"""Comment routes."""

from typing import Optional

from dishka.integrations.fastapi import DishkaRoute, FromDishka
from fastapi import APIRouter, Cookie, Header, Query, status
from pydantic import Field

from banter.application.usecase.base import CamelModel
from banter.application.usecase.comment import (
    AttachmentInput,
    CommentStatusResponse,
    CreateCommentRequest,
    CreateCommentResponse,
    CreateCommentUseCase,
    DeleteCommentRequest,
    DeleteCommentUseCase,
    GetCommentsRequest,
    GetCommentsResponse,
    GetCommentsUseCase,
    ToggleLikeRequest,
    ToggleLikeResponse,
    ToggleLikeUseCase,
    UpdateCommentRequest,
    UpdateCommentResponse,
    UpdateCommentUseCase,
)
from banter.domain.service import JWTService
from banter.interface.api.auth import require_user_id, session_token

router = APIRouter(prefix="/comments", tags=["comments"], route_class=DishkaRoute)


class CommentBody(CamelModel):
    """Comment content submitted by a client."""

    content: Optional[str] = None
    attachments: list[AttachmentInput] = Field(default_factory=list)
    parent_comment_id: Optional[str] = None  # Parent comment ID for replies


class PostCommentAPIRequest(CommentBody):
    """API request for creating a comment with the blog in the body."""

    blog_id: str


@router.post(
    "",
    response_model=CreateCommentResponse,
    status_code=status.HTTP_201_CREATED,
)
async def create_comment(
    request: PostCommentAPIRequest,
    create_comment_use_case: FromDishka[CreateCommentUseCase],
    jwt_service: FromDishka[JWTService],
    auth_token: str | None = Cookie(default=None),
    authorization: str | None = Header(default=None),
) -> CreateCommentResponse:
    """Create a comment on a blog or reply to another comment.

    Requires authentication.
    """
    user_id = require_user_id(jwt_service, auth_token, authorization)
    return await create_comment_use_case.execute(
        CreateCommentRequest(
            blog_id=request.blog_id,
            author_id=user_id,
            content=request.content or "",
            attachments=request.attachments,
            parent_id=request.parent_comment_id,
        )
    )


@router.get("", response_model=GetCommentsResponse)
async def list_comments(
    get_comments_use_case: FromDishka[GetCommentsUseCase],
    blog_id: str = Query(alias="blogId"),
    auth_token: str | None = Cookie(default=None),
    authorization: str | None = Header(default=None),
) -> GetCommentsResponse:
    """Get the comment thread of a blog.

    If authenticated, includes like state for each comment.
    """
    return await get_comments_use_case.execute(
        GetCommentsRequest(
            blog_id=blog_id, auth_token=session_token(auth_token, authorization)
        )
    )


@router.post("/{comment_id}/like", response_model=ToggleLikeResponse)
async def toggle_like(
    comment_id: str,
    toggle_like_use_case: FromDishka[ToggleLikeUseCase],
    jwt_service: FromDishka[JWTService],
    auth_token: str | None = Cookie(default=None),
    authorization: str | None = Header(default=None),
) -> ToggleLikeResponse:
    """Like a comment, or remove the like if already present."""
    user_id = require_user_id(jwt_service, auth_token, authorization)
    return await toggle_like_use_case.execute(
        ToggleLikeRequest(comment_id=comment_id, user_id=user_id)
    )


class UpdateCommentAPIRequest(CamelModel):
    """API request for updating a comment."""

    content: str


@router.patch("/{comment_id}", response_model=UpdateCommentResponse)
async def update_comment(
    comment_id: str,
    request: UpdateCommentAPIRequest,
    update_comment_use_case: FromDishka[UpdateCommentUseCase],
    jwt_service: FromDishka[JWTService],
    auth_token: str | None = Cookie(default=None),
    authorization: str | None = Header(default=None),
) -> UpdateCommentResponse:
    """Edit a comment's text. Only the author can edit."""
    user_id = require_user_id(jwt_service, auth_token, authorization)
    return await update_comment_use_case.execute(
        UpdateCommentRequest(
            comment_id=comment_id, user_id=user_id, content=request.content
        )
    )


@router.delete("/{comment_id}", response_model=CommentStatusResponse)
async def delete_comment(
    comment_id: str,
    delete_comment_use_case: FromDishka[DeleteCommentUseCase],
    jwt_service: FromDishka[JWTService],
    auth_token: str | None = Cookie(default=None),
    authorization: str | None = Header(default=None),
) -> CommentStatusResponse:
    """Soft-delete a comment as its author or an admin."""
    user_id = require_user_id(jwt_service, auth_token, authorization)
    return await delete_comment_use_case.execute(
        DeleteCommentRequest(comment_id=comment_id, user_id=user_id)
    )
