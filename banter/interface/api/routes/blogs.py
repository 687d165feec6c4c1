"""Blog-scoped comment routes."""

from dishka.integrations.fastapi import DishkaRoute, FromDishka
from fastapi import APIRouter, Cookie, Header, status

from banter.application.usecase.comment import (
    CountCommentsRequest,
    CountCommentsResponse,
    CountCommentsUseCase,
    CreateCommentRequest,
    CreateCommentResponse,
    CreateCommentUseCase,
    GetCommentsRequest,
    GetCommentsResponse,
    GetCommentsUseCase,
)
from banter.domain.service import JWTService
from banter.interface.api.auth import require_user_id, session_token
from banter.interface.api.routes.comments import CommentBody

router = APIRouter(prefix="/blogs", tags=["comments"], route_class=DishkaRoute)


@router.post(
    "/{blog_id}/comments",
    response_model=CreateCommentResponse,
    status_code=status.HTTP_201_CREATED,
)
async def create_blog_comment(
    blog_id: str,
    request: CommentBody,
    create_comment_use_case: FromDishka[CreateCommentUseCase],
    jwt_service: FromDishka[JWTService],
    auth_token: str | None = Cookie(default=None),
    authorization: str | None = Header(default=None),
) -> CreateCommentResponse:
    """Create a comment on the blog in the path. Requires authentication."""
    user_id = require_user_id(jwt_service, auth_token, authorization)
    return await create_comment_use_case.execute(
        CreateCommentRequest(
            blog_id=blog_id,
            author_id=user_id,
            content=request.content or "",
            attachments=request.attachments,
            parent_id=request.parent_comment_id,
        )
    )


@router.get("/{blog_id}/comments", response_model=GetCommentsResponse)
async def list_blog_comments(
    blog_id: str,
    get_comments_use_case: FromDishka[GetCommentsUseCase],
    auth_token: str | None = Cookie(default=None),
    authorization: str | None = Header(default=None),
) -> GetCommentsResponse:
    """Get the comment thread of the blog in the path."""
    return await get_comments_use_case.execute(
        GetCommentsRequest(
            blog_id=blog_id, auth_token=session_token(auth_token, authorization)
        )
    )


@router.get("/{blog_id}/comments/count", response_model=CountCommentsResponse)
async def count_blog_comments(
    blog_id: str,
    count_comments_use_case: FromDishka[CountCommentsUseCase],
) -> CountCommentsResponse:
    """Number of active comments on a blog."""
    return await count_comments_use_case.execute(CountCommentsRequest(blog_id=blog_id))
