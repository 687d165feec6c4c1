"""Admin moderation routes."""

from dishka.integrations.fastapi import DishkaRoute, FromDishka
from fastapi import APIRouter, Cookie, Header

from banter.application.usecase.base import CamelModel
from banter.application.usecase.comment import (
    CommentStatusResponse,
    ModerateCommentRequest,
    ModerateCommentUseCase,
)
from banter.domain.service import JWTService
from banter.domain.value import CommentStatus
from banter.interface.api.auth import require_user_id

router = APIRouter(prefix="/admin", tags=["admin"], route_class=DishkaRoute)


class ModerateCommentAPIRequest(CamelModel):
    """API request for changing a comment's status."""

    status: CommentStatus


@router.patch("/comments/{comment_id}/status", response_model=CommentStatusResponse)
async def moderate_comment(
    comment_id: str,
    request: ModerateCommentAPIRequest,
    moderate_comment_use_case: FromDishka[ModerateCommentUseCase],
    jwt_service: FromDishka[JWTService],
    auth_token: str | None = Cookie(default=None),
    authorization: str | None = Header(default=None),
) -> CommentStatusResponse:
    """Set a comment's status. Admins only."""
    user_id = require_user_id(jwt_service, auth_token, authorization)
    return await moderate_comment_use_case.execute(
        ModerateCommentRequest(
            comment_id=comment_id, user_id=user_id, status=request.status
        )
    )
