"""Moderate comment use case."""

from pydantic import BaseModel

from banter.domain.service import CommentService, UserService
from banter.domain.value import CommentId, CommentStatus, UserId, parse_uuid

from .views import CommentStatusResponse


class ModerateCommentRequest(BaseModel):
    """Moderate comment request."""

    comment_id: str
    user_id: str  # Acting admin
    status: CommentStatus


class ModerateCommentUseCase:
    """Use case for an admin setting a comment's status."""

    def __init__(
        self, comment_service: CommentService, user_service: UserService
    ) -> None:
        self.comment_service = comment_service
        self.user_service = user_service

    async def execute(self, request: ModerateCommentRequest) -> CommentStatusResponse:
        """Execute moderation flow.

        Raises:
            NotFoundError: If comment or user doesn't exist
            NotAuthorizedError: If user isn't an admin
        """
        actor = await self.user_service.get_by_id(
            UserId(parse_uuid(request.user_id, "user"))
        )
        comment = await self.comment_service.moderate(
            CommentId(parse_uuid(request.comment_id, "comment")),
            request.status,
            actor,
        )
        return CommentStatusResponse(
            comment_id=str(comment.id), status=comment.status.value
        )
