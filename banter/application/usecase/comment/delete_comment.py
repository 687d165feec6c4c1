"""Delete comment use case."""

from pydantic import BaseModel

from banter.domain.service import CommentService, UserService
from banter.domain.value import CommentId, UserId, parse_uuid

from .views import CommentStatusResponse


class DeleteCommentRequest(BaseModel):
    """Delete comment request."""

    comment_id: str
    user_id: str


class DeleteCommentUseCase:
    """Use case for soft-deleting a comment as its author or an admin."""

    def __init__(
        self, comment_service: CommentService, user_service: UserService
    ) -> None:
        self.comment_service = comment_service
        self.user_service = user_service

    async def execute(self, request: DeleteCommentRequest) -> CommentStatusResponse:
        """Execute delete comment flow.

        Raises:
            NotFoundError: If comment or user doesn't exist
            NotAuthorizedError: If user is neither the author nor an admin
        """
        actor = await self.user_service.get_by_id(
            UserId(parse_uuid(request.user_id, "user"))
        )
        comment = await self.comment_service.delete_comment(
            CommentId(parse_uuid(request.comment_id, "comment")), actor
        )
        return CommentStatusResponse(
            comment_id=str(comment.id), status=comment.status.value
        )
