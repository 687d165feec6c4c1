"""Update comment use case."""

from pydantic import BaseModel

from banter.application.usecase.base import CamelModel
from banter.domain.service import AuthorService, CommentService
from banter.domain.value import CommentId, UserId, parse_uuid

from .views import CommentItem


class UpdateCommentRequest(BaseModel):
    """Update comment request."""

    comment_id: str  # UUID string
    user_id: str  # Current user ID (must be author)
    content: str


class UpdateCommentResponse(CamelModel):
    """Update comment response."""

    comment: CommentItem


class UpdateCommentUseCase:
    """Use case for editing a comment's text content."""

    def __init__(
        self, comment_service: CommentService, author_service: AuthorService
    ) -> None:
        """Initialize update comment use case.

        Args:
            comment_service: Comment service
            author_service: Resolves author display fields
        """
        self.comment_service = comment_service
        self.author_service = author_service

    async def execute(self, request: UpdateCommentRequest) -> UpdateCommentResponse:
        """Execute update comment flow.

        Args:
            request: Update comment request with comment ID, user ID, and new content

        Returns:
            Updated comment details

        Raises:
            NotFoundError: If comment doesn't exist
            NotAuthorizedError: If user doesn't own the comment
            ContentDeletedException: If comment is deleted or hidden
            InvalidArgumentError: If the edit leaves the comment empty
        """
        user_id = UserId(parse_uuid(request.user_id, "user"))
        updated = await self.comment_service.update_content(
            comment_id=CommentId(parse_uuid(request.comment_id, "comment")),
            user_id=user_id,
            content=request.content,
        )
        authors = await self.author_service.resolve([updated])

        return UpdateCommentResponse(
            comment=CommentItem.from_comment(
                updated, author=authors[updated.id], viewer_id=user_id
            )
        )
