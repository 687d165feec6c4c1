"""Toggle like use case."""

from pydantic import BaseModel

from banter.application.usecase.base import BaseUseCase, CamelModel
from banter.domain.service import LikeService
from banter.domain.value import CommentId, UserId, parse_uuid


class ToggleLikeRequest(BaseModel):
    """Toggle like request."""

    comment_id: str
    user_id: str


class ToggleLikeResponse(CamelModel):
    """Toggle like response."""

    liked: bool
    likes_count: int


class ToggleLikeUseCase(BaseUseCase):
    """Use case for liking or unliking a comment."""

    def __init__(self, like_service: LikeService) -> None:
        self.like_service = like_service

    async def execute(self, request: ToggleLikeRequest) -> ToggleLikeResponse:
        """Toggle the user's like on a comment.

        Raises:
            InvalidArgumentError: If an ID is malformed
            NotFoundError: If the comment doesn't exist or isn't active
        """
        result = await self.like_service.toggle_like(
            comment_id=CommentId(parse_uuid(request.comment_id, "comment")),
            user_id=UserId(parse_uuid(request.user_id, "user")),
        )
        return ToggleLikeResponse(liked=result.liked, likes_count=result.likes_count)
