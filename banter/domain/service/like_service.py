"""Like toggling for comments."""

from dataclasses import dataclass

import logfire

from banter.domain.error import NotFoundError
from banter.domain.repository import CommentRepository
from banter.domain.value import CommentId, UserId

from .base import Service


@dataclass(frozen=True)
class LikeResult:
    """Outcome of a like toggle."""

    liked: bool
    likes_count: int


class LikeService(Service):
    """Domain service for the per-comment like set.

    A toggle removes the user when present and adds them otherwise. Both
    directions use the store's atomic set add/remove, so concurrent toggles
    by different users never lose each other's updates.
    """

    def __init__(self, comment_repository: CommentRepository) -> None:
        """Initialize like service.

        Args:
            comment_repository: Comment repository
        """
        self.comment_repository = comment_repository

    async def toggle_like(self, comment_id: CommentId, user_id: UserId) -> LikeResult:
        """Toggle a user's like on a comment.

        Args:
            comment_id: Comment ID
            user_id: Liking user

        Returns:
            New membership state and like count

        Raises:
            NotFoundError: If comment doesn't exist or isn't active
        """
        with logfire.span(
            "like_service.toggle_like",
            comment_id=str(comment_id),
            user_id=str(user_id),
        ):
            comment = await self.comment_repository.find_by_id(comment_id)
            if not comment or not comment.is_active:
                logfire.warn("Comment not found for like", comment_id=str(comment_id))
                raise NotFoundError("Comment", str(comment_id))

            if comment.is_liked_by(user_id):
                likes = await self.comment_repository.remove_like(comment_id, user_id)
            else:
                likes = await self.comment_repository.add_like(comment_id, user_id)

            if likes is None:
                # Removed between the read and the update
                raise NotFoundError("Comment", str(comment_id))

            result = LikeResult(liked=user_id in likes, likes_count=len(likes))
            logfire.info(
                "Comment like toggled",
                comment_id=str(comment_id),
                liked=result.liked,
                likes_count=result.likes_count,
            )
            return result
