"""In-memory comment repository for testing."""

from datetime import datetime
from typing import Optional

from banter.domain.model.comment import Comment
from banter.domain.repository.comment import CommentRepository
from banter.domain.value import BlogId, CommentId, CommentStatus, UserId


class InMemoryCommentRepository(CommentRepository):
    """In-memory implementation of CommentRepository for testing."""

    def __init__(self) -> None:
        self._comments: dict[CommentId, Comment] = {}

    async def find_by_id(self, comment_id: CommentId) -> Optional[Comment]:
        """Find a comment by ID."""
        return self._comments.get(comment_id)

    async def find_by_blog(
        self,
        blog_id: BlogId,
        include_inactive: bool = False,
    ) -> list[Comment]:
        """Find all comments for a blog."""
        comments = [c for c in self._comments.values() if c.blog_id == blog_id]

        # Filter deleted and hidden
        if not include_inactive:
            comments = [c for c in comments if c.is_active]

        comments.sort(key=lambda c: c.created_at)
        return comments

    async def count_by_blog(self, blog_id: BlogId) -> int:
        """Count active comments for a blog."""
        return sum(
            1
            for c in self._comments.values()
            if c.blog_id == blog_id and c.is_active
        )

    async def save(self, comment: Comment) -> Comment:
        """Save or update a comment."""
        self._comments[comment.id] = comment
        return comment

    async def add_like(
        self, comment_id: CommentId, user_id: UserId
    ) -> Optional[frozenset[UserId]]:
        """Add a user to the like set."""
        comment = self._comments.get(comment_id)
        if comment is None:
            return None
        likes = comment.likes | {user_id}
        self._comments[comment_id] = comment.model_copy(update={"likes": likes})
        return likes

    async def remove_like(
        self, comment_id: CommentId, user_id: UserId
    ) -> Optional[frozenset[UserId]]:
        """Remove a user from the like set."""
        comment = self._comments.get(comment_id)
        if comment is None:
            return None
        likes = comment.likes - {user_id}
        self._comments[comment_id] = comment.model_copy(update={"likes": likes})
        return likes

    async def update_content(
        self, comment_id: CommentId, content: str, edited_at: datetime
    ) -> Optional[Comment]:
        """Replace the text of an active comment."""
        comment = self._comments.get(comment_id)
        if comment is None or not comment.is_active:
            return None
        updated = comment.model_copy(
            update={"content": content, "is_edited": True, "edited_at": edited_at}
        )
        self._comments[comment_id] = updated
        return updated

    async def update_status(
        self, comment_id: CommentId, status: CommentStatus
    ) -> Optional[Comment]:
        """Change a comment's moderation status."""
        comment = self._comments.get(comment_id)
        if comment is None:
            return None
        updated = comment.model_copy(update={"status": status})
        self._comments[comment_id] = updated
        return updated
