"""Comment repository interface."""

from abc import ABC, abstractmethod
from datetime import datetime
from typing import List, Optional

from banter.domain.model.comment import Comment
from banter.domain.value import BlogId, CommentId, CommentStatus, UserId


class CommentRepository(ABC):
    """Repository for Comment entity.

    Defines the contract for comment persistence operations.
    Implementations live in the infrastructure layer.
    """

    @abstractmethod
    async def find_by_id(self, comment_id: CommentId) -> Optional[Comment]:
        """Find a comment by ID.

        Args:
            comment_id: The comment's unique identifier

        Returns:
            The comment if found, None otherwise
        """
        pass

    @abstractmethod
    async def find_by_blog(
        self,
        blog_id: BlogId,
        include_inactive: bool = False,
    ) -> List[Comment]:
        """Find all comments for a blog, in no particular order.

        Args:
            blog_id: The blog ID
            include_inactive: Whether to include deleted and hidden comments

        Returns:
            Flat list of comments (top-level and replies)
        """
        pass

    @abstractmethod
    async def count_by_blog(self, blog_id: BlogId) -> int:
        """Count active comments for a blog.

        Args:
            blog_id: The blog ID

        Returns:
            Number of active comments
        """
        pass

    @abstractmethod
    async def save(self, comment: Comment) -> Comment:
        """Save a comment (create or update).

        Args:
            comment: The comment to save

        Returns:
            The saved comment
        """
        pass

    @abstractmethod
    async def add_like(
        self, comment_id: CommentId, user_id: UserId
    ) -> Optional[frozenset[UserId]]:
        """Atomically add a user to a comment's like set.

        Adding a user that is already present leaves the set unchanged.

        Args:
            comment_id: The comment ID
            user_id: The liking user

        Returns:
            The like set after the change, None if the comment doesn't exist
        """
        pass

    @abstractmethod
    async def remove_like(
        self, comment_id: CommentId, user_id: UserId
    ) -> Optional[frozenset[UserId]]:
        """Atomically remove a user from a comment's like set.

        Removing a user that is not present leaves the set unchanged.

        Args:
            comment_id: The comment ID
            user_id: The user whose like is removed

        Returns:
            The like set after the change, None if the comment doesn't exist
        """
        pass

    @abstractmethod
    async def update_content(
        self, comment_id: CommentId, content: str, edited_at: datetime
    ) -> Optional[Comment]:
        """Replace the text of an active comment and mark it edited.

        Args:
            comment_id: The comment ID
            content: New text content
            edited_at: Edit timestamp

        Returns:
            Updated comment, None if the comment doesn't exist or isn't active
        """
        pass

    @abstractmethod
    async def update_status(
        self, comment_id: CommentId, status: CommentStatus
    ) -> Optional[Comment]:
        """Change a comment's moderation status.

        Args:
            comment_id: The comment ID
            status: New status

        Returns:
            Updated comment, None if the comment doesn't exist
        """
        pass
