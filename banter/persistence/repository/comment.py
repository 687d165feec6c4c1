"""PostgreSQL implementation of Comment repository."""

from datetime import datetime
from typing import List, Optional

from sqlalchemy import case, func, literal, select, update
from sqlalchemy.dialects.postgresql import UUID
from sqlalchemy.ext.asyncio import AsyncSession

from banter.domain.model import Comment
from banter.domain.repository import CommentRepository
from banter.domain.value import BlogId, CommentId, CommentStatus, UserId
from banter.persistence.database import store_errors
from banter.persistence.mappers import comment_to_dict, row_to_comment
from banter.persistence.tables import comments_table


class PostgresCommentRepository(CommentRepository):
    """PostgreSQL implementation of CommentRepository."""

    def __init__(self, session: AsyncSession) -> None:
        """Initialize repository with database session.

        Args:
            session: SQLAlchemy async session
        """
        self.session = session

    async def find_by_id(self, comment_id: CommentId) -> Optional[Comment]:
        """Find a comment by ID."""
        stmt = select(comments_table).where(comments_table.c.id == comment_id)
        with store_errors("comments.find_by_id"):
            result = await self.session.execute(stmt)
        row = result.fetchone()
        return row_to_comment(row._asdict()) if row else None

    async def find_by_blog(
        self,
        blog_id: BlogId,
        include_inactive: bool = False,
    ) -> List[Comment]:
        """Find all comments for a blog."""
        stmt = select(comments_table).where(comments_table.c.blog_id == blog_id)

        if not include_inactive:
            stmt = stmt.where(comments_table.c.status == CommentStatus.ACTIVE.value)

        stmt = stmt.order_by(comments_table.c.created_at)

        with store_errors("comments.find_by_blog"):
            result = await self.session.execute(stmt)
        return [row_to_comment(row._asdict()) for row in result.fetchall()]

    async def count_by_blog(self, blog_id: BlogId) -> int:
        """Count active comments for a blog."""
        stmt = (
            select(func.count())
            .select_from(comments_table)
            .where(comments_table.c.blog_id == blog_id)
            .where(comments_table.c.status == CommentStatus.ACTIVE.value)
        )
        with store_errors("comments.count_by_blog"):
            result = await self.session.execute(stmt)
        return result.scalar() or 0

    async def save(self, comment: Comment) -> Comment:
        """Save a comment (create or update)."""
        existing = await self.find_by_id(comment.id)
        comment_dict = comment_to_dict(comment)

        with store_errors("comments.save"):
            if existing:
                stmt = (
                    comments_table.update()
                    .where(comments_table.c.id == comment.id)
                    .values(**comment_dict)
                )
            else:
                stmt = comments_table.insert().values(**comment_dict)
            await self.session.execute(stmt)
            await self.session.flush()

        return comment

    async def add_like(
        self, comment_id: CommentId, user_id: UserId
    ) -> Optional[frozenset[UserId]]:
        """Atomically add a user to the like set.

        Single UPDATE: membership check and append happen under the row lock.
        """
        user = literal(user_id, UUID(as_uuid=True))
        likes = comments_table.c.likes
        stmt = (
            update(comments_table)
            .where(comments_table.c.id == comment_id)
            .values(
                likes=case(
                    (likes.contains([user_id]), likes),
                    else_=func.array_append(likes, user, type_=likes.type),
                )
            )
            .returning(comments_table.c.likes)
        )
        return await self._execute_like_update(stmt, "comments.add_like")

    async def remove_like(
        self, comment_id: CommentId, user_id: UserId
    ) -> Optional[frozenset[UserId]]:
        """Atomically remove a user from the like set."""
        user = literal(user_id, UUID(as_uuid=True))
        likes = comments_table.c.likes
        stmt = (
            update(comments_table)
            .where(comments_table.c.id == comment_id)
            .values(likes=func.array_remove(likes, user, type_=likes.type))
            .returning(comments_table.c.likes)
        )
        return await self._execute_like_update(stmt, "comments.remove_like")

    async def _execute_like_update(
        self, stmt, operation: str
    ) -> Optional[frozenset[UserId]]:
        with store_errors(operation):
            result = await self.session.execute(stmt)
            row = result.fetchone()
            await self.session.flush()

        if row is None:
            return None
        return frozenset(UserId(u) for u in row.likes or [])

    async def update_content(
        self, comment_id: CommentId, content: str, edited_at: datetime
    ) -> Optional[Comment]:
        """Replace the text of an active comment."""
        stmt = (
            update(comments_table)
            .where(comments_table.c.id == comment_id)
            .where(comments_table.c.status == CommentStatus.ACTIVE.value)
            .values(content=content, is_edited=True, edited_at=edited_at)
            .returning(comments_table)
        )
        return await self._execute_returning(stmt, "comments.update_content")

    async def update_status(
        self, comment_id: CommentId, status: CommentStatus
    ) -> Optional[Comment]:
        """Change a comment's moderation status."""
        stmt = (
            update(comments_table)
            .where(comments_table.c.id == comment_id)
            .values(status=status.value)
            .returning(comments_table)
        )
        return await self._execute_returning(stmt, "comments.update_status")

    async def _execute_returning(self, stmt, operation: str) -> Optional[Comment]:
        with store_errors(operation):
            result = await self.session.execute(stmt)
            row = result.fetchone()
            await self.session.flush()

        if row is None:
            # Comment not found (or not active for content updates)
            return None
        return row_to_comment(row._asdict())
