"""Comment domain service."""

from datetime import datetime
from typing import Sequence
from uuid import uuid4

import logfire

from banter.domain.error import (
    ContentDeletedException,
    InvalidArgumentError,
    NotAuthorizedError,
    NotFoundError,
)
from banter.domain.model import Attachment, Comment, User
from banter.domain.repository import CommentRepository
from banter.domain.value import BlogId, CommentId, CommentStatus, UserId

from .base import Service


class CommentService(Service):
    """Domain service for comment operations."""

    def __init__(
        self,
        comment_repository: CommentRepository,
        max_content_length: int = 10000,
        max_attachments: int = 10,
    ) -> None:
        """Initialize comment service.

        Args:
            comment_repository: Comment repository
            max_content_length: Maximum comment text length
            max_attachments: Maximum attachments per comment
        """
        self.comment_repository = comment_repository
        self.max_content_length = max_content_length
        self.max_attachments = max_attachments

    def _validate_body(self, content: str, attachments: Sequence[Attachment]) -> None:
        if not content.strip() and not attachments:
            raise InvalidArgumentError("Comment content or attachment is required")
        if len(content) > self.max_content_length:
            raise InvalidArgumentError(
                f"Comment content must be at most {self.max_content_length} characters"
            )
        if len(attachments) > self.max_attachments:
            raise InvalidArgumentError(
                f"A comment can have at most {self.max_attachments} attachments"
            )

    async def _resolve_parent(
        self, blog_id: BlogId, parent_id: CommentId
    ) -> CommentId:
        """Find the top-level comment a new reply belongs under.

        Replies to replies are flattened onto the top-level comment so the
        thread stays two levels deep.
        """
        parent = await self.comment_repository.find_by_id(parent_id)
        if not parent or parent.blog_id != blog_id or not parent.is_active:
            logfire.error(
                "Parent comment not found",
                parent_id=str(parent_id),
                blog_id=str(blog_id),
                parent_blog_id=str(parent.blog_id) if parent else None,
            )
            raise NotFoundError(
                "Comment", str(parent_id), message="Parent comment not found"
            )

        if parent.parent_id is None:
            return parent.id

        root = await self.comment_repository.find_by_id(parent.parent_id)
        if not root or root.blog_id != blog_id or not root.is_active:
            raise NotFoundError(
                "Comment", str(parent_id), message="Parent comment not found"
            )
        logfire.info(
            "Reply flattened onto top-level comment",
            requested_parent_id=str(parent_id),
            parent_id=str(root.id),
        )
        return root.id

    async def create_comment(
        self,
        blog_id: BlogId,
        author: User,
        content: str,
        attachments: Sequence[Attachment] = (),
        parent_id: CommentId | None = None,
    ) -> Comment:
        """Create a comment on a blog or reply to another comment.

        Args:
            blog_id: Blog ID (existence is checked by the caller)
            author: Authenticated author
            content: Comment text (may be blank if attachments are present)
            attachments: Uploaded attachment records
            parent_id: Comment being replied to (None for top-level)

        Returns:
            Created comment

        Raises:
            InvalidArgumentError: If the comment has no content and no attachments
            NotFoundError: If the parent comment is missing or on another blog
        """
        with logfire.span(
            "comment_service.create_comment",
            blog_id=str(blog_id),
            author_id=str(author.id),
            parent_id=str(parent_id) if parent_id else None,
            attachment_count=len(attachments),
        ):
            self._validate_body(content, attachments)

            resolved_parent_id = None
            if parent_id:
                resolved_parent_id = await self._resolve_parent(blog_id, parent_id)

            comment = Comment(
                id=CommentId(uuid4()),
                blog_id=blog_id,
                author_id=author.id,
                author_name=author.name,
                author_avatar_url=author.avatar_url,
                content=content,
                attachments=list(attachments),
                parent_id=resolved_parent_id,
                likes=frozenset(),
                status=CommentStatus.ACTIVE,
                is_edited=False,
                edited_at=None,
                created_at=datetime.now(),
            )

            saved = await self.comment_repository.save(comment)
            logfire.info(
                "Comment created",
                comment_id=str(saved.id),
                blog_id=str(blog_id),
                is_reply=saved.is_reply,
            )
            return saved

    async def get_comments_for_blog(self, blog_id: BlogId) -> list[Comment]:
        """Get all active comments of a blog as a flat list.

        Args:
            blog_id: Blog ID

        Returns:
            Active comments, unordered
        """
        with logfire.span(
            "comment_service.get_comments_for_blog", blog_id=str(blog_id)
        ):
            comments = await self.comment_repository.find_by_blog(
                blog_id=blog_id, include_inactive=False
            )
            logfire.info(
                "Comments retrieved for blog",
                blog_id=str(blog_id),
                count=len(comments),
            )
            return comments

    async def get_comment_by_id(self, comment_id: CommentId) -> Comment:
        """Get a comment by ID.

        Raises:
            NotFoundError: If comment not found
        """
        with logfire.span(
            "comment_service.get_comment_by_id", comment_id=str(comment_id)
        ):
            comment = await self.comment_repository.find_by_id(comment_id)
            if not comment:
                logfire.warn("Comment not found", comment_id=str(comment_id))
                raise NotFoundError("Comment", str(comment_id))
            return comment

    async def count_comments(self, blog_id: BlogId) -> int:
        """Count active comments on a blog."""
        return await self.comment_repository.count_by_blog(blog_id)

    async def update_content(
        self, comment_id: CommentId, user_id: UserId, content: str
    ) -> Comment:
        """Edit the text of a comment.

        Args:
            comment_id: Comment ID
            user_id: Editing user (must be the author)
            content: New text content

        Returns:
            Updated comment, marked as edited

        Raises:
            NotFoundError: If comment doesn't exist
            NotAuthorizedError: If user isn't the author
            ContentDeletedException: If comment is deleted or hidden
            InvalidArgumentError: If the edit would leave the comment empty
        """
        with logfire.span(
            "comment_service.update_content",
            comment_id=str(comment_id),
            text_length=len(content),
        ):
            comment = await self.get_comment_by_id(comment_id)

            if comment.author_id != user_id:
                raise NotAuthorizedError("comment", str(comment_id), str(user_id))
            if not comment.is_active:
                raise ContentDeletedException("comment", str(comment_id))

            self._validate_body(content, comment.attachments)

            updated = await self.comment_repository.update_content(
                comment_id, content, datetime.now()
            )
            if updated is None:
                # Deleted between the read and the update
                raise ContentDeletedException("comment", str(comment_id))

            logfire.info("Comment content updated", comment_id=str(comment_id))
            return updated

    async def delete_comment(self, comment_id: CommentId, actor: User) -> Comment:
        """Soft-delete a comment.

        The comment stays in storage with status ``deleted`` and drops out
        of rendered threads together with its replies.

        Raises:
            NotFoundError: If comment doesn't exist or is already deleted
            NotAuthorizedError: If actor is neither the author nor an admin
        """
        with logfire.span(
            "comment_service.delete_comment",
            comment_id=str(comment_id),
            actor_id=str(actor.id),
        ):
            comment = await self.get_comment_by_id(comment_id)
            if comment.status == CommentStatus.DELETED:
                raise NotFoundError("Comment", str(comment_id))
            if comment.author_id != actor.id and not actor.is_admin:
                raise NotAuthorizedError("comment", str(comment_id), str(actor.id))

            return await self._set_status(comment_id, CommentStatus.DELETED)

    async def moderate(
        self, comment_id: CommentId, status: CommentStatus, actor: User
    ) -> Comment:
        """Set a comment's status as an administrator.

        Raises:
            NotAuthorizedError: If actor isn't an admin
            NotFoundError: If comment doesn't exist
        """
        with logfire.span(
            "comment_service.moderate",
            comment_id=str(comment_id),
            status=status.value,
            actor_id=str(actor.id),
        ):
            if not actor.is_admin:
                logfire.warn(
                    "Non-admin attempted moderation",
                    actor_id=str(actor.id),
                    comment_id=str(comment_id),
                )
                raise NotAuthorizedError("comment", str(comment_id), str(actor.id))

            await self.get_comment_by_id(comment_id)
            return await self._set_status(comment_id, status)

    async def _set_status(self, comment_id: CommentId, status: CommentStatus) -> Comment:
        updated = await self.comment_repository.update_status(comment_id, status)
        if updated is None:
            raise NotFoundError("Comment", str(comment_id))
        logfire.info(
            "Comment status changed", comment_id=str(comment_id), status=status.value
        )
        return updated
