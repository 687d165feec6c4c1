"""Create comment use case."""

import logfire
from pydantic import BaseModel, Field

from banter.application.usecase.base import CamelModel
from banter.domain.error import BusinessRuleViolationError
from banter.domain.service import (
    AuthorService,
    BlogService,
    CommentService,
    UserService,
)
from banter.domain.value import BlogId, CommentId, UserId, parse_uuid

from .views import AttachmentInput, CommentItem


class CreateCommentRequest(BaseModel):
    """Create comment request."""

    blog_id: str  # UUID string
    author_id: str  # User ID from authenticated user
    content: str = ""
    attachments: list[AttachmentInput] = Field(default_factory=list)
    parent_id: str | None = None  # Parent comment ID for replies


class CreateCommentResponse(CamelModel):
    """Create comment response."""

    comment: CommentItem


class CreateCommentUseCase:
    """Use case for creating a comment on a blog or replying to another comment."""

    def __init__(
        self,
        comment_service: CommentService,
        blog_service: BlogService,
        user_service: UserService,
    ) -> None:
        """Initialize create comment use case.

        Args:
            comment_service: Comment domain service
            blog_service: Blog domain service
            user_service: User domain service
        """
        self.comment_service = comment_service
        self.blog_service = blog_service
        self.user_service = user_service

    async def execute(self, request: CreateCommentRequest) -> CreateCommentResponse:
        """Execute create comment flow.

        Steps:
        1. Verify blog exists and accepts comments
        2. Load the author for the display snapshot
        3. Create comment via comment service (validates body and parent)

        Args:
            request: Create comment request

        Returns:
            Created comment with its author fields populated

        Raises:
            InvalidArgumentError: If an ID is malformed or the comment is empty
            NotFoundError: If blog, author or parent comment is missing
            BusinessRuleViolationError: If comments are disabled for the blog
        """
        blog_id = BlogId(parse_uuid(request.blog_id, "blog"))
        author_id = UserId(parse_uuid(request.author_id, "user"))
        parent_id = (
            CommentId(parse_uuid(request.parent_id, "comment"))
            if request.parent_id
            else None
        )

        blog = await self.blog_service.get_by_id(blog_id)
        if not blog.comments_enabled:
            logfire.warn("Comment on blog with comments disabled", blog_id=str(blog_id))
            raise BusinessRuleViolationError("Comments are disabled for this blog")

        author = await self.user_service.get_by_id(author_id)

        comment = await self.comment_service.create_comment(
            blog_id=blog_id,
            author=author,
            content=request.content,
            attachments=[a.to_attachment() for a in request.attachments],
            parent_id=parent_id,
        )

        return CreateCommentResponse(
            comment=CommentItem.from_comment(
                comment,
                author=AuthorService.view_for_user(author),
                viewer_id=author.id,
            )
        )
