"""Get comments use case."""

from uuid import UUID

from pydantic import BaseModel

from banter.application.usecase.base import CamelModel
from banter.domain.service import (
    AuthorService,
    BlogService,
    CommentService,
    JWTService,
    assemble_thread,
    count_nodes,
)
from banter.domain.value import BlogId, UserId, parse_uuid

from .views import CommentItem


class GetCommentsRequest(BaseModel):
    """Get comments request."""

    blog_id: str  # UUID string
    auth_token: str | None = None  # JWT token for authentication (optional)


class GetCommentsResponse(CamelModel):
    """Get comments response."""

    comments: list[CommentItem]
    total: int  # Rendered nodes, top-level plus replies


class GetCommentsUseCase:
    """Use case for getting the rendered comment thread of a blog."""

    def __init__(
        self,
        comment_service: CommentService,
        blog_service: BlogService,
        author_service: AuthorService,
        jwt_service: JWTService,
    ) -> None:
        """Initialize get comments use case.

        Args:
            comment_service: Comment domain service
            blog_service: Blog domain service
            author_service: Resolves author display fields
            jwt_service: JWT service for decoding auth tokens
        """
        self.comment_service = comment_service
        self.blog_service = blog_service
        self.author_service = author_service
        self.jwt_service = jwt_service

    async def execute(self, request: GetCommentsRequest) -> GetCommentsResponse:
        """Execute get comments flow.

        Top-level comments come newest first with their replies oldest
        first. Replies of comments that are no longer active are left out.

        Args:
            request: Get comments request with blog ID and optional auth token

        Returns:
            Comment thread with like state for the signed-in user

        Raises:
            InvalidArgumentError: If the blog ID is malformed
            NotFoundError: If the blog doesn't exist
        """
        blog_id = BlogId(parse_uuid(request.blog_id, "blog"))
        await self.blog_service.get_by_id(blog_id)

        comments = await self.comment_service.get_comments_for_blog(blog_id)
        thread = assemble_thread(comments)
        authors = await self.author_service.resolve(comments)

        viewer_id = self._viewer_id(request.auth_token)

        items = [
            CommentItem.from_comment(
                node.comment,
                author=authors[node.comment.id],
                viewer_id=viewer_id,
                replies=[
                    CommentItem.from_comment(
                        reply.comment,
                        author=authors[reply.comment.id],
                        viewer_id=viewer_id,
                    )
                    for reply in node.replies
                ],
            )
            for node in thread
        ]

        return GetCommentsResponse(comments=items, total=count_nodes(thread))

    def _viewer_id(self, auth_token: str | None) -> UserId | None:
        # Invalid or expired token - treat as anonymous
        user_id = self.jwt_service.get_user_id_from_token(auth_token)
        if not user_id:
            return None
        try:
            return UserId(UUID(user_id))
        except ValueError:
            return None
