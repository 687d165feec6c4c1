"""Count comments use case."""

from pydantic import BaseModel

from banter.application.usecase.base import CamelModel
from banter.domain.service import BlogService, CommentService
from banter.domain.value import BlogId, parse_uuid


class CountCommentsRequest(BaseModel):
    """Count comments request."""

    blog_id: str


class CountCommentsResponse(CamelModel):
    """Count comments response."""

    blog_id: str
    count: int


class CountCommentsUseCase:
    """Use case for counting the active comments of a blog."""

    def __init__(
        self, comment_service: CommentService, blog_service: BlogService
    ) -> None:
        self.comment_service = comment_service
        self.blog_service = blog_service

    async def execute(self, request: CountCommentsRequest) -> CountCommentsResponse:
        blog_id = BlogId(parse_uuid(request.blog_id, "blog"))
        await self.blog_service.get_by_id(blog_id)
        count = await self.comment_service.count_comments(blog_id)
        return CountCommentsResponse(blog_id=str(blog_id), count=count)
