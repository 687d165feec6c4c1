"""Blog lookup service."""

import logfire

from banter.domain.error import NotFoundError
from banter.domain.model import Blog
from banter.domain.repository import BlogRepository
from banter.domain.value import BlogId

from .base import Service


class BlogService(Service):
    """Domain service for reading blogs referenced by comments."""

    def __init__(self, blog_repository: BlogRepository) -> None:
        self.blog_repository = blog_repository

    async def get_by_id(self, blog_id: BlogId) -> Blog:
        """Get a blog by ID.

        Args:
            blog_id: Blog ID

        Returns:
            Blog entity

        Raises:
            NotFoundError: If blog not found
        """
        with logfire.span("blog_service.get_by_id", blog_id=str(blog_id)):
            blog = await self.blog_repository.find_by_id(blog_id)
            if not blog:
                logfire.warn("Blog not found", blog_id=str(blog_id))
                raise NotFoundError("Blog", str(blog_id))
            return blog
