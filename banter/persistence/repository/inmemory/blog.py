"""In-memory blog repository for testing."""

from typing import Optional

from banter.domain.model.blog import Blog
from banter.domain.repository.blog import BlogRepository
from banter.domain.value import BlogId


class InMemoryBlogRepository(BlogRepository):
    """In-memory implementation of BlogRepository for testing."""

    def __init__(self) -> None:
        self._blogs: dict[BlogId, Blog] = {}

    async def find_by_id(self, blog_id: BlogId) -> Optional[Blog]:
        return self._blogs.get(blog_id)

    async def save(self, blog: Blog) -> Blog:
        self._blogs[blog.id] = blog
        return blog
