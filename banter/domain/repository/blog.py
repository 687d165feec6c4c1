"""Blog repository interface."""

from abc import ABC, abstractmethod
from typing import Optional

from banter.domain.model.blog import Blog
from banter.domain.value import BlogId


class BlogRepository(ABC):
    """Read access to blogs referenced by comments."""

    @abstractmethod
    async def find_by_id(self, blog_id: BlogId) -> Optional[Blog]:
        """Find a blog by ID.

        Args:
            blog_id: The blog's unique identifier

        Returns:
            The blog if found, None otherwise
        """
        pass

    @abstractmethod
    async def save(self, blog: Blog) -> Blog:
        """Save a blog (create or update).

        Args:
            blog: The blog to save

        Returns:
            The saved blog
        """
        pass
