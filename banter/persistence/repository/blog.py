"""PostgreSQL implementation of Blog repository."""

from typing import Optional

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from banter.domain.model import Blog
from banter.domain.repository import BlogRepository
from banter.domain.value import BlogId
from banter.persistence.database import store_errors
from banter.persistence.mappers import blog_to_dict, row_to_blog
from banter.persistence.tables import blogs_table


class PostgresBlogRepository(BlogRepository):
    """PostgreSQL implementation of BlogRepository."""

    def __init__(self, session: AsyncSession) -> None:
        self.session = session

    async def find_by_id(self, blog_id: BlogId) -> Optional[Blog]:
        """Find a blog by ID."""
        stmt = select(blogs_table).where(blogs_table.c.id == blog_id)
        with store_errors("blogs.find_by_id"):
            result = await self.session.execute(stmt)
        row = result.fetchone()
        return row_to_blog(row._asdict()) if row else None

    async def save(self, blog: Blog) -> Blog:
        """Save a blog (create or update)."""
        existing = await self.find_by_id(blog.id)
        blog_dict = blog_to_dict(blog)

        with store_errors("blogs.save"):
            if existing:
                stmt = (
                    blogs_table.update()
                    .where(blogs_table.c.id == blog.id)
                    .values(**blog_dict)
                )
            else:
                stmt = blogs_table.insert().values(**blog_dict)
            await self.session.execute(stmt)
            await self.session.flush()

        return blog
