"""Integration tests for PostgresCommentRepository.

Needs PostgreSQL at DATABASE__URL with migrations applied
(``python scripts/run_migrations.py``).
"""

from uuid import uuid4

import pytest
import pytest_asyncio
from sqlalchemy import text
from sqlalchemy.ext.asyncio import AsyncSession

from banter.domain.repository import BlogRepository, CommentRepository, UserRepository
from banter.domain.value import CommentStatus
from tests.factories import BASE_TIME, make_attachment, make_blog, make_comment, make_user
from tests.harness import create_env_fixture

pytestmark = pytest.mark.integration

# Integration test fixture - real PostgreSQL, mocked object storage
integration_env = create_env_fixture(unmock={"persistence"})


@pytest_asyncio.fixture(autouse=True)
async def clean_database(integration_env):
    """Clean database before each test."""
    session = await integration_env.get(AsyncSession)
    await session.execute(text("TRUNCATE comments, blogs, users CASCADE"))
    await session.flush()


@pytest_asyncio.fixture
async def blog_with_author(integration_env):
    users = await integration_env.get(UserRepository)
    blogs = await integration_env.get(BlogRepository)
    author = await users.save(make_user())
    blog = await blogs.save(make_blog(author))
    return blog, author


class TestPostgresCommentRepository:
    """Round trips through the comments table."""

    @pytest.mark.asyncio
    async def test_save_and_find(self, integration_env, blog_with_author):
        repo = await integration_env.get(CommentRepository)
        blog, author = blog_with_author
        comment = make_comment(blog.id, author, attachments=[make_attachment()])

        await repo.save(comment)
        found = await repo.find_by_id(comment.id)

        assert found is not None
        assert found.content == comment.content
        assert found.attachments[0].filename == "chart.png"
        assert found.likes == frozenset()

    @pytest.mark.asyncio
    async def test_find_by_blog_skips_inactive(self, integration_env, blog_with_author):
        repo = await integration_env.get(CommentRepository)
        blog, author = blog_with_author
        visible = await repo.save(make_comment(blog.id, author, "visible"))
        await repo.save(
            make_comment(blog.id, author, "hidden", status=CommentStatus.HIDDEN)
        )

        active = await repo.find_by_blog(blog.id)
        everything = await repo.find_by_blog(blog.id, include_inactive=True)

        assert [c.id for c in active] == [visible.id]
        assert len(everything) == 2
        assert await repo.count_by_blog(blog.id) == 1

    @pytest.mark.asyncio
    async def test_likes_are_a_set(self, integration_env, blog_with_author):
        """Adding the same like twice stores it once."""
        repo = await integration_env.get(CommentRepository)
        blog, author = blog_with_author
        comment = await repo.save(make_comment(blog.id, author))
        liker = uuid4()

        await repo.add_like(comment.id, liker)
        likes = await repo.add_like(comment.id, liker)
        assert likes == frozenset({liker})

        likes = await repo.remove_like(comment.id, liker)
        assert likes == frozenset()

    @pytest.mark.asyncio
    async def test_likes_from_several_users(self, integration_env, blog_with_author):
        repo = await integration_env.get(CommentRepository)
        blog, author = blog_with_author
        comment = await repo.save(make_comment(blog.id, author))
        likers = [uuid4() for _ in range(3)]

        for liker in likers:
            await repo.add_like(comment.id, liker)
        found = await repo.find_by_id(comment.id)

        assert found.likes == frozenset(likers)

    @pytest.mark.asyncio
    async def test_like_on_missing_comment(self, integration_env):
        repo = await integration_env.get(CommentRepository)

        assert await repo.add_like(uuid4(), uuid4()) is None

    @pytest.mark.asyncio
    async def test_update_content_only_when_active(
        self, integration_env, blog_with_author
    ):
        repo = await integration_env.get(CommentRepository)
        blog, author = blog_with_author
        comment = await repo.save(make_comment(blog.id, author))

        updated = await repo.update_content(comment.id, "Revised", BASE_TIME)
        assert updated.content == "Revised"
        assert updated.is_edited is True

        await repo.update_status(comment.id, CommentStatus.DELETED)
        assert await repo.update_content(comment.id, "Again", BASE_TIME) is None

    @pytest.mark.asyncio
    async def test_legacy_null_attachments(self, integration_env, blog_with_author):
        """Rows written before attachments existed read back with none."""
        repo = await integration_env.get(CommentRepository)
        session = await integration_env.get(AsyncSession)
        blog, author = blog_with_author
        comment = await repo.save(make_comment(blog.id, author))
        await session.execute(
            text("UPDATE comments SET attachments = NULL WHERE id = :id"),
            {"id": comment.id},
        )

        found = await repo.find_by_id(comment.id)

        assert found.attachments == []
