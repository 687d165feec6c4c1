"""Unit tests for CreateCommentUseCase."""

from uuid import uuid4

import pytest

from banter.application.usecase.comment import (
    AttachmentInput,
    CreateCommentRequest,
    CreateCommentUseCase,
)
from banter.domain.error import (
    BusinessRuleViolationError,
    InvalidArgumentError,
    NotFoundError,
)
from banter.domain.repository import BlogRepository, CommentRepository, UserRepository
from tests.factories import make_blog, make_user
from tests.harness import create_env_fixture

# Unit test fixture
unit_env = create_env_fixture()


async def _seed(unit_env, comments_enabled: bool = True):
    user_repo = await unit_env.get(UserRepository)
    blog_repo = await unit_env.get(BlogRepository)
    author = await user_repo.save(make_user())
    blog = await blog_repo.save(make_blog(author, comments_enabled=comments_enabled))
    return author, blog


class TestCreateCommentUseCase:
    """Tests for CreateCommentUseCase."""

    @pytest.mark.asyncio
    async def test_text_comment(self, unit_env):
        """A text comment comes back with id, content, no attachments, no likes."""
        # Arrange
        use_case = await unit_env.get(CreateCommentUseCase)
        author, blog = await _seed(unit_env)

        # Act
        response = await use_case.execute(
            CreateCommentRequest(
                blog_id=str(blog.id), author_id=str(author.id), content="Great post!"
            )
        )

        # Assert
        comment = response.comment
        assert comment.id
        assert comment.content == "Great post!"
        assert comment.attachments == []
        assert comment.likes == []
        assert comment.likes_count == 0
        assert comment.author.name == author.name
        assert comment.author.avatar_url == author.avatar_url
        assert comment.replies == []

    @pytest.mark.asyncio
    async def test_attachment_only_comment(self, unit_env):
        """An attachment satisfies the non-empty rule; kind is inferred."""
        use_case = await unit_env.get(CreateCommentUseCase)
        author, blog = await _seed(unit_env)

        response = await use_case.execute(
            CreateCommentRequest(
                blog_id=str(blog.id),
                author_id=str(author.id),
                content="",
                attachments=[
                    AttachmentInput.model_validate(
                        {
                            "url": "x",
                            "filename": "a.png",
                            "mimeType": "image/png",
                            "sizeBytes": 100,
                        }
                    )
                ],
            )
        )

        attachment = response.comment.attachments[0]
        assert attachment.kind == "image"
        assert attachment.filename == "a.png"
        assert attachment.size_bytes == 100

    @pytest.mark.asyncio
    async def test_empty_comment_rejected(self, unit_env):
        use_case = await unit_env.get(CreateCommentUseCase)
        comment_repo = await unit_env.get(CommentRepository)
        author, blog = await _seed(unit_env)

        with pytest.raises(InvalidArgumentError):
            await use_case.execute(
                CreateCommentRequest(
                    blog_id=str(blog.id), author_id=str(author.id), content="  "
                )
            )

        assert await comment_repo.count_by_blog(blog.id) == 0

    @pytest.mark.asyncio
    async def test_unknown_blog(self, unit_env):
        use_case = await unit_env.get(CreateCommentUseCase)
        author, _ = await _seed(unit_env)

        with pytest.raises(NotFoundError) as exc_info:
            await use_case.execute(
                CreateCommentRequest(
                    blog_id=str(uuid4()), author_id=str(author.id), content="hi"
                )
            )

        assert exc_info.value.resource == "Blog"

    @pytest.mark.asyncio
    async def test_unknown_user(self, unit_env):
        """A valid session whose user record is gone is reported as not found."""
        use_case = await unit_env.get(CreateCommentUseCase)
        _, blog = await _seed(unit_env)

        with pytest.raises(NotFoundError) as exc_info:
            await use_case.execute(
                CreateCommentRequest(
                    blog_id=str(blog.id), author_id=str(uuid4()), content="hi"
                )
            )

        assert exc_info.value.resource == "User"

    @pytest.mark.asyncio
    async def test_comments_disabled(self, unit_env):
        use_case = await unit_env.get(CreateCommentUseCase)
        author, blog = await _seed(unit_env, comments_enabled=False)

        with pytest.raises(BusinessRuleViolationError):
            await use_case.execute(
                CreateCommentRequest(
                    blog_id=str(blog.id), author_id=str(author.id), content="hi"
                )
            )

    @pytest.mark.asyncio
    async def test_malformed_blog_id(self, unit_env):
        use_case = await unit_env.get(CreateCommentUseCase)
        author, _ = await _seed(unit_env)

        with pytest.raises(InvalidArgumentError, match="Invalid blog id"):
            await use_case.execute(
                CreateCommentRequest(
                    blog_id="not-a-uuid", author_id=str(author.id), content="hi"
                )
            )

    @pytest.mark.asyncio
    async def test_reply_to_comment_on_other_blog(self, unit_env):
        """Parent comment on a different blog fails with NotFound."""
        use_case = await unit_env.get(CreateCommentUseCase)
        blog_repo = await unit_env.get(BlogRepository)
        author, blog = await _seed(unit_env)
        other_blog = await blog_repo.save(make_blog(author))
        other = await use_case.execute(
            CreateCommentRequest(
                blog_id=str(other_blog.id), author_id=str(author.id), content="there"
            )
        )

        with pytest.raises(NotFoundError):
            await use_case.execute(
                CreateCommentRequest(
                    blog_id=str(blog.id),
                    author_id=str(author.id),
                    content="here",
                    parent_id=other.comment.id,
                )
            )
