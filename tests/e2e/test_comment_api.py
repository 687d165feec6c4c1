"""End-to-end tests for the comment HTTP API."""

from uuid import uuid4

import pytest
import pytest_asyncio
from httpx import ASGITransport, AsyncClient
from sqlalchemy.exc import OperationalError

from banter.domain.repository import BlogRepository, CommentRepository, UserRepository
from banter.domain.service import AttachmentStorage
from banter.domain.value import CommentStatus, UserRole
from banter.interface.api.app import create_app
from banter.persistence.database import store_errors
from tests.di import build_test_container
from tests.factories import auth_cookie, make_blog, make_comment, make_user


def bearer(user) -> dict[str, str]:
    return {"Authorization": f"Bearer {auth_cookie(user)['auth_token']}"}


async def unreachable_store(*args, **kwargs):
    """Stand-in repository method failing the way a lost database does."""
    with store_errors("comments.unreachable"):
        raise OperationalError("SELECT", {}, ConnectionRefusedError("refused"))


@pytest_asyncio.fixture
async def api():
    """App on an all-mock container, with its container for seeding."""
    container = build_test_container()
    app_instance = create_app(container)
    transport = ASGITransport(app=app_instance)
    async with AsyncClient(transport=transport, base_url="http://test") as client:
        yield client, container
    await container.close()


@pytest_asyncio.fixture
async def small_upload_api(monkeypatch):
    """App whose upload limit is 16 bytes."""
    monkeypatch.setenv("STORAGE__MAX_FILE_SIZE_BYTES", "16")
    container = build_test_container()
    app_instance = create_app(container)
    transport = ASGITransport(app=app_instance)
    async with AsyncClient(transport=transport, base_url="http://test") as client:
        yield client, container
    await container.close()


@pytest_asyncio.fixture
async def seeded(api):
    """A blog with its author, a second reader and an admin."""
    client, container = api
    users = await container.get(UserRepository)
    blogs = await container.get(BlogRepository)
    author = await users.save(make_user())
    reader = await users.save(make_user("Grace Hopper"))
    admin = await users.save(make_user("Root Admin", role=UserRole.ADMIN))
    blog = await blogs.save(make_blog(author))
    return client, container, blog, author, reader, admin


class TestCommentEndpoints:
    """Happy paths through the public API."""

    @pytest.mark.asyncio
    async def test_create_and_list_thread(self, seeded):
        client, _, blog, author, reader, _ = seeded

        created = await client.post(
            "/comments",
            json={"blogId": str(blog.id), "content": "Great post!"},
            headers=bearer(author),
        )
        assert created.status_code == 201
        parent = created.json()["comment"]
        assert parent["content"] == "Great post!"
        assert parent["attachments"] == []
        assert parent["likesCount"] == 0
        assert parent["author"]["name"] == author.name

        reply = await client.post(
            f"/blogs/{blog.id}/comments",
            json={"content": "Agreed", "parentCommentId": parent["id"]},
            headers=bearer(reader),
        )
        assert reply.status_code == 201
        assert reply.json()["comment"]["parentId"] == parent["id"]

        listed = await client.get("/comments", params={"blogId": str(blog.id)})
        assert listed.status_code == 200
        body = listed.json()
        assert body["total"] == 2
        assert [c["id"] for c in body["comments"]] == [parent["id"]]
        assert body["comments"][0]["replies"][0]["content"] == "Agreed"

        by_path = await client.get(f"/blogs/{blog.id}/comments")
        assert by_path.json() == body

    @pytest.mark.asyncio
    async def test_upload_then_attach(self, seeded):
        client, _, blog, author, _, _ = seeded

        uploaded = await client.post(
            "/uploads/comment-files",
            files=[("files", ("chart.png", b"\x89PNG....", "image/png"))],
            headers=bearer(author),
        )
        assert uploaded.status_code == 201
        record = uploaded.json()["files"][0]
        assert record["kind"] == "image"
        assert record["originalName"] == "chart.png"

        created = await client.post(
            "/comments",
            json={"blogId": str(blog.id), "content": "", "attachments": [record]},
            headers=bearer(author),
        )
        assert created.status_code == 201
        assert created.json()["comment"]["attachments"][0]["url"] == record["url"]

    @pytest.mark.asyncio
    async def test_toggle_like(self, seeded):
        client, container, blog, author, reader, _ = seeded
        comments = await container.get(CommentRepository)
        comment = await comments.save(make_comment(blog.id, author))

        liked = await client.post(f"/comments/{comment.id}/like", headers=bearer(reader))
        assert liked.json() == {"liked": True, "likesCount": 1}

        listed = await client.get(f"/blogs/{blog.id}/comments", headers=bearer(reader))
        assert listed.json()["comments"][0]["likedByMe"] is True

        unliked = await client.post(
            f"/comments/{comment.id}/like", headers=bearer(reader)
        )
        assert unliked.json() == {"liked": False, "likesCount": 0}

    @pytest.mark.asyncio
    async def test_session_cookie_is_accepted(self, seeded):
        client, container, blog, author, reader, _ = seeded
        comments = await container.get(CommentRepository)
        comment = await comments.save(make_comment(blog.id, author))

        client.cookies.set("auth_token", auth_cookie(reader)["auth_token"])
        response = await client.post(f"/comments/{comment.id}/like")
        client.cookies.clear()

        assert response.status_code == 200
        assert response.json()["liked"] is True

    @pytest.mark.asyncio
    async def test_edit_then_delete(self, seeded):
        client, container, blog, author, _, _ = seeded
        comments = await container.get(CommentRepository)
        comment = await comments.save(make_comment(blog.id, author))

        edited = await client.patch(
            f"/comments/{comment.id}", json={"content": "Revised"}, headers=bearer(author)
        )
        assert edited.status_code == 200
        assert edited.json()["comment"]["isEdited"] is True

        deleted = await client.delete(f"/comments/{comment.id}", headers=bearer(author))
        assert deleted.json() == {"commentId": str(comment.id), "status": "deleted"}

        count = await client.get(f"/blogs/{blog.id}/comments/count")
        assert count.json() == {"blogId": str(blog.id), "count": 0}

    @pytest.mark.asyncio
    async def test_admin_hides_comment(self, seeded):
        client, container, blog, author, _, admin = seeded
        comments = await container.get(CommentRepository)
        comment = await comments.save(make_comment(blog.id, author))

        response = await client.patch(
            f"/admin/comments/{comment.id}/status",
            json={"status": "hidden"},
            headers=bearer(admin),
        )

        assert response.status_code == 200
        assert response.json()["status"] == "hidden"
        listed = await client.get(f"/blogs/{blog.id}/comments")
        assert listed.json() == {"comments": [], "total": 0}

    @pytest.mark.asyncio
    async def test_health(self, api):
        client, _ = api

        response = await client.get("/health")

        assert response.status_code == 200
        assert response.json()["status"] == "healthy"
        assert "gitSha" in response.json()


class TestCommentErrors:
    """Failures are rendered as {"error": message} with a matching status."""

    @pytest.mark.asyncio
    async def test_create_without_session(self, seeded):
        client, _, blog, _, _, _ = seeded

        response = await client.post(
            "/comments", json={"blogId": str(blog.id), "content": "hi"}
        )

        assert response.status_code == 401
        assert response.json() == {"error": "Authentication required"}

    @pytest.mark.asyncio
    async def test_invalid_token(self, seeded):
        client, _, blog, _, _, _ = seeded

        response = await client.post(
            "/comments",
            json={"blogId": str(blog.id), "content": "hi"},
            headers={"Authorization": "Bearer not-a-jwt"},
        )

        assert response.status_code == 401

    @pytest.mark.asyncio
    async def test_empty_comment(self, seeded):
        client, _, blog, author, _, _ = seeded

        response = await client.post(
            "/comments",
            json={"blogId": str(blog.id), "content": "   "},
            headers=bearer(author),
        )

        assert response.status_code == 400
        assert "error" in response.json()

    @pytest.mark.asyncio
    async def test_missing_blog_id(self, seeded):
        client, _, _, author, _, _ = seeded

        response = await client.post(
            "/comments", json={"content": "hi"}, headers=bearer(author)
        )

        assert response.status_code == 400
        assert response.json()["error"].startswith("blogId")

    @pytest.mark.asyncio
    async def test_unknown_blog(self, seeded):
        client, _, _, author, _, _ = seeded

        listed = await client.get("/comments", params={"blogId": str(uuid4())})
        created = await client.post(
            "/comments",
            json={"blogId": str(uuid4()), "content": "hi"},
            headers=bearer(author),
        )

        assert listed.status_code == 404
        assert created.status_code == 404

    @pytest.mark.asyncio
    async def test_comments_disabled(self, seeded):
        client, container, _, author, _, _ = seeded
        blogs = await container.get(BlogRepository)
        closed = await blogs.save(make_blog(author, comments_enabled=False))

        response = await client.post(
            f"/blogs/{closed.id}/comments", json={"content": "hi"}, headers=bearer(author)
        )

        assert response.status_code == 403
        assert response.json() == {"error": "Comments are disabled for this blog"}

    @pytest.mark.asyncio
    async def test_edit_by_other_user(self, seeded):
        client, container, blog, author, reader, _ = seeded
        comments = await container.get(CommentRepository)
        comment = await comments.save(make_comment(blog.id, author))

        response = await client.patch(
            f"/comments/{comment.id}", json={"content": "mine now"}, headers=bearer(reader)
        )

        assert response.status_code == 403
        assert str(reader.id) not in response.json()["error"]

    @pytest.mark.asyncio
    async def test_moderation_requires_admin(self, seeded):
        client, container, blog, author, _, _ = seeded
        comments = await container.get(CommentRepository)
        comment = await comments.save(make_comment(blog.id, author))

        response = await client.patch(
            f"/admin/comments/{comment.id}/status",
            json={"status": "hidden"},
            headers=bearer(author),
        )

        assert response.status_code == 403

    @pytest.mark.asyncio
    async def test_like_missing_comment(self, seeded):
        client, _, _, _, reader, _ = seeded

        response = await client.post(f"/comments/{uuid4()}/like", headers=bearer(reader))

        assert response.status_code == 404
        assert "error" in response.json()

    @pytest.mark.asyncio
    async def test_upload_without_files(self, seeded):
        client, _, _, author, _, _ = seeded

        response = await client.post("/uploads/comment-files", headers=bearer(author))

        assert response.status_code == 400
        assert response.json() == {"error": "No files provided"}

    @pytest.mark.asyncio
    async def test_unknown_route(self, api):
        client, _ = api

        response = await client.get("/nowhere")

        assert response.status_code == 404
        assert response.json() == {"error": "Not Found"}


class TestCommentCount:
    @pytest.mark.asyncio
    async def test_count_includes_replies_and_skips_hidden(self, seeded):
        """Count is over stored active comments; total is over rendered ones."""
        client, container, blog, author, reader, _ = seeded
        comments = await container.get(CommentRepository)
        top = await comments.save(make_comment(blog.id, author, "top", minutes=1))
        await comments.save(
            make_comment(blog.id, reader, "first reply", minutes=2, parent_id=top.id)
        )
        await comments.save(
            make_comment(blog.id, author, "second reply", minutes=3, parent_id=top.id)
        )
        hidden = await comments.save(
            make_comment(
                blog.id, reader, "hidden", minutes=4, status=CommentStatus.HIDDEN
            )
        )
        await comments.save(
            make_comment(blog.id, author, "orphan", minutes=5, parent_id=hidden.id)
        )

        count = await client.get(f"/blogs/{blog.id}/comments/count")
        listed = await client.get(f"/blogs/{blog.id}/comments")

        assert count.status_code == 200
        assert count.json() == {"blogId": str(blog.id), "count": 4}
        assert listed.json()["total"] == 3
        assert [c["id"] for c in listed.json()["comments"]] == [str(top.id)]

    @pytest.mark.asyncio
    async def test_count_unknown_blog(self, api):
        client, _ = api

        response = await client.get(f"/blogs/{uuid4()}/comments/count")

        assert response.status_code == 404
        assert "error" in response.json()


class TestStoreUnavailable:
    """A failing comment store answers 503 once, without retrying."""

    @pytest.mark.asyncio
    async def test_list_when_store_down(self, seeded, monkeypatch):
        client, container, blog, _, _, _ = seeded
        comments = await container.get(CommentRepository)
        monkeypatch.setattr(comments, "find_by_blog", unreachable_store)

        response = await client.get(f"/blogs/{blog.id}/comments")

        assert response.status_code == 503
        assert response.json() == {"error": "Comment store is unavailable"}

    @pytest.mark.asyncio
    async def test_like_when_store_down(self, seeded, monkeypatch):
        client, container, blog, author, reader, _ = seeded
        comments = await container.get(CommentRepository)
        comment = await comments.save(make_comment(blog.id, author))
        monkeypatch.setattr(comments, "add_like", unreachable_store)

        response = await client.post(
            f"/comments/{comment.id}/like", headers=bearer(reader)
        )

        assert response.status_code == 503
        assert response.json() == {"error": "Comment store is unavailable"}
        assert (await comments.find_by_id(comment.id)).likes == frozenset()


class TestUploadLimits:
    @pytest.mark.asyncio
    async def test_oversized_file_rejected_before_storing(self, small_upload_api):
        client, container = small_upload_api
        uploader = make_user()

        response = await client.post(
            "/uploads/comment-files",
            files=[("files", ("big.pdf", b"x" * 17, "application/pdf"))],
            headers=bearer(uploader),
        )

        assert response.status_code == 400
        assert "big.pdf is too large" in response.json()["error"]
        storage = await container.get(AttachmentStorage)
        assert storage.objects == {}
