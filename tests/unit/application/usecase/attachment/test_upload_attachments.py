"""Unit tests for UploadAttachmentsUseCase."""

from uuid import uuid4

import pytest

from banter.application.usecase.attachment import (
    UploadAttachmentsRequest,
    UploadAttachmentsUseCase,
)
from banter.domain.error import InvalidArgumentError, NotFoundError
from banter.domain.repository import UserRepository
from banter.domain.service import UploadedFile
from tests.factories import make_user
from tests.harness import create_env_fixture

unit_env = create_env_fixture()


class TestUploadAttachmentsUseCase:
    @pytest.mark.asyncio
    async def test_returns_attachment_records(self, unit_env):
        use_case = await unit_env.get(UploadAttachmentsUseCase)
        user_repo = await unit_env.get(UserRepository)
        user = await user_repo.save(make_user())

        response = await use_case.execute(
            UploadAttachmentsRequest(
                user_id=str(user.id),
                files=[UploadedFile("notes.pdf", "application/pdf", b"hello")],
            )
        )

        body = response.model_dump(by_alias=True, mode="json")
        assert body["files"][0]["kind"] == "document"
        assert body["files"][0]["originalName"] == "notes.pdf"
        assert body["files"][0]["sizeBytes"] == 5
        assert body["files"][0]["url"].startswith("https://files.test/blog-comments/")

    @pytest.mark.asyncio
    async def test_no_files(self, unit_env):
        use_case = await unit_env.get(UploadAttachmentsUseCase)
        user_repo = await unit_env.get(UserRepository)
        user = await user_repo.save(make_user())

        with pytest.raises(InvalidArgumentError):
            await use_case.execute(UploadAttachmentsRequest(user_id=str(user.id)))

    @pytest.mark.asyncio
    async def test_unknown_user(self, unit_env):
        use_case = await unit_env.get(UploadAttachmentsUseCase)

        with pytest.raises(NotFoundError):
            await use_case.execute(
                UploadAttachmentsRequest(
                    user_id=str(uuid4()),
                    files=[UploadedFile("a.png", "image/png", b"x")],
                )
            )
