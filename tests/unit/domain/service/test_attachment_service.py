"""Unit tests for AttachmentService."""

import pytest

from banter.adapter.s3 import MockAttachmentStorage
from banter.domain.error import InvalidArgumentError
from banter.domain.service import AttachmentService, AttachmentStorage, UploadedFile
from banter.domain.value import AttachmentKind
from tests.harness import create_env_fixture

unit_env = create_env_fixture()


class TestUploadFiles:
    """Tests for upload_files."""

    @pytest.mark.asyncio
    async def test_stores_files_under_folder(self, unit_env):
        service = await unit_env.get(AttachmentService)
        storage = await unit_env.get(AttachmentStorage)

        attachments = await service.upload_files(
            [
                UploadedFile("chart.png", "image/png", b"\x89PNG"),
                UploadedFile("report.pdf", "application/pdf", b"%PDF-1.7"),
            ]
        )

        assert [a.kind for a in attachments] == [
            AttachmentKind.IMAGE,
            AttachmentKind.DOCUMENT,
        ]
        assert attachments[0].filename == "chart.png"
        assert attachments[0].size_bytes == 4
        assert attachments[0].public_id.startswith("blog-comments/comment-")
        assert attachments[0].url.endswith(attachments[0].public_id)
        assert isinstance(storage, MockAttachmentStorage)
        assert set(storage.objects) == {a.public_id for a in attachments}

    @pytest.mark.asyncio
    async def test_keys_are_unique(self, unit_env):
        service = await unit_env.get(AttachmentService)

        attachments = await service.upload_files(
            [UploadedFile("a.txt", "text/plain", b"a") for _ in range(5)]
        )

        assert len({a.public_id for a in attachments}) == 5

    @pytest.mark.asyncio
    async def test_no_files_rejected(self, unit_env):
        service = await unit_env.get(AttachmentService)

        with pytest.raises(InvalidArgumentError, match="No files provided"):
            await service.upload_files([])

    @pytest.mark.asyncio
    async def test_oversized_file_rejected_before_storing(self):
        storage = MockAttachmentStorage()
        service = AttachmentService(
            storage=storage, folder="blog-comments", max_file_size_bytes=1024 * 1024
        )

        with pytest.raises(InvalidArgumentError, match="big.mov is too large"):
            await service.upload_files(
                [
                    UploadedFile("ok.png", "image/png", b"x"),
                    UploadedFile("big.mov", "video/quicktime", b"x" * (1024 * 1024 + 1)),
                ]
            )

        assert storage.objects == {}
