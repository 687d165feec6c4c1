"""Mock storage providers for testing."""

from dishka import Scope, provide

from banter.adapter.s3 import MockAttachmentStorage
from banter.domain.service import AttachmentStorage
from banter.util.di.infrastructure.storage import StorageProvider


class MockStorageProvider(StorageProvider):
    """Mock storage provider keeping uploaded files in memory."""

    __is_mock__ = True

    @provide(scope=Scope.APP)
    def get_attachment_storage(self) -> AttachmentStorage:
        """Provide in-memory attachment storage."""
        return MockAttachmentStorage()
