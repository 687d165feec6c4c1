"""Object storage infrastructure providers."""

from dishka import Scope, provide

from banter.adapter.s3 import S3AttachmentStorage
from banter.config import StorageSettings
from banter.domain.service import AttachmentStorage
from banter.util.di.base import ProviderBase


class StorageProvider(ProviderBase):
    """Storage component base."""

    __mock_component__ = "storage"


class ProdStorageProvider(StorageProvider):
    """Production storage provider using S3-compatible object storage."""

    __is_mock__ = False

    @provide(scope=Scope.APP)
    def get_attachment_storage(self, settings: StorageSettings) -> AttachmentStorage:
        """Provide S3 attachment storage."""
        return S3AttachmentStorage(settings)
