"""Attachment storage on S3-compatible object storage.

Works against AWS S3 and S3-compatible services (MinIO, R2, ...) through
aioboto3. A client is opened per upload; the session is shared.
"""

import aioboto3
import logfire
from botocore.exceptions import BotoCoreError, ClientError

from banter.config import StorageSettings
from banter.domain.error import ServiceUnavailableError
from banter.domain.service.attachment_service import AttachmentStorage, StoredObject


class S3AttachmentStorage(AttachmentStorage):
    """Stores attachment files in an S3 bucket."""

    def __init__(self, settings: StorageSettings) -> None:
        """Initialize S3 storage.

        Args:
            settings: Storage settings (bucket, endpoint, credentials)
        """
        self.settings = settings
        self._session = aioboto3.Session(
            aws_access_key_id=settings.access_key,
            aws_secret_access_key=settings.secret_key,
            region_name=settings.region,
        )

    def public_url(self, key: str) -> str:
        """Public URL of a stored object."""
        if self.settings.public_base_url:
            return f"{self.settings.public_base_url.rstrip('/')}/{key}"
        if self.settings.endpoint_url:
            return f"{self.settings.endpoint_url.rstrip('/')}/{self.settings.bucket}/{key}"
        return (
            f"https://{self.settings.bucket}.s3."
            f"{self.settings.region}.amazonaws.com/{key}"
        )

    async def store(self, key: str, data: bytes, content_type: str) -> StoredObject:
        """Upload a file to the bucket."""
        with logfire.span(
            "s3.put_object", bucket=self.settings.bucket, key=key, size=len(data)
        ):
            try:
                async with self._session.client(
                    "s3", endpoint_url=self.settings.endpoint_url
                ) as s3:
                    await s3.put_object(
                        Bucket=self.settings.bucket,
                        Key=key,
                        Body=data,
                        ContentType=content_type or "application/octet-stream",
                    )
            except (ClientError, BotoCoreError) as e:
                logfire.error("Attachment upload failed", key=key, error=str(e))
                raise ServiceUnavailableError("Attachment storage is unavailable") from e

        return StoredObject(url=self.public_url(key), key=key)


class MockAttachmentStorage(AttachmentStorage):
    """In-memory attachment storage for testing.

    Keeps stored objects in a dict and returns deterministic URLs.
    """

    def __init__(self, base_url: str = "https://files.test") -> None:
        self.base_url = base_url
        self.objects: dict[str, tuple[bytes, str]] = {}

    async def store(self, key: str, data: bytes, content_type: str) -> StoredObject:
        """Keep the file in memory."""
        self.objects[key] = (data, content_type)
        return StoredObject(url=f"{self.base_url}/{key}", key=key)
