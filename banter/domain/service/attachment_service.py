"""Attachment upload service.

Validates uploaded files, classifies them by MIME type and stores them
through an ``AttachmentStorage`` implementation. The resulting attachment
records are submitted with the comment afterwards.
"""

import secrets
import time
from abc import ABC, abstractmethod
from dataclasses import dataclass
from datetime import datetime
from typing import Sequence

import logfire

from banter.domain.error import InvalidArgumentError
from banter.domain.model import Attachment
from banter.domain.value import AttachmentKind

from .base import Service


@dataclass(frozen=True)
class UploadedFile:
    """Raw file received from a client."""

    filename: str
    content_type: str
    data: bytes

    @property
    def size(self) -> int:
        return len(self.data)


@dataclass(frozen=True)
class StoredObject:
    """Location of a stored file."""

    url: str
    key: str


class AttachmentStorage(ABC):
    """Object storage for attachment files."""

    @abstractmethod
    async def store(self, key: str, data: bytes, content_type: str) -> StoredObject:
        """Store a file under the given key.

        Args:
            key: Object key
            data: File contents
            content_type: MIME type

        Returns:
            Public location of the stored file

        Raises:
            ServiceUnavailableError: If storage is unreachable or rejects the file
        """
        pass


class AttachmentService(Service):
    """Domain service for uploading comment attachments."""

    def __init__(
        self,
        storage: AttachmentStorage,
        folder: str,
        max_file_size_bytes: int,
    ) -> None:
        """Initialize attachment service.

        Args:
            storage: Object storage implementation
            folder: Key prefix for stored files
            max_file_size_bytes: Per-file size limit
        """
        self.storage = storage
        self.folder = folder.strip("/")
        self.max_file_size_bytes = max_file_size_bytes

    def _object_key(self) -> str:
        return f"{self.folder}/comment-{int(time.time() * 1000)}-{secrets.token_hex(4)}"

    async def upload_files(self, files: Sequence[UploadedFile]) -> list[Attachment]:
        """Validate and store files, returning their attachment records.

        All files are validated before any is stored.

        Args:
            files: Files received from the client

        Returns:
            Attachment records in upload order

        Raises:
            InvalidArgumentError: If no files were given or one is too large
            ServiceUnavailableError: If storage fails
        """
        with logfire.span("attachment_service.upload_files", count=len(files)):
            if not files:
                raise InvalidArgumentError("No files provided")

            limit_mb = self.max_file_size_bytes // (1024 * 1024)
            for file in files:
                if file.size > self.max_file_size_bytes:
                    logfire.warn(
                        "Attachment too large", filename=file.filename, size=file.size
                    )
                    raise InvalidArgumentError(
                        f"File {file.filename} is too large (max {limit_mb}MB)"
                    )

            attachments = []
            for file in files:
                kind = AttachmentKind.from_mime_type(file.content_type)
                stored = await self.storage.store(
                    self._object_key(), file.data, file.content_type
                )
                attachments.append(
                    Attachment(
                        kind=kind,
                        url=stored.url,
                        public_id=stored.key,
                        filename=file.filename,
                        original_name=file.filename,
                        size_bytes=file.size,
                        mime_type=file.content_type,
                        uploaded_at=datetime.now(),
                    )
                )
                logfire.info(
                    "Attachment stored",
                    filename=file.filename,
                    kind=kind.value,
                    key=stored.key,
                )
            return attachments
