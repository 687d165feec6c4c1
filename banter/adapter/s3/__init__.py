"""S3-compatible attachment storage adapter."""

from .storage import MockAttachmentStorage, S3AttachmentStorage

__all__ = ["MockAttachmentStorage", "S3AttachmentStorage"]
