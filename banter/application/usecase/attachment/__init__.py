"""Attachment use cases."""

from .upload_attachments import (
    UploadAttachmentsRequest,
    UploadAttachmentsResponse,
    UploadAttachmentsUseCase,
)

__all__ = [
    "UploadAttachmentsRequest",
    "UploadAttachmentsResponse",
    "UploadAttachmentsUseCase",
]
