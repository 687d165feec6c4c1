"""Attachment value object.

Describes one uploaded file embedded in a comment. Attachments are created
by the upload flow and never change after they are attached.
"""

from datetime import datetime
from typing import Any

from pydantic import Field, model_validator

from banter.domain.model.common import DomainModel
from banter.domain.value import AttachmentKind


class Attachment(DomainModel):
    """Metadata for a single file attached to a comment."""

    kind: AttachmentKind
    url: str = Field(min_length=1)
    public_id: str = ""  # Object storage key, empty for externally hosted files
    filename: str = Field(min_length=1)
    original_name: str = ""
    size_bytes: int = Field(default=0, ge=0)
    mime_type: str = ""
    uploaded_at: datetime = Field(default_factory=datetime.now)

    @model_validator(mode="before")
    @classmethod
    def infer_missing_fields(cls, data: Any) -> Any:
        """Derive kind from the MIME type and default original_name.

        A given kind is only kept when there is no MIME type to derive it from.
        """
        if not isinstance(data, dict):
            return data
        data = dict(data)
        if data.get("mime_type") or not data.get("kind"):
            data["kind"] = AttachmentKind.from_mime_type(data.get("mime_type"))
        if not data.get("original_name") and data.get("filename"):
            data["original_name"] = data["filename"]
        return data
