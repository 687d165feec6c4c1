"""Domain value types for Banter.

Value objects are immutable and defined by their values, not identity.
"""

from enum import Enum


class CommentStatus(str, Enum):
    """Moderation status of a comment.

    Only active comments are ever rendered; deleted and hidden comments
    stay in storage.
    """

    ACTIVE = "active"
    DELETED = "deleted"
    HIDDEN = "hidden"


class BlogStatus(str, Enum):
    """Publishing status of a blog."""

    DRAFT = "draft"
    PUBLISHED = "published"
    SCHEDULED = "scheduled"


class UserRole(str, Enum):
    """Role of a platform user."""

    USER = "user"
    ADMIN = "admin"


class AuthorPolicy(str, Enum):
    """How comment author display fields are resolved when rendering."""

    JOIN = "join"  # Fetch current name/avatar at read time
    SNAPSHOT = "snapshot"  # Use the name/avatar captured at write time


class AttachmentKind(str, Enum):
    """Category of an uploaded comment attachment."""

    IMAGE = "image"
    DOCUMENT = "document"
    VIDEO = "video"
    AUDIO = "audio"
    OTHER = "other"

    @classmethod
    def from_mime_type(cls, mime_type: str | None) -> "AttachmentKind":
        """Infer the attachment kind from a MIME type.

        Args:
            mime_type: MIME type reported by the uploader (may be empty)

        Returns:
            Matching kind, OTHER when nothing matches
        """
        mime = (mime_type or "").lower()
        if mime.startswith("image/"):
            return cls.IMAGE
        if mime.startswith("video/"):
            return cls.VIDEO
        if mime.startswith("audio/"):
            return cls.AUDIO
        if any(marker in mime for marker in ("pdf", "document", "msword")):
            return cls.DOCUMENT
        return cls.OTHER
