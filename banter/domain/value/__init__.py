"""Domain value objects for Banter."""

from banter.domain.value.identifiers import BlogId, CommentId, UserId, parse_uuid
from banter.domain.value.types import (
    AttachmentKind,
    AuthorPolicy,
    BlogStatus,
    CommentStatus,
    UserRole,
)

__all__ = [
    # Identifiers
    "BlogId",
    "CommentId",
    "UserId",
    "parse_uuid",
    # Types
    "AttachmentKind",
    "AuthorPolicy",
    "BlogStatus",
    "CommentStatus",
    "UserRole",
]
