"""Mappers for converting between database rows and domain models.

Since we're using Pydantic domain models (immutable), we use manual mapping
instead of SQLAlchemy's classical imperative mapping.
"""

from typing import Any, Dict
from uuid import UUID

from banter.domain.model import Attachment, Blog, Comment, User
from banter.domain.value import (
    BlogId,
    BlogStatus,
    CommentId,
    CommentStatus,
    UserId,
    UserRole,
)

# Attachment keys written by earlier clients, mapped to current field names
_LEGACY_ATTACHMENT_KEYS = {
    "type": "kind",
    "size": "size_bytes",
    "mimeType": "mime_type",
    "originalName": "original_name",
    "publicId": "public_id",
    "uploadedAt": "uploaded_at",
    "name": "filename",
}


def _uuid(value: Any) -> UUID:
    return UUID(value) if isinstance(value, str) else value


def row_to_attachment(raw: Dict[str, Any]) -> Attachment:
    """Convert a stored attachment document to an Attachment.

    Accepts both current snake_case documents and legacy camelCase ones.

    Args:
        raw: Attachment document from the JSONB column

    Returns:
        Attachment value object
    """
    data = {k: v for k, v in raw.items() if k not in _LEGACY_ATTACHMENT_KEYS}
    for legacy_key, key in _LEGACY_ATTACHMENT_KEYS.items():
        if legacy_key in raw:
            data.setdefault(key, raw[legacy_key])
    if not data.get("filename") and data.get("url"):
        data["filename"] = str(data["url"]).rsplit("/", 1)[-1] or "attachment"
    return Attachment.model_validate(data)


def attachment_to_dict(attachment: Attachment) -> Dict[str, Any]:
    """Convert Attachment to a JSON-serializable document."""
    return attachment.model_dump(mode="json")


def row_to_comment(row: Dict[str, Any]) -> Comment:
    """Convert database row to Comment domain model.

    Rows written before attachments existed carry NULL; they map to an
    empty list.

    Args:
        row: Database row as dict

    Returns:
        Comment domain model
    """
    return Comment(
        id=CommentId(_uuid(row["id"])),
        blog_id=BlogId(_uuid(row["blog_id"])),
        author_id=UserId(_uuid(row["author_id"])),
        author_name=row.get("author_name"),
        author_avatar_url=row.get("author_avatar_url"),
        content=row.get("content") or "",
        attachments=[row_to_attachment(a) for a in row.get("attachments") or []],
        parent_id=CommentId(_uuid(row["parent_id"])) if row.get("parent_id") else None,
        likes=frozenset(UserId(_uuid(u)) for u in row.get("likes") or []),
        status=CommentStatus(row.get("status") or CommentStatus.ACTIVE.value),
        is_edited=bool(row.get("is_edited")),
        edited_at=row.get("edited_at"),
        created_at=row["created_at"],
    )


def comment_to_dict(comment: Comment) -> Dict[str, Any]:
    """Convert Comment domain model to database dict.

    Args:
        comment: Comment domain model

    Returns:
        Dict suitable for database insertion/update
    """
    return {
        "id": comment.id,
        "blog_id": comment.blog_id,
        "author_id": comment.author_id,
        "author_name": comment.author_name,
        "author_avatar_url": comment.author_avatar_url,
        "content": comment.content,
        "attachments": [attachment_to_dict(a) for a in comment.attachments],
        "parent_id": comment.parent_id,
        "likes": sorted(comment.likes, key=str),
        "status": comment.status.value,
        "is_edited": comment.is_edited,
        "edited_at": comment.edited_at,
        "created_at": comment.created_at,
    }


def row_to_blog(row: Dict[str, Any]) -> Blog:
    """Convert database row to Blog domain model."""
    return Blog(
        id=BlogId(_uuid(row["id"])),
        title=row["title"],
        slug=row["slug"],
        author_id=UserId(_uuid(row["author_id"])),
        status=BlogStatus(row["status"]),
        comments_enabled=row["comments_enabled"],
        created_at=row["created_at"],
    )


def blog_to_dict(blog: Blog) -> Dict[str, Any]:
    """Convert Blog domain model to database dict."""
    return {**blog.model_dump(), "status": blog.status.value}


def row_to_user(row: Dict[str, Any]) -> User:
    """Convert database row to User domain model."""
    return User(
        id=UserId(_uuid(row["id"])),
        name=row["name"],
        email=row.get("email"),
        avatar_url=row.get("avatar_url"),
        role=UserRole(row.get("role") or UserRole.USER.value),
        created_at=row["created_at"],
    )


def user_to_dict(user: User) -> Dict[str, Any]:
    """Convert User domain model to database dict."""
    return {**user.model_dump(), "role": user.role.value}
