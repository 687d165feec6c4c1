"""Comment representations shared by the comment use cases."""

from datetime import datetime
from typing import Optional

from pydantic import Field

from banter.application.usecase.base import CamelModel
from banter.domain.model import Attachment, Comment
from banter.domain.service import AuthorView
from banter.domain.value import AttachmentKind, UserId


class AttachmentItem(CamelModel):
    """Attachment as rendered to clients."""

    kind: AttachmentKind
    url: str
    public_id: str
    filename: str
    original_name: str
    size_bytes: int
    mime_type: str
    uploaded_at: datetime

    @classmethod
    def from_attachment(cls, attachment: Attachment) -> "AttachmentItem":
        return cls(**attachment.model_dump())


class AttachmentInput(CamelModel):
    """Attachment record submitted with a comment.

    ``kind`` is inferred from ``mime_type`` and ``filename`` from the URL
    when they are left out.
    """

    kind: Optional[AttachmentKind] = None
    url: str = Field(min_length=1)
    public_id: str = ""
    filename: Optional[str] = None
    original_name: Optional[str] = None
    size_bytes: int = Field(default=0, ge=0)
    mime_type: str = ""
    uploaded_at: Optional[datetime] = None

    def to_attachment(self) -> Attachment:
        data = self.model_dump(exclude_none=True)
        if not data.get("filename"):
            data["filename"] = self.url.rsplit("/", 1)[-1] or "attachment"
        return Attachment.model_validate(data)


class AuthorItem(CamelModel):
    """Comment author display fields."""

    id: str
    name: str
    avatar_url: Optional[str] = None

    @classmethod
    def from_view(cls, view: AuthorView) -> "AuthorItem":
        return cls(id=str(view.id), name=view.name, avatar_url=view.avatar_url)


class CommentItem(CamelModel):
    """Comment node with its replies."""

    id: str
    blog_id: str
    author_id: str
    author: AuthorItem
    content: str
    attachments: list[AttachmentItem]
    parent_id: Optional[str]
    likes: list[str]
    likes_count: int
    liked_by_me: bool
    status: str
    is_edited: bool
    edited_at: Optional[datetime]
    created_at: datetime
    replies: list["CommentItem"] = Field(default_factory=list)

    @classmethod
    def from_comment(
        cls,
        comment: Comment,
        author: AuthorView,
        viewer_id: Optional[UserId] = None,
        replies: Optional[list["CommentItem"]] = None,
    ) -> "CommentItem":
        """Build the rendered form of a comment.

        Args:
            comment: Comment entity
            author: Resolved author view
            viewer_id: Signed-in user, used for ``liked_by_me``
            replies: Already rendered replies

        Returns:
            Comment item
        """
        return cls(
            id=str(comment.id),
            blog_id=str(comment.blog_id),
            author_id=str(comment.author_id),
            author=AuthorItem.from_view(author),
            content=comment.content,
            attachments=[AttachmentItem.from_attachment(a) for a in comment.attachments],
            parent_id=str(comment.parent_id) if comment.parent_id else None,
            likes=sorted(str(u) for u in comment.likes),
            likes_count=comment.likes_count,
            liked_by_me=viewer_id is not None and comment.is_liked_by(viewer_id),
            status=comment.status.value,
            is_edited=comment.is_edited,
            edited_at=comment.edited_at,
            created_at=comment.created_at,
            replies=replies or [],
        )


class CommentStatusResponse(CamelModel):
    """Outcome of a status change."""

    comment_id: str
    status: str
