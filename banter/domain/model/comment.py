"""Comment entity.

Comments are threaded discussions on blogs. Threads are two levels deep:
top-level comments and their replies. Nesting is modelled by a flat
``parent_id`` reference; the tree is assembled at read time.
"""

from datetime import datetime
from typing import Optional

from pydantic import Field

from banter.domain.model.attachment import Attachment
from banter.domain.model.common import DomainModel
from banter.domain.value import BlogId, CommentId, CommentStatus, UserId


class Comment(DomainModel):
    """Comment entity.

    Represents a comment on a blog or a reply to a top-level comment.

    - parent_id: top-level comment this replies to (None for top-level)
    - likes: identities that liked the comment, each at most once
    - author_name/author_avatar_url: snapshot of the author at write time
    """

    id: CommentId
    blog_id: BlogId
    author_id: UserId
    author_name: Optional[str] = None
    author_avatar_url: Optional[str] = None
    content: str = ""
    attachments: list[Attachment] = Field(default_factory=list)
    parent_id: Optional[CommentId] = None
    likes: frozenset[UserId] = Field(default_factory=frozenset)
    status: CommentStatus = CommentStatus.ACTIVE
    is_edited: bool = False
    edited_at: Optional[datetime] = None
    created_at: datetime = Field(default_factory=datetime.now)

    @property
    def is_active(self) -> bool:
        return self.status == CommentStatus.ACTIVE

    @property
    def is_reply(self) -> bool:
        return self.parent_id is not None

    @property
    def likes_count(self) -> int:
        return len(self.likes)

    def is_liked_by(self, user_id: UserId) -> bool:
        return user_id in self.likes
