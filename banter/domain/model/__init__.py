"""Domain model entities for Banter."""

from banter.domain.model.attachment import Attachment
from banter.domain.model.blog import Blog
from banter.domain.model.comment import Comment
from banter.domain.model.user import User

__all__ = [
    "Attachment",
    "Blog",
    "Comment",
    "User",
]
