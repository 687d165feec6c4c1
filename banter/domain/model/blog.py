"""Blog entity.

Blogs are owned by the authoring side of the platform. The comment
subsystem only reads them to check existence and whether comments are open.
"""

from datetime import datetime

from pydantic import Field

from banter.domain.model.common import DomainModel
from banter.domain.value import BlogId, BlogStatus, UserId


class Blog(DomainModel):
    """Blog referenced by comments."""

    id: BlogId
    title: str = Field(min_length=1, max_length=200)
    slug: str
    author_id: UserId
    status: BlogStatus = BlogStatus.PUBLISHED
    comments_enabled: bool = True
    created_at: datetime = Field(default_factory=datetime.now)
