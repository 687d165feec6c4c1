"""PostgreSQL repository implementations."""

from banter.persistence.repository.blog import PostgresBlogRepository
from banter.persistence.repository.comment import PostgresCommentRepository
from banter.persistence.repository.user import PostgresUserRepository

__all__ = [
    "PostgresBlogRepository",
    "PostgresCommentRepository",
    "PostgresUserRepository",
]
