"""Repository interfaces for Banter domain.

Repository interfaces are defined in the domain layer (dependency inversion).
Implementations live in the infrastructure layer.
"""

from banter.domain.repository.blog import BlogRepository
from banter.domain.repository.comment import CommentRepository
from banter.domain.repository.user import UserRepository

__all__ = [
    "BlogRepository",
    "CommentRepository",
    "UserRepository",
]
