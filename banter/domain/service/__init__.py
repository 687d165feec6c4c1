"""Domain services."""

from .attachment_service import (
    AttachmentService,
    AttachmentStorage,
    StoredObject,
    UploadedFile,
)
from .author_service import AuthorService, AuthorView
from .base import Service
from .blog_service import BlogService
from .comment_service import CommentService
from .jwt_service import JWTService
from .like_service import LikeResult, LikeService
from .thread_service import ThreadNode, assemble_thread, count_nodes
from .user_service import UserService

__all__ = [
    "AttachmentService",
    "AttachmentStorage",
    "AuthorService",
    "AuthorView",
    "BlogService",
    "CommentService",
    "JWTService",
    "LikeResult",
    "LikeService",
    "Service",
    "StoredObject",
    "ThreadNode",
    "UploadedFile",
    "UserService",
    "assemble_thread",
    "count_nodes",
]
