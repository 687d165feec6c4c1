"""Comment use cases."""

from .count_comments import (
    CountCommentsRequest,
    CountCommentsResponse,
    CountCommentsUseCase,
)
from .create_comment import (
    CreateCommentRequest,
    CreateCommentResponse,
    CreateCommentUseCase,
)
from .delete_comment import DeleteCommentRequest, DeleteCommentUseCase
from .get_comments import GetCommentsRequest, GetCommentsResponse, GetCommentsUseCase
from .moderate_comment import ModerateCommentRequest, ModerateCommentUseCase
from .toggle_like import ToggleLikeRequest, ToggleLikeResponse, ToggleLikeUseCase
from .update_comment import (
    UpdateCommentRequest,
    UpdateCommentResponse,
    UpdateCommentUseCase,
)
from .views import (
    AttachmentInput,
    AttachmentItem,
    AuthorItem,
    CommentItem,
    CommentStatusResponse,
)

__all__ = [
    "AttachmentInput",
    "AttachmentItem",
    "AuthorItem",
    "CommentItem",
    "CommentStatusResponse",
    "CountCommentsRequest",
    "CountCommentsResponse",
    "CountCommentsUseCase",
    "CreateCommentRequest",
    "CreateCommentResponse",
    "CreateCommentUseCase",
    "DeleteCommentRequest",
    "DeleteCommentUseCase",
    "GetCommentsRequest",
    "GetCommentsResponse",
    "GetCommentsUseCase",
    "ModerateCommentRequest",
    "ModerateCommentUseCase",
    "ToggleLikeRequest",
    "ToggleLikeResponse",
    "ToggleLikeUseCase",
    "UpdateCommentRequest",
    "UpdateCommentResponse",
    "UpdateCommentUseCase",
]
