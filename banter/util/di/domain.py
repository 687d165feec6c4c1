"""Domain layer DI providers."""

from dishka import Scope, provide

from banter.config import AuthSettings, CommentSettings, StorageSettings
from banter.domain.repository import BlogRepository, CommentRepository, UserRepository
from banter.domain.service import (
    AttachmentService,
    AttachmentStorage,
    AuthorService,
    BlogService,
    CommentService,
    JWTService,
    LikeService,
    UserService,
)
from banter.util.di.base import ProviderBase


class ProdDomainProvider(ProviderBase):
    """Production domain services provider - concrete, no mocks needed.

    Domain services are REQUEST-scoped to align with repository/session lifecycle.
    Each HTTP request gets fresh service instances with their own transaction.
    """

    scope = Scope.REQUEST

    @provide
    def get_jwt_service(self, auth_settings: AuthSettings) -> JWTService:
        """Provide JWT token domain service."""
        return JWTService(auth_settings=auth_settings)

    @provide
    def get_comment_service(
        self, comment_repository: CommentRepository, settings: CommentSettings
    ) -> CommentService:
        """Provide comment domain service."""
        return CommentService(
            comment_repository=comment_repository,
            max_content_length=settings.max_content_length,
            max_attachments=settings.max_attachments,
        )

    @provide
    def get_like_service(self, comment_repository: CommentRepository) -> LikeService:
        """Provide like domain service."""
        return LikeService(comment_repository=comment_repository)

    @provide
    def get_author_service(
        self, user_repository: UserRepository, settings: CommentSettings
    ) -> AuthorService:
        """Provide author resolution service configured with the author policy."""
        return AuthorService(
            user_repository=user_repository,
            policy=settings.author_policy,
            placeholder_name=settings.placeholder_author_name,
            placeholder_avatar_url=settings.placeholder_avatar_url,
        )

    @provide
    def get_blog_service(self, blog_repository: BlogRepository) -> BlogService:
        """Provide blog domain service."""
        return BlogService(blog_repository=blog_repository)

    @provide
    def get_user_service(self, user_repository: UserRepository) -> UserService:
        """Provide user domain service."""
        return UserService(user_repository=user_repository)

    @provide
    def get_attachment_service(
        self, storage: AttachmentStorage, settings: StorageSettings
    ) -> AttachmentService:
        """Provide attachment upload service."""
        return AttachmentService(
            storage=storage,
            folder=settings.folder,
            max_file_size_bytes=settings.max_file_size_bytes,
        )
