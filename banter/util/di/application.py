"""Application layer DI providers."""

from dishka import Scope, provide

from banter.application.usecase.attachment import UploadAttachmentsUseCase
from banter.application.usecase.comment import (
    CountCommentsUseCase,
    CreateCommentUseCase,
    DeleteCommentUseCase,
    GetCommentsUseCase,
    ModerateCommentUseCase,
    ToggleLikeUseCase,
    UpdateCommentUseCase,
)
from banter.domain.service import (
    AttachmentService,
    AuthorService,
    BlogService,
    CommentService,
    JWTService,
    LikeService,
    UserService,
)
from banter.util.di.base import ProviderBase


class ProdApplicationProvider(ProviderBase):
    """Production application use cases provider - concrete, no mocks needed."""

    # Comment use cases
    @provide(scope=Scope.REQUEST)
    def get_create_comment_use_case(
        self,
        comment_service: CommentService,
        blog_service: BlogService,
        user_service: UserService,
    ) -> CreateCommentUseCase:
        """Provide create comment use case."""
        return CreateCommentUseCase(
            comment_service=comment_service,
            blog_service=blog_service,
            user_service=user_service,
        )

    @provide(scope=Scope.REQUEST)
    def get_get_comments_use_case(
        self,
        comment_service: CommentService,
        blog_service: BlogService,
        author_service: AuthorService,
        jwt_service: JWTService,
    ) -> GetCommentsUseCase:
        """Provide get comments use case."""
        return GetCommentsUseCase(
            comment_service=comment_service,
            blog_service=blog_service,
            author_service=author_service,
            jwt_service=jwt_service,
        )

    @provide(scope=Scope.REQUEST)
    def get_count_comments_use_case(
        self, comment_service: CommentService, blog_service: BlogService
    ) -> CountCommentsUseCase:
        """Provide count comments use case."""
        return CountCommentsUseCase(
            comment_service=comment_service, blog_service=blog_service
        )

    @provide(scope=Scope.REQUEST)
    def get_update_comment_use_case(
        self, comment_service: CommentService, author_service: AuthorService
    ) -> UpdateCommentUseCase:
        """Provide update comment use case."""
        return UpdateCommentUseCase(
            comment_service=comment_service, author_service=author_service
        )

    @provide(scope=Scope.REQUEST)
    def get_delete_comment_use_case(
        self, comment_service: CommentService, user_service: UserService
    ) -> DeleteCommentUseCase:
        """Provide delete comment use case."""
        return DeleteCommentUseCase(
            comment_service=comment_service, user_service=user_service
        )

    @provide(scope=Scope.REQUEST)
    def get_moderate_comment_use_case(
        self, comment_service: CommentService, user_service: UserService
    ) -> ModerateCommentUseCase:
        """Provide moderate comment use case."""
        return ModerateCommentUseCase(
            comment_service=comment_service, user_service=user_service
        )

    # Like use cases
    @provide(scope=Scope.REQUEST)
    def get_toggle_like_use_case(self, like_service: LikeService) -> ToggleLikeUseCase:
        """Provide toggle like use case."""
        return ToggleLikeUseCase(like_service=like_service)

    # Attachment use cases
    @provide(scope=Scope.REQUEST)
    def get_upload_attachments_use_case(
        self, attachment_service: AttachmentService, user_service: UserService
    ) -> UploadAttachmentsUseCase:
        """Provide upload attachments use case."""
        return UploadAttachmentsUseCase(
            attachment_service=attachment_service, user_service=user_service
        )
