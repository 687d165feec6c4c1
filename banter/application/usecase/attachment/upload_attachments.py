"""Upload attachments use case."""

from pydantic import BaseModel, Field

from banter.application.usecase.base import CamelModel
from banter.application.usecase.comment.views import AttachmentItem
from banter.domain.service import AttachmentService, UploadedFile, UserService
from banter.domain.value import UserId, parse_uuid


class UploadAttachmentsRequest(BaseModel):
    """Upload attachments request."""

    user_id: str  # Uploading user
    files: list[UploadedFile] = Field(default_factory=list)


class UploadAttachmentsResponse(CamelModel):
    """Upload attachments response."""

    files: list[AttachmentItem]


class UploadAttachmentsUseCase:
    """Use case for storing files to be attached to a comment."""

    def __init__(
        self, attachment_service: AttachmentService, user_service: UserService
    ) -> None:
        """Initialize upload attachments use case.

        Args:
            attachment_service: Attachment domain service
            user_service: User domain service
        """
        self.attachment_service = attachment_service
        self.user_service = user_service

    async def execute(
        self, request: UploadAttachmentsRequest
    ) -> UploadAttachmentsResponse:
        """Execute upload flow.

        Returns:
            Attachment records to submit with the comment

        Raises:
            NotFoundError: If the uploading user doesn't exist
            InvalidArgumentError: If no files were given or one is too large
            ServiceUnavailableError: If object storage fails
        """
        await self.user_service.get_by_id(UserId(parse_uuid(request.user_id, "user")))
        attachments = await self.attachment_service.upload_files(request.files)
        return UploadAttachmentsResponse(
            files=[AttachmentItem.from_attachment(a) for a in attachments]
        )
