"""Attachment upload routes."""

from dishka.integrations.fastapi import DishkaRoute, FromDishka
from fastapi import APIRouter, Cookie, File, Header, UploadFile, status

from banter.application.usecase.attachment import (
    UploadAttachmentsRequest,
    UploadAttachmentsResponse,
    UploadAttachmentsUseCase,
)
from banter.config import StorageSettings
from banter.domain.error import InvalidArgumentError
from banter.domain.service import JWTService, UploadedFile
from banter.interface.api.auth import require_user_id

router = APIRouter(prefix="/uploads", tags=["uploads"], route_class=DishkaRoute)


async def read_upload(upload: UploadFile, max_size_bytes: int) -> UploadedFile:
    """Read an uploaded file, refusing to buffer more than the size limit.

    Raises:
        InvalidArgumentError: If the file is larger than ``max_size_bytes``
    """
    filename = upload.filename or "file"
    too_large = InvalidArgumentError(
        f"File {filename} is too large (max {max_size_bytes // (1024 * 1024)}MB)"
    )
    if upload.size is not None and upload.size > max_size_bytes:
        raise too_large

    data = await upload.read(max_size_bytes + 1)
    if len(data) > max_size_bytes:
        raise too_large

    return UploadedFile(
        filename=filename,
        content_type=upload.content_type or "application/octet-stream",
        data=data,
    )


@router.post(
    "/comment-files",
    response_model=UploadAttachmentsResponse,
    status_code=status.HTTP_201_CREATED,
)
async def upload_comment_files(
    upload_use_case: FromDishka[UploadAttachmentsUseCase],
    jwt_service: FromDishka[JWTService],
    storage_settings: FromDishka[StorageSettings],
    files: list[UploadFile] | None = File(default=None),
    auth_token: str | None = Cookie(default=None),
    authorization: str | None = Header(default=None),
) -> UploadAttachmentsResponse:
    """Store files to attach to a comment.

    Returns attachment records the client submits with the comment.
    """
    user_id = require_user_id(jwt_service, auth_token, authorization)

    uploaded = [
        await read_upload(f, storage_settings.max_file_size_bytes)
        for f in files or []
    ]
    return await upload_use_case.execute(
        UploadAttachmentsRequest(user_id=user_id, files=uploaded)
    )
