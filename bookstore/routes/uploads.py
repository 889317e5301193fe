"""
Bookstore Backend — Upload Route Handlers
===========================================

What:  POST /upload (store images) and GET /uploads/{path} (serve them).

Request Flow (POST /upload):
    1. Client sends multipart/form-data with one or more file parts
    2. Every file part is streamed to the upload directory
    3. The URL of the last stored part is returned as {"imageUrl": ...}
    4. No file part at all → 400 "Failed to upload image"
"""

import logging
from typing import Optional

from fastapi import APIRouter, Depends, Request
from fastapi.responses import FileResponse
from starlette.datastructures import UploadFile

from bookstore.exceptions import FileStorageError
from bookstore.routes.deps import get_file_service
from bookstore.schemas.common import ErrorResponse, UploadResponse
from bookstore.services.file_service import FileService

logger = logging.getLogger(__name__)

router = APIRouter(tags=["Uploads"])


@router.post(
    "/upload",
    response_model=UploadResponse,
    responses={400: {"description": "Upload failed", "model": ErrorResponse}},
    summary="Upload an image",
)
async def upload_image(
    request: Request,
    file_service: FileService = Depends(get_file_service),
) -> UploadResponse:
    """
    The form is read directly instead of declaring a `File()` parameter: the
    client does not use a fixed field name, and every file part counts.
    """
    image_url: Optional[str] = None

    try:
        form = await request.form()
    except Exception as e:
        # Not multipart, or a broken multipart body
        logger.warning("Unreadable upload body: %s", str(e))
        raise FileStorageError(context={"error": str(e)})

    try:
        for _, value in form.multi_items():
            if isinstance(value, UploadFile):
                image_url = await file_service.store_upload(value)
    finally:
        await form.close()

    if image_url is None:
        raise FileStorageError(context={"reason": "no file part"})

    return UploadResponse(image_url=image_url)


@router.get(
    "/uploads/{file_path:path}",
    summary="Serve an uploaded image",
    responses={
        200: {"description": "Image file"},
        400: {"description": "Invalid path", "model": ErrorResponse},
        404: {"description": "File not found", "model": ErrorResponse},
    },
)
async def serve_upload(
    file_path: str,
    file_service: FileService = Depends(get_file_service),
) -> FileResponse:
    full_path = file_service.resolve(file_path)
    return FileResponse(
        path=str(full_path),
        headers={"Cache-Control": "public, max-age=86400"},
    )
