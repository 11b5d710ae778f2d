"""Image upload endpoint: stores a multipart file and returns its public URL."""

import logging

from fastapi import APIRouter, Depends, File, HTTPException, Response, UploadFile, status

from phone_catalog.application.links import LinkBuilder
from phone_catalog.application.schemas.upload import UploadResponse
from phone_catalog.config import get_settings
from phone_catalog.infrastructure.dependencies import get_file_storage
from phone_catalog.infrastructure.storage.local_file_storage import LocalFileStorage
from phone_catalog.presentation.api.links import get_link_builder

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/upload", tags=["Upload"])

UPLOADS_PATH = "/uploads"


@router.post("", response_model=UploadResponse, status_code=status.HTTP_201_CREATED)
async def upload_image(
    image: UploadFile | None = File(None),
    storage: LocalFileStorage = Depends(get_file_storage),
    links: LinkBuilder = Depends(get_link_builder),
) -> UploadResponse:
    """Upload one image (multipart field ``image``)."""
    if image is None:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail="No file uploaded")

    content = await image.read()
    if not content:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail="No file uploaded")

    max_bytes = get_settings().max_upload_size_mb * 1024 * 1024
    if len(content) > max_bytes:
        raise HTTPException(
            status_code=status.HTTP_413_REQUEST_ENTITY_TOO_LARGE,
            detail=f"File exceeds {get_settings().max_upload_size_mb} MB",
        )

    stored = await storage.store_file(content, image.filename or "upload")
    return UploadResponse(
        url=links.absolute(f"{UPLOADS_PATH}/{stored.filename}"),
        filename=stored.filename,
        size=stored.file_size,
    )


@router.options("", status_code=status.HTTP_204_NO_CONTENT)
async def upload_options() -> Response:
    return Response(status_code=status.HTTP_204_NO_CONTENT, headers={"Allow": "POST, OPTIONS"})
