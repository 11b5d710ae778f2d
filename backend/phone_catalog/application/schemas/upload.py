"""Pydantic DTOs for image uploads."""

from pydantic import BaseModel


class UploadResponse(BaseModel):
    """Where the stored file can be fetched from."""

    url: str
    filename: str
    size: int
