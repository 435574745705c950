from __future__ import annotations

from datetime import datetime

from pydantic import BaseModel, ConfigDict, Field


class ImageRecord(BaseModel):
    """One image under the library prefix, re-derived on every listing."""

    model_config = ConfigDict(populate_by_name=True)

    id: str  # storage key
    src: str  # time-limited signed GET URL
    alt: str
    filename: str
    uploaded_at: datetime | None = Field(default=None, alias="uploadedAt")
    size: int = Field(0, ge=0)


class ImageListResponse(BaseModel):
    images: list[ImageRecord]


class DeleteImageRequest(BaseModel):
    key: str | None = None


class DeleteImageResponse(BaseModel):
    success: bool = True
