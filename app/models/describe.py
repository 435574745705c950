from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field


class DescriptionRequest(BaseModel):
    model_config = ConfigDict(populate_by_name=True, protected_namespaces=())

    image_url: str | None = Field(default=None, alias="imageUrl")
    model: str | None = None


class DescriptionResult(BaseModel):
    description: str
