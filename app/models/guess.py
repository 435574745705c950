from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field


class GuessRequest(BaseModel):
    model_config = ConfigDict(populate_by_name=True, protected_namespaces=())

    description: str | None = None
    allowed_brands: list[str] | None = Field(default=None, alias="allowedBrands")
    model: str | None = None


class GuessResult(BaseModel):
    brand: str
    reasoning: str  # full model output, including the <guess> tag
