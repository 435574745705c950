from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field


class UploadTicketRequest(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    file_name: str | None = Field(default=None, alias="fileName")


class UploadTicket(BaseModel):
    """Presigned browser POST allowing one direct upload at ``key``."""

    url: str
    fields: dict[str, str]
    key: str
