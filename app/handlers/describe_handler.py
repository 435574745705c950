from __future__ import annotations

from fastapi import APIRouter, Depends

from app.models.describe import DescriptionRequest, DescriptionResult
from app.services.description import DescriptionService, get_description_service

router = APIRouter(prefix="/api", tags=["describe"])


@router.post("/describe", response_model=DescriptionResult)
def describe(
    payload: DescriptionRequest | None = None,
    service: DescriptionService = Depends(get_description_service),
):
    """Describe the bottle in ``imageUrl`` without naming the brand."""
    payload = payload or DescriptionRequest()
    return DescriptionResult(description=service.describe(payload.image_url, payload.model))
