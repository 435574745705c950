from __future__ import annotations

from fastapi import APIRouter, Depends

from app.models.guess import GuessRequest, GuessResult
from app.services.guess import GuessService, get_guess_service

router = APIRouter(prefix="/api", tags=["guess"])


@router.post("/guess", response_model=GuessResult)
def guess(
    payload: GuessRequest | None = None,
    service: GuessService = Depends(get_guess_service),
):
    """Pick one of ``allowedBrands`` for the description."""
    payload = payload or GuessRequest()
    return service.guess(payload.description, payload.allowed_brands, payload.model)
