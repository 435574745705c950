from __future__ import annotations

from fastapi import APIRouter

from app.models.catalog import BEER_BRANDS, CatalogResponse, ModelOption
from app.models.llm_models import DescriptionModel, GuessModel

router = APIRouter(prefix="/api", tags=["catalog"])


@router.get("/catalog", response_model=CatalogResponse)
def catalog():
    """Selectable description models, guess models and default brands."""
    return CatalogResponse(
        brands=list(BEER_BRANDS),
        description_models=[
            ModelOption(id=m.value, label=m.label, default=m is DescriptionModel.default())
            for m in DescriptionModel
        ],
        guess_models=[
            ModelOption(id=m.value, label=m.label, default=m is GuessModel.default())
            for m in GuessModel
        ],
    )
