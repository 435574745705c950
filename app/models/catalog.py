from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field

# Czech beer brands offered as guess candidates by default.
BEER_BRANDS: list[str] = [
    "branik",
    "plzen",
    "starobrno",
    "jezek",
    "bernard",
    "radegast",
    "zubr",
    "svijany",
    "proud",
    "birell",
    "budweiser",
    "zlaty bazant",
    "poutnik",
    "Kozel",
    "krusovice",
    "primator tchyne",
    "pardal",
    "primator",
    "nachmelena opice",
    "gambrinus",
]


class ModelOption(BaseModel):
    id: str
    label: str
    default: bool = False


class CatalogResponse(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    brands: list[str]
    description_models: list[ModelOption] = Field(alias="descriptionModels")
    guess_models: list[ModelOption] = Field(alias="guessModels")
