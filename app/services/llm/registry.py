from __future__ import annotations

from functools import lru_cache
from typing import Callable

from app.config import get_settings

from .base import LLMProvider
from .openai_compatible import OpenAICompatibleProvider


def _openrouter() -> LLMProvider:
    settings = get_settings()
    return OpenAICompatibleProvider(
        "openrouter",
        base_url=settings.openrouter_base_url,
        api_key=settings.openrouter_api_key,
    )


def _pinference() -> LLMProvider:
    settings = get_settings()
    headers = {"X-Prime-Team-ID": settings.pinference_team_id} if settings.pinference_team_id else None
    return OpenAICompatibleProvider(
        "pinference",
        base_url=settings.pinference_base_url,
        api_key=settings.pinference_api_key,
        default_headers=headers,
    )


_PROVIDERS: dict[str, Callable[[], LLMProvider]] = {
    "openrouter": _openrouter,  # vision descriptions
    "pinference": _pinference,  # brand guessing
}


@lru_cache()
def get_provider(name: str) -> LLMProvider:
    provider_key = name.lower()
    if provider_key not in _PROVIDERS:
        raise ValueError(f"Unsupported LLM provider: {provider_key}")
    return _PROVIDERS[provider_key]()
