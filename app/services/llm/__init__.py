from __future__ import annotations

from .base import LLMProvider
from .openai_compatible import OpenAICompatibleProvider
from .registry import get_provider

__all__ = [
    "LLMProvider",
    "OpenAICompatibleProvider",
    "get_provider",
]
