from __future__ import annotations

import logging
from typing import Any, Sequence

from langchain_core.messages import BaseMessage
from langchain_openai import ChatOpenAI

from .base import LLMProvider

logger = logging.getLogger(__name__)


class OpenAICompatibleProvider(LLMProvider):
    """Chat completions against any OpenAI-compatible endpoint."""

    def __init__(
        self,
        name: str,
        *,
        base_url: str,
        api_key: str,
        default_headers: dict[str, str] | None = None,
    ) -> None:
        self.name = name
        self._base_url = base_url
        self._api_key = api_key
        self._default_headers = default_headers
        self._models: dict[tuple[str, int], ChatOpenAI] = {}

    def _llm(self, model: str, max_tokens: int) -> ChatOpenAI:
        cache_key = (model, max_tokens)
        llm = self._models.get(cache_key)
        if llm is None:
            llm = ChatOpenAI(
                model=model,
                api_key=self._api_key,
                base_url=self._base_url,
                default_headers=self._default_headers,
                max_tokens=max_tokens,
                max_retries=0,
            )
            self._models[cache_key] = llm
        return llm

    def chat(
        self,
        messages: Sequence[BaseMessage],
        *,
        model: str,
        max_tokens: int,
    ) -> tuple[str, dict[str, Any]]:
        output = self._llm(model, max_tokens).invoke(list(messages))

        content = output.content
        if isinstance(content, list):
            # Some providers return content parts instead of a plain string
            content = "".join(
                part.get("text", "") if isinstance(part, dict) else str(part) for part in content
            )

        meta: dict[str, Any] = {
            "provider": self.name,
            "model": model,
            "max_tokens": max_tokens,
            **(output.usage_metadata or {}),
        }
        logger.debug("Completion from %s/%s: %s", self.name, model, meta)
        return content, meta
