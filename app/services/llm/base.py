from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Any, Sequence

from langchain_core.messages import BaseMessage


class LLMProvider(ABC):
    """Abstract interface for a hosted completion service."""

    name: str = "abstract"

    @abstractmethod
    def chat(
        self,
        messages: Sequence[BaseMessage],
        *,
        model: str,
        max_tokens: int,
    ) -> tuple[str, dict[str, Any]]:
        """Run one synchronous chat completion.

        Returns
        -------
        tuple[str, dict]
            assistant text, usage_metadata
        """
