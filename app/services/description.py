"""Vision-model descriptions of beer bottle photos."""
from __future__ import annotations

import logging
from functools import lru_cache

from langchain_core.messages import HumanMessage
from pydantic import AnyUrl, TypeAdapter

from app.config import get_settings
from app.errors import DescriptionGenerationError, MissingFieldError
from app.models.llm_models import DescriptionModel
from app.services.llm import LLMProvider, get_provider

logger = logging.getLogger(__name__)

DESCRIPTION_PROMPT = """
Describe this beer bottle for brand identification only.
Focus strictly on bottle appearance, logo style, visible text, label composition, colors, symbols, and other distinctive packaging features.
Do not mention taste or aroma. Keep it concise and factual.
Do not mention any text that is written in the bottle that would indicate the brand name.
Focus on distinctive features like logo, colors, symbols or animals on the bottle.
Do not output any text not related to the visual description of the bottle. Eq. Based on the image, here is...
Do not format the text. Output plain text without markdown, lists, or extra formatting.
Describe the features of the bottle in grand detail.
"""

_URL_ADAPTER = TypeAdapter(AnyUrl)


class DescriptionService:
    """Asks a vision model for a packaging-only description of one image."""

    def __init__(self, provider: LLMProvider, *, max_tokens: int = 8192) -> None:
        self._provider = provider
        self._max_tokens = max_tokens

    def describe(self, image_url: str | None, model: str | None = None) -> str:
        if not image_url:
            raise MissingFieldError("imageUrl")
        selected = DescriptionModel.from_selector(model)

        try:
            # Validate only; signed URLs are forwarded byte-for-byte
            _URL_ADAPTER.validate_python(image_url)
            message = HumanMessage(
                content=[
                    {"type": "text", "text": DESCRIPTION_PROMPT},
                    {"type": "image_url", "image_url": {"url": image_url}},
                ]
            )
            text, meta = self._provider.chat(
                [message],
                model=selected.upstream_name,
                max_tokens=self._max_tokens,
            )
        except Exception as exc:
            logger.exception("Failed to generate description with %s: %s", selected.value, exc)
            raise DescriptionGenerationError() from exc

        logger.info(
            "Generated description with %s (%d chars, usage=%s)",
            selected.value,
            len(text),
            {k: meta[k] for k in ("input_tokens", "output_tokens") if k in meta},
        )
        return text


@lru_cache()
def get_description_service() -> DescriptionService:
    settings = get_settings()
    return DescriptionService(get_provider("openrouter"), max_tokens=settings.description_max_tokens)
