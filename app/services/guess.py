"""Brand guessing from a bottle description and a candidate list."""
from __future__ import annotations

import logging
import re
from functools import lru_cache
from typing import Sequence

from langchain_core.messages import HumanMessage, SystemMessage

from app.config import get_settings
from app.errors import GuessGenerationError, MissingBrandsError, MissingFieldError
from app.models.guess import GuessResult
from app.models.llm_models import GuessModel
from app.services.llm import LLMProvider, get_provider

logger = logging.getLogger(__name__)

UNKNOWN_BRAND = "Unknown"

SYSTEM_PROMPT = (
    "You are a Czech beer brand classifier. For each example, shortly reason first, "
    "then provide the final brand inside <guess>...</guess> tags."
)

USER_PROMPT_TEMPLATE = (
    "Identify the most likely Czech beer brand from this bottle description. "
    "Think step-by-step, then put your final answer inside <guess>...</guess>.\n"
    "Description: {description}\n"
    "Candidate brands (choose one exact name): {brands}"
)

_GUESS_TAG_RE = re.compile(r"<guess>(.*?)</guess>", re.IGNORECASE | re.DOTALL)


def extract_guess(text: str) -> str:
    """Return the trimmed content of the first ``<guess>`` span, or ``Unknown``.

    The result is not checked against the candidate list.
    """

    match = _GUESS_TAG_RE.search(text)
    if match is None:
        return UNKNOWN_BRAND
    return match.group(1).strip()


class GuessService:
    def __init__(self, provider: LLMProvider, *, max_tokens: int = 10000) -> None:
        self._provider = provider
        self._max_tokens = max_tokens

    def guess(
        self,
        description: str | None,
        allowed_brands: Sequence[str] | None,
        model: str | None = None,
    ) -> GuessResult:
        logger.info(
            "Guess request received: has_description=%s description_length=%d allowed_brands=%d model=%s",
            bool(description),
            len(description or ""),
            len(allowed_brands or []),
            model or GuessModel.default().value,
        )

        if not description:
            raise MissingFieldError("description")
        if not allowed_brands:
            raise MissingBrandsError()
        selected = GuessModel.from_selector(model)

        messages = [
            SystemMessage(content=SYSTEM_PROMPT),
            HumanMessage(
                content=USER_PROMPT_TEMPLATE.format(
                    description=description,
                    brands=", ".join(allowed_brands),
                )
            ),
        ]

        try:
            text, _ = self._provider.chat(
                messages,
                model=selected.upstream_name,
                max_tokens=self._max_tokens,
            )
        except Exception as exc:
            logger.exception("Guess request failed with %s: %s", selected.value, exc)
            raise GuessGenerationError() from exc

        brand = extract_guess(text)
        logger.info(
            "Guess request completed: model=%s brand=%s reasoning_length=%d",
            selected.value,
            brand,
            len(text),
        )
        return GuessResult(brand=brand, reasoning=text)


@lru_cache()
def get_guess_service() -> GuessService:
    settings = get_settings()
    return GuessService(get_provider("pinference"), max_tokens=settings.guess_max_tokens)
