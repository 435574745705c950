"""Closed sets of selectable upstream models.

Clients send a short selector; each enum maps it to the full model name the
completion service expects. Unknown selectors are rejected at the boundary.
"""
from __future__ import annotations

from enum import Enum

from app.errors import UnsupportedModelError


class DescriptionModel(str, Enum):
    GPT_5_1 = "gpt-5.1"
    GEMINI_FLASH = "gemini-flash"
    GEMINI_PRO = "gemini-pro"

    @classmethod
    def default(cls) -> "DescriptionModel":
        return cls.GEMINI_FLASH

    @classmethod
    def from_selector(cls, selector: str | None) -> "DescriptionModel":
        if selector is None:
            return cls.default()
        try:
            return cls(selector)
        except ValueError as exc:
            raise UnsupportedModelError("description", selector) from exc

    @property
    def upstream_name(self) -> str:
        return _DESCRIPTION_UPSTREAM[self]

    @property
    def label(self) -> str:
        return _DESCRIPTION_LABELS[self]


_DESCRIPTION_UPSTREAM: dict[DescriptionModel, str] = {
    DescriptionModel.GPT_5_1: "openai/gpt-5.1",
    DescriptionModel.GEMINI_FLASH: "google/gemini-2.5-flash",
    DescriptionModel.GEMINI_PRO: "google/gemini-2.5-pro",
}

_DESCRIPTION_LABELS: dict[DescriptionModel, str] = {
    DescriptionModel.GPT_5_1: "GPT 5.1",
    DescriptionModel.GEMINI_FLASH: "Gemini Flash",
    DescriptionModel.GEMINI_PRO: "Gemini Pro",
}


class GuessModel(str, Enum):
    QWEN3_30B_A3B = "Qwen/Qwen3-30B-A3B-Instruct-2507:ovtsznhz12dzk34njrvose0m"

    @classmethod
    def default(cls) -> "GuessModel":
        return cls.QWEN3_30B_A3B

    @classmethod
    def from_selector(cls, selector: str | None) -> "GuessModel":
        if selector is None:
            return cls.default()
        try:
            return cls(selector)
        except ValueError as exc:
            raise UnsupportedModelError("guess", selector) from exc

    @property
    def upstream_name(self) -> str:
        return _GUESS_UPSTREAM[self]

    @property
    def label(self) -> str:
        return _GUESS_LABELS[self]


_GUESS_UPSTREAM: dict[GuessModel, str] = {
    GuessModel.QWEN3_30B_A3B: "Qwen/Qwen3-30B-A3B-Instruct-2507:ovtsznhz12dzk34njrvose0m",
}

_GUESS_LABELS: dict[GuessModel, str] = {
    GuessModel.QWEN3_30B_A3B: "Qwen/Qwen3-30B-A3B-Instruct-2507:ovtsznhz12dzk34njrvose0m",
}

