from __future__ import annotations

import pytest
from langchain_core.messages import HumanMessage, SystemMessage

from app.errors import GuessGenerationError, MissingBrandsError, MissingFieldError, UnsupportedModelError
from app.models.llm_models import GuessModel
from app.services.guess import GuessService, extract_guess

from .conftest import FakeProvider


@pytest.mark.parametrize(
    "text, expected",
    [
        ("Reasoning... <guess>bernard</guess>", "bernard"),
        ("<GUESS>  Kozel \n</Guess>", "Kozel"),
        ("<guess>zlaty\nbazant</guess>", "zlaty\nbazant"),
        ("<guess>plzen</guess> then <guess>radegast</guess>", "plzen"),
        ("I think it is bernard.", "Unknown"),
        ("<guess>bernard", "Unknown"),
        ("<guess></guess>", ""),
    ],
)
def test_extract_guess(text, expected):
    assert extract_guess(text) == expected


def test_extract_guess_does_not_check_candidates():
    assert extract_guess("<guess>Heineken</guess>") == "Heineken"


def test_guess_builds_prompt_from_description_and_brands():
    provider = FakeProvider(reply="Reasoning... <guess>bernard</guess>")
    service = GuessService(provider, max_tokens=10000)

    result = service.guess(
        "Green bottle, gold foil cap, two lions crest",
        ["gambrinus", "bernard"],
    )

    assert result.brand == "bernard"
    assert result.reasoning == "Reasoning... <guess>bernard</guess>"
    (call,) = provider.calls
    assert call["model"] == GuessModel.default().upstream_name
    assert call["max_tokens"] == 10000
    system, user = call["messages"]
    assert isinstance(system, SystemMessage)
    assert "<guess>...</guess>" in system.content
    assert isinstance(user, HumanMessage)
    assert "Description: Green bottle, gold foil cap, two lions crest" in user.content
    assert "Candidate brands (choose one exact name): gambrinus, bernard" in user.content


def test_guess_without_tag_keeps_reasoning():
    reply = "The crest could belong to several breweries; I cannot decide."
    result = GuessService(FakeProvider(reply=reply)).guess("Brown bottle", ["branik"])

    assert result.brand == "Unknown"
    assert result.reasoning == reply


def test_guess_validation_order():
    provider = FakeProvider()
    service = GuessService(provider)

    with pytest.raises(MissingFieldError, match="description is required"):
        service.guess("", [], model="bogus")
    with pytest.raises(MissingBrandsError):
        service.guess("Brown bottle", [], model="bogus")
    with pytest.raises(UnsupportedModelError, match="unsupported guess model"):
        service.guess("Brown bottle", ["branik"], model="bogus")
    assert provider.calls == []


def test_guess_upstream_failure():
    service = GuessService(FakeProvider(error=TimeoutError("upstream hung up")))

    with pytest.raises(GuessGenerationError) as excinfo:
        service.guess("Brown bottle", ["branik"])
    assert excinfo.value.message == "Failed to guess beer"


def test_every_guess_model_is_mapped():
    for model in GuessModel:
        assert model.upstream_name
        assert model.label == model.value
