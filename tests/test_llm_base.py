"""Tests for the shared language model behaviour."""

from __future__ import annotations

from typing import Sequence

import pytest

from articlesum.llms import AdapterError, EmptyResultError, LanguageModel, StaticLanguageModel
from articlesum.models import GenerationRequest, GenerationResult


class RecordingObserver:
    def __init__(self) -> None:
        self.events: list[tuple[str, object]] = []

    def on_start(self, prompts: Sequence[str]) -> None:
        self.events.append(("start", list(prompts)))

    def on_end(self, results: Sequence[GenerationResult]) -> None:
        self.events.append(("end", [r.text for r in results]))


class FailingModel(LanguageModel):
    name = "failing"

    def __init__(self, observers=()) -> None:
        super().__init__(observers)
        self.calls = 0

    def _generate(self, request: GenerationRequest) -> Sequence[GenerationResult]:
        self.calls += 1
        raise AdapterError("connection reset")


def test_observer_notified_once_before_and_after() -> None:
    observer = RecordingObserver()
    model = StaticLanguageModel("summary", observers=[observer])

    model.generate("prompt")

    assert observer.events == [("start", ["prompt"]), ("end", ["summary"])]


def test_observer_end_skipped_on_error() -> None:
    observer = RecordingObserver()
    model = FailingModel(observers=[observer])

    with pytest.raises(AdapterError, match="connection reset"):
        model.generate("prompt")

    assert observer.events == [("start", ["prompt"])]
    assert model.calls == 1


def test_zero_generations_raise_empty_result() -> None:
    model = StaticLanguageModel(empty=True)

    assert model.generate_all(["prompt"]) == []
    with pytest.raises(EmptyResultError, match="no response"):
        model.generate("prompt")


def test_static_model_records_requests() -> None:
    model = StaticLanguageModel("fixed")

    result = model.generate("prompt")

    assert result.text == "fixed"
    assert [request.prompt for request in model.requests] == ["prompt"]


def test_get_num_tokens_uses_four_characters_per_token() -> None:
    model = StaticLanguageModel()

    assert model.get_num_tokens("") == 0
    assert model.get_num_tokens("abcdefgh") == 2
    assert model.get_num_tokens("abcdefghij") == 2


def test_static_model_returns_empty_response_unchanged() -> None:
    model = StaticLanguageModel("")

    assert model.generate("prompt").text == ""
