"""Tests for the summary orchestration."""

from __future__ import annotations

from typing import Sequence

import pytest
from langchain_core.documents import Document

from articlesum.chains import StuffDocumentsChain
from articlesum.config import Settings
from articlesum.errors import EmptyResultError, FetchError
from articlesum.llms import BedrockAnthropicModel, StaticLanguageModel
from articlesum.services import SummaryConfig, SummaryService, build_model, build_summary_service


class StubFetcher:
    def __init__(self, documents: Sequence[Document] | None = None, error: Exception | None = None) -> None:
        self.documents = list(documents or [Document(page_content="Article body.")])
        self.error = error
        self.urls: list[str] = []

    def fetch(self, url: str) -> Sequence[Document]:
        self.urls.append(url)
        if self.error is not None:
            raise self.error
        return self.documents


def test_run_returns_model_text() -> None:
    fetcher = StubFetcher()
    model = StaticLanguageModel("A summary. #a #b #c")
    service = SummaryService(fetcher, StuffDocumentsChain(model), SummaryConfig(source_url="https://example.com/a"))

    assert service.run() == "A summary. #a #b #c"
    assert fetcher.urls == ["https://example.com/a"]
    options = model.requests[0].options
    assert options.max_tokens == 500
    assert options.temperature == 0.1
    assert "Article body." in model.requests[0].prompt


def test_zero_generations_fail_with_empty_result() -> None:
    service = SummaryService(StubFetcher(), StuffDocumentsChain(StaticLanguageModel(empty=True)))

    with pytest.raises(EmptyResultError):
        service.run()


def test_fetch_failure_stops_before_generation() -> None:
    model = StaticLanguageModel("unused")
    service = SummaryService(StubFetcher(error=FetchError("Download failed")), StuffDocumentsChain(model))

    with pytest.raises(FetchError):
        service.run()
    assert model.requests == []


def test_build_summary_service_uses_settings() -> None:
    settings = Settings(
        environment="test",
        source_url="https://example.com/b",
        question="Give me one sentence.",
        max_tokens=42,
        temperature=0.5,
        use_static_model=True,
        static_response="one sentence",
    )
    fetcher = StubFetcher()

    service = build_summary_service(settings, fetcher=fetcher)

    assert service.config.source_url == "https://example.com/b"
    assert service.config.question == "Give me one sentence."
    assert service.run() == "one sentence"
    assert fetcher.urls == ["https://example.com/b"]


def test_build_model_defaults_to_bedrock() -> None:
    model = build_model(Settings(environment="test"))

    assert isinstance(model, BedrockAnthropicModel)
    assert len(model.observers) == 1
