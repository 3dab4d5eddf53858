"""Fetch an article, stuff it into one prompt and return the model's summary."""

from __future__ import annotations

import time
from dataclasses import dataclass, field
from typing import Sequence
from uuid import uuid4

from articlesum.chains.stuff import StuffDocumentsChain
from articlesum.config import DEFAULT_QUESTION, DEFAULT_SOURCE_URL, Settings, get_settings
from articlesum.fetching.service import DocumentFetcher, FetchConfig, HTMLDocumentFetcher
from articlesum.llms.base import LanguageModel
from articlesum.llms.bedrock import BedrockAnthropicModel, BedrockConfig
from articlesum.llms.observers import LoggingObserver
from articlesum.llms.static import StaticLanguageModel
from articlesum.metrics.observability import bind_correlation_id, clear_correlation_id, get_logger
from articlesum.models import GenerationOptions


@dataclass(frozen=True)
class SummaryConfig:
    """Inputs of one summary run."""

    source_url: str = DEFAULT_SOURCE_URL
    question: str = DEFAULT_QUESTION
    max_tokens: int = 500
    temperature: float = 0.1
    top_p: float = 0.0
    top_k: int = 0
    stop_sequences: Sequence[str] = field(default_factory=tuple)

    def generation_options(self) -> GenerationOptions:
        return GenerationOptions(
            max_tokens=self.max_tokens,
            temperature=self.temperature,
            top_p=self.top_p,
            top_k=self.top_k,
            stop_sequences=tuple(self.stop_sequences),
        )


class SummaryService:
    """Runs fetch, prompt assembly and generation once, in that order."""

    def __init__(
        self,
        fetcher: DocumentFetcher,
        chain: StuffDocumentsChain,
        config: SummaryConfig | None = None,
    ) -> None:
        self._fetcher = fetcher
        self._chain = chain
        self._config = config or SummaryConfig()
        self._logger = get_logger("summary")

    @property
    def config(self) -> SummaryConfig:
        return self._config

    def run(self) -> str:
        bind_correlation_id(uuid4().hex)
        try:
            return self._run()
        finally:
            clear_correlation_id()

    def _run(self) -> str:
        start = time.perf_counter()
        options = self._config.generation_options()
        documents = self._fetcher.fetch(self._config.source_url)
        self._logger.info(
            "summary.documents",
            url=self._config.source_url,
            document_count=len(documents),
        )
        text = self._chain.run(documents, self._config.question, options)
        self._logger.info(
            "summary.complete",
            url=self._config.source_url,
            completion_chars=len(text),
            duration_seconds=time.perf_counter() - start,
        )
        return text


def build_model(settings: Settings) -> LanguageModel:
    observers = [LoggingObserver()]
    if settings.use_static_model:
        return StaticLanguageModel(settings.static_response, observers=observers)
    return BedrockAnthropicModel(
        BedrockConfig(
            model_id=settings.bedrock_model_id,
            region_name=settings.aws_region,
            use_human_assistant_prompt=settings.use_human_assistant_prompt,
        ),
        observers=observers,
    )


def build_summary_service(
    settings: Settings | None = None,
    *,
    fetcher: DocumentFetcher | None = None,
    model: LanguageModel | None = None,
) -> SummaryService:
    """Wire the production components from settings."""

    settings = settings or get_settings()
    fetcher = fetcher or HTMLDocumentFetcher(
        FetchConfig(
            timeout_seconds=settings.fetch_timeout_seconds,
            max_download_size_mb=settings.max_download_size_mb,
            allow_error_status=settings.allow_error_status,
            chunk_size=settings.chunk_size,
            chunk_overlap=settings.chunk_overlap,
        ),
    )
    chain = StuffDocumentsChain(model or build_model(settings))
    config = SummaryConfig(
        source_url=settings.source_url,
        question=settings.question,
        max_tokens=settings.max_tokens,
        temperature=settings.temperature,
        top_p=settings.top_p,
        top_k=settings.top_k,
        stop_sequences=settings.stop_sequences_tuple,
    )
    return SummaryService(fetcher, chain, config)
