"""Backend-independent language model contract."""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Iterable, List, Protocol, Sequence

from articlesum.errors import EmptyResultError
from articlesum.metrics.observability import PipelineMetrics, TimedSection
from articlesum.models import GenerationOptions, GenerationRequest, GenerationResult


class GenerationObserver(Protocol):
    """Receives synchronous notifications around each model call."""

    def on_start(self, prompts: Sequence[str]) -> None:
        """Called once, right before the request is dispatched."""

    def on_end(self, results: Sequence[GenerationResult]) -> None:
        """Called once, right after a successful result."""


class LanguageModel(ABC):
    """Base class for text-completion backends.

    Subclasses implement :meth:`_generate`; observer notification, metrics
    and the single-result :meth:`generate` helper live here.
    """

    name = "base"

    def __init__(self, observers: Iterable[GenerationObserver] = ()) -> None:
        self._observers: tuple[GenerationObserver, ...] = tuple(observers)

    @property
    def observers(self) -> tuple[GenerationObserver, ...]:
        return self._observers

    def generate(self, prompt: str, options: GenerationOptions | None = None) -> GenerationResult:
        results = self.generate_all([prompt], options)
        if not results:
            raise EmptyResultError("no response")
        return results[0]

    def generate_all(
        self,
        prompts: Sequence[str],
        options: GenerationOptions | None = None,
    ) -> List[GenerationResult]:
        options = options or GenerationOptions()
        request = GenerationRequest(prompt=prompts[0] if prompts else "", options=options)
        for observer in self._observers:
            observer.on_start(prompts)

        with TimedSection(PipelineMetrics.observe_generation):
            try:
                results = list(self._generate(request))
            except Exception:
                PipelineMetrics.record_generation_failure(self.name)
                raise

        for observer in self._observers:
            observer.on_end(results)
        return results

    def get_num_tokens(self, text: str) -> int:
        """Rough token count, four characters per token."""
        return len(text) // 4

    @abstractmethod
    def _generate(self, request: GenerationRequest) -> Sequence[GenerationResult]:
        """Send ``request`` to the backend and return its generations."""
