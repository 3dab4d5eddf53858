"""Generation observers."""

from __future__ import annotations

from typing import Sequence

from articlesum.metrics.observability import get_logger
from articlesum.models import GenerationResult


class LoggingObserver:
    """Logs the start and end of every model call."""

    def __init__(self, name: str = "llms") -> None:
        self._logger = get_logger(name)

    def on_start(self, prompts: Sequence[str]) -> None:
        self._logger.info(
            "generation.start",
            prompt_count=len(prompts),
            prompt_chars=sum(len(p) for p in prompts),
        )

    def on_end(self, results: Sequence[GenerationResult]) -> None:
        self._logger.info(
            "generation.end",
            result_count=len(results),
            completion_chars=sum(len(r.text) for r in results),
        )
