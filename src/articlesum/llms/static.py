"""Deterministic backend for tests and offline runs."""

from __future__ import annotations

from typing import Iterable, List

from articlesum.models import GenerationRequest, GenerationResult

from .base import GenerationObserver, LanguageModel


class StaticLanguageModel(LanguageModel):
    """Returns a fixed completion, or no generations when ``empty`` is set."""

    name = "static"

    def __init__(
        self,
        response: str = "",
        *,
        empty: bool = False,
        observers: Iterable[GenerationObserver] = (),
    ) -> None:
        super().__init__(observers)
        self._response = response
        self._empty = empty
        self.requests: List[GenerationRequest] = []

    def _generate(self, request: GenerationRequest) -> List[GenerationResult]:
        self.requests.append(request)
        if self._empty:
            return []
        return [GenerationResult(text=self._response)]
