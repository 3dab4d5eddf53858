"""Shared value objects passed between fetching, prompting and generation."""

from __future__ import annotations

import math
from dataclasses import dataclass, field
from typing import Any, Mapping, Sequence

from langchain_core.documents import Document

from articlesum.errors import AdapterError

__all__ = ["Document", "GenerationOptions", "GenerationRequest", "GenerationResult"]


@dataclass(frozen=True)
class GenerationOptions:
    """Sampling parameters for a single generation call.

    Zero values mean "not set" and are left out of the request payload.
    """

    max_tokens: int = 0
    temperature: float = 0.0
    top_p: float = 0.0
    top_k: int = 0
    stop_sequences: Sequence[str] = ()

    def __post_init__(self) -> None:
        if self.max_tokens < 0:
            raise AdapterError(f"max_tokens must be >= 0, got {self.max_tokens}")
        if self.top_k < 0:
            raise AdapterError(f"top_k must be >= 0, got {self.top_k}")
        for name in ("temperature", "top_p"):
            value = getattr(self, name)
            if not math.isfinite(value) or value < 0.0:
                raise AdapterError(f"{name} must be a finite value >= 0, got {value}")
        object.__setattr__(self, "stop_sequences", tuple(self.stop_sequences))


@dataclass(frozen=True)
class GenerationRequest:
    """Prompt plus options, built once per call."""

    prompt: str
    options: GenerationOptions = field(default_factory=GenerationOptions)

    def __post_init__(self) -> None:
        if not self.prompt:
            raise AdapterError("prompt must be a non-empty string")


@dataclass(frozen=True)
class GenerationResult:
    """Text returned by a model for one request."""

    text: str
    raw: Mapping[str, Any] = field(default_factory=dict, compare=False)
