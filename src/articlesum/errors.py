"""Error hierarchy shared by the fetching and generation layers."""

from __future__ import annotations


class SummaryError(RuntimeError):
    """Base class for failures that abort a summary run."""


class FetchError(SummaryError):
    """Raised when a document cannot be downloaded or parsed."""


class AdapterError(SummaryError):
    """Raised when a model request cannot be serialized, sent or decoded."""


class EmptyResultError(AdapterError):
    """Raised when a model returns no generations."""


__all__ = ["AdapterError", "EmptyResultError", "FetchError", "SummaryError"]
