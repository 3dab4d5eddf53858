"""Web page fetching and text extraction."""

from articlesum.errors import FetchError

from .service import DocumentFetcher, FetchConfig, HTMLDocumentFetcher, fetch_documents

__all__ = [
    "DocumentFetcher",
    "FetchConfig",
    "FetchError",
    "HTMLDocumentFetcher",
    "fetch_documents",
]
