"""Download web pages and turn them into plain-text documents."""

from __future__ import annotations

import re
import tempfile
import unicodedata
from dataclasses import dataclass
from pathlib import Path
from typing import Dict, List, Protocol, Sequence

import httpx
from bs4 import UnicodeDammit
from langchain_community.document_loaders import BSHTMLLoader
from langchain_core.documents import Document
from langchain_text_splitters import RecursiveCharacterTextSplitter

from articlesum.errors import FetchError
from articlesum.metrics.observability import PipelineMetrics, TimedSection, get_logger


@dataclass(frozen=True)
class FetchConfig:
    """Configuration for document fetching."""

    timeout_seconds: float = 30.0
    max_download_size_mb: int = 25
    allow_error_status: bool = False
    encoding: str = "utf-8"
    chunk_size: int | None = None
    chunk_overlap: int = 0


class DocumentFetcher(Protocol):
    """Protocol for fetcher implementations."""

    def fetch(self, url: str) -> Sequence[Document]:
        """Download ``url`` and return its text as documents."""


def _normalize_text(raw: str) -> str:
    normalized = unicodedata.normalize("NFKC", raw)
    normalized = normalized.replace("\u00a0", " ")
    normalized = re.sub(r"\s+", " ", normalized)
    return normalized.strip()


def _validate_url(url: str) -> httpx.URL:
    try:
        parsed = httpx.URL(url)
    except Exception as exc:
        raise FetchError(f"Invalid URL: {url}") from exc
    if parsed.scheme not in ("http", "https") or not parsed.host:
        raise FetchError(f"Invalid URL: {url}")
    return parsed


class HTMLDocumentFetcher:
    """Fetch a page over HTTP and extract its text with ``BSHTMLLoader``."""

    def __init__(self, config: FetchConfig | None = None, client: httpx.Client | None = None) -> None:
        self._config = config or FetchConfig()
        self._client = client
        self._logger = get_logger("fetching")
        self._splitter: RecursiveCharacterTextSplitter | None = None
        if self._config.chunk_size:
            self._splitter = RecursiveCharacterTextSplitter(
                chunk_size=self._config.chunk_size,
                chunk_overlap=self._config.chunk_overlap,
                add_start_index=True,
            )

    def fetch(self, url: str) -> Sequence[Document]:
        _validate_url(url)
        self._logger.info("fetch.start", url=url)
        with TimedSection(PipelineMetrics.observe_fetch_latency) as timer:
            with tempfile.TemporaryDirectory() as tmpdir:
                dest = Path(tmpdir) / "page.html"
                status_code, charset = self._download(url, dest)
                documents = self._load(url, dest, status_code, charset)

        PipelineMetrics.observe_fetched_documents(len(documents))
        self._logger.info(
            "fetch.complete",
            url=url,
            status_code=status_code,
            document_count=len(documents),
            duration_seconds=timer.duration,
        )
        return documents

    def _download(self, url: str, dest: Path) -> tuple[int, str | None]:
        size_limit = self._config.max_download_size_mb * 1024 * 1024
        client = self._client or httpx.Client()
        try:
            with client.stream("GET", url, timeout=self._config.timeout_seconds, follow_redirects=True) as resp:
                if not resp.is_success and not self._config.allow_error_status:
                    raise FetchError(f"Download failed: {url} (HTTP {resp.status_code})")
                bytes_written = 0
                with dest.open("wb") as f:
                    for chunk in resp.iter_bytes():
                        if chunk:
                            f.write(chunk)
                            bytes_written += len(chunk)
                            if bytes_written > size_limit:
                                raise FetchError(f"Download too large: {url}")
                return resp.status_code, resp.charset_encoding
        except FetchError:
            raise
        except httpx.HTTPError as exc:
            raise FetchError(f"Failed downloading {url}: {exc}") from exc
        finally:
            if self._client is None:
                client.close()

    def _transcode(self, url: str, path: Path, charset: str | None) -> None:
        # Header charset first, then BOM and <meta> declarations, then guessing.
        dammit = UnicodeDammit(
            path.read_bytes(),
            known_definite_encodings=[charset] if charset else [],
            is_html=True,
        )
        if dammit.unicode_markup is None:
            raise FetchError(f"Failed to decode HTML from {url}")
        path.write_text(dammit.unicode_markup, encoding=self._config.encoding)

    def _load(self, url: str, path: Path, status_code: int, charset: str | None) -> List[Document]:
        self._transcode(url, path, charset)
        try:
            loader = BSHTMLLoader(
                str(path),
                open_encoding=self._config.encoding,
                bs_kwargs={"features": "html.parser"},
                get_text_separator=" ",
            )
            loaded = loader.load()
        except Exception as exc:  # parser specific errors
            raise FetchError(f"Failed to parse HTML from {url}: {exc}") from exc

        documents: List[Document] = []
        for document in loaded:
            metadata: Dict[str, object] = dict(document.metadata)
            metadata["source"] = url
            metadata["status_code"] = status_code
            documents.append(Document(page_content=_normalize_text(document.page_content), metadata=metadata))
        if self._splitter is not None:
            return list(self._splitter.split_documents(documents))
        return documents


def fetch_documents(url: str, *, config: FetchConfig | None = None) -> Sequence[Document]:
    """Convenience helper for tests and ad-hoc fetching."""

    return HTMLDocumentFetcher(config=config).fetch(url)
