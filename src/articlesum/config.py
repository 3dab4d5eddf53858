"""Runtime configuration for articlesum."""

from __future__ import annotations

from functools import lru_cache
from typing import Literal, Optional

from pydantic_settings import BaseSettings, SettingsConfigDict

DEFAULT_SOURCE_URL = "https://medium.com/@spei/ai-without-machine-learning-47e90e5ae7c5"
DEFAULT_QUESTION = (
    "Give me a summary with maximum of 150 words. Add 3 hashtags at the end to publish on Twitter."
)


class Settings(BaseSettings):
    """Environment-backed configuration model."""

    model_config = SettingsConfigDict(env_prefix="articlesum_", env_file=".env", case_sensitive=False)

    environment: Literal["dev", "test", "prod"] = "dev"
    log_level: str = "INFO"

    # Summary run
    source_url: str = DEFAULT_SOURCE_URL
    question: str = DEFAULT_QUESTION

    # Bedrock
    bedrock_model_id: str = "anthropic.claude-v2"
    aws_region: str | None = None
    use_human_assistant_prompt: bool = True

    # Sampling
    max_tokens: int = 500
    temperature: float = 0.1
    top_p: float = 0.0
    top_k: int = 0
    stop_sequences: tuple[str, ...] | str = ()

    # Offline generation, used by tests and dry runs
    use_static_model: bool = False
    static_response: str = ""

    # Fetching
    fetch_timeout_seconds: float = 30.0
    max_download_size_mb: int = 25
    allow_error_status: bool = False
    chunk_size: int | None = None
    chunk_overlap: int = 0

    @property
    def stop_sequences_tuple(self) -> tuple[str, ...]:
        value = self.stop_sequences
        if isinstance(value, tuple):
            return value
        if isinstance(value, str):
            return tuple(p.strip() for p in value.split(",") if p.strip())
        return ()


@lru_cache(maxsize=1)
def _cached_settings() -> Settings:
    return Settings()


def get_settings(override: Optional[dict[str, object]] = None) -> Settings:
    """Return settings, optionally overriding values without mutating cache."""

    if override:
        return Settings(**override)
    return _cached_settings()
