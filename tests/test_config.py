from __future__ import annotations

import pytest

from articlesum.config import DEFAULT_QUESTION, DEFAULT_SOURCE_URL, Settings, get_settings


def test_defaults_match_default_run():
    settings = get_settings({"environment": "test"})
    assert settings.source_url == DEFAULT_SOURCE_URL
    assert settings.question == DEFAULT_QUESTION
    assert settings.bedrock_model_id == "anthropic.claude-v2"
    assert settings.max_tokens == 500
    assert settings.temperature == 0.1


def test_override_does_not_touch_cache():
    overridden = get_settings({"bedrock_model_id": "anthropic.claude-instant-v1"})
    assert overridden.bedrock_model_id == "anthropic.claude-instant-v1"
    assert get_settings() is get_settings()


def test_environment_variables_are_read(monkeypatch: pytest.MonkeyPatch):
    monkeypatch.setenv("ARTICLESUM_SOURCE_URL", "https://example.com/post")
    monkeypatch.setenv("ARTICLESUM_MAX_TOKENS", "250")
    settings = Settings()
    assert settings.source_url == "https://example.com/post"
    assert settings.max_tokens == 250


def test_stop_sequences_accept_comma_separated_string():
    settings = get_settings({"stop_sequences": "###, END"})
    assert settings.stop_sequences_tuple == ("###", "END")
