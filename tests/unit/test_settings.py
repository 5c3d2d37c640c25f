"""Unit tests for application settings."""

import pytest
from pydantic import ValidationError

from ragbot.config.settings import Settings

pytestmark = pytest.mark.unit


def _settings(**overrides):
    return Settings(_env_file=None, **overrides)


class TestSettings:
    def test_defaults(self, monkeypatch):
        for name in ("CHUNK_SIZE", "CHUNK_OVERLAP", "TOP_K_RESULTS", "EMPTY_CORPUS_POLICY"):
            monkeypatch.delenv(name, raising=False)
        settings = _settings()

        assert settings.chunk_size == 1000
        assert settings.chunk_overlap == 200
        assert settings.top_k_results == 4
        assert settings.ingest_batch_size == 20
        assert settings.ingest_batch_delay_seconds == 1.0
        assert settings.empty_corpus_policy == "fail"

    def test_environment_overrides(self, monkeypatch):
        monkeypatch.setenv("CHUNK_SIZE", "500")
        monkeypatch.setenv("CHUNK_OVERLAP", "50")
        monkeypatch.setenv("SCHEDULING_LINK", "https://cal.example.com/me")

        settings = _settings()

        assert settings.chunk_size == 500
        assert settings.chunk_overlap == 50
        assert settings.scheduling_link == "https://cal.example.com/me"

    def test_secrets_sanitized(self):
        settings = _settings(google_api_key="\ufeffAIzaKey \n", airtable_token="\ufeff patToken ")
        assert settings.google_api_key == "AIzaKey"
        assert settings.airtable_token == "patToken"

    @pytest.mark.parametrize(
        "overrides",
        [
            {"chunk_size": 0},
            {"chunk_size": 100, "chunk_overlap": 100},
            {"chunk_size": 100, "chunk_overlap": -1},
            {"ingest_batch_size": 0},
            {"empty_corpus_policy": "ignore"},
        ],
    )
    def test_invalid_values_rejected(self, overrides):
        with pytest.raises(ValidationError):
            _settings(**overrides)
