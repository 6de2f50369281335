"""Tests for GeminiConfig."""

import pytest
from pydantic import ValidationError

from gemtrans.core.interface.config import DEFAULT_ENDPOINT, GeminiConfig


class TestGeminiConfig:
    def test_defaults(self) -> None:
        config = GeminiConfig()
        assert config.model == "gemini-pro"
        assert config.endpoint == DEFAULT_ENDPOINT
        assert config.version == "v1beta"
        assert config.api_key is None
        assert config.stream is False

    def test_blank_model_rejected(self) -> None:
        with pytest.raises(ValidationError):
            GeminiConfig(model="")

    def test_whitespace_model_rejected(self) -> None:
        with pytest.raises(ValidationError):
            GeminiConfig(model="   ")

    def test_none_model_rejected(self) -> None:
        with pytest.raises(ValidationError):
            GeminiConfig(model=None)  # type: ignore[arg-type]

    def test_endpoint_override(self) -> None:
        config = GeminiConfig(endpoint="http://localhost:1234/")
        assert config.endpoint == "http://localhost:1234/"

    def test_version_override(self) -> None:
        assert GeminiConfig(version="v1").version == "v1"

    def test_generation_config_all(self) -> None:
        config = GeminiConfig(temperature=1.0, top_p=0.5, top_k=40)
        assert config.generation_config() == {"temperature": 1.0, "topP": 0.5, "topK": 40}

    def test_generation_config_empty(self) -> None:
        assert GeminiConfig().generation_config() == {}

    def test_generation_config_keeps_zero(self) -> None:
        assert GeminiConfig(temperature=0.0).generation_config() == {"temperature": 0.0}

    def test_request_url(self) -> None:
        config = GeminiConfig(model="gemini-1.5-flash")
        assert config.request_url() == (
            "https://generativelanguage.googleapis.com/v1beta/models/"
            "gemini-1.5-flash:generateContent"
        )

    def test_request_url_streaming_with_overrides(self) -> None:
        config = GeminiConfig(endpoint="http://localhost:1234/", version="v1", stream=True)
        assert config.request_url() == (
            "http://localhost:1234/v1/models/gemini-pro:streamGenerateContent?alt=sse"
        )
