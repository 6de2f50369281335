"""Model configuration — Gemini model, endpoint and generation parameters."""

from typing import Annotated, Any

from pydantic import BaseModel, StringConstraints

DEFAULT_ENDPOINT = "https://generativelanguage.googleapis.com"
DEFAULT_VERSION = "v1beta"


class GeminiConfig(BaseModel):
    """Configuration for requests to a Gemini model.

    Generation parameters are passed through untouched; ``None`` means the
    parameter is left to the provider's default.
    """

    model: Annotated[str, StringConstraints(strip_whitespace=True, min_length=1)] = "gemini-pro"
    endpoint: str = DEFAULT_ENDPOINT
    version: str = DEFAULT_VERSION
    api_key: str | None = None
    temperature: float | None = None
    top_p: float | None = None
    top_k: float | None = None
    stream: bool = False

    def generation_config(self) -> dict[str, Any]:
        """Return the ``generationConfig`` object for the set parameters."""
        values = {
            "temperature": self.temperature,
            "topP": self.top_p,
            "topK": self.top_k,
        }
        return {key: value for key, value in values.items() if value is not None}

    def request_url(self) -> str:
        """Build the ``generateContent`` URL for this model."""
        base = f"{self.endpoint.rstrip('/')}/{self.version}/models/{self.model}"
        if self.stream:
            return f"{base}:streamGenerateContent?alt=sse"
        return f"{base}:generateContent"
