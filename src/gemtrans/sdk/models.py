"""Pydantic models for the conversation files consumed by ``gemtrans encode``."""

from __future__ import annotations

from pydantic import BaseModel, Field

from gemtrans.core.interface.config import GeminiConfig
from gemtrans.core.interface.models import CanonicalMessage, ToolDeclaration


class TelemetrySettings(BaseModel):
    """Optional telemetry configuration."""

    enabled: bool = False
    otlp_endpoint: str | None = None


class ConversationSpec(BaseModel):
    """A conversation, its tool catalog and the model configuration."""

    config: GeminiConfig = Field(default_factory=GeminiConfig)
    messages: list[CanonicalMessage] = []
    tools: list[ToolDeclaration] = []
    telemetry: TelemetrySettings | None = None
