"""Canonical Message Schema & Gemini transpilation."""

from gemtrans.core.interface.config import GeminiConfig
from gemtrans.core.interface.errors import EncodeError, TranspilerError
from gemtrans.core.interface.models import (
    CanonicalMessage,
    ContentPart,
    ConversationHistory,
    DecodeError,
    DecodeResult,
    MessageDelta,
    TextContent,
    ToolCall,
    ToolDeclaration,
    ToolResult,
)
from gemtrans.core.interface.parts import part_kind, select_parts
from gemtrans.core.interface.transpiler import Transpiler
from gemtrans.core.interface.transpilers.gemini import GeminiTranspiler, decode, encode

__all__ = [
    "CanonicalMessage",
    "ContentPart",
    "ConversationHistory",
    "DecodeError",
    "DecodeResult",
    "EncodeError",
    "GeminiConfig",
    "GeminiTranspiler",
    "MessageDelta",
    "TextContent",
    "ToolCall",
    "ToolDeclaration",
    "ToolResult",
    "Transpiler",
    "TranspilerError",
    "decode",
    "encode",
    "part_kind",
    "select_parts",
]
