"""Canonical Message Schema (CMS) — the provider-neutral message format.

Transpilers convert CMS messages to provider-specific request payloads and
provider responses back into CMS messages, deltas, or error results.
"""

import json
from typing import Any, Literal
from uuid import uuid4

from pydantic import BaseModel, Field, field_validator, model_validator

Role = Literal["system", "user", "assistant", "tool_result"]
Status = Literal["complete", "incomplete"]

# ---------------------------------------------------------------------------
# Content Parts
# ---------------------------------------------------------------------------


class TextContent(BaseModel):
    """Plain text content part."""

    type: Literal["text"] = "text"
    content: str


ContentPart = TextContent


# ---------------------------------------------------------------------------
# Tools — declarations, invocations and results
# ---------------------------------------------------------------------------


def _new_call_id() -> str:
    return uuid4().hex[:12]


class ToolCall(BaseModel):
    """A tool invocation emitted by an assistant message.

    ``arguments`` holds a JSON-encoded string when the call is built by the
    caller, and the native decoded value when it comes from a provider.
    """

    call_id: str = Field(default_factory=_new_call_id)
    name: str
    arguments: Any = None


class ToolResult(BaseModel):
    """The outcome of executing a tool; ``content`` is stored JSON-encoded."""

    tool_call_id: str
    name: str
    content: Any = None

    @classmethod
    def from_value(cls, tool_call_id: str, name: str, value: Any) -> "ToolResult":
        """Create a ToolResult, JSON-encoding a native value."""
        return cls(tool_call_id=tool_call_id, name=name, content=json.dumps(value))


class ToolDeclaration(BaseModel):
    """A callable tool offered to the model."""

    name: str
    description: str = ""
    parameters: dict[str, Any] = Field(default_factory=lambda: dict[str, Any]())

    @classmethod
    def from_openai(cls, schema: dict[str, Any]) -> "ToolDeclaration":
        """Build a declaration from an OpenAI-style function schema.

        Accepts both ``{"type": "function", "function": {...}}`` and the bare
        inner ``{"name": ..., "parameters": ...}`` mapping.
        """
        func: dict[str, Any] = schema.get("function", schema)
        return cls(
            name=func["name"],
            description=func.get("description", ""),
            parameters=func.get("parameters") or {},
        )


# ---------------------------------------------------------------------------
# Canonical Message
# ---------------------------------------------------------------------------


class CanonicalMessage(BaseModel):
    """A single conversation turn.

    Roles:
    - system: instructions for the model
    - user: human input
    - assistant: model output (may include tool_calls)
    - tool_result: results of executed tools (must include tool_results)

    ``index`` and ``status`` are only populated by decoders.
    """

    role: Role
    content: list[ContentPart] = []
    tool_calls: list[ToolCall] | None = None
    tool_results: list[ToolResult] | None = None
    index: int | None = None
    status: Status | None = None

    @field_validator("content", mode="before")
    @classmethod
    def _coerce_text(cls, value: Any) -> Any:
        if value is None:
            return []
        if isinstance(value, str):
            return [TextContent(content=value)]
        return value

    @model_validator(mode="after")
    def _check_role_fields(self) -> "CanonicalMessage":
        if self.tool_calls and self.role != "assistant":
            raise ValueError("tool_calls are only allowed on assistant messages")
        if self.tool_results and self.role != "tool_result":
            raise ValueError("tool_results are only allowed on tool_result messages")
        if self.role == "tool_result" and not self.tool_results:
            raise ValueError("tool_result messages require tool_results")
        return self

    @property
    def text(self) -> str:
        """Concatenated text of all text parts."""
        return "".join(part.content for part in self.content if isinstance(part, TextContent))

    @classmethod
    def system(cls, text: str) -> "CanonicalMessage":
        """Create a system message."""
        return cls(role="system", content=text)

    @classmethod
    def user(cls, content: str | list[ContentPart]) -> "CanonicalMessage":
        """Create a user message from text or a list of content parts."""
        return cls(role="user", content=content)

    @classmethod
    def assistant(
        cls,
        content: str | list[ContentPart] = "",
        tool_calls: list[ToolCall] | None = None,
    ) -> "CanonicalMessage":
        """Create an assistant message."""
        parts = [] if content == "" else content
        return cls(role="assistant", content=parts, tool_calls=tool_calls)

    @classmethod
    def tool_result(cls, results: list[ToolResult]) -> "CanonicalMessage":
        """Create a tool-result message."""
        return cls(role="tool_result", tool_results=results)


class MessageDelta(BaseModel):
    """A streamed fragment of an in-progress assistant turn.

    Successive deltas sharing an ``index`` belong to the same turn; callers
    may fold them together with :meth:`merge`.
    """

    role: Literal["assistant"] = "assistant"
    content: str = ""
    index: int | None = None
    status: Status = "incomplete"

    def merge(self, other: "MessageDelta") -> "MessageDelta":
        """Return a new delta with *other* appended to this one."""
        if other.index != self.index:
            raise ValueError(f"Cannot merge delta for index {other.index} into index {self.index}")
        return MessageDelta(
            content=self.content + other.content,
            index=self.index,
            status=other.status,
        )

    def to_message(self) -> CanonicalMessage:
        """Convert accumulated deltas into a complete assistant message."""
        return CanonicalMessage(
            role="assistant",
            content=[TextContent(content=self.content)],
            index=self.index,
            status=self.status,
        )


class DecodeError(BaseModel):
    """Error-tagged decode result.

    ``index`` is the position of the failing candidate, or ``None`` when the
    whole response could not be decoded.
    """

    message: str
    index: int | None = None


DecodeResult = CanonicalMessage | MessageDelta | DecodeError


# ---------------------------------------------------------------------------
# Conversation History
# ---------------------------------------------------------------------------


class ConversationHistory(BaseModel):
    """An ordered sequence of canonical messages forming a conversation."""

    messages: list[CanonicalMessage] = []

    def append(self, message: CanonicalMessage) -> None:
        """Append a message to the history."""
        self.messages.append(message)

    @property
    def system_messages(self) -> list[CanonicalMessage]:
        """Return all system messages."""
        return [m for m in self.messages if m.role == "system"]

    def __len__(self) -> int:
        return len(self.messages)

    def __iter__(self):  # type: ignore[override]
        return iter(self.messages)
