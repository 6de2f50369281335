"""Gemini transpiler — maps CMS to/from the ``generateContent`` wire format.

Key differences from CMS:
- Role "assistant" becomes "model"; tool results travel as role "function".
- Gemini has no system turn. A system message becomes a user turn followed
  by an empty model turn, keeping user/model alternation intact.
- Tool call arguments and tool results are stored JSON-encoded in CMS but
  sent as native objects. Decoded function calls keep their native ``args``.
- One response may carry several candidates; each decodes independently.
"""

import json
import logging
from collections.abc import Iterable
from typing import Any

from pydantic import ValidationError

from gemtrans.core.interface.config import GeminiConfig
from gemtrans.core.interface.errors import EncodeError
from gemtrans.core.interface.models import (
    CanonicalMessage,
    ContentPart,
    DecodeError,
    DecodeResult,
    MessageDelta,
    TextContent,
    ToolCall,
    ToolDeclaration,
)
from gemtrans.core.interface.parts import (
    PART_FUNCTION_CALL,
    PART_TEXT,
    part_kind,
    select_parts,
)
from gemtrans.utils.telemetry import (
    ATTR_CANDIDATE_COUNT,
    ATTR_CONTENT_COUNT,
    ATTR_ERROR_COUNT,
    ATTR_MESSAGE_COUNT,
    ATTR_MODEL,
    ATTR_TARGET,
    ATTR_TOOL_COUNT,
    get_tracer,
)

logger = logging.getLogger(__name__)
_tracer = get_tracer(__name__)

FINISH_REASON_STOP = "STOP"
UNEXPECTED_RESPONSE = "Unexpected response"

DecodeTarget = type[CanonicalMessage] | type[MessageDelta]


class GeminiTranspiler:
    """Converts between CMS and Gemini's generateContent format."""

    def __init__(self, config: GeminiConfig | None = None) -> None:
        self.config = config or GeminiConfig()

    # ------------------------------------------------------------------
    # CMS -> Gemini
    # ------------------------------------------------------------------

    def to_provider(
        self,
        messages: Iterable[CanonicalMessage],
        tools: Iterable[ToolDeclaration] = (),
    ) -> dict[str, Any]:
        """Build a generateContent request body.

        Returns ``{"contents": [...]}`` plus ``generationConfig`` when any
        generation parameter is set and ``tools`` when tools are offered.
        """
        messages = list(messages)
        tools = list(tools)

        with _tracer.start_as_current_span("gemtrans.encode") as span:
            span.set_attribute(ATTR_MODEL, self.config.model)
            span.set_attribute(ATTR_MESSAGE_COUNT, len(messages))
            span.set_attribute(ATTR_TOOL_COUNT, len(tools))

            contents: list[dict[str, Any]] = []
            for msg in messages:
                contents.extend(self._message_to_gemini(msg))

            result: dict[str, Any] = {"contents": contents}

            generation_config = self.config.generation_config()
            if generation_config:
                result["generationConfig"] = generation_config

            if tools:
                result["tools"] = [
                    {"functionDeclarations": [_declaration_to_gemini(tool) for tool in tools]}
                ]

            span.set_attribute(ATTR_CONTENT_COUNT, len(contents))
            logger.debug(
                "Encoded %d message(s) into %d content(s) with %d tool(s)",
                len(messages),
                len(contents),
                len(tools),
            )
            return result

    def _message_to_gemini(self, msg: CanonicalMessage) -> list[dict[str, Any]]:
        """Convert one CMS message into one or two Gemini contents."""
        if msg.role == "system":
            return [
                {"role": "user", "parts": [{"text": msg.text}]},
                {"role": "model", "parts": [{"text": ""}]},
            ]

        if msg.role == "user":
            return [{"role": "user", "parts": message_parts(msg)}]

        if msg.role == "tool_result":
            return [
                {
                    "role": "function",
                    "parts": [
                        {
                            "functionResponse": {
                                "name": result.name,
                                "response": _decode_stored_json(result.content, result.name),
                            }
                        }
                        for result in msg.tool_results or []
                    ],
                }
            ]

        # assistant: tool calls win over plain content
        if msg.tool_calls:
            return [
                {
                    "role": "model",
                    "parts": [
                        {
                            "functionCall": {
                                "name": tc.name,
                                "args": _decode_stored_json(tc.arguments, tc.name),
                            }
                        }
                        for tc in msg.tool_calls
                    ],
                }
            ]

        return [{"role": "model", "parts": message_parts(msg) or [{"text": ""}]}]

    # ------------------------------------------------------------------
    # Gemini -> CMS
    # ------------------------------------------------------------------

    def from_provider(
        self,
        response: Any,
        target: DecodeTarget = CanonicalMessage,
    ) -> list[DecodeResult]:
        """Decode a generateContent response.

        *response* may be the parsed JSON body, the raw body as ``str`` or
        ``bytes``, or a :class:`json.JSONDecodeError` raised by the transport.
        The result holds one entry per candidate, or a single ``DecodeError``
        when the response as a whole is unusable.
        """
        with _tracer.start_as_current_span("gemtrans.decode") as span:
            span.set_attribute(ATTR_TARGET, target.__name__)

            results = self._decode_response(response, target)

            errors = sum(1 for r in results if isinstance(r, DecodeError))
            span.set_attribute(ATTR_ERROR_COUNT, errors)
            if isinstance(response, dict) and isinstance(response.get("candidates"), list):
                span.set_attribute(ATTR_CANDIDATE_COUNT, len(response["candidates"]))
            logger.debug("Decoded %d result(s), %d error(s)", len(results), errors)
            return results

    def _decode_response(self, response: Any, target: DecodeTarget) -> list[DecodeResult]:
        if isinstance(response, (str, bytes, bytearray)):
            try:
                response = json.loads(response)
            except (json.JSONDecodeError, UnicodeDecodeError, RecursionError) as exc:
                return [_invalid_json(exc)]

        if isinstance(response, json.JSONDecodeError):
            return [_invalid_json(response)]

        if not isinstance(response, dict):
            return [DecodeError(message=UNEXPECTED_RESPONSE)]

        error = response.get("error")
        if isinstance(error, dict) and "message" in error:
            logger.info(
                "Gemini returned error %s (%s): %s",
                error.get("code"),
                error.get("status"),
                error["message"],
            )
            return [DecodeError(message=str(error["message"]))]

        candidates = response.get("candidates")
        if isinstance(candidates, list):
            return [
                self._decode_candidate(candidate, position, target)
                for position, candidate in enumerate(candidates)
            ]

        feedback = response.get("promptFeedback")
        if isinstance(feedback, dict) and feedback.get("blockReason"):
            return [DecodeError(message=f"Prompt blocked: {feedback['blockReason']}")]

        return [DecodeError(message=UNEXPECTED_RESPONSE)]

    def _decode_candidate(
        self,
        candidate: Any,
        position: int,
        target: DecodeTarget,
    ) -> DecodeResult:
        """Decode one candidate; failures only affect this candidate."""
        if not isinstance(candidate, dict):
            return _candidate_error("candidate", "is invalid", position)

        index = candidate.get("index")
        slot = index if isinstance(index, int) else position

        content = candidate.get("content")
        if not isinstance(content, dict):
            return _candidate_error("content", "is invalid", slot)
        if content.get("role") != "model":
            return _candidate_error("role", "is invalid", slot)

        parts = content.get("parts") or []
        if not isinstance(parts, list):
            return _candidate_error("parts", "is invalid", slot)
        parts = [p for p in parts if isinstance(p, dict)]

        status = "complete" if candidate.get("finishReason") == FINISH_REASON_STOP else "incomplete"

        try:
            if target is MessageDelta:
                texts = [p[PART_TEXT] for p in select_parts(parts, [PART_TEXT])]
                if not all(isinstance(t, str) for t in texts):
                    return _candidate_error("content", "is invalid", slot)
                text = "".join(texts)
                return MessageDelta(content=text, index=index, status=status)

            text_parts: list[ContentPart] = []
            tool_calls: list[ToolCall] = []
            for part in select_parts(parts, [PART_TEXT, PART_FUNCTION_CALL]):
                if part_kind(part) == PART_TEXT:
                    text_parts.append(TextContent(content=part[PART_TEXT]))
                else:
                    tool_calls.append(_tool_call_from_gemini(part[PART_FUNCTION_CALL]))

            return CanonicalMessage(
                role="assistant",
                content=text_parts,
                tool_calls=tool_calls or None,
                index=index,
                status=status,
            )
        except ValidationError as exc:
            loc = exc.errors()[0]["loc"]
            field = str(loc[0]) if loc else "candidate"
            return _candidate_error(field, "is invalid", slot)


def message_parts(msg: CanonicalMessage) -> list[dict[str, Any]]:
    """Return the Gemini text parts for a message's content, in order."""
    return [{"text": part.content} for part in msg.content if isinstance(part, TextContent)]


def encode(
    config: GeminiConfig,
    messages: Iterable[CanonicalMessage],
    tools: Iterable[ToolDeclaration] = (),
) -> dict[str, Any]:
    """Encode a conversation and tool catalog into a Gemini request body."""
    return GeminiTranspiler(config).to_provider(messages, tools)


def decode(response: Any, target: DecodeTarget = CanonicalMessage) -> list[DecodeResult]:
    """Decode a Gemini response into messages, deltas, or errors."""
    return GeminiTranspiler().from_provider(response, target)


def _declaration_to_gemini(tool: ToolDeclaration) -> dict[str, Any]:
    parameters = dict(tool.parameters) or {"type": "object", "properties": {}}
    return {
        "name": tool.name,
        "description": tool.description,
        "parameters": parameters,
    }


def _decode_stored_json(value: Any, name: str) -> Any:
    """Decode a JSON string stored on a tool call or result."""
    if not isinstance(value, (str, bytes, bytearray)):
        return value
    try:
        return json.loads(value)
    except json.JSONDecodeError as exc:
        raise EncodeError(f"{name}: stored value is not valid JSON ({exc})") from exc


def _tool_call_from_gemini(function_call: Any) -> ToolCall:
    if not isinstance(function_call, dict):
        function_call = {}
    fields: dict[str, Any] = {
        "name": function_call.get("name", ""),
        "arguments": function_call.get("args", {}),
    }
    if function_call.get("id"):
        fields["call_id"] = function_call["id"]
    return ToolCall(**fields)


def _candidate_error(field: str, problem: str, index: Any) -> DecodeError:
    message = f"{field}: {problem}"
    logger.debug("Rejected Gemini candidate %s: %s", index, message)
    return DecodeError(message=message, index=index if isinstance(index, int) else None)


def _invalid_json(exc: Exception) -> DecodeError:
    logger.debug("Received invalid JSON from Gemini: %s", exc)
    return DecodeError(message=f"Received invalid JSON: {exc}")
