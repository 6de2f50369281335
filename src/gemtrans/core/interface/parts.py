"""Part selection over Gemini wire parts.

A wire part is a single-key mapping whose key names its kind, e.g.
``{"text": "..."}`` or ``{"functionCall": {...}}``.
"""

from collections.abc import Iterable, Sequence
from typing import Any

PART_TEXT = "text"
PART_FUNCTION_CALL = "functionCall"
PART_FUNCTION_RESPONSE = "functionResponse"

KNOWN_PART_KINDS: tuple[str, ...] = (
    PART_TEXT,
    PART_FUNCTION_CALL,
    PART_FUNCTION_RESPONSE,
    "inlineData",
    "fileData",
)


def part_kind(part: Any) -> str | None:
    """Return the discriminating tag of a wire part.

    Known kinds win over auxiliary keys (Gemini may attach e.g.
    ``thoughtSignature`` next to ``text``); otherwise the first key is used.
    """
    if not isinstance(part, dict):
        return None
    for kind in KNOWN_PART_KINDS:
        if kind in part:
            return kind
    return next(iter(part), None)


def select_parts(parts: Sequence[Any], kinds: Iterable[str]) -> list[dict[str, Any]]:
    """Return the parts whose kind is in *kinds*, preserving order."""
    wanted = frozenset(kinds)
    if not wanted:
        return []
    return [part for part in parts if part_kind(part) in wanted]
