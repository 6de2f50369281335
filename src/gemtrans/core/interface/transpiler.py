"""Transpiler protocol — converts between CMS and a provider's wire format.

A transpiler is bidirectional: CMS messages and tool declarations become a
provider request payload, and a provider response becomes a list of CMS
messages, deltas, or error results.
"""

from collections.abc import Iterable
from typing import Any, Protocol

from gemtrans.core.interface.models import (
    CanonicalMessage,
    DecodeResult,
    MessageDelta,
    ToolDeclaration,
)


class Transpiler(Protocol):
    """Protocol for provider-specific message format transpilers."""

    def to_provider(
        self,
        messages: Iterable[CanonicalMessage],
        tools: Iterable[ToolDeclaration] = (),
    ) -> dict[str, Any]:
        """Convert a conversation and tool catalog to a request payload."""
        ...

    def from_provider(
        self,
        response: Any,
        target: type[CanonicalMessage] | type[MessageDelta] = CanonicalMessage,
    ) -> list[DecodeResult]:
        """Convert a raw provider response into decode results.

        Never raises for malformed responses: every failure is returned as a
        ``DecodeError`` in the result list.
        """
        ...
