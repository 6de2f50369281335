"""SDK error types."""

from __future__ import annotations


class LoaderError(Exception):
    """Raised when a config or conversation file fails parsing or validation."""
