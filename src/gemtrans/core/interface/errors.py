"""Error types for the translation layer.

Only the outbound path raises. Problems with provider responses are
reported as :class:`~gemtrans.core.interface.models.DecodeError` values.
"""


class TranspilerError(Exception):
    """Base error for all translation failures."""


class EncodeError(TranspilerError):
    """A canonical message could not be encoded into a provider payload."""

    def __init__(self, detail: str = "") -> None:
        self.detail = detail
        super().__init__("Encode error" + (f": {detail}" if detail else ""))
