"""gemtrans — canonical chat messages to and from the Gemini wire format."""

from __future__ import annotations

from typing import TYPE_CHECKING

__version__ = "0.1.0"

if TYPE_CHECKING:
    from gemtrans.core.interface.transpilers.gemini import decode as decode
    from gemtrans.core.interface.transpilers.gemini import encode as encode
    from gemtrans.core.interface.parts import select_parts as select_parts

_LAZY_EXPORTS = {
    "encode": "gemtrans.core.interface.transpilers.gemini",
    "decode": "gemtrans.core.interface.transpilers.gemini",
    "select_parts": "gemtrans.core.interface.parts",
}


def __getattr__(name: str) -> object:
    module_path = _LAZY_EXPORTS.get(name)
    if module_path is not None:
        import importlib

        mod = importlib.import_module(module_path)
        return getattr(mod, name)
    raise AttributeError(f"module 'gemtrans' has no attribute {name!r}")
