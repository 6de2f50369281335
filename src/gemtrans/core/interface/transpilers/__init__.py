"""Provider-specific transpiler implementations."""

from gemtrans.core.interface.transpilers.gemini import GeminiTranspiler, decode, encode

__all__ = ["GeminiTranspiler", "decode", "encode"]
