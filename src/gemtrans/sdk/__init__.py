"""gemtrans SDK — loading conversations and configuration from files."""

from gemtrans.sdk.errors import LoaderError
from gemtrans.sdk.loader import ConversationLoader, load_config
from gemtrans.sdk.models import ConversationSpec, TelemetrySettings

__all__ = [
    "ConversationLoader",
    "ConversationSpec",
    "LoaderError",
    "TelemetrySettings",
    "load_config",
]
