"""Loading of config and conversation files.

Both file kinds are YAML (plain JSON is accepted too, being valid YAML).
Environment variables in the form ``${VAR}`` or ``$VAR`` are expanded
before parsing, so API keys can stay out of the files.
"""

from __future__ import annotations

import logging
import os
from pathlib import Path
from typing import Any

import yaml
from pydantic import ValidationError

from gemtrans.core.interface.config import GeminiConfig
from gemtrans.sdk.errors import LoaderError
from gemtrans.sdk.models import ConversationSpec

logger = logging.getLogger(__name__)


def _read_mapping(path: Path) -> dict[str, Any]:
    try:
        raw = path.read_text(encoding="utf-8")
    except OSError as exc:
        raise LoaderError(f"Cannot read {path}: {exc}") from exc

    expanded = os.path.expandvars(raw)

    try:
        data: Any = yaml.safe_load(expanded)
    except yaml.YAMLError as exc:
        raise LoaderError(f"YAML parse error: {exc}") from exc

    if not isinstance(data, dict):
        raise LoaderError(f"{path.name} must contain a mapping")
    return data


def load_config(path: Path) -> GeminiConfig:
    """Load a :class:`GeminiConfig` from a YAML file.

    Raises:
        LoaderError: On read, parse or validation failures.
    """
    data = _read_mapping(path)
    try:
        return GeminiConfig.model_validate(data)
    except ValidationError as exc:
        raise LoaderError(str(exc)) from exc


class ConversationLoader:
    """Load and validate a conversation file into a :class:`ConversationSpec`."""

    def __init__(self, path: Path) -> None:
        self._path = path

    def load(self) -> ConversationSpec:
        """Read, interpolate env vars, and validate.

        Raises:
            LoaderError: On read, parse or validation failures.
        """
        data = _read_mapping(self._path)
        try:
            spec = ConversationSpec.model_validate(data)
        except ValidationError as exc:
            raise LoaderError(str(exc)) from exc

        logger.debug(
            "Loaded %s: %d message(s), %d tool(s)",
            self._path,
            len(spec.messages),
            len(spec.tools),
        )
        return spec
