"""Global address book config models and loading helpers."""

from __future__ import annotations

import json
import logging
from enum import StrEnum
from pathlib import Path

import yaml
from pydantic import BaseModel, ConfigDict, ValidationError


class LogLevel(StrEnum):
    """Supported logging levels."""

    DEBUG = "debug"
    INFO = "info"
    WARNING = "warning"
    ERROR = "error"

    def to_logging(self) -> int:
        """Return matching ``logging`` module level."""
        return logging.getLevelNamesMapping()[self.value.upper()]


class AddressBookConfig(BaseModel):
    """Root address book configuration model."""

    model_config = ConfigDict(extra="forbid")

    data_file: str = ".addressbook/addressbook.json"
    log_level: LogLevel = LogLevel.INFO
    seed_sample_data: bool = True


class GlobalConfigError(RuntimeError):
    """Raised when global config cannot be decoded or validated."""


def _decode_config_payload(path: Path) -> dict[str, object]:
    """Decode global config payload from JSON or YAML.

    Args:
        path: Config file path.

    Returns:
        Parsed mapping payload.

    Raises:
        GlobalConfigError: If decode fails or payload is not an object.
    """
    raw = path.read_text(encoding="utf-8")
    if path.suffix.lower() == ".json":
        try:
            payload = json.loads(raw)
        except json.JSONDecodeError as exc:
            raise GlobalConfigError(f"Invalid global config JSON: {exc}") from exc
    else:
        try:
            payload = yaml.safe_load(raw)
        except yaml.YAMLError as exc:
            raise GlobalConfigError(f"Invalid global config YAML: {exc}") from exc
    if payload is None:
        return {}
    if not isinstance(payload, dict):
        raise GlobalConfigError("Invalid global config payload: root must be an object")
    return payload


def load_global_config(path: Path) -> AddressBookConfig:
    """Load address book config from disk, defaulting when missing.

    Args:
        path: Config file path.

    Returns:
        Parsed config payload, or defaults when file does not exist.

    Raises:
        GlobalConfigError: If payload decode or validation fails.
    """
    if not path.exists():
        return AddressBookConfig()
    payload = _decode_config_payload(path)
    try:
        return AddressBookConfig.model_validate(payload)
    except ValidationError as exc:
        raise GlobalConfigError(f"Invalid global config payload: {exc}") from exc
