from __future__ import annotations

import os
from pathlib import Path
from typing import Any, Dict

from pydantic import ValidationError

from spellcount.logging import get_logger
from spellcount.models.settings import MagicCountSettings
from spellcount.validation import (
    ConfigurationError,
    format_validation_error,
    read_payload,
)

CONFIG_ENV = "SPELLCOUNT_CONFIG"

log = get_logger(__name__)


def settings_from_dict(data: Dict[str, Any] | None) -> MagicCountSettings:
    try:
        return MagicCountSettings.model_validate(data or {})
    except ValidationError as e:
        raise ConfigurationError("Invalid settings:\n" + format_validation_error(e)) from e


def resolve_config_path(path: Path | None = None) -> Path | None:
    # precedence: explicit path, then env
    if path is not None:
        return path
    env = os.getenv(CONFIG_ENV)
    return Path(env) if env else None


def load_settings(path: Path | None = None) -> MagicCountSettings:
    """Load settings from ``path``, ``$SPELLCOUNT_CONFIG`` or the defaults."""
    target = resolve_config_path(path)
    if target is None:
        return MagicCountSettings()
    if not target.exists():
        raise ConfigurationError(f"Settings file not found: {target}")
    data = read_payload(target)
    if data is not None and not isinstance(data, dict):
        raise ConfigurationError(f"{target}: settings must be a mapping")
    settings = settings_from_dict(data)
    log.debug("loaded settings from %s", target)
    return settings


__all__ = ["CONFIG_ENV", "load_settings", "resolve_config_path", "settings_from_dict"]
