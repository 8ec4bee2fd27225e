"""
Settings loader — reads the optional genconfig.yml into GeneratorSettings.

Without a settings file the defaults apply: ``global.cfg`` next to
``config.template.<ext>`` in the working directory, and no reserved names.
"""

from __future__ import annotations

import logging
import os
from pathlib import Path

import yaml
from pydantic import ValidationError

from genconfig.core.errors import ConfigError
from genconfig.core.models.settings import GeneratorSettings

logger = logging.getLogger(__name__)

# Default settings filename
SETTINGS_FILE = "genconfig.yml"


def load_settings(base_dir: Path) -> GeneratorSettings:
    """Load generator settings for a directory.

    Args:
        base_dir: Directory holding the templates and global config.

    Returns:
        Validated GeneratorSettings (defaults if no settings file exists).

    Raises:
        ConfigError: If the file exists but is unreadable or invalid.
    """
    path = base_dir / SETTINGS_FILE
    if not path.is_file():
        logger.debug("No %s in %s — using defaults", SETTINGS_FILE, base_dir)
        return GeneratorSettings()

    try:
        raw = path.read_text(encoding="utf-8")
    except OSError as e:
        raise ConfigError(f"Cannot read {path}: {e}") from e
    except UnicodeDecodeError as e:
        raise ConfigError(f"{path} is not valid UTF-8: {e.reason} at offset {e.start}") from e

    try:
        data = yaml.safe_load(raw)
    except yaml.YAMLError as e:
        raise ConfigError(f"Invalid YAML in {path}: {e}") from e

    if data is None:
        data = {}
    if not isinstance(data, dict):
        raise ConfigError(f"Expected a YAML mapping in {path}, got {type(data).__name__}")

    # The YAML may wrap everything under a "genconfig" key or be flat
    settings_data = data.get("genconfig", data) if "genconfig" in data else data

    try:
        settings = GeneratorSettings.model_validate(settings_data)
    except ValidationError as e:
        raise ConfigError(f"Invalid settings in {path}: {e}") from e

    logger.info(
        "Loaded settings from %s (global config '%s', %d reserved names)",
        path,
        settings.global_config,
        len(settings.reserved_names),
    )
    return settings


def reserved_names(settings: GeneratorSettings) -> set[str]:
    """Collect the names the global config may not define."""
    names = set(settings.reserved_names)
    if settings.reserve_environment:
        names.update(os.environ)
    return names
