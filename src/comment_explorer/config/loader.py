"""
comment_explorer.config.loader - Configuration file discovery and parsing

Configuration lives in a ``.comment-explorer.toml`` file. Values are merged
over ``DEFAULT_CONFIG`` and may be overridden from the environment with
``COMMENT_EXPLORER_<SECTION>_<KEY>`` variables.
"""

from __future__ import annotations

import copy
import json
import logging
import os
from pathlib import Path
from typing import Any

import tomlkit
from tomlkit.toml_document import TOMLDocument

from comment_explorer.config.defaults import CONFIG_FILENAME, DEFAULT_CONFIG, ENV_PREFIX

logger = logging.getLogger(__name__)


def parse_toml(content: str) -> dict[str, Any]:
    """Parse TOML text into plain Python containers."""
    return parse_toml_document(content).unwrap()


def parse_toml_document(content: str) -> TOMLDocument:
    """Parse TOML text into a tomlkit document (preserves comments and layout)."""
    return tomlkit.parse(content)


def find_config_file(start: Path) -> Path | None:
    """Find the nearest config file, walking up from ``start``.

    Args:
        start: Directory (or file) to begin searching from.

    Returns:
        Path to the config file, or None if none exists up to the root.
    """
    current = start.resolve()
    if current.is_file():
        current = current.parent

    while True:
        candidate = current / CONFIG_FILENAME
        if candidate.is_file():
            return candidate
        if current == current.parent:
            return None
        current = current.parent


def merge_configs(base: dict[str, Any], override: dict[str, Any]) -> dict[str, Any]:
    """Deep-merge ``override`` into a copy of ``base``.

    Nested tables are merged key by key; any other value in ``override``
    replaces the value in ``base``. Neither input is modified.
    """
    result = copy.deepcopy(base)
    for key, value in override.items():
        if isinstance(value, dict) and isinstance(result.get(key), dict):
            result[key] = merge_configs(result[key], value)
        else:
            result[key] = copy.deepcopy(value)
    return result


def _try_parse_env_value(value: str) -> Any:
    """Interpret an environment value as JSON container, boolean or string."""
    lowered = value.lower()
    if lowered == "true":
        return True
    if lowered == "false":
        return False

    if value.startswith(("[", "{")):
        try:
            return json.loads(value)
        except json.JSONDecodeError:
            logger.debug("Env value %r is not valid JSON, keeping as string", value)
            return value

    return value


def _apply_env_overrides(config: dict[str, Any]) -> dict[str, Any]:
    """Apply ``COMMENT_EXPLORER_<SECTION>_<KEY>`` overrides in place.

    The first underscore-separated word after the prefix names the section,
    the remainder names the key (``..._ANNOTATIONS_COMMENT_STYLES`` sets
    ``annotations.comment_styles``).
    """
    for env_key, raw in os.environ.items():
        if not env_key.startswith(ENV_PREFIX):
            continue
        parts = env_key[len(ENV_PREFIX) :].lower().split("_", 1)
        if len(parts) != 2 or not all(parts):
            continue
        section, key = parts
        table = config.setdefault(section, {})
        if not isinstance(table, dict):
            continue
        table[key] = _try_parse_env_value(raw)
        logger.debug("Config override from %s: %s.%s", env_key, section, key)
    return config


def load_config(config_path: Path) -> dict[str, Any]:
    """Load a config file and merge it over the defaults.

    Args:
        config_path: Path to a ``.comment-explorer.toml`` file.

    Returns:
        The merged configuration dictionary.

    Raises:
        OSError: If the file cannot be read.
        tomlkit.exceptions.ParseError: If the file is not valid TOML.
    """
    content = Path(config_path).read_text(encoding="utf-8")
    user_config = parse_toml(content)
    logger.debug("Loaded config from %s", config_path)
    return _apply_env_overrides(merge_configs(DEFAULT_CONFIG, user_config))


def get_config(config_path: Path | None = None, start: Path | None = None) -> dict[str, Any]:
    """Return the effective configuration.

    Uses ``config_path`` when given, otherwise searches upward from ``start``
    (default: the current directory). Falls back to the defaults when no
    config file is found.
    """
    if config_path is None:
        config_path = find_config_file(start if start is not None else Path.cwd())

    if config_path is None:
        return _apply_env_overrides(copy.deepcopy(DEFAULT_CONFIG))

    return load_config(config_path)
