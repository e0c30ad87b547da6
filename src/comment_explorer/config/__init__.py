"""
comment_explorer.config - Configuration loading and defaults
"""

from comment_explorer.config.defaults import CONFIG_FILENAME, DEFAULT_CONFIG, ENV_PREFIX
from comment_explorer.config.loader import (
    _apply_env_overrides,
    _try_parse_env_value,
    find_config_file,
    get_config,
    load_config,
    merge_configs,
    parse_toml,
    parse_toml_document,
)

__all__ = [
    "load_config",
    "find_config_file",
    "get_config",
    "merge_configs",
    "parse_toml",
    "parse_toml_document",
    "CONFIG_FILENAME",
    "DEFAULT_CONFIG",
    "ENV_PREFIX",
    "_apply_env_overrides",
    "_try_parse_env_value",
]
