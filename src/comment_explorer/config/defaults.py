"""
comment_explorer.config.defaults - Default configuration values
"""

from typing import Any, Dict

CONFIG_FILENAME = ".comment-explorer.toml"

ENV_PREFIX = "COMMENT_EXPLORER_"

DEFAULT_CONFIG: Dict[str, Any] = {
    "annotations": {
        # Line-comment and block-comment openers accepted before the marker
        "comment_styles": ["//", "/*"],
        "marker": "#--",
        "separator": "::",
        "block_close": "*/",
    },
    "output": {
        "format": "text",
    },
}
