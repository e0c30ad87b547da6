"""
comment_explorer.commands.config_cmd - Inspect configuration.

- `comment-explorer config show` - Print the effective configuration as JSON
- `comment-explorer config path` - Print the config file in use
"""

from __future__ import annotations

import argparse
import json
import sys
from pathlib import Path

from comment_explorer.config import find_config_file, get_config


def run(args: argparse.Namespace) -> int:
    """Run the config command."""
    action = getattr(args, "config_action", None)
    config_path = getattr(args, "config", None)

    if action == "show":
        config = get_config(config_path)
        print(json.dumps(config, indent=2, sort_keys=True))
        return 0
    elif action == "path":
        if config_path is not None:
            if not config_path.is_file():
                print(f"Error: Config file not found: {config_path}", file=sys.stderr)
                return 1
            found = config_path
        else:
            found = find_config_file(Path.cwd())
        if found is None:
            print("No config file found (using defaults).", file=sys.stderr)
            return 1
        print(found)
        return 0
    else:
        print("Usage: comment-explorer config <show|path>", file=sys.stderr)
        return 1
