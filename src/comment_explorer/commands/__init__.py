"""
comment_explorer.commands - CLI command implementations
"""

__all__ = [
    "config_cmd",
    "outline_cmd",
]
