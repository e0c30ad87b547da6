"""
comment_explorer.cli - Command-line interface.

Main entry point for the comment-explorer CLI tool.
"""

import argparse
import logging
import sys
from pathlib import Path
from typing import List, Optional

from comment_explorer import __version__
from comment_explorer.commands import config_cmd, outline_cmd


def create_parser() -> argparse.ArgumentParser:
    """Create the argument parser."""
    parser = argparse.ArgumentParser(
        prog="comment-explorer",
        description="Outline view built from '#--' comment annotations",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Annotation syntax:
  // #-- Setup                    # Flat entry
  // #-- Network :: sockets       # Entry 'sockets' under group 'Network'
  /* #-- Network :: TLS :: init */ # Nested groups, block comment style

Examples:
  comment-explorer outline src/main.c               # Indented tree
  comment-explorer outline src/main.c --format json # JSON for tooling
  comment-explorer config show                      # Effective settings

For detailed command help: comment-explorer <command> --help
        """,
    )

    # Global options
    parser.add_argument(
        "--version",
        action="version",
        version=f"comment-explorer {__version__}",
    )
    parser.add_argument(
        "--config",
        type=Path,
        help="Path to configuration file",
        metavar="PATH",
    )
    parser.add_argument(
        "-v",
        "--verbose",
        action="store_true",
        help="Verbose output",
    )
    parser.add_argument(
        "-q",
        "--quiet",
        action="store_true",
        help="Suppress non-error output",
    )

    subparsers = parser.add_subparsers(dest="command", help="Available commands")

    # outline command
    outline_parser = subparsers.add_parser(
        "outline",
        help="Print the comment outline of a file",
    )
    outline_parser.add_argument(
        "path",
        type=Path,
        help="Source file to scan",
    )
    outline_parser.add_argument(
        "--format",
        choices=outline_cmd.FORMATS,
        default=None,
        help="Output format (default: output.format from config, else text)",
    )
    outline_parser.add_argument(
        "-o",
        "--output",
        type=Path,
        help="Write to file instead of stdout",
        metavar="PATH",
    )
    outline_parser.add_argument(
        "--encoding",
        default="utf-8",
        help="Source file encoding (default: utf-8)",
    )

    # config command
    config_parser = subparsers.add_parser(
        "config",
        help="Inspect configuration",
    )
    config_subparsers = config_parser.add_subparsers(dest="config_action")
    config_subparsers.add_parser("show", help="Print the effective configuration")
    config_subparsers.add_parser("path", help="Print the config file in use")

    # version command
    subparsers.add_parser(
        "version",
        help="Show version",
    )

    return parser


def _configure_logging(args: argparse.Namespace) -> None:
    if args.verbose:
        level = logging.DEBUG
    elif args.quiet:
        level = logging.ERROR
    else:
        level = logging.WARNING
    logging.basicConfig(level=level, format="%(levelname)s %(name)s: %(message)s", stream=sys.stderr)


def main(argv: Optional[List[str]] = None) -> int:
    """
    Main entry point for the CLI.

    Args:
        argv: Command line arguments (defaults to sys.argv[1:])

    Returns:
        Exit code (0 for success, non-zero for failure)
    """
    parser = create_parser()

    # Enable shell tab-completion if argcomplete is installed
    # Install with: pip install comment-explorer[completion]
    try:
        import argcomplete

        argcomplete.autocomplete(parser)
    except ImportError:
        pass

    args = parser.parse_args(argv)
    _configure_logging(args)

    if not args.command:
        parser.print_help()
        return 0

    try:
        if args.command == "outline":
            return outline_cmd.run(args)
        elif args.command == "config":
            return config_cmd.run(args)
        elif args.command == "version":
            print(f"comment-explorer {__version__}")
            return 0
        else:
            parser.print_help()
            return 1

    except KeyboardInterrupt:
        print("\nOperation cancelled.", file=sys.stderr)
        return 130
    except Exception as e:
        if args.verbose:
            raise
        print(f"Error: {e}", file=sys.stderr)
        return 1


if __name__ == "__main__":
    sys.exit(main())
