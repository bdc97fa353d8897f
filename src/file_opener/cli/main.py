"""CLI entry point: parse args, load config, run one tool."""

from __future__ import annotations

import argparse
import asyncio
import json
import sys

from file_opener.lib.config import Config, configure_logging
from file_opener.lib.dispatch import dispatch
from file_opener.lib.tools.catalog import OPEN_FILE, REVEAL_IN_FINDER, list_tools
from file_opener.lib.tools.types import InvocationRequest


def build_parser() -> argparse.ArgumentParser:
    """Build the argument parser for CLI mode."""
    parser = argparse.ArgumentParser(
        prog="file-opener",
        description="Open files or reveal them in Finder via the open command.",
    )
    parser.add_argument(
        "--verbose",
        action="store_true",
        help="Enable debug logging on stderr.",
    )
    parser.add_argument(
        "--open-command",
        default=None,
        help="Program to run instead of 'open' (default: FILE_OPENER_OPEN_COMMAND).",
    )
    parser.add_argument(
        "--timeout",
        type=float,
        default=None,
        help="Seconds to wait for the command before killing it.",
    )
    subparsers = parser.add_subparsers(dest="command", required=True)

    open_parser = subparsers.add_parser("open", help="Open a file or directory.")
    open_parser.add_argument("path", help="Path to the file or directory.")
    open_parser.add_argument(
        "-a",
        "--application",
        default=None,
        help='Application to open the path with (e.g. "Preview").',
    )

    reveal_parser = subparsers.add_parser("reveal", help="Reveal a path in Finder.")
    reveal_parser.add_argument("path", help="Path to the file or directory.")

    subparsers.add_parser("tools", help="Print the tool catalog as JSON.")
    return parser


def _request_from_args(args: argparse.Namespace) -> InvocationRequest:
    if args.command == "open":
        return InvocationRequest(
            tool_name=OPEN_FILE,
            arguments={"path": args.path, "application": args.application},
        )
    return InvocationRequest(tool_name=REVEAL_IN_FINDER, arguments={"path": args.path})


def main(argv: list[str] | None = None) -> None:
    """Run the CLI."""
    parser = build_parser()
    args = parser.parse_args(argv)

    if args.command == "tools":
        print(json.dumps([spec.to_dict() for spec in list_tools()], indent=2))
        return

    try:
        config = Config.from_env(
            overrides={
                "open_command": args.open_command,
                "timeout_s": args.timeout,
                "verbose": args.verbose or None,
            }
        )
    except ValueError as exc:
        print(f"Error: {exc}", file=sys.stderr)
        sys.exit(2)
    configure_logging(config.verbose)

    response = asyncio.run(dispatch(_request_from_args(args), config=config))
    if response.is_error:
        print(f"Error: {response.text}", file=sys.stderr)
        sys.exit(1)
    print(response.text)


if __name__ == "__main__":
    main()
