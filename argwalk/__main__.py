"""
Argwalk CLI Parser

Copyright (c) 2025 rtj.dev LLC.
Licensed under the MIT License. See LICENSE file for details.
"""

import json
import logging
import sys
from argparse import REMAINDER, ArgumentParser, RawDescriptionHelpFormatter
from typing import Any, Sequence

from rich.markup import escape

from argwalk.config import loader
from argwalk.console import error_console
from argwalk.exceptions import SpecError
from argwalk.parser import parse_or_exit
from argwalk.utils import setup_logging


def get_root_parser(prog: str | None = "argwalk") -> ArgumentParser:
    """
    Construct the root-level ArgumentParser for the Argwalk CLI.

    The first positional is the spec file; every token after it is handed to
    the spec untouched, so it may contain its own options.
    """
    parser = ArgumentParser(
        prog=prog,
        description="Argwalk CLI - parse a command line against a spec file.",
        epilog="Example: argwalk report.yaml -v --count 3 report.txt",
        formatter_class=RawDescriptionHelpFormatter,
    )
    parser.add_argument(
        "--debug", action="store_true", help="Show debug logs on the console."
    )
    parser.add_argument(
        "--log-mode",
        choices=["cli", "json"],
        default=None,
        help="Console log format (default: ARGWALK_LOG_MODE or auto-detect).",
    )
    parser.add_argument("spec", help="Path to a YAML or TOML spec file.")
    parser.add_argument(
        "tokens", nargs=REMAINDER, help="Command line to parse against the spec."
    )
    return parser


def main(argv: Sequence[str] | None = None) -> Any:
    args = get_root_parser().parse_args(argv)
    setup_logging(
        mode=args.log_mode,
        level=logging.DEBUG if args.debug else logging.WARNING,
    )

    try:
        spec = loader(args.spec)
    except (SpecError, ValueError, FileNotFoundError) as error:
        error_console.print(f"[bold red]error:[/] {escape(str(error))}")
        return 2

    result = parse_or_exit(spec, args.tokens)
    payload = {
        "args": result.args,
        "flags": result.flags,
        "options": result.options,
        "unknown": result.unknown,
    }
    print(json.dumps(payload, indent=2, default=str))
    return 0


if __name__ == "__main__":
    sys.exit(main())
