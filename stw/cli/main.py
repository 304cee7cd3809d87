# Author : Eshan Roy <eshanized@proton.me>
# SPDX-License-Identifier: MIT

"""
CLI entrypoint for stw.

Every operation is a subcommand of `stw`. The global options (--config,
--log-level, --dry-run) and the selection options (--path, --extensions, ...)
are inherited by every subcommand through argparse's parent parser mechanism.

Usage:
    stw clean -p . -e rs py
    stw clean -p src -e py -d --dry-run
    stw check --config stw.yaml --report report.json
"""

import argparse
import sys

from stw.cli.commands import handle_check, handle_clean
from stw.cli.exit_codes import USER_ERROR


def _build_global_parser() -> argparse.ArgumentParser:
    """
    Build the parent parser with global options.

    add_help=False so the help flag doesn't collide between the parent and the
    subcommand parsers.
    """
    parent = argparse.ArgumentParser(add_help=False)
    parent.add_argument(
        "--config",
        type=str,
        default=None,
        help="Path to YAML configuration file.",
    )
    parent.add_argument(
        "--log-level",
        type=str,
        default=None,
        dest="log_level",
        choices=["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"],
        help="Set the logging verbosity level (default: from config, else INFO).",
    )
    parent.add_argument(
        "--dry-run",
        action="store_true",
        default=False,
        dest="dry_run",
        help="Report what would change without writing any file.",
    )
    return parent


def _build_selection_parser() -> argparse.ArgumentParser:
    """Options that decide which files are visited and how they're normalized."""
    parent = argparse.ArgumentParser(add_help=False)
    parent.add_argument(
        "-p",
        "--path",
        type=str,
        default=None,
        help="Root directory (or single file) to process.",
    )
    parent.add_argument(
        "-e",
        "--extensions",
        nargs="+",
        action="extend",
        default=None,
        help="File extensions to process, without the dot. Repeatable.",
    )
    parent.add_argument(
        "-d",
        "--disable-eof-newline-normalization",
        action="store_true",
        default=False,
        dest="disable_eof_newline_normalization",
        help="Leave trailing blank lines at end of file alone.",
    )
    parent.add_argument(
        "--ignore-case",
        action="store_true",
        default=False,
        dest="ignore_case",
        help="Match extensions case-insensitively.",
    )
    parent.add_argument(
        "--report",
        type=str,
        default=None,
        help="Write a JSON run report to this path.",
    )
    return parent


def _register_subcommands(
    subparsers: argparse._SubParsersAction,  # type: ignore[type-arg]
    parents: list[argparse.ArgumentParser],
) -> None:
    commands = [
        ("clean", "Strip trailing whitespace and fix file endings in place.", handle_clean),
        ("check", "List files that need cleaning; exit non-zero if any do.", handle_check),
    ]

    for name, help_text, handler in commands:
        parser = subparsers.add_parser(name, parents=parents, help=help_text)
        parser.set_defaults(func=handler)


def main() -> None:
    """
    Main CLI entrypoint. This is what pyproject.toml's [project.scripts] points to.

    If no subcommand is given, we show help and exit with USER_ERROR.
    """
    parents = [_build_global_parser(), _build_selection_parser()]

    root_parser = argparse.ArgumentParser(
        prog="stw",
        description="stw - strip trailing whitespace and normalize file endings across a tree.",
    )
    subparsers = root_parser.add_subparsers(dest="command")
    _register_subcommands(subparsers, parents)

    args = root_parser.parse_args()

    if getattr(args, "func", None) is None:
        root_parser.print_help()
        sys.exit(USER_ERROR)

    exit_code = args.func(args)
    sys.exit(exit_code)


if __name__ == "__main__":
    main()
