"""Command-line entry point: find arithmetic in a file, compute it and write the result."""

from __future__ import annotations

import argparse
import sys
from functools import partial
from pathlib import Path

from dotenv import load_dotenv

from calcarith.fileio import read_file, write_file
from calcarith.filter import replace_math_expressions
from calcarith.translations import initialize, t

PROG = "calc-arithmetics"


class _Parser(argparse.ArgumentParser):
    def error(self, message: str):
        self.print_usage(sys.stderr)
        self.exit(1, f"{self.prog}: error: {message}\n")


def _run_cli(args: argparse.Namespace) -> int:
    try:
        content = read_file(args.input)
    except OSError as exc:
        print(f"failed to read a file: {args.input}; error: {exc}", file=sys.stderr)
        return 1
    try:
        result = replace_math_expressions(content)
    except (ValueError, ZeroDivisionError) as exc:
        print(f"failed to evaluate: {args.input}; error: {exc}", file=sys.stderr)
        return 1
    try:
        write_file(args.output, result)
    except OSError as exc:
        print(f"failed to write a file: {args.output}; error: {exc}", file=sys.stderr)
        return 1
    return 0


def _not_supported(message: str, args: argparse.Namespace) -> int:
    print(message)
    return 0


def build_parser() -> argparse.ArgumentParser:
    """Build the argument parser with its translated help texts."""
    parser = _Parser(
        prog=PROG,
        description=t(
            "Find all arithmetic operations in the input file, "
            "calculate and replace with the results in the output file."
        ),
    )
    commands = parser.add_subparsers(dest="command", metavar="command")

    cli = commands.add_parser("cli", help=t("Use a command-line interface"))
    cli.add_argument("input")
    cli.add_argument("output")
    cli.set_defaults(handler=_run_cli)

    console = commands.add_parser("console", help=t("Use a console-based interface"))
    console.set_defaults(handler=partial(_not_supported, t("console not supported yet.")))

    gui = commands.add_parser("gui", help=t("Use a graphic user interface"))
    gui.set_defaults(handler=partial(_not_supported, t("gui not supported yet.")))

    web = commands.add_parser("web", help=t("Use a web-based interface"))
    web.set_defaults(handler=partial(_not_supported, t("web not supported yet.")))

    return parser


def main(argv: list[str] | None = None) -> int:
    """Run the program and return its exit status."""
    env_file = Path(".env")
    if not env_file.is_file():
        print("Error loading .env file", file=sys.stderr)
        return 1
    load_dotenv(env_file)

    try:
        initialize()
    except (OSError, ValueError) as exc:
        print(f"failed to initialize i18n: {exc}", file=sys.stderr)
        return 1

    parser = build_parser()
    try:
        args = parser.parse_args(argv)
    except SystemExit as exc:
        return exc.code if isinstance(exc.code, int) else 1

    handler = getattr(args, "handler", None)
    if handler is None:
        parser.print_help()
        return 0
    return handler(args)


if __name__ == "__main__":
    sys.exit(main())