"""CLI handler for ``generate-appwrite-interfaces``."""

from __future__ import annotations

import argparse
import logging
import sys
from collections.abc import Sequence
from typing import NoReturn

from appwrite_interfaces.config import VARIANTS, GeneratorConfig
from appwrite_interfaces.errors import InterfaceGeneratorError
from appwrite_interfaces.generator.writer import generate_interfaces
from appwrite_interfaces.schema.loader import load_schema

PROG = "generate-appwrite-interfaces"

DESCRIPTION = (
    "Generate TypeScript interfaces from Appwrite collections defined in appwrite.json"
)

EPILOG = f"""\
Examples:
  {PROG} --input=path/to/appwrite.json --output=src/appwrite-interfaces
"""


class _ArgumentParser(argparse.ArgumentParser):
    """Exits 1 on usage errors instead of argparse's default 2."""

    def error(self, message: str) -> NoReturn:
        self.print_help(sys.stderr)
        self.exit(1, f"Error: {message}\n")


def build_parser() -> argparse.ArgumentParser:
    parser = _ArgumentParser(
        prog=PROG,
        description=DESCRIPTION,
        epilog=EPILOG,
        formatter_class=argparse.RawDescriptionHelpFormatter,
        add_help=False,
        allow_abbrev=False,
    )
    parser.add_argument(
        "--input", metavar="FILE", help="Path to the input appwrite JSON file (required)"
    )
    parser.add_argument(
        "--output",
        metavar="DIR",
        help="Path to output directory for generated interfaces (required)",
    )
    parser.add_argument(
        "--variant",
        choices=VARIANTS,
        default="document",
        help="Extend Models.Document with system fields, or emit plain interfaces "
        "(default: document)",
    )
    parser.add_argument(
        "--verbose", action="store_true", default=False, help="Enable debug logging"
    )
    parser.add_argument("-h", "--help", action="store_true", help="Show this help message")
    return parser


def parse_extra_options(extras: Sequence[str]) -> dict[str, str | None]:
    """Keep unrecognised ``--key=value`` flags; anything else is dropped."""
    options: dict[str, str | None] = {}
    for arg in extras:
        if not arg.startswith("--"):
            continue
        key, sep, value = arg[2:].partition("=")
        options[key] = value if sep else None
    return options


def main(argv: Sequence[str] | None = None) -> None:
    parser = build_parser()
    argv = list(sys.argv[1:] if argv is None else argv)

    # help wins over everything else on the command line
    if "-h" in argv or "--help" in argv:
        parser.print_help()
        sys.exit(0)

    args, extras = parser.parse_known_args(argv)

    if not args.input or not args.output:
        print("Error: Both --input and --output parameters are required.", file=sys.stderr)
        parser.print_help(sys.stderr)
        sys.exit(1)

    if args.verbose:
        logging.basicConfig(level=logging.DEBUG, format="%(levelname)s %(name)s: %(message)s")

    config = GeneratorConfig.from_args(
        args.input,
        args.output,
        variant=args.variant,
        extra_options=parse_extra_options(extras),
    )

    print(f"Using input file: {config.input_path}")
    print(f"Using output dir: {config.output_dir}")

    try:
        schema = load_schema(config.input_path)
        generate_interfaces(
            schema, config, on_written=lambda path: print(f"Generated: {path}")
        )
    except InterfaceGeneratorError as exc:
        print(f"Error generating interfaces: {exc}", file=sys.stderr)
        sys.exit(1)
