"""Command-line surface: ssegen -i openapi.yaml -o events.go -lang go

Flags mirror the Go toolchain's single-dash style. Any usage problem exits
with status 1 before the input file is touched.
"""

from __future__ import annotations

import argparse
import sys
from pathlib import Path
from typing import NoReturn

from .codegen import generate
from .config import DEFAULT_PACKAGE, DEFAULT_TYPE_NAME, SUPPORTED_LANGUAGES, GenerationRequest
from .errors import GeneratorError, UsageError


def _path(value: str) -> Path:
    if not value:
        raise argparse.ArgumentTypeError("must not be empty")
    return Path(value)


class _ArgumentParser(argparse.ArgumentParser):
    """ArgumentParser that raises UsageError instead of exiting with status 2."""

    def error(self, message: str) -> NoReturn:
        raise UsageError(message)


def build_argument_parser() -> argparse.ArgumentParser:
    parser = _ArgumentParser(
        prog="ssegen",
        description="Generate a typed enum of server-sent events from an OpenAPI spec",
        allow_abbrev=False,
    )

    parser.add_argument("-i", dest="input", type=_path, required=True,
                        help="Input OpenAPI YAML file (required)")
    parser.add_argument("-o", dest="output", type=_path, required=True,
                        help="Output file path (required)")
    parser.add_argument("-lang", choices=SUPPORTED_LANGUAGES, required=True,
                        help="Target language (go, ts) (required)")
    parser.add_argument("-type", dest="type_name", default=DEFAULT_TYPE_NAME,
                        help="Type name for enum")
    parser.add_argument("-package", default=DEFAULT_PACKAGE,
                        help="Package name")

    return parser


def parse_args(argv: list[str] | None = None) -> GenerationRequest:
    args = build_argument_parser().parse_args(argv)
    return GenerationRequest(
        input=args.input,
        output=args.output,
        lang=args.lang,
        type_name=args.type_name,
        package=args.package,
    )


def main(argv: list[str] | None = None) -> None:
    try:
        request = parse_args(argv)
    except UsageError as err:
        build_argument_parser().print_usage(sys.stderr)
        print(f"Usage error: {err}", file=sys.stderr)
        raise SystemExit(1) from err

    try:
        count = generate(request)
    except GeneratorError as err:
        print(f"Error: {err}", file=sys.stderr)
        raise SystemExit(1) from err

    print(f"Successfully generated {request.lang} enum in {request.output} ({count} events)")
