#  Copyright (c) 2025 Tom Villani, Ph.D.
"""Command-line interface for mdinline.

This module provides a thin command-line front end to the inline converter.
Input is split into paragraphs on blank lines; each paragraph's inline
markup is converted and printed as one HTML fragment per line.

Usage Examples
--------------
Convert text from stdin:

    $ echo 'hello *world*' | mdinline

Strict classic mode with reference definitions:

    $ mdinline notes.md --pedantic --links refs.yaml

Use rich formatting::

    $ mdinline notes.md --rich

"""

from __future__ import annotations

import argparse
import logging
import re
import sys
from importlib.metadata import PackageNotFoundError, version

from mdinline.cli.output import should_use_rich_output, write_html
from mdinline.constants import DEFAULT_LOG_LEVEL
from mdinline.context import LinkTable, resolve_context
from mdinline.exceptions import DependencyError, FileError, MdInlineError, ValidationError
from mdinline.logging_utils import configure_logging
from mdinline.options import InlineOptions
from mdinline.parsers.inline import InlineConverter
from mdinline.utils.references import load_link_table

logger = logging.getLogger(__name__)

EXIT_SUCCESS = 0
EXIT_ERROR = 1
EXIT_DEPENDENCY_ERROR = 2
EXIT_VALIDATION_ERROR = 3
EXIT_FILE_ERROR = 4

_BLANK_LINES = re.compile(r"\n[ \t]*\n+")


def get_exit_code_for_exception(exception: Exception) -> int:
    """Map an exception to an appropriate CLI exit code.

    Parameters
    ----------
    exception : Exception
        The exception to map to an exit code

    Returns
    -------
    int
        The appropriate exit code for the exception type

    """
    if isinstance(exception, DependencyError):
        return EXIT_DEPENDENCY_ERROR
    if isinstance(exception, ValidationError):
        return EXIT_VALIDATION_ERROR
    if isinstance(exception, FileError):
        return EXIT_FILE_ERROR
    return EXIT_ERROR


def _package_version() -> str:
    try:
        return version("mdinline")
    except PackageNotFoundError:
        return "unknown"


def create_parser() -> argparse.ArgumentParser:
    """Create the argument parser for the mdinline command."""
    parser = argparse.ArgumentParser(
        prog="mdinline",
        description="Convert inline Markdown markup to HTML fragments.",
    )
    parser.add_argument("input", nargs="*", help="Input files (default: read stdin)")
    parser.add_argument("--version", action="version", version=f"%(prog)s {_package_version()}")

    mode = parser.add_argument_group("conversion options")
    mode.add_argument("--pedantic", action="store_true", help="Strict classic emphasis boundaries")
    mode.add_argument(
        "--no-gfm", dest="gfm", action="store_false", help="Disable extended syntax (strikethrough, extra escapes)"
    )
    mode.add_argument("--links", metavar="FILE", help="YAML or JSON file of reference definitions")

    output = parser.add_argument_group("output options")
    output.add_argument("--rich", action="store_true", help="Syntax-highlight output with rich")
    output.add_argument("--force-rich", action="store_true", help="Use rich output even when not writing to a TTY")

    logs = parser.add_argument_group("logging options")
    logs.add_argument(
        "--log-level",
        default=DEFAULT_LOG_LEVEL,
        choices=["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"],
        help=f"Logging level (default: {DEFAULT_LOG_LEVEL})",
    )
    logs.add_argument("--log-file", help="Also write log messages to this file")
    logs.add_argument("--trace", action="store_true", help="Debug logging with timestamps and source locations")

    return parser


def split_paragraphs(text: str) -> list[str]:
    """Split text into paragraphs on blank lines, dropping empty ones."""
    return [block.strip("\n") for block in _BLANK_LINES.split(text) if block.strip()]


def _read_inputs(paths: list[str]) -> str:
    if not paths:
        return sys.stdin.read()

    chunks = []
    for path in paths:
        try:
            with open(path, encoding="utf-8") as handle:
                chunks.append(handle.read())
        except FileNotFoundError as e:
            raise FileError(f"File not found: {path}", file_path=path, original_error=e) from e
        except (OSError, UnicodeDecodeError) as e:
            raise FileError(f"Cannot read {path}: {e}", file_path=path, original_error=e) from e
    return "\n\n".join(chunks)


def main(args: list[str] | None = None) -> int:
    """Execute the mdinline command line entry point."""
    parser = create_parser()
    parsed_args = parser.parse_args(args)

    # --trace implies debug output regardless of --log-level
    log_level = logging.DEBUG if parsed_args.trace else parsed_args.log_level

    try:
        configure_logging(log_level, log_file=parsed_args.log_file, trace=parsed_args.trace)
        use_rich = should_use_rich_output(parsed_args)
        links = load_link_table(parsed_args.links) if parsed_args.links else LinkTable()
        context = resolve_context(InlineOptions(gfm=parsed_args.gfm, pedantic=parsed_args.pedantic), links)
        paragraphs = split_paragraphs(_read_inputs(parsed_args.input))
    except MdInlineError as e:
        logger.error(e.message)
        return get_exit_code_for_exception(e)

    logger.info("Converting %d paragraph(s)", len(paragraphs))
    converter = InlineConverter(context)
    write_html([converter.convert(paragraph) for paragraph in paragraphs], use_rich)
    return EXIT_SUCCESS


__all__ = ["create_parser", "get_exit_code_for_exception", "main", "split_paragraphs"]
