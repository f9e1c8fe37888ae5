"""Utility functions for cli output."""

#  Copyright (c) 2025 Tom Villani, Ph.D.

# src/mdinline/cli/output.py
import argparse
import sys
from typing import TextIO

from mdinline.exceptions import DependencyError


def check_rich_available() -> bool:
    """Check if Rich library is available.

    Returns
    -------
    bool
        True if Rich is available, False otherwise

    """
    try:
        import rich  # noqa: F401

        return True
    except ImportError:
        return False


def should_use_rich_output(args: argparse.Namespace, stream: TextIO | None = None) -> bool:
    """Determine if Rich output should be used based on TTY and args.

    Parameters
    ----------
    args : argparse.Namespace
        Parsed command line arguments
    stream : optional, default None
        Uses sys.stdout unless otherwise specified.

    Returns
    -------
    bool
        True if Rich output should be used

    Raises
    ------
    DependencyError
        If --rich was requested but rich is not installed

    Notes
    -----
    Rich output is used when the --rich flag is set and either --force-rich
    is set or the output stream is a TTY.

    """
    if not args.rich:
        return False

    if not check_rich_available():
        raise DependencyError(
            feature="Rich output",
            missing_packages=[("rich", "")],
            message="Rich output requires the optional 'rich' dependency. Install with: pip install mdinline[rich]",
        )

    if args.force_rich:
        return True

    target = stream or sys.stdout
    isatty = getattr(target, "isatty", None)
    return bool(callable(isatty) and isatty())


def write_html(fragments: list[str], use_rich: bool, stream: TextIO | None = None) -> None:
    """Write converted HTML fragments, one per line.

    Parameters
    ----------
    fragments : list[str]
        Converted HTML, one entry per input line
    use_rich : bool
        Syntax-highlight the output with rich
    stream : optional, default None
        Uses sys.stdout unless otherwise specified.

    """
    target = stream or sys.stdout
    html = "\n".join(fragments)

    if not use_rich:
        target.write(html + "\n" if fragments else "")
        return

    from rich.console import Console
    from rich.syntax import Syntax

    console = Console(file=target)
    console.print(Syntax(html, "html", word_wrap=True))
