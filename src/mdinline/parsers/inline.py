#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/mdinline/parsers/inline.py
"""Inline Markdown to HTML conversion.

This module provides the scanner that walks a line of Markdown from left to
right. At every cursor position it asks the context's rules, in precedence
order, whether an inline construct starts there. The first rule that accepts
renders its fragment and moves the cursor past the construct; when no rule
accepts, the character is emitted as escaped literal text.

Rules that convert captured sub-text call back into the converter one level
deeper. Past ``MAX_NESTING_DEPTH`` those rules are no longer offered, so
very deep nesting ends in literal delimiters instead of exhausting the
interpreter stack.

The conversion is a pure function of the text and the context. It performs
no I/O, keeps no state between calls and never raises for string input:
unterminated delimiters and undefined references degrade to literal text.

"""

from __future__ import annotations

import logging
import re
from functools import lru_cache, partial

from mdinline.constants import MAX_NESTING_DEPTH, RULE_START_CHARS
from mdinline.context import InlineContext, resolve_context
from mdinline.utils.escape import escape_text

logger = logging.getLogger(__name__)

# Run of characters none of which can start an inline construct
PLAIN_TEXT_PATTERN = re.compile(r"[^" + re.escape(RULE_START_CHARS) + r"]+")
BACKTICK_RUN_PATTERN = re.compile(r"`+")


class InlineConverter:
    """Convert inline Markdown to an HTML fragment under a fixed context.

    Parameters
    ----------
    context : InlineContext
        Resolved context supplying the rule set and reference definitions

    Examples
    --------
        >>> converter = InlineConverter(resolve_context())
        >>> converter.convert("hello *world*")
        'hello <em>world</em>'

    """

    def __init__(self, context: InlineContext) -> None:
        self.context = context
        self._flat_rules = tuple(rule for rule in context.rules if not rule.nests)

    def convert(self, text: str) -> str:
        """Convert one line (or run of lines) of inline Markdown.

        Parameters
        ----------
        text : str
            Markdown source with block structure already removed

        Returns
        -------
        str
            HTML fragment

        Raises
        ------
        TypeError
            If ``text`` is not a string

        """
        if not isinstance(text, str):
            raise TypeError(f"Inline conversion expects str, got {type(text).__name__}")
        return self._convert(text, 0)

    def _convert(self, text: str, depth: int) -> str:
        if depth < MAX_NESTING_DEPTH:
            rules = self.context.rules
        else:
            logger.debug("Nesting limit of %d reached, nested constructs left as text", MAX_NESTING_DEPTH)
            rules = self._flat_rules
        convert_nested = partial(self._convert, depth=depth + 1)

        output: list[str] = []
        pos = 0
        end = len(text)

        while pos < end:
            for rule in rules:
                match = rule.try_match(text, pos, convert_nested)
                if match is not None:
                    output.append(match.render())
                    pos += match.length
                    break
            else:
                pos = self._emit_literal(text, pos, output)

        return "".join(output)

    @staticmethod
    def _emit_literal(text: str, pos: int, output: list[str]) -> int:
        # Code points, not bytes: a Python str index never splits a character.
        # An unmatched backtick run stays literal as a whole.
        plain = PLAIN_TEXT_PATTERN.match(text, pos) or BACKTICK_RUN_PATTERN.match(text, pos)
        stop = plain.end() if plain else pos + 1
        output.append(escape_text(text[pos:stop]))
        return stop


@lru_cache(maxsize=1)
def default_context() -> InlineContext:
    """Return the shared default context (extended mode, no references)."""
    return resolve_context()


def convert(text: str, context: InlineContext | None = None) -> str:
    """Convert inline Markdown to HTML.

    Parameters
    ----------
    text : str
        Markdown source for a single block's inline content
    context : InlineContext, optional
        Resolved context; defaults to extended mode with an empty link table

    Returns
    -------
    str
        HTML fragment

    Examples
    --------
        >>> convert("a <http://google.com> link")
        'a <a href="http://google.com">http://google.com</a> link'

    """
    return InlineConverter(context if context is not None else default_context()).convert(text)
