"""Inline parsing: the scanner and its precedence-ordered rule set."""

from mdinline.parsers.inline import InlineConverter, convert
from mdinline.parsers.rules import InlineMatch, InlineRule, build_rule_set

__all__ = [
    "InlineConverter",
    "InlineMatch",
    "InlineRule",
    "build_rule_set",
    "convert",
]
