#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/mdinline/parsers/rules.py
"""Inline construct rules and the precedence-ordered rule set.

Each rule pairs a compiled pattern with a handler. At a given cursor
position a rule either declines or returns an :class:`InlineMatch` holding
the number of source characters consumed and a producer for the HTML
fragment. Producers may call back into the converter for captured sub-text
such as link labels and emphasis bodies.

Mode-dependent behavior is fixed when the rule set is built: strictness and
extensions are constructor arguments, never consulted while scanning.

"""

from __future__ import annotations

import logging
import re
from abc import ABC, abstractmethod
from collections.abc import Callable
from dataclasses import dataclass
from typing import TYPE_CHECKING

from mdinline.constants import (
    ESCAPABLE_CHARS,
    GFM_ESCAPABLE_CHARS,
    LINK_HREF,
    LINK_INSIDE,
    RUBY_BASE_CHARS,
    RUBY_GLOSS_CHARS,
    EmphasisTag,
)
from mdinline.renderers.html import (
    render_anchor,
    render_code,
    render_emphasis,
    render_image,
    render_line_break,
    render_ruby,
)
from mdinline.utils.escape import escape_text

if TYPE_CHECKING:
    from mdinline.context import IdDef, LinkTable
    from mdinline.options.inline import InlineOptions

logger = logging.getLogger(__name__)

ConvertFn = Callable[[str], str]

# =============================================================================
# Regex Patterns for Inline Constructs
# =============================================================================

LINE_BREAK_PATTERN = re.compile(r" {2,}\n(?!\s*$)")

RUBY_PATTERN = re.compile(r"\{([" + RUBY_BASE_CHARS + r"]+)\}\(([" + RUBY_GLOSS_CHARS + r"]+)\)")

AUTOLINK_PATTERN = re.compile(
    r"<(?:(?P<url>[A-Za-z][A-Za-z0-9+.\-]{1,31}:[^\s<>]*)|(?P<email>[^\s<>@:]+@[^\s<>@]+))>"
)

# Greedy opening run, closed by a run of exactly the same length
CODE_PATTERN = re.compile(r"(?P<fence>`+)(?!`)(?P<body>[\s\S]*?[^`])(?P=fence)(?!`)")

IMAGE_PATTERN = re.compile(r"!\[(?P<label>" + LINK_INSIDE + r")\]\(" + LINK_HREF + r"\)")
LINK_PATTERN = re.compile(r"\[(?P<label>" + LINK_INSIDE + r")\]\(" + LINK_HREF + r"\)")

REFERENCE_IMAGE_PATTERN = re.compile(r"!\[(?P<label>" + LINK_INSIDE + r")\]\s*\[(?P<id>[^\]]+)\]")
REFERENCE_LINK_PATTERN = re.compile(r"\[(?P<label>" + LINK_INSIDE + r")\]\s*\[(?P<id>[^\]]+)\]")

# [id][] or a bare [id] that is not followed by another bracket
SHORTHAND_REFERENCE_PATTERN = re.compile(
    r"(?P<bang>!?)\[(?P<label>" + LINK_INSIDE + r")\](?:\s*\[\]|(?!\s*\[))"
)

STRONG_PATTERN = re.compile(r"__([\s\S]+?)__(?!_)|\*\*([\s\S]+?)\*\*(?!\*)")
STRONG_PEDANTIC_PATTERN = re.compile(r"__(?=\S)([\s\S]*?\S)__(?!_)|\*\*(?=\S)([\s\S]*?\S)\*\*(?!\*)")

# Doubled delimiters inside the body are consumed as a pair, never split
EMPHASIS_PATTERN = re.compile(r"\b_((?:__|(?!__)[\s\S])+?)_\b|\*((?:\*\*|(?!\*\*)[\s\S])+?)\*(?!\*)")
EMPHASIS_PEDANTIC_PATTERN = re.compile(r"_(?=\S)([\s\S]*?\S)_(?!_)|\*(?=\S)([\s\S]*?\S)\*(?!\*)")

STRIKETHROUGH_PATTERN = re.compile(r"~~(?=\S)([\s\S]*?\S)~~")

HTML_TAG_PATTERN = re.compile(
    r"<!--[\s\S]*?-->|</?[A-Za-z][A-Za-z0-9-]*(?=[\s/>])(?:\"[^\"]*\"|'[^']*'|[^'\">])*?>"
)


# =============================================================================
# Rule Protocol
# =============================================================================


@dataclass(frozen=True)
class InlineMatch:
    """A successful rule match at the cursor.

    Attributes
    ----------
    length : int
        Number of source characters consumed, always at least one
    render : Callable[[], str]
        Producer for the HTML fragment replacing the consumed source

    """

    length: int
    render: Callable[[], str]

    def __post_init__(self) -> None:
        if self.length < 1:
            raise ValueError(f"An inline match must consume input, got length {self.length}")


class InlineRule(ABC):
    """Base class for inline construct rules.

    Subclasses set :attr:`name`, supply a pattern and implement
    :meth:`accept`, which may still decline a syntactic match (e.g. an
    undefined reference) by returning None. Rules whose output converts
    captured sub-text set :attr:`nests`; the converter stops offering them
    once the nesting limit is reached.
    """

    name = "rule"
    nests = False

    def __init__(self, pattern: re.Pattern[str]) -> None:
        self.pattern = pattern

    def try_match(self, text: str, pos: int, convert: ConvertFn) -> InlineMatch | None:
        """Try to match this construct at ``pos``.

        Parameters
        ----------
        text : str
            Full text being converted
        pos : int
            Cursor position
        convert : Callable[[str], str]
            Converter used for recursively rendering captured sub-text

        Returns
        -------
        InlineMatch or None
            The match, or None when the construct does not start here

        """
        match = self.pattern.match(text, pos)
        if match is None:
            return None
        return self.accept(match, convert)

    @abstractmethod
    def accept(self, match: re.Match[str], convert: ConvertFn) -> InlineMatch | None:
        """Build the match result, or return None to decline."""

    def __repr__(self) -> str:
        return f"{type(self).__name__}()"


def _consumed(match: re.Match[str]) -> int:
    return match.end() - match.start()


# =============================================================================
# Rules
# =============================================================================


class EscapeRule(InlineRule):
    """Backslash followed by escapable punctuation emits the punctuation."""

    name = "escape"

    def __init__(self, escapable: str) -> None:
        super().__init__(re.compile(r"\\([" + re.escape(escapable) + r"])"))
        self.escapable = escapable

    def accept(self, match: re.Match[str], convert: ConvertFn) -> InlineMatch | None:
        char = match.group(1)
        return InlineMatch(_consumed(match), lambda: escape_text(char))

    def __repr__(self) -> str:
        return f"EscapeRule({self.escapable!r})"


class LineBreakRule(InlineRule):
    """Two or more trailing spaces before a newline force a line break."""

    name = "line_break"

    def __init__(self) -> None:
        super().__init__(LINE_BREAK_PATTERN)

    def accept(self, match: re.Match[str], convert: ConvertFn) -> InlineMatch | None:
        return InlineMatch(_consumed(match), render_line_break)


class RubyRule(InlineRule):
    """``{漢字}(かんじ)`` becomes a ruby annotation."""

    name = "ruby"

    def __init__(self) -> None:
        super().__init__(RUBY_PATTERN)

    def accept(self, match: re.Match[str], convert: ConvertFn) -> InlineMatch | None:
        base, gloss = match.group(1), match.group(2)
        return InlineMatch(_consumed(match), lambda: render_ruby(base, gloss))


class AutolinkRule(InlineRule):
    """``<scheme:...>`` and ``<user@host>`` become links to themselves."""

    name = "autolink"

    def __init__(self) -> None:
        super().__init__(AUTOLINK_PATTERN)

    def accept(self, match: re.Match[str], convert: ConvertFn) -> InlineMatch | None:
        url = match.group("url")
        if url is not None:
            return InlineMatch(_consumed(match), lambda: render_anchor(url, escape_text(url)))

        email = match.group("email")
        return InlineMatch(_consumed(match), lambda: render_anchor(f"mailto:{email}", escape_text(email)))


class CodeSpanRule(InlineRule):
    """Backtick-delimited code; the body is never converted as markup."""

    name = "code"

    def __init__(self) -> None:
        super().__init__(CODE_PATTERN)

    def accept(self, match: re.Match[str], convert: ConvertFn) -> InlineMatch | None:
        body = match.group("body").strip()
        return InlineMatch(_consumed(match), lambda: render_code(body))


def _title(match: re.Match[str]) -> str | None:
    return match.group("title") if match.group("quote") else None


class InlineImageRule(InlineRule):
    """``![alt](src "title")``; the alt text is kept as raw text."""

    name = "image"

    def __init__(self) -> None:
        super().__init__(IMAGE_PATTERN)

    def accept(self, match: re.Match[str], convert: ConvertFn) -> InlineMatch | None:
        src, alt, title = match.group("href"), match.group("label"), _title(match)
        return InlineMatch(_consumed(match), lambda: render_image(src, alt, title))


class InlineLinkRule(InlineRule):
    """``[label](href "title")`` with the label converted as markup."""

    name = "link"
    nests = True

    def __init__(self) -> None:
        super().__init__(LINK_PATTERN)

    def accept(self, match: re.Match[str], convert: ConvertFn) -> InlineMatch | None:
        href, label, title = match.group("href"), match.group("label"), _title(match)
        return InlineMatch(_consumed(match), lambda: render_anchor(href, convert(label), title))


class ReferenceRule(InlineRule):
    """Reference-style links and images resolved through the link table.

    A syntactic match whose identifier is missing from the table is declined,
    so the brackets fall through to later rules and finally to literal text.

    Parameters
    ----------
    pattern : re.Pattern
        Pattern with ``label`` and optionally ``id`` groups
    links : LinkTable
        Reference definitions for lookup
    image : bool
        Render an image instead of an anchor

    """

    nests = True

    def __init__(self, pattern: re.Pattern[str], links: LinkTable, image: bool) -> None:
        super().__init__(pattern)
        self.links = links
        self.image = image

    def identifier(self, match: re.Match[str]) -> str:
        return match.group("id")

    def is_image(self, match: re.Match[str]) -> bool:
        return self.image

    def accept(self, match: re.Match[str], convert: ConvertFn) -> InlineMatch | None:
        identifier = self.identifier(match)
        definition = self.links.resolve(identifier)
        if definition is None:
            logger.debug("Undefined reference %r, leaving brackets as text", identifier)
            return None

        label = match.group("label")
        if self.is_image(match):
            return InlineMatch(_consumed(match), lambda: self._render_image(definition, label))
        return InlineMatch(_consumed(match), lambda: render_anchor(definition.url, convert(label), definition.title))

    @staticmethod
    def _render_image(definition: IdDef, alt: str) -> str:
        return render_image(definition.url, alt, definition.title)


class ReferenceImageRule(ReferenceRule):
    """``![alt][id]``, with optional whitespace between the brackets."""

    name = "reference_image"

    def __init__(self, links: LinkTable) -> None:
        super().__init__(REFERENCE_IMAGE_PATTERN, links, image=True)


class ReferenceLinkRule(ReferenceRule):
    """``[label][id]``, with optional whitespace between the brackets."""

    name = "reference_link"

    def __init__(self, links: LinkTable) -> None:
        super().__init__(REFERENCE_LINK_PATTERN, links, image=False)


class ShorthandReferenceRule(ReferenceRule):
    """``[id][]`` and bare ``[id]``, where the label doubles as identifier."""

    name = "shorthand_reference"

    def __init__(self, links: LinkTable) -> None:
        super().__init__(SHORTHAND_REFERENCE_PATTERN, links, image=False)

    def identifier(self, match: re.Match[str]) -> str:
        return match.group("label")

    def is_image(self, match: re.Match[str]) -> bool:
        return bool(match.group("bang"))


class DelimitedRule(InlineRule):
    """Symmetric delimiters wrapping recursively converted content.

    Parameters
    ----------
    name : str
        Rule name used in logs and reprs
    pattern : re.Pattern
        Pattern whose first non-None group is the body
    tag : {'em', 'strong', 'del'}
        Element wrapped around the converted body

    """

    nests = True

    def __init__(self, name: str, pattern: re.Pattern[str], tag: EmphasisTag) -> None:
        super().__init__(pattern)
        self.name = name
        self.tag = tag

    def accept(self, match: re.Match[str], convert: ConvertFn) -> InlineMatch | None:
        body = match.group(1) if match.group(1) is not None else match.group(2)
        tag = self.tag
        return InlineMatch(_consumed(match), lambda: render_emphasis(tag, convert(body)))

    def __repr__(self) -> str:
        return f"DelimitedRule({self.name!r}, {self.tag!r})"


class RawHtmlRule(InlineRule):
    """HTML tags and comments are copied verbatim, without escaping."""

    name = "html"

    def __init__(self) -> None:
        super().__init__(HTML_TAG_PATTERN)

    def accept(self, match: re.Match[str], convert: ConvertFn) -> InlineMatch | None:
        markup = match.group(0)
        return InlineMatch(len(markup), lambda: markup)


# =============================================================================
# Rule Set
# =============================================================================


def build_rule_set(options: InlineOptions, links: LinkTable) -> tuple[InlineRule, ...]:
    """Materialize the precedence-ordered rules for a set of options.

    Parameters
    ----------
    options : InlineOptions
        Mode flags; ``pedantic`` selects strict emphasis boundaries and
        ``gfm`` enables strikethrough and the extra escapable characters
    links : LinkTable
        Reference definitions used by the reference rules

    Returns
    -------
    tuple[InlineRule, ...]
        Rules in precedence order, highest first

    """
    escapable = ESCAPABLE_CHARS + GFM_ESCAPABLE_CHARS if options.gfm else ESCAPABLE_CHARS

    if options.pedantic:
        strong = DelimitedRule("strong", STRONG_PEDANTIC_PATTERN, "strong")
        emphasis = DelimitedRule("emphasis", EMPHASIS_PEDANTIC_PATTERN, "em")
    else:
        strong = DelimitedRule("strong", STRONG_PATTERN, "strong")
        emphasis = DelimitedRule("emphasis", EMPHASIS_PATTERN, "em")

    rules: list[InlineRule] = [
        EscapeRule(escapable),
        LineBreakRule(),
        RubyRule(),
        AutolinkRule(),
        CodeSpanRule(),
        InlineImageRule(),
        InlineLinkRule(),
        ReferenceImageRule(links),
        ReferenceLinkRule(links),
        ShorthandReferenceRule(links),
        strong,
        emphasis,
    ]
    if options.gfm:
        rules.append(DelimitedRule("strikethrough", STRIKETHROUGH_PATTERN, "del"))
    rules.append(RawHtmlRule())

    return tuple(rules)
