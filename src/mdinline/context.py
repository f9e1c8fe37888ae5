#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/mdinline/context.py
"""Reference definitions and resolved conversion contexts.

A context is resolved once per document, before any inline conversion, and is
immutable afterwards. It bundles the mode flags, the link table built by the
block-level pass, and the rule set materialized from both.

"""

from __future__ import annotations

import logging
import re
from collections.abc import Iterable, Iterator, Mapping
from dataclasses import dataclass, field
from types import MappingProxyType
from typing import TYPE_CHECKING, Any, Union

from mdinline.exceptions import InvalidOptionsError, ReferenceDefinitionError
from mdinline.options.inline import InlineOptions

if TYPE_CHECKING:
    from mdinline.parsers.rules import InlineRule

logger = logging.getLogger(__name__)

_WHITESPACE_RUN = re.compile(r"\s+")


@dataclass(frozen=True)
class IdDef:
    """A reference definition: destination URL and optional title."""

    url: str
    title: str | None = None


LinksInput = Union[Mapping[str, Any], Iterable[tuple[str, Any]], None]


def normalize_identifier(identifier: str) -> str:
    """Normalize a reference identifier for case-insensitive lookup.

    Parameters
    ----------
    identifier : str
        Identifier as written in the source, e.g. ``"My  Link"``

    Returns
    -------
    str
        Case-folded identifier with whitespace runs collapsed

    Examples
    --------
        >>> normalize_identifier("  My\\n Link ")
        'my link'

    """
    return _WHITESPACE_RUN.sub(" ", identifier.strip()).casefold()


def _coerce_definition(identifier: Any, value: Any) -> IdDef:
    if isinstance(value, IdDef):
        return value
    if isinstance(value, str):
        return IdDef(url=value)
    if isinstance(value, Mapping) and isinstance(value.get("url"), str):
        title = value.get("title")
        if title is None or isinstance(title, str):
            return IdDef(url=value["url"], title=title)
    if isinstance(value, tuple) and len(value) == 2 and isinstance(value[0], str):
        if value[1] is None or isinstance(value[1], str):
            return IdDef(url=value[0], title=value[1])
    raise ReferenceDefinitionError(identifier, value)


class LinkTable(Mapping[str, IdDef]):
    """Read-only table of reference definitions keyed by normalized identifier.

    The table is built once from the definitions collected by the block-level
    pass and never changes afterwards, so it is safe to share between threads.
    When two identifiers normalize to the same key the later one wins.

    Parameters
    ----------
    links : Mapping or iterable of (id, definition) pairs, optional
        Definitions given as :class:`IdDef`, ``(url, title)`` tuples, bare url
        strings, or mappings with ``url`` and optional ``title`` keys.

    Raises
    ------
    ReferenceDefinitionError
        If an identifier is not a string or a definition has an unusable shape.

    """

    def __init__(self, links: LinksInput = None) -> None:
        entries: dict[str, IdDef] = {}
        if links is not None:
            pairs = links.items() if isinstance(links, Mapping) else links
            for identifier, value in pairs:
                if not isinstance(identifier, str):
                    raise ReferenceDefinitionError(
                        identifier, value, f"Reference identifier must be a string: {identifier!r}"
                    )
                key = normalize_identifier(identifier)
                if key in entries:
                    logger.debug("Duplicate reference definition %r; keeping the last one", identifier)
                entries[key] = _coerce_definition(identifier, value)
        self._entries: Mapping[str, IdDef] = MappingProxyType(entries)

    def resolve(self, identifier: str) -> IdDef | None:
        """Look up a reference identifier, ignoring case and spacing.

        Parameters
        ----------
        identifier : str
            Identifier as written in the source

        Returns
        -------
        IdDef or None
            The definition, or None when the identifier is not defined

        """
        return self._entries.get(normalize_identifier(identifier))

    def __getitem__(self, identifier: str) -> IdDef:
        definition = self.resolve(identifier)
        if definition is None:
            raise KeyError(identifier)
        return definition

    def __contains__(self, identifier: object) -> bool:
        return isinstance(identifier, str) and self.resolve(identifier) is not None

    def __iter__(self) -> Iterator[str]:
        return iter(self._entries)

    def __len__(self) -> int:
        return len(self._entries)

    def __eq__(self, other: object) -> bool:
        if isinstance(other, LinkTable):
            return dict(self._entries) == dict(other._entries)
        return NotImplemented

    def __hash__(self) -> int:
        return hash(frozenset(self._entries.items()))

    def __repr__(self) -> str:
        return f"LinkTable({dict(self._entries)!r})"


@dataclass(frozen=True)
class InlineContext:
    """Immutable snapshot of everything that affects inline conversion.

    Build instances with :func:`resolve_context` rather than directly, so the
    rule set always matches the options and link table.
    """

    options: InlineOptions
    links: LinkTable
    rules: tuple[InlineRule, ...] = field(repr=False, compare=False)


def resolve_context(options: InlineOptions | None = None, links: LinksInput = None) -> InlineContext:
    """Resolve options and reference definitions into a conversion context.

    Parameters
    ----------
    options : InlineOptions, optional
        Mode flags. Defaults to ``InlineOptions()`` (extended mode).
    links : LinkTable, Mapping or iterable of pairs, optional
        Reference definitions collected by the block-level pass.

    Returns
    -------
    InlineContext
        Context with its mode-gated rule set materialized

    Raises
    ------
    InvalidOptionsError
        If ``options`` is not an :class:`InlineOptions` instance
    ReferenceDefinitionError
        If a reference definition cannot be interpreted

    Examples
    --------
        >>> ctx = resolve_context(InlineOptions(gfm=False, pedantic=True),
        ...                       {"id1": IdDef("url 1", "title 1")})
        >>> ctx.links.resolve("ID1").url
        'url 1'

    """
    from mdinline.parsers.rules import build_rule_set

    if options is None:
        options = InlineOptions()
    elif not isinstance(options, InlineOptions):
        raise InvalidOptionsError(InlineOptions, type(options))

    table = links if isinstance(links, LinkTable) else LinkTable(links)
    rules = build_rule_set(options, table)
    logger.debug(
        "Resolved inline context (gfm=%s, pedantic=%s, %d references): %s",
        options.gfm,
        options.pedantic,
        len(table),
        ", ".join(rule.name for rule in rules),
    )
    return InlineContext(options=options, links=table, rules=rules)
