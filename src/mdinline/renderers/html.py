#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/mdinline/renderers/html.py
"""HTML fragment builders for inline constructs.

Each builder is a pure function from captured values to an HTML string.
Bodies passed to :func:`render_anchor` and :func:`render_emphasis` are
already-rendered HTML; every other value is raw text and is escaped here.
Attribute order is fixed so output is byte-for-byte reproducible.

"""

from __future__ import annotations

from typing import get_args

from mdinline.constants import EmphasisTag
from mdinline.utils.escape import escape_attribute, escape_code, escape_text

_EMPHASIS_TAGS = frozenset(get_args(EmphasisTag))


def _title_attr(title: str | None) -> str:
    return f' title="{escape_attribute(title)}"' if title else ""


def render_anchor(href: str, body: str, title: str | None = None) -> str:
    """Render an anchor element.

    Parameters
    ----------
    href : str
        Raw link destination
    body : str
        Rendered HTML for the link label
    title : str, optional
        Raw title text; omitted from the output when empty

    Returns
    -------
    str
        ``<a href="..." title="...">body</a>``

    """
    return f'<a href="{escape_attribute(href)}"{_title_attr(title)}>{body}</a>'


def render_image(src: str, alt: str, title: str | None = None) -> str:
    """Render a self-closing image element.

    Parameters
    ----------
    src : str
        Raw image source
    alt : str
        Raw alternative text, never converted as markup
    title : str, optional
        Raw title text; omitted from the output when empty

    Returns
    -------
    str
        ``<img src="..." alt="..." title="..."/>``

    """
    return f'<img src="{escape_attribute(src)}" alt="{escape_attribute(alt)}"{_title_attr(title)}/>'


def render_code(body: str) -> str:
    """Render an inline code span from its raw contents."""
    return f'<code class="inline">{escape_code(body)}</code>'


def render_emphasis(tag: EmphasisTag, body: str) -> str:
    """Wrap rendered HTML in an emphasis-style element.

    Parameters
    ----------
    tag : {'em', 'strong', 'del'}
        Element name
    body : str
        Rendered HTML content

    Returns
    -------
    str
        The wrapped content

    Raises
    ------
    ValueError
        If ``tag`` is not one of the emphasis elements

    """
    if tag not in _EMPHASIS_TAGS:
        raise ValueError(f"Unsupported emphasis tag: {tag!r}")
    return f"<{tag}>{body}</{tag}>"


def render_ruby(base: str, gloss: str) -> str:
    """Render a ruby annotation: base text with its phonetic reading."""
    return f"<ruby>{escape_text(base)}<rt>{escape_text(gloss)}</rt></ruby>"


def render_line_break() -> str:
    return "<br/>"
