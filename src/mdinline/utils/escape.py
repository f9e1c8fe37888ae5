#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/mdinline/utils/escape.py
"""HTML escaping profiles for inline conversion output.

Three profiles are provided, one per output context:

- text: literal characters emitted outside any recognized construct
- code: the raw body of an inline code span
- attribute: values placed inside double-quoted HTML attributes

Raw HTML passthrough never goes through any of these.

"""

from __future__ import annotations

import re

from mdinline.constants import ENTITY_REFERENCE

_BARE_AMPERSAND = re.compile(rf"&(?!{ENTITY_REFERENCE[1:]})")


def escape_text(text: str) -> str:
    """Escape text content for an HTML text node.

    Replaces ``<`` and ``>`` and every ``&`` that does not already begin a
    character reference, so entities written by the author survive as-is.

    Parameters
    ----------
    text : str
        Text to escape

    Returns
    -------
    str
        Escaped text safe for an HTML text node

    Examples
    --------
        >>> escape_text("a&b <c>")
        'a&amp;b &lt;c&gt;'
        >>> escape_text("&copy; 2025")
        '&copy; 2025'

    """
    if not text:
        return text

    result = _BARE_AMPERSAND.sub("&amp;", text)
    result = result.replace("<", "&lt;")
    result = result.replace(">", "&gt;")
    return result


def escape_code(text: str) -> str:
    """Escape the body of an inline code span.

    Unlike :func:`escape_text`, every ``&`` is escaped: code shows entity
    references literally instead of interpreting them. Quotes are left alone.

    Parameters
    ----------
    text : str
        Raw code span contents

    Returns
    -------
    str
        Escaped code

    Examples
    --------
        >>> escape_code("<a> &123;")
        '&lt;a&gt; &amp;123;'

    """
    if not text:
        return text

    result = text.replace("&", "&amp;")
    result = result.replace("<", "&lt;")
    result = result.replace(">", "&gt;")
    return result


def escape_attribute(text: str) -> str:
    """Escape a value for a double-quoted HTML attribute.

    Parameters
    ----------
    text : str
        Attribute value (URL, title or alt text)

    Returns
    -------
    str
        Escaped value

    Examples
    --------
        >>> escape_attribute('say "hi"')
        'say &quot;hi&quot;'

    """
    if not text:
        return text

    return escape_text(text).replace('"', "&quot;")
