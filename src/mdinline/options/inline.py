#  Copyright (c) 2025 Tom Villani, Ph.D.

# mdinline/options/inline.py
"""Configuration options for inline Markdown conversion.

Only two switches affect the inline engine. ``gfm`` enables the extended
constructs (strikethrough, extra escapable punctuation) and ``pedantic``
selects the strict classic emphasis boundaries.
"""

from __future__ import annotations

from dataclasses import dataclass, field, fields

from mdinline.constants import DEFAULT_GFM, DEFAULT_PEDANTIC
from mdinline.options.base import CloneFrozenMixin


@dataclass(frozen=True)
class InlineOptions(CloneFrozenMixin):
    """Mode flags for inline Markdown-to-HTML conversion.

    Parameters
    ----------
    gfm : bool, default True
        Enable extended (GitHub-flavored) inline syntax: ``~~strikethrough~~``
        and backslash escapes for ``~`` and ``|``.
    pedantic : bool, default False
        Use strict classic emphasis rules: delimiters may not be separated
        from their content by whitespace. Takes precedence over ``gfm``
        wherever the two disagree about strictness.

    Examples
    --------
    Strict classic mode:
        >>> options = InlineOptions(gfm=False, pedantic=True)
        >>> ctx = resolve_context(options)

    Deriving a variant:
        >>> strict = InlineOptions().create_updated(pedantic=True)

    """

    gfm: bool = field(
        default=DEFAULT_GFM,
        metadata={"help": "Enable extended inline syntax (strikethrough, extra escapes)", "importance": "core"},
    )
    pedantic: bool = field(
        default=DEFAULT_PEDANTIC,
        metadata={"help": "Strict classic emphasis boundaries", "importance": "core"},
    )

    def __post_init__(self) -> None:
        """Validate that every flag is a real boolean.

        Raises
        ------
        ValueError
            If any field holds a non-bool value.

        """
        for option in fields(self):
            value = getattr(self, option.name)
            if not isinstance(value, bool):
                raise ValueError(f"{option.name} must be a bool, got {type(value).__name__}")
