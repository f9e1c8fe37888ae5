#  Copyright (c) 2025 Tom Villani, Ph.D.
"""Configuration options for mdinline conversion.

Options are frozen dataclasses; derive variants with ``create_updated``.
"""

from __future__ import annotations

from mdinline.options.base import CloneFrozenMixin
from mdinline.options.inline import InlineOptions

__all__ = [
    "CloneFrozenMixin",
    "InlineOptions",
]
