"""Renderers producing HTML output for inline constructs."""

from mdinline.renderers.html import (
    render_anchor,
    render_code,
    render_emphasis,
    render_image,
    render_line_break,
    render_ruby,
)

__all__ = [
    "render_anchor",
    "render_code",
    "render_emphasis",
    "render_image",
    "render_line_break",
    "render_ruby",
]
