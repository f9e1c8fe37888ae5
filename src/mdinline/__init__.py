"""mdinline - inline Markdown to HTML conversion.

mdinline converts the inline markup of a single block of Markdown (emphasis,
code spans, links, images, autolinks, raw HTML, escapes, line breaks and CJK
ruby annotations) into an HTML fragment. Block structure is expected to have
been stripped by a block-level pass, which also collects the reference
definitions used by reference-style links.

The conversion is a pure function of the text and a resolved context. A
context is resolved once per document and is immutable, so it can be shared
across threads.

Examples
--------
Default (extended) mode:

    >>> from mdinline import convert
    >>> convert("this ~~not this~~")
    'this <del>not this</del>'

Strict classic mode with reference definitions:

    >>> from mdinline import IdDef, InlineOptions, convert, resolve_context
    >>> ctx = resolve_context(
    ...     InlineOptions(gfm=False, pedantic=True),
    ...     {"id1": IdDef(url="url 1", title="title 1")},
    ... )
    >>> convert("a [my link][ID1] link", ctx)
    'a <a href="url 1" title="title 1">my link</a> link'

"""

from importlib.metadata import PackageNotFoundError, version

from mdinline.context import IdDef, InlineContext, LinkTable, resolve_context
from mdinline.exceptions import (
    DependencyError,
    FileError,
    InvalidOptionsError,
    MalformedFileError,
    MdInlineError,
    ReferenceDefinitionError,
    ValidationError,
)
from mdinline.options import InlineOptions
from mdinline.parsers.inline import InlineConverter, convert

try:
    __version__ = version("mdinline")
except PackageNotFoundError:
    __version__ = "0.0.0"

__all__ = [
    "DependencyError",
    "FileError",
    "IdDef",
    "InlineContext",
    "InlineConverter",
    "InlineOptions",
    "InvalidOptionsError",
    "LinkTable",
    "MalformedFileError",
    "MdInlineError",
    "ReferenceDefinitionError",
    "ValidationError",
    "convert",
    "resolve_context",
    "__version__",
]
