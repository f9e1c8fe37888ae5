#  Copyright (c) 2025 Tom Villani, Ph.D.
"""Constants and default values for the mdinline library.

This module centralizes the regular expression fragments, character sets and
default option values used by the inline conversion engine.

Constants are organized by category:
1. Type Definitions - Literal types and type aliases
2. Option Defaults - Default values for conversion options
3. Escaping - Characters recognized by backslash escapes
4. Pattern Fragments - Shared regex building blocks and limits for inline rules
5. CLI Defaults - Settings used by the command line entry point
"""

from __future__ import annotations

from typing import Literal

# =============================================================================
# Type Definitions
# =============================================================================

EmphasisTag = Literal["em", "strong", "del"]
ReferenceFileFormat = Literal["yaml", "json"]

# =============================================================================
# Option Defaults
# =============================================================================

DEFAULT_GFM = True
DEFAULT_PEDANTIC = False

# =============================================================================
# Escaping
# =============================================================================

# Punctuation that a backslash turns into a literal character
ESCAPABLE_CHARS = "\\`*_{}[]()#+-.!>"

# Additional escapable characters in extended (gfm) mode
GFM_ESCAPABLE_CHARS = "~|"

# =============================================================================
# Pattern Fragments
# =============================================================================

# Bracketed label allowing one level of nested brackets: [a [b] c]
LINK_INSIDE = r"(?:\[[^\]]*\]|[^\[\]]|\](?=[^\[]*\]))*"

# Destination with optional "double" or 'single' quoted title
LINK_HREF = r"\s*<?(?P<href>[\s\S]*?)>?(?:\s+(?P<quote>[\"'])(?P<title>[\s\S]*?)(?P=quote))?\s*"

# CJK ideographs (unified, extensions A-G, compatibility) plus iteration marks
RUBY_BASE_CHARS = (
    "\u4e00-\u9fff"
    "\u3400-\u4dbf"
    "\U00020000-\U0002a6df"
    "\U0002a700-\U0002ebef"
    "\U00030000-\U0003134f"
    "\uf900-\ufaff"
    "\U0002f800-\U0002fa1f"
    "\u3005\u3006\u30f5\u30f6"
)

# Hiragana, katakana and the prolonged sound mark
RUBY_GLOSS_CHARS = "\u3041-\u309f\u30a0-\u30ff\u31f0-\u31ff"

# Characters that may start an inline construct; anything else is plain text
RULE_START_CHARS = "\\ {<`![*_~"

# Deepest level of converted sub-text (emphasis bodies, link labels); below
# it, constructs that convert their contents are left as literal text
MAX_NESTING_DEPTH = 32

# Named character reference or numeric reference at the start of a string
ENTITY_REFERENCE = r"&(?:#[0-9]{1,7}|#[xX][0-9a-fA-F]{1,6}|[A-Za-z][A-Za-z0-9]{1,31});"

# =============================================================================
# CLI Defaults
# =============================================================================

DEFAULT_LOG_LEVEL = "WARNING"
REFERENCE_FILE_EXTENSIONS: dict[str, ReferenceFileFormat] = {
    ".yaml": "yaml",
    ".yml": "yaml",
    ".json": "json",
}
