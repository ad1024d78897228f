#  Copyright (c) 2025 Tom Villani, Ph.D.
"""Constants and default values for flowdoc library.

This module centralizes the hardcoded values shared by the HTML parser and
the HTML renderer so both directions of the conversion agree on them.

Constants are organized by category:
1. Type Definitions - Literal types and type aliases
2. Heading Font Sizes - The heading <-> font size table
3. Font Tag Attributes - Names and values of the composite <font> tag
4. Format-Specific Defaults - Parser and renderer defaults
5. Dependencies - Package requirements checked at call time
"""

from __future__ import annotations

from typing import Literal

# =============================================================================
# Type Definitions
# =============================================================================

HtmlParser = Literal["html.parser", "html5lib", "lxml"]

# =============================================================================
# Heading Font Sizes
# =============================================================================

# h1..h6 are imported as bold paragraphs with these font sizes
HEADING_FONT_SIZES: dict[str, float] = {
    "h1": 32.0,
    "h2": 28.0,
    "h3": 24.0,
    "h4": 20.0,
    "h5": 16.0,
    "h6": 14.0,
}

# Checked in order; the first threshold the font size reaches wins
HEADING_THRESHOLDS: tuple[tuple[float, str], ...] = tuple(
    sorted(((size, tag) for tag, size in HEADING_FONT_SIZES.items()), reverse=True)
)

PARAGRAPH_TAG = "p"

# =============================================================================
# Font Tag Attributes
# =============================================================================

FONT_TAG = "font"
FONT_ATTR_COLOR = "color"
FONT_ATTR_FACE = "face"
FONT_ATTR_SIZE = "size"
FONT_ATTR_WEIGHT = "weight"
FONT_ATTR_STYLE = "style"
FONT_ATTR_DECORATION = "decoration"

DECORATION_NONE = "none"

# =============================================================================
# Format-Specific Defaults
# =============================================================================

DEFAULT_HTML_PARSER: HtmlParser = "html.parser"
DEFAULT_HTML_COLLAPSE_WHITESPACE = True
DEFAULT_HTML_MAX_DEPTH = 256
DEFAULT_HTML_STANDALONE = True
DEFAULT_HTML_CHARSET = "UTF-8"

# Name given to the root section of every parsed document
ROOT_SECTION_NAME = "body"

DOCUMENT_PREFIX_TEMPLATE = "<!doctype html><html><head><meta charset='{charset}'></head><body>"
DOCUMENT_SUFFIX = "</body></html>"

# =============================================================================
# Dependencies
# =============================================================================

DEPS_HTML = [("beautifulsoup4", "bs4", ">=4.14.2")]
DEPS_HTML_PARSER_BACKENDS: dict[str, list[tuple[str, str, str]]] = {
    "html.parser": [],
    "html5lib": [("html5lib", "html5lib", "")],
    "lxml": [("lxml", "lxml", "")],
}
DEPS_CLI = [("rich", "rich", ">=13.0.0")]
