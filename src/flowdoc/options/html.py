#  Copyright (c) 2025 Tom Villani, Ph.D.
"""Configuration options for HTML parsing and rendering."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Callable, Optional, get_args

from flowdoc.constants import (
    DEFAULT_HTML_CHARSET,
    DEFAULT_HTML_COLLAPSE_WHITESPACE,
    DEFAULT_HTML_MAX_DEPTH,
    DEFAULT_HTML_PARSER,
    DEFAULT_HTML_STANDALONE,
    HtmlParser,
)
from flowdoc.options.base import BaseParserOptions, BaseRendererOptions
from flowdoc.utils.colors import Color, parse_color


# src/flowdoc/options/html.py
@dataclass(frozen=True)
class HtmlRendererOptions(BaseRendererOptions):
    """Configuration options for rendering a flow document to HTML.

    Parameters
    ----------
    standalone : bool, default True
        Wrap the body markup in ``<!doctype html><html><head>...<body>``.
        If False, only the body markup is returned.
    charset : str, default "UTF-8"
        Value of the ``<meta charset>`` tag in standalone documents.

    """

    standalone: bool = field(
        default=DEFAULT_HTML_STANDALONE,
        metadata={
            "help": "Generate a complete HTML document (use --fragment for body markup only)",
            "importance": "core",
        },
    )
    charset: str = field(
        default=DEFAULT_HTML_CHARSET,
        metadata={"help": "Charset declared in the <meta> tag of standalone documents", "importance": "advanced"},
    )

    def __post_init__(self) -> None:
        """Validate renderer options.

        Raises
        ------
        ValueError
            If the charset is empty.

        """
        super().__post_init__()
        if not self.charset.strip():
            raise ValueError("charset must not be empty")


@dataclass(frozen=True)
class HtmlOptions(BaseParserOptions):
    """Configuration options for converting HTML to a flow document.

    Parameters
    ----------
    html_parser : {"html.parser", "html5lib", "lxml"}, default "html.parser"
        BeautifulSoup tree builder used to parse the markup:
        - "html.parser": built in, keeps the nesting written in the source
        - "html5lib": browser-like repair of malformed markup, slower
        - "lxml": fast, requires the lxml C library
    collapse_whitespace : bool, default True
        Collapse runs of whitespace in text nodes to a single space before
        building the document.
    max_depth : int, default 256
        Deepest HTML nesting level converted; deeper elements are dropped.
    color_parser : callable, default parse_color
        Function resolving a ``color`` attribute value to a Color, or None if
        the value is not recognized.

    """

    html_parser: HtmlParser = field(
        default=DEFAULT_HTML_PARSER,
        metadata={
            "help": "HTML parser backend: html.parser, html5lib or lxml",
            "choices": list(get_args(HtmlParser)),
            "importance": "core",
        },
    )
    collapse_whitespace: bool = field(
        default=DEFAULT_HTML_COLLAPSE_WHITESPACE,
        metadata={"help": "Collapse runs of whitespace in text to a single space", "importance": "advanced"},
    )
    max_depth: int = field(
        default=DEFAULT_HTML_MAX_DEPTH,
        metadata={"help": "Maximum HTML nesting depth converted", "type": int, "importance": "security"},
    )
    color_parser: Callable[[str], Optional[Color]] = field(
        default=parse_color,
        metadata={"help": "Function resolving color attribute values", "importance": "advanced"},
    )

    def __post_init__(self) -> None:
        """Validate parser options.

        Raises
        ------
        ValueError
            If the parser backend is unknown or max_depth is not positive.

        """
        super().__post_init__()
        if self.html_parser not in get_args(HtmlParser):
            raise ValueError(f"html_parser must be one of {get_args(HtmlParser)}, got {self.html_parser!r}")
        if self.max_depth <= 0:
            raise ValueError(f"max_depth must be positive, got {self.max_depth}")
