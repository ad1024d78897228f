#  Copyright (c) 2025 Tom Villani, Ph.D.
"""Configuration options for the flowdoc parser and renderer.

Options are frozen dataclasses; use ``create_updated`` to derive a modified
copy.
"""

from __future__ import annotations

from flowdoc.options.base import BaseParserOptions, BaseRendererOptions, CloneFrozenMixin
from flowdoc.options.html import HtmlOptions, HtmlRendererOptions

__all__ = [
    "CloneFrozenMixin",
    "BaseParserOptions",
    "BaseRendererOptions",
    "HtmlOptions",
    "HtmlRendererOptions",
]
