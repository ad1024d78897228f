#  Copyright (c) 2025 Tom Villani, Ph.D.
"""Parsers that build flow documents from source formats."""

from flowdoc.parsers.base import BaseParser
from flowdoc.parsers.html import HtmlToDocumentParser

__all__ = ["BaseParser", "HtmlToDocumentParser"]
