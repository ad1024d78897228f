#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/flowdoc/renderers/__init__.py
"""Renderers serializing flow documents."""

from flowdoc.renderers.base import BaseRenderer
from flowdoc.renderers.html import HtmlRenderer, paragraph_tag

__all__ = ["BaseRenderer", "HtmlRenderer", "paragraph_tag"]
