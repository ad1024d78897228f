#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/flowdoc/ast/__init__.py
"""Flow document model.

The module consists of:

- nodes: node classes representing document structure
- containers: the rules for attaching elements to their parents
- visitors: visitor pattern base class and the structural validator

Examples
--------
    >>> from flowdoc.ast import Document, Paragraph, Run, Section
    >>> doc = Document(blocks=[Section(name="body", children=[
    ...     Paragraph(content=[Run(text="Hello world")])
    ... ])])

"""

from __future__ import annotations

from flowdoc.ast.containers import attach
from flowdoc.ast.nodes import (
    Block,
    Bold,
    ContainerKind,
    Document,
    Figure,
    FontStyle,
    FontWeight,
    FormattedSpan,
    Hyperlink,
    ImageBlock,
    ImageInline,
    Inline,
    InlineFormatting,
    Italic,
    LineBreak,
    List,
    ListItem,
    MarkerStyle,
    Node,
    Paragraph,
    Run,
    Section,
    TextDecoration,
)
from flowdoc.ast.visitors import NodeVisitor, ValidationVisitor

__all__ = [
    # Base classes
    "Node",
    "Block",
    "Inline",
    # Document and blocks
    "Document",
    "Section",
    "Paragraph",
    "List",
    "ListItem",
    "ImageBlock",
    # Inlines
    "Run",
    "LineBreak",
    "Bold",
    "Italic",
    "FormattedSpan",
    "Hyperlink",
    "ImageInline",
    "Figure",
    # Attribute values
    "ContainerKind",
    "MarkerStyle",
    "FontWeight",
    "FontStyle",
    "TextDecoration",
    "InlineFormatting",
    # Tree building and traversal
    "attach",
    "NodeVisitor",
    "ValidationVisitor",
]
