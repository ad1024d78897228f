#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/flowdoc/renderers/html.py
"""HTML rendering from a flow document.

This module provides the HtmlRenderer class which serializes a flow document
back to HTML. The output uses the same small tag vocabulary the HTML parser
understands, so re-parsing rendered markup gives back the rendered document:

- Paragraphs become ``<h1>`` .. ``<h6>`` when their font size reaches a
  heading threshold, ``<p>`` otherwise
- Lists become ``<ul>``/``<ol>`` with ``<li>`` items
- Character formatting is written as one composite ``<font>`` tag per inline

"""

from __future__ import annotations

import html
import logging
from typing import Optional, Union

from flowdoc.ast.nodes import (
    Bold,
    Document,
    Figure,
    FormattedSpan,
    Hyperlink,
    ImageBlock,
    ImageInline,
    Inline,
    Italic,
    LineBreak,
    List,
    ListItem,
    MarkerStyle,
    Node,
    Paragraph,
    Run,
    Section,
)
from flowdoc.ast.visitors import NodeVisitor
from flowdoc.constants import DOCUMENT_PREFIX_TEMPLATE, DOCUMENT_SUFFIX, FONT_TAG, HEADING_THRESHOLDS, PARAGRAPH_TAG
from flowdoc.exceptions import RenderingError
from flowdoc.options.html import HtmlRendererOptions
from flowdoc.renderers.base import BaseRenderer
from flowdoc.utils.attributes import font_attributes, format_number
from flowdoc.utils.decorators import debug_timer

logger = logging.getLogger(__name__)

_RENDERABLE_NODES: tuple[type[Node], ...] = (
    Section,
    Paragraph,
    List,
    ListItem,
    ImageBlock,
    Run,
    LineBreak,
    Bold,
    Italic,
    FormattedSpan,
    Hyperlink,
    ImageInline,
    Figure,
)


def paragraph_tag(font_size: Optional[float]) -> str:
    """Choose the tag for a paragraph from its font size.

    Parameters
    ----------
    font_size : float or None
        Font size set on the paragraph

    Returns
    -------
    str
        "h1" .. "h6" for the first heading threshold the size reaches,
        otherwise "p"

    Examples
    --------
        >>> paragraph_tag(28)
        'h2'
        >>> paragraph_tag(13.5)
        'p'

    """
    if font_size is None:
        return PARAGRAPH_TAG
    for threshold, tag in HEADING_THRESHOLDS:
        if font_size >= threshold:
            return tag
    return PARAGRAPH_TAG


class HtmlRenderer(NodeVisitor, BaseRenderer):
    """Render a flow document to HTML.

    Child nodes are not visited recursively: each ``visit_*`` method writes
    its start tag and schedules its children and end tags on a work stack,
    so documents of any depth can be rendered.

    Parameters
    ----------
    options : HtmlRendererOptions or None, default = None
        HTML rendering options

    Examples
    --------
        >>> from flowdoc.ast import Document, Paragraph, Run, Section
        >>> doc = Document(blocks=[Section(children=[Paragraph(content=[Run(text="Hello")])])])
        >>> HtmlRenderer(HtmlRendererOptions(standalone=False)).render_to_string(doc)
        '<p>Hello</p>'

    """

    def __init__(self, options: HtmlRendererOptions | None = None):
        """Initialize the HTML renderer with options."""
        BaseRenderer._validate_options_type(options, HtmlRendererOptions, "html")
        options = options or HtmlRendererOptions()
        BaseRenderer.__init__(self, options)
        self.options: HtmlRendererOptions = options
        self._output: list[str] = []
        self._pending: list[Union[Node, str]] = []

    def render_to_string(self, doc: Document) -> str:
        """Render a document to an HTML string.

        Parameters
        ----------
        doc : Document
            The document to render

        Returns
        -------
        str
            A complete HTML document, or only the body markup when
            ``standalone`` is False

        Raises
        ------
        RenderingError
            If the document holds a node the renderer does not know

        """
        self._output = []
        self._pending = []

        with debug_timer(logger, "Rendering HTML"):
            doc.accept(self)
            while self._pending:
                item = self._pending.pop()
                if isinstance(item, str):
                    self._output.append(item)
                else:
                    self._visit(item)

        content = "".join(self._output)
        self._output = []

        if self.options.standalone:
            return self._wrap_in_document(content)
        return content

    def _wrap_in_document(self, content: str) -> str:
        prefix = DOCUMENT_PREFIX_TEMPLATE.format(charset=html.escape(self.options.charset, quote=True))
        return f"{prefix}{content}{DOCUMENT_SUFFIX}"

    def _visit(self, node: Node) -> None:
        if not isinstance(node, _RENDERABLE_NODES):
            raise RenderingError(f"Cannot render node of type {type(node).__name__}", rendering_stage="dispatch")
        node.accept(self)

    def _schedule(self, *items: Union[Node, str]) -> None:
        """Queue nodes to render and markup to write, in document order."""
        self._pending.extend(reversed(items))

    def _open_formatting(self, node: Inline) -> str:
        """Emit the ``<font>`` start tag for a formatted inline.

        Returns
        -------
        str
            The matching end tag, or an empty string when nothing was opened

        """
        attributes = font_attributes(node.formatting)
        if not attributes:
            return ""
        rendered = "".join(f' {name}="{html.escape(value, quote=True)}"' for name, value in attributes)
        self._output.append(f"<{FONT_TAG}{rendered}>")
        return f"</{FONT_TAG}>"

    @staticmethod
    def _image_tag(uri: str, width: Optional[float], height: Optional[float]) -> str:
        attributes = f' src="{html.escape(uri, quote=True)}"'
        if width is not None:
            attributes += f' width="{format_number(width)}"'
        if height is not None:
            attributes += f' height="{format_number(height)}"'
        return f"<img{attributes}>"

    @staticmethod
    def _tight_paragraph(item: ListItem) -> Optional[Paragraph]:
        """Return the paragraph whose inline can be written directly inside ``<li>``.

        Parsing ``<li>`` content that is a single inline wraps it in a plain
        Paragraph again. Returns None when the item needs its block markup.

        """
        if len(item.children) != 1:
            return None
        child = item.children[0]
        if (
            type(child) is Paragraph
            and child.font_size is None
            and child.font_weight is None
            and len(child.content) == 1
            and not isinstance(child.content[0], Figure)
        ):
            return child
        return None

    # ------------------------------------------------------------------
    # Blocks
    # ------------------------------------------------------------------

    def visit_document(self, node: Document) -> None:
        """Render a Document node."""
        self._schedule(*node.blocks)

    def visit_section(self, node: Section) -> None:
        """Render a Section node. Sections have no markup of their own."""
        self._schedule(*node.children)

    def visit_paragraph(self, node: Paragraph) -> None:
        """Render a Paragraph node as ``<p>`` or a heading tag.

        Parameters
        ----------
        node : Paragraph
            Paragraph to render

        """
        tag = paragraph_tag(node.font_size)
        self._output.append(f"<{tag}>")
        self._schedule(*node.content, f"</{tag}>")

    def visit_list(self, node: List) -> None:
        """Render a List node.

        Parameters
        ----------
        node : List
            List to render

        """
        tag = "ol" if node.marker_style is MarkerStyle.DECIMAL else "ul"
        self._output.append(f"<{tag}>")
        self._schedule(*node.items, f"</{tag}>")

    def visit_list_item(self, node: ListItem) -> None:
        """Render a ListItem node.

        Parameters
        ----------
        node : ListItem
            List item to render

        """
        self._output.append("<li>")
        paragraph = self._tight_paragraph(node)
        if paragraph is not None:
            self._schedule(*paragraph.content, "</li>")
        else:
            self._schedule(*node.children, "</li>")

    def visit_image_block(self, node: ImageBlock) -> None:
        """Render an ImageBlock node."""
        self._output.append(self._image_tag(node.uri, node.width, node.height))

    # ------------------------------------------------------------------
    # Inlines
    # ------------------------------------------------------------------

    def visit_run(self, node: Run) -> None:
        """Render a Run node as escaped text."""
        end = self._open_formatting(node)
        self._output.append(html.escape(node.text, quote=True))
        self._output.append(end)

    def visit_line_break(self, node: LineBreak) -> None:
        """Render a LineBreak node."""
        end = self._open_formatting(node)
        self._output.append("<br>")
        self._output.append(end)

    def visit_bold(self, node: Bold) -> None:
        """Render a Bold node."""
        end = self._open_formatting(node)
        self._output.append("<b>")
        self._schedule(*node.content, "</b>", end)

    def visit_italic(self, node: Italic) -> None:
        """Render an Italic node."""
        end = self._open_formatting(node)
        self._output.append("<i>")
        self._schedule(*node.content, "</i>", end)

    def visit_formatted_span(self, node: FormattedSpan) -> None:
        """Render a FormattedSpan node.

        The span itself has no tag; its formatting is the ``<font>`` wrapper.
        Without formatting the content is written bare.

        """
        end = self._open_formatting(node)
        self._schedule(*node.content, end)

    def visit_hyperlink(self, node: Hyperlink) -> None:
        """Render a Hyperlink node.

        Parameters
        ----------
        node : Hyperlink
            Hyperlink to render

        """
        end = self._open_formatting(node)
        href = html.escape(node.uri, quote=True)
        self._output.append(f'<a href="{href}">')
        self._schedule(*node.content, "</a>", end)

    def visit_image_inline(self, node: ImageInline) -> None:
        """Render an ImageInline node."""
        end = self._open_formatting(node)
        self._output.append(self._image_tag(node.uri, node.width, node.height))
        self._output.append(end)

    def visit_figure(self, node: Figure) -> None:
        """Render a Figure node by writing its block in place."""
        end = self._open_formatting(node)
        self._schedule(node.block, end)
