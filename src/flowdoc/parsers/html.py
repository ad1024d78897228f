#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/flowdoc/parsers/html.py
"""HTML to flow document converter.

The markup is parsed with BeautifulSoup. The resulting tree is walked from the
``<body>`` element (or the document root when there is none) and every node is
turned into at most one flow document element:

==================  ==============================================
HTML                Element
==================  ==============================================
p                   Paragraph
h1 .. h6            bold Paragraph with font size 32 .. 14
font                FormattedSpan (color, face, size, weight,
                    style, decoration)
br                  LineBreak
b, strong           Bold
i, em               Italic
ul / ol             List with disc / decimal markers
li                  ListItem
a                   Hyperlink (href)
img                 ImageInline (src, width, height)
text                Run, unless the text is only whitespace
==================  ==============================================

Every new element is attached to the element created for its HTML parent
using :func:`flowdoc.ast.attach`. Nodes that produce no element are pruned
together with their whole subtree.

"""

from __future__ import annotations

import logging
from typing import Any, Callable, Optional

from flowdoc.ast import (
    Bold,
    Document,
    FontWeight,
    FormattedSpan,
    Hyperlink,
    ImageInline,
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
    attach,
)
from flowdoc.constants import (
    DEPS_HTML,
    DEPS_HTML_PARSER_BACKENDS,
    FONT_ATTR_COLOR,
    FONT_ATTR_DECORATION,
    FONT_ATTR_FACE,
    FONT_ATTR_SIZE,
    FONT_ATTR_STYLE,
    FONT_ATTR_WEIGHT,
    HEADING_FONT_SIZES,
    ROOT_SECTION_NAME,
)
from flowdoc.exceptions import DependencyError, ParsingError
from flowdoc.options.html import HtmlOptions
from flowdoc.parsers.base import BaseParser
from flowdoc.utils.attributes import (
    collapse_whitespace,
    is_blank,
    parse_font_style,
    parse_font_weight,
    parse_number,
    parse_text_decorations,
)
from flowdoc.utils.colors import Color
from flowdoc.utils.decorators import check_dependencies, debug_timer, requires_dependencies

logger = logging.getLogger(__name__)


class HtmlToDocumentParser(BaseParser):
    """Convert HTML to a flow document.

    Parameters
    ----------
    options : HtmlOptions or None, default = None
        Conversion options

    Examples
    --------
        >>> parser = HtmlToDocumentParser()
        >>> doc = parser.parse("<p>Hello <b>world</b></p>")
        >>> paragraph = doc.blocks[0].children[0]
        >>> [type(node).__name__ for node in paragraph.content]
        ['Run', 'Bold']

    """

    _ELEMENT_HANDLERS: dict[str, str] = {
        "p": "_create_paragraph",
        "h1": "_create_heading",
        "h2": "_create_heading",
        "h3": "_create_heading",
        "h4": "_create_heading",
        "h5": "_create_heading",
        "h6": "_create_heading",
        "font": "_create_formatted_span",
        "br": "_create_line_break",
        "b": "_create_bold",
        "strong": "_create_bold",
        "i": "_create_italic",
        "em": "_create_italic",
        "ul": "_create_list",
        "ol": "_create_list",
        "li": "_create_list_item",
        "a": "_create_hyperlink",
        "img": "_create_image",
    }

    def __init__(self, options: HtmlOptions | None = None):
        """Initialize the HTML parser with options."""
        BaseParser._validate_options_type(options, HtmlOptions, "html")
        options = options or HtmlOptions()
        super().__init__(options)
        self.options: HtmlOptions = options
        self._depth_overflow_count = 0

    @requires_dependencies("html", DEPS_HTML)
    def parse(self, input_data: str) -> Document:
        """Parse HTML markup into a flow document.

        Parameters
        ----------
        input_data : str
            HTML markup, either a full document or a fragment

        Returns
        -------
        Document
            Document holding a single root Section; empty or whitespace-only
            input gives an empty Section

        Raises
        ------
        DependencyError
            If BeautifulSoup or the selected parser backend is not installed
        ParsingError
            If the HTML parser itself fails

        """
        if not input_data or is_blank(input_data):
            return self._new_document()

        soup = self._load_soup(input_data)
        return self.convert_soup(soup)

    def convert_soup(self, soup: Any) -> Document:
        """Convert an already parsed BeautifulSoup tree to a flow document.

        The tree is not modified.

        Parameters
        ----------
        soup : bs4.BeautifulSoup or bs4.element.Tag
            Parsed HTML

        Returns
        -------
        Document
            Document holding a single root Section

        """
        from bs4.element import Tag

        self._depth_overflow_count = 0

        section = Section(name=ROOT_SECTION_NAME)
        document = Document(blocks=[section])

        body = soup.find("body")
        root = body if isinstance(body, Tag) else soup

        with debug_timer(logger, "Converting HTML tree"):
            self._walk(root, section)

        if self._depth_overflow_count:
            logger.warning(
                f"Dropped {self._depth_overflow_count} HTML node(s) nested deeper than "
                f"max_depth={self.options.max_depth}"
            )

        return document

    @staticmethod
    def _new_document() -> Document:
        return Document(blocks=[Section(name=ROOT_SECTION_NAME)])

    def _load_soup(self, html_text: str) -> Any:
        """Parse markup with the configured BeautifulSoup tree builder."""
        from bs4 import BeautifulSoup
        from bs4.exceptions import FeatureNotFound

        check_dependencies(self.options.html_parser, DEPS_HTML_PARSER_BACKENDS[self.options.html_parser])

        try:
            return BeautifulSoup(html_text, self.options.html_parser)
        except FeatureNotFound as e:
            raise DependencyError(
                converter_name="html",
                missing_packages=[(self.options.html_parser, "")],
                message=f"Selected HtmlOptions.html_parser not found: {e}.",
            ) from e
        except Exception as e:
            raise ParsingError(f"Failed to parse HTML: {e}", parsing_stage="markup", original_error=e) from e

    def _walk(self, root: Any, section: Section) -> None:
        """Attach an element for every convertible node below ``root``.

        The tree is walked depth first with an explicit stack, so the nesting
        depth of the input is limited only by ``max_depth``.

        """
        stack: list[tuple[Any, Node, int]] = [(child, section, 1) for child in reversed(list(root.children))]

        while stack:
            html_node, parent, depth = stack.pop()

            if depth > self.options.max_depth:
                self._depth_overflow_count += 1
                continue

            element = self._create_element(html_node)
            if element is None:
                continue

            attach(element, parent)

            children = getattr(html_node, "contents", None)
            if children:
                stack.extend((child, element, depth + 1) for child in reversed(children))

    def _create_element(self, html_node: Any) -> Optional[Node]:
        """Create the flow document element for one HTML node.

        Parameters
        ----------
        html_node : Any
            BeautifulSoup node

        Returns
        -------
        Node or None
            The new element, or None for whitespace-only text, comments,
            doctypes and tags without a mapping

        """
        from bs4.element import NavigableString, PreformattedString, Tag

        if isinstance(html_node, NavigableString):
            if isinstance(html_node, PreformattedString):
                return None
            return self._create_run(str(html_node))

        if not isinstance(html_node, Tag):
            return None

        handler_name = self._ELEMENT_HANDLERS.get(html_node.name.lower())
        if handler_name is None:
            logger.debug(f"Dropping unsupported element <{html_node.name}> and its content")
            return None

        handler: Callable[[Any], Node] = getattr(self, handler_name)
        return handler(html_node)

    def _create_run(self, text: str) -> Optional[Run]:
        # BeautifulSoup has already decoded entities in text nodes
        if self.options.collapse_whitespace:
            text = collapse_whitespace(text)
        if is_blank(text):
            return None
        return Run(text=text)

    def _create_paragraph(self, html_node: Any) -> Paragraph:
        return Paragraph()

    def _create_heading(self, html_node: Any) -> Paragraph:
        """Headings become bold paragraphs with a level-specific font size."""
        return Paragraph(font_size=HEADING_FONT_SIZES[html_node.name.lower()], font_weight=FontWeight.BOLD)

    def _create_formatted_span(self, html_node: Any) -> FormattedSpan:
        """Process a font element to a FormattedSpan.

        Parameters
        ----------
        html_node : Any
            Font element

        Returns
        -------
        FormattedSpan
            Span carrying every recognized formatting attribute; unrecognized
            or unparsable values are left unset

        """
        face = html_node.get(FONT_ATTR_FACE)
        if face is not None and not face.strip():
            face = None

        formatting = InlineFormatting(
            foreground_color=self._parse_color(html_node.get(FONT_ATTR_COLOR)),
            font_family=face,
            font_size=parse_number(html_node.get(FONT_ATTR_SIZE)),
            font_weight=parse_font_weight(html_node.get(FONT_ATTR_WEIGHT)),
            font_style=parse_font_style(html_node.get(FONT_ATTR_STYLE)),
            text_decorations=parse_text_decorations(html_node.get(FONT_ATTR_DECORATION)),
        )
        return FormattedSpan(formatting=formatting)

    def _parse_color(self, value: Optional[str]) -> Optional[Color]:
        if value is None:
            return None
        return self.options.color_parser(value)

    def _create_line_break(self, html_node: Any) -> LineBreak:
        return LineBreak()

    def _create_bold(self, html_node: Any) -> Bold:
        return Bold()

    def _create_italic(self, html_node: Any) -> Italic:
        return Italic()

    def _create_list(self, html_node: Any) -> List:
        marker_style = MarkerStyle.DECIMAL if html_node.name.lower() == "ol" else MarkerStyle.DISC
        return List(marker_style=marker_style)

    def _create_list_item(self, html_node: Any) -> ListItem:
        return ListItem()

    def _create_hyperlink(self, html_node: Any) -> Hyperlink:
        return Hyperlink(uri=html_node.get("href", ""))

    def _create_image(self, html_node: Any) -> ImageInline:
        """Process an img element; unparsable dimensions are left unset."""
        return ImageInline(
            uri=html_node.get("src", ""),
            width=parse_number(html_node.get("width")),
            height=parse_number(html_node.get("height")),
        )
