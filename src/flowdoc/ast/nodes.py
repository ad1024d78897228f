#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/flowdoc/ast/nodes.py
"""Node classes for flow document representation.

This module defines the node hierarchy of a flow document: the nested block
and inline elements a word-processor style text editor works with. Each node
represents a structural or inline element and supports the visitor pattern.

Node Hierarchy
--------------
All nodes inherit from the base Node class.

Block-level nodes occupy their own layout region:
    - Section, Paragraph, List, ListItem, ImageBlock

Inline nodes flow within a line of text:
    - Run, LineBreak, Bold, Italic, FormattedSpan, Hyperlink
    - ImageInline, Figure

Containers
----------
Every container node holds exactly one kind of child, described by its
``container_kind`` class attribute and exposed through ``collection``:

    - ContainerKind.BLOCKS: Section, ListItem
    - ContainerKind.INLINES: Paragraph, Bold, Italic, FormattedSpan, Hyperlink
    - ContainerKind.LIST_ITEMS: List

Leaf nodes (Run, LineBreak, ImageBlock, ImageInline) and Figure have no
``container_kind``.

"""

from __future__ import annotations

from abc import ABC, abstractmethod
from dataclasses import dataclass, field
from enum import Enum
from typing import TYPE_CHECKING, Any, ClassVar, Optional

if TYPE_CHECKING:
    from flowdoc.utils.colors import Color


class ContainerKind(Enum):
    """What a container node may hold."""

    BLOCKS = "blocks"
    INLINES = "inlines"
    LIST_ITEMS = "list_items"


class MarkerStyle(Enum):
    """Marker drawn in front of list items."""

    NONE = "none"
    DISC = "disc"
    CIRCLE = "circle"
    SQUARE = "square"
    BOX = "box"
    DECIMAL = "decimal"
    LOWER_LATIN = "lower-latin"
    UPPER_LATIN = "upper-latin"
    LOWER_ROMAN = "lower-roman"
    UPPER_ROMAN = "upper-roman"


class FontWeight(Enum):
    """Font weight. Only the bold/normal distinction is modeled."""

    NORMAL = "normal"
    BOLD = "bold"


class FontStyle(Enum):
    """Font style."""

    NORMAL = "normal"
    ITALIC = "italic"


class TextDecoration(Enum):
    """A line drawn relative to the text, keyed by its HTML attribute value."""

    STRIKETHROUGH = "line-through"
    OVERLINE = "overline"
    BASELINE = "baseline"
    UNDERLINE = "underline"


@dataclass(frozen=True)
class InlineFormatting:
    """Character formatting carried by an inline node.

    Every field is independent. ``None`` means the value is inherited from
    the surrounding text, which is different from an explicit NORMAL value.

    Parameters
    ----------
    foreground_color : Color or None, default = None
        Text color
    font_family : str or None, default = None
        Font family name
    font_size : float or None, default = None
        Font size
    font_weight : FontWeight or None, default = None
        Font weight
    font_style : FontStyle or None, default = None
        Font style
    text_decorations : frozenset of TextDecoration or None, default = None
        Decorations applied to the text; an empty set removes inherited ones

    """

    foreground_color: Optional[Color] = None
    font_family: Optional[str] = None
    font_size: Optional[float] = None
    font_weight: Optional[FontWeight] = None
    font_style: Optional[FontStyle] = None
    text_decorations: Optional[frozenset[TextDecoration]] = None

    def is_empty(self) -> bool:
        """Return True if no formatting value is present."""
        return (
            self.foreground_color is None
            and self.font_family is None
            and self.font_size is None
            and self.font_weight is None
            and self.font_style is None
            and self.text_decorations is None
        )


class Node(ABC):
    """Base class for all flow document nodes.

    Container subclasses set ``container_kind`` and override ``collection``.

    """

    container_kind: ClassVar[Optional[ContainerKind]] = None

    @property
    def collection(self) -> list[Any]:
        """The list new children are appended to.

        Raises
        ------
        TypeError
            If the node is not a container

        """
        raise TypeError(f"{type(self).__name__} cannot hold children")

    @abstractmethod
    def accept(self, visitor: Any) -> Any:
        """Accept a visitor for processing this node.

        Parameters
        ----------
        visitor : Any
            A visitor object with visit_* methods

        Returns
        -------
        Any
            Result from the visitor's processing

        """
        pass


class Block(Node):
    """Marker base class for block-level nodes."""


class Inline(Node):
    """Marker base class for inline nodes.

    Every inline carries an ``InlineFormatting`` value in its ``formatting``
    field.

    """

    formatting: InlineFormatting


@dataclass
class Document(Node):
    """Root of a flow document.

    Parameters
    ----------
    blocks : list of Block, default = empty list
        Top-level blocks; documents built by the HTML parser always hold a
        single root Section

    """

    blocks: list[Block] = field(default_factory=list)

    container_kind: ClassVar[Optional[ContainerKind]] = ContainerKind.BLOCKS

    @property
    def collection(self) -> list[Block]:
        """Top-level blocks."""
        return self.blocks

    def accept(self, visitor: Any) -> Any:
        """Accept a visitor for processing this document."""
        return visitor.visit_document(self)


# ============================================================================
# Block-level Nodes
# ============================================================================


@dataclass
class Section(Block):
    """A named grouping of blocks.

    Parameters
    ----------
    children : list of Block, default = empty list
        Blocks in the section
    name : str or None, default = None
        Section name

    """

    children: list[Block] = field(default_factory=list)
    name: Optional[str] = None

    container_kind: ClassVar[Optional[ContainerKind]] = ContainerKind.BLOCKS

    @property
    def collection(self) -> list[Block]:
        """Child blocks."""
        return self.children

    def accept(self, visitor: Any) -> Any:
        """Accept a visitor for processing this section."""
        return visitor.visit_section(self)


@dataclass
class Paragraph(Block):
    """Paragraph node containing inline content.

    A paragraph with a font size of 14 or more is a heading; see
    ``flowdoc.constants.HEADING_THRESHOLDS``.

    Parameters
    ----------
    content : list of Inline, default = empty list
        Inline nodes representing paragraph content
    font_size : float or None, default = None
        Font size set on the paragraph itself
    font_weight : FontWeight or None, default = None
        Font weight set on the paragraph itself

    """

    content: list[Inline] = field(default_factory=list)
    font_size: Optional[float] = None
    font_weight: Optional[FontWeight] = None

    container_kind: ClassVar[Optional[ContainerKind]] = ContainerKind.INLINES

    @property
    def collection(self) -> list[Inline]:
        """Inline content."""
        return self.content

    def accept(self, visitor: Any) -> Any:
        """Accept a visitor for processing this paragraph."""
        return visitor.visit_paragraph(self)


@dataclass
class List(Block):
    """List node (bulleted or numbered).

    Parameters
    ----------
    items : list of ListItem, default = empty list
        List items
    marker_style : MarkerStyle, default = MarkerStyle.DISC
        Marker drawn before each item

    """

    items: list[ListItem] = field(default_factory=list)
    marker_style: MarkerStyle = MarkerStyle.DISC

    container_kind: ClassVar[Optional[ContainerKind]] = ContainerKind.LIST_ITEMS

    @property
    def collection(self) -> list[ListItem]:
        """List items."""
        return self.items

    def accept(self, visitor: Any) -> Any:
        """Accept a visitor for processing this list."""
        return visitor.visit_list(self)


@dataclass
class ListItem(Block):
    """List item node containing block content.

    Parameters
    ----------
    children : list of Block, default = empty list
        Block-level nodes in the list item

    """

    children: list[Block] = field(default_factory=list)

    container_kind: ClassVar[Optional[ContainerKind]] = ContainerKind.BLOCKS

    @property
    def collection(self) -> list[Block]:
        """Child blocks."""
        return self.children

    def accept(self, visitor: Any) -> Any:
        """Accept a visitor for processing this list item."""
        return visitor.visit_list_item(self)


@dataclass
class ImageBlock(Block):
    """An image occupying its own block.

    Only the image location and its requested size are modeled.

    Parameters
    ----------
    uri : str
        Image source URI, absolute or relative
    width : float or None, default = None
        Requested width; None when unset
    height : float or None, default = None
        Requested height; None when unset

    """

    uri: str
    width: Optional[float] = None
    height: Optional[float] = None

    def accept(self, visitor: Any) -> Any:
        """Accept a visitor for processing this image."""
        return visitor.visit_image_block(self)


# ============================================================================
# Inline Nodes
# ============================================================================


@dataclass
class Run(Inline):
    """Plain text node.

    Parameters
    ----------
    text : str
        Text content, with all HTML entities decoded
    formatting : InlineFormatting, default = no formatting
        Character formatting

    """

    text: str
    formatting: InlineFormatting = field(default_factory=InlineFormatting)

    def accept(self, visitor: Any) -> Any:
        """Accept a visitor for processing this run."""
        return visitor.visit_run(self)


@dataclass
class LineBreak(Inline):
    """Line break node."""

    formatting: InlineFormatting = field(default_factory=InlineFormatting)

    def accept(self, visitor: Any) -> Any:
        """Accept a visitor for processing this line break."""
        return visitor.visit_line_break(self)


@dataclass
class Bold(Inline):
    """Bold text.

    Parameters
    ----------
    content : list of Inline, default = empty list
        Inline nodes rendered bold
    formatting : InlineFormatting, default = no formatting
        Character formatting

    """

    content: list[Inline] = field(default_factory=list)
    formatting: InlineFormatting = field(default_factory=InlineFormatting)

    container_kind: ClassVar[Optional[ContainerKind]] = ContainerKind.INLINES

    @property
    def collection(self) -> list[Inline]:
        """Inline content."""
        return self.content

    def accept(self, visitor: Any) -> Any:
        """Accept a visitor for processing this bold span."""
        return visitor.visit_bold(self)


@dataclass
class Italic(Inline):
    """Italic text.

    Parameters
    ----------
    content : list of Inline, default = empty list
        Inline nodes rendered italic
    formatting : InlineFormatting, default = no formatting
        Character formatting

    """

    content: list[Inline] = field(default_factory=list)
    formatting: InlineFormatting = field(default_factory=InlineFormatting)

    container_kind: ClassVar[Optional[ContainerKind]] = ContainerKind.INLINES

    @property
    def collection(self) -> list[Inline]:
        """Inline content."""
        return self.content

    def accept(self, visitor: Any) -> Any:
        """Accept a visitor for processing this italic span."""
        return visitor.visit_italic(self)


@dataclass
class FormattedSpan(Inline):
    """Span of inline content carrying character formatting.

    This is the node behind the composite ``<font>`` tag.

    Parameters
    ----------
    content : list of Inline, default = empty list
        Formatted inline nodes
    formatting : InlineFormatting, default = no formatting
        Character formatting

    """

    content: list[Inline] = field(default_factory=list)
    formatting: InlineFormatting = field(default_factory=InlineFormatting)

    container_kind: ClassVar[Optional[ContainerKind]] = ContainerKind.INLINES

    @property
    def collection(self) -> list[Inline]:
        """Inline content."""
        return self.content

    def accept(self, visitor: Any) -> Any:
        """Accept a visitor for processing this span."""
        return visitor.visit_formatted_span(self)


@dataclass
class Hyperlink(Inline):
    """Hyperlink node.

    Parameters
    ----------
    uri : str
        Link destination, absolute or relative
    content : list of Inline, default = empty list
        Inline nodes representing link text
    formatting : InlineFormatting, default = no formatting
        Character formatting

    """

    uri: str
    content: list[Inline] = field(default_factory=list)
    formatting: InlineFormatting = field(default_factory=InlineFormatting)

    container_kind: ClassVar[Optional[ContainerKind]] = ContainerKind.INLINES

    @property
    def collection(self) -> list[Inline]:
        """Inline content."""
        return self.content

    def accept(self, visitor: Any) -> Any:
        """Accept a visitor for processing this hyperlink."""
        return visitor.visit_hyperlink(self)


@dataclass
class ImageInline(Inline):
    """An image flowing with the surrounding text.

    Parameters
    ----------
    uri : str
        Image source URI, absolute or relative
    width : float or None, default = None
        Requested width; None when unset
    height : float or None, default = None
        Requested height; None when unset
    formatting : InlineFormatting, default = no formatting
        Character formatting

    """

    uri: str
    width: Optional[float] = None
    height: Optional[float] = None
    formatting: InlineFormatting = field(default_factory=InlineFormatting)

    def accept(self, visitor: Any) -> Any:
        """Accept a visitor for processing this image."""
        return visitor.visit_image_inline(self)


@dataclass
class Figure(Inline):
    """Inline wrapper that embeds one block where only inlines are allowed.

    Parameters
    ----------
    block : Block
        The wrapped block
    formatting : InlineFormatting, default = no formatting
        Character formatting

    """

    block: Block
    formatting: InlineFormatting = field(default_factory=InlineFormatting)

    def accept(self, visitor: Any) -> Any:
        """Accept a visitor for processing this figure."""
        return visitor.visit_figure(self)
