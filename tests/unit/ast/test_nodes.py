#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# tests/unit/ast/test_nodes.py
"""Unit tests for flow document node classes."""

from dataclasses import fields

import pytest

from flowdoc.ast import (
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
    Paragraph,
    Run,
    Section,
    TextDecoration,
)
from flowdoc.utils.colors import Color


@pytest.mark.unit
class TestNodeCategories:
    """Tests for the block/inline split."""

    @pytest.mark.parametrize(
        "node",
        [Section(), Paragraph(), List(), ListItem(), ImageBlock(uri="a.png")],
    )
    def test_blocks(self, node) -> None:
        """Test that block nodes are Blocks and not Inlines."""
        assert isinstance(node, Block)
        assert not isinstance(node, Inline)

    @pytest.mark.parametrize(
        "node",
        [
            Run(text="x"),
            LineBreak(),
            Bold(),
            Italic(),
            FormattedSpan(),
            Hyperlink(uri="u"),
            ImageInline(uri="a.png"),
            Figure(block=Paragraph()),
        ],
    )
    def test_inlines_have_empty_formatting_by_default(self, node) -> None:
        """Test that inline nodes start without formatting."""
        assert isinstance(node, Inline)
        assert not isinstance(node, Block)
        assert node.formatting == InlineFormatting()
        assert node.formatting.is_empty()


@pytest.mark.unit
class TestContainers:
    """Tests for container kinds and collections."""

    def test_block_containers(self) -> None:
        """Test that block containers expose their children."""
        section = Section()
        item = ListItem()
        document = Document()
        assert Section.container_kind is ContainerKind.BLOCKS
        assert ListItem.container_kind is ContainerKind.BLOCKS
        assert Document.container_kind is ContainerKind.BLOCKS
        assert section.collection is section.children
        assert item.collection is item.children
        assert document.collection is document.blocks

    def test_inline_containers(self) -> None:
        """Test that inline containers expose their content."""
        for node in (Paragraph(), Bold(), Italic(), FormattedSpan(), Hyperlink(uri="")):
            assert node.container_kind is ContainerKind.INLINES
            assert node.collection is node.content

    def test_list_holds_list_items(self) -> None:
        """Test the list item container."""
        lst = List()
        assert lst.container_kind is ContainerKind.LIST_ITEMS
        assert lst.collection is lst.items

    @pytest.mark.parametrize(
        "node",
        [Run(text="x"), LineBreak(), ImageInline(uri=""), ImageBlock(uri=""), Figure(block=Paragraph())],
    )
    def test_leaves_have_no_collection(self, node) -> None:
        """Test that leaves and figures refuse children."""
        assert node.container_kind is None
        with pytest.raises(TypeError, match="cannot hold children"):
            node.collection  # noqa: B018

    def test_collections_are_independent(self) -> None:
        """Test that default lists are not shared between instances."""
        first = Paragraph()
        second = Paragraph()
        first.content.append(Run(text="a"))
        assert second.content == []


@pytest.mark.unit
class TestDefaults:
    """Tests for default attribute values."""

    def test_list_defaults_to_disc(self) -> None:
        """Test the default marker style."""
        assert List().marker_style is MarkerStyle.DISC

    def test_paragraph_defaults(self) -> None:
        """Test that paragraphs carry no font size or weight by default."""
        paragraph = Paragraph()
        assert paragraph.font_size is None
        assert paragraph.font_weight is None

    def test_image_dimensions_default_to_unset(self) -> None:
        """Test that image dimensions are optional."""
        image = ImageInline(uri="a.png")
        assert image.width is None
        assert image.height is None

    def test_section_name(self) -> None:
        """Test that sections carry an optional name."""
        assert Section().name is None
        assert Section(name="body").name == "body"

    def test_document_holds_only_blocks(self) -> None:
        """Test that a document carries nothing besides its blocks."""
        assert [f.name for f in fields(Document)] == ["blocks"]
        assert Document().blocks == []


@pytest.mark.unit
class TestInlineFormatting:
    """Tests for the InlineFormatting value."""

    def test_any_value_makes_it_non_empty(self) -> None:
        """Test is_empty for each field."""
        values = [
            InlineFormatting(foreground_color=Color(0, 0, 0)),
            InlineFormatting(font_family="Arial"),
            InlineFormatting(font_size=12.0),
            InlineFormatting(font_weight=FontWeight.NORMAL),
            InlineFormatting(font_style=FontStyle.NORMAL),
            InlineFormatting(text_decorations=frozenset()),
        ]
        for formatting in values:
            assert not formatting.is_empty()

    def test_frozen(self) -> None:
        """Test that formatting values are immutable."""
        formatting = InlineFormatting(font_size=10.0)
        with pytest.raises(AttributeError):
            formatting.font_size = 12.0  # type: ignore[misc]

    def test_equality(self) -> None:
        """Test value equality."""
        assert InlineFormatting(text_decorations=frozenset({TextDecoration.UNDERLINE})) == InlineFormatting(
            text_decorations=frozenset({TextDecoration.UNDERLINE})
        )


@pytest.mark.unit
class TestEquality:
    """Tests for structural equality of trees."""

    def test_equal_trees(self) -> None:
        """Test that identical trees compare equal."""

        def build():
            return Document(
                blocks=[Section(name="body", children=[Paragraph(content=[Run(text="a"), Bold(content=[Run(text="b")])])])]
            )

        assert build() == build()

    def test_different_inline_type(self) -> None:
        """Test that Bold and Italic with the same content differ."""
        assert Bold(content=[Run(text="a")]) != Italic(content=[Run(text="a")])
