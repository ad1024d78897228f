#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# tests/unit/ast/test_containers.py
"""Unit tests for attaching elements to containers."""

import pytest

from flowdoc.ast import (
    Bold,
    Document,
    Figure,
    FormattedSpan,
    Hyperlink,
    ImageBlock,
    ImageInline,
    Italic,
    LineBreak,
    List,
    ListItem,
    Paragraph,
    Run,
    Section,
    attach,
)
from flowdoc.ast.nodes import Node
from flowdoc.exceptions import StructuralContractError


class _Stranger(Node):
    """A node that is neither a block nor an inline."""

    def accept(self, visitor):
        return None


@pytest.mark.unit
class TestBlockContainers:
    """Tests for containers holding blocks."""

    @pytest.mark.parametrize("parent", [Section(), ListItem(), Document()])
    def test_block_appended(self, parent) -> None:
        """Test that blocks are appended as they are."""
        child = Paragraph()
        result = attach(child, parent)
        assert result is child
        assert parent.collection == [child]

    def test_inline_wrapped_in_paragraph(self) -> None:
        """Test that an inline in a section gets its own paragraph."""
        section = Section()
        run = Run(text="hi")
        result = attach(run, section)
        assert isinstance(result, Paragraph)
        assert result.content[0] is run
        assert section.children == [result]

    def test_each_inline_gets_a_new_paragraph(self) -> None:
        """Test that consecutive inlines are not merged into one paragraph."""
        section = Section()
        attach(Run(text="a"), section)
        attach(Bold(), section)
        assert len(section.children) == 2
        assert all(isinstance(child, Paragraph) for child in section.children)

    def test_list_item_is_a_block(self) -> None:
        """Test that a stray list item goes straight into a section."""
        section = Section()
        item = ListItem()
        assert attach(item, section) is item


@pytest.mark.unit
class TestInlineContainers:
    """Tests for containers holding inlines."""

    @pytest.mark.parametrize("parent", [Paragraph(), Bold(), Italic(), FormattedSpan(), Hyperlink(uri="")])
    @pytest.mark.parametrize("child", [Run(text="x"), LineBreak(), ImageInline(uri="a.png")])
    def test_inline_appended(self, parent, child) -> None:
        """Test that inlines are appended as they are."""
        parent.content.clear()
        assert attach(child, parent) is child
        assert parent.content == [child]

    def test_block_wrapped_in_figure(self) -> None:
        """Test that a block inside an inline container becomes a figure."""
        paragraph = Paragraph()
        lst = List()
        result = attach(lst, paragraph)
        assert isinstance(result, Figure)
        assert result.block is lst
        assert paragraph.content == [result]


@pytest.mark.unit
class TestListContainer:
    """Tests for lists."""

    def test_list_item_appended(self) -> None:
        """Test that list items are appended as they are."""
        lst = List()
        item = ListItem()
        assert attach(item, lst) is item

    def test_block_wrapped_in_list_item(self) -> None:
        """Test that a block in a list gets its own item."""
        lst = List()
        paragraph = Paragraph()
        result = attach(paragraph, lst)
        assert isinstance(result, ListItem)
        assert result.children == [paragraph]

    def test_inline_wrapped_in_list_item_and_paragraph(self) -> None:
        """Test that an inline in a list gets an item holding a paragraph."""
        lst = List()
        run = Run(text="x")
        result = attach(run, lst)
        assert isinstance(result, ListItem)
        assert len(result.children) == 1
        assert isinstance(result.children[0], Paragraph)
        assert result.children[0].content == [run]


@pytest.mark.unit
class TestContractViolations:
    """Tests for combinations no rule covers."""

    @pytest.mark.parametrize("parent", [Run(text="x"), LineBreak(), ImageInline(uri=""), ImageBlock(uri="")])
    def test_leaf_parent(self, parent) -> None:
        """Test that leaves cannot receive children."""
        with pytest.raises(StructuralContractError) as exc_info:
            attach(Run(text="y"), parent)
        assert exc_info.value.child_type == "Run"
        assert exc_info.value.parent_type == type(parent).__name__

    def test_figure_parent(self) -> None:
        """Test that a figure cannot receive children."""
        with pytest.raises(StructuralContractError):
            attach(Run(text="y"), Figure(block=Paragraph()))

    @pytest.mark.parametrize("parent", [Section(), Paragraph(), List()])
    def test_unknown_child(self, parent) -> None:
        """Test that a child that is neither block nor inline is rejected."""
        with pytest.raises(StructuralContractError, match="_Stranger"):
            attach(_Stranger(), parent)
