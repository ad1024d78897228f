#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/flowdoc/ast/visitors.py
"""Visitor pattern implementation for flow document traversal.

This module provides the visitor base class used by the HTML renderer and the
structural validator. Every node type has one abstract ``visit_*`` method, so
a concrete visitor that forgets a node type cannot be instantiated.

"""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Any

from flowdoc.ast.nodes import (
    Block,
    Bold,
    ContainerKind,
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
    Node,
    Paragraph,
    Run,
    Section,
)


class NodeVisitor(ABC):
    """Abstract base class for flow document visitors.

    Subclasses implement one ``visit_*`` method per node type. Container
    visitors are responsible for visiting their own children.

    Examples
    --------
    Counting runs:

        >>> class RunCounter(NodeVisitor):
        ...     def __init__(self):
        ...         self.count = 0
        ...     def visit_run(self, node):
        ...         self.count += 1
        ...     # ... remaining visit_* methods recurse into children

    """

    @abstractmethod
    def visit_document(self, node: Document) -> Any:
        """Visit a Document node."""
        pass

    @abstractmethod
    def visit_section(self, node: Section) -> Any:
        """Visit a Section node."""
        pass

    @abstractmethod
    def visit_paragraph(self, node: Paragraph) -> Any:
        """Visit a Paragraph node."""
        pass

    @abstractmethod
    def visit_list(self, node: List) -> Any:
        """Visit a List node."""
        pass

    @abstractmethod
    def visit_list_item(self, node: ListItem) -> Any:
        """Visit a ListItem node."""
        pass

    @abstractmethod
    def visit_image_block(self, node: ImageBlock) -> Any:
        """Visit an ImageBlock node."""
        pass

    @abstractmethod
    def visit_run(self, node: Run) -> Any:
        """Visit a Run node."""
        pass

    @abstractmethod
    def visit_line_break(self, node: LineBreak) -> Any:
        """Visit a LineBreak node."""
        pass

    @abstractmethod
    def visit_bold(self, node: Bold) -> Any:
        """Visit a Bold node."""
        pass

    @abstractmethod
    def visit_italic(self, node: Italic) -> Any:
        """Visit an Italic node."""
        pass

    @abstractmethod
    def visit_formatted_span(self, node: FormattedSpan) -> Any:
        """Visit a FormattedSpan node."""
        pass

    @abstractmethod
    def visit_hyperlink(self, node: Hyperlink) -> Any:
        """Visit a Hyperlink node."""
        pass

    @abstractmethod
    def visit_image_inline(self, node: ImageInline) -> Any:
        """Visit an ImageInline node."""
        pass

    @abstractmethod
    def visit_figure(self, node: Figure) -> Any:
        """Visit a Figure node."""
        pass


class ValidationVisitor(NodeVisitor):
    """Visitor that checks the container invariants of a document.

    The checks are:
    - Block containers hold only blocks, and lists hold only list items
    - Inline containers hold only inlines
    - A Figure wraps exactly one block
    - No node appears twice in the tree

    Parameters
    ----------
    strict : bool, default = True
        Whether to raise ValueError on the first failure

    Examples
    --------
        >>> validator = ValidationVisitor(strict=False)
        >>> document.accept(validator)
        >>> validator.errors
        []

    """

    def __init__(self, strict: bool = True):
        """Initialize the validator."""
        self.strict = strict
        self.errors: list[str] = []
        self._seen: set[int] = set()

    def _add_error(self, message: str) -> None:
        self.errors.append(message)
        if self.strict:
            raise ValueError(message)

    def _enter(self, node: Node) -> None:
        if id(node) in self._seen:
            self._add_error(f"{type(node).__name__} has more than one parent")
        self._seen.add(id(node))

    def _visit_children(self, node: Node) -> None:
        kind = node.container_kind
        for child in node.collection:
            if kind is ContainerKind.LIST_ITEMS:
                valid = isinstance(child, ListItem)
            elif kind is ContainerKind.INLINES:
                valid = isinstance(child, Inline)
            else:
                valid = isinstance(child, Block)
            if not valid:
                self._add_error(f"{type(node).__name__} cannot contain {type(child).__name__}")
                continue
            child.accept(self)

    def visit_document(self, node: Document) -> None:
        """Validate a Document node."""
        self._seen = set()
        self._visit_children(node)

    def visit_section(self, node: Section) -> None:
        """Validate a Section node."""
        self._enter(node)
        self._visit_children(node)

    def visit_paragraph(self, node: Paragraph) -> None:
        """Validate a Paragraph node."""
        self._enter(node)
        self._visit_children(node)

    def visit_list(self, node: List) -> None:
        """Validate a List node."""
        self._enter(node)
        self._visit_children(node)

    def visit_list_item(self, node: ListItem) -> None:
        """Validate a ListItem node."""
        self._enter(node)
        self._visit_children(node)

    def visit_image_block(self, node: ImageBlock) -> None:
        """Validate an ImageBlock node."""
        self._enter(node)

    def visit_run(self, node: Run) -> None:
        """Validate a Run node."""
        self._enter(node)

    def visit_line_break(self, node: LineBreak) -> None:
        """Validate a LineBreak node."""
        self._enter(node)

    def visit_bold(self, node: Bold) -> None:
        """Validate a Bold node."""
        self._enter(node)
        self._visit_children(node)

    def visit_italic(self, node: Italic) -> None:
        """Validate an Italic node."""
        self._enter(node)
        self._visit_children(node)

    def visit_formatted_span(self, node: FormattedSpan) -> None:
        """Validate a FormattedSpan node."""
        self._enter(node)
        self._visit_children(node)

    def visit_hyperlink(self, node: Hyperlink) -> None:
        """Validate a Hyperlink node."""
        self._enter(node)
        self._visit_children(node)

    def visit_image_inline(self, node: ImageInline) -> None:
        """Validate an ImageInline node."""
        self._enter(node)

    def visit_figure(self, node: Figure) -> None:
        """Validate a Figure node."""
        self._enter(node)
        if not isinstance(node.block, Block):
            self._add_error(f"Figure must wrap a block, not {type(node.block).__name__}")
            return
        node.block.accept(self)
