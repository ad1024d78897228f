#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/flowdoc/ast/containers.py
"""Container rules for attaching elements while building a document.

Each container node holds exactly one kind of child (see
:class:`~flowdoc.ast.nodes.ContainerKind`). When the HTML parser creates an
element whose kind does not match its parent, :func:`attach` inserts the
wrapper that makes the tree well-typed:

==============  ==========  ==========================================
Parent holds    Child       Result
==============  ==========  ==========================================
BLOCKS          Block       appended
BLOCKS          Inline      wrapped in a new Paragraph
INLINES         Inline      appended
INLINES         Block       wrapped in a Figure
LIST_ITEMS      ListItem    appended
LIST_ITEMS      Block       wrapped in a new ListItem
LIST_ITEMS      Inline      wrapped in a new ListItem holding a Paragraph
==============  ==========  ==========================================

Any other combination raises :class:`~flowdoc.exceptions.StructuralContractError`.

"""

from __future__ import annotations

import logging

from flowdoc.ast.nodes import Block, ContainerKind, Figure, Inline, ListItem, Node, Paragraph
from flowdoc.exceptions import StructuralContractError

logger = logging.getLogger(__name__)


def attach(child: Node, parent: Node) -> Node:
    """Attach ``child`` to ``parent``, wrapping it if the kinds differ.

    Parameters
    ----------
    child : Node
        Newly created element
    parent : Node
        Container receiving the element

    Returns
    -------
    Node
        The node actually appended to the parent: ``child`` itself, or the
        wrapper that now holds it

    Raises
    ------
    StructuralContractError
        If the parent is not a container or the child is neither a block nor
        an inline

    """
    kind = parent.container_kind
    node: Node

    if kind is ContainerKind.BLOCKS:
        if isinstance(child, Block):
            node = child
        elif isinstance(child, Inline):
            node = Paragraph(content=[child])
        else:
            raise StructuralContractError(type(child).__name__, type(parent).__name__)

    elif kind is ContainerKind.INLINES:
        if isinstance(child, Inline):
            node = child
        elif isinstance(child, Block):
            node = Figure(block=child)
        else:
            raise StructuralContractError(type(child).__name__, type(parent).__name__)

    elif kind is ContainerKind.LIST_ITEMS:
        if isinstance(child, ListItem):
            node = child
        elif isinstance(child, Block):
            node = ListItem(children=[child])
        elif isinstance(child, Inline):
            node = ListItem(children=[Paragraph(content=[child])])
        else:
            raise StructuralContractError(type(child).__name__, type(parent).__name__)

    else:
        raise StructuralContractError(type(child).__name__, type(parent).__name__)

    if node is not child:
        logger.debug(f"Wrapped {type(child).__name__} in {type(node).__name__} inside {type(parent).__name__}")
    parent.collection.append(node)
    return node
