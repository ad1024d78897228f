#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/flowdoc/utils/attributes.py
"""Parsing and formatting of HTML attribute values.

The parse functions never raise: an unusable value becomes ``None`` so the
attribute is treated as absent. The format functions produce the values
written back into ``<font>``, ``<img>`` and similar tags.

"""

from __future__ import annotations

import logging
import math
import re
from typing import Optional

from flowdoc.ast.nodes import FontStyle, FontWeight, InlineFormatting, TextDecoration
from flowdoc.constants import (
    DECORATION_NONE,
    FONT_ATTR_COLOR,
    FONT_ATTR_DECORATION,
    FONT_ATTR_FACE,
    FONT_ATTR_SIZE,
    FONT_ATTR_STYLE,
    FONT_ATTR_WEIGHT,
)

logger = logging.getLogger(__name__)

HTML_WHITESPACE = " \t\n\r\f"

_WHITESPACE_RE = re.compile(f"[{HTML_WHITESPACE}]+")


def collapse_whitespace(text: str) -> str:
    """Collapse every run of HTML whitespace to one space.

    Only space, tab, newline, carriage return and form feed count; a decoded
    ``&nbsp;`` or other Unicode space is text and is kept as is.

    """
    return _WHITESPACE_RE.sub(" ", text)


def is_blank(text: str) -> bool:
    """Whether ``text`` holds nothing but HTML whitespace."""
    return not text.strip(HTML_WHITESPACE)


def parse_number(value: Optional[str]) -> Optional[float]:
    """Parse a numeric attribute such as ``size``, ``width`` or ``height``.

    Parameters
    ----------
    value : str or None
        Raw attribute value

    Returns
    -------
    float or None
        The parsed number, or None for missing, non-numeric, NaN or infinite
        values

    """
    if value is None:
        return None
    try:
        number = float(value.strip())
    except ValueError:
        logger.debug(f"Ignoring non-numeric attribute value: {value!r}")
        return None
    if math.isnan(number) or math.isinf(number):
        logger.debug(f"Ignoring non-finite attribute value: {value!r}")
        return None
    return number


def parse_font_weight(value: Optional[str]) -> Optional[FontWeight]:
    """Parse the ``weight`` attribute; only "bold" and "normal" are recognized."""
    if value == "bold":
        return FontWeight.BOLD
    if value == "normal":
        return FontWeight.NORMAL
    return None


def parse_font_style(value: Optional[str]) -> Optional[FontStyle]:
    """Parse the ``style`` attribute; only "italic" and "normal" are recognized."""
    if value == "italic":
        return FontStyle.ITALIC
    if value == "normal":
        return FontStyle.NORMAL
    return None


def parse_text_decorations(value: Optional[str]) -> Optional[frozenset[TextDecoration]]:
    """Parse the ``decoration`` attribute.

    "none" and unrecognized values leave the decorations absent.

    """
    if value is None or value == DECORATION_NONE:
        return None
    try:
        return frozenset({TextDecoration(value)})
    except ValueError:
        return None


def format_number(value: float) -> str:
    """Format a number for an attribute, without a trailing ``.0``."""
    if value == int(value):
        return str(int(value))
    return repr(value)


def format_text_decorations(decorations: frozenset[TextDecoration]) -> str:
    """Name a single decoration; zero or several collapse to "none"."""
    if len(decorations) == 1:
        (decoration,) = decorations
        return decoration.value
    return DECORATION_NONE


def font_attributes(formatting: InlineFormatting) -> list[tuple[str, str]]:
    """List the ``<font>`` attributes for the present formatting values.

    Parameters
    ----------
    formatting : InlineFormatting
        Formatting of one inline node

    Returns
    -------
    list of (str, str)
        Attribute name/value pairs in the order color, face, size, weight,
        style, decoration; absent values are skipped

    """
    attributes: list[tuple[str, str]] = []
    if formatting.foreground_color is not None:
        attributes.append((FONT_ATTR_COLOR, formatting.foreground_color.to_hex()))
    if formatting.font_family is not None:
        attributes.append((FONT_ATTR_FACE, formatting.font_family))
    if formatting.font_size is not None:
        attributes.append((FONT_ATTR_SIZE, format_number(formatting.font_size)))
    if formatting.font_weight is not None:
        weight = "bold" if formatting.font_weight is FontWeight.BOLD else "normal"
        attributes.append((FONT_ATTR_WEIGHT, weight))
    if formatting.font_style is not None:
        style = "italic" if formatting.font_style is FontStyle.ITALIC else "normal"
        attributes.append((FONT_ATTR_STYLE, style))
    if formatting.text_decorations is not None:
        attributes.append((FONT_ATTR_DECORATION, format_text_decorations(formatting.text_decorations)))
    return attributes
