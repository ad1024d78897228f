#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/flowdoc/utils/colors.py
"""Color values for the ``color`` attribute of the composite font tag.

Color names, hex notation and the functional ``rgb()``/``hsl()`` syntaxes are
resolved by Pillow's ``ImageColor``. The parser accepts any other callable with
the same signature as :func:`parse_color` through ``HtmlOptions.color_parser``.

"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Optional

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class Color:
    """An sRGB color with an alpha channel.

    Parameters
    ----------
    red, green, blue : int
        Channel values in the range 0..255
    alpha : int, default 255
        Opacity in the range 0..255

    """

    red: int
    green: int
    blue: int
    alpha: int = 255

    def __post_init__(self) -> None:
        """Validate channel ranges."""
        for name in ("red", "green", "blue", "alpha"):
            value = getattr(self, name)
            if not 0 <= value <= 255:
                raise ValueError(f"Color channel {name} must be between 0 and 255, got {value}")

    def to_hex(self) -> str:
        """Return the canonical ``#RRGGBB`` or ``#RRGGBBAA`` form.

        The alpha pair is only written for translucent colors.

        """
        text = f"#{self.red:02X}{self.green:02X}{self.blue:02X}"
        if self.alpha != 255:
            text += f"{self.alpha:02X}"
        return text

    def __str__(self) -> str:
        return self.to_hex()


def parse_color(value: Optional[str]) -> Optional[Color]:
    """Resolve a color name, hex value or functional color string.

    Parameters
    ----------
    value : str or None
        Raw attribute value such as ``"red"``, ``"#F00"`` or ``"rgb(255, 0, 0)"``

    Returns
    -------
    Color or None
        The parsed color, or None if the value is empty, not recognized, or
        has a channel outside 0..255 (Pillow does not clamp functional
        syntax such as ``rgb(300, 0, 0)``)

    """
    if value is None or not value.strip():
        return None

    from PIL import ImageColor

    try:
        channels = ImageColor.getrgb(value.strip())
        return Color(*channels)
    except ValueError:
        logger.debug(f"Ignoring unrecognized color value: {value!r}")
        return None
