from __future__ import annotations

import logging

from PIL import ImageColor

logger = logging.getLogger(__name__)

BGR = tuple[int, int, int]


def to_bgr(color: str | None, default: str = "white") -> BGR:
    """
    Convert a CSS color name or hex string to an OpenCV BGR tuple.

    Unparseable values are not an error: they fall back to ``default``,
    the same way a canvas ignores an invalid fill style.
    """
    if color is None:
        color = default
    try:
        rgb = ImageColor.getrgb(color)
    except ValueError:
        logger.warning("Unknown color %r, using %r", color, default)
        rgb = ImageColor.getrgb(default)
    r, g, b = rgb[:3]
    return (b, g, r)
