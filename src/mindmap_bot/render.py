from __future__ import annotations

import logging
import math
from dataclasses import dataclass, field

import cv2
import numpy as np

from mindmap_bot.colors import BGR, to_bgr
from mindmap_bot.errors import RenderError
from mindmap_bot.schema import Diagram, Node, Point

logger = logging.getLogger(__name__)

FONT = cv2.FONT_HERSHEY_SIMPLEX
WATERMARK = "Generated with mindmap-bot"


@dataclass(frozen=True)
class TextStyle:
    px: int
    color: str = "black"
    thickness: int = 1

    @property
    def scale(self) -> float:
        return cv2.getFontScaleFromHeight(FONT, self.px, self.thickness)


@dataclass(frozen=True)
class RenderStyle:
    background: str = "#403f3b"
    line_color: str = "black"
    line_width: int = 4
    outline_color: str = "black"
    outline_width: int = 3
    node_radius: int = 50
    node_fill: str = "white"
    central_radius: int = 60
    central_fill: str = "white"
    central_gap: int = 60  # lines start this far out from the centre
    node_gap: int = 50  # ... and stop this far short of the node
    baseline_offset: int = 8
    header_y: int = 50
    watermark_margin: int = 10
    central_text: TextStyle = field(default_factory=lambda: TextStyle(18))
    header_text: TextStyle = field(default_factory=lambda: TextStyle(24, thickness=2))
    node_text: TextStyle = field(default_factory=lambda: TextStyle(16))
    watermark_text: TextStyle = field(default_factory=lambda: TextStyle(16, color="white"))
    watermark: str = WATERMARK


def _pt(x: float, y: float) -> tuple[int, int]:
    return (int(round(x)), int(round(y)))


def text_width(text: str, style: TextStyle) -> int:
    (w, _h), _baseline = cv2.getTextSize(text, FONT, style.scale, style.thickness)
    return int(w)


class Renderer:
    """Paints a laid-out Diagram onto a square BGR canvas."""

    def __init__(self, style: RenderStyle | None = None) -> None:
        self.style = style or RenderStyle()

    # ---- primitives ----

    def _put_text(self, img: np.ndarray, text: str, x: float, y: float, ts: TextStyle) -> None:
        if not text:
            return
        cv2.putText(img, text, _pt(x, y), FONT, ts.scale, to_bgr(ts.color), ts.thickness, cv2.LINE_AA)

    def _centered_text(self, img: np.ndarray, text: str, anchor: Point, ts: TextStyle) -> None:
        w = text_width(text, ts)
        self._put_text(img, text, anchor.x - w / 2, anchor.y + self.style.baseline_offset, ts)

    def _circle(self, img: np.ndarray, at: Point, radius: int, color: BGR, thickness: int) -> None:
        cv2.circle(img, _pt(at.x, at.y), radius, color, thickness, cv2.LINE_AA)

    def _connector(self, img: np.ndarray, center: Point, node: Node) -> None:
        s = self.style
        bearing = math.atan2(node.y - center.y, node.x - center.x)
        ux, uy = math.cos(bearing), math.sin(bearing)
        start = _pt(center.x + s.central_gap * ux, center.y + s.central_gap * uy)
        end = _pt(node.x - s.node_gap * ux, node.y - s.node_gap * uy)
        cv2.line(img, start, end, to_bgr(s.line_color), s.line_width, cv2.LINE_AA)

    # ---- passes ----

    def render(self, diagram: Diagram) -> np.ndarray:
        s = self.style
        side = diagram.canvas_side
        img = np.empty((side, side, 3), dtype=np.uint8)

        # 1) background
        img[:] = to_bgr(s.background)

        central = diagram.central
        if central is not None:
            center = central.point

            # 2) label first, it is painted again on top in step 5
            self._centered_text(img, central.text, center, s.central_text)

            # 3) connectors
            for node in diagram.nodes:
                self._connector(img, center, node)

            # 4) node fills; without a hub only outlines are drawn
            for node in diagram.nodes:
                self._circle(img, node.point, s.node_radius, to_bgr(node.fill_color, s.node_fill), -1)

        # 5) central circle + label
        if central is not None:
            self._circle(img, central.point, s.central_radius, to_bgr(s.central_fill), -1)
            self._circle(img, central.point, s.central_radius, to_bgr(s.outline_color), s.outline_width)
            self._centered_text(img, central.text, central.point, s.central_text)

        # 6) header
        if diagram.header is not None:
            w = text_width(diagram.header.text, s.header_text)
            self._put_text(img, diagram.header.text, (side - w) / 2, s.header_y, s.header_text)

        # 7) node outlines + labels
        for node in diagram.nodes:
            self._circle(img, node.point, s.node_radius, to_bgr(s.outline_color), s.outline_width)
            self._centered_text(img, node.text, node.point, s.node_text)

        # 8) watermark, bottom-right
        w = text_width(s.watermark, s.watermark_text)
        self._put_text(
            img,
            s.watermark,
            side - w - s.watermark_margin,
            side - s.watermark_margin,
            s.watermark_text,
        )

        logger.debug("Rendered %d nodes on a %dx%d canvas", len(diagram.nodes), side, side)
        return img

    def render_png(self, diagram: Diagram) -> bytes:
        img = self.render(diagram)
        ok, buf = cv2.imencode(".png", img)
        if not ok:
            raise RenderError("Failed to encode mind map as PNG")
        return buf.tobytes()


def render_png(diagram: Diagram, style: RenderStyle | None = None) -> bytes:
    return Renderer(style).render_png(diagram)
