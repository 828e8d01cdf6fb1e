from __future__ import annotations

from typing import Any

from mindmap_bot.config import MindMapConfig, config_from_dict
from mindmap_bot.geometry import HasXY, distance, is_ring_aligned
from mindmap_bot.layout import layout
from mindmap_bot.render import Renderer, RenderStyle
from mindmap_bot.schema import Diagram


class MindMap:
    """
    Configure-then-render wrapper around ``layout`` and ``Renderer``.

    ``set_config`` replaces the whole diagram; nothing from a previous
    configuration survives.
    """

    def __init__(self, style: RenderStyle | None = None) -> None:
        self._renderer = Renderer(style)
        self._diagram = Diagram()

    @property
    def diagram(self) -> Diagram:
        return self._diagram

    def set_config(self, config: MindMapConfig | dict[str, Any]) -> Diagram:
        if not isinstance(config, MindMapConfig):
            config = config_from_dict(config)
        self._diagram = layout(config)
        return self._diagram

    def generate_image(self) -> bytes:
        return self._renderer.render_png(self._diagram)

    @staticmethod
    def distance(a: HasXY, b: HasXY) -> float:
        return distance(a, b)

    @staticmethod
    def is_power_of_12(n: int) -> bool:
        return is_ring_aligned(n)
