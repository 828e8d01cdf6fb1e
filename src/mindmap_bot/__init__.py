from mindmap_bot.config import MindMapConfig, config_from_dict, load_config
from mindmap_bot.errors import InvalidConfiguration, MindMapError, RenderError
from mindmap_bot.geometry import canvas_side, distance, is_ring_aligned
from mindmap_bot.layout import layout, layout_branches, layout_nodes
from mindmap_bot.mindmap import MindMap
from mindmap_bot.render import Renderer, RenderStyle, render_png
from mindmap_bot.schema import Branch, Diagram, Header, Node, Point

__all__ = [
    "MindMap",
    "MindMapConfig",
    "config_from_dict",
    "load_config",
    "layout",
    "layout_nodes",
    "layout_branches",
    "Renderer",
    "RenderStyle",
    "render_png",
    "Diagram",
    "Node",
    "Point",
    "Header",
    "Branch",
    "canvas_side",
    "distance",
    "is_ring_aligned",
    "MindMapError",
    "InvalidConfiguration",
    "RenderError",
]
