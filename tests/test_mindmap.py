from __future__ import annotations

import io
import math

import pytest
from PIL import Image

from mindmap_bot.config import config_from_dict
from mindmap_bot.mindmap import MindMap
from mindmap_bot.schema import Diagram, Point


def _scenario() -> dict:
    return {
        "header": "Test",
        "centralNode": {"x": 400, "y": 400, "text": "hi"},
        "nodes": [{"x": 0, "y": 0, "text": f"Node {i}", "color": "green"} for i in range(1, 11)],
        "branches": [
            {"name": "left", "nodes": [{"text": "Node A"}]},
            {"name": "right", "nodes": [{"text": "Node B"}]},
        ],
    }


def test_scenario_single_ring_with_two_branches():
    mm = MindMap()
    diagram = mm.set_config(_scenario())

    assert diagram.ring_count == 1
    assert len(diagram.nodes) == 10

    center = Point(400, 400)
    for b, expected in zip(diagram.branches, (0.0, math.pi)):
        head = b.nodes[0]
        assert mm.distance(center, head) == pytest.approx(200)
        angle = math.atan2(head.y - center.y, head.x - center.x) % (2 * math.pi)
        assert angle == pytest.approx(expected)

    png = mm.generate_image()
    assert len(png) > 0
    assert Image.open(io.BytesIO(png)).size == (600, 600)


def test_set_config_replaces_everything():
    mm = MindMap()
    mm.set_config(_scenario())
    second = mm.set_config({"nodes": [{"text": "only"}] * 13})

    assert second.header is None
    assert second.central is None
    assert second.branches == ()
    assert [n.text for n in second.nodes] == ["only"] * 13
    assert mm.diagram is second
    assert Image.open(io.BytesIO(mm.generate_image())).size == (820, 820)


def test_set_config_accepts_config_object():
    mm = MindMap()
    cfg = config_from_dict(_scenario())
    assert mm.set_config(cfg).header.text == "Test"


def test_unconfigured_mindmap_renders_empty_canvas():
    mm = MindMap()
    assert mm.diagram == Diagram()
    assert Image.open(io.BytesIO(mm.generate_image())).size == (600, 600)


def test_power_of_12_delegate():
    assert MindMap.is_power_of_12(144)
    assert not MindMap.is_power_of_12(13)
