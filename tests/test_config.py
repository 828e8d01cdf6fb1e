from __future__ import annotations

import json
from pathlib import Path

import pytest

from mindmap_bot.config import config_from_dict, load_config
from mindmap_bot.errors import InvalidConfiguration
from mindmap_bot.samples import demo_config_dict


def test_config_from_demo_dict():
    cfg = config_from_dict(demo_config_dict())

    assert cfg.header == "Mindmap bot test code"
    assert cfg.central_node is not None
    assert (cfg.central_node.x, cfg.central_node.y, cfg.central_node.text) == (400, 400, "hi")
    assert len(cfg.nodes) == 10
    assert cfg.nodes[0].text == "Node 1"
    assert cfg.nodes[0].color == "green"

    # bare node descriptors become one-node branches
    assert [b.name for b in cfg.branches] == ["Node A", "Node B"]
    assert cfg.branches[0].nodes[0].color == "white"


def test_everything_is_optional():
    cfg = config_from_dict({})
    assert cfg.header is None
    assert cfg.central_node is None
    assert cfg.nodes == ()
    assert cfg.branches == ()


def test_named_branch_with_several_nodes():
    cfg = config_from_dict(
        {"branches": [{"name": "tools", "nodes": [{"text": "a"}, {"text": "b", "x": 3}]}]}
    )
    (branch,) = cfg.branches
    assert branch.name == "tools"
    assert [n.text for n in branch.nodes] == ["a", "b"]
    assert branch.nodes[1].x == 3.0


def test_empty_text_and_odd_colors_are_accepted():
    cfg = config_from_dict({"nodes": [{"text": "", "color": "not-a-color"}]})
    assert cfg.nodes[0].text == ""
    assert cfg.nodes[0].color == "not-a-color"


@pytest.mark.parametrize(
    ("data", "needle"),
    [
        ({"header": 3}, "header"),
        ({"nodes": {}}, "nodes"),
        ({"nodes": [{"x": 1}]}, "nodes[0]"),
        ({"nodes": [{"text": "a", "x": "left"}]}, "nodes[0].x"),
        ({"nodes": [{"text": "a", "color": 7}]}, "nodes[0].color"),
        ({"centralNode": {"x": 1, "text": "c"}}, "centralNode.y"),
        ({"centralNode": {"x": True, "y": 1, "text": "c"}}, "centralNode.x"),
        ({"branches": [{"name": "b", "nodes": []}]}, "branches[0].nodes"),
        ({"branches": ["x"]}, "branches[0]"),
    ],
)
def test_invalid_config_names_the_field(data, needle):
    with pytest.raises(InvalidConfiguration) as exc:
        config_from_dict(data)
    assert needle in str(exc.value)


def test_config_must_be_object():
    with pytest.raises(InvalidConfiguration):
        config_from_dict([])  # type: ignore[arg-type]


def test_load_config(tmp_path: Path):
    p = tmp_path / "config.json"
    p.write_text(json.dumps(demo_config_dict(3)), encoding="utf-8")

    cfg = load_config(p)
    assert len(cfg.nodes) == 3


def test_load_config_bad_json(tmp_path: Path):
    p = tmp_path / "config.json"
    p.write_text("{not json", encoding="utf-8")

    with pytest.raises(InvalidConfiguration):
        load_config(p)


def test_load_config_missing_file(tmp_path: Path):
    with pytest.raises(InvalidConfiguration):
        load_config(tmp_path / "nope.json")


def test_demo_config_rejects_negative_count():
    with pytest.raises(ValueError):
        demo_config_dict(-1)
