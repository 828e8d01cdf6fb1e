from __future__ import annotations

import json
from dataclasses import dataclass
from pathlib import Path
from typing import Any

from mindmap_bot.errors import InvalidConfiguration


@dataclass(frozen=True)
class NodeConfig:
    text: str
    x: float = 0.0  # placeholder, overwritten by layout
    y: float = 0.0
    color: str | None = None


@dataclass(frozen=True)
class CentralNodeConfig:
    x: float
    y: float
    text: str


@dataclass(frozen=True)
class BranchConfig:
    name: str
    nodes: tuple[NodeConfig, ...]


@dataclass(frozen=True)
class MindMapConfig:
    header: str | None = None
    central_node: CentralNodeConfig | None = None
    nodes: tuple[NodeConfig, ...] = ()
    branches: tuple[BranchConfig, ...] = ()


def _number(raw: Any, where: str, default: float | None = None) -> float:
    if raw is None and default is not None:
        return default
    # bool is an int subclass but never a coordinate
    if isinstance(raw, bool) or not isinstance(raw, (int, float)):
        raise InvalidConfiguration(f"{where} must be a number, got {raw!r}")
    return float(raw)


def _text(raw: Any, where: str) -> str:
    if not isinstance(raw, str):
        raise InvalidConfiguration(f"{where} must be a string, got {raw!r}")
    return raw


def _node(raw: Any, where: str) -> NodeConfig:
    if not isinstance(raw, dict):
        raise InvalidConfiguration(f"{where} must be an object")
    if "text" not in raw:
        raise InvalidConfiguration(f"{where} is missing 'text'")

    color = raw.get("color", raw.get("backgroundColor"))
    if color is not None and not isinstance(color, str):
        raise InvalidConfiguration(f"{where}.color must be a string, got {color!r}")

    return NodeConfig(
        text=_text(raw["text"], f"{where}.text"),
        x=_number(raw.get("x"), f"{where}.x", default=0.0),
        y=_number(raw.get("y"), f"{where}.y", default=0.0),
        color=color,
    )


def _branch(raw: Any, where: str) -> BranchConfig:
    if not isinstance(raw, dict):
        raise InvalidConfiguration(f"{where} must be an object")

    # Bare node descriptor -> single-node branch named after its text
    if "nodes" not in raw:
        node = _node(raw, where)
        return BranchConfig(name=node.text, nodes=(node,))

    raw_nodes = raw["nodes"]
    if not isinstance(raw_nodes, list) or not raw_nodes:
        raise InvalidConfiguration(f"{where}.nodes must be a non-empty list")

    name = raw.get("name", raw.get("branchName", ""))
    return BranchConfig(
        name=_text(name, f"{where}.name"),
        nodes=tuple(_node(n, f"{where}.nodes[{i}]") for i, n in enumerate(raw_nodes)),
    )


def _list(data: dict[str, Any], key: str) -> list[Any]:
    raw = data.get(key)
    if raw is None:
        return []
    if not isinstance(raw, list):
        raise InvalidConfiguration(f"'{key}' must be a list")
    return raw


def config_from_dict(data: dict[str, Any]) -> MindMapConfig:
    """
    Build a MindMapConfig from the JSON-shaped dict used by the bot:

      {"header": str, "centralNode": {x, y, text},
       "nodes": [{x, y, text, color}], "branches": [...]}

    Every key is optional. Raises InvalidConfiguration naming the bad field.
    """
    if not isinstance(data, dict):
        raise InvalidConfiguration("config must be a JSON object")

    header = data.get("header")
    if header is not None:
        header = _text(header, "header")

    central: CentralNodeConfig | None = None
    raw_central = data.get("centralNode", data.get("central_node"))
    if raw_central is not None:
        if not isinstance(raw_central, dict):
            raise InvalidConfiguration("centralNode must be an object")
        central = CentralNodeConfig(
            x=_number(raw_central.get("x"), "centralNode.x"),
            y=_number(raw_central.get("y"), "centralNode.y"),
            text=_text(raw_central.get("text", ""), "centralNode.text"),
        )

    nodes = tuple(_node(n, f"nodes[{i}]") for i, n in enumerate(_list(data, "nodes")))
    branches = tuple(_branch(b, f"branches[{i}]") for i, b in enumerate(_list(data, "branches")))

    return MindMapConfig(header=header, central_node=central, nodes=nodes, branches=branches)


def load_config(path: str | Path) -> MindMapConfig:
    path = Path(path)
    try:
        raw = json.loads(path.read_text(encoding="utf-8"))
    except OSError as e:
        raise InvalidConfiguration(f"Cannot read config: {path}") from e
    except json.JSONDecodeError as e:
        raise InvalidConfiguration(f"Invalid JSON in config {path}: {e}") from e
    return config_from_dict(raw)
