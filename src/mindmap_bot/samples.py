from __future__ import annotations

from typing import Any


def demo_config_dict(n_nodes: int = 10) -> dict[str, Any]:
    """
    The bot's built-in sample: a "hi" hub at (400, 400), ``n_nodes`` green
    satellites and two single-node branches.
    """
    if n_nodes < 0:
        raise ValueError("n_nodes must be >= 0")

    return {
        "header": "Mindmap bot test code",
        "centralNode": {"x": 400, "y": 400, "text": "hi"},
        "nodes": [
            {"x": 0, "y": 0, "text": f"Node {i}", "color": "green"} for i in range(1, n_nodes + 1)
        ],
        "branches": [
            {"x": 0, "y": 0, "text": "Node A", "backgroundColor": "white"},
            {"x": 0, "y": 0, "text": "Node B", "backgroundColor": "white"},
        ],
    }
