from __future__ import annotations

from dataclasses import dataclass

from mindmap_bot.geometry import canvas_side, ring_count


@dataclass(frozen=True)
class Point:
    x: float
    y: float


@dataclass(frozen=True)
class Node:
    x: float
    y: float
    text: str
    fill_color: str | None = None  # None -> renderer default

    @property
    def point(self) -> Point:
        return Point(self.x, self.y)

    def moved_to(self, x: float, y: float) -> Node:
        return Node(x=x, y=y, text=self.text, fill_color=self.fill_color)


@dataclass(frozen=True)
class Header:
    text: str


@dataclass(frozen=True)
class Branch:
    name: str
    nodes: tuple[Node, ...]


@dataclass(frozen=True)
class Diagram:
    """
    A fully laid-out mind map.

    Built by ``mindmap_bot.layout.layout``; node coordinates are final.
    """

    central: Node | None = None
    nodes: tuple[Node, ...] = ()
    branches: tuple[Branch, ...] = ()
    header: Header | None = None

    @property
    def ring_count(self) -> int:
        return ring_count(len(self.nodes))

    @property
    def canvas_side(self) -> int:
        return canvas_side(len(self.nodes))

    @property
    def center(self) -> Point:
        return pivot(self.central, len(self.nodes))


def pivot(central: Node | None, node_count: int) -> Point:
    """Layout origin: the central node, else the middle of the canvas."""
    if central is not None:
        return central.point
    half = canvas_side(node_count) / 2
    return Point(half, half)

