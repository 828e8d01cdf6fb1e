from __future__ import annotations

import logging
import math
from collections.abc import Sequence
from dataclasses import dataclass

from mindmap_bot.config import MindMapConfig, NodeConfig
from mindmap_bot.errors import InvalidConfiguration
from mindmap_bot.geometry import (
    BRANCH_RADIUS,
    RING_CAPACITY,
    polar,
    ring_count,
    ring_radius,
)
from mindmap_bot.schema import Branch, Diagram, Header, Node, Point, pivot

logger = logging.getLogger(__name__)

TWO_PI = 2 * math.pi


@dataclass(frozen=True)
class RingPlan:
    ring: int
    count: int  # nodes on this ring, <= RING_CAPACITY
    radius: float
    base_offset: float
    stagger: float
    step: float

    def angle(self, slot: int) -> float:
        return self.base_offset + self.stagger + slot * self.step


def plan_rings(node_count: int) -> list[RingPlan]:
    """
    Angular policy for ``node_count`` satellites.

    Ring 0 starts at angle 0. Outer rings are rotated by ``r * 2pi / rings``
    plus half their own step so their nodes sit between inner-ring spokes.
    """
    rings = ring_count(node_count)
    plans: list[RingPlan] = []
    for r in range(rings):
        k = min(RING_CAPACITY, node_count - r * RING_CAPACITY)
        plans.append(
            RingPlan(
                ring=r,
                count=k,
                radius=ring_radius(r),
                base_offset=0.0 if r == 0 else r * TWO_PI / rings,
                stagger=0.0 if r == 0 else math.pi / k,
                step=TWO_PI / k,
            )
        )
    return plans


def layout_nodes(nodes: Sequence[Node], center: Point) -> tuple[Node, ...]:
    """Place ``nodes`` on concentric rings of 12 around ``center``, in order."""
    placed: list[Node] = []
    for plan in plan_rings(len(nodes)):
        first = plan.ring * RING_CAPACITY
        for slot in range(plan.count):
            x, y = polar(center.x, center.y, plan.radius, plan.angle(slot))
            placed.append(nodes[first + slot].moved_to(x, y))
    return tuple(placed)


def layout_branches(
    branches: Sequence[Branch],
    center: Point,
    radius: float = BRANCH_RADIUS,
) -> tuple[Branch, ...]:
    """
    Put the first node of each branch on one circle around ``center``.

    Branch i of N sits at angle ``i * 2pi / N``. The remaining nodes of a
    branch keep their coordinates.
    """
    if not branches:
        raise InvalidConfiguration("branch pre-placement needs at least one branch")

    spacing = TWO_PI / len(branches)
    placed: list[Branch] = []
    for i, branch in enumerate(branches):
        if not branch.nodes:
            raise InvalidConfiguration(f"branch {branch.name!r} has no nodes")
        x, y = polar(center.x, center.y, radius, i * spacing)
        head = branch.nodes[0].moved_to(x, y)
        placed.append(Branch(name=branch.name, nodes=(head, *branch.nodes[1:])))
    return tuple(placed)


def _node_from_config(nc: NodeConfig) -> Node:
    return Node(x=nc.x, y=nc.y, text=nc.text, fill_color=nc.color)


def layout(config: MindMapConfig) -> Diagram:
    """Build a new, fully positioned Diagram from ``config``."""
    central: Node | None = None
    if config.central_node is not None:
        c = config.central_node
        central = Node(x=c.x, y=c.y, text=c.text, fill_color="white")

    center = pivot(central, len(config.nodes))

    nodes = layout_nodes([_node_from_config(n) for n in config.nodes], center)

    branches: tuple[Branch, ...] = ()
    if config.branches:
        branches = layout_branches(
            [
                Branch(name=b.name, nodes=tuple(_node_from_config(n) for n in b.nodes))
                for b in config.branches
            ],
            center,
        )

    header = Header(config.header) if config.header is not None else None

    logger.debug(
        "Laid out %d nodes on %d ring(s), %d branch(es) around (%.1f, %.1f)",
        len(nodes),
        ring_count(len(nodes)),
        len(branches),
        center.x,
        center.y,
    )
    return Diagram(central=central, nodes=nodes, branches=branches, header=header)
