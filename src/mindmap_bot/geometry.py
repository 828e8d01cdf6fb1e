from __future__ import annotations

import math
from typing import Protocol

RING_CAPACITY = 12
RING_BASE_RADIUS = 200.0
RING_SPACING = 110.0
BRANCH_RADIUS = 200.0
CANVAS_MARGIN = 100.0


class HasXY(Protocol):
    x: float
    y: float


def ring_count(node_count: int) -> int:
    if node_count <= 0:
        return 0
    return math.ceil(node_count / RING_CAPACITY)


def ring_radius(ring: int) -> float:
    return RING_BASE_RADIUS + RING_SPACING * ring


def canvas_side(node_count: int) -> int:
    """Side length of the square canvas needed for ``node_count`` satellites."""
    # an empty diagram is sized like a single ring
    outer = max(ring_count(node_count), 1) - 1
    return int(2 * (ring_radius(outer) + CANVAS_MARGIN))


def distance(a: HasXY, b: HasXY) -> float:
    return math.hypot(a.x - b.x, a.y - b.y)


def is_ring_aligned(n: int) -> bool:
    """
    True iff ``n`` is a power of the ring capacity: 1, 12, 144, 1728, ...
    """
    if n < 1:
        return False
    while n != 1:
        if n % RING_CAPACITY != 0:
            return False
        n //= RING_CAPACITY
    return True


def polar(cx: float, cy: float, radius: float, angle: float) -> tuple[float, float]:
    return cx + radius * math.cos(angle), cy + radius * math.sin(angle)
