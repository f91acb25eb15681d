"""Clearance between entities treated as axis-aligned bounding rectangles."""

import math
from collections.abc import Iterator, Sequence

from .models import ClearanceResult, Entity


def axis_gap(a: float, b: float, dim_a: float, dim_b: float) -> float:
    """Gap between two intervals centered at a and b; 0 when they overlap."""
    return max(0.0, abs(a - b) - (dim_a / 2 + dim_b / 2))


def entity_distance(e1: Entity, e2: Entity) -> float:
    """Euclidean distance between the edges of two bounding rectangles.

    Each axis is clamped at zero before combining, so rectangles that
    overlap on both axes are exactly 0 apart.
    """
    x_gap = axis_gap(e1.x, e2.x, e1.width, e2.width)
    y_gap = axis_gap(e1.y, e2.y, e1.height, e2.height)
    return math.hypot(x_gap, y_gap)


def iter_clearances(
    buildings: Sequence[Entity],
    boundaries: Sequence[Entity],
) -> Iterator[ClearanceResult]:
    """Yield clearances lazily: outer loop buildings, inner loop boundaries."""
    for building in buildings:
        for boundary in boundaries:
            yield ClearanceResult(
                distance=entity_distance(building, boundary),
                building=building,
                boundary=boundary,
            )
