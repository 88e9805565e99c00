"""
Grid math for the tile lattice.

All distance checks compare squared integer distances so that no square roots
are taken; callers pass plain radii and the squaring happens here.
"""

import math
from typing import Iterable, List, Sequence, Tuple

Coordinate = Tuple[int, int]


def points_in_radius(radius: int) -> List[Coordinate]:
    """
    Offsets (dx, dy) strictly inside a circle of the given radius.

    Order is row-major with dx as the outer loop and dy as the inner loop,
    both ascending. Frontier expansion relies on this order being stable.

    Args:
        radius: Radius in tiles

    Returns:
        List of offsets satisfying dx*dx + dy*dy < radius*radius
    """
    limit = radius * radius
    return [
        (dx, dy)
        for dx in range(-radius, radius + 1)
        for dy in range(-radius, radius + 1)
        if dx * dx + dy * dy < limit
    ]


def offset_points(center: Coordinate, offsets: Iterable[Coordinate]) -> List[Coordinate]:
    """Translate offsets by center, keeping their order."""
    cx, cy = center
    return [(cx + dx, cy + dy) for dx, dy in offsets]


def round_half_away(value: float) -> int:
    """Round to nearest integer, ties away from zero (2.5 -> 3, -2.5 -> -3)."""
    return int(math.copysign(math.floor(abs(value) + 0.5), value))


def translate_to_grid(world_position: Sequence[float], tile_size: float) -> Coordinate:
    """
    Convert a continuous world position into the grid cell containing it.

    Args:
        world_position: (x, y) in world units; extra components are ignored
        tile_size: Size of one tile in world units

    Returns:
        Grid coordinate
    """
    x, y = world_position[0], world_position[1]
    return round_half_away(x / tile_size), round_half_away(y / tile_size)


def squared_distance(a: Coordinate, b: Coordinate) -> int:
    dx = a[0] - b[0]
    dy = a[1] - b[1]
    return dx * dx + dy * dy
