"""
Terrain types and the terrain classifier.

The classifier picks the terrain for one empty cell:
1. Weigh the placed tiles within the check radius (closer tiles count more)
2. Blend that local mix with the ideal mix, scaled by the world's drift
3. Draw from the blended distribution with a cumulative walk
"""

from enum import IntEnum
from typing import TYPE_CHECKING, Callable, Optional

import numpy as np
import structlog

from .blend import ArrayLike, BlendEngine, BlendResult
from .grid import Coordinate, squared_distance

if TYPE_CHECKING:
    from .world_map import WorldMap

logger = structlog.get_logger()

RandomSource = Callable[[], float]


class TerrainType(IntEnum):
    """Terrain types; values index every distribution vector."""

    DIRT = 0
    GRASS = 1
    STONE = 2


# Terrain names for display and configuration
TERRAIN_NAMES = {
    TerrainType.DIRT: "Dirt",
    TerrainType.GRASS: "Grass",
    TerrainType.STONE: "Stone",
}

# Canonical walk order for cumulative draws
TERRAIN_ORDER = (TerrainType.DIRT, TerrainType.GRASS, TerrainType.STONE)

N_TERRAIN_TYPES = len(TERRAIN_ORDER)


def terrain_from_name(name: str) -> TerrainType:
    """Look up a terrain type by case-insensitive name."""
    for terrain, display in TERRAIN_NAMES.items():
        if display.lower() == name.strip().lower():
            return terrain
    raise ValueError(f"Unknown terrain type '{name}'")


def draw_terrain(distribution: ArrayLike, r: float) -> TerrainType:
    """
    Select a terrain type from a distribution using a uniform draw.

    Walks the types in canonical order, accumulating shares, and returns the
    first type whose cumulative share exceeds r. The final cumulative share
    is pinned to 1.0 so any floating-point shortfall lands on the last type.

    Args:
        distribution: Normalized shares in canonical order
        r: Uniform draw in [0, 1)

    Returns:
        Selected TerrainType
    """
    shares = np.asarray(distribution, dtype=np.float64)
    if shares.shape != (N_TERRAIN_TYPES,):
        raise ValueError(f"Expected {N_TERRAIN_TYPES} shares, got shape {shares.shape}")
    if not 0.0 <= r < 1.0:
        raise ValueError(f"Draw must be within [0, 1), got {r}")

    cumulative = np.cumsum(shares)
    cumulative[-1] = 1.0
    for terrain, edge in zip(TERRAIN_ORDER, cumulative):
        if edge > r:
            return terrain
    return TERRAIN_ORDER[-1]


class TerrainClassifier:
    """Chooses terrain for newly generated cells."""

    def __init__(
        self,
        engine: BlendEngine,
        check_radius: int,
        random_source: Optional[RandomSource] = None,
    ):
        """
        Initialize terrain classifier.

        Args:
            engine: Blend engine holding the ideal distribution
            check_radius: Neighborhood radius (tiles) scanned per decision
            random_source: Callable returning uniform floats in [0, 1);
                defaults to the shared seeded PRNG
        """
        if check_radius <= 0:
            raise ValueError("Check radius must be positive")
        self.engine = engine
        self.check_radius = check_radius

        if random_source is None:
            from ..utils.random import get_prng

            random_source = get_prng()
        self.random_source = random_source

    def neighborhood_weights(self, coord: Coordinate, world: "WorldMap") -> np.ndarray:
        """
        Distance-weighted neighbor contributions around coord.

        Each tile adds (r² - d²) / r², so an adjacent tile contributes almost
        1.0 and a tile at the edge of the radius contributes close to 0.
        """
        r2 = self.check_radius * self.check_radius
        weights = np.zeros(N_TERRAIN_TYPES, dtype=np.float64)
        for tile in world.neighbors_within(coord, self.check_radius):
            weights[tile.terrain] += (r2 - squared_distance(coord, tile.coord)) / r2
        return weights

    def explain(self, coord: Coordinate, world: "WorldMap") -> BlendResult:
        """Compute the blend for coord without drawing."""
        return self.engine.blend_for(
            self.neighborhood_weights(coord, world), world.count_vector()
        )

    def classify(self, coord: Coordinate, world: "WorldMap") -> TerrainType:
        result = self.explain(coord, world)
        terrain = draw_terrain(result.blended, self.random_source())
        logger.debug(
            "Classified cell",
            coord=coord,
            terrain=TERRAIN_NAMES[terrain],
            weight=round(result.weight, 4),
        )
        return terrain
