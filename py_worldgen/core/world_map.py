"""
World map store.

Owns every placed tile, keyed by grid coordinate, plus running per-terrain
counts. Tiles are write-once: a coordinate holds the terrain it was first
given for the rest of the session.
"""

from dataclasses import dataclass
from typing import Callable, Dict, Iterator, List, Optional

import numpy as np
import structlog

from .blend import normalize
from .grid import Coordinate, offset_points, points_in_radius, squared_distance
from .terrain import N_TERRAIN_TYPES, TERRAIN_NAMES, TERRAIN_ORDER, TerrainType

logger = structlog.get_logger()

TileListener = Callable[[Coordinate, TerrainType], None]


@dataclass(frozen=True)
class Tile:
    """A placed grid cell."""

    coord: Coordinate
    terrain: TerrainType


class DuplicateCoordinateError(ValueError):
    """Raised when placing a tile on an occupied coordinate."""

    def __init__(self, coord: Coordinate, existing: Tile):
        super().__init__(
            f"Tile already exists at {coord} ({TERRAIN_NAMES[existing.terrain]})"
        )
        self.coord = coord
        self.existing = existing


class WorldMap:
    """Single-writer store of placed tiles."""

    def __init__(self):
        self._tiles: Dict[Coordinate, Tile] = {}
        self._counts = np.zeros(N_TERRAIN_TYPES, dtype=np.int64)
        self._listeners: List[TileListener] = []

    def __len__(self) -> int:
        return len(self._tiles)

    def __contains__(self, coord) -> bool:
        return coord in self._tiles

    def __iter__(self) -> Iterator[Tile]:
        return iter(self._tiles.values())

    def subscribe(self, listener: TileListener) -> None:
        """Register a callback receiving (coord, terrain) for every new tile."""
        self._listeners.append(listener)

    def place_tile(self, coord: Coordinate, terrain: TerrainType) -> Tile:
        """
        Insert a new tile.

        Args:
            coord: Grid coordinate
            terrain: Terrain type for the tile

        Returns:
            The created Tile

        Raises:
            DuplicateCoordinateError: If coord already holds a tile
        """
        coord = (int(coord[0]), int(coord[1]))
        existing = self._tiles.get(coord)
        if existing is not None:
            raise DuplicateCoordinateError(coord, existing)

        tile = Tile(coord, TerrainType(terrain))
        self._tiles[coord] = tile
        self._counts[tile.terrain] += 1

        for listener in self._listeners:
            listener(tile.coord, tile.terrain)
        return tile

    def tile_at(self, coord: Coordinate) -> Optional[Tile]:
        return self._tiles.get(coord)

    def neighbors_within(self, center: Coordinate, radius: int) -> List[Tile]:
        """
        All placed tiles with squared distance to center below radius².

        Probes the lattice around center when that is smaller than the map,
        otherwise scans the placed tiles.
        """
        offsets = points_in_radius(radius)
        if len(offsets) <= len(self._tiles):
            return [
                self._tiles[coord]
                for coord in offset_points(center, offsets)
                if coord in self._tiles
            ]

        limit = radius * radius
        return [
            tile
            for tile in self._tiles.values()
            if squared_distance(center, tile.coord) < limit
        ]

    def counts(self) -> Dict[TerrainType, int]:
        """Snapshot of per-terrain tile counts."""
        return {terrain: int(self._counts[terrain]) for terrain in TERRAIN_ORDER}

    def count_vector(self) -> np.ndarray:
        """Copy of the counts as a vector in canonical order."""
        return self._counts.copy()

    def distribution(self) -> np.ndarray:
        """Current world-wide terrain shares (uniform while empty)."""
        return normalize(self._counts)

    def summary(self) -> List[Dict]:
        """Per-terrain count and percentage, in canonical order."""
        total = len(self._tiles)
        return [
            {
                "terrain": TERRAIN_NAMES[terrain],
                "count": int(self._counts[terrain]),
                "percentage": (100.0 * self._counts[terrain] / total) if total else 0.0,
            }
            for terrain in TERRAIN_ORDER
        ]
