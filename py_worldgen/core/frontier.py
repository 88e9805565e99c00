"""
Frontier expansion around the player.

The controller idles until the player's grid cell changes, then fills every
empty cell within the spawn radius. Cells are generated one after another in
lattice order, so each classification sees the tiles placed before it in the
same batch.
"""

from enum import Enum
from typing import List, Optional, Sequence

import structlog

from .grid import Coordinate, offset_points, points_in_radius, translate_to_grid
from .terrain import TERRAIN_NAMES, TerrainClassifier, TerrainType
from .world_map import DuplicateCoordinateError, Tile, WorldMap

logger = structlog.get_logger()


class FrontierState(Enum):
    IDLE = "idle"
    EXPANDING = "expanding"


class FrontierController:
    """Decides which cells to generate as the player moves."""

    def __init__(
        self,
        world: WorldMap,
        classifier: TerrainClassifier,
        spawn_radius: int,
        tile_size: float = 1.0,
    ):
        """
        Initialize frontier controller.

        Args:
            world: Store receiving the generated tiles
            classifier: Chooses terrain for each missing cell
            spawn_radius: Radius (tiles) kept populated around the player
            tile_size: World units per tile
        """
        if spawn_radius <= 0:
            raise ValueError("Spawn radius must be positive")
        if tile_size <= 0:
            raise ValueError("Tile size must be positive")

        self.world = world
        self.classifier = classifier
        self.spawn_radius = spawn_radius
        self.tile_size = tile_size

        self.state = FrontierState.IDLE
        self.last_center: Optional[Coordinate] = None
        self._offsets = points_in_radius(spawn_radius)

    def seed_origin(self, terrain: TerrainType = TerrainType.GRASS) -> Optional[Tile]:
        """Place the starting tile at (0, 0) unless the map already has one."""
        if (0, 0) in self.world:
            return None
        return self.world.place_tile((0, 0), terrain)

    def target_cells(self, center: Coordinate) -> List[Coordinate]:
        return offset_points(center, self._offsets)

    def missing_cells(self, center: Coordinate) -> List[Coordinate]:
        return [coord for coord in self.target_cells(center) if self.world.tile_at(coord) is None]

    def update(self, player_position: Sequence[float]) -> List[Tile]:
        """
        Per-tick entry point.

        Args:
            player_position: Player position in world units

        Returns:
            Tiles placed this tick (empty while the player stays in one cell)
        """
        center = translate_to_grid(player_position, self.tile_size)
        if center == self.last_center:
            return []
        return self.expand(center)

    def expand(self, center: Coordinate) -> List[Tile]:
        """Generate every missing cell around center."""
        self.state = FrontierState.EXPANDING
        placed: List[Tile] = []
        try:
            for coord in self.missing_cells(center):
                terrain = self.classifier.classify(coord, self.world)
                try:
                    placed.append(self.world.place_tile(coord, terrain))
                except DuplicateCoordinateError as e:
                    logger.warning(
                        "Skipping occupied cell",
                        coord=coord,
                        existing=TERRAIN_NAMES[e.existing.terrain],
                    )
        finally:
            self.state = FrontierState.IDLE
        self.last_center = center

        if placed:
            logger.info(
                "Frontier expanded",
                center=center,
                placed=len(placed),
                total_tiles=len(self.world),
            )
        return placed
