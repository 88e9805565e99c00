"""Wiring of the generation components from settings."""

from typing import Optional

import structlog

from .config import Settings
from .core.blend import BlendEngine
from .core.frontier import FrontierController
from .core.terrain import RandomSource, TerrainClassifier
from .core.world_map import WorldMap
from .utils.random import set_random_seed

logger = structlog.get_logger()


def build_world(
    settings: Optional[Settings] = None,
    random_source: Optional[RandomSource] = None,
    seed_origin: bool = True,
) -> FrontierController:
    """
    Create an empty world and the controller that grows it.

    Args:
        settings: Generation settings; read from the environment if omitted
        random_source: Uniform [0, 1) source; defaults to the shared PRNG
            reseeded with settings.seed
        seed_origin: Place the starting tile at (0, 0)

    Returns:
        FrontierController owning the new WorldMap
    """
    settings = settings or Settings()
    if random_source is None:
        random_source = set_random_seed(settings.seed)

    engine = BlendEngine(settings.ideal_distribution(), settings.shaping_exponent)
    classifier = TerrainClassifier(engine, settings.check_radius, random_source)
    controller = FrontierController(
        WorldMap(), classifier, settings.spawn_radius, settings.tile_size
    )
    if seed_origin:
        controller.seed_origin(settings.origin_terrain_type)

    logger.info(
        "World initialized",
        seed=settings.seed,
        ideal=[round(float(s), 4) for s in engine.ideal],
        spawn_radius=settings.spawn_radius,
        check_radius=settings.check_radius,
    )
    return controller
