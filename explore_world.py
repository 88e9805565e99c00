#!/usr/bin/env python3
"""
Walk a scripted player through a freshly generated world.

Stands in for the game engine: moves the player each tick, feeds the
position to the frontier controller, and renders the explored tiles as an
ASCII map (and optionally a matplotlib image).

Usage:
    python explore_world.py [--seed SEED] [--ticks N] [--sprint] [--image out.png]
"""

import argparse
import math
import sys
from pathlib import Path
sys.path.append(str(Path(__file__).parent))

import structlog

from py_worldgen.builder import build_world
from py_worldgen.config import Settings, configure_logging
from py_worldgen.core import TERRAIN_NAMES, TerrainType, WorldMap

logger = structlog.get_logger()

PLAYER_SPEED = 5.0  # tiles per second
SPRINT_MODIFIER = 2.0
TICK_SECONDS = 1.0 / 60.0

# Presentation: glyph and RGB color per terrain
TERRAIN_GLYPHS = {
    TerrainType.DIRT: ".",
    TerrainType.GRASS: '"',
    TerrainType.STONE: "#",
}

TERRAIN_COLORS = {
    TerrainType.DIRT: (0.55, 0.40, 0.25),
    TerrainType.GRASS: (0.30, 0.65, 0.25),
    TerrainType.STONE: (0.55, 0.55, 0.58),
}

EMPTY_COLOR = (0.1, 0.1, 0.1)


def walk_path(ticks, speed, tile_size):
    """Player positions along a slow spiral away from the origin."""
    x = y = 0.0
    step = speed * tile_size * TICK_SECONDS
    for tick in range(ticks):
        heading = tick * 0.004
        x += math.cos(heading) * step
        y += math.sin(heading) * step
        yield x, y


def render_ascii(world: WorldMap, player=None) -> str:
    if len(world) == 0:
        return ""
    xs = [tile.coord[0] for tile in world]
    ys = [tile.coord[1] for tile in world]
    rows = []
    for y in range(max(ys), min(ys) - 1, -1):
        row = []
        for x in range(min(xs), max(xs) + 1):
            if player == (x, y):
                row.append("@")
                continue
            tile = world.tile_at((x, y))
            row.append(TERRAIN_GLYPHS[tile.terrain] if tile else " ")
        rows.append("".join(row))
    return "\n".join(rows)


def render_image(world: WorldMap, output: Path) -> None:
    import matplotlib.pyplot as plt
    import numpy as np

    xs = [tile.coord[0] for tile in world]
    ys = [tile.coord[1] for tile in world]
    min_x, min_y = min(xs), min(ys)
    image = np.full((max(ys) - min_y + 1, max(xs) - min_x + 1, 3), EMPTY_COLOR)
    for tile in world:
        image[tile.coord[1] - min_y, tile.coord[0] - min_x] = TERRAIN_COLORS[tile.terrain]

    fig, ax = plt.subplots(figsize=(10, 10))
    ax.imshow(image, origin="lower", interpolation="nearest",
              extent=(min_x - 0.5, max(xs) + 0.5, min_y - 0.5, max(ys) + 0.5))
    ax.set_title(f"Explored world ({len(world)} tiles)")
    ax.set_aspect("equal")
    fig.savefig(output, dpi=150, bbox_inches="tight")
    plt.close(fig)
    print(f"Saved image to {output}")


def main(argv=None):
    parser = argparse.ArgumentParser(description=__doc__.split("\n")[1])
    parser.add_argument("--seed", help="Override the configured seed")
    parser.add_argument("--ticks", type=int, default=1800, help="Number of simulated frames")
    parser.add_argument("--sprint", action="store_true", help="Move at sprint speed")
    parser.add_argument("--image", type=Path, help="Write a PNG of the explored map")
    args = parser.parse_args(argv)

    overrides = {"seed": args.seed} if args.seed else {}
    settings = Settings(**overrides)
    configure_logging(settings.log_level, settings.log_format)

    controller = build_world(settings)
    world = controller.world

    placed_by_type = {terrain: 0 for terrain in TerrainType}

    def on_tile_placed(coord, terrain):
        placed_by_type[terrain] += 1

    world.subscribe(on_tile_placed)

    speed = PLAYER_SPEED * (SPRINT_MODIFIER if args.sprint else 1.0)
    position = (0.0, 0.0)
    controller.update(position)
    for position in walk_path(args.ticks, speed, settings.tile_size):
        controller.update(position)

    print(render_ascii(world, controller.last_center))
    print()
    for row in world.summary():
        print(f"  {row['terrain']:<6} {row['count']:>6}  {row['percentage']:5.1f}%")
    print("  ideal  " + "  ".join(
        f"{TERRAIN_NAMES[t]}={share:.2f}" for t, share in zip(TerrainType, settings.ideal_distribution())
    ))

    logger.info("Exploration finished", tiles=len(world),
                generated={TERRAIN_NAMES[t]: n for t, n in placed_by_type.items()})

    if args.image:
        render_image(world, args.image)


if __name__ == "__main__":
    main()
