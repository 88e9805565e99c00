"""Tests for configuration and world wiring."""

import pytest
import numpy as np
from pydantic import ValidationError
from py_worldgen.builder import build_world
from py_worldgen.config import Settings, configure_logging
from py_worldgen.core.alea_prng import AleaPRNG
from py_worldgen.core.terrain import TerrainType


class TestSettings:
    """Test settings validation."""

    def test_defaults(self):
        settings = Settings()

        assert settings.spawn_radius == 10
        assert settings.check_radius == 4
        assert settings.tile_size == 1.0
        assert settings.origin_terrain_type == TerrainType.GRASS
        np.testing.assert_allclose(settings.ideal_distribution(), [0.8, 0.1, 0.1])

    def test_ideal_is_normalized(self):
        settings = Settings(dirt_weight=1, grass_weight=2, stone_weight=5)
        ideal = settings.ideal_distribution()
        assert abs(ideal.sum() - 1.0) < 1e-6
        np.testing.assert_allclose(ideal, [0.125, 0.25, 0.625])

    def test_zero_weights_allowed_individually(self):
        settings = Settings(dirt_weight=0, grass_weight=1, stone_weight=0)
        np.testing.assert_allclose(settings.ideal_distribution(), [0, 1, 0])

    @pytest.mark.parametrize("overrides", [
        {"dirt_weight": -1},
        {"dirt_weight": 0, "grass_weight": 0, "stone_weight": 0},
        {"spawn_radius": 0},
        {"check_radius": -2},
        {"tile_size": 0},
        {"shaping_exponent": 0},
        {"origin_terrain": "lava"},
        {"log_format": "xml"},
    ])
    def test_malformed_configuration_rejected(self, overrides):
        with pytest.raises(ValidationError):
            Settings(**overrides)

    def test_environment_overrides(self, monkeypatch):
        monkeypatch.setenv("WORLDGEN_SPAWN_RADIUS", "3")
        monkeypatch.setenv("WORLDGEN_GRASS_WEIGHT", "4")
        monkeypatch.setenv("WORLDGEN_SEED", "from-env")

        settings = Settings()

        assert settings.spawn_radius == 3
        assert settings.grass_weight == 4
        assert settings.seed == "from-env"

    def test_malformed_environment_rejected(self, monkeypatch):
        monkeypatch.setenv("WORLDGEN_STONE_WEIGHT", "-3")
        with pytest.raises(ValidationError):
            Settings()

    def test_configure_logging(self):
        configure_logging("DEBUG", "console")
        configure_logging("INFO", "json")


class TestBuildWorld:
    """Test wiring a world from settings."""

    def test_origin_tile(self):
        controller = build_world(Settings(spawn_radius=3, origin_terrain="stone"))

        assert len(controller.world) == 1
        assert controller.world.tile_at((0, 0)).terrain == TerrainType.STONE
        assert controller.spawn_radius == 3

    def test_without_origin(self):
        controller = build_world(Settings(), seed_origin=False)
        assert len(controller.world) == 0

    def test_seeded_worlds_match(self):
        settings = Settings(spawn_radius=4, check_radius=2, seed="twin")
        worlds = []
        for _ in range(2):
            controller = build_world(settings)
            controller.update((0.0, 0.0))
            controller.update((3.0, -2.0))
            worlds.append({tile.coord: tile.terrain for tile in controller.world})

        assert worlds[0] == worlds[1]

    def test_explicit_random_source(self):
        controller = build_world(Settings(spawn_radius=2), random_source=lambda: 0.0)
        placed = controller.update((0.0, 0.0))

        assert len(placed) == 8
        assert all(tile.terrain == TerrainType.DIRT for tile in placed)

    def test_alea_source_is_accepted(self):
        controller = build_world(Settings(spawn_radius=2), random_source=AleaPRNG("x"))
        assert len(controller.update((0.0, 0.0))) == 8
