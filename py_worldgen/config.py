"""Configuration management."""

import logging
import os
from pathlib import Path

import numpy as np
import structlog
from dotenv import dotenv_values
from pydantic import Field, field_validator, model_validator
from pydantic_settings import BaseSettings

from .core.terrain import TerrainType, terrain_from_name

# Load .env for local/dev runs without overriding the real environment
BASE_DIR = Path(__file__).resolve().parent.parent
env_file = BASE_DIR / ".env"

if env_file.exists():
    file_env = dotenv_values(env_file)
    for k, v in file_env.items():
        if k not in os.environ and v is not None:
            os.environ[k] = v


class Settings(BaseSettings):
    """World generation settings, fixed at startup."""

    # Population weights (normalized into the ideal distribution)
    dirt_weight: float = Field(default=8.0, ge=0, description="Population weight of dirt")
    grass_weight: float = Field(default=1.0, ge=0, description="Population weight of grass")
    stone_weight: float = Field(default=1.0, ge=0, description="Population weight of stone")

    # Generation geometry
    spawn_radius: int = Field(default=10, gt=0, description="Radius (tiles) generated around the player")
    check_radius: int = Field(default=4, gt=0, description="Neighborhood radius (tiles) for local terrain")
    tile_size: float = Field(default=1.0, gt=0, description="World units per tile")

    # Blending
    shaping_exponent: float = Field(default=3.0, gt=0, description="Exponent of the blend response curve")

    # Reproducibility
    seed: str = Field(default="worldgen", description="Seed for the terrain PRNG")
    origin_terrain: str = Field(default="grass", description="Terrain of the starting tile at (0, 0)")

    # Logging
    log_level: str = Field(default="INFO", description="Log level")
    log_format: str = Field(default="json", description="Logging format (json or console)")

    class Config:
        env_prefix = "WORLDGEN_"
        env_file_encoding = "utf-8"

    @field_validator("origin_terrain")
    @classmethod
    def _known_terrain(cls, value: str) -> str:
        terrain_from_name(value)
        return value

    @field_validator("log_format")
    @classmethod
    def _known_format(cls, value: str) -> str:
        if value not in ("json", "console"):
            raise ValueError("log_format must be 'json' or 'console'")
        return value

    @model_validator(mode="after")
    def _weights_not_all_zero(self):
        if self.dirt_weight + self.grass_weight + self.stone_weight <= 0:
            raise ValueError("At least one population weight must be positive")
        return self

    def ideal_distribution(self) -> np.ndarray:
        """Normalized target share per terrain type, in canonical order."""
        weights = np.array(
            [self.dirt_weight, self.grass_weight, self.stone_weight], dtype=np.float64
        )
        return weights / weights.sum()

    @property
    def origin_terrain_type(self) -> TerrainType:
        return terrain_from_name(self.origin_terrain)


def configure_logging(log_level: str = "INFO", log_format: str = "json") -> None:
    """Configure structlog on top of the standard library logger."""
    logging.basicConfig(format="%(message)s", level=log_level.upper())

    renderer = (
        structlog.processors.JSONRenderer()
        if log_format == "json"
        else structlog.dev.ConsoleRenderer()
    )
    structlog.configure(
        processors=[
            structlog.stdlib.filter_by_level,
            structlog.stdlib.add_logger_name,
            structlog.stdlib.add_log_level,
            structlog.stdlib.PositionalArgumentsFormatter(),
            renderer,
        ],
        wrapper_class=structlog.stdlib.BoundLogger,
        logger_factory=structlog.stdlib.LoggerFactory(),
        cache_logger_on_first_use=True,
    )
