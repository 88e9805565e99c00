"""Incremental biome generation for an endless tile grid."""

__version__ = "0.1.0"
