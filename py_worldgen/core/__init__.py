"""
Core world generation functionality.
"""

from .grid import points_in_radius, translate_to_grid, squared_distance
from .blend import BlendEngine, BlendResult, normalize, blend, blend_weight
from .terrain import TerrainType, TerrainClassifier, TERRAIN_NAMES, draw_terrain
from .world_map import WorldMap, Tile, DuplicateCoordinateError
from .frontier import FrontierController, FrontierState

__all__ = ['points_in_radius', 'translate_to_grid', 'squared_distance',
           'BlendEngine', 'BlendResult', 'normalize', 'blend', 'blend_weight',
           'TerrainType', 'TerrainClassifier', 'TERRAIN_NAMES', 'draw_terrain',
           'WorldMap', 'Tile', 'DuplicateCoordinateError',
           'FrontierController', 'FrontierState']
