"""
Grid model and A* search engine.
"""

from .types import Cell, Grid, SearchResult, new_grid, CORNER_RULES, DIRECTIONS
from .config import SearchConfig, DEFAULT_SEARCH_CONFIG
from .astar import (
    InvalidEndpointError,
    find_path,
    search,
    octile,
    move_cost,
    path_cost,
)

__all__ = [
    # Grid model
    'Cell',
    'Grid',
    'new_grid',
    'CORNER_RULES',
    'DIRECTIONS',
    # Search
    'SearchResult',
    'SearchConfig',
    'DEFAULT_SEARCH_CONFIG',
    'InvalidEndpointError',
    'find_path',
    'search',
    'octile',
    'move_cost',
    'path_cost',
]
