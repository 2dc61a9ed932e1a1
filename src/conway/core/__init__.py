"""Core Game of Life logic."""

from .cell import Cell
from .errors import EmptyGrid, GridError, InvalidCellToken, ShapeMismatch
from .grid import Grid
from .game import GameOfLife
from .loader import load_grid, parse_grid, read_grid
from .patterns import Pattern, PatternLibrary

__all__ = [
    "Cell",
    "EmptyGrid",
    "GridError",
    "InvalidCellToken",
    "ShapeMismatch",
    "Grid",
    "GameOfLife",
    "load_grid",
    "parse_grid",
    "read_grid",
    "Pattern",
    "PatternLibrary",
]
