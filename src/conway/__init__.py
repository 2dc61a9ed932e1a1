"""Conway's Game of Life on a bounded grid."""

__version__ = "0.1.0"

from .core.cell import Cell
from .core.errors import EmptyGrid, GridError, InvalidCellToken, ShapeMismatch
from .core.grid import Grid
from .core.game import GameOfLife
from .core.loader import load_grid, parse_grid, read_grid
from .core.patterns import Pattern, PatternLibrary

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
