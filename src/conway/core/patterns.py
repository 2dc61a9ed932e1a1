"""Common Conway's Game of Life seed patterns."""

from typing import Dict, List, Optional, Tuple

from .cell import Cell
from .grid import Coord, Grid


class Pattern:
    """A named arrangement of live cells."""

    def __init__(self, name: str, cells: List[Coord], description: str = "") -> None:
        """Initialize a pattern.

        Args:
            name: Pattern name
            cells: (row, col) offsets of living cells
            description: Optional description
        """
        self.name = name
        self.cells = cells
        self.description = description

    def get_size(self) -> Tuple[int, int]:
        """Get pattern size as (width, height)."""
        if not self.cells:
            return (0, 0)

        rows, cols = zip(*self.cells)
        return (max(cols) + 1, max(rows) + 1)

    def to_grid(self, width: int, height: int, row: int = 0, col: int = 0) -> Grid:
        """Place this pattern on a fresh all-dead grid.

        Args:
            width: Grid width
            height: Grid height
            row: Row offset of the pattern's top edge
            col: Column offset of the pattern's left edge

        Raises:
            IndexError: If the pattern doesn't fit at the given offset
        """
        grid = Grid(width, height)
        for cell_row, cell_col in self.cells:
            grid.set_cell(cell_row + row, cell_col + col, Cell.ALIVE)
        return grid

    @classmethod
    def from_grid(cls, grid: Grid, name: str, description: str = "") -> "Pattern":
        """Create pattern from the live cells of a grid."""
        cells = [
            (row, col)
            for row in range(grid.height)
            for col in range(grid.width)
            if grid.is_alive(row, col)
        ]
        return cls(name, cells, description)


class PatternLibrary:
    """Manages a collection of patterns."""

    def __init__(self) -> None:
        self._patterns: Dict[str, Pattern] = {}
        self._load_builtin_patterns()

    def _load_builtin_patterns(self) -> None:
        # Still life patterns
        self.add_pattern(Pattern("Block", [(0, 0), (0, 1), (1, 0), (1, 1)], "2x2 still life block"))
        self.add_pattern(
            Pattern("Beehive", [(0, 1), (0, 2), (1, 0), (1, 3), (2, 1), (2, 2)], "Beehive still life")
        )
        self.add_pattern(
            Pattern("Loaf", [(0, 1), (0, 2), (1, 0), (1, 3), (2, 1), (2, 3), (3, 2)], "Loaf still life")
        )

        # Oscillators
        self.add_pattern(Pattern("Blinker", [(1, 0), (1, 1), (1, 2)], "Period-2 oscillator"))
        self.add_pattern(
            Pattern("Toad", [(0, 1), (0, 2), (0, 3), (1, 0), (1, 1), (1, 2)], "Period-2 oscillator")
        )
        self.add_pattern(
            Pattern("Beacon", [(0, 0), (0, 1), (1, 0), (2, 3), (3, 2), (3, 3)], "Period-2 oscillator")
        )

        # Spaceships
        self.add_pattern(
            Pattern("Glider", [(0, 1), (1, 2), (2, 0), (2, 1), (2, 2)], "Smallest spaceship, period-4")
        )

    def add_pattern(self, pattern: Pattern) -> None:
        self._patterns[pattern.name] = pattern

    def get_pattern(self, name: str) -> Optional[Pattern]:
        """Get a pattern by name, or None if not found."""
        return self._patterns.get(name)

    def list_patterns(self) -> List[str]:
        return list(self._patterns.keys())

    def get_patterns_by_category(self) -> Dict[str, List[str]]:
        """Get patterns organized by category.

        Returns:
            Dictionary mapping categories to pattern name lists
        """
        categories: Dict[str, List[str]] = {
            "Still Life": ["Block", "Beehive", "Loaf"],
            "Oscillators": ["Blinker", "Toad", "Beacon"],
            "Spaceships": ["Glider"],
            "Custom": [],
        }

        all_builtin = set()
        for cat_patterns in categories.values():
            all_builtin.update(cat_patterns)

        for name in self._patterns:
            if name not in all_builtin:
                categories["Custom"].append(name)

        # Remove empty categories
        return {cat: patterns for cat, patterns in categories.items() if patterns}
