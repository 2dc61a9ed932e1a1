"""Conway's Game of Life implementation."""

from typing import Iterator, List
import numpy as np

from .cell import Cell
from .grid import CellChange, Grid


class GameOfLife:
    """Conway's Game of Life simulation engine.

    Implements the classic rules:
    - Live cell with 2-3 neighbors survives
    - Dead cell with exactly 3 neighbors becomes alive
    - All other cells die or stay dead

    Every generation is computed entirely from the previous one: the full
    list of changes is decided before any cell is written.
    """

    def __init__(self, grid: Grid) -> None:
        """Initialize the game with a grid.

        Args:
            grid: The cellular grid to simulate
        """
        self.grid = grid
        self._generation = 0

    @property
    def generation(self) -> int:
        """Current generation number."""
        return self._generation

    @property
    def population(self) -> int:
        """Current number of living cells."""
        return self.grid.population

    def compute_changes(self) -> List[CellChange]:
        """Work out which cells change in the next generation.

        Reads only the current generation and leaves the grid untouched.

        Returns:
            ((row, col), new_cell) pairs for every birth and death, in
            row-major order
        """
        neighbor_counts = self.grid.count_all_neighbors()
        cells = self.grid.cells

        # Birth: dead cell with exactly 3 neighbors
        birth_mask = (cells == Cell.DEAD) & (neighbor_counts == 3)

        # Death: live cell with < 2 or > 3 neighbors
        death_mask = (cells == Cell.ALIVE) & ((neighbor_counts < 2) | (neighbor_counts > 3))

        changes = []
        for row, col in zip(*np.nonzero(birth_mask | death_mask)):
            new_cell = Cell.ALIVE if birth_mask[row, col] else Cell.DEAD
            changes.append(((int(row), int(col)), new_cell))
        return changes

    def step(self) -> None:
        """Advance the simulation by one generation."""
        changes = self.compute_changes()
        self.grid.apply_changes(changes)
        self._generation += 1

    def run(self, generations: int) -> Iterator[Grid]:
        """Step the simulation repeatedly.

        Args:
            generations: Number of steps to take

        Yields:
            The grid after each step

        Raises:
            ValueError: If generations is negative
        """
        if generations < 0:
            raise ValueError(f"Generations must be non-negative, got {generations}")

        for _ in range(generations):
            self.step()
            yield self.grid

    def render(self) -> str:
        """Render the current generation as text."""
        return self.grid.render()
