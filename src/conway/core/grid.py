"""Grid data structure for Conway's Game of Life."""

from typing import Iterable, List, Optional, Sequence, Tuple, Union
import numpy as np
import torch
import torch.nn.functional as F

from .cell import Cell
from .errors import EmptyGrid, ShapeMismatch

Coord = Tuple[int, int]
CellChange = Tuple[Coord, Cell]

# (row, col) offsets of the eight Moore neighbors
NEIGHBOR_OFFSETS: Tuple[Coord, ...] = (
    (-1, -1),
    (-1, 0),
    (-1, 1),
    (0, -1),
    (0, 1),
    (1, -1),
    (1, 0),
    (1, 1),
)


class Grid:
    """A fixed-size rectangular matrix of cells.

    Cells live in a numpy int8 array of shape (height, width) indexed
    [row, col]. Edges are bounded: positions outside the grid do not
    exist and never count as neighbors.
    """

    def __init__(
        self,
        width: int,
        height: int,
        cells: Optional[Sequence[Sequence[Union[Cell, int, bool]]]] = None,
    ) -> None:
        """Initialize a new grid.

        Args:
            width: Number of columns
            height: Number of rows
            cells: Optional initial matrix with exactly height rows of width
                cells each. Items must be Cell values, 0/1 or bools.
                Defaults to an all-dead grid.

        Raises:
            EmptyGrid: If width or height is not positive
            ShapeMismatch: If cells doesn't match width x height
            ValueError: If an item is not a valid cell value
        """
        if width <= 0 or height <= 0:
            raise EmptyGrid(f"Grid dimensions must be positive, got {width}x{height}")

        self.width = width
        self.height = height
        self._cells = np.zeros((height, width), dtype=np.int8)

        if cells is not None:
            self._load_rows(cells)

        # 3x3 ring kernel: sums the eight neighbors, skips the center
        self._torch_kernel = (
            torch.tensor([[1, 1, 1], [1, 0, 1], [1, 1, 1]], dtype=torch.float32).unsqueeze(0).unsqueeze(0)
        )

    def _load_rows(self, cells: Sequence[Sequence[Union[Cell, int, bool]]]) -> None:
        rows = [list(row) for row in cells]
        if len(rows) != self.height:
            actual_width = len(rows[0]) if rows else 0
            raise ShapeMismatch(self.shape, (actual_width, len(rows)))

        for index, row in enumerate(rows):
            if len(row) != self.width:
                raise ShapeMismatch(self.shape, (len(row), self.height), row=index)
            self._cells[index] = [Cell(value) for value in row]

    @property
    def cells(self) -> np.ndarray:
        """Read-only view of the (height, width) cell array."""
        view = self._cells.view()
        view.flags.writeable = False
        return view

    @property
    def shape(self) -> Tuple[int, int]:
        """Get grid dimensions as (width, height)."""
        return (self.width, self.height)

    @property
    def population(self) -> int:
        """Get the number of living cells."""
        return int(np.count_nonzero(self._cells))

    def is_valid_coord(self, row: int, col: int) -> bool:
        """Check whether (row, col) lies inside the grid."""
        return 0 <= row < self.height and 0 <= col < self.width

    def _check_coord(self, row: int, col: int) -> None:
        if not self.is_valid_coord(row, col):
            raise IndexError(f"Coordinates ({row}, {col}) out of bounds for {self.width}x{self.height} grid")

    def get_cell(self, row: int, col: int) -> Cell:
        """Get the state of a cell.

        Raises:
            IndexError: If coordinates are out of bounds
        """
        self._check_coord(row, col)
        return Cell(int(self._cells[row, col]))

    def is_alive(self, row: int, col: int) -> bool:
        return self.get_cell(row, col) is Cell.ALIVE

    def set_cell(self, row: int, col: int, state: Union[Cell, bool]) -> None:
        """Set the state of a cell.

        Args:
            row: Row coordinate
            col: Column coordinate
            state: New Cell value, or a bool for alive/dead

        Raises:
            IndexError: If coordinates are out of bounds
            ValueError: If state is not a Cell, 0/1 or a bool
        """
        self._check_coord(row, col)
        if isinstance(state, bool):
            state = Cell.from_alive(state)
        self._cells[row, col] = Cell(state)

    def apply_changes(self, changes: Iterable[CellChange]) -> None:
        """Write a batch of ((row, col), cell) changes into the grid."""
        for (row, col), cell in changes:
            self.set_cell(row, col, cell)

    def count_neighbors(self, row: int, col: int) -> int:
        """Count living neighbors of a single cell.

        Out-of-bounds neighbor positions are skipped.

        Returns:
            Number of living neighbors (0-8)
        """
        count = 0
        for d_row, d_col in NEIGHBOR_OFFSETS:
            n_row, n_col = row + d_row, col + d_col
            if self.is_valid_coord(n_row, n_col):
                count += int(self._cells[n_row, n_col])
        return count

    def count_all_neighbors(self) -> np.ndarray:
        """Count neighbors for all cells using a PyTorch convolution.

        Zero padding makes every position outside the grid count as dead.

        Returns:
            (height, width) array with the neighbor count of each cell
        """
        torch_input = torch.from_numpy(self._cells.astype(np.float32)).unsqueeze(0).unsqueeze(0)
        neighbors = F.conv2d(torch_input, self._torch_kernel, padding=1)
        return neighbors[0, 0].numpy().astype(np.int8)

    def rows(self) -> List[List[Cell]]:
        """Get the grid as a list of rows of Cell values."""
        return [[Cell(value) for value in row] for row in self._cells.tolist()]

    def to_list(self) -> List[List[int]]:
        """Convert grid to a nested list of 0/1 ints, row by row."""
        return self._cells.tolist()

    def copy(self) -> "Grid":
        """Return an independent grid with the same cells."""
        return Grid(self.width, self.height, self._cells)

    def render(self) -> str:
        """Render the grid as text.

        Each row is its cells' tokens, each followed by a space, then a
        newline, e.g. "1 0 \\n0 1 \\n".
        """
        lines = []
        for row in self._cells.tolist():
            lines.append("".join(f"{Cell(value).render()} " for value in row) + "\n")
        return "".join(lines)

    def __eq__(self, other: object) -> bool:
        """Check if two grids have the same shape and cells."""
        if not isinstance(other, Grid):
            return False
        return self.shape == other.shape and np.array_equal(self._cells, other._cells)

    def __str__(self) -> str:
        return self.render()

    def __repr__(self) -> str:
        return f"Grid(width={self.width}, height={self.height}, population={self.population})"
