"""Tests for the Grid class."""

import numpy as np
import pytest
from conway.core.cell import Cell
from conway.core.errors import EmptyGrid, ShapeMismatch
from conway.core.grid import Grid

A = Cell.ALIVE
D = Cell.DEAD


class TestGrid:
    """Test cases for the Grid class."""

    def test_initialization(self):
        """Test grid initialization."""
        grid = Grid(10, 20)
        assert grid.width == 10
        assert grid.height == 20
        assert grid.shape == (10, 20)
        assert grid.cells.shape == (20, 10)
        assert grid.population == 0

    def test_initialization_from_cells(self):
        """Test grid built from a matrix of cells."""
        grid = Grid(3, 2, [[A, D, D], [D, D, A]])
        assert grid.get_cell(0, 0) is A
        assert grid.get_cell(1, 2) is A
        assert grid.get_cell(0, 2) is D
        assert grid.population == 2

    def test_initialization_accepts_ints_and_bools(self):
        """Test 0/1 ints and bools are coerced to cells."""
        grid = Grid(2, 2, [[1, 0], [True, False]])
        assert grid.rows() == [[A, D], [A, D]]

    def test_initialization_accepts_numpy_values(self):
        """Test numpy 0/1 ints are accepted."""
        grid = Grid(2, 1, np.array([[1, 0]], dtype=np.int8))
        assert grid.rows() == [[A, D]]

    @pytest.mark.parametrize("value", [2, -1, 0.5, 0.9, 1.7, "1", "0", None])
    def test_initialization_rejects_non_cell_values(self, value):
        """Test values outside the cell domain are not coerced."""
        with pytest.raises(ValueError):
            Grid(2, 1, [[A, value]])

    def test_initialization_rejects_string_rows(self):
        """Test a row given as a string of tokens is rejected."""
        with pytest.raises(ValueError):
            Grid(3, 1, ["101"])
        with pytest.raises(ValueError):
            Grid(1, 1, ["1"])

    @pytest.mark.parametrize("value", [2, 0.5, "1", None])
    def test_set_cell_rejects_non_cell_values(self, value):
        """Test set_cell leaves the grid unchanged for invalid states."""
        grid = Grid(2, 2)
        with pytest.raises(ValueError):
            grid.set_cell(0, 0, value)
        assert grid.population == 0

    def test_set_cell_accepts_bools_and_ints(self):
        """Test bools and 0/1 ints map onto cells."""
        grid = Grid(2, 1)
        grid.set_cell(0, 0, True)
        grid.set_cell(0, 1, 1)
        assert grid.rows() == [[A, A]]
        grid.set_cell(0, 0, False)
        grid.set_cell(0, 1, 0)
        assert grid.rows() == [[D, D]]

    def test_initialization_copies_cells(self):
        """Test the caller's matrix is not aliased."""
        matrix = [[A, D], [D, A]]
        grid = Grid(2, 2, matrix)
        matrix[0][0] = D
        assert grid.get_cell(0, 0) is A

    @pytest.mark.parametrize("width,height", [(0, 3), (3, 0), (-1, 2)])
    def test_non_positive_dimensions(self, width, height):
        """Test that empty grids are rejected."""
        with pytest.raises(EmptyGrid):
            Grid(width, height)

    def test_row_count_mismatch(self):
        """Test wrong number of rows."""
        with pytest.raises(ShapeMismatch) as exc_info:
            Grid(2, 3, [[A, D], [D, A]])
        assert exc_info.value.expected == (2, 3)
        assert exc_info.value.actual == (2, 2)
        assert exc_info.value.row is None
        assert "2x3" in str(exc_info.value)

    def test_ragged_row(self):
        """Test a row with the wrong length."""
        with pytest.raises(ShapeMismatch) as exc_info:
            Grid(3, 2, [[A, D, D], [D, A]])
        assert exc_info.value.expected == (3, 2)
        assert exc_info.value.actual == (2, 2)
        assert exc_info.value.row == 1

    def test_shape_mismatch_is_value_error(self):
        """Test shape errors can be caught as ValueError."""
        with pytest.raises(ValueError):
            Grid(1, 1, [[A, A]])

    def test_cell_operations(self):
        """Test basic cell get/set operations."""
        grid = Grid(5, 4)

        assert grid.get_cell(0, 0) is D
        grid.set_cell(3, 4, A)
        grid.set_cell(1, 1, True)

        assert grid.is_alive(3, 4)
        assert grid.is_alive(1, 1)
        assert not grid.is_alive(0, 0)

        grid.set_cell(1, 1, D)
        assert not grid.is_alive(1, 1)

    def test_out_of_bounds(self):
        """Test coordinates outside the grid raise instead of wrapping."""
        grid = Grid(3, 3)

        for row, col in [(-1, 0), (0, -1), (3, 0), (0, 3)]:
            assert not grid.is_valid_coord(row, col)
            with pytest.raises(IndexError):
                grid.get_cell(row, col)
            with pytest.raises(IndexError):
                grid.set_cell(row, col, A)

        assert grid.is_valid_coord(2, 2)

    def test_cells_view_is_read_only(self):
        """Test the exposed array can't be written through."""
        grid = Grid(2, 2)
        with pytest.raises(ValueError):
            grid.cells[0, 0] = 1

    def test_apply_changes(self):
        """Test batch updates."""
        grid = Grid(3, 3)
        grid.apply_changes([((0, 0), A), ((2, 1), A)])
        assert grid.population == 2
        grid.apply_changes([((0, 0), D)])
        assert grid.rows() == [[D, D, D], [D, D, D], [D, A, D]]

    def test_count_neighbors(self):
        """Test neighbor counting for individual cells."""
        grid = Grid(5, 5)
        assert grid.count_neighbors(2, 2) == 0

        grid.set_cell(1, 1, A)
        grid.set_cell(1, 2, A)
        grid.set_cell(2, 1, A)

        assert grid.count_neighbors(0, 0) == 1
        assert grid.count_neighbors(2, 2) == 3
        assert grid.count_neighbors(1, 1) == 2  # cell itself doesn't count
        assert grid.count_neighbors(3, 3) == 0

    def test_corner_ignores_outside(self):
        """Test corner cells only look at in-bounds neighbors."""
        grid = Grid(3, 3, [[D, A, D], [A, A, D], [D, D, A]])
        assert grid.count_neighbors(0, 0) == 3

        # Opposite corners never see each other (no wraparound)
        corners = Grid(3, 3, [[A, D, D], [D, D, D], [D, D, A]])
        assert corners.count_neighbors(0, 0) == 0
        assert corners.count_neighbors(2, 2) == 0

    def test_full_grid_neighbor_counts(self):
        """Test edge and corner counts on a fully alive grid."""
        grid = Grid(3, 3, [[A] * 3 for _ in range(3)])
        counts = grid.count_all_neighbors()
        expected = np.array([[3, 5, 3], [5, 8, 5], [3, 5, 3]])
        assert np.array_equal(counts, expected)

    def test_count_all_neighbors_matches_single(self):
        """Test vectorized counts agree with per-cell counts."""
        grid = Grid(
            6,
            4,
            [
                [A, D, A, A, D, A],
                [D, A, D, D, A, D],
                [A, A, D, A, D, A],
                [D, D, A, D, A, A],
            ],
        )
        counts = grid.count_all_neighbors()
        assert counts.shape == (4, 6)
        for row in range(grid.height):
            for col in range(grid.width):
                assert counts[row, col] == grid.count_neighbors(row, col)

    def test_to_list_and_rows(self):
        """Test list conversions."""
        grid = Grid(3, 2, [[A, D, A], [D, A, D]])
        assert grid.to_list() == [[1, 0, 1], [0, 1, 0]]
        assert grid.rows() == [[A, D, A], [D, A, D]]

    def test_copy(self):
        """Test copies are independent."""
        grid = Grid(2, 2, [[A, D], [D, A]])
        clone = grid.copy()
        assert clone == grid

        clone.set_cell(0, 1, A)
        assert clone != grid
        assert grid.get_cell(0, 1) is D

    def test_equality(self):
        """Test grid equality comparison."""
        assert Grid(3, 3) == Grid(3, 3)
        assert Grid(3, 3) != Grid(3, 4)
        assert Grid(2, 1, [[A, D]]) != Grid(2, 1, [[D, A]])
        assert Grid(3, 3) != "not a grid"

    def test_render(self):
        """Test text rendering."""
        grid = Grid(3, 2, [[A, D, D], [D, A, A]])
        assert grid.render() == "1 0 0 \n0 1 1 \n"
        assert str(grid) == grid.render()

    def test_render_single_cell(self):
        """Test rendering of the smallest grid."""
        assert Grid(1, 1).render() == "0 \n"

    def test_repr(self):
        """Test repr summary."""
        grid = Grid(4, 2, [[A, D, D, D], [D, D, D, A]])
        assert repr(grid) == "Grid(width=4, height=2, population=2)"
