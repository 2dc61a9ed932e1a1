"""Exceptions raised while building or loading grids."""

from typing import Optional, Tuple


class GridError(ValueError):
    """Base class for invalid grid input."""


class EmptyGrid(GridError):
    """Raised when a grid would have no rows or no columns."""


class ShapeMismatch(GridError):
    """Raised when a cell matrix doesn't match the declared dimensions.

    Attributes:
        expected: Declared (width, height)
        actual: Observed (width, height)
        row: Index of the offending row, or None if the row count differs
    """

    def __init__(self, expected: Tuple[int, int], actual: Tuple[int, int], row: Optional[int] = None) -> None:
        self.expected = expected
        self.actual = actual
        self.row = row
        if row is None:
            message = f"Expected {expected[0]}x{expected[1]} grid, got {actual[0]}x{actual[1]}"
        else:
            message = f"Row {row} has {actual[0]} cells, expected {expected[0]}"
        super().__init__(message)


class InvalidCellToken(GridError):
    """Raised when a cell token is neither "0" nor "1"."""

    def __init__(self, token: str, line: Optional[int] = None) -> None:
        self.token = token
        self.line = line
        if line is None:
            message = f"Invalid cell token {token!r}"
        else:
            message = f"Invalid cell token {token!r} on line {line}"
        super().__init__(message)
