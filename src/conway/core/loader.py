"""Load initial grids from text.

Each line of the source is one row; cells are separated by single spaces
and each token is "0" (dead) or "1" (alive). This is the same layout
Grid.render() produces, so rendered grids can be loaded back.
"""

from pathlib import Path
from typing import List, TextIO, Union

from .cell import Cell
from .errors import EmptyGrid, InvalidCellToken
from .grid import Grid


def parse_row(line: str, line_number: int) -> List[Cell]:
    """Parse one row of cell tokens.

    Trailing whitespace is dropped; everything else must be a valid token.

    Raises:
        InvalidCellToken: If any token is not "0" or "1"
    """
    row = []
    for token in line.rstrip().split(" "):
        try:
            row.append(Cell.from_token(token))
        except InvalidCellToken:
            raise InvalidCellToken(token, line=line_number) from None
    return row


def parse_grid(text: str) -> Grid:
    """Build a grid from its text form.

    Width comes from the first row and height from the number of rows.

    Raises:
        InvalidCellToken: If a token is not "0" or "1"
        ShapeMismatch: If rows have different lengths
        EmptyGrid: If the text has no rows
    """
    lines = text.split("\n")
    while lines and not lines[-1].strip():
        lines.pop()

    if not lines:
        raise EmptyGrid("No rows found in grid source")

    rows = [parse_row(line, number) for number, line in enumerate(lines, start=1)]
    return Grid(len(rows[0]), len(rows), rows)


def read_grid(stream: TextIO) -> Grid:
    """Build a grid from an open text stream."""
    return parse_grid(stream.read())


def load_grid(path: Union[str, Path]) -> Grid:
    """Build a grid from a text file.

    Raises:
        FileNotFoundError: If the file doesn't exist
    """
    with open(path, "r") as f:
        return read_grid(f)
