"""Two-valued cell state."""

from enum import IntEnum

from .errors import InvalidCellToken


class Cell(IntEnum):
    """State of a single grid cell.

    Values double as the int8 codes stored in the grid array.
    """

    DEAD = 0
    ALIVE = 1

    def render(self) -> str:
        """Single-character text form ("1" alive, "0" dead)."""
        return _TOKENS[self]

    def __str__(self) -> str:
        return self.render()

    @classmethod
    def from_token(cls, token: str) -> "Cell":
        """Parse a cell token.

        Raises:
            InvalidCellToken: If token is not exactly "0" or "1"
        """
        try:
            return _CELLS[token]
        except KeyError:
            raise InvalidCellToken(token) from None

    @classmethod
    def from_alive(cls, alive: bool) -> "Cell":
        return cls.ALIVE if alive else cls.DEAD


_TOKENS = {Cell.DEAD: "0", Cell.ALIVE: "1"}
_CELLS = {token: cell for cell, token in _TOKENS.items()}
