"""Frontend interfaces for Conway's Game of Life."""

from .cli import CLIGameOfLife

__all__ = ["CLIGameOfLife"]
