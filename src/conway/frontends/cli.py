"""Command-line interface for Conway's Game of Life."""

import argparse
import sys
import time
from dataclasses import dataclass
from typing import List, Optional

from ..core.errors import GridError
from ..core.game import GameOfLife
from ..core.grid import Grid
from ..core.loader import load_grid
from ..core.patterns import PatternLibrary

CLEAR_SCREEN = "\033[H\033[2J"


@dataclass
class SimulationConfig:
    """Configuration for a simulation run."""
    seed: Optional[str] = None
    pattern: Optional[str] = None
    width: int = 10
    height: int = 10
    generations: int = 1
    interval: float = 0.0
    clear: bool = False
    final_only: bool = False
    verbose: bool = False


class CLIGameOfLife:
    """Command-line interface for running Game of Life simulations."""

    def __init__(self):
        self.pattern_library = PatternLibrary()

    def load_initial_grid(self, config: SimulationConfig) -> Grid:
        """Build the starting grid from a seed file or a named pattern.

        Patterns are centered on a config.width x config.height grid.

        Raises:
            GridError: If the seed file is malformed
            OSError: If the seed file can't be read
            ValueError: If the pattern is unknown or doesn't fit
        """
        if config.seed:
            if config.verbose:
                print(f"Loading seed file {config.seed}")
            return load_grid(config.seed)

        pattern = self.pattern_library.get_pattern(config.pattern)
        if pattern is None:
            raise ValueError(f"Pattern '{config.pattern}' not found")

        pattern_width, pattern_height = pattern.get_size()
        if pattern_width > config.width or pattern_height > config.height:
            raise ValueError(
                f"Pattern '{pattern.name}' ({pattern_width}x{pattern_height}) doesn't fit "
                f"on a {config.width}x{config.height} grid"
            )

        row = (config.height - pattern_height) // 2
        col = (config.width - pattern_width) // 2
        if config.verbose:
            print(f"Placing pattern '{pattern.name}' at ({row}, {col})")
        return pattern.to_grid(config.width, config.height, row, col)

    def run_simulation(self, config: SimulationConfig) -> GameOfLife:
        """Run a simulation, printing each generation to stdout.

        Args:
            config: Simulation settings

        Returns:
            The game after the last generation
        """
        grid = self.load_initial_grid(config)
        game = GameOfLife(grid)

        if config.verbose:
            print(f"Initial grid: {grid.width}x{grid.height}, population {game.population}")

        if not config.final_only:
            self._show(game, config)

        for _ in game.run(config.generations):
            if config.interval > 0:
                time.sleep(config.interval)
            if not config.final_only:
                self._show(game, config)

        if config.final_only:
            self._show(game, config)

        if config.verbose:
            print(f"Finished after {game.generation} generations, population {game.population}")

        return game

    def _show(self, game: GameOfLife, config: SimulationConfig) -> None:
        if config.clear:
            print(CLEAR_SCREEN, end="")
        if config.verbose:
            print(f"Generation {game.generation}:")
        print(game.render())

    def list_patterns(self) -> None:
        """List available patterns by category."""
        print("Available patterns:")
        for category, names in self.pattern_library.get_patterns_by_category().items():
            print(f"\n{category}:")
            for name in names:
                pattern = self.pattern_library.get_pattern(name)
                size = pattern.get_size()
                print(f"  {name}: {size[0]}x{size[1]}, {len(pattern.cells)} cells")
                if pattern.description:
                    print(f"    {pattern.description}")


def create_parser() -> argparse.ArgumentParser:
    """Create command-line argument parser.

    Returns:
        Configured ArgumentParser
    """
    parser = argparse.ArgumentParser(
        description="Run Conway's Game of Life on a bounded grid",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  # Step a seed file once and print both generations
  conway seeds/oscillate.txt

  # Animate a seed file for 50 generations
  conway seeds/oscillate.txt -g 50 --interval 0.5 --clear

  # Run a glider on a 20x20 grid and show only the result
  conway --pattern Glider -W 20 -H 20 -g 40 --final-only

  # List available patterns
  conway --list-patterns
        """,
    )

    parser.add_argument("seed", nargs="?", help="Seed file: rows of space-separated 0/1 cells")

    parser.add_argument("--pattern", type=str, help="Start from a built-in pattern instead of a seed file")

    parser.add_argument("-W", "--width", type=int, default=10, help="Grid width for --pattern (default: 10)")

    parser.add_argument("-H", "--height", type=int, default=10, help="Grid height for --pattern (default: 10)")

    parser.add_argument(
        "-g",
        "--generations",
        type=int,
        default=1,
        help="Number of generations to run (default: 1)",
    )

    parser.add_argument(
        "--interval",
        type=float,
        default=0.0,
        help="Seconds to wait between generations (default: 0)",
    )

    parser.add_argument("--clear", action="store_true", help="Clear the terminal before each generation")

    parser.add_argument("--final-only", action="store_true", help="Only print the last generation")

    parser.add_argument("--list-patterns", action="store_true", help="List available patterns and exit")

    parser.add_argument("-v", "--verbose", action="store_true", help="Print progress information")

    return parser


def validate_args(args: argparse.Namespace) -> bool:
    """Validate command-line arguments.

    Args:
        args: Parsed arguments

    Returns:
        True if arguments are valid
    """
    errors = []

    if args.seed and args.pattern:
        errors.append("Use either a seed file or --pattern, not both")

    if not args.seed and not args.pattern:
        errors.append("A seed file or --pattern is required")

    if args.width <= 0:
        errors.append("Width must be positive")

    if args.height <= 0:
        errors.append("Height must be positive")

    if args.generations < 0:
        errors.append("Generations must be non-negative")

    if args.interval < 0:
        errors.append("Interval must be non-negative")

    if errors:
        print("Error: Invalid arguments:")
        for error in errors:
            print(f"  - {error}")
        return False

    return True


def config_from_args(args: argparse.Namespace) -> SimulationConfig:
    return SimulationConfig(
        seed=args.seed,
        pattern=args.pattern,
        width=args.width,
        height=args.height,
        generations=args.generations,
        interval=args.interval,
        clear=args.clear,
        final_only=args.final_only,
        verbose=args.verbose,
    )


def main(argv: Optional[List[str]] = None) -> int:
    """Main entry point for CLI interface.

    Returns:
        Exit code (0 for success, 1 for error)
    """
    parser = create_parser()
    args = parser.parse_args(argv)

    cli = CLIGameOfLife()

    if args.list_patterns:
        cli.list_patterns()
        return 0

    if not validate_args(args):
        return 1

    if args.pattern and cli.pattern_library.get_pattern(args.pattern) is None:
        available = cli.pattern_library.list_patterns()
        print(f"Error: Pattern '{args.pattern}' not found")
        print(f"Available patterns: {', '.join(available)}")
        print("Use --list-patterns to see detailed information")
        return 1

    try:
        cli.run_simulation(config_from_args(args))
        return 0
    except KeyboardInterrupt:
        print("\nSimulation interrupted by user")
        return 1
    except (GridError, OSError, ValueError) as e:
        print(f"Error: {e}")
        return 1


if __name__ == "__main__":
    sys.exit(main())
