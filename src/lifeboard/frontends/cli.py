"""Command-line interface for Conway's Game of Life."""

import argparse
import sys
from typing import Optional, TextIO

from ..core.board import Board
from ..core.patterns import DEFAULT_PATTERN, PatternLibrary
from ..core.simulation import Simulation


def format_board(board: Board) -> str:
    """Format a board as one line of '0'/'1' digits per row.

    Args:
        board: Board to format

    Returns:
        Board text, every row ending with a newline
    """
    return "".join(row + "\n" for row in board.to_strings())


def print_board(board: Optional[Board], file: Optional[TextIO] = None) -> None:
    """Print a board followed by a blank separator line.

    Args:
        board: Board to print; nothing is printed for None
        file: Output stream (defaults to stdout)
    """
    if board is None:
        return

    print(format_board(board), file=file or sys.stdout)


class CLIGameOfLife:
    """Command-line interface for running Game of Life simulations."""

    def __init__(self, output: Optional[TextIO] = None):
        """Initialize CLI interface.

        Args:
            output: Stream boards are printed to (defaults to stdout)
        """
        self.pattern_library = PatternLibrary()
        self.output = output

    def run_simulation(
        self,
        pattern: str = DEFAULT_PATTERN,
        max_generations: Optional[int] = None,
        verbose: bool = False,
    ) -> Simulation:
        """Print every generation of a pattern until it dies out.

        Args:
            pattern: Name of the starting pattern
            max_generations: Optional cap on evolution steps
            verbose: Print a summary after the run

        Returns:
            The finished Simulation

        Raises:
            KeyError: If the pattern is not in the library
        """
        board = self.pattern_library.get_board(pattern)
        if board is None:
            raise KeyError(pattern)

        simulation = Simulation(board, max_generations=max_generations)
        simulation.run(lambda b: print_board(b, self.output))

        if verbose:
            print_results(simulation, file=self.output)

        return simulation

    def list_patterns(self) -> None:
        """List available patterns by category."""
        print("Available patterns:", file=self.output)

        for category, names in self.pattern_library.get_patterns_by_category().items():
            print(f"\n{category}:", file=self.output)
            for name in names:
                pattern = self.pattern_library.get_pattern(name)
                rows, cols = pattern.get_size()
                print(f"  {name}: {rows}x{cols}, {pattern.population} cells", file=self.output)
                if pattern.description:
                    print(f"    {pattern.description}", file=self.output)


def format_finish_reason(reason: Optional[str]) -> str:
    """Format the simulation finish reason for display."""
    if reason == "extinction":
        return "All cells died"
    if reason == "max_generations":
        return "Reached maximum generations"
    return "Unknown"


def print_results(simulation: Simulation, file: Optional[TextIO] = None) -> None:
    """Print a one-line summary of a finished simulation."""
    print(
        f"Simulation completed after {simulation.generation} generations "
        f"({format_finish_reason(simulation.finish_reason)})",
        file=file or sys.stdout,
    )


def create_parser() -> argparse.ArgumentParser:
    """Create command-line argument parser.

    Returns:
        Configured ArgumentParser
    """
    parser = argparse.ArgumentParser(
        prog="lifeboard",
        description="Print each generation of Conway's Game of Life until every cell is dead",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  # Run the built-in 5x5 board until it dies out
  lifeboard

  # Run a blinker for 10 generations
  lifeboard --pattern Blinker --max-generations 10

  # List available patterns
  lifeboard --list-patterns
        """,
    )

    parser.add_argument(
        "--pattern",
        type=str,
        default=DEFAULT_PATTERN,
        help=f"Starting pattern (default: {DEFAULT_PATTERN})",
    )

    parser.add_argument(
        "-m",
        "--max-generations",
        type=int,
        default=None,
        help="Stop after this many generations (default: run until all cells are dead)",
    )

    parser.add_argument(
        "-v",
        "--verbose",
        action="store_true",
        help="Print a summary after the run",
    )

    parser.add_argument(
        "--list-patterns",
        action="store_true",
        help="List all available patterns and exit",
    )

    return parser


def validate_args(args: argparse.Namespace) -> bool:
    """Validate command-line arguments.

    Args:
        args: Parsed arguments

    Returns:
        True if arguments are valid
    """
    errors = []

    if args.max_generations is not None and args.max_generations <= 0:
        errors.append("Max generations must be positive")

    if errors:
        print("Error: Invalid arguments:")
        for error in errors:
            print(f"  - {error}")
        return False

    return True


def main(argv: Optional[list] = None) -> int:
    """Main entry point for CLI interface.

    Args:
        argv: Argument list (defaults to sys.argv[1:])

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

    if cli.pattern_library.get_pattern(args.pattern) is None:
        available = cli.pattern_library.list_patterns()
        print(f"Error: Pattern '{args.pattern}' not found")
        print(f"Available patterns: {', '.join(available)}")
        print("Use --list-patterns to see detailed information")
        return 1

    try:
        cli.run_simulation(
            pattern=args.pattern,
            max_generations=args.max_generations,
            verbose=args.verbose,
        )
        return 0

    except KeyboardInterrupt:
        print("\nSimulation interrupted by user")
        return 1
    except Exception as e:
        print(f"Error: {e}")
        if args.verbose:
            import traceback

            traceback.print_exc()
        return 1


if __name__ == "__main__":
    sys.exit(main())
