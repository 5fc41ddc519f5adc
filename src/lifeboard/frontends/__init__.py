"""Frontend interfaces for the Game of Life."""

from .cli import CLIGameOfLife, format_board, print_board

__all__ = ["CLIGameOfLife", "format_board", "print_board"]
