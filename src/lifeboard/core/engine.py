"""Conway's Game of Life evolution rules."""

from typing import NamedTuple, Optional

from .board import Board


class Evolution(NamedTuple):
    """Outcome of one evolution step.

    Attributes:
        board: The next generation, or None when there was nothing to evolve
        terminal: True when every cell of the next generation is dead
    """

    board: Optional[Board]
    terminal: bool


def next_generation(board: Board) -> Board:
    """Apply Conway's rules to a board.

    Implements the classic rules:
    - Live cell with 2-3 neighbors survives
    - Dead cell with exactly 3 neighbors becomes alive
    - All other cells die or stay dead

    Every neighbor count is taken from the input board before any cell of the
    new board is decided, and the input board is left untouched.

    Args:
        board: Current generation

    Returns:
        New board of the same shape holding the next generation
    """
    neighbor_counts = board.count_all_neighbors()
    cells = board.cells

    # Survival: live cell with 2 or 3 neighbors
    survive_mask = (cells > 0) & ((neighbor_counts == 2) | (neighbor_counts == 3))

    # Birth: dead cell with exactly 3 neighbors
    birth_mask = (cells == 0) & (neighbor_counts == 3)

    return Board(survive_mask | birth_mask)


def evolve(board: Optional[Board]) -> Evolution:
    """Compute the next generation and whether it is the terminal state.

    A missing board yields ``Evolution(None, True)`` so callers can stop
    without a board to print.

    Args:
        board: Current generation

    Returns:
        Evolution with the next board and its terminal flag
    """
    if board is None:
        return Evolution(None, True)

    new_board = next_generation(board)
    return Evolution(new_board, new_board.is_extinct)
