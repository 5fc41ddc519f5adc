"""Tests for the evolution engine."""

import pytest
from lifeboard.core.board import Board
from lifeboard.core.engine import Evolution, evolve, next_generation
from lifeboard.core.patterns import DEFAULT_BOARD_ROWS


def centered(rows, cols, live_cells):
    """Build a board with the given (row, col) cells alive."""
    data = [[0] * cols for _ in range(rows)]
    for r, c in live_cells:
        data[r][c] = 1
    return Board.from_rows(data)


# Offsets around (2, 2) on a 5x5 board
RING = [(1, 1), (1, 2), (1, 3), (2, 1), (2, 3), (3, 1), (3, 2), (3, 3)]


class TestRules:
    """Test cases for the neighbor-count rules."""

    @pytest.mark.parametrize("neighbors,alive", [(2, False), (3, True), (4, False)])
    def test_birth(self, neighbors, alive):
        """Test a dead cell is born with exactly 3 neighbors."""
        board = centered(5, 5, RING[:neighbors])
        assert not board.get_cell(2, 2)
        assert board.count_neighbors(2, 2) == neighbors

        next_board, _ = evolve(board)
        assert next_board.get_cell(2, 2) is alive

    @pytest.mark.parametrize(
        "neighbors,alive",
        [(0, False), (1, False), (2, True), (3, True), (4, False), (5, False), (8, False)],
    )
    def test_survival_and_death(self, neighbors, alive):
        """Test a live cell survives with 2 or 3 neighbors and dies otherwise."""
        board = centered(5, 5, [(2, 2)] + RING[:neighbors])
        assert board.count_neighbors(2, 2) == neighbors

        next_board, _ = evolve(board)
        assert next_board.get_cell(2, 2) is alive


class TestEvolve:
    """Test cases for evolve()."""

    def test_returns_evolution(self):
        """Test evolve returns a named (board, terminal) tuple."""
        result = evolve(Board.from_strings(DEFAULT_BOARD_ROWS))
        assert isinstance(result, Evolution)
        assert isinstance(result.board, Board)
        assert result.terminal is False

    def test_all_dead_board(self):
        """Test an all-dead board stays dead and is terminal."""
        board = Board.empty(4, 6)
        next_board, terminal = evolve(board)

        assert next_board == board
        assert next_board.is_extinct
        assert terminal is True

    def test_single_cell_dies(self):
        """Test a lone cell dies and the result is terminal."""
        next_board, terminal = evolve(Board.from_strings(["000", "010", "000"]))
        assert next_board.is_extinct
        assert terminal is True

    def test_block_still_life(self):
        """Test a 2x2 block surrounded by dead cells never changes."""
        block = Board.from_strings(["0000", "0110", "0110", "0000"])
        board = block
        for _ in range(5):
            board, terminal = evolve(board)
            assert board == block
            assert terminal is False

    def test_blinker_oscillates(self):
        """Test the blinker flips between vertical and horizontal."""
        vertical = Board.from_strings(["00000", "00100", "00100", "00100", "00000"])
        horizontal = Board.from_strings(["00000", "00000", "01110", "00000", "00000"])

        board, terminal = evolve(vertical)
        assert board == horizontal
        assert terminal is False

        board, terminal = evolve(board)
        assert board == vertical
        assert terminal is False

    def test_corner_no_wraparound(self):
        """Test cells on the opposite edges don't count toward the corner."""
        # Would be born at (0, 0) with 3 neighbors if the edges wrapped
        board = Board.from_strings(["00001", "00000", "00000", "00000", "10001"])
        next_board, terminal = evolve(board)

        assert not next_board.get_cell(0, 0)
        assert terminal is True

    def test_corner_birth_from_in_bounds_neighbors(self):
        """Test a corner cell is born from its three in-bounds neighbors."""
        board = Board.from_strings(["01000", "11000", "00000", "00000", "00000"])
        next_board, _ = evolve(board)
        assert next_board.get_cell(0, 0)

    def test_dimensions_preserved(self):
        """Test evolve keeps row count and row length."""
        board = Board.from_strings(["0110100", "1011001", "0100110"])
        next_board, _ = evolve(board)

        assert next_board.shape == (3, 7)
        assert all(len(row) == 7 for row in next_board.to_list())

    def test_input_not_mutated(self):
        """Test evolve leaves its input board unchanged."""
        board = Board.from_strings(DEFAULT_BOARD_ROWS)
        before = board.to_list()

        next_board, _ = evolve(board)

        assert board.to_list() == before
        assert next_board is not board

    def test_deterministic(self):
        """Test evolving the same board twice gives the same result."""
        board = Board.from_strings(DEFAULT_BOARD_ROWS)
        assert evolve(board) == evolve(board)
        assert evolve(board) == evolve(Board.from_strings(DEFAULT_BOARD_ROWS))

    def test_next_generation_matches_evolve(self):
        """Test next_generation gives the same board as evolve."""
        board = Board.from_strings(DEFAULT_BOARD_ROWS)
        assert next_generation(board) == evolve(board).board

    def test_none_board(self):
        """Test a missing board terminates without producing a board."""
        result = evolve(None)
        assert result.board is None
        assert result.terminal is True

    def test_empty_board(self):
        """Test a board with no rows evolves to an empty terminal board."""
        next_board, terminal = evolve(Board.from_rows([]))
        assert next_board.rows == 0
        assert terminal is True


class TestDefaultBoard:
    """End-to-end checks against the built-in 5x5 board."""

    def test_first_generation_by_hand(self):
        """Test generation 1 against a hand-computed result for all 25 cells."""
        # Neighbor counts of the starting board, row by row:
        #   2 1 2 2 2
        #   3 4 3 2 2
        #   3 3 3 3 2
        #   4 3 2 2 2
        #   1 2 1 1 0
        expected = [
            "00000",
            "10111",
            "11111",
            "01000",
            "00000",
        ]
        board = Board.from_strings(DEFAULT_BOARD_ROWS)

        counts = board.count_all_neighbors().tolist()
        assert counts == [
            [2, 1, 2, 2, 2],
            [3, 4, 3, 2, 2],
            [3, 3, 3, 3, 2],
            [4, 3, 2, 2, 2],
            [1, 2, 1, 1, 0],
        ]

        next_board, terminal = evolve(board)
        assert next_board.to_strings() == expected
        assert terminal is False

    def test_full_sequence(self):
        """Test every generation until the board dies out."""
        expected = [
            ["00000", "10111", "11111", "01000", "00000"],
            ["00010", "10001", "10001", "11010", "00000"],
            ["00000", "00011", "10011", "11000", "00000"],
            ["00000", "00011", "11111", "11000", "00000"],
            ["00000", "01001", "10001", "10010", "00000"],
            ["00000", "00000", "11011", "00000", "00000"],
            ["00000", "00000", "00000", "00000", "00000"],
        ]

        board = Board.from_strings(DEFAULT_BOARD_ROWS)
        for generation, rows in enumerate(expected, start=1):
            board, terminal = evolve(board)
            assert board.to_strings() == rows, f"generation {generation}"
            assert terminal is (generation == len(expected))
