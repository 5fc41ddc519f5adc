"""Board data structure for the Game of Life."""

from typing import Iterable, List, Sequence, Tuple
import numpy as np
import torch
import torch.nn.functional as F

# Offsets of the 8 cells surrounding a position
NEIGHBOR_OFFSETS = [(dr, dc) for dr in (-1, 0, 1) for dc in (-1, 0, 1) if not (dr == 0 and dc == 0)]

_NEIGHBOR_KERNEL = torch.tensor([[1, 1, 1], [1, 0, 1], [1, 1, 1]], dtype=torch.float32).unsqueeze(0).unsqueeze(0)

_torch_configured = False


def _configure_torch() -> None:
    """Switch torch to a single thread the first time a board is convolved."""
    global _torch_configured
    if not _torch_configured:
        # The board is small and evolved sequentially
        torch.set_num_threads(1)
        _torch_configured = True


class Board:
    """An immutable snapshot of a bounded 2D grid of cells.

    Cells are stored row-major in a read-only numpy array of shape
    (rows, cols), with 1 for alive and 0 for dead. Edges do not wrap:
    positions outside the board count as dead.
    """

    def __init__(self, cells: np.ndarray) -> None:
        """Wrap a cell array.

        Args:
            cells: 2D array of 0/1 values, copied on construction
        """
        data = np.array(cells, dtype=np.int8)
        if data.size == 0:
            data = data.reshape((data.shape[0] if data.ndim else 0, 0))
        data.setflags(write=False)
        self._cells = data

    @classmethod
    def from_rows(cls, rows: Sequence[Sequence[int]]) -> "Board":
        """Create a board from nested row sequences.

        Args:
            rows: Sequence of rows, each a sequence of 0/1 cell values

        Returns:
            New Board instance
        """
        return cls(np.array(rows, dtype=np.int8))

    @classmethod
    def from_strings(cls, lines: Iterable[str]) -> "Board":
        """Create a board from rows of '0'/'1' characters.

        Args:
            lines: Row strings such as "01000"

        Returns:
            New Board instance
        """
        return cls.from_rows([[int(ch) for ch in line.strip()] for line in lines])

    @classmethod
    def empty(cls, rows: int, cols: int) -> "Board":
        """Create an all-dead board."""
        return cls(np.zeros((rows, cols), dtype=np.int8))

    @property
    def cells(self) -> np.ndarray:
        """Get the read-only cell array."""
        return self._cells

    @property
    def rows(self) -> int:
        """Number of rows."""
        return self._cells.shape[0]

    @property
    def cols(self) -> int:
        """Number of columns."""
        return self._cells.shape[1]

    @property
    def shape(self) -> Tuple[int, int]:
        """Get board dimensions as (rows, cols)."""
        return (self.rows, self.cols)

    @property
    def population(self) -> int:
        """Get the number of living cells."""
        return int(np.count_nonzero(self._cells))

    @property
    def is_extinct(self) -> bool:
        """Whether every cell on the board is dead."""
        return not self._cells.any()

    def get_cell(self, row: int, col: int) -> bool:
        """Get the state of a cell.

        Args:
            row: Row index
            col: Column index

        Returns:
            True if cell is alive, False if dead

        Raises:
            IndexError: If coordinates are out of bounds
        """
        if not (0 <= row < self.rows and 0 <= col < self.cols):
            raise IndexError(f"Coordinates ({row}, {col}) out of bounds")

        return bool(self._cells[row, col])

    def count_neighbors(self, row: int, col: int) -> int:
        """Count living neighbors of a single cell.

        Args:
            row: Row index
            col: Column index

        Returns:
            Number of living in-bounds neighbors (0-8)
        """
        count = 0
        for dr, dc in NEIGHBOR_OFFSETS:
            nr, nc = row + dr, col + dc
            if 0 <= nr < self.rows and 0 <= nc < self.cols:
                count += int(self._cells[nr, nc])

        return count

    def count_all_neighbors(self) -> np.ndarray:
        """Count neighbors for all cells using a zero-padded convolution.

        Returns:
            2D int8 array of shape (rows, cols) with each cell's neighbor count
        """
        if self._cells.size == 0:
            return np.zeros(self.shape, dtype=np.int8)

        _configure_torch()
        board_input = torch.from_numpy((self._cells > 0).astype(np.float32)).unsqueeze(0).unsqueeze(0)

        # padding=1 fills the border with dead cells, so nothing wraps
        neighbors = F.conv2d(board_input, _NEIGHBOR_KERNEL, padding=1)

        return neighbors[0, 0].round().numpy().astype(np.int8)

    def to_list(self) -> List[List[int]]:
        """Convert board to nested lists of ints."""
        return self._cells.tolist()

    def to_strings(self) -> List[str]:
        """Convert board to one digit string per row."""
        return ["".join(str(int(cell)) for cell in row) for row in self._cells]

    def __eq__(self, other: object) -> bool:
        """Check if two boards are equal."""
        if not isinstance(other, Board):
            return NotImplemented
        return self.shape == other.shape and np.array_equal(self._cells, other._cells)

    def __hash__(self) -> int:
        return hash((self.shape, self._cells.tobytes()))

    def __repr__(self) -> str:
        return f"Board.from_strings({self.to_strings()!r})"

    def __str__(self) -> str:
        """String representation with one row of '0'/'1' digits per line."""
        return "\n".join(self.to_strings())
