"""Built-in starting boards and pattern management."""

from typing import Dict, List, Optional, Sequence

from .board import Board

# Compiled-in starting board used when no pattern is chosen
DEFAULT_BOARD_ROWS = [
    "01000",
    "10011",
    "11001",
    "01000",
    "10001",
]

DEFAULT_PATTERN = "Default"


class Pattern:
    """A named starting board, stored as rows of '0'/'1' digits."""

    def __init__(
        self,
        name: str,
        rows: Sequence[str],
        description: str = "",
        category: str = "Custom",
    ) -> None:
        """Initialize a pattern.

        Args:
            name: Pattern name
            rows: Row strings, all of the same length
            description: Optional description
            category: Category name used when listing patterns
        """
        self.name = name
        self.rows = list(rows)
        self.description = description
        self.category = category

    def to_board(self) -> Board:
        """Build the starting board for this pattern."""
        return Board.from_strings(self.rows)

    def get_size(self) -> tuple:
        """Get pattern size as (rows, cols)."""
        if not self.rows:
            return (0, 0)
        return (len(self.rows), len(self.rows[0]))

    @property
    def population(self) -> int:
        """Number of living cells in the pattern."""
        return sum(row.count("1") for row in self.rows)

    @classmethod
    def from_board(cls, board: Board, name: str, description: str = "") -> "Pattern":
        """Create pattern from a board.

        Args:
            board: Source board
            name: Pattern name
            description: Optional description

        Returns:
            New Pattern instance
        """
        return cls(name, board.to_strings(), description)


class PatternLibrary:
    """Manages a collection of patterns."""

    def __init__(self) -> None:
        self._patterns: Dict[str, Pattern] = {}
        self._load_builtin_patterns()

    def _load_builtin_patterns(self) -> None:
        """Load built-in common patterns."""
        self.add_pattern(
            Pattern(
                DEFAULT_PATTERN,
                DEFAULT_BOARD_ROWS,
                "5x5 demo board, dies out after 7 generations",
                "Short-lived",
            )
        )

        self.add_pattern(Pattern("Lone Cell", ["000", "010", "000"], "Dies of underpopulation in one step", "Short-lived"))

        # Still life patterns
        self.add_pattern(
            Pattern("Block", ["0000", "0110", "0110", "0000"], "2x2 still life block", "Still Life")
        )

        self.add_pattern(
            Pattern(
                "Beehive",
                ["000000", "001100", "010010", "001100", "000000"],
                "Beehive still life",
                "Still Life",
            )
        )

        # Oscillators
        self.add_pattern(
            Pattern(
                "Blinker",
                ["00000", "00100", "00100", "00100", "00000"],
                "Period-2 oscillator",
                "Oscillators",
            )
        )

        self.add_pattern(
            Pattern(
                "Toad",
                ["000000", "000000", "001110", "011100", "000000", "000000"],
                "Period-2 oscillator",
                "Oscillators",
            )
        )

        # Spaceships
        self.add_pattern(
            Pattern(
                "Glider",
                [
                    "01000000",
                    "00100000",
                    "11100000",
                    "00000000",
                    "00000000",
                    "00000000",
                    "00000000",
                    "00000000",
                ],
                "Smallest spaceship, period-4",
                "Spaceships",
            )
        )

    def add_pattern(self, pattern: Pattern) -> None:
        """Add a pattern to the library.

        Args:
            pattern: Pattern to add

        Raises:
            ValueError: If the pattern rows have different lengths
        """
        if len({len(row) for row in pattern.rows}) > 1:
            raise ValueError(f"Pattern '{pattern.name}' rows must all have the same length")

        self._patterns[pattern.name] = pattern

    def get_pattern(self, name: str) -> Optional[Pattern]:
        """Get a pattern by name.

        Args:
            name: Pattern name

        Returns:
            Pattern instance or None if not found
        """
        return self._patterns.get(name)

    def get_board(self, name: str) -> Optional[Board]:
        """Get the starting board of a named pattern, or None if not found."""
        pattern = self.get_pattern(name)
        return pattern.to_board() if pattern else None

    def list_patterns(self) -> List[str]:
        """Get list of all pattern names."""
        return list(self._patterns.keys())

    def get_patterns_by_category(self) -> Dict[str, List[str]]:
        """Get patterns organized by category.

        Returns:
            Dictionary mapping categories to pattern name lists
        """
        categories: Dict[str, List[str]] = {}
        for name, pattern in self._patterns.items():
            categories.setdefault(pattern.category, []).append(name)
        return categories


def default_board() -> Board:
    """Build the compiled-in starting board."""
    return Board.from_strings(DEFAULT_BOARD_ROWS)
