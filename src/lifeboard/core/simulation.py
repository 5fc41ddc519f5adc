"""Driver loop for running a board until it dies out."""

from collections import deque
from enum import Enum
from typing import Callable, Deque, Iterator, List, Optional

from .board import Board
from .engine import Evolution, evolve

# Most recent generations kept in the population history
HISTORY_LENGTH = 100


class SimulationState(Enum):
    """Driver states."""

    RUNNING = "running"
    DONE = "done"


class Simulation:
    """Runs generations of a board until every cell is dead.

    The current board is handed to a callback, evolved, and replaced by the
    next generation. When the engine reports the all-dead state, that final
    board is handed to the callback once more and the simulation stops.
    Patterns that never die out run forever unless ``max_generations`` is set.
    """

    def __init__(self, board: Optional[Board], max_generations: Optional[int] = None) -> None:
        """Initialize the simulation.

        Args:
            board: Initial generation
            max_generations: Optional cap on the number of evolution steps

        Raises:
            ValueError: If max_generations is not positive
        """
        if max_generations is not None and max_generations <= 0:
            raise ValueError("max_generations must be positive")

        self._board = board
        self._max_generations = max_generations
        self._generation = 0
        self._population_history: Deque[int] = deque(maxlen=HISTORY_LENGTH)
        self._finish_reason: Optional[str] = None
        self._state = SimulationState.RUNNING

        if board is None:
            self._state = SimulationState.DONE
            self._finish_reason = "extinction"
        else:
            self._population_history.append(board.population)

    @property
    def board(self) -> Optional[Board]:
        """Current generation."""
        return self._board

    @property
    def generation(self) -> int:
        """Number of evolution steps taken."""
        return self._generation

    @property
    def max_generations(self) -> Optional[int]:
        """Generation cap, or None for an unbounded run."""
        return self._max_generations

    @property
    def state(self) -> SimulationState:
        """Current driver state."""
        return self._state

    @property
    def done(self) -> bool:
        """Whether the simulation has stopped."""
        return self._state is SimulationState.DONE

    @property
    def population(self) -> int:
        """Current number of living cells."""
        return self._board.population if self._board is not None else 0

    @property
    def population_history(self) -> List[int]:
        """Population of the most recent generations, oldest first."""
        return list(self._population_history)

    @property
    def finish_reason(self) -> Optional[str]:
        """'extinction' or 'max_generations' once done, otherwise None."""
        return self._finish_reason

    def step(self) -> Evolution:
        """Advance the simulation by one generation.

        Returns:
            The engine's Evolution for this step

        Raises:
            RuntimeError: If the simulation is already done
        """
        if self.done:
            raise RuntimeError("Simulation has already finished")

        result = evolve(self._board)
        self._board = result.board
        self._generation += 1

        if result.board is not None:
            self._population_history.append(result.board.population)

        if result.terminal:
            self._state = SimulationState.DONE
            self._finish_reason = "extinction"
        elif self._max_generations is not None and self._generation >= self._max_generations:
            self._state = SimulationState.DONE
            self._finish_reason = "max_generations"

        return result

    def generations(self) -> Iterator[Board]:
        """Yield each board the driver prints, in order.

        Every board is yielded before it is evolved. The board that ends the
        run, all-dead or at the generation cap, is yielded once at the end.
        """
        while not self.done:
            yield self._board
            result = self.step()
            if self.done and result.board is not None:
                yield result.board

    def run(self, on_board: Optional[Callable[[Board], None]] = None) -> str:
        """Run until the board dies out or the cap is reached.

        Args:
            on_board: Called with each board from generations()

        Returns:
            Finish reason: 'extinction' or 'max_generations'
        """
        for board in self.generations():
            if on_board is not None:
                on_board(board)

        return self._finish_reason
