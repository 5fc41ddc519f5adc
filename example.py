#!/usr/bin/env python3
"""
Example usage of the lifeboard package.
"""

from lifeboard import PatternLibrary, Simulation, evolve
from lifeboard.frontends.cli import print_board


def main():
    """Demonstrate programmatic usage of the lifeboard package."""
    library = PatternLibrary()
    board = library.get_board("Default")

    # Step the engine by hand
    print("Initial state:")
    print_board(board)

    next_board, terminal = evolve(board)
    print("Generation 1:")
    print_board(next_board)
    print(f"Population: {next_board.population}, terminal: {terminal}")
    print()

    # Let the driver run an oscillator with a cap
    simulation = Simulation(library.get_board("Blinker"), max_generations=4)
    reason = simulation.run(print_board)

    print(f"Finished after {simulation.generation} generations: {reason}")
    print(f"Population history: {simulation.population_history}")


if __name__ == "__main__":
    main()
