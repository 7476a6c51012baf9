#!/usr/bin/env python3
"""
Example usage of the termlife package.
"""

from termlife import Board, Simulation


def main():
    """Demonstrate programmatic usage of the termlife package."""
    # Start from a glider near the top-left corner
    board = Board.parse(
        """
        .#........
        ..#.......
        ###.......
        ..........
        ..........
        ..........
        """
    )
    simulation = Simulation(board)

    for board in simulation.frames(limit=8):
        print(f"Generation {simulation.generation} (population {board.population}):")
        print(board.render())
        print()

    # A random board, rendered once
    random_board = Board.random(20, 10)
    print(f"Random board, {random_board.population} live cells:")
    print(random_board)


if __name__ == "__main__":
    main()
