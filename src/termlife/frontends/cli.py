"""Command-line interface for animating Conway's Game of Life in a terminal."""

import argparse
import sys
import time
import numpy as np
from typing import Optional

from ..core.board import Board
from ..core.simulation import Simulation


DEFAULT_WIDTH = 40
DEFAULT_HEIGHT = 40
DEFAULT_DELAY = 0.1

# Clear the screen and move the cursor to the top-left corner
CLEAR_SCREEN = "\x1b[2J\x1b[1;1H"


class TerminalLife:
    """Runs a Game of Life animation on the terminal."""

    def create_board(self, width: int, height: int, empty: bool = False, seed: Optional[int] = None) -> Board:
        """Build the starting board.

        Args:
            width: Board width
            height: Board height
            empty: Start with every cell dead instead of a random board
            seed: Seed for the random source (unseeded when None)
        """
        if empty:
            return Board.empty(width, height)
        return Board.random(width, height, rng=np.random.default_rng(seed))

    def draw_frame(self, board: Board) -> None:
        """Clear the terminal and print one generation."""
        print(CLEAR_SCREEN + board.render(), flush=True)

    def run(
        self,
        width: int,
        height: int,
        delay: float = DEFAULT_DELAY,
        max_generations: Optional[int] = None,
        seed: Optional[int] = None,
        empty: bool = False,
        verbose: bool = False,
    ) -> int:
        """Animate a simulation until the generation limit is reached.

        Args:
            width: Board width
            height: Board height
            delay: Seconds to wait between frames
            max_generations: Last generation to display, or None to run forever
            seed: Random seed for a reproducible starting board
            empty: Start from an all-dead board
            verbose: Print setup and summary information

        Returns:
            Final generation number
        """
        if verbose:
            mode = "empty" if empty else f"random (seed: {seed if seed is not None else 'none'})"
            print(f"Initializing {width}x{height} board, {mode}")

        simulation = Simulation(self.create_board(width, height, empty=empty, seed=seed))

        limit = None if max_generations is None else max_generations + 1
        for index, board in enumerate(simulation.frames(limit)):
            if index > 0:
                time.sleep(delay)
            self.draw_frame(board)

        if verbose:
            print(f"Displayed {simulation.generation + 1} generations, final population: {simulation.population}")

        return simulation.generation


def create_parser() -> argparse.ArgumentParser:
    """Create command-line argument parser.

    Returns:
        Configured ArgumentParser
    """
    parser = argparse.ArgumentParser(
        description="Animate Conway's Game of Life on a bounded board in the terminal",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  # Run a random 40x40 board until interrupted
  termlife

  # Smaller, faster board
  termlife -W 20 -H 15 --delay 0.05

  # Reproducible start, stop after 200 generations
  termlife --seed 42 --max-generations 200
        """,
    )

    # Board configuration
    parser.add_argument("-W", "--width", type=int, default=DEFAULT_WIDTH, help=f"Board width (default: {DEFAULT_WIDTH})")

    parser.add_argument(
        "-H", "--height", type=int, default=DEFAULT_HEIGHT, help=f"Board height (default: {DEFAULT_HEIGHT})"
    )

    parser.add_argument(
        "-e",
        "--empty",
        action="store_true",
        help="Start from an all-dead board instead of a random one",
    )

    parser.add_argument(
        "-s",
        "--seed",
        type=int,
        help="Random seed for a reproducible starting board",
    )

    # Animation configuration
    parser.add_argument(
        "-d",
        "--delay",
        type=float,
        default=DEFAULT_DELAY,
        help=f"Seconds between frames (default: {DEFAULT_DELAY})",
    )

    parser.add_argument(
        "-m",
        "--max-generations",
        type=int,
        help="Stop after this many generations (default: run until interrupted)",
    )

    # Output configuration
    parser.add_argument(
        "-v",
        "--verbose",
        action="store_true",
        help="Print setup and summary information",
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

    if args.width < 0:
        errors.append("Width must be non-negative")

    if args.height < 0:
        errors.append("Height must be non-negative")

    if args.delay < 0:
        errors.append("Delay must be non-negative")

    if args.max_generations is not None and args.max_generations < 0:
        errors.append("Max generations must be non-negative")

    if errors:
        print("Error: Invalid arguments:")
        for error in errors:
            print(f"  - {error}")
        return False

    return True


def main(argv: Optional[list] = None) -> int:
    """Main entry point for CLI interface.

    Returns:
        Exit code (0 for success, 1 for error)
    """
    parser = create_parser()
    args = parser.parse_args(argv)

    if not validate_args(args):
        return 1

    terminal = TerminalLife()

    try:
        terminal.run(
            width=args.width,
            height=args.height,
            delay=args.delay,
            max_generations=args.max_generations,
            seed=args.seed,
            empty=args.empty,
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
