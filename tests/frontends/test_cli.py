"""Tests for the CLI frontend."""

import argparse
from unittest.mock import patch
from io import StringIO

from termlife.core.board import ALIVE_GLYPH, Board
from termlife.frontends.cli import (
    CLEAR_SCREEN,
    DEFAULT_DELAY,
    TerminalLife,
    create_parser,
    main,
    validate_args,
)


class TestTerminalLife:
    """Test cases for the terminal animation."""

    def test_create_board_empty(self):
        """Test an empty starting board."""
        terminal = TerminalLife()
        board = terminal.create_board(6, 4, empty=True)
        assert board == Board.empty(6, 4)

    def test_create_board_seeded(self):
        """Test seeded starting boards are reproducible."""
        terminal = TerminalLife()
        first = terminal.create_board(15, 15, seed=5)
        second = terminal.create_board(15, 15, seed=5)
        assert first == second
        assert first.shape == (15, 15)

    @patch("sys.stdout", new_callable=StringIO)
    def test_draw_frame(self, mock_stdout):
        """Test a frame clears the screen before the board."""
        terminal = TerminalLife()
        terminal.draw_frame(Board.parse("#."))

        output = mock_stdout.getvalue()
        assert output == CLEAR_SCREEN + ALIVE_GLYPH + "  \n"

    @patch("termlife.frontends.cli.time.sleep")
    @patch("sys.stdout", new_callable=StringIO)
    def test_run_with_limit(self, mock_stdout, mock_sleep):
        """Test a limited run draws every generation and paces between frames."""
        terminal = TerminalLife()

        final_generation = terminal.run(width=4, height=3, delay=0.25, max_generations=2, empty=True)

        assert final_generation == 2
        assert mock_stdout.getvalue().count(CLEAR_SCREEN) == 3
        assert mock_sleep.call_count == 2
        mock_sleep.assert_called_with(0.25)

    @patch("termlife.frontends.cli.time.sleep")
    @patch("sys.stdout", new_callable=StringIO)
    def test_run_zero_generations(self, mock_stdout, mock_sleep):
        """Test a zero limit shows only the starting board."""
        terminal = TerminalLife()

        final_generation = terminal.run(width=2, height=2, max_generations=0, seed=1)

        assert final_generation == 0
        assert mock_stdout.getvalue().count(CLEAR_SCREEN) == 1
        mock_sleep.assert_not_called()

    @patch("termlife.frontends.cli.time.sleep")
    @patch("sys.stdout", new_callable=StringIO)
    def test_run_verbose(self, mock_stdout, mock_sleep):
        """Test verbose output reports setup and summary."""
        terminal = TerminalLife()
        terminal.run(width=5, height=4, max_generations=1, empty=True, verbose=True)

        output = mock_stdout.getvalue()
        assert "Initializing 5x4 board, empty" in output
        assert "Displayed 2 generations, final population: 0" in output


class TestArgumentParsing:
    """Test command-line argument parsing."""

    def test_create_parser(self):
        """Test parser creation."""
        parser = create_parser()
        assert isinstance(parser, argparse.ArgumentParser)

        # Test default values
        args = parser.parse_args([])
        assert args.width == 40
        assert args.height == 40
        assert args.delay == DEFAULT_DELAY
        assert args.max_generations is None
        assert args.seed is None
        assert args.empty is False
        assert args.verbose is False

    def test_parse_long_args(self):
        """Test parsing long argument forms."""
        parser = create_parser()

        args = parser.parse_args(
            ["--width", "30", "--height", "20", "--delay", "0.5", "--max-generations", "100", "--seed", "9"]
        )

        assert args.width == 30
        assert args.height == 20
        assert args.delay == 0.5
        assert args.max_generations == 100
        assert args.seed == 9

    def test_parse_short_args(self):
        """Test parsing short argument forms."""
        parser = create_parser()

        args = parser.parse_args(["-W", "25", "-H", "35", "-d", "0", "-m", "10", "-s", "3", "-e", "-v"])

        assert args.width == 25
        assert args.height == 35
        assert args.delay == 0.0
        assert args.max_generations == 10
        assert args.seed == 3
        assert args.empty is True
        assert args.verbose is True


class TestValidation:
    """Test argument validation."""

    def _args(self, **overrides):
        values = dict(width=40, height=40, delay=0.1, max_generations=None)
        values.update(overrides)
        return argparse.Namespace(**values)

    def test_validate_args_valid(self):
        """Test validation with valid arguments."""
        assert validate_args(self._args()) is True
        assert validate_args(self._args(width=0, height=0, delay=0.0, max_generations=0)) is True

    @patch("sys.stdout", new_callable=StringIO)
    def test_validate_args_invalid(self, mock_stdout):
        """Test validation reports every invalid argument."""
        args = self._args(width=-1, height=-2, delay=-0.5, max_generations=-3)

        assert validate_args(args) is False

        output = mock_stdout.getvalue()
        assert "Error: Invalid arguments:" in output
        assert "Width must be non-negative" in output
        assert "Height must be non-negative" in output
        assert "Delay must be non-negative" in output
        assert "Max generations must be non-negative" in output


class TestMain:
    """Test the main entry point."""

    @patch("termlife.frontends.cli.time.sleep")
    @patch("sys.stdout", new_callable=StringIO)
    def test_main_success(self, mock_stdout, mock_sleep):
        """Test a short run exits cleanly."""
        exit_code = main(["-W", "3", "-H", "3", "-m", "2", "--empty"])

        assert exit_code == 0
        assert mock_stdout.getvalue().count(CLEAR_SCREEN) == 3

    @patch("sys.stdout", new_callable=StringIO)
    def test_main_invalid_args(self, mock_stdout):
        """Test invalid arguments give exit code 1."""
        exit_code = main(["--width", "-5"])

        assert exit_code == 1
        assert "Width must be non-negative" in mock_stdout.getvalue()

    @patch("sys.stdout", new_callable=StringIO)
    def test_main_keyboard_interrupt(self, mock_stdout):
        """Test Ctrl-C is reported and gives exit code 1."""
        with patch.object(TerminalLife, "run", side_effect=KeyboardInterrupt):
            exit_code = main([])

        assert exit_code == 1
        assert "Simulation interrupted by user" in mock_stdout.getvalue()

    @patch("sys.stdout", new_callable=StringIO)
    def test_main_unexpected_error(self, mock_stdout):
        """Test unexpected errors are reported and give exit code 1."""
        with patch.object(TerminalLife, "run", side_effect=RuntimeError("boom")):
            exit_code = main([])

        assert exit_code == 1
        assert "Error: boom" in mock_stdout.getvalue()
