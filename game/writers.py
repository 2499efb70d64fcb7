"""Game action writers for Iso-Path.

Provides pluggable writer classes that combine formatters with output streams
to log game actions in various formats (notation, transcript).
"""

import sys
from abc import ABC, abstractmethod
from typing import TextIO

from game.utils.board_text import board_to_lines


class GameWriter(ABC):
    """Abstract base class for game action writers.

    A GameWriter combines a formatter with an output stream to write
    game actions in a specific format.
    """

    def __init__(self, output: TextIO):
        """Initialize the writer.

        Args:
            output: Output stream to write to (stdout, an in-memory buffer, ...)
        """
        self.output = output
        self._game_started = False

    @abstractmethod
    def write_header(self, seed: int | None, n: int, player1_name: str | None = None, player2_name: str | None = None) -> None:
        """Write game metadata.

        Args:
            seed: Random seed for this game
            n: Board size
            player1_name: Optional name for player 1 (climbing side)
            player2_name: Optional name for player 2 (trench side)
        """
        pass

    @abstractmethod
    def write_action(self, player_num: int, notation: str, action_result=None) -> None:
        """Write a committed action.

        Args:
            player_num: Player number (1 or 2)
            notation: Action in Iso-Path notation
            action_result: Optional ActionResult for the action
        """
        pass

    def write_comment(self, message: str) -> None:
        """Write a status/comment message. Default implementation does nothing."""
        pass

    def write_footer(self, game=None) -> None:
        """Write the final game state (optional)."""
        pass

    def flush(self) -> None:
        self.output.flush()

    def close(self) -> None:
        """Close the output stream (but never close stdout/stderr)."""
        if self.output in (sys.stdout, sys.stderr):
            return
        if hasattr(self.output, "close"):
            self.output.close()


class NotationWriter(GameWriter):
    """Writes one action per line in Iso-Path notation.

    Format:
        4                 # Header: board size
        Bb2-c3,Sa1-b2     # Action
        xf3,Sc4-d5        # Capture followed by a step
    """

    def write_header(self, seed: int | None, n: int, player1_name: str | None = None, player2_name: str | None = None) -> None:
        self.output.write(f"{n}\n")
        if player1_name:
            self.output.write(f"# Player 1: {player1_name}\n")
        if player2_name:
            self.output.write(f"# Player 2: {player2_name}\n")
        self._game_started = True
        self.flush()

    def write_action(self, player_num: int, notation: str, action_result=None) -> None:
        self.output.write(f"{notation}\n")
        self.flush()


class TranscriptWriter(GameWriter):
    """Writes game actions with player prefixes, comments and the final board.

    Format:
        # Seed: 12345
        # Board size: 4
        #
        Player 1: Bb2-c3,Sa1-b2
        Player 2: xb2,Sg1-f1
        #
        # Final board:
        #    °  °  -  °
        # ...
    """

    def write_header(self, seed: int | None, n: int, player1_name: str | None = None, player2_name: str | None = None) -> None:
        self.output.write(f"# Seed: {seed}\n")
        self.output.write(f"# Board size: {n}\n")
        if player1_name:
            self.output.write(f"# Player 1: {player1_name}\n")
        if player2_name:
            self.output.write(f"# Player 2: {player2_name}\n")
        self.output.write("#\n")
        self._game_started = True
        self.flush()

    def write_action(self, player_num: int, notation: str, action_result=None) -> None:
        suffix = ""
        if action_result is not None and action_result.has_captures():
            suffix = "  # capture"
        self.output.write(f"Player {player_num}: {notation}{suffix}\n")
        self.flush()

    def write_comment(self, message: str) -> None:
        self.output.write(f"# {message}\n")
        self.flush()

    def write_footer(self, game=None) -> None:
        if game is None:
            return
        self.output.write("#\n")
        self.output.write("# Final board:\n")
        for line in board_to_lines(game.board):
            self.output.write(f"# {line}\n")
        self.flush()


