"""Text-based renderer implementation for status output."""

from __future__ import annotations

import sys
from typing import Any, TextIO

from game.utils.board_text import board_to_lines
from shared.interfaces import IRenderer


class TextRenderer(IRenderer):
    """Minimal renderer that prints each action and the resulting board to a stream."""

    def __init__(self, stream: TextIO | None = None, show_board: bool = True):
        self._stream: TextIO = stream or sys.stdout
        self._show_board = show_board

    def run(self) -> None:
        """No-op run loop for text renderer."""
        pass

    def reset_board(self) -> None:
        self.report_status("Board reset.")

    def execute_action(
        self,
        player: Any,
        game: Any,
        action_result: Any,
        notation: str,
    ) -> None:
        self.report_status(
            f"Turn {action_result.turn}: {getattr(player, 'name', '?')} plays {notation}"
        )
        if self._show_board:
            for line in board_to_lines(game.board):
                self.report_status(line)
            self.report_status("")

    def report_status(self, message: str) -> None:
        if message is None:
            return
        print(message, file=self._stream)
