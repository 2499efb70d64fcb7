"""Game logging for Iso-Path.

Handles logging game actions and status messages using pluggable writers.
"""

import logging
import sys
from typing import TextIO

from game.writers import GameWriter, NotationWriter, TranscriptWriter

logger = logging.getLogger(__name__)


class GameLogger:
    """Manages multiple game action writers.

    Supports several output formats on several streams at once (e.g. a
    transcript and bare notation on the screen). Writers persist across games;
    each game gets its own header and footer.
    """

    def __init__(
        self,
        session,
        log_to_screen: bool = False,
        log_notation_to_screen: bool = False,
        stream: TextIO | None = None,
    ):
        """Initialize the game logger.

        Args:
            session: GameSession instance (for seed, board size and player names)
            log_to_screen: Whether to write the transcript to the stream
            log_notation_to_screen: Whether to write bare notation to the stream
            stream: Output stream for screen writers (default: stdout)
        """
        self.session = session
        self._stream = stream if stream is not None else sys.stdout
        self._game_active = False

        self.writers: list[GameWriter] = []
        if log_to_screen:
            self.writers.append(TranscriptWriter(self._stream))
        if log_notation_to_screen:
            self.writers.append(NotationWriter(self._stream))

    def add_writer(self, writer: GameWriter) -> None:
        self.writers.append(writer)

    def remove_writer(self, writer: GameWriter) -> None:
        if writer in self.writers:
            self.writers.remove(writer)

    def start_log(self, seed: int | None, n: int) -> None:
        """Start logging for a new game and write headers to all writers.

        Args:
            seed: Random seed for this game
            n: Board size
        """
        logger.info("Starting game (seed=%s, size=%d)", seed, n)
        player1_name = self.session.player1.name if self.session.player1 else None
        player2_name = self.session.player2.name if self.session.player2 else None
        for writer in self.writers:
            writer.write_header(seed, n, player1_name, player2_name)
        self._game_active = True

    def end_log(self, game=None) -> None:
        """End logging for the current game and write footers.

        Does nothing if no game is being logged.
        """
        if not self._game_active:
            return
        for writer in self.writers:
            writer.write_footer(game)
        self._game_active = False

    def close(self) -> None:
        self.end_log()
        for writer in self.writers:
            writer.close()
        self.writers = []

    def log_action(self, player_num: int, notation: str, action_result=None) -> None:
        """Log an action to all writers.

        Args:
            player_num: Player number (1 or 2)
            notation: Action in Iso-Path notation
            action_result: Optional ActionResult of the action
        """
        logger.debug("Player %d: %s", player_num, notation)
        for writer in self.writers:
            writer.write_action(player_num, notation, action_result)

    def log_comment(self, message: str) -> None:
        """Log a status/comment message to all writers."""
        logger.info(message)
        for writer in self.writers:
            writer.write_comment(message)
