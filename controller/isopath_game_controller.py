"""Game controller for Iso-Path.

Manages the game loop, player actions, renderer updates, and game state.
"""

from __future__ import annotations

import logging
import statistics
import time
from typing import TextIO

from game.constants import (
    CLIMB_WIN,
    DEFAULT_BOARD_SIZE,
    DEFAULT_MAX_TURNS,
    SIDE_NAMES,
    TIE,
    TRENCH_WIN,
)
from game.formatters import NotationFormatter
from controller.game_logger import GameLogger
from controller.game_session import GameSession
from controller.game_loop import GameLoop
from shared.interfaces import IRenderer, IRendererFactory

logger = logging.getLogger(__name__)


class IsopathGameController:

    def __init__(
        self,
        n=DEFAULT_BOARD_SIZE,
        seed=None,
        max_turns=DEFAULT_MAX_TURNS,
        log_to_screen=False,
        log_notation_to_screen=False,
        max_games=None,
        renderer_or_factory: IRenderer | IRendererFactory | None = None,
        player1_config=None,
        player2_config=None,
        track_statistics=False,
        stream: TextIO | None = None,
    ):
        self.max_games = max_games  # None means play indefinitely

        # Statistics tracking
        self.track_statistics = track_statistics
        self.game_stats = []  # Game durations in seconds
        self.turn_stats = []  # Turns per game
        self.win_loss_stats = {CLIMB_WIN: 0, TRENCH_WIN: 0, TIE: 0}
        self.current_game_start_time = None
        self.total_start_time = None

        self.renderer = None
        self._game_ending_processed = False

        # Game session (handles game instance, players, seed)
        self.session = GameSession(
            n=n,
            seed=seed,
            max_turns=max_turns,
            status_reporter=self._report_early,
            player1_config=player1_config,
            player2_config=player2_config,
        )
        self.formatter = NotationFormatter(self.session.game.positions)

        self.logger = GameLogger(
            session=self.session,
            log_to_screen=log_to_screen,
            log_notation_to_screen=log_notation_to_screen,
            stream=stream,
        )
        self.session.set_status_reporter(self._report)

        if isinstance(renderer_or_factory, IRenderer):
            self.renderer = renderer_or_factory
        elif isinstance(renderer_or_factory, IRendererFactory):
            self.renderer = renderer_or_factory(self)
        elif renderer_or_factory is None:
            pass
        else:
            raise TypeError(
                "renderer_or_factory must be an IRenderer, IRendererFactory, or None"
            )

        self._game_loop = GameLoop(self)

        # Start logging for first game
        self.logger.start_log(self.session.get_seed(), self.session.n)

        if self.track_statistics:
            self.total_start_time = time.time()
            self.current_game_start_time = time.time()

    def run(self):
        self._game_loop.run()

    def _reset_board(self):
        """Reset the board for a new game."""
        self.logger.end_log(self.session.game)
        self._game_ending_processed = False
        self.session.reset_game()
        # The position table only depends on the board size
        self.formatter = NotationFormatter(self.session.game.positions)

        if self.renderer is not None:
            self.renderer.reset_board()

        self.logger.start_log(self.session.get_seed(), self.session.n)

        if self.track_statistics:
            self.current_game_start_time = time.time()

    def update_game(self, task):
        """Play one turn of the current game.

        Returns:
            task.done if the controller should stop, task.again otherwise
        """
        status = self._check_game_status(task)
        if status is task.done:
            return task.done

        game = self.session.game
        player = self.session.get_current_player()

        try:
            action = player.get_action()
        except RuntimeError as e:
            # No pass move exists: an empty action set ends the whole run
            self._report(f"Fatal: {e}")
            self.logger.end_log(game)
            raise

        if not game.is_action_legal(action):
            raise ValueError(f"{player.name} chose an illegal action: {action!r}")

        notation = self.formatter.action_to_notation(action)
        action_result = game.perform_action(action)
        if action_result.has_captures():
            player.add_capture()

        self.logger.log_action(player.n, notation, action_result)

        if self.renderer:
            self.renderer.execute_action(player, game, action_result, notation)

        return self._check_game_status(task)

    def _check_game_status(self, task):
        """Check if the game is over and handle the ending if needed.

        Both sides are polled after every committed turn, the side that just
        moved first.

        Returns:
            task.done if the run should stop, task.again otherwise
        """
        game_over = self.session.game.get_game_ended()
        if game_over is None:
            return task.again
        return self._handle_game_ending(game_over, task)

    def _handle_game_ending(self, game_over, task):
        """Report the result, update statistics and start the next game if any.

        Idempotent for a single game.
        """
        if self._game_ending_processed:
            return task.done
        self._game_ending_processed = True

        game = self.session.game
        reason = game.get_game_end_reason()

        self._report("")
        winner = game.outcome_winner(game_over)
        if winner is not None:
            player = self.session.get_player_for_side(winner)
            self._report(f"Winner: {player.name} ({SIDE_NAMES[winner]}) after {game.turn_count} turns ({reason})")
        else:
            self._report(f"Game ended in a tie ({reason})")

        self._report(f"{self.session.player1.name} captures: {self.session.player1.captured}")
        self._report(f"{self.session.player2.name} captures: {self.session.player2.captured}")

        if self.track_statistics and self.current_game_start_time is not None:
            self.game_stats.append(time.time() - self.current_game_start_time)
            self.turn_stats.append(game.turn_count)
            self.win_loss_stats[game_over] += 1

        self.session.increment_games_played()

        if (
            self.max_games is not None
            and self.session.get_games_played() >= self.max_games
        ):
            self._report(f"Completed {self.session.get_games_played()} game(s)")
            self.logger.end_log(game)
            return task.done

        self._reset_board()
        return task.again

    def _report_early(self, message: str | None) -> None:
        # Status messages sent while the session is created, before the logger exists
        if message is not None:
            logger.info(message)

    def _report(self, message: str | None) -> None:
        """Forward status messages to the game logger."""
        if message is None:
            return
        self.logger.log_comment(str(message))

    def print_statistics(self) -> None:
        """Print timing and win/loss statistics for all games played."""
        if not self.track_statistics or not self.game_stats:
            return

        total_time = time.time() - self.total_start_time if self.total_start_time else 0

        mean_time = statistics.mean(self.game_stats)
        std_time = statistics.stdev(self.game_stats) if len(self.game_stats) > 1 else 0.0
        mean_turns = statistics.mean(self.turn_stats)

        total_games = len(self.game_stats)
        climb_wins = self.win_loss_stats[CLIMB_WIN]
        trench_wins = self.win_loss_stats[TRENCH_WIN]
        ties = self.win_loss_stats[TIE]

        print("\n" + "=" * 60)
        print("STATISTICS")
        print("=" * 60)
        print(f"Games played: {total_games}")
        print()
        print("Win/Loss/Tie:")
        print(f"  {self.session.player1.name} (Climb) wins: {climb_wins} ({climb_wins / total_games * 100:.1f}%)")
        print(f"  {self.session.player2.name} (Trench) wins: {trench_wins} ({trench_wins / total_games * 100:.1f}%)")
        print(f"  Ties: {ties} ({ties / total_games * 100:.1f}%)")
        print()
        print("Timing:")
        print(f"  Mean time per game: {mean_time:.3f}s")
        print(f"  Min time: {min(self.game_stats):.3f}s")
        print(f"  Max time: {max(self.game_stats):.3f}s")
        print(f"  Std deviation: {std_time:.3f}s")
        print(f"  Mean turns per game: {mean_turns:.1f}")
        print(f"  Total execution time: {total_time:.3f}s")
        print("=" * 60)
