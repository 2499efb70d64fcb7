from __future__ import annotations

from game.isopath_game import IsopathGame
from game.constants import Side

# Player 1 plays the climbing side (top row, moves first), player 2 the trench side
PLAYER_SIDES = {1: Side.CLIMB, 2: Side.TRENCH}


class IsopathPlayer:
    """Base player with shared state and lifecycle hooks."""

    def __init__(self, game: IsopathGame, n):
        self.game = game
        self.n = n
        self.side = PLAYER_SIDES[n]
        self.name = f"Player {n}"
        self.captured = 0

    def get_action(self):
        """Choose an action for the side to move.

        Raises:
            RuntimeError: If the side to move has no legal action
        """
        raise NotImplementedError

    def get_last_action_scores(self):
        """Get scores for all legal actions considered in the last decision.

        Returns:
            Dict mapping Action to score
        """
        raise NotImplementedError

    def add_capture(self):
        self.captured += 1

    def _no_actions(self):
        return RuntimeError(
            f"No valid actions for {self.name} ({self.side.name.lower()}) on turn {self.game.turn_count + 1}"
        )
