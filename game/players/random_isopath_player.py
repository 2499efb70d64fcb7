from __future__ import annotations

import numpy as np

from game.isopath_game import IsopathGame
from game.players.isopath_player import IsopathPlayer


class RandomIsopathPlayer(IsopathPlayer):

    def __init__(self, game: IsopathGame, n):
        super().__init__(game, n)
        self.name = f"Random {n}"
        self._last_actions = []

    def get_action(self):
        """Select a uniformly random legal action.

        Uses the global NumPy RNG, which the game session seeds.
        """
        self._last_actions = list(self.game.enumerate_actions())
        if not self._last_actions:
            raise self._no_actions()
        ip = np.random.randint(len(self._last_actions))
        return self._last_actions[ip]

    def get_last_action_scores(self):
        """Random player treats all actions equally (uniform scores)."""
        return {action: 1.0 for action in self._last_actions}
