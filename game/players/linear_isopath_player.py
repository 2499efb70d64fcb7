"""One-ply player scoring each legal action with a linear evaluation."""

from __future__ import annotations

import logging
from dataclasses import dataclass

from game.constants import NO_PIECE_DISTANCE, Side, opponent, piece_of
from game.isopath_game import IsopathGame
from game.isopath_logic import threatened_pieces, won_by
from game.players.isopath_player import IsopathPlayer

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class LinearStrategy:
    """Weights of the board evaluation.

    Attributes:
        winning_coefficient: Bonus when a side has won
        threat_coefficient: Penalty per piece the opponent could capture
        min_distance_coefficient: Penalty per row between the closest piece and its target row
        sum_distance_coefficient: Penalty per row summed over all pieces
    """

    winning_coefficient: float = 1000.0
    threat_coefficient: float = 1.0
    min_distance_coefficient: float = 1.0
    sum_distance_coefficient: float = 0.25


def target_row(game: IsopathGame, side: Side) -> int:
    """Row ``side`` is racing towards: the opponent's home row."""
    return 0 if side == Side.TRENCH else 2 * game.n - 2


def piece_distances(game: IsopathGame, side: Side):
    """Return (min, sum) of row distances from ``side``'s pieces to its target row."""
    target = target_row(game, side)
    distances = [
        abs(target - game.positions[int(i)].row_number)
        for i in game.board.cells_with(piece_of(side))
    ]
    if not distances:
        return NO_PIECE_DISTANCE, 0
    return min(distances), sum(distances)


def evaluate_side(game: IsopathGame, strategy: LinearStrategy, side: Side) -> float:
    result = 0.0
    if won_by(game.board, game.positions, side):
        result += strategy.winning_coefficient
    min_distance, sum_distance = piece_distances(game, side)
    result -= strategy.min_distance_coefficient * min_distance
    result -= strategy.sum_distance_coefficient * sum_distance
    if strategy.threat_coefficient:
        result -= strategy.threat_coefficient * threatened_pieces(game.board, game.positions, side)
    return result


def evaluate_board(game: IsopathGame, strategy: LinearStrategy, side: Side) -> float:
    """Goodness of the current board from ``side``'s point of view."""
    return evaluate_side(game, strategy, side) - evaluate_side(game, strategy, opponent(side))


class LinearIsopathPlayer(IsopathPlayer):
    """Picks the action with the best evaluation after playing it.

    Ties keep the action enumerated first.
    """

    def __init__(self, game: IsopathGame, n, strategy: LinearStrategy | None = None):
        super().__init__(game, n)
        self.strategy = strategy if strategy is not None else LinearStrategy()
        self.name = f"Linear {n}"
        self._last_scores = {}

    def score_action(self, action) -> float:
        """Apply ``action`` in place, evaluate, and revert."""
        side = self.game.side_to_move
        with self.game.applied_action(action, side):
            return evaluate_board(self.game, self.strategy, side)

    def get_action(self):
        best_action = None
        best_score = None
        scores = {}
        for action in self.game.enumerate_actions():
            score = self.score_action(action)
            scores[action] = score
            if best_score is None or score > best_score:
                best_action, best_score = action, score
        self._last_scores = scores

        if best_action is None:
            raise self._no_actions()
        logger.debug(
            "%s chose %r (score %.3f) out of %d actions", self.name, best_action, best_score, len(scores)
        )
        return best_action

    def get_last_action_scores(self):
        """Scores of every action considered in the last decision."""
        return dict(self._last_scores)
