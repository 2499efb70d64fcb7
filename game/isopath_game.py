import copy
import logging

from .isopath_board import IsopathBoard
from .isopath_position import IsopathPositionCollection
from .isopath_action import MoveType
from .action_result import ActionResult
from . import isopath_logic as logic
from .constants import (
    CLIMB_WIN,
    TRENCH_WIN,
    TIE,
    DEFAULT_BOARD_SIZE,
    Side,
    opponent,
    outcome_for,
    piece_of,
)

logger = logging.getLogger(__name__)


# The game owns the board and turn state; the rules live in the stateless isopath_logic module


class IsopathGame:
    def __init__(self, n=DEFAULT_BOARD_SIZE, max_turns=None, clone=None):
        """Create a game session.

        Args:
            n: Board size (edge length of the hexagon), at least 2
            max_turns: Number of committed actions after which the game is a tie (None = unlimited)
            clone: IsopathGame instance to copy
        """
        if clone is not None:
            self.n = clone.n
            self.max_turns = clone.max_turns
            # The position table is immutable and can be shared
            self.positions = clone.positions
            self.board = IsopathBoard(clone=clone.board)
            self.side_to_move = clone.side_to_move
            self.move_history = list(clone.move_history)
        else:
            self.n = n
            self.max_turns = max_turns
            self.board = IsopathBoard(n)
            # Canonical positions are resolved once for the whole session
            self.positions = IsopathPositionCollection(n)
            # The climbing side starts on the top row and moves first
            self.side_to_move = Side.CLIMB
            # Committed (side, action) pairs, oldest first
            self.move_history = []

    def __deepcopy__(self, memo):
        return IsopathGame(clone=self)

    def copy(self):
        return copy.deepcopy(self)

    def reset_board(self):
        self.board = IsopathBoard(self.n)
        self.side_to_move = Side.CLIMB
        self.move_history = []

    @property
    def turn_count(self):
        return len(self.move_history)

    def get_cur_side(self):
        return self.side_to_move

    def _side(self, side):
        return self.side_to_move if side is None else side

    #
    # Single moves (in-place, strict LIFO apply/revert)
    #
    def is_move_legal(self, move, side=None):
        return logic.is_move_legal(self.board, self.positions, self._side(side), move)

    def apply_move(self, move, side=None):
        logic.apply_move(self.board, self._side(side), move)

    def revert_move(self, move, side=None):
        logic.revert_move(self.board, self._side(side), move)

    def applied_move(self, move, side=None):
        return logic.applied_move(self.board, self._side(side), move)

    def applied_action(self, action, side=None):
        return logic.applied_action(self.board, self._side(side), action)

    #
    # Actions
    #
    def is_action_legal(self, action):
        return logic.is_action_legal(self.board, self.positions, self.side_to_move, action)

    def perform_action(self, action):
        """Commit an action for the side to move and pass the turn.

        The action must already have been checked with is_action_legal.

        Returns:
            ActionResult describing the committed action
        """
        side = self.side_to_move
        captured = None
        for move in action.moves:
            if move.type == MoveType.CAPTURE:
                captured = move.dst
        logic.perform_action(self.board, side, action)
        self.move_history.append((side, action))
        self.side_to_move = opponent(side)
        logger.debug("Turn %d: %s played %r", self.turn_count, side.name, action)
        return ActionResult(side, action, captured=captured, turn=self.turn_count)

    def undo_action(self):
        """Take back the last committed action.

        Returns:
            The (side, action) pair that was undone
        """
        if not self.move_history:
            raise ValueError("No action to undo")
        side, action = self.move_history.pop()
        logic.revert_action(self.board, side, action)
        self.side_to_move = side
        return side, action

    def enumerate_actions(self):
        """Lazily enumerate all legal actions for the side to move."""
        return logic.enumerate_actions(self.board, self.positions, self.side_to_move)

    def has_valid_actions(self):
        return next(iter(self.enumerate_actions()), None) is not None

    #
    # Game state
    #
    def won_by(self, side):
        return logic.won_by(self.board, self.positions, side)

    def piece_count(self, side):
        return self.board.piece_count(side)

    def pieces_of(self, side):
        return [int(i) for i in self.board.cells_with(piece_of(side))]

    def get_game_ended(self):
        """Return CLIMB_WIN, TRENCH_WIN or TIE when the game is over, else None.

        The side that moved last is checked first.
        """
        last_mover = opponent(self.side_to_move)
        for side in (last_mover, self.side_to_move):
            if self.won_by(side):
                return outcome_for(side)
        if self.max_turns is not None and self.turn_count >= self.max_turns:
            return TIE
        return None

    def get_game_end_reason(self):
        """Describe why the game ended, or None while it is still running."""
        outcome = self.get_game_ended()
        if outcome is None:
            return None
        if outcome == TIE:
            return f"turn limit of {self.max_turns} reached"
        winner = self.outcome_winner(outcome)
        loser = opponent(winner)
        if self.piece_count(loser) == 0:
            return f"all {loser.name.lower()} pieces captured"
        base_row = 0 if loser == Side.CLIMB else 2 * self.n - 2
        return f"{winner.name.lower()} piece reached row {base_row}"

    @staticmethod
    def outcome_winner(outcome):
        if outcome == CLIMB_WIN:
            return Side.CLIMB
        if outcome == TRENCH_WIN:
            return Side.TRENCH
        return None
