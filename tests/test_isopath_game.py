"""Tests for IsopathGame: turn order, committing and undoing actions,
game end detection and the turn limit."""

import pytest
import sys
from pathlib import Path

sys.path.insert(0, str(Path(__file__).parent.parent))

from game.constants import CLIMB_WIN, TIE, TRENCH_WIN, CellState, Side
from game.isopath_action import Action, Move
from game.isopath_board import IsopathBoard
from game.isopath_game import IsopathGame


@pytest.fixture
def game():
    return IsopathGame(4)


class TestTurns:

    def test_climb_moves_first(self, game):
        assert game.get_cur_side() == Side.CLIMB
        assert game.turn_count == 0

    def test_perform_action_passes_turn(self, game):
        action = Action.of(Move.build(10, 4), Move.step(0, 4))
        assert game.is_action_legal(action)
        result = game.perform_action(action)

        assert result.side == Side.CLIMB
        assert result.turn == 1
        assert not result.has_captures()
        assert game.get_cur_side() == Side.TRENCH
        assert game.board[4] == CellState.PIECE_CLIMB
        # The same action is now checked for the trench side
        assert not game.is_action_legal(action)

    def test_capture_is_reported(self, game):
        game.board[5] = CellState.PIECE_TRENCH
        result = game.perform_action(Action.of(Move.capture(5), Move.build(10, 11)))
        assert result.has_captures()
        assert result.captured == 5

    def test_undo_restores_board_and_side(self, game):
        for _ in range(6):
            game.perform_action(next(iter(game.enumerate_actions())))
        assert game.turn_count == 6
        while game.move_history:
            game.undo_action()
        assert game.board == IsopathBoard(4)
        assert game.get_cur_side() == Side.CLIMB

    def test_undo_without_history_raises(self, game):
        with pytest.raises(ValueError):
            game.undo_action()

    def test_copy_is_independent(self, game):
        clone = game.copy()
        clone.perform_action(next(iter(clone.enumerate_actions())))
        assert game.turn_count == 0
        assert game.board == IsopathBoard(4)
        assert clone.positions is game.positions

    def test_reset_board(self, game):
        game.perform_action(next(iter(game.enumerate_actions())))
        game.reset_board()
        assert game.board == IsopathBoard(4)
        assert game.turn_count == 0
        assert game.get_cur_side() == Side.CLIMB

    def test_has_valid_actions(self, game):
        assert game.has_valid_actions()

    def test_pieces_of(self, game):
        assert game.pieces_of(Side.CLIMB) == [0, 1, 2, 3]
        assert game.piece_count(Side.TRENCH) == 4


class TestGameEnd:

    def test_not_ended_initially(self, game):
        assert game.get_game_ended() is None
        assert game.get_game_end_reason() is None

    def test_climb_wins_by_reaching_bottom_row(self, game):
        game.board.state[:] = CellState.EMPTY_NEUTRAL
        game.board[34] = CellState.PIECE_CLIMB
        game.board[18] = CellState.PIECE_TRENCH
        game.side_to_move = Side.TRENCH
        assert game.get_game_ended() == CLIMB_WIN
        assert game.outcome_winner(CLIMB_WIN) == Side.CLIMB
        assert "row 6" in game.get_game_end_reason()

    def test_trench_wins_by_capturing_everything(self, game):
        game.board.state[:4] = CellState.EMPTY_CLIMB
        game.side_to_move = Side.CLIMB
        assert game.get_game_ended() == TRENCH_WIN
        assert "captured" in game.get_game_end_reason()

    def test_last_mover_is_checked_first(self, game):
        # Both sides stand on the opposing home row
        game.board[0] = CellState.PIECE_TRENCH
        game.board[36] = CellState.PIECE_CLIMB
        game.side_to_move = Side.TRENCH
        assert game.get_game_ended() == CLIMB_WIN
        game.side_to_move = Side.CLIMB
        assert game.get_game_ended() == TRENCH_WIN

    def test_turn_limit_is_a_tie(self):
        game = IsopathGame(4, max_turns=2)
        game.perform_action(Action.of(Move.build(10, 4), Move.step(0, 4)))
        assert game.get_game_ended() is None
        second = Action.of(Move.build(28, 18), Move.step(33, 28))
        assert game.is_action_legal(second)
        game.perform_action(second)
        assert game.get_game_ended() == TIE
        assert game.outcome_winner(TIE) is None
        assert "turn limit" in game.get_game_end_reason()
