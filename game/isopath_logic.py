"""Rules engine for Iso-Path.

Functions here take the board, the canonical position table and the side
whose move it is. Legality checks never change the board. ``apply_move`` and
``revert_move`` mutate the board in place and are exact inverses of each
other, provided they are called with the same side and in strict LIFO order:

    apply_move(board, side, first)
    apply_move(board, side, second)
    ...
    revert_move(board, side, second)
    revert_move(board, side, first)

``applied_move`` wraps a single apply/revert pair so the revert happens on
every exit path. The board is not copied for speculative checks.

Usage:
    positions = IsopathPositionCollection(4)
    board = IsopathBoard(4)
    for action in enumerate_actions(board, positions, Side.CLIMB):
        ...
"""

from __future__ import annotations

import logging
from contextlib import contextmanager
from typing import Iterable, Iterator, List

import numpy as np

from game.constants import (
    CellState,
    Side,
    empty_of,
    home_base_of,
    opponent,
    piece_of,
)
from game.isopath_action import (
    Action,
    FOLLOW_UP_MOVE_TYPES,
    Move,
    MoveType,
    OPENING_MOVE_TYPES,
)
from game.isopath_board import IsopathBoard
from game.isopath_position import IsopathPositionCollection

logger = logging.getLogger(__name__)

# Cells a terrain tile can be taken from, and the elevation they drop to
BUILD_SOURCES = (CellState.EMPTY_NEUTRAL, CellState.EMPTY_CLIMB)
# Cells a terrain tile can be put on, and the elevation they rise to
BUILD_TARGETS = (CellState.EMPTY_NEUTRAL, CellState.EMPTY_TRENCH)

_LOWERED = {
    CellState.EMPTY_CLIMB: CellState.EMPTY_NEUTRAL,
    CellState.EMPTY_NEUTRAL: CellState.EMPTY_TRENCH,
}
_RAISED = {
    CellState.EMPTY_TRENCH: CellState.EMPTY_NEUTRAL,
    CellState.EMPTY_NEUTRAL: CellState.EMPTY_CLIMB,
}

# Number of the mover's pieces that must flank an opposing piece to capture it
CAPTURE_FLANK_COUNT = 2


# ============================================================================
# SINGLE MOVES
# ============================================================================

def _on_board(board: IsopathBoard, index: int | None) -> bool:
    return index is not None and 0 <= index < board.num_cells


def is_surrounded(
    board: IsopathBoard,
    positions: IsopathPositionCollection,
    index: int,
    by_state: CellState,
) -> bool:
    """Check if at least two neighbors of ``index`` are in ``by_state``."""
    surrounded_by = 0
    for adjacent in positions.neighbors(index):
        if board.state[adjacent] == by_state:
            surrounded_by += 1
            if surrounded_by == CAPTURE_FLANK_COUNT:
                return True
    return False


def is_move_legal(
    board: IsopathBoard,
    positions: IsopathPositionCollection,
    side: Side,
    move: Move,
) -> bool:
    """Check whether ``side`` may play ``move`` on the current board."""
    if not _on_board(board, move.dst):
        return False
    state = board.state

    if move.type == MoveType.BUILD:
        if not _on_board(board, move.src) or move.src == move.dst:
            return False
        # Need a tile to take away, and room to put it without touching pieces
        return state[move.src] in BUILD_SOURCES and state[move.dst] in BUILD_TARGETS

    if move.type == MoveType.STEP:
        if not _on_board(board, move.src):
            return False
        if state[move.src] != piece_of(side):
            return False
        # Only onto an empty cell at the mover's own elevation
        if state[move.dst] != empty_of(side):
            return False
        return positions.are_adjacent(move.src, move.dst)

    if move.type == MoveType.CAPTURE:
        if state[move.dst] != piece_of(opponent(side)):
            return False
        return is_surrounded(board, positions, move.dst, piece_of(side))

    return False


def apply_move(board: IsopathBoard, side: Side, move: Move) -> None:
    """Play ``move`` for ``side`` in place. The move must be legal."""
    state = board.state
    if move.type == MoveType.BUILD:
        state[move.src] = _LOWERED[CellState(int(state[move.src]))]
        state[move.dst] = _RAISED[CellState(int(state[move.dst]))]
    elif move.type == MoveType.STEP:
        state[move.dst] = piece_of(side)
        state[move.src] = empty_of(side)
    elif move.type == MoveType.CAPTURE:
        state[move.dst] = empty_of(opponent(side))


def revert_move(board: IsopathBoard, side: Side, move: Move) -> None:
    """Undo the most recent ``apply_move`` of ``move`` by ``side``."""
    state = board.state
    if move.type == MoveType.BUILD:
        state[move.src] = _RAISED[CellState(int(state[move.src]))]
        state[move.dst] = _LOWERED[CellState(int(state[move.dst]))]
    elif move.type == MoveType.STEP:
        state[move.dst] = empty_of(side)
        state[move.src] = piece_of(side)
    elif move.type == MoveType.CAPTURE:
        state[move.dst] = piece_of(opponent(side))


@contextmanager
def applied_move(board: IsopathBoard, side: Side, move: Move) -> Iterator[IsopathBoard]:
    """Apply ``move`` for the duration of the ``with`` block."""
    apply_move(board, side, move)
    try:
        yield board
    finally:
        revert_move(board, side, move)


# ============================================================================
# ACTIONS
# ============================================================================

def is_action_legal(
    board: IsopathBoard,
    positions: IsopathPositionCollection,
    side: Side,
    action: Action,
) -> bool:
    """Check a full turn: the move kinds, the first move, then the second
    move on the board left by the first. The board is unchanged afterwards."""
    first, second = action.moves
    if first.type not in OPENING_MOVE_TYPES:
        return False
    if second.type not in FOLLOW_UP_MOVE_TYPES[first.type]:
        return False
    if not is_move_legal(board, positions, side, first):
        return False
    with applied_move(board, side, first):
        return is_move_legal(board, positions, side, second)


def perform_action(board: IsopathBoard, side: Side, action: Action) -> None:
    """Apply both moves of an already validated action."""
    for move in action.moves:
        apply_move(board, side, move)


def revert_action(board: IsopathBoard, side: Side, action: Action) -> None:
    for move in reversed(action.moves):
        revert_move(board, side, move)


@contextmanager
def applied_action(board: IsopathBoard, side: Side, action: Action) -> Iterator[IsopathBoard]:
    """Apply a whole action for the duration of the ``with`` block."""
    first, second = action.moves
    with applied_move(board, side, first):
        with applied_move(board, side, second):
            yield board


# ============================================================================
# ENUMERATION
# ============================================================================

def _candidate_moves(
    board: IsopathBoard,
    positions: IsopathPositionCollection,
    side: Side,
    move_type: MoveType,
) -> Iterator[Move]:
    """Yield candidate moves of one kind; callers filter them by legality."""
    if move_type == MoveType.CAPTURE:
        for index in board.cells_with(piece_of(opponent(side))):
            yield Move.capture(int(index))
    elif move_type == MoveType.BUILD:
        sources = board.cells_with(*BUILD_SOURCES)
        targets = board.cells_with(*BUILD_TARGETS)
        for src in sources:
            for dst in targets:
                yield Move.build(int(src), int(dst))
    elif move_type == MoveType.STEP:
        for src in board.cells_with(piece_of(side)):
            for dst in positions.neighbors(int(src)):
                yield Move.step(int(src), dst)


def iter_moves(
    board: IsopathBoard,
    positions: IsopathPositionCollection,
    side: Side,
    move_types: Iterable[MoveType],
) -> Iterator[Move]:
    """Lazily yield the legal single moves of the given kinds, captures
    first, then builds, then steps.

    The board must be in the same state each time the iterator is resumed.
    """
    wanted = set(move_types)
    for move_type in (MoveType.CAPTURE, MoveType.BUILD, MoveType.STEP):
        if move_type not in wanted:
            continue
        for move in _candidate_moves(board, positions, side, move_type):
            if is_move_legal(board, positions, side, move):
                yield move


def enumerate_moves(
    board: IsopathBoard,
    positions: IsopathPositionCollection,
    side: Side,
    move_types: Iterable[MoveType],
) -> List[Move]:
    return list(iter_moves(board, positions, side, move_types))


def enumerate_actions(
    board: IsopathBoard,
    positions: IsopathPositionCollection,
    side: Side,
) -> Iterator[Action]:
    """Lazily yield every legal action for ``side``.

    Each opening move stays applied while its continuations are generated
    one at a time, and is taken back off the board around every ``yield``.
    The board is therefore in its original state whenever the caller holds
    an action, and closing the iterator early leaves nothing applied.
    Every call starts a fresh enumeration. Callers may speculatively apply a
    yielded action but must revert it before asking for the next one.
    """
    for first in iter_moves(board, positions, side, OPENING_MOVE_TYPES):
        apply_move(board, side, first)
        try:
            for second in iter_moves(board, positions, side, FOLLOW_UP_MOVE_TYPES[first.type]):
                revert_move(board, side, first)
                try:
                    yield Action.of(first, second)
                finally:
                    apply_move(board, side, first)
        finally:
            revert_move(board, side, first)


def count_actions(board: IsopathBoard, positions: IsopathPositionCollection, side: Side) -> int:
    count = sum(1 for _ in enumerate_actions(board, positions, side))
    logger.debug("%s has %d legal actions", side.name, count)
    return count


# ============================================================================
# WIN DETECTION
# ============================================================================

def won_by(board: IsopathBoard, positions: IsopathPositionCollection, side: Side) -> bool:
    """Check if ``side`` has won.

    A side wins when one of its pieces stands on the opponent's home row,
    or when the opponent has no pieces left.
    """
    enemy_base = home_base_of(opponent(side))
    for index in board.cells_with(piece_of(side)):
        if positions[int(index)].loc_flags & enemy_base:
            return True
    return not np.any(board.state == piece_of(opponent(side)))


def threatened_pieces(board: IsopathBoard, positions: IsopathPositionCollection, side: Side) -> int:
    """Count ``side``'s pieces the opponent could capture right now."""
    enemy_piece = piece_of(opponent(side))
    return sum(
        1
        for index in board.cells_with(piece_of(side))
        if is_surrounded(board, positions, int(index), enemy_piece)
    )
