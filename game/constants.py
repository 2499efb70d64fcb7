"""Game constants shared across modules.

This module contains cell states, sides, board location flags and outcome
constants used by the board, the stateless logic and the game session.
"""

from enum import IntEnum, IntFlag


class CellState(IntEnum):
    """State of a single cell: elevation when empty, owner when occupied."""

    EMPTY_NEUTRAL = 0
    EMPTY_TRENCH = 1
    EMPTY_CLIMB = 2
    PIECE_TRENCH = 3
    PIECE_CLIMB = 4


class Side(IntEnum):
    TRENCH = 0
    CLIMB = 1


class LocFlag(IntFlag):
    """Where a cell sits on the hexagon."""

    NONE = 0
    TOP = 1 << 0
    LEFT = 1 << 1
    RIGHT = 1 << 2
    BOTTOM = 1 << 3
    NORTH = 1 << 4
    EQUATOR = 1 << 5
    SOUTH = 1 << 6
    TELEPORT = 1 << 7
    CLIMB_BASE = 1 << 8
    TRENCH_BASE = 1 << 9


class AdjFlag(IntFlag):
    """Which plain neighbor directions exist for a cell."""

    NONE = 0
    TOP_LEFT = 1 << 0
    TOP_RIGHT = 1 << 1
    LEFT = 1 << 2
    RIGHT = 1 << 3
    BOTTOM_LEFT = 1 << 4
    BOTTOM_RIGHT = 1 << 5
    ALL = TOP_LEFT | TOP_RIGHT | LEFT | RIGHT | BOTTOM_LEFT | BOTTOM_RIGHT


# Board size (edge length of the hexagon)
MIN_BOARD_SIZE = 2
DEFAULT_BOARD_SIZE = 4

# Game outcome constants
CLIMB_WIN = 1
TRENCH_WIN = -1
TIE = 0

# Turn limit after which a game is declared a tie (None = unlimited)
DEFAULT_MAX_TURNS = 500

# Distance used by the strategy when a side has no pieces left
NO_PIECE_DISTANCE = 1000

# Board dump glyphs
CELL_GLYPHS = {
    CellState.EMPTY_NEUTRAL: "-",
    CellState.EMPTY_TRENCH: "_",
    CellState.EMPTY_CLIMB: "^",
    CellState.PIECE_TRENCH: ".",
    CellState.PIECE_CLIMB: "°",
}

SIDE_NAMES = {Side.TRENCH: "Trench", Side.CLIMB: "Climb"}


def opponent(side: Side) -> Side:
    return Side.CLIMB if side == Side.TRENCH else Side.TRENCH


def piece_of(side: Side) -> CellState:
    """Cell state of a cell holding one of ``side``'s pieces."""
    return CellState.PIECE_TRENCH if side == Side.TRENCH else CellState.PIECE_CLIMB


def empty_of(side: Side) -> CellState:
    """Empty cell at the elevation ``side``'s pieces stand on."""
    return CellState.EMPTY_TRENCH if side == Side.TRENCH else CellState.EMPTY_CLIMB


def home_base_of(side: Side) -> LocFlag:
    """Location flag of the row where ``side`` starts."""
    return LocFlag.TRENCH_BASE if side == Side.TRENCH else LocFlag.CLIMB_BASE


def outcome_for(side: Side) -> int:
    return CLIMB_WIN if side == Side.CLIMB else TRENCH_WIN
