"""Moves and actions.

A turn (an ``Action``) is exactly two elementary moves:

    - BUILD(src, dst):  take a terrain tile from src (lowering it) and add it
                        to dst (raising it)
    - STEP(src, dst):   move one of the mover's pieces to an adjacent cell
    - CAPTURE(dst):     remove an opposing piece flanked by two of the
                        mover's pieces

The first move may only be a CAPTURE or a BUILD. A BUILD must be followed
by a STEP; a CAPTURE may be followed by a BUILD or a STEP.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Iterator, Tuple


class MoveType(Enum):
    BUILD = "B"
    STEP = "S"
    CAPTURE = "C"


# Which move kinds may open a turn, and which may follow each opening kind
OPENING_MOVE_TYPES = (MoveType.CAPTURE, MoveType.BUILD)
FOLLOW_UP_MOVE_TYPES = {
    MoveType.CAPTURE: (MoveType.BUILD, MoveType.STEP),
    MoveType.BUILD: (MoveType.STEP,),
    MoveType.STEP: (),
}


@dataclass(frozen=True)
class Move:
    type: MoveType
    dst: int
    src: int | None = None

    @classmethod
    def build(cls, src: int, dst: int) -> Move:
        return cls(MoveType.BUILD, dst=dst, src=src)

    @classmethod
    def step(cls, src: int, dst: int) -> Move:
        return cls(MoveType.STEP, dst=dst, src=src)

    @classmethod
    def capture(cls, dst: int) -> Move:
        return cls(MoveType.CAPTURE, dst=dst)

    def __repr__(self) -> str:
        if self.type == MoveType.CAPTURE:
            return f"Capture({self.dst})"
        return f"{self.type.name.capitalize()}({self.src}, {self.dst})"


@dataclass(frozen=True)
class Action:
    """One full turn: an ordered pair of moves."""

    moves: Tuple[Move, Move]

    def __post_init__(self) -> None:
        if len(self.moves) != 2:
            raise ValueError(f"An action consists of exactly two moves, got {len(self.moves)}")
        object.__setattr__(self, "moves", tuple(self.moves))

    @classmethod
    def of(cls, first: Move, second: Move) -> Action:
        return cls((first, second))

    @property
    def first(self) -> Move:
        return self.moves[0]

    @property
    def second(self) -> Move:
        return self.moves[1]

    def __iter__(self) -> Iterator[Move]:
        return iter(self.moves)

    def __repr__(self) -> str:
        return f"Action({self.moves[0]!r}, {self.moves[1]!r})"
