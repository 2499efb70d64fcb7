"""Canonical positions for the cells of an Iso-Path board.

The board is a hexagon of ``3n² - 3n + 1`` cells stored row-major. Rows
``0..n-1`` grow from ``n`` to ``2n-1`` cells, rows ``n..2n-2`` shrink back
to ``n``::

    n = 4 (37 cells)
          a1  a2  a3  a4
        b1  b2  b3  b4  b5
      c1  c2  c3  c4  c5  c6
    d1  d2  d3  d4  d5  d6  d7      <- equator
      e1  e2  e3  e4  e5  e6
        f1  f2  f3  f4  f5
          g1  g2  g3  g4

The six corner cells additionally "teleport" to the opposite end of their
own row, so every corner has exactly four neighbors.
"""

from __future__ import annotations

import string
from dataclasses import dataclass, field
from typing import Iterator, Tuple

from game.constants import AdjFlag, LocFlag, MIN_BOARD_SIZE

ROW_LETTERS = string.ascii_lowercase


def number_of_cells(n: int) -> int:
    """Number of cells on a board of size ``n``."""
    return 3 * n * n - 3 * n + 1


def number_of_rows(n: int) -> int:
    return 2 * n - 1


def row_width(row: int, n: int) -> int:
    """Width of ``row``: ``n + row`` in the north, mirrored in the south."""
    if row < n:
        return n + row
    return n + (2 * n - 2 - row)


def row_widths(n: int) -> Tuple[int, ...]:
    return tuple(row_width(row, n) for row in range(number_of_rows(n)))


@dataclass(frozen=True)
class CanonicalPosition:
    """Resolved geometry of a single cell. Immutable once built."""

    tile_index: int
    n: int
    row_number: int
    col_number: int
    row_width: int
    loc_flags: LocFlag
    adj_flags: AdjFlag
    neighbors: Tuple[int, ...]
    teleport: int | None = None
    _label: str | None = field(default=None, init=False, repr=False, compare=False)

    @property
    def adjacent_count(self) -> int:
        return len(self.neighbors)

    @property
    def is_corner(self) -> bool:
        return bool(self.loc_flags & LocFlag.TELEPORT)

    @property
    def is_edge(self) -> bool:
        return bool(self.loc_flags & (LocFlag.TOP | LocFlag.BOTTOM | LocFlag.LEFT | LocFlag.RIGHT))

    def has_flag(self, flag: LocFlag) -> bool:
        return bool(self.loc_flags & flag)

    @property
    def label(self) -> str:
        if self._label is None:
            object.__setattr__(self, "_label", cell_label(self.row_number, self.col_number))
        return self._label  # type: ignore[return-value]

    def __repr__(self) -> str:
        return (
            f"CanonicalPosition({self.tile_index}, row={self.row_number}, "
            f"col={self.col_number}, neighbors={list(self.neighbors)})"
        )


def cell_label(row: int, col: int) -> str:
    if row >= len(ROW_LETTERS):
        raise ValueError(f"Row {row} has no label (boards with more than {len(ROW_LETTERS)} rows)")
    return f"{ROW_LETTERS[row]}{col + 1}"


def position_of(tile_index: int, n: int) -> CanonicalPosition:
    """Resolve a flat cell index to its canonical position on a board of size ``n``.

    Args:
        tile_index: Cell index in row-major reading order
        n: Board size (edge length of the hexagon), at least 2

    Returns:
        CanonicalPosition with row/column, location flags and sorted neighbors

    Raises:
        ValueError: If ``n`` is too small or the index is not on the board
    """
    if n < MIN_BOARD_SIZE:
        raise ValueError(f"Unsupported board size: {n}. Board size must be at least {MIN_BOARD_SIZE}.")
    if not 0 <= tile_index < number_of_cells(n):
        raise ValueError(f"Cell index {tile_index} is not on a board of size {n}")

    # Walk the cumulative row widths to find the row
    row, row_start = 0, 0
    width = row_width(0, n)
    while tile_index >= row_start + width:
        row_start += width
        row += 1
        width = row_width(row, n)
    col = tile_index - row_start

    equator = n - 1
    last_row = 2 * n - 2
    is_left = col == 0
    is_right = col == width - 1

    loc = LocFlag.NONE
    if row == 0:
        loc |= LocFlag.TOP | LocFlag.CLIMB_BASE
    if row == last_row:
        loc |= LocFlag.BOTTOM | LocFlag.TRENCH_BASE
    if is_left:
        loc |= LocFlag.LEFT
    if is_right:
        loc |= LocFlag.RIGHT
    if row < equator:
        loc |= LocFlag.NORTH
    elif row == equator:
        loc |= LocFlag.EQUATOR
    else:
        loc |= LocFlag.SOUTH

    i = tile_index
    adj = AdjFlag.NONE
    found = []

    # Upper neighbors: the row above is narrower down to the equator, wider below it
    if row > 0:
        if row <= equator:
            if not is_left:
                adj |= AdjFlag.TOP_LEFT
                found.append(i - width)
            if not is_right:
                adj |= AdjFlag.TOP_RIGHT
                found.append(i - width + 1)
        else:
            adj |= AdjFlag.TOP_LEFT | AdjFlag.TOP_RIGHT
            found.extend((i - width - 1, i - width))

    if not is_left:
        adj |= AdjFlag.LEFT
        found.append(i - 1)
    if not is_right:
        adj |= AdjFlag.RIGHT
        found.append(i + 1)

    # Lower neighbors: the row below is wider above the equator, narrower from it on
    if row < last_row:
        if row < equator:
            adj |= AdjFlag.BOTTOM_LEFT | AdjFlag.BOTTOM_RIGHT
            found.extend((i + width, i + width + 1))
        else:
            if not is_left:
                adj |= AdjFlag.BOTTOM_LEFT
                found.append(i + width - 1)
            if not is_right:
                adj |= AdjFlag.BOTTOM_RIGHT
                found.append(i + width)

    teleport = None
    if (is_left or is_right) and row in (0, equator, last_row):
        loc |= LocFlag.TELEPORT
        teleport = i + width - 1 if is_left else i - width + 1
        found.append(teleport)

    # On the smallest board the teleport link coincides with a plain neighbor
    neighbors = tuple(sorted(set(found)))

    return CanonicalPosition(
        tile_index=tile_index,
        n=n,
        row_number=row,
        col_number=col,
        row_width=width,
        loc_flags=loc,
        adj_flags=adj,
        neighbors=neighbors,
        teleport=teleport,
    )


class IsopathPositionCollection:
    """Canonical position table for one board size.

    Built once when the game session starts and never mutated afterwards.
    """

    def __init__(self, n: int) -> None:
        self.n = n
        self._positions: Tuple[CanonicalPosition, ...] = tuple(
            position_of(i, n) for i in range(number_of_cells(n))
        )
        self._row_starts: Tuple[int, ...] = self._build_row_starts()
        self._by_label: dict[str, CanonicalPosition] | None = None

    def _build_row_starts(self) -> Tuple[int, ...]:
        starts = []
        start = 0
        for width in row_widths(self.n):
            starts.append(start)
            start += width
        return tuple(starts)

    def __len__(self) -> int:
        return len(self._positions)

    def __getitem__(self, index: int) -> CanonicalPosition:
        return self._positions[index]

    def __iter__(self) -> Iterator[CanonicalPosition]:
        return iter(self._positions)

    @property
    def num_rows(self) -> int:
        return number_of_rows(self.n)

    def neighbors(self, index: int) -> Tuple[int, ...]:
        return self._positions[index].neighbors

    def are_adjacent(self, index1: int, index2: int) -> bool:
        return index2 in self._positions[index1].neighbors

    def row_start(self, row: int) -> int:
        return self._row_starts[row]

    def row_indices(self, row: int) -> range:
        start = self._row_starts[row]
        return range(start, start + row_width(row, self.n))

    def cells_with_flag(self, flag: LocFlag) -> Tuple[int, ...]:
        return tuple(pos.tile_index for pos in self._positions if pos.loc_flags & flag)

    def get_by_label(self, label: str) -> CanonicalPosition | None:
        if self._by_label is None:
            self._by_label = {pos.label: pos for pos in self._positions}
        return self._by_label.get(label.lower())

    def index_for_label(self, label: str) -> int:
        pos = self.get_by_label(label)
        if pos is None:
            raise ValueError(f"Coordinate '{label}' not found on a board of size {self.n}")
        return pos.tile_index
