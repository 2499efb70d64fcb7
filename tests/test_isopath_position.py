"""Tests for canonical positions: row layout, neighbors, teleport corners,
location flags and cell labels."""

import pytest
import sys
from pathlib import Path

sys.path.insert(0, str(Path(__file__).parent.parent))

from game.constants import AdjFlag, LocFlag
from game.isopath_position import (
    IsopathPositionCollection,
    number_of_cells,
    position_of,
    row_widths,
)


@pytest.fixture
def positions():
    return IsopathPositionCollection(4)


# Neighbor sets on the 37-cell board
EXPECTED_NEIGHBORS_N4 = {
    0: {1, 3, 4, 5}, 1: {0, 2, 5, 6}, 2: {1, 3, 6, 7}, 3: {0, 2, 7, 8},
    4: {0, 5, 9, 10}, 5: {0, 1, 4, 6, 10, 11}, 6: {1, 2, 5, 7, 11, 12},
    7: {2, 3, 6, 8, 12, 13}, 8: {3, 7, 13, 14},
    9: {4, 10, 15, 16}, 10: {4, 5, 9, 11, 16, 17}, 11: {5, 6, 10, 12, 17, 18},
    12: {6, 7, 11, 13, 18, 19}, 13: {7, 8, 12, 14, 19, 20}, 14: {8, 13, 20, 21},
    15: {9, 16, 21, 22}, 16: {9, 10, 15, 17, 22, 23}, 17: {10, 11, 16, 18, 23, 24},
    18: {11, 12, 17, 19, 24, 25}, 19: {12, 13, 18, 20, 25, 26},
    20: {13, 14, 19, 21, 26, 27}, 21: {14, 15, 20, 27},
    22: {15, 16, 23, 28}, 23: {16, 17, 22, 24, 28, 29}, 24: {17, 18, 23, 25, 29, 30},
    25: {18, 19, 24, 26, 30, 31}, 26: {19, 20, 25, 27, 31, 32}, 27: {20, 21, 26, 32},
    28: {22, 23, 29, 33}, 29: {23, 24, 28, 30, 33, 34}, 30: {24, 25, 29, 31, 34, 35},
    31: {25, 26, 30, 32, 35, 36}, 32: {26, 27, 31, 36},
    33: {28, 29, 34, 36}, 34: {29, 30, 33, 35}, 35: {30, 31, 34, 36}, 36: {31, 32, 33, 35},
}

T, B, L, R = LocFlag.TOP, LocFlag.BOTTOM, LocFlag.LEFT, LocFlag.RIGHT
N, E, S, X = LocFlag.NORTH, LocFlag.EQUATOR, LocFlag.SOUTH, LocFlag.TELEPORT
UL, UR, AL, AR = AdjFlag.TOP_LEFT, AdjFlag.TOP_RIGHT, AdjFlag.LEFT, AdjFlag.RIGHT
DL, DR, ALL = AdjFlag.BOTTOM_LEFT, AdjFlag.BOTTOM_RIGHT, AdjFlag.ALL

# (location flags without the home-base bits, direction flags) on the 37-cell board
EXPECTED_FLAGS_N4 = {
    0: (T | L | N | X, AR | DL | DR),
    1: (T | N, AL | AR | DL | DR),
    2: (T | N, AL | AR | DL | DR),
    3: (T | R | N | X, AL | DL | DR),
    4: (L | N, UR | AR | DL | DR),
    5: (N, ALL),
    6: (N, ALL),
    7: (N, ALL),
    8: (R | N, UL | AL | DL | DR),
    9: (L | N, UR | AR | DL | DR),
    10: (N, ALL),
    11: (N, ALL),
    12: (N, ALL),
    13: (N, ALL),
    14: (R | N, UL | AL | DL | DR),
    15: (L | E | X, UR | AR | DR),
    16: (E, ALL),
    17: (E, ALL),
    18: (E, ALL),
    19: (E, ALL),
    20: (E, ALL),
    21: (R | E | X, UL | AL | DL),
    22: (L | S, UL | UR | AR | DR),
    23: (S, ALL),
    24: (S, ALL),
    25: (S, ALL),
    26: (S, ALL),
    27: (R | S, UL | UR | AL | DL),
    28: (L | S, UL | UR | AR | DR),
    29: (S, ALL),
    30: (S, ALL),
    31: (S, ALL),
    32: (R | S, UL | UR | AL | DL),
    33: (B | L | S | X, UL | UR | AR),
    34: (B | S, UL | UR | AL | AR),
    35: (B | S, UL | UR | AL | AR),
    36: (B | R | S | X, UL | UR | AL),
}

BASE_FLAGS = LocFlag.CLIMB_BASE | LocFlag.TRENCH_BASE


class TestBoardShape:

    @pytest.mark.parametrize("n,cells", [(2, 7), (3, 19), (4, 37), (5, 61)])
    def test_number_of_cells(self, n, cells):
        assert number_of_cells(n) == cells
        assert len(IsopathPositionCollection(n)) == cells

    def test_row_widths(self):
        assert row_widths(4) == (4, 5, 6, 7, 6, 5, 4)
        assert row_widths(2) == (2, 3, 2)

    def test_row_and_column(self, positions):
        assert (positions[0].row_number, positions[0].col_number) == (0, 0)
        assert (positions[18].row_number, positions[18].col_number) == (3, 3)
        assert (positions[36].row_number, positions[36].col_number) == (6, 3)
        assert positions[18].row_width == 7

    def test_row_indices(self, positions):
        assert list(positions.row_indices(0)) == [0, 1, 2, 3]
        assert list(positions.row_indices(3)) == list(range(15, 22))
        assert list(positions.row_indices(6)) == [33, 34, 35, 36]
        assert positions.row_start(5) == 28


class TestNeighbors:

    def test_table_covers_every_cell(self, positions):
        assert sorted(EXPECTED_NEIGHBORS_N4) == list(range(len(positions)))
        assert sorted(EXPECTED_FLAGS_N4) == list(range(len(positions)))

    @pytest.mark.parametrize("index", sorted(EXPECTED_NEIGHBORS_N4))
    def test_known_neighbors(self, positions, index):
        assert positions.neighbors(index) == tuple(sorted(EXPECTED_NEIGHBORS_N4[index]))

    @pytest.mark.parametrize("index", sorted(EXPECTED_FLAGS_N4))
    def test_known_flags(self, positions, index):
        loc_flags, adj_flags = EXPECTED_FLAGS_N4[index]
        assert positions[index].loc_flags & ~BASE_FLAGS == loc_flags
        assert positions[index].adj_flags == adj_flags

    def test_neighbors_are_sorted_and_unique(self, positions):
        for pos in positions:
            assert list(pos.neighbors) == sorted(set(pos.neighbors))

    @pytest.mark.parametrize("n", [2, 3, 4, 5, 6])
    def test_adjacency_is_symmetric(self, n):
        collection = IsopathPositionCollection(n)
        for pos in collection:
            assert pos.tile_index not in pos.neighbors
            for other in pos.neighbors:
                assert collection.are_adjacent(other, pos.tile_index)

    # n = 2 is left out: its top and bottom corners have three neighbors, see
    # test_smallest_board_teleport_coincides
    @pytest.mark.parametrize("n", [3, 4, 5, 6])
    def test_degree_classes(self, n):
        collection = IsopathPositionCollection(n)
        corners = [pos for pos in collection if pos.is_corner]
        edges = [pos for pos in collection if pos.is_edge]
        interior = [pos for pos in collection if not pos.is_edge]

        assert len(corners) == 6
        assert len(edges) == 6 * (n - 1)
        assert all(pos.adjacent_count == 4 for pos in edges)
        assert all(pos.adjacent_count == 6 for pos in interior)

    def test_smallest_board_teleport_coincides(self):
        collection = IsopathPositionCollection(2)
        # The top row has two cells, so the teleport link is the plain right neighbor
        assert collection[0].teleport == 1
        assert collection.neighbors(0) == (1, 2, 3)
        assert collection.neighbors(3) == (0, 1, 2, 4, 5, 6)

    def test_teleport_corners(self, positions):
        corner_pairs = [(0, 3), (15, 21), (33, 36)]
        for left, right in corner_pairs:
            assert positions[left].teleport == right
            assert positions[right].teleport == left
            assert positions.are_adjacent(left, right)
        assert positions[9].teleport is None
        assert not positions.are_adjacent(9, 14)


class TestFlags:

    def test_top_left_corner(self, positions):
        pos = positions[0]
        assert pos.loc_flags == (
            LocFlag.TOP | LocFlag.LEFT | LocFlag.NORTH | LocFlag.TELEPORT | LocFlag.CLIMB_BASE
        )
        assert pos.adj_flags == AdjFlag.RIGHT | AdjFlag.BOTTOM_LEFT | AdjFlag.BOTTOM_RIGHT

    def test_equator_left_corner(self, positions):
        pos = positions[15]
        assert pos.loc_flags == LocFlag.LEFT | LocFlag.EQUATOR | LocFlag.TELEPORT
        assert pos.adj_flags == AdjFlag.TOP_RIGHT | AdjFlag.RIGHT | AdjFlag.BOTTOM_RIGHT

    def test_bottom_right_corner(self, positions):
        pos = positions[36]
        assert pos.loc_flags == (
            LocFlag.BOTTOM | LocFlag.RIGHT | LocFlag.SOUTH | LocFlag.TELEPORT | LocFlag.TRENCH_BASE
        )
        assert pos.adj_flags == AdjFlag.TOP_LEFT | AdjFlag.TOP_RIGHT | AdjFlag.LEFT

    def test_center_has_all_directions(self, positions):
        assert positions[18].adj_flags == AdjFlag.ALL
        assert positions[18].has_flag(LocFlag.EQUATOR)
        assert not positions[18].is_edge

    def test_home_rows(self, positions):
        assert positions.cells_with_flag(LocFlag.CLIMB_BASE) == (0, 1, 2, 3)
        assert positions.cells_with_flag(LocFlag.TRENCH_BASE) == (33, 34, 35, 36)


class TestLabels:

    def test_labels(self, positions):
        assert positions[0].label == "a1"
        assert positions[18].label == "d4"
        assert positions[36].label == "g4"

    def test_index_for_label(self, positions):
        assert positions.index_for_label("c2") == 10
        assert positions.index_for_label("D7") == 21

    def test_unknown_label_raises(self, positions):
        assert positions.get_by_label("h1") is None
        with pytest.raises(ValueError):
            positions.index_for_label("a9")

    def test_rows_beyond_alphabet_have_no_label(self):
        collection = IsopathPositionCollection(14)
        assert collection[0].label == "a1"
        with pytest.raises(ValueError):
            collection[len(collection) - 1].label


class TestErrors:

    @pytest.mark.parametrize("index", [-1, 37, 100])
    def test_index_out_of_range(self, index):
        with pytest.raises(ValueError):
            position_of(index, 4)

    @pytest.mark.parametrize("n", [0, 1])
    def test_board_too_small(self, n):
        with pytest.raises(ValueError):
            position_of(0, n)
