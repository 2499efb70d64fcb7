import numpy as np

from game.constants import CellState, MIN_BOARD_SIZE, Side, piece_of
from game.isopath_position import number_of_cells


class IsopathBoard:
    # The board is a flat array of cell states in row-major reading order.
    #
    # 37-cell board (n = 4), initial layout
    #          °  °  °  °
    #        -  -  -  -  -
    #     -  -  -  -  -  -
    #   -  -  -  -  -  -  -
    #     -  -  -  -  -  -
    #        -  -  -  -  -
    #          .  .  .  .
    #
    # The climbing side ('°') starts on the top row, the trench side ('.')
    # on the bottom row. Every other cell starts empty at neutral elevation.
    #
    # The array never changes shape; moves only change cell state values.

    def __init__(self, n=4, clone=None):
        """Initialize an Iso-Path board.

        Args:
            n: Board size (edge length of the hexagon), at least 2
            clone: IsopathBoard instance to clone from
        """
        if clone is not None:
            self.n = clone.n
            self.state = np.copy(clone.state)
            return

        if n < MIN_BOARD_SIZE:
            raise ValueError(
                f"Unsupported board size: {n}. Board size must be at least {MIN_BOARD_SIZE}."
            )
        self.n = n
        self.state = np.full(number_of_cells(n), CellState.EMPTY_NEUTRAL, dtype=np.int8)

        # The top row is rows[0] = cells 0..n-1, the bottom row is the last n cells
        self.state[:n] = piece_of(Side.CLIMB)
        self.state[-n:] = piece_of(Side.TRENCH)

    @property
    def num_cells(self):
        return len(self.state)

    def __len__(self):
        return len(self.state)

    def __getitem__(self, index):
        return CellState(int(self.state[index]))

    def __setitem__(self, index, value):
        self.state[index] = value

    def get(self, index):
        return self[index]

    def set(self, index, value):
        self[index] = value

    def __eq__(self, other):
        if not isinstance(other, IsopathBoard):
            return NotImplemented
        return self.n == other.n and np.array_equal(self.state, other.state)

    def __hash__(self):
        return hash((self.n, self.state.tobytes()))

    def __repr__(self):
        return f"IsopathBoard(n={self.n}, cells={self.state.tolist()})"

    def copy(self):
        return IsopathBoard(clone=self)

    def count(self, cell_state):
        """Number of cells currently in ``cell_state``."""
        return int(np.count_nonzero(self.state == cell_state))

    def cells_with(self, *cell_states):
        """Indices of all cells whose state is one of ``cell_states``."""
        return np.flatnonzero(np.isin(self.state, cell_states))

    def piece_count(self, side):
        return self.count(piece_of(side))
