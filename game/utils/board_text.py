"""Plain-text board dump.

Rows are centred so the hexagon shape is visible::

       °  °  °  °
      -  -  -  -  -
    ...
"""

from typing import List

from game.constants import CELL_GLYPHS, CellState
from game.isopath_position import row_widths


def _row_to_text(board, row_start: int, width: int) -> str:
    missing_chars = (2 * board.n) - 1 - width
    indent = "   " * (missing_chars // 2)
    if missing_chars % 2 == 1:
        indent += " "
    cells = board.state[row_start:row_start + width]
    return indent + "".join(f"{CELL_GLYPHS[CellState(int(cell))]}  " for cell in cells).rstrip()


def board_to_lines(board) -> List[str]:
    """Render ``board`` as one text line per row, top row first."""
    lines = []
    row_start = 0
    for width in row_widths(board.n):
        lines.append(_row_to_text(board, row_start, width))
        row_start += width
    return lines


def board_to_text(board) -> str:
    return "\n".join(board_to_lines(board))
