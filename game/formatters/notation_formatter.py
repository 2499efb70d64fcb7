"""Iso-Path action notation formatter.

Converts between actions and a compact text notation built from cell
labels (row letter + 1-based column, ``a1`` is the top-left cell):

    - Build:   B[src]-[dst]     e.g. "Bc3-b2"
    - Step:    S[src]-[dst]     e.g. "Sa1-b2"
    - Capture: x[dst]           e.g. "xd4"
    - Action:  [move],[move]    e.g. "Bc3-b2,Sa1-b2"
"""

import re

from game.isopath_action import Action, Move, MoveType

_MOVE_RE = re.compile(r"^(?:(?P<kind>[BbSs])(?P<src>[a-zA-Z]\d+)-(?P<dst>[a-zA-Z]\d+)|[xX](?P<cap>[a-zA-Z]\d+))$")


class NotationFormatter:
    """Converts moves and actions to/from Iso-Path notation."""

    def __init__(self, positions):
        """Args:
            positions: IsopathPositionCollection used to resolve cell labels
        """
        self.positions = positions

    def _label(self, index: int) -> str:
        return self.positions[index].label

    def move_to_notation(self, move: Move) -> str:
        if move.type == MoveType.CAPTURE:
            return f"x{self._label(move.dst)}"
        return f"{move.type.value}{self._label(move.src)}-{self._label(move.dst)}"

    def action_to_notation(self, action: Action) -> str:
        return ",".join(self.move_to_notation(move) for move in action.moves)

    def notation_to_move(self, notation: str) -> Move:
        """Parse a single move.

        Raises:
            ValueError: If the notation is malformed or names a cell not on the board
        """
        match = _MOVE_RE.match(notation.strip())
        if match is None:
            raise ValueError(f"Invalid move notation: '{notation}'")
        if match.group("cap"):
            return Move.capture(self.positions.index_for_label(match.group("cap")))
        src = self.positions.index_for_label(match.group("src"))
        dst = self.positions.index_for_label(match.group("dst"))
        if match.group("kind").upper() == MoveType.BUILD.value:
            return Move.build(src, dst)
        return Move.step(src, dst)

    def notation_to_action(self, notation: str) -> Action:
        """Parse a two-move action such as "Bc3-b2,Sa1-b2"."""
        parts = [part for part in notation.split(",") if part.strip()]
        if len(parts) != 2:
            raise ValueError(f"Invalid action notation: '{notation}' (expected two moves)")
        return Action.of(self.notation_to_move(parts[0]), self.notation_to_move(parts[1]))
