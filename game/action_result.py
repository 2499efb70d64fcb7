"""Action result value object for game actions.

This class encapsulates the result of committing an action, so that the
controller and writers do not need to inspect the board before and after.
"""


class ActionResult:
    """Encapsulates the result of a committed action.

    Attributes:
        side: The side that played the action
        action: The committed Action
        captured: Index of the cell whose opposing piece was captured, or None
        turn: Number of the turn (1-based) this action completed
    """

    def __init__(self, side, action, captured=None, turn=0):
        self.side = side
        self.action = action
        self.captured = captured
        self.turn = turn

    def __repr__(self):
        return f"ActionResult(side={self.side.name}, turn={self.turn}, captured={self.captured})"

    def has_captures(self):
        """Check if this action removed an opposing piece.

        Returns:
            bool: True if a piece was captured
        """
        return self.captured is not None
