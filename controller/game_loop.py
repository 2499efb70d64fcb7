"""Game loop orchestration for Iso-Path."""

from __future__ import annotations


class _LoopTask:
    """Internal task representation passed to `update_game`."""

    def __init__(self) -> None:
        self.done = object()
        self.again = object()


class GameLoop:
    """Drives the controller update cycle until it signals completion.

    Each tick plays at most one turn. The loop is synchronous and single-threaded.
    """

    def __init__(self, controller) -> None:
        self._controller = controller
        self.ticks = 0

    def run(self) -> None:
        """Run the game loop until the controller signals completion."""
        while not self._tick():
            pass

    def _tick(self) -> bool:
        task = _LoopTask()
        self.ticks += 1
        result = self._controller.update_game(task)
        return result is task.done
