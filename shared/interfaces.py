"""Shared protocol definitions."""

from __future__ import annotations

from typing import Protocol, Any, TYPE_CHECKING, runtime_checkable

if TYPE_CHECKING:  # pragma: no cover - used for type hints only
    from controller.isopath_game_controller import IsopathGameController


@runtime_checkable
class IRenderer(Protocol):
    """Protocol describing renderer capabilities required by the controller.

    Renderers only read the board and the position table; they never mutate them.
    """

    def run(self) -> None: ...

    def reset_board(self) -> None: ...

    def execute_action(
        self,
        player: Any,
        game: Any,
        action_result: Any,
        notation: str,
    ) -> None: ...

    def report_status(self, message: str) -> None: ...


@runtime_checkable
class IRendererFactory(Protocol):
    """Protocol for factories that produce renderers for a controller."""

    def __call__(self, controller: IsopathGameController) -> IRenderer: ...
