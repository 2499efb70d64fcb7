"""Factory helpers for constructing Iso-Path game components."""

from __future__ import annotations

from typing import TextIO

from controller.isopath_game_controller import IsopathGameController
from game.constants import DEFAULT_BOARD_SIZE, DEFAULT_MAX_TURNS
from game.player_config import PlayerConfig
from renderer.text_renderer import TextRenderer
from shared.interfaces import IRenderer


class IsopathFactory:
    """Centralised factory for assembling IsopathGameController instances."""

    def __init__(self, text_stream: TextIO | None = None):
        self._text_stream = text_stream

    def create_controller(
        self,
        *,
        n: int = DEFAULT_BOARD_SIZE,
        seed: int | None = None,
        max_turns: int | None = DEFAULT_MAX_TURNS,
        log_to_screen: bool = False,
        log_notation_to_screen: bool = False,
        headless: bool = False,
        max_games: int | None = None,
        track_statistics: bool = False,
        player1_config: PlayerConfig | None = None,
        player2_config: PlayerConfig | None = None,
    ) -> IsopathGameController:
        """Create a fully-wired IsopathGameController with the text renderer."""

        def renderer_factory(controller: IsopathGameController) -> IRenderer | None:
            if headless:
                return None
            return TextRenderer(stream=self._text_stream)

        return IsopathGameController(
            n=n,
            seed=seed,
            max_turns=max_turns,
            log_to_screen=log_to_screen,
            log_notation_to_screen=log_notation_to_screen,
            max_games=max_games,
            renderer_or_factory=renderer_factory,
            player1_config=player1_config,
            player2_config=player2_config,
            track_statistics=track_statistics,
            stream=self._text_stream,
        )
