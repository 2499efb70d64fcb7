"""Controller module for Iso-Path.

Contains the game controller, session, loop and logger.
"""

from controller.isopath_game_controller import IsopathGameController

__all__ = ["IsopathGameController"]
