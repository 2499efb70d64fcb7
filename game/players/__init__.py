"""Players."""

from .isopath_player import IsopathPlayer, PLAYER_SIDES
from .linear_isopath_player import LinearIsopathPlayer, LinearStrategy
from .random_isopath_player import RandomIsopathPlayer

__all__ = ["IsopathPlayer", "PLAYER_SIDES", "LinearIsopathPlayer", "LinearStrategy", "RandomIsopathPlayer"]
