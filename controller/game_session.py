"""Game session management for Iso-Path.

Manages a single game's lifecycle including board state, players, and seed management.
"""

import hashlib
import random
import time
from typing import Callable

import numpy as np

from game.constants import DEFAULT_BOARD_SIZE, DEFAULT_MAX_TURNS, MIN_BOARD_SIZE, Side
from game.isopath_game import IsopathGame
from game.player_config import PlayerConfig
from game.players import LinearIsopathPlayer, RandomIsopathPlayer


class GameSession:
    """Manages a single game's lifecycle (board state, players, current game)."""

    def __init__(
        self,
        n=DEFAULT_BOARD_SIZE,
        seed=None,
        max_turns=DEFAULT_MAX_TURNS,
        status_reporter: Callable[[str], None] | None = None,
        player1_config: PlayerConfig | None = None,
        player2_config: PlayerConfig | None = None,
    ):
        """Initialize a game session.

        Args:
            n: Board size (edge length of the hexagon)
            seed: Random seed for reproducibility (auto-generated if None)
            max_turns: Committed actions after which a game is a tie (None = unlimited)
            status_reporter: Callback for status messages (default: print)
            player1_config: Configuration for player 1, the climbing side (default: linear)
            player2_config: Configuration for player 2, the trench side (default: linear)
        """
        if n < MIN_BOARD_SIZE:
            raise ValueError(f"Unsupported board size: {n}. Board size must be at least {MIN_BOARD_SIZE}.")
        self.n = n
        self.max_turns = max_turns
        self._status_reporter: Callable[[str], None] | None = status_reporter

        self.player1_config = player1_config if player1_config is not None else PlayerConfig.linear()
        self.player2_config = player2_config if player2_config is not None else PlayerConfig.linear()

        if seed is None:
            seed = int(time.time())
        self.current_seed = seed
        self._apply_seed(seed)

        self.game = None
        self.player1 = None
        self.player2 = None
        self.games_played = 0

        self.reset_game()

    def _apply_seed(self, seed):
        """Apply a seed to both random number generators."""
        self._report(f"-- Setting Seed: {seed}")
        np.random.seed(seed)
        random.seed(seed)

    def _generate_next_seed(self):
        """Generate the next seed deterministically from the current seed using hash.

        Returns:
            int: New seed value
        """
        hash_obj = hashlib.sha256(str(self.current_seed).encode())
        new_seed = int.from_bytes(hash_obj.digest()[:8], byteorder="big")
        # Keep it in the range NumPy accepts
        return new_seed % (2**32)

    def _create_player_from_config(self, player_num: int, config: PlayerConfig):
        """Create a player from a PlayerConfig.

        Args:
            player_num: Player number (1 = climbing side, 2 = trench side)
            config: PlayerConfig describing player type and parameters

        Returns:
            IsopathPlayer: Configured player instance
        """
        if config.player_type == "random":
            player = RandomIsopathPlayer(self.game, player_num)
        elif config.player_type == "linear":
            player = LinearIsopathPlayer(self.game, player_num, strategy=config.strategy())
        else:
            raise ValueError(f"Unknown player type: {config.player_type}")

        if config.name is not None:
            player.name = config.name
        return player

    def reset_game(self):
        """Reset the game state for a new game.

        This creates a new game instance and players. Every game after the
        first gets a new seed derived from the previous one.
        """
        self._report("** New game **")

        if self.game is not None:
            self.current_seed = self._generate_next_seed()
            self._apply_seed(self.current_seed)

        self.game = IsopathGame(self.n, max_turns=self.max_turns)
        self.player1 = self._create_player_from_config(1, self.player1_config)
        self.player2 = self._create_player_from_config(2, self.player2_config)

    def get_current_player(self):
        """Get the player whose side is to move."""
        return self.player1 if self.game.get_cur_side() == Side.CLIMB else self.player2

    def get_player_for_side(self, side):
        return self.player1 if side == Side.CLIMB else self.player2

    def increment_games_played(self):
        self.games_played += 1

    def get_seed(self):
        return self.current_seed

    def get_games_played(self):
        return self.games_played

    def set_status_reporter(self, reporter: Callable[[str], None] | None) -> None:
        """Set or update the status reporter callback."""
        self._status_reporter = reporter

    def _report(self, message: str | None) -> None:
        if message is None:
            return
        if self._status_reporter is not None:
            self._status_reporter(message)
        else:
            print(message)
