"""Player configuration system for Iso-Path."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Literal

from game.players.linear_isopath_player import LinearStrategy

PlayerType = Literal["random", "linear"]

PLAYER_TYPES = ("random", "linear")


@dataclass
class PlayerConfig:
    """Configuration for a single player.

    Attributes:
        player_type: Type of player ('random' or 'linear')
        winning_coefficient: Linear player bonus for a won board
        threat_coefficient: Linear player penalty per threatened piece
        min_distance_coefficient: Linear player penalty for the closest piece's distance
        sum_distance_coefficient: Linear player penalty for the summed distances
        name: Display name (None = default name for the player type)
    """

    player_type: PlayerType = "linear"

    # Linear strategy weights
    winning_coefficient: float = LinearStrategy.winning_coefficient
    threat_coefficient: float = LinearStrategy.threat_coefficient
    min_distance_coefficient: float = LinearStrategy.min_distance_coefficient
    sum_distance_coefficient: float = LinearStrategy.sum_distance_coefficient

    name: str | None = None

    @classmethod
    def random(cls, name: str | None = None) -> PlayerConfig:
        """Create a random player configuration."""
        return cls(player_type="random", name=name)

    @classmethod
    def linear(
        cls,
        *,
        winning: float = LinearStrategy.winning_coefficient,
        threat: float = LinearStrategy.threat_coefficient,
        min_distance: float = LinearStrategy.min_distance_coefficient,
        sum_distance: float = LinearStrategy.sum_distance_coefficient,
        name: str | None = None,
    ) -> PlayerConfig:
        """Create a linear (one-ply evaluation) player configuration."""
        return cls(
            player_type="linear",
            winning_coefficient=winning,
            threat_coefficient=threat,
            min_distance_coefficient=min_distance,
            sum_distance_coefficient=sum_distance,
            name=name,
        )

    def strategy(self) -> LinearStrategy:
        return LinearStrategy(
            winning_coefficient=self.winning_coefficient,
            threat_coefficient=self.threat_coefficient,
            min_distance_coefficient=self.min_distance_coefficient,
            sum_distance_coefficient=self.sum_distance_coefficient,
        )


def parse_player_spec(spec: str) -> PlayerConfig:
    """Parse a player specification string into a PlayerConfig.

    Format:
        TYPE[:PARAM=VALUE,PARAM=VALUE,...]

    Examples:
        "random" -> Random player
        "linear" -> Linear player with default weights
        "linear:win=500,min=2" -> Linear player with custom weights
        "random:name=Alice" -> Random player named Alice

    Supported parameters:
        - win (float): Winning coefficient (linear only)
        - threat (float): Threat coefficient (linear only)
        - min (float): Minimum distance coefficient (linear only)
        - sum (float): Summed distance coefficient (linear only)
        - name (str): Display name
    """
    parts = spec.split(":", 1)
    player_type = parts[0].strip().lower()

    if player_type not in PLAYER_TYPES:
        raise ValueError(f"Invalid player type: {player_type}. Must be 'random' or 'linear'")

    params = {}
    if len(parts) == 2:
        for param_pair in parts[1].split(","):
            param_pair = param_pair.strip()
            if not param_pair:
                continue
            if "=" not in param_pair:
                raise ValueError(f"Invalid parameter format: {param_pair}. Expected PARAM=VALUE")
            key, value = param_pair.split("=", 1)
            key = key.strip()
            value = value.strip()

            if key in ["win", "threat", "min", "sum"]:
                if player_type != "linear":
                    raise ValueError(f"Parameter '{key}' only applies to linear players")
                params[key] = float(value)
            elif key == "name":
                params[key] = value
            else:
                raise ValueError(f"Unknown parameter: {key}")

    if player_type == "random":
        return PlayerConfig.random(name=params.get("name"))
    defaults = LinearStrategy()
    return PlayerConfig.linear(
        winning=params.get("win", defaults.winning_coefficient),
        threat=params.get("threat", defaults.threat_coefficient),
        min_distance=params.get("min", defaults.min_distance_coefficient),
        sum_distance=params.get("sum", defaults.sum_distance_coefficient),
        name=params.get("name"),
    )
