"""Tests for player specification parsing."""

import pytest
import sys
from pathlib import Path

sys.path.insert(0, str(Path(__file__).parent.parent))

from game.player_config import PlayerConfig, parse_player_spec
from game.players import LinearStrategy


class TestParsePlayerSpec:

    def test_random(self):
        config = parse_player_spec("random")
        assert config.player_type == "random"
        assert config.name is None

    def test_linear_defaults(self):
        config = parse_player_spec("linear")
        assert config.player_type == "linear"
        assert config.strategy() == LinearStrategy()

    def test_linear_with_params(self):
        config = parse_player_spec("linear:win=500,threat=2,min=0.5,sum=0,name=Alice")
        assert config.winning_coefficient == 500.0
        assert config.threat_coefficient == 2.0
        assert config.min_distance_coefficient == 0.5
        assert config.sum_distance_coefficient == 0.0
        assert config.name == "Alice"

    def test_case_and_whitespace(self):
        config = parse_player_spec("Random: name = Bob ")
        assert config.player_type == "random"
        assert config.name == "Bob"

    @pytest.mark.parametrize(
        "spec",
        [
            "human",
            "mcts:iterations=10",
            "linear:win",
            "linear:depth=3",
            "random:win=5",
            "linear:win=abc",
        ],
    )
    def test_invalid_specs(self, spec):
        with pytest.raises(ValueError):
            parse_player_spec(spec)


def test_factory_methods():
    assert PlayerConfig.random(name="R").player_type == "random"
    linear = PlayerConfig.linear(threat=3.0)
    assert linear.strategy().threat_coefficient == 3.0
    assert linear.strategy().winning_coefficient == LinearStrategy().winning_coefficient
