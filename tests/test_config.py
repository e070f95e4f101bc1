import dataclasses

import pytest

from retro_pong.config import BallConfig, CanvasConfig, ComputerConfig, Config, ConfigError, GameConfig, PaddleConfig


def test_defaults_match_table(config):
    assert (config.canvas.width, config.canvas.height) == (500, 700)
    assert config.ball.trajectory_multiplier == 0.3
    assert config.game.winning_score == 5
    assert config.particles.count == 8
    assert config.particles.max_life == 30


def test_derived_geometry(config):
    assert config.center == (250, 350)
    assert config.player_paddle_y == 680
    assert config.computer_paddle_y == 10
    assert config.paddle_home_x == 225


def test_config_is_frozen(config):
    with pytest.raises(dataclasses.FrozenInstanceError):
        config.canvas = CanvasConfig(width=10)


def test_with_overrides_replaces_sections(config):
    small = config.with_overrides(game=GameConfig(winning_score=1))
    assert small.game.winning_score == 1
    assert small.canvas == config.canvas
    assert config.game.winning_score == 5


@pytest.mark.parametrize("kwargs", [
    {"canvas": CanvasConfig(width=0)},
    {"paddle": PaddleConfig(width=600)},
    {"ball": BallConfig(initial_speed_y=6, max_speed_y=5)},
    {"ball": BallConfig(radius=0)},
    {"computer": ComputerConfig(initial_speed=7, max_speed=6)},
    {"computer": ComputerConfig(error_margin=-1)},
    {"game": GameConfig(winning_score=0)},
])
def test_invalid_tables_are_rejected(kwargs):
    with pytest.raises(ConfigError):
        Config(**kwargs)


def test_config_error_is_value_error():
    assert issubclass(ConfigError, ValueError)
