"""Two-paddle Pong against a heuristic computer opponent, built on pygame."""

from .config import Config, ConfigError, DEFAULT_CONFIG
from .entities import Ball, Paddle, Particle, Side
from .game import Command, Game, GameState, Snapshot

__all__ = [
    "Ball",
    "Command",
    "Config",
    "ConfigError",
    "DEFAULT_CONFIG",
    "Game",
    "GameState",
    "Paddle",
    "Particle",
    "Side",
    "Snapshot",
]

__version__ = "1.0.0"
