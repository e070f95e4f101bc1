import random
from dataclasses import dataclass
from enum import Enum

import pygame

from .config import Config

Vec2 = pygame.math.Vector2


def clamp(x, lo, hi):
    return max(lo, min(hi, x))


class Side(Enum):
    """Which end of the table a paddle guards."""
    PLAYER = "player"
    COMPUTER = "computer"


@dataclass
class Particle:
    pos: Vec2
    vel: Vec2
    life: int      # ticks remaining
    max_life: int

    @classmethod
    def spawn(cls, pos, config: Config, rng: random.Random) -> "Particle":
        half = config.particles.max_speed / 2
        vel = Vec2(rng.uniform(-half, half), rng.uniform(-half, half))
        return cls(Vec2(pos), vel, config.particles.max_life, config.particles.max_life)

    def update(self):
        self.pos += self.vel
        self.life -= 1

    @property
    def alive(self) -> bool:
        return self.life > 0

    @property
    def alpha(self) -> float:
        return clamp(self.life / self.max_life, 0.0, 1.0)


class Ball:
    def __init__(self, config: Config):
        self.config = config
        self.reset()

    def reset(self):
        # Always serves towards the computer, straight down the middle
        self.pos = Vec2(self.config.center)
        self.speed_y = self.config.ball.initial_speed_y
        self.speed_x = 0.0
        self.direction = -1   # +1 moves down the table, towards the player

    @property
    def radius(self) -> float:
        return self.config.ball.radius

    def update(self, player_moved: bool):
        self.pos.y += self.speed_y * self.direction
        if player_moved:
            self.pos.x += self.speed_x

    def check_wall_collision(self) -> bool:
        # Only reflect when moving into the wall, so a ball still outside
        # the bound on the next frame is not flipped back again.
        if self.pos.x < self.radius and self.speed_x < 0:
            self.speed_x = -self.speed_x
            return True
        if self.pos.x > self.config.canvas.width - self.radius and self.speed_x > 0:
            self.speed_x = -self.speed_x
            return True
        return False

    def check_paddle_collision(self, paddle: "Paddle", player_moved: bool) -> bool:
        """Bounce off `paddle` if the ball is within its horizontal span.

        The caller has already decided the ball is level with the paddle.
        Returns True on a hit.
        """
        if not paddle.x <= self.pos.x <= paddle.x + paddle.width:
            return False

        cfg = self.config.ball
        if player_moved:
            self.speed_y = min(self.speed_y + cfg.speed_increment, cfg.max_speed_y)
        self.direction = -self.direction

        hit_position = self.pos.x - paddle.center_x
        self.speed_x = hit_position * cfg.trajectory_multiplier
        assert cfg.initial_speed_y <= self.speed_y <= cfg.max_speed_y
        return True


class Paddle:
    def __init__(self, side: Side, config: Config):
        self.side = side
        self.config = config
        self.width = config.paddle.width
        self.height = config.paddle.height
        if side is Side.PLAYER:
            self.y = config.player_paddle_y
        else:
            self.y = config.computer_paddle_y
        self.reset()

    @property
    def is_player(self) -> bool:
        return self.side is Side.PLAYER

    @property
    def center_x(self) -> float:
        return self.x + self.width / 2

    @property
    def max_x(self) -> float:
        return self.config.canvas.width - self.width

    def reset(self):
        self.x = self.config.paddle_home_x
        self.speed = self.config.computer.initial_speed

    def move_to(self, target_x: float):
        self.x = clamp(target_x, 0, self.max_x)

    def update_ai(self, ball_x: float, player_moved: bool):
        # Dormant until the player has touched the pointer
        if not player_moved:
            return

        target_x = ball_x - self.width / 2
        diff = target_x - self.center_x

        if abs(diff) > self.config.computer.error_margin:
            if diff > 0:
                self.x += min(self.speed, diff)
            else:
                self.x += max(-self.speed, diff)

        self.x = clamp(self.x, 0, self.max_x)

    def increase_speed(self):
        ai = self.config.computer
        self.speed = min(self.speed + ai.speed_increment, ai.max_speed)
