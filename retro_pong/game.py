import logging
import random
from dataclasses import dataclass
from enum import Enum
from typing import Optional

from .config import DEFAULT_CONFIG, Config
from .entities import Ball, Paddle, Particle, Side, Vec2

logger = logging.getLogger(__name__)


class GameState(Enum):
    PLAYING = "playing"
    PAUSED = "paused"
    GAME_OVER = "game_over"


class Command(Enum):
    """Discrete inputs, independent of the key that produced them."""
    TOGGLE_PAUSE = "toggle_pause"
    RESTART = "restart"


@dataclass(frozen=True)
class PaddleView:
    side: Side
    x: float
    y: float
    width: float
    height: float


@dataclass(frozen=True)
class ParticleView:
    x: float
    y: float
    alpha: float


@dataclass(frozen=True)
class Snapshot:
    """Read-only picture of one frame, handed to the renderer."""
    ball: tuple
    player: PaddleView
    computer: PaddleView
    score: tuple
    particles: tuple
    state: GameState
    winner: Optional[Side]


class Game:
    """One play session: two paddles, a ball, the score and the particle debris.

    Input handlers (`pointer_moved`, `handle_command`) may be called at any
    time between frames; `frame()` runs one update pass followed by one
    render pass.
    """

    def __init__(self, config: Config = DEFAULT_CONFIG, rng: Optional[random.Random] = None,
                 renderer=None):
        self.config = config
        self.rng = rng if rng is not None else random.Random()
        self.renderer = renderer

        self.ball = Ball(config)
        self.player_paddle = Paddle(Side.PLAYER, config)
        self.computer_paddle = Paddle(Side.COMPUTER, config)

        self.score = [0, 0]
        self.state = GameState.PLAYING
        self.winner: Optional[Side] = None
        self.player_moved = False
        self.particles: list[Particle] = []

    # ----------------------------------
    # Input
    # ----------------------------------
    def pointer_moved(self, x: float):
        if self.state is not GameState.PLAYING:
            return
        if not self.player_moved:
            logger.debug("Player engaged at x=%.1f", x)
        self.player_moved = True
        self.player_paddle.move_to(x - self.player_paddle.width / 2)

    def handle_command(self, command: Command):
        if command is Command.TOGGLE_PAUSE:
            self.toggle_pause()
        elif command is Command.RESTART:
            self.restart()

    def toggle_pause(self):
        if self.state is GameState.GAME_OVER:
            return
        if self.state is GameState.PAUSED:
            self.state = GameState.PLAYING
            logger.info("Resumed")
        else:
            self.state = GameState.PAUSED
            logger.info("Paused at %d-%d", *self.score)

    def restart(self):
        self.ball.reset()
        self.player_paddle.reset()
        self.computer_paddle.reset()
        self.score = [0, 0]
        self.state = GameState.PLAYING
        self.winner = None
        self.player_moved = False
        self.particles = []
        logger.info("New game")

    # ----------------------------------
    # Simulation
    # ----------------------------------
    def spawn_particles(self, pos: Vec2):
        for _ in range(self.config.particles.count):
            self.particles.append(Particle.spawn(pos, self.config, self.rng))

    def particles_update(self):
        alive = []
        for p in self.particles:
            p.update()
            assert p.life >= 0, "particle aged past zero"
            if p.alive:
                alive.append(p)
        self.particles = alive

    def check_collisions(self):
        ball = self.ball
        half_paddle = self.config.paddle.height / 2

        if ball.check_wall_collision():
            self.spawn_particles(ball.pos)

        # Player end
        if ball.pos.y > self.config.player_paddle_y - half_paddle:
            if ball.check_paddle_collision(self.player_paddle, self.player_moved):
                self.spawn_particles(ball.pos)
            elif ball.pos.y > self.config.canvas.height:
                self.point_scored(Side.COMPUTER)

        # Computer end
        if ball.pos.y < self.config.paddle.offset + half_paddle:
            if ball.check_paddle_collision(self.computer_paddle, self.player_moved):
                # Difficulty only ramps once the player is in the game
                if self.player_moved:
                    self.computer_paddle.increase_speed()
                    logger.debug("Computer return, AI speed now %.1f", self.computer_paddle.speed)
                self.spawn_particles(ball.pos)
            elif ball.pos.y < 0:
                self.point_scored(Side.PLAYER)

    def point_scored(self, side: Side):
        self.score[0 if side is Side.PLAYER else 1] += 1
        logger.debug("Point to %s, score %d-%d", side.value, *self.score)
        self.ball.reset()
        self.check_winner()

    def check_winner(self):
        target = self.config.game.winning_score
        if self.score[0] >= target:
            self.winner = Side.PLAYER
        elif self.score[1] >= target:
            self.winner = Side.COMPUTER
        else:
            return
        self.state = GameState.GAME_OVER
        logger.info("Game over, %s wins %d-%d", self.winner.value, *self.score)

    def update(self):
        if self.state is not GameState.PLAYING:
            return

        self.ball.update(self.player_moved)
        self.computer_paddle.update_ai(self.ball.pos.x, self.player_moved)
        self.check_collisions()
        self.particles_update()

    # ----------------------------------
    # Frame
    # ----------------------------------
    def snapshot(self) -> Snapshot:
        def view(p: Paddle) -> PaddleView:
            return PaddleView(p.side, p.x, p.y, p.width, p.height)

        return Snapshot(
            ball=(self.ball.pos.x, self.ball.pos.y),
            player=view(self.player_paddle),
            computer=view(self.computer_paddle),
            score=tuple(self.score),
            particles=tuple(ParticleView(p.pos.x, p.pos.y, p.alpha) for p in self.particles),
            state=self.state,
            winner=self.winner,
        )

    def frame(self):
        self.update()
        if self.renderer is not None:
            self.renderer.draw(self.snapshot())
