from dataclasses import dataclass, field, replace

Color = tuple

WHITE = (255, 255, 255)
BLACK = (0, 0, 0)


class ConfigError(ValueError):
    """Raised when a configuration cannot produce a playable table."""


# ----------------------------------
# Sections
# ----------------------------------
@dataclass(frozen=True)
class CanvasConfig:
    width: int = 500
    height: int = 700
    background: Color = BLACK


@dataclass(frozen=True)
class PaddleConfig:
    width: int = 50
    height: int = 10
    offset: int = 20        # distance of each paddle from its edge
    color: Color = WHITE


@dataclass(frozen=True)
class BallConfig:
    radius: float = 5
    initial_speed_y: float = 3
    max_speed_y: float = 5
    speed_increment: float = 1
    trajectory_multiplier: float = 0.3   # paddle offset -> horizontal speed
    color: Color = WHITE


@dataclass(frozen=True)
class ComputerConfig:
    initial_speed: float = 4
    max_speed: float = 6
    speed_increment: float = 0.5
    error_margin: float = 5  # dead-zone in px


@dataclass(frozen=True)
class FontSizes:
    score: int = 32
    title: int = 40
    subtitle: int = 20
    small: int = 16


@dataclass(frozen=True)
class GameConfig:
    winning_score: int = 5
    font: str = "Courier New"
    font_sizes: FontSizes = field(default_factory=FontSizes)
    fps: int = 60


@dataclass(frozen=True)
class ParticleConfig:
    count: int = 8
    max_life: int = 30       # ticks
    max_speed: float = 3
    radius: int = 2


@dataclass(frozen=True)
class Colors:
    primary: Color = WHITE
    secondary: Color = (136, 136, 136)
    accent: Color = (0, 255, 0)
    danger: Color = (255, 0, 0)
    particle: Color = WHITE


@dataclass(frozen=True)
class Config:
    """All tunables of a table. Passed into every entity and the session."""

    canvas: CanvasConfig = field(default_factory=CanvasConfig)
    paddle: PaddleConfig = field(default_factory=PaddleConfig)
    ball: BallConfig = field(default_factory=BallConfig)
    computer: ComputerConfig = field(default_factory=ComputerConfig)
    game: GameConfig = field(default_factory=GameConfig)
    particles: ParticleConfig = field(default_factory=ParticleConfig)
    colors: Colors = field(default_factory=Colors)

    def __post_init__(self):
        self.validate()

    def validate(self):
        c, p, b, ai = self.canvas, self.paddle, self.ball, self.computer
        if c.width <= 0 or c.height <= 0:
            raise ConfigError(f"canvas must have a positive size, got {c.width}x{c.height}")
        if p.width <= 0 or p.height <= 0:
            raise ConfigError("paddle must have a positive size")
        if p.width > c.width:
            raise ConfigError(f"paddle width {p.width} exceeds canvas width {c.width}")
        if b.radius <= 0:
            raise ConfigError("ball radius must be positive")
        if not 0 < b.initial_speed_y <= b.max_speed_y:
            raise ConfigError(
                f"ball speed must satisfy 0 < initial ({b.initial_speed_y}) <= max ({b.max_speed_y})"
            )
        if b.speed_increment < 0 or ai.speed_increment < 0:
            raise ConfigError("speed increments cannot be negative")
        if not 0 <= ai.initial_speed <= ai.max_speed:
            raise ConfigError(
                f"computer speed must satisfy 0 <= initial ({ai.initial_speed}) <= max ({ai.max_speed})"
            )
        if ai.error_margin < 0:
            raise ConfigError("error margin cannot be negative")
        if self.game.winning_score < 1:
            raise ConfigError("winning score must be at least 1")
        if self.game.fps <= 0:
            raise ConfigError("fps must be positive")
        if self.particles.count < 0 or self.particles.max_life < 1:
            raise ConfigError("particles need a non-negative count and a lifetime of at least one tick")

    def with_overrides(self, **sections) -> "Config":
        return replace(self, **sections)

    # Derived geometry
    @property
    def center(self) -> tuple:
        return self.canvas.width / 2, self.canvas.height / 2

    @property
    def player_paddle_y(self) -> float:
        return self.canvas.height - self.paddle.offset

    @property
    def computer_paddle_y(self) -> float:
        return self.paddle.offset - self.paddle.height

    @property
    def paddle_home_x(self) -> float:
        return self.canvas.width / 2 - self.paddle.width / 2


DEFAULT_CONFIG = Config()
