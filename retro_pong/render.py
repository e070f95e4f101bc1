import pygame

from .config import Config
from .entities import Side
from .game import GameState, Snapshot

DASH = 4


class Renderer:
    def __init__(self, surface: pygame.Surface, config: Config):
        self.surface = surface
        self.config = config
        self._fonts = {}
        self._overlay = pygame.Surface(surface.get_size(), pygame.SRCALPHA)

    def font(self, size: int) -> pygame.font.Font:
        if size not in self._fonts:
            if not pygame.font.get_init():
                pygame.font.init()
            self._fonts[size] = pygame.font.SysFont(self.config.game.font, size)
        return self._fonts[size]

    def draw(self, snap: Snapshot):
        self.clear()
        self.draw_center_line()
        self.draw_ball(snap.ball)
        self.draw_paddle(snap.player)
        self.draw_paddle(snap.computer)
        self.draw_score(snap.score)
        self.draw_particles(snap.particles)

        if snap.state is GameState.PAUSED:
            self.draw_pause_screen()
        elif snap.state is GameState.GAME_OVER:
            self.draw_game_over(snap.winner)

    def clear(self):
        self.surface.fill(self.config.canvas.background)

    def draw_center_line(self):
        w, h = self.config.canvas.width, self.config.canvas.height
        y = h // 2
        for x in range(0, w, DASH * 2):
            pygame.draw.line(self.surface, self.config.colors.secondary, (x, y), (x + DASH - 1, y))

    def draw_ball(self, pos):
        pygame.draw.circle(self.surface, self.config.ball.color,
                           (int(pos[0]), int(pos[1])), int(self.config.ball.radius))

    def draw_paddle(self, paddle):
        rect = pygame.Rect(int(paddle.x), int(paddle.y), int(paddle.width), int(paddle.height))
        pygame.draw.rect(self.surface, self.config.paddle.color, rect)

    def draw_score(self, score):
        font = self.font(self.config.game.font_sizes.score)
        mid = self.config.canvas.height / 2
        col = self.config.colors.primary
        # Player below the line, computer above; y is the text baseline
        player = font.render(str(score[0]), True, col)
        computer = font.render(str(score[1]), True, col)
        self.surface.blit(player, (20, mid + 50 - font.get_ascent()))
        self.surface.blit(computer, (20, mid - 30 - font.get_ascent()))

    def draw_particles(self, particles):
        col = self.config.colors.particle
        r = self.config.particles.radius
        for p in particles:
            dot = pygame.Surface((r * 2, r * 2), pygame.SRCALPHA)
            pygame.draw.circle(dot, (*col, int(255 * p.alpha)), (r, r), r)
            self.surface.blit(dot, (int(p.x) - r, int(p.y) - r))

    def _shade(self, alpha: float):
        self._overlay.fill((0, 0, 0, int(255 * alpha)))
        self.surface.blit(self._overlay, (0, 0))

    def _centered(self, text: str, size: int, color, y: float):
        surf = self.font(size).render(text, True, color)
        x = self.config.canvas.width / 2 - surf.get_width() / 2
        self.surface.blit(surf, (x, y - surf.get_height() / 2))

    def draw_pause_screen(self):
        sizes, mid = self.config.game.font_sizes, self.config.canvas.height / 2
        col = self.config.colors.primary
        self._shade(0.7)
        self._centered("PAUSED", sizes.title, col, mid)
        self._centered("Press ESC to resume", sizes.small, col, mid + 30)
        self._centered("Press R to restart", sizes.small, col, mid + 50)

    def draw_game_over(self, winner: Side):
        sizes, mid = self.config.game.font_sizes, self.config.canvas.height / 2
        colors = self.config.colors
        self._shade(0.8)
        if winner is Side.PLAYER:
            self._centered("YOU WIN!", sizes.title, colors.accent, mid - 20)
        else:
            self._centered("COMPUTER WINS!", sizes.title, colors.danger, mid - 20)
        self._centered("Press R to play again", sizes.subtitle, colors.primary, mid + 40)
