import logging
import os
import random
import sys

import pygame

from .config import DEFAULT_CONFIG, Config
from .game import Command, Game
from .render import Renderer

logger = logging.getLogger(__name__)

KEY_COMMANDS = {
    pygame.K_ESCAPE: Command.TOGGLE_PAUSE,
    pygame.K_r: Command.RESTART,
}


class App:
    def __init__(self, config: Config = DEFAULT_CONFIG, seed=None):
        pygame.init()
        self.config = config
        self.screen = pygame.display.set_mode((config.canvas.width, config.canvas.height))
        pygame.display.set_caption("Retro Pong")
        self.clock = pygame.time.Clock()
        self.running = True

        self.renderer = Renderer(self.screen, config)
        self.game = Game(config, rng=random.Random(seed), renderer=self.renderer)

    def handle_events(self):
        for e in pygame.event.get():
            if e.type == pygame.QUIT:
                self.running = False
            elif e.type == pygame.MOUSEMOTION:
                self.game.pointer_moved(e.pos[0])
                if self.game.player_moved:
                    pygame.mouse.set_visible(False)
            elif e.type == pygame.KEYDOWN:
                command = KEY_COMMANDS.get(e.key)
                if command is not None:
                    self.game.handle_command(command)
                if command is Command.RESTART:
                    pygame.mouse.set_visible(True)

    def run(self):
        logger.info("Starting %dx%d table at %d fps",
                    self.config.canvas.width, self.config.canvas.height, self.config.game.fps)
        while self.running:
            self.handle_events()
            self.game.frame()
            pygame.display.flip()
            self.clock.tick(self.config.game.fps)
        pygame.quit()


def main():
    logging.basicConfig(
        level=os.environ.get("RETRO_PONG_LOG_LEVEL", "INFO").upper(),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )
    App().run()
    sys.exit()


if __name__ == "__main__":
    main()
