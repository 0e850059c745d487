# src/fxsnake/main.py
import logging

import pygame # type: ignore

from .config import WIDTH, HEIGHT, CFG
from .grid import Grid
from .loop import GameLoop
from .render import Renderer
from .scheduler import Scheduler

logging.basicConfig(
    level=logging.INFO,
    format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
)
logger = logging.getLogger(__name__)


def main():
    pygame.init()
    screen = pygame.display.set_mode((WIDTH, HEIGHT))
    pygame.display.set_caption("FxSnake")
    font = pygame.font.SysFont(None, CFG.font_size)
    clock = pygame.time.Clock()

    grid = Grid.from_surface(screen, CFG.cell_size)
    logger.info(f"Grid is {grid.width}x{grid.height} cells of {grid.cell_size}px")

    scheduler = Scheduler(pygame.time.get_ticks)
    renderer = Renderer(screen, grid, font, CFG)
    game = GameLoop(grid, scheduler, CFG, renderer=renderer)

    running = True
    while running:
        # 1) input
        for event in pygame.event.get():
            if event.type == pygame.QUIT:
                running = False
            elif event.type == pygame.KEYDOWN:
                game.handle_key(event.unicode)

        # 2) ticks that are due (each one renders)
        scheduler.run_pending()

        # 3) present
        pygame.display.flip()
        clock.tick(CFG.fps)  # high FPS; movement is paced by the scheduler

    pygame.quit()

if __name__ == "__main__":
    main()
