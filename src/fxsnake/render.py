# src/fxsnake/render.py
import numpy as np  # type: ignore
import pygame       # type: ignore

from .config import Config, CFG, BG, GRID_LINE, SNAKE, FOOD, TEXT, SCORE_MARGIN
from .game import GameState
from .grid import Grid, MissingSurfaceError


class Renderer:
    """Draws a GameState onto a pygame Surface. Reads state, never mutates it."""

    def __init__(self, surface: pygame.Surface, grid: Grid, font=None, cfg: Config = CFG):
        if surface is None:
            raise MissingSurfaceError("Renderer needs a pygame Surface to draw on.")
        self.surface = surface
        self.grid = grid
        if font is None:
            if not pygame.font.get_init():
                pygame.font.init()
            font = pygame.font.SysFont(None, cfg.font_size)
        self.font = font

    def draw_cell(self, cell, color) -> None:
        size = self.grid.cell_size
        rect = pygame.Rect(self.grid.to_pixel(cell.x), self.grid.to_pixel(cell.y), size, size)
        pygame.draw.rect(self.surface, color, rect)

    def draw(self, state: GameState) -> None:
        self.surface.fill(BG)

        # grid lines: one outlined square per cell
        size = self.grid.cell_size
        for i in range(self.grid.width):
            for j in range(self.grid.height):
                rect = pygame.Rect(self.grid.to_pixel(i), self.grid.to_pixel(j), size, size)
                pygame.draw.rect(self.surface, GRID_LINE, rect, 1)

        # snake
        for cell in state.snake[:state.tail_length]:
            self.draw_cell(cell, SNAKE)

        # food
        if state.food is not None:
            self.draw_cell(state.food, FOOD)

        # score, right-aligned in the top-right corner
        txt = self.font.render(f"Score: {state.score}", True, TEXT)
        width = self.surface.get_width()
        self.surface.blit(txt, txt.get_rect(topright=(width - SCORE_MARGIN, SCORE_MARGIN)))

    def frame_array(self) -> np.ndarray:
        """Current surface as an (H, W, 3) uint8 RGB array."""
        arr = pygame.surfarray.array3d(self.surface)
        return np.transpose(arr, (1, 0, 2)).astype(np.uint8)
