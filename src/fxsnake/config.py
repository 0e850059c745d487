# src/fxsnake/config.py
from dataclasses import dataclass, field
from typing import Optional

# ----- Window & grid -----
WIDTH, HEIGHT = 640, 480
CELL_SIZE = 16

# ----- Colors -----
BG         = (255, 255, 255)
GRID_LINE  = (230, 230, 230)   # black at 10% over white
SNAKE      = (0, 0, 0)
FOOD       = (0, 128, 0)
TEXT       = (0, 0, 0)

# ----- Score readout -----
SCORE_MARGIN = 8

# ----- Controls (single characters, as delivered by KEYDOWN.unicode) -----
@dataclass(frozen=True)
class Controls:
    up: str = "w"
    left: str = "a"
    down: str = "s"
    right: str = "d"
    restart: str = "r"
    pause: str = "p"

# ----- Tunables -----
@dataclass
class Config:
    seed: Optional[int] = None        # None -> fresh randomness every run
    cell_size: int = CELL_SIZE
    base_delay_ms: int = 240
    min_delay_ms: int = 20
    speedup: float = 0.9              # delay multiplier per food
    initial_tail_length: int = 5
    score_scale: int = 175            # max score per food at cell_size 8
    font_size: int = 32
    fps: int = 60
    controls: Controls = field(default_factory=Controls)

CFG = Config()
