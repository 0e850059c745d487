# src/fxsnake/controls.py
from enum import Enum
from typing import Optional, Union

from .config import Controls
from .direction import Direction


class Command(Enum):
    RESTART = "restart"
    TOGGLE_PAUSE = "toggle-pause"


def resolve_key(key: Optional[str], controls: Controls) -> Union[Command, Direction, None]:
    """
    Map a key character to what it means in game.
    Restart and pause win over movement if a key is bound twice.
    Unknown keys map to None.
    """
    if not key:
        return None
    if key == controls.restart:
        return Command.RESTART
    if key == controls.pause:
        return Command.TOGGLE_PAUSE

    if key == controls.up:    return Direction.UP
    elif key == controls.down:  return Direction.DOWN
    elif key == controls.right: return Direction.RIGHT
    elif key == controls.left:  return Direction.LEFT
    return None
