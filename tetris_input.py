"""Keyboard → Command mapping (driver side; the engine never sees key codes)"""
from typing import Dict, Optional

import pygame

from tetris_game import Command

KEYMAP: Dict[int, Command] = {
    pygame.K_LEFT: Command.MOVE_LEFT,
    pygame.K_RIGHT: Command.MOVE_RIGHT,
    pygame.K_DOWN: Command.SOFT_DROP,
    pygame.K_UP: Command.ROTATE,
    pygame.K_SPACE: Command.HARD_DROP,
    pygame.K_p: Command.PAUSE_TOGGLE,
    pygame.K_RETURN: Command.START,
    pygame.K_r: Command.RESTART,
}


def command_for_key(key: int) -> Optional[Command]:
    return KEYMAP.get(key)
