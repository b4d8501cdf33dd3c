
"""Keyboard -> game action mapping"""
from typing import Optional
import pygame
from blockfall_game import Action

KEYMAP = {
    pygame.K_LEFT: Action.MOVE_LEFT,
    pygame.K_RIGHT: Action.MOVE_RIGHT,
    pygame.K_DOWN: Action.SOFT_DROP,
    pygame.K_UP: Action.ROTATE_CW,
    pygame.K_z: Action.ROTATE_CCW,
    pygame.K_SPACE: Action.HARD_DROP,
    pygame.K_LSHIFT: Action.HOLD,
    pygame.K_RSHIFT: Action.HOLD,
    pygame.K_RETURN: Action.START,
    pygame.K_KP_ENTER: Action.START,
}

def action_for_key(key: int) -> Optional[Action]:
    return KEYMAP.get(key)
