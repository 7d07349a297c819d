# keys.py
from typing import Optional

import pygame  # type: ignore

# pygame key codes -> controller key names
KEY_NAMES = {
    pygame.K_UP: "arrowup",
    pygame.K_DOWN: "arrowdown",
    pygame.K_LEFT: "arrowleft",
    pygame.K_RIGHT: "arrowright",
    pygame.K_w: "w",
    pygame.K_s: "s",
    pygame.K_a: "a",
    pygame.K_d: "d",
    pygame.K_SPACE: "space",
    pygame.K_RETURN: "enter",
    pygame.K_KP_ENTER: "enter",
}

def key_name(key: int) -> Optional[str]:
    return KEY_NAMES.get(key)
