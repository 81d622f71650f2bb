"""
Keyboard and mouse mapping for the simulator.

Keyboard Mapping:
    SPACE / UP: Jump (also starts a run and restarts after game over)
    DOWN: Duck while held
    Left click: Restart button
"""

from typing import Optional

import pygame

from dinorun.core.events import Event, duck_event, jump_event, restart_click_event

JUMP_KEYS = (pygame.K_SPACE, pygame.K_UP)
DUCK_KEYS = (pygame.K_DOWN,)


def translate_event(event: pygame.event.Event, scale: int = 1) -> Optional[Event]:
    """
    Map a pygame event to a game input event.

    Args:
        event: Raw pygame event
        scale: Window scale; click positions are divided back to board units

    Returns:
        The game event, or None when the pygame event is not a game input
    """
    if event.type == pygame.KEYDOWN:
        if event.key in JUMP_KEYS:
            return jump_event()
        if event.key in DUCK_KEYS:
            return duck_event(True)

    elif event.type == pygame.KEYUP:
        if event.key in DUCK_KEYS:
            return duck_event(False)

    elif event.type == pygame.MOUSEBUTTONDOWN and event.button == 1:
        x, y = event.pos
        return restart_click_event((x // scale, y // scale))

    return None
