"""Keyboard input: reading key states and applying them to the game."""

from __future__ import annotations

import os
from collections.abc import Sequence

os.environ.setdefault("PYGAME_HIDE_SUPPORT_PROMPT", "1")

import pygame  # noqa: E402

from pypong.game_state import GameState  # noqa: E402


def pressed_keys() -> Sequence[bool]:
    """Return the current key states, indexable by pygame key constants."""
    return pygame.key.get_pressed()


def handle_keys(pressed, state: GameState, game_speed: int) -> bool:
    """Move the rackets for the pressed keys; return True if Escape is down.

    Up/Down move the right racket, W/S move the left one.
    """
    quit_requested = bool(pressed[pygame.K_ESCAPE])
    if pressed[pygame.K_UP]:
        state.right.move_up(game_speed)
    if pressed[pygame.K_DOWN]:
        state.right.move_down(game_speed, state.screen_height)
    if pressed[pygame.K_w]:
        state.left.move_up(game_speed)
    if pressed[pygame.K_s]:
        state.left.move_down(game_speed, state.screen_height)
    return quit_requested