"""Drawable rectangles for the ball, the rackets and the middle line."""

from __future__ import annotations

import os

os.environ.setdefault("PYGAME_HIDE_SUPPORT_PROMPT", "1")

import pygame  # noqa: E402

from pypong.ball import Ball  # noqa: E402
from pypong.racket import Racket  # noqa: E402


class BallRect:
    """The on-screen rectangle that follows a ball."""

    def __init__(self, ball: Ball) -> None:
        self.rect = pygame.Rect(ball.h_pos, ball.v_pos, ball.width, ball.height)

    def update_position(self, ball: Ball) -> None:
        """Move the rectangle to the ball's current position."""
        self.rect.x = ball.h_pos
        self.rect.y = ball.v_pos

    def draw(self, surface: pygame.Surface, color) -> None:
        """Fill the rectangle on the surface."""
        pygame.draw.rect(surface, color, self.rect)

    def update_and_draw(self, ball: Ball, surface: pygame.Surface, color) -> None:
        """Follow the ball, then draw."""
        self.update_position(ball)
        self.draw(surface, color)


class RacketRect:
    """The on-screen rectangle that follows a racket."""

    def __init__(self, racket: Racket) -> None:
        self.rect = pygame.Rect(
            racket.horizontal_pos, racket.vertical_pos, racket.width, racket.length
        )

    def update_position(self, racket: Racket) -> None:
        """Move the rectangle to the racket's current position."""
        self.rect.x = racket.horizontal_pos
        self.rect.y = racket.vertical_pos

    def draw(self, surface: pygame.Surface, color) -> None:
        """Fill the rectangle on the surface."""
        pygame.draw.rect(surface, color, self.rect)

    def update_and_draw(
        self, racket: Racket, surface: pygame.Surface, color
    ) -> None:
        """Follow the racket, then draw."""
        self.update_position(racket)
        self.draw(surface, color)


class Middleline:
    """A dashed vertical line made of equally spaced rectangles."""

    def __init__(
        self, h_pos: int, width: int, screen_height: int, num_lines: int
    ) -> None:
        if num_lines <= 0:
            raise ValueError("a middle line needs at least one dash")
        self.h_pos = h_pos
        self.width = width
        self.num_lines = num_lines
        dash_length = screen_height // (2 * num_lines)
        self.rects = [
            pygame.Rect(
                h_pos - width // 2,
                i * 2 * dash_length + dash_length // 2,
                width,
                dash_length,
            )
            for i in range(num_lines)
        ]

    def draw(self, surface: pygame.Surface, color) -> None:
        """Fill every dash on the surface."""
        for rect in self.rects:
            pygame.draw.rect(surface, color, rect)