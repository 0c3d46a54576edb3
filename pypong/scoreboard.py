"""Text elements: the score displays and the start screen."""

from __future__ import annotations

import os

os.environ.setdefault("PYGAME_HIDE_SUPPORT_PROMPT", "1")

import pygame  # noqa: E402


def _render(font: pygame.font.Font, text: str, color) -> pygame.Surface:
    return font.render(text, False, color)


def _blit_stretched(
    surface: pygame.Surface, texture: pygame.Surface, rect: pygame.Rect
) -> None:
    surface.blit(pygame.transform.scale(texture, rect.size), rect)


class Scoreboard:
    """A player's score, rendered as text stretched over a fixed rectangle."""

    def __init__(
        self,
        v_pos: int,
        h_pos: int,
        height: int,
        width: int,
        points: int,
        color,
        font: pygame.font.Font,
    ) -> None:
        self.font = font
        self.color = color
        self.rect = pygame.Rect(h_pos, v_pos, width, height)
        self.points_displayed = str(points)
        self.texture = _render(font, self.points_displayed, color)

    def set_score(self, points: int) -> None:
        """Change the text without re-rendering it."""
        self.points_displayed = str(points)

    def update_texture(self) -> None:
        """Re-render the current text."""
        self.texture = _render(self.font, self.points_displayed, self.color)

    def update(self, points: int) -> None:
        """Set the score and re-render it."""
        self.set_score(points)
        self.update_texture()

    def draw(self, surface: pygame.Surface) -> None:
        """Copy the rendered score onto the surface, filling the rectangle."""
        _blit_stretched(surface, self.texture, self.rect)


class Startscreen:
    """The title and the countdown shown before a match begins."""

    def __init__(
        self,
        x: int,
        y: int,
        width: int,
        height: int,
        color,
        title_font: pygame.font.Font,
        subtitle_font: pygame.font.Font,
    ) -> None:
        self.color = color
        self.title_font = title_font
        self.subtitle_font = subtitle_font

        self.title = "PONG"
        self.title_rect = pygame.Rect(x, y, width, height)
        self.title_texture = _render(title_font, self.title, color)

        self.subtitle = "Starting in 5 seconds"
        self.subtitle_rect = pygame.Rect(x // 2, y + height, width + x, height // 4)
        self.subtitle_texture = _render(subtitle_font, self.subtitle, color)

    def update_countdown(self, seconds: int) -> None:
        """Show the number of seconds left before the start."""
        self.subtitle = f"Starting in {seconds} seconds"
        self.subtitle_texture = _render(self.subtitle_font, self.subtitle, self.color)

    def draw(self, surface: pygame.Surface) -> None:
        """Copy the title and the countdown onto the surface."""
        _blit_stretched(surface, self.title_texture, self.title_rect)
        _blit_stretched(surface, self.subtitle_texture, self.subtitle_rect)