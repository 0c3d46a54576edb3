"""Drawing the whole game onto a surface."""

from __future__ import annotations

import os
from collections.abc import Callable

os.environ.setdefault("PYGAME_HIDE_SUPPORT_PROMPT", "1")

import pygame  # noqa: E402

from pypong.game_state import GameState  # noqa: E402
from pypong.scoreboard import Scoreboard, Startscreen  # noqa: E402
from pypong.shapes import BallRect, Middleline, RacketRect  # noqa: E402

TITLE_FONT_PATH = "./build/Monument.ttf"
SUBTITLE_FONT_PATH = "./build/SLC_.ttf"
FONT_SIZE = 28

BACKGROUND = (0, 0, 0)
BALL_COLOR = (255, 255, 0)
RACKET_COLOR = (255, 255, 255)
TEXT_COLOR = (255, 100, 0, 200)
COUNTDOWN_SECONDS = 5
MIDDLE_LINE_DASHES = 10


def _load_font(path: str, size: int) -> pygame.font.Font:
    try:
        return pygame.font.Font(path, size)
    except (FileNotFoundError, OSError):
        return pygame.font.Font(None, size)


class Renderer:
    """Draws rackets, ball, middle line, scores and the start screen."""

    def __init__(
        self,
        surface: pygame.Surface,
        state: GameState,
        *,
        title_font: pygame.font.Font | None = None,
        subtitle_font: pygame.font.Font | None = None,
        present: Callable[[], None] = pygame.display.flip,
        delay: Callable[[int], object] = pygame.time.delay,
    ) -> None:
        self.surface = surface
        self.present = present
        self.delay = delay
        self.screen_width, self.screen_height = surface.get_size()
        width, height = self.screen_width, self.screen_height

        self.left_racket = RacketRect(state.left)
        self.right_racket = RacketRect(state.right)
        self.ball = BallRect(state.ball)
        self.middle_line = Middleline(
            width // 2, width // 100, height, MIDDLE_LINE_DASHES
        )

        pygame.font.init()
        if title_font is None:
            title_font = _load_font(TITLE_FONT_PATH, FONT_SIZE)
        if subtitle_font is None:
            subtitle_font = _load_font(SUBTITLE_FONT_PATH, FONT_SIZE)

        board_top = height // 50
        board_width = width // 10
        board_indent = width // 4 - board_width // 2
        board_height = height // 5
        self.left_scoreboard = Scoreboard(
            board_top,
            board_indent,
            board_height,
            board_width,
            state.points_left,
            TEXT_COLOR,
            title_font,
        )
        self.right_scoreboard = Scoreboard(
            board_top,
            width - board_indent - board_width,
            board_height,
            board_width,
            state.points_right,
            TEXT_COLOR,
            title_font,
        )

        self.start = Startscreen(
            width // 4,
            height // 4,
            width // 2,
            height // 2,
            TEXT_COLOR,
            title_font,
            subtitle_font,
        )

    def draw(self, state: GameState) -> None:
        """Draw one frame of the game and present it."""
        self.surface.fill(BACKGROUND)

        self.right_scoreboard.update(state.points_right)
        self.left_scoreboard.update(state.points_left)
        self.right_scoreboard.draw(self.surface)
        self.left_scoreboard.draw(self.surface)

        self.ball.update_and_draw(state.ball, self.surface, BALL_COLOR)
        self.left_racket.update_and_draw(state.left, self.surface, RACKET_COLOR)
        self.right_racket.update_and_draw(state.right, self.surface, RACKET_COLOR)
        self.middle_line.draw(self.surface, RACKET_COLOR)

        self.present()

    def draw_startscreen(self) -> None:
        """Show the title with a countdown, one second per step."""
        for elapsed in range(COUNTDOWN_SECONDS):
            title = self.start
            _ = title  # title and subtitle are drawn together below
            self.start.update_countdown(COUNTDOWN_SECONDS - elapsed)
            self.start.draw(self.surface)
            self.present()
            self.delay(1000)
            self.surface.fill(BACKGROUND)