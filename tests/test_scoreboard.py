import pygame
import pytest

from pypong.scoreboard import Scoreboard, Startscreen

ORANGE = (255, 100, 0, 200)


@pytest.fixture(scope="module")
def font():
    pygame.font.init()
    return pygame.font.Font(None, 28)


def _blank(size=(400, 300)):
    surface = pygame.Surface(size)
    surface.fill((0, 0, 0))
    return surface


def _has_color(surface, rect, rgb):
    return any(
        surface.get_at((x, y))[:3] == rgb
        for x in range(rect.left, rect.right)
        for y in range(rect.top, rect.bottom)
    )


def test_scoreboard_initial_text_and_rect(font):
    board = Scoreboard(10, 20, 60, 40, 3, ORANGE, font)
    assert board.points_displayed == "3"
    assert (board.rect.x, board.rect.y, board.rect.w, board.rect.h) == (20, 10, 40, 60)


def test_set_score_changes_text_only(font):
    board = Scoreboard(10, 20, 60, 40, 3, ORANGE, font)
    before = board.texture
    board.set_score(12)
    assert board.points_displayed == "12"
    assert board.texture is before


def test_update_rerenders(font):
    board = Scoreboard(10, 20, 60, 40, 1, ORANGE, font)
    narrow = board.texture.get_width()
    board.update(12)
    assert board.points_displayed == "12"
    assert board.texture.get_width() > narrow


def test_update_texture_uses_current_text(font):
    board = Scoreboard(10, 20, 60, 40, 1, ORANGE, font)
    board.set_score(100)
    board.update_texture()
    assert board.texture.get_width() == font.size("100")[0]


def test_scoreboard_draws_inside_rect(font):
    board = Scoreboard(10, 20, 60, 40, 8, ORANGE, font)
    surface = _blank()
    board.draw(surface)
    mask = pygame.mask.from_threshold(surface, ORANGE[:3] + (255,), (1, 1, 1, 255))
    assert mask.count() > 0
    bounds = mask.get_bounding_rects()
    assert bounds
    assert all(board.rect.contains(b) for b in bounds)
    assert board.texture.get_width() == font.size("8")[0]


def test_startscreen_texts(font):
    start = Startscreen(100, 80, 200, 120, ORANGE, font, font)
    assert start.title == "PONG"
    assert start.subtitle == "Starting in 5 seconds"


def test_startscreen_layout(font):
    start = Startscreen(100, 80, 200, 120, ORANGE, font, font)
    assert start.title_rect.topleft == (100, 80)
    assert start.subtitle_rect.top == start.title_rect.bottom
    assert start.subtitle_rect.w == 200 + 100
    assert start.subtitle_rect.h * 4 <= start.title_rect.h


def test_update_countdown(font):
    start = Startscreen(100, 80, 200, 120, ORANGE, font, font)
    start.update_countdown(3)
    assert start.subtitle == "Starting in 3 seconds"
    assert start.subtitle_texture.get_width() == font.size("Starting in 3 seconds")[0]


def test_startscreen_draw(font):
    start = Startscreen(100, 80, 200, 120, ORANGE, font, font)
    surface = _blank((400, 300))
    start.draw(surface)
    assert _has_color(surface, start.title_rect, ORANGE[:3])
    assert surface.get_at((0, 0))[:3] == (0, 0, 0)