"""A player's racket."""

from __future__ import annotations

from dataclasses import dataclass

from pypong.ball import Ball

_STEP = 5


@dataclass
class Racket:
    """A vertical racket positioned by its top-left corner."""

    vertical_pos: int = 0
    horizontal_pos: int = 0
    width: int = 10
    length: int = 100

    def move_up(self, game_speed: int = 1) -> None:
        """Move up unless the racket is already above the top edge."""
        if self.vertical_pos >= 0:
            self.vertical_pos -= _STEP * game_speed

    def move_down(self, game_speed: int = 1, screen_height: int = 720) -> None:
        """Move down unless the racket already reaches the bottom edge."""
        if self.vertical_pos <= screen_height - self.length:
            self.vertical_pos += _STEP * game_speed

    def move_right(
        self, game_speed: int = 1, screen_width: int = 720, left: bool = True
    ) -> None:
        """Move right; the left racket stays in its own half."""
        if (left and self.horizontal_pos + self.width <= screen_width // 2) or (
            not left and self.horizontal_pos <= screen_width
        ):
            self.horizontal_pos += _STEP * game_speed

    def move_left(
        self, game_speed: int = 1, screen_width: int = 720, left: bool = True
    ) -> None:
        """Move left; the right racket stays in its own half."""
        if (left and self.horizontal_pos >= 0) or (
            not left and self.horizontal_pos >= screen_width // 2
        ):
            self.horizontal_pos -= _STEP * game_speed

    def check_collision(self, ball: Ball, left: bool) -> bool:
        """Tell whether the ball touches this racket.

        The ball must lie vertically within the racket; horizontally the left
        racket is hit by the ball's left edge, the right racket by its right edge.
        """
        within_vertically = (
            self.vertical_pos + self.length >= ball.v_pos + ball.height
            and self.vertical_pos <= ball.v_pos
        )
        if not within_vertically:
            return False
        if left:
            edge = ball.h_pos
        else:
            edge = ball.h_pos + ball.width
            if not self.horizontal_pos + self.width >= edge:
                return False
            return self.horizontal_pos <= edge
        return self.horizontal_pos <= edge <= self.horizontal_pos + self.width