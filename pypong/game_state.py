"""The complete state of a match: rackets, ball, score and field size."""

from __future__ import annotations

from dataclasses import dataclass, field

from pypong.ball import Ball
from pypong.racket import Racket

_POINTS_LIMIT = 1 << 16


@dataclass
class GameState:
    """Rackets, ball and score on a field of the given size."""

    left: Racket = field(default_factory=lambda: Racket(360, 10))
    right: Racket = field(default_factory=lambda: Racket(360, 710))
    ball: Ball = field(default_factory=lambda: Ball(360, 360, -1, 1))
    points_left: int = 0
    points_right: int = 0
    screen_width: int = 720
    screen_height: int = 720

    def check_collision(self) -> None:
        """Bounce the ball off a racket or off the top and bottom walls."""
        ball = self.ball
        if self.left.check_collision(ball, True) or self.right.check_collision(
            ball, False
        ):
            ball.set_speed(ball.v_speed, -ball.h_speed)
        elif 0 < ball.h_pos < self.screen_width and (
            ball.v_pos <= 0 or ball.v_pos >= self.screen_height
        ):
            ball.set_speed(-ball.v_speed, ball.h_speed)

    def check_for_point(self) -> bool:
        """Award a point if the ball has left the field; tell whether it did."""
        if self.ball.h_pos + 2 * self.ball.width < 0:
            self.points_right = (self.points_right + 1) % _POINTS_LIMIT
            return True
        if self.ball.h_pos > self.screen_width:
            self.points_left = (self.points_left + 1) % _POINTS_LIMIT
            return True
        return False

    def reset_ball(self) -> None:
        """Put a fresh ball in the middle of the field moving down and right."""
        self.ball = Ball(self.screen_height // 2, self.screen_width // 2, 1, 1)