"""The ball: its position, speed and movement."""

from __future__ import annotations

import random
from dataclasses import dataclass

_START_SPEEDS = (-1, 1, -2, 2)


@dataclass
class Ball:
    """A square ball that moves by its speed times the game speed each tick."""

    v_pos: int = 0
    h_pos: int = 0
    v_speed: int = 0
    h_speed: int = 0
    width: int = 10
    height: int = 10

    @classmethod
    def with_random_speed(
        cls, v_pos: int, h_pos: int, rng: random.Random | None = None
    ) -> Ball:
        """Create a ball at the given position heading in a random direction.

        The horizontal speed is -1 or 1; the vertical speed is one of -1, 1, -2, 2.
        """
        rng = rng if rng is not None else random.Random()
        h_speed = _START_SPEEDS[rng.randrange(2)]
        v_speed = _START_SPEEDS[rng.randrange(4)]
        return cls(v_pos=v_pos, h_pos=h_pos, v_speed=v_speed, h_speed=h_speed)

    def move(self, game_speed: int) -> None:
        """Advance the ball by one tick at the given game speed."""
        self.v_pos += game_speed * self.v_speed
        self.h_pos += game_speed * self.h_speed

    def set_speed(self, v_speed: int, h_speed: int) -> None:
        """Replace both speed components."""
        self.v_speed = v_speed
        self.h_speed = h_speed