"""The application: window, game loop and the command entry point."""

from __future__ import annotations

import os
import random
import sys
from collections.abc import Callable, Sequence

os.environ.setdefault("PYGAME_HIDE_SUPPORT_PROMPT", "1")

import pygame  # noqa: E402

from pypong.ball import Ball  # noqa: E402
from pypong.game_state import GameState  # noqa: E402
from pypong.keyboard import handle_keys, pressed_keys  # noqa: E402
from pypong.racket import Racket  # noqa: E402
from pypong.renderer import Renderer  # noqa: E402

WINDOW_TITLE = "Pong"
DEFAULT_WIDTH = 1020
DEFAULT_HEIGHT = 720
FRAME_MILLISECONDS = 20
SPEEDUP_INTERVAL_MS = 10000
POINT_PAUSE_MS = 500


class App:
    """A Pong window and the loop that plays a match in it."""

    def __init__(
        self,
        width: int,
        height: int,
        *,
        rng: random.Random | None = None,
        clock: Callable[[], int] = pygame.time.get_ticks,
        delay: Callable[[int], object] = pygame.time.delay,
        keys: Callable[[], Sequence[bool]] = pressed_keys,
    ) -> None:
        try:
            pygame.display.init()
        except pygame.error as exc:
            raise RuntimeError(f"failed to initialise video: {exc}") from exc

        self.running = False
        self.screen_width = width
        self.screen_height = height
        self.timedelta = FRAME_MILLISECONDS
        self.game_speed = 1
        self.rng = rng if rng is not None else random.Random()
        self.clock = clock
        self.delay = delay
        self.keys = keys

        try:
            self.window = pygame.display.set_mode((width, height))
        except pygame.error as exc:
            raise RuntimeError(f"failed to create the window: {exc}") from exc
        pygame.display.set_caption(WINDOW_TITLE)

    def set_speed(self, new_speed: int) -> None:
        """Set the multiplier applied to every movement."""
        self.game_speed = new_speed

    def new_game_state(self, rng: random.Random | None = None) -> GameState:
        """Create the opening position with the ball heading in a random direction."""
        width, height = self.screen_width, self.screen_height
        return GameState(
            left=Racket(height // 2, width // 10),
            right=Racket(height // 2, width - width // 10),
            ball=Ball.with_random_speed(height // 2, height // 2, rng or self.rng),
            points_left=0,
            points_right=0,
            screen_width=width,
            screen_height=height,
        )

    def run(self) -> GameState:
        """Show the start screen, then play until the window closes or Escape is hit.

        Returns the state of the match when the loop ends.
        """
        self.running = True
        quit_requested = False

        state = self.new_game_state()
        renderer = Renderer(self.window, state, delay=self.delay)
        renderer.draw_startscreen()

        last_point_ended = 0
        while self.running:
            loop_began = self.clock()
            point_running_for = loop_began - last_point_ended
            self.set_speed(1 + point_running_for // SPEEDUP_INTERVAL_MS)

            for event in pygame.event.get():
                if handle_keys(self.keys(), state, self.game_speed):
                    quit_requested = True
                if event.type == pygame.QUIT:
                    quit_requested = True
                    break

            state.ball.move(self.game_speed)
            state.check_collision()

            if state.check_for_point():
                self.delay(POINT_PAUSE_MS)
                last_point_ended = self.clock()
                state.reset_ball()

            renderer.draw(state)

            while self.clock() < loop_began + self.timedelta:
                self.delay(1)

            if quit_requested:
                break

        self.running = False
        return state


def main(argv: Sequence[str] | None = None) -> int:
    """Open the game window and play."""
    try:
        app = App(DEFAULT_WIDTH, DEFAULT_HEIGHT)
    except RuntimeError as exc:
        print(exc, file=sys.stderr)
        return 1
    try:
        app.run()
    finally:
        pygame.quit()
    return 0


if __name__ == "__main__":
    sys.exit(main())