# pypong

Pong for two players who share one keyboard. It uses pygame.

## Install

    pip install .

## Play

    pypong

This opens a 1020×720 window titled "Pong". A start screen shows the title
and counts down five seconds. Then the ball starts moving in a random
direction: left or right, and up or down at one of two speeds.

| Key        | Action                   |
|------------|--------------------------|
| `W` / `S`  | left racket up / down    |
| `↑` / `↓`  | right racket up / down   |
| `Esc`      | quit                     |

Closing the window also quits. If the window cannot be created, `pypong`
prints the error and exits with status 1.

The ball bounces off the rackets and off the top and bottom edges. A player
scores when the ball leaves the field past the other player's racket, and
both scores are shown at the top of the screen. After a point the game pauses
for half a second. Then the ball starts again from the centre of the field,
moving down and to the right. The longer a point lasts, the faster the game
gets: every ten seconds the speed multiplier goes up by one.

The game runs at about 50 frames per second.

### Fonts

The score and title text use `./build/Monument.ttf`, and the countdown uses
`./build/SLC_.ttf`. Both paths are relative to the directory you start the
game from. If a font file is missing, pygame's default font is used instead.

## Using the pieces

The game rules in `pypong.ball`, `pypong.racket` and `pypong.game_state` do
not import pygame and can be used on their own:

    from pypong.game_state import GameState

    state = GameState()
    state.ball.move(1)
    state.check_collision()
    if state.check_for_point():
        state.reset_ball()

- `pypong.ball.Ball` holds a position and a speed. Use `Ball.with_random_speed`
  to create a ball with a random starting direction.
- `pypong.racket.Racket` holds a racket. It can move within the field and
  check whether it collides with a ball.
- `pypong.game_state.GameState` holds both rackets, the ball, the score and
  the field size.
- `pypong.keyboard.handle_keys(pressed, state, game_speed)` applies a
  key-state sequence to a game state. It returns `True` when Escape is down.
  `pypong.keyboard.pressed_keys()` reads the current key states from pygame.
- `pypong.renderer.Renderer` draws a state onto a pygame surface.
  `pypong.shapes` and `pypong.scoreboard` hold the shapes and text elements
  it draws with.
- `pypong.app.App` opens the window and runs the game loop. `pypong.app.main`
  is the entry point of the `pypong` command.

## What it does not do

- There is no computer opponent. Both rackets are played from the keyboard.
- There is no network play.
- A match has no score limit. It runs until a player quits.
- The command takes no options. The window size and the key bindings are
  fixed.

## Tests

    pip install ".[test]"
    pytest