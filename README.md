# rabbitrun

A small side-scrolling arcade game. A rabbit runs along the ground while
rocks, mushrooms and grass come towards it. Press **Space** to jump over
them. After 30 obstacles have passed, a carrot appears. Reach it to win.
Touch an obstacle and you lose. A "You Lost!" or "Congratulations! You win!"
board then stays on screen until you close the window.

The package also includes a terminal number guessing game.

## Installation

```
pip install .
```

This installs `pygame` as a dependency.

## Playing

```
rabbitrun
```

Options:

- `--assets DIR`: the directory that holds the images, sounds and font.
  The default is the current directory.
- `--font FILE`: the font file to use instead of `arial.ttf` in the asset
  directory.
- `--frames N`: stop after `N` frames. The default, `0`, runs until the
  window is closed.

The asset directory should contain:

- `background.jpg`
- `rock.png`
- `mushroom.png`
- `grass.png`
- `carrot.png`
- `notificationBoard.png`
- `redbird.png`
- `rabbit.png`
- `arial.ttf`
- `backgroundMusic.mp3`
- `gameWinSound.wav`
- `gameLoseSound.wav`

If an image or sound cannot be loaded, the game logs an error and runs
without it. If the font cannot be loaded, or the window cannot be opened,
the game stops with a `rabbitrun.graphics.GraphicsError`.

## Guessing game

```
rabbitrun-guess
```

The game picks a secret number from 1 to 100. After each guess it tells you
whether your number is too big or too small, and it ends when you guess the
number. If you enter something that is not a whole number, it asks again.
If input ends before you guess the number, the command exits with status 1.

## Using the game logic

The game rules live in `rabbitrun.logic` and need no window. `Game` holds
the rabbit's state and owns an `ObstacleManager`, available as
`game.obstacle_manager`. The manager spawns and moves the obstacles, checks
for collisions, and sets `game.game_over` or `game.game_win`. You can pass
`Game` a tick source in milliseconds and a random number generator to
control the timing and the order of obstacles:

```python
import random
from rabbitrun.logic import Game

clock = iter(range(0, 1_000_000, 16))
game = Game(ticks=lambda: next(clock), rng=random.Random(1))

game.handle_input(True)          # start a jump
game.update_rabbit()             # apply gravity for one frame
game.obstacle_manager.update()   # move obstacles, spawn new ones, check hits
print(game.rabbit_y, game.game_over, game.game_win)
```

The module also provides the collision helpers `Rect`, `check_collision`,
`rabbit_collider`, `obstacle_collider` and `check_collision_by_type`.
`Game.reset()` starts a run over. The `rabbitrun` command does not offer a
restart, so close the window and start it again to play another round.

## Running the tests

```
pip install .[test]
pytest
```