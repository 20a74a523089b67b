"""Screen geometry, asset paths, timing constants and sprite clip tables."""

from dataclasses import dataclass
from typing import Any

SCREEN_WIDTH = 800
SCREEN_HEIGHT = 600
WINDOW_TITLE = "Hello World!"

BACKGROUND_IMG = "background.jpg"
ROCK_IMG = "rock.png"
MUSHROOM_IMG = "mushroom.png"
GRASS_IMG = "grass.png"
CARROT_IMG = "carrot.png"
NOTIFICATION_BOARD_IMG = "notificationBoard.png"

BGM_PATH = "backgroundMusic.mp3"
WIN_SOUND_PATH = "gameWinSound.wav"
LOSE_SOUND_PATH = "gameLoseSound.wav"

RED_BIRD_TICK_DELAY = 100
RABBIT_TICK_DELAY = 90
OBSTACLE_SPAWN_INTERVAL = 4000
OBSTACLE_SPEED = 4

RED_BIRD_SPRITE_FILE = "redbird.png"
RED_BIRD_CLIPS = (
    (0, 0, 182, 168),
    (181, 0, 182, 168),
    (364, 0, 182, 168),
    (547, 0, 182, 168),
    (728, 0, 182, 168),
    (0, 170, 182, 168),
    (181, 170, 182, 168),
    (364, 170, 182, 168),
    (547, 170, 182, 168),
    (728, 170, 182, 168),
    (0, 340, 182, 168),
    (181, 340, 182, 168),
    (364, 340, 182, 168),
    (547, 340, 182, 168),
)
RED_BIRD_FRAMES = len(RED_BIRD_CLIPS)

RABBIT_SPRITE_FILE = "rabbit.png"
RABBIT_CLIPS = (
    (0, 0, 200, 180),
    (200, 0, 200, 180),
    (400, 0, 200, 180),
    (0, 180, 200, 180),
    (200, 180, 200, 180),
    (400, 180, 200, 180),
)
RABBIT_FRAMES = len(RABBIT_CLIPS)


@dataclass
class Obstacle:
    """An obstacle sliding towards the rabbit."""

    texture: Any
    x: int
    y: int
    width: int
    height: int
    radius: int
    type: str
    passed: bool = False