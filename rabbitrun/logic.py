"""Game rules: rabbit physics, obstacles, collisions and the winning carrot."""

import logging
import random
import time
from dataclasses import dataclass

from .defs import (
    CARROT_IMG,
    GRASS_IMG,
    MUSHROOM_IMG,
    OBSTACLE_SPAWN_INTERVAL,
    OBSTACLE_SPEED,
    ROCK_IMG,
    SCREEN_WIDTH,
    Obstacle,
)

log = logging.getLogger(__name__)

GRAVITY = 0.30
JUMP_STRENGTH = -13.0
GROUND_Y = 380.0
GRAVITY_UP = 0.30
GRAVITY_DOWN = 0.30
MAX_JUMP_HEIGHT = 0.0

RABBIT_X = 245
RABBIT_COLLIDER_OFFSET_Y = 45
RABBIT_COLLIDER_W = 130
RABBIT_COLLIDER_H = 80
CARROT_WIDTH = 100
CARROT_HEIGHT = 100
CARROT_OFFSET_X = 230
GROUND_OFFSET_Y = 50
PASS_LINE_X = 100
OBSTACLES_TO_WIN = 30

# Spawn table indexed by a random number in 0..2: (type, size, radius).
_OBSTACLE_KINDS = (
    ("rock", 140, 70),
    ("mushroom", 120, 0),
    ("grass", 140, 70),
)
_OBSTACLE_IMAGES = {"rock": ROCK_IMG, "mushroom": MUSHROOM_IMG, "grass": GRASS_IMG}


@dataclass(frozen=True)
class Rect:
    """An axis-aligned rectangle."""

    x: int
    y: int
    w: int
    h: int


def check_collision(a, b):
    """Return True when two rectangles overlap (touching edges do not count)."""
    return a.x < b.x + b.w and a.x + a.w > b.x and a.y < b.y + b.h and a.y + a.h > b.y


def rabbit_collider(rabbit_y):
    """Return the rabbit's hit box for the given vertical position."""
    return Rect(RABBIT_X, int(rabbit_y) + RABBIT_COLLIDER_OFFSET_Y, RABBIT_COLLIDER_W, RABBIT_COLLIDER_H)


def obstacle_collider(obs):
    """Return the hit box of an obstacle."""
    if obs.radius > 0:
        return Rect(obs.x + obs.radius, obs.y + obs.radius, obs.radius * 2, obs.radius * 2)
    return Rect(obs.x + 15, obs.y + 10, obs.width - 30, obs.height - 20)


def check_collision_by_type(rabbit_rect, obs):
    """Test the rabbit against an obstacle using the shape that suits its type."""
    if obs.type == "mushroom":
        return check_collision(rabbit_rect, obstacle_collider(obs))
    if obs.radius > 0:
        rabbit_cx = rabbit_rect.x + rabbit_rect.w // 2
        rabbit_cy = rabbit_rect.y + rabbit_rect.h // 2
        rabbit_radius = min(rabbit_rect.w, rabbit_rect.h) // 2
        dx = rabbit_cx - (obs.x + obs.radius)
        dy = rabbit_cy - (obs.y + obs.radius)
        radius_sum = rabbit_radius + obs.radius
        return dx * dx + dy * dy <= radius_sum * radius_sum
    return False


def _clock_ms():
    start = time.monotonic()
    return lambda: int((time.monotonic() - start) * 1000)


class ObstacleManager:
    """Spawns, moves and renders obstacles and the carrot at the end of the run."""

    def __init__(self, game, ticks=None, rng=None):
        self._game = game
        self._ticks = ticks if ticks is not None else _clock_ms()
        self._rng = rng if rng is not None else random.Random()
        self._textures = dict.fromkeys(_OBSTACLE_IMAGES)
        self._last_spawn_time = 0
        self.obstacles = []
        self.obstacles_cleared = 0
        self.carrot_appeared = False
        self.carrot_x = float(SCREEN_WIDTH)
        self.carrot_texture = None

    def load_textures(self, graphics):
        """Load any obstacle and carrot textures not loaded yet."""
        for kind, path in _OBSTACLE_IMAGES.items():
            if self._textures[kind] is None:
                self._textures[kind] = graphics.load_texture(path)
        if self.carrot_texture is None:
            self.carrot_texture = graphics.load_texture(CARROT_IMG)

    def update(self):
        """Advance obstacles and the carrot by one frame and settle win or loss."""
        game = self._game
        if game.game_over or game.game_win:
            return

        now = self._ticks()
        # Elapsed time is measured as a 32-bit unsigned difference.
        if (now - self._last_spawn_time) & 0xFFFFFFFF >= OBSTACLE_SPAWN_INTERVAL:
            self._spawn_obstacle()
            self._last_spawn_time = now

        for obs in self.obstacles:
            obs.x -= OBSTACLE_SPEED
            if not obs.passed and obs.x + obs.width < PASS_LINE_X:
                obs.passed = True
                self.obstacles_cleared += 1
                if self.obstacles_cleared >= OBSTACLES_TO_WIN and not self.carrot_appeared:
                    self.carrot_appeared = True
                    self.carrot_x = float(SCREEN_WIDTH)

        self.obstacles[:] = [obs for obs in self.obstacles if obs.x + obs.width >= 0]

        rabbit_rect = rabbit_collider(game.rabbit_y)
        if any(check_collision_by_type(rabbit_rect, obs) for obs in self.obstacles):
            game.game_over = True
            return

        if self.carrot_appeared:
            carrot_rect = Rect(
                int(self.carrot_x + CARROT_OFFSET_X),
                int(GROUND_Y + GROUND_OFFSET_Y),
                CARROT_WIDTH,
                CARROT_HEIGHT,
            )
            if check_collision(rabbit_rect, carrot_rect):
                game.game_win = True
            self.carrot_x -= OBSTACLE_SPEED

    def render(self, graphics):
        """Draw every obstacle and, once it has appeared, the carrot."""
        for obs in self.obstacles:
            graphics.render(obs.x, obs.y, obs.texture, obs.width, obs.height)
        if self.carrot_appeared:
            graphics.render(
                int(self.carrot_x + CARROT_OFFSET_X),
                int(GROUND_Y + GROUND_OFFSET_Y),
                self.carrot_texture,
                CARROT_WIDTH,
                CARROT_HEIGHT,
            )

    def reset(self):
        """Clear obstacles and progress towards the carrot."""
        self.obstacles.clear()
        self._last_spawn_time = self._ticks() + 1000
        self.obstacles_cleared = 0
        self.carrot_appeared = False
        self._game.game_win = False
        self.carrot_x = float(SCREEN_WIDTH)

    def _spawn_obstacle(self):
        kind, size, radius = _OBSTACLE_KINDS[self._rng.randrange(3)]
        self.obstacles.append(
            Obstacle(
                texture=self._textures[kind],
                x=SCREEN_WIDTH,
                y=int(GROUND_Y + GROUND_OFFSET_Y),
                width=size,
                height=size,
                radius=radius,
                type=kind,
            )
        )


class Game:
    """The rabbit's state plus the obstacle course it runs through."""

    def __init__(self, ticks=None, rng=None):
        self.rabbit_y = GROUND_Y
        self.velocity_y = 0.0
        self.is_jumping = False
        self.game_over = False
        self.game_win = False
        self.obstacle_manager = ObstacleManager(self, ticks, rng)

    def init_rabbit(self):
        """Put the rabbit back on the ground, at rest."""
        self.rabbit_y = GROUND_Y
        self.velocity_y = 0.0
        self.is_jumping = False

    def handle_input(self, jump_pressed):
        """Start a jump if the jump key is held and the rabbit is on the ground."""
        if self.game_over or self.game_win or self.is_jumping:
            return
        if jump_pressed:
            self.velocity_y = JUMP_STRENGTH
            self.is_jumping = True

    def update_rabbit(self):
        """Apply gravity for one frame."""
        if self.game_over or self.game_win:
            return
        self.velocity_y += GRAVITY_UP if self.velocity_y < 0 else GRAVITY_DOWN
        self.rabbit_y += self.velocity_y
        if self.rabbit_y < MAX_JUMP_HEIGHT:
            self.rabbit_y = MAX_JUMP_HEIGHT
            self.velocity_y = 0.0
        if self.rabbit_y >= GROUND_Y:
            self.rabbit_y = GROUND_Y
            self.velocity_y = 0.0
            self.is_jumping = False

    def reset(self):
        """Start the run over."""
        self.init_rabbit()
        self.game_over = False
        self.game_win = False
        self.obstacle_manager.reset()
        log.info("Game reset complete - rabbitY: %.1f, gameOver: %d", self.rabbit_y, self.game_over)