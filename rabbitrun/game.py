"""The rabbit runner: main loop tying rules, graphics and sound together."""

import argparse
import logging
import os

os.environ.setdefault("PYGAME_HIDE_SUPPORT_PROMPT", "1")

import pygame  # noqa: E402

from .audio import Audio  # noqa: E402
from .defs import (  # noqa: E402
    BACKGROUND_IMG,
    BGM_PATH,
    LOSE_SOUND_PATH,
    NOTIFICATION_BOARD_IMG,
    RABBIT_CLIPS,
    RABBIT_SPRITE_FILE,
    RABBIT_TICK_DELAY,
    RED_BIRD_CLIPS,
    RED_BIRD_SPRITE_FILE,
    RED_BIRD_TICK_DELAY,
    WIN_SOUND_PATH,
)
from .graphics import Graphics, ScrollingBackground, Sprite  # noqa: E402
from .logic import Game  # noqa: E402

log = logging.getLogger(__name__)

FRAME_DELAY_MS = 16
BACKGROUND_SCROLL = 4
ANIMATION_STEP = 10
RED_BIRD_POS = (110, 50)
RABBIT_DRAW_X = 200


class _Animator:
    """Advances a sprite once its counter reaches the delay."""

    def __init__(self, sprite, delay):
        self.sprite = sprite
        self.delay = delay
        self.counter = 0

    def step(self):
        self.counter += ANIMATION_STEP
        if self.counter >= self.delay:
            self.sprite.tick()
            self.counter = 0


def _parse_args(argv):
    parser = argparse.ArgumentParser(description="Help the rabbit jump over obstacles to reach the carrot.")
    parser.add_argument("--assets", default=".", help="directory holding images, sounds and the font")
    parser.add_argument("--font", default=None, help="font file to use instead of the one in the asset directory")
    parser.add_argument("--frames", type=int, default=0, help="stop after this many frames (0 runs until closed)")
    return parser.parse_args(argv)


def main(argv=None):
    """Run the game until the window is closed; return the exit status."""
    args = _parse_args(argv)
    graphics = Graphics(asset_dir=args.assets, font_path=args.font)
    graphics.init()

    audio = Audio(
        os.path.join(args.assets, BGM_PATH),
        os.path.join(args.assets, WIN_SOUND_PATH),
        os.path.join(args.assets, LOSE_SOUND_PATH),
    )
    try:
        audio.load()
        audio.play_background_music()

        background = ScrollingBackground()
        background.set_texture(graphics.load_texture(BACKGROUND_IMG))
        red_bird = Sprite(graphics.load_texture(RED_BIRD_SPRITE_FILE), RED_BIRD_CLIPS)
        rabbit = Sprite(graphics.load_texture(RABBIT_SPRITE_FILE), RABBIT_CLIPS)

        game = Game(ticks=pygame.time.get_ticks)
        obstacles = game.obstacle_manager
        obstacles.load_textures(graphics)
        board = graphics.load_texture(NOTIFICATION_BOARD_IMG)

        red_bird_animator = _Animator(red_bird, RED_BIRD_TICK_DELAY)
        rabbit_animator = _Animator(rabbit, RABBIT_TICK_DELAY)
        game.init_rabbit()

        lost = won = played_end_sound = False
        frames = 0
        running = True
        while running:
            if any(event.type == pygame.QUIT for event in pygame.event.get()):
                running = False

            if not lost and not won:
                game.handle_input(pygame.key.get_pressed()[pygame.K_SPACE])
                game.update_rabbit()
                obstacles.update()
                background.scroll(BACKGROUND_SCROLL)
                red_bird_animator.step()
                rabbit_animator.step()
                lost = lost or game.game_over
                won = won or game.game_win

            if not played_end_sound:
                if lost:
                    audio.play_lose_sound()
                    played_end_sound = True
                if won:
                    audio.play_win_sound()
                    played_end_sound = True

            graphics.prepare_scene()
            graphics.render_background(background)
            graphics.render_sprite(*RED_BIRD_POS, red_bird)
            graphics.render_sprite(RABBIT_DRAW_X, game.rabbit_y, rabbit)
            obstacles.render(graphics)
            if lost:
                graphics.render_game_over(board)
            if won:
                graphics.render_game_win(board)
            graphics.present_scene()
            pygame.time.wait(FRAME_DELAY_MS)

            frames += 1
            if args.frames and frames >= args.frames:
                running = False
    finally:
        audio.clean_up()
        graphics.quit()
    return 0