import os

os.environ.setdefault("SDL_VIDEODRIVER", "dummy")
os.environ.setdefault("SDL_AUDIODRIVER", "dummy")

import pygame  # noqa: E402
import pytest  # noqa: E402

from rabbitrun.defs import RABBIT_CLIPS, SCREEN_HEIGHT, SCREEN_WIDTH  # noqa: E402
from rabbitrun.graphics import (  # noqa: E402
    BOARD_HEIGHT,
    BOARD_WIDTH,
    Graphics,
    ScrollingBackground,
    Sprite,
)

RED = (255, 0, 0, 255)
GREEN = (0, 255, 0, 255)
BLUE = (0, 0, 255, 255)
BLACK = (0, 0, 0, 255)


def _solid(size, color):
    surface = pygame.Surface(size)
    surface.fill(color)
    return surface


@pytest.fixture
def font():
    pygame.font.init()
    return pygame.font.Font(None, 22)


def _bounding_box(surface):
    xs, ys = [], []
    for x in range(surface.get_width()):
        for y in range(surface.get_height()):
            if surface.get_at((x, y)) != BLACK:
                xs.append(x)
                ys.append(y)
    return min(xs), min(ys), max(xs), max(ys)


def test_set_texture_takes_size():
    bgr = ScrollingBackground()
    bgr.set_texture(pygame.Surface((30, 12)))
    assert (bgr.width, bgr.height) == (30, 12)


def test_scroll_stays_within_one_width():
    bgr = ScrollingBackground()
    bgr.set_texture(pygame.Surface((50, 10)))
    for _ in range(200):
        bgr.scroll(4)
        assert -bgr.width < bgr.scrolling_offset <= 0


def test_scroll_wraps_exactly_at_width():
    bgr = ScrollingBackground()
    bgr.set_texture(pygame.Surface((50, 10)))
    bgr.scroll(50)
    assert bgr.scrolling_offset == 0


def test_set_x():
    bgr = ScrollingBackground()
    bgr.set_x(-7)
    assert bgr.scrolling_offset == -7


def test_sprite_clips_and_wrap():
    sprite = Sprite(None, RABBIT_CLIPS)
    assert sprite.current_clip() == pygame.Rect(RABBIT_CLIPS[0])
    sprite.tick()
    assert sprite.current_clip() == pygame.Rect(RABBIT_CLIPS[1])
    for _ in range(len(RABBIT_CLIPS) - 1):
        sprite.tick()
    assert sprite.current_frame == 0


def test_sprite_reset():
    sprite = Sprite(None, RABBIT_CLIPS)
    sprite.tick()
    sprite.tick()
    sprite.reset()
    assert sprite.current_clip() == pygame.Rect(RABBIT_CLIPS[0])


def test_render_sprite_draws_current_frame():
    sheet = pygame.Surface((4, 2))
    sheet.fill(RED, pygame.Rect(0, 0, 2, 2))
    sheet.fill(BLUE, pygame.Rect(2, 0, 2, 2))
    sprite = Sprite(sheet, [(0, 0, 2, 2), (2, 0, 2, 2)])
    graphics = Graphics(screen=pygame.Surface((10, 10)))
    graphics.render_sprite(0, 0, sprite)
    assert graphics.screen.get_at((0, 0)) == RED
    assert graphics.screen.get_at((2, 0)) == BLACK
    sprite.tick()
    graphics.render_sprite(0, 0.7, sprite)
    assert graphics.screen.get_at((0, 0)) == BLUE


def test_render_stretches_texture():
    graphics = Graphics(screen=pygame.Surface((50, 50)))
    graphics.render(10, 10, _solid((4, 4), RED), 20, 20)
    assert graphics.screen.get_at((29, 29)) == RED
    assert graphics.screen.get_at((30, 30)) == BLACK
    assert graphics.screen.get_at((9, 9)) == BLACK


def test_render_none_texture_is_ignored():
    graphics = Graphics(screen=_solid((5, 5), GREEN))
    graphics.render(0, 0, None, 5, 5)
    assert graphics.screen.get_at((2, 2)) == GREEN


def test_render_obstacle_centres_square():
    graphics = Graphics(screen=pygame.Surface((40, 40)))
    graphics.render_obstacle(20.0, 20.0, 5.0, _solid((2, 2), GREEN))
    assert graphics.screen.get_at((15, 15)) == GREEN
    assert graphics.screen.get_at((24, 24)) == GREEN
    assert graphics.screen.get_at((25, 25)) == BLACK


def test_prepare_scene_clears_and_fills():
    graphics = Graphics(screen=_solid((8, 8), RED))
    graphics.prepare_scene()
    assert graphics.screen.get_at((4, 4)) == BLACK
    graphics.prepare_scene(_solid((2, 2), GREEN))
    assert graphics.screen.get_at((7, 7)) == GREEN


def test_render_background_covers_full_height():
    graphics = Graphics(screen=pygame.Surface((40, SCREEN_HEIGHT)))
    bgr = ScrollingBackground()
    bgr.set_texture(_solid((10, 5), GREEN))
    bgr.set_x(-4)
    graphics.render_background(bgr)
    assert graphics.screen.get_at((0, SCREEN_HEIGHT - 1)) == GREEN
    assert graphics.screen.get_at((bgr.scrolling_offset + 2 * bgr.width, 0)) == BLACK


def test_blit_rect_whole_and_part():
    texture = pygame.Surface((4, 2))
    texture.fill(RED, pygame.Rect(0, 0, 2, 2))
    texture.fill(BLUE, pygame.Rect(2, 0, 2, 2))
    graphics = Graphics(screen=pygame.Surface((10, 10)))
    graphics.blit_rect(texture, None, 0, 0)
    assert graphics.screen.get_at((3, 1)) == BLUE
    graphics.blit_rect(texture, pygame.Rect(2, 0, 2, 2), 5, 5)
    assert graphics.screen.get_at((5, 5)) == BLUE
    assert graphics.screen.get_at((7, 5)) == BLACK


def test_load_texture_missing_returns_none(tmp_path):
    graphics = Graphics(asset_dir=str(tmp_path))
    assert graphics.load_texture("nothing.png") is None


def test_load_texture_round_trip(tmp_path):
    pygame.image.save(_solid((6, 3), RED), str(tmp_path / "tile.png"))
    texture = Graphics(asset_dir=str(tmp_path)).load_texture("tile.png")
    assert texture.get_size() == (6, 3)
    assert texture.get_at((1, 1))[:3] == RED[:3]


def test_render_text_centred(font):
    graphics = Graphics(screen=pygame.Surface((200, 100)))
    graphics.font = font
    graphics.render_text("Hi", 100, 50, 180)
    left, top, right, bottom = _bounding_box(graphics.screen)
    assert abs((left + right) / 2 - 100) <= 3
    assert abs((top + bottom) / 2 - 50) <= 6


def test_render_text_wraps_to_width(font):
    single = Graphics(screen=pygame.Surface((200, 120)))
    single.font = font
    single.render_text("one two three four", 100, 60, 190)
    wrapped = Graphics(screen=pygame.Surface((200, 120)))
    wrapped.font = font
    wrapped.render_text("one two three four", 100, 60, 40)
    s_left, s_top, s_right, s_bottom = _bounding_box(single.screen)
    w_left, w_top, w_right, w_bottom = _bounding_box(wrapped.screen)
    assert w_bottom - w_top > s_bottom - s_top
    assert w_right - w_left < s_right - s_left


def test_render_text_without_font_leaves_screen():
    graphics = Graphics(screen=_solid((10, 10), GREEN))
    graphics.render_text("Hi", 5, 5, 10)
    assert graphics.screen.get_at((5, 5)) == GREEN


def test_render_game_over_draws_centred_board(font):
    graphics = Graphics(screen=pygame.Surface((SCREEN_WIDTH, SCREEN_HEIGHT)))
    graphics.font = font
    graphics.render_game_over(_solid((10, 10), RED))
    board_left = (SCREEN_WIDTH - BOARD_WIDTH) // 2
    board_top = (SCREEN_HEIGHT - BOARD_HEIGHT) // 2
    assert graphics.screen.get_at((board_left + 1, SCREEN_HEIGHT // 2)) == RED
    assert graphics.screen.get_at((board_left - 1, SCREEN_HEIGHT // 2)) == BLACK
    assert graphics.screen.get_at((SCREEN_WIDTH // 2, board_top - 1)) == BLACK


def test_render_game_win_draws_board_and_text(font):
    graphics = Graphics(screen=pygame.Surface((SCREEN_WIDTH, SCREEN_HEIGHT)))
    graphics.font = font
    graphics.render_game_win(_solid((10, 10), RED))
    centre_row = [graphics.screen.get_at((x, SCREEN_HEIGHT // 2)) for x in range(SCREEN_WIDTH)]
    assert any(color not in (RED, BLACK) for color in centre_row)
    assert graphics.screen.get_at((0, 0)) == BLACK