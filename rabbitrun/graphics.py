"""Window, textures, sprites, the scrolling background and on-screen text."""

import logging
import os
from dataclasses import dataclass
from typing import Any

os.environ.setdefault("PYGAME_HIDE_SUPPORT_PROMPT", "1")

import pygame  # noqa: E402

from .defs import SCREEN_HEIGHT, SCREEN_WIDTH, WINDOW_TITLE  # noqa: E402

log = logging.getLogger(__name__)

FONT_FILE = "arial.ttf"
FONT_SIZE = 22
TEXT_COLOR = (165, 104, 73)
BOARD_WIDTH = 400
BOARD_HEIGHT = 200
BOARD_TEXT_MARGIN = 40
LOSE_MESSAGE = "You Lost!"
WIN_MESSAGE = "Congratulations! You win!"


class GraphicsError(RuntimeError):
    """Raised when the display, image support or font cannot be set up."""


@dataclass
class ScrollingBackground:
    """A texture drawn twice side by side so it can scroll endlessly to the left."""

    texture: Any = None
    scrolling_offset: int = 0
    width: int = 0
    height: int = 0

    def set_texture(self, texture):
        """Use a new texture and take its size."""
        self.texture = texture
        self.width, self.height = texture.get_size() if texture is not None else (0, 0)

    def scroll(self, distance):
        """Move the background left by distance, wrapping after a full width."""
        self.scrolling_offset -= distance
        if self.scrolling_offset <= -self.width:
            self.scrolling_offset += self.width

    def set_x(self, new_x):
        self.scrolling_offset = new_x


class Sprite:
    """An animation: a sprite sheet and the clips of its frames."""

    def __init__(self, texture, clips):
        self.texture = texture
        self.clips = [pygame.Rect(clip) for clip in clips]
        self.current_frame = 0

    def tick(self):
        """Advance to the next frame, wrapping to the first."""
        self.current_frame = (self.current_frame + 1) % len(self.clips)

    def current_clip(self):
        return self.clips[self.current_frame]

    def reset(self):
        self.current_frame = 0


def _wrap_lines(font, message, max_width):
    lines = []
    for paragraph in message.split("\n"):
        line = ""
        for word in paragraph.split():
            candidate = f"{line} {word}" if line else word
            if line and font.size(candidate)[0] > max_width:
                lines.append(line)
                line = word
            else:
                line = candidate
        lines.append(line)
    return lines


class Graphics:
    """Draws textures, sprites and text onto the game window."""

    def __init__(self, asset_dir=".", font_path=None, screen=None):
        self.asset_dir = asset_dir
        self.font_path = font_path if font_path is not None else os.path.join(asset_dir, FONT_FILE)
        self.screen = screen
        self.font = None

    def _fail(self, msg, error):
        log.error("%s: %s", msg, error)
        pygame.quit()
        return GraphicsError(f"{msg}: {error}")

    def init(self):
        """Open the window and load the font; raise GraphicsError on failure."""
        pygame.init()
        if not pygame.display.get_init():
            raise self._fail("Display init", pygame.get_error())
        try:
            self.screen = pygame.display.set_mode((SCREEN_WIDTH, SCREEN_HEIGHT))
        except pygame.error as exc:
            raise self._fail("CreateWindow", exc) from exc
        pygame.display.set_caption(WINDOW_TITLE)

        if not pygame.image.get_extended():
            raise self._fail("Image support", "PNG and JPG loading unavailable")

        try:
            pygame.font.init()
            self.font = pygame.font.Font(self.font_path, FONT_SIZE)
        except (OSError, pygame.error) as exc:
            raise self._fail("Failed to load font", exc) from exc

    def prepare_scene(self, background=None):
        """Clear to black and, if given, stretch a background over the whole screen."""
        self.screen.fill((0, 0, 0))
        if background is not None:
            self.screen.blit(pygame.transform.scale(background, self.screen.get_size()), (0, 0))

    def render_background(self, bgr):
        """Draw the scrolling background and its wrapped-around copy."""
        self.render_texture(bgr.texture, bgr.scrolling_offset, 0)
        self.render_texture(bgr.texture, bgr.scrolling_offset + bgr.width, 0)

    def render_texture(self, texture, x, y):
        """Draw a texture at its own width, stretched to the screen height."""
        if texture is None:
            return
        scaled = pygame.transform.scale(texture, (texture.get_width(), SCREEN_HEIGHT))
        self.screen.blit(scaled, (int(x), int(y)))

    def blit_rect(self, texture, src, x, y):
        """Copy the src part of a texture (all of it when src is None) unscaled."""
        if texture is None:
            return
        self.screen.blit(texture, (int(x), int(y)), area=src)

    def present_scene(self):
        pygame.display.flip()

    def load_texture(self, filename):
        """Load an image from the asset directory; return None if it cannot be read."""
        path = os.path.join(self.asset_dir, filename)
        log.info("Loading %s", path)
        try:
            texture = pygame.image.load(path)
        except (pygame.error, FileNotFoundError) as exc:
            log.error("Load texture failed: %s", exc)
            return None
        if pygame.display.get_surface() is not None:
            texture = texture.convert_alpha()
        return texture

    def quit(self):
        """Release the font and shut the display down."""
        self.font = None
        pygame.font.quit()
        self.screen = None
        pygame.quit()

    def render_sprite(self, x, y, sprite):
        """Draw the sprite's current frame at its natural size."""
        if sprite.texture is None:
            return
        self.screen.blit(sprite.texture, (int(x), int(y)), area=sprite.current_clip())

    def render(self, x, y, texture, width, height):
        """Draw a texture stretched to width by height."""
        if texture is None:
            return
        scaled = pygame.transform.scale(texture, (int(width), int(height)))
        self.screen.blit(scaled, (int(x), int(y)))

    def render_obstacle(self, x, y, radius, texture):
        """Draw a texture filling the square around a circle."""
        size = int(radius * 2)
        self.render(int(x - radius), int(y - radius), texture, size, size)

    def _render_board(self, board, message):
        board_x = (SCREEN_WIDTH - BOARD_WIDTH) // 2
        board_y = (SCREEN_HEIGHT - BOARD_HEIGHT) // 2
        self.render(board_x, board_y, board, BOARD_WIDTH, BOARD_HEIGHT)
        self.render_text(
            message,
            board_x + BOARD_WIDTH // 2,
            board_y + BOARD_HEIGHT // 2,
            BOARD_WIDTH - BOARD_TEXT_MARGIN,
        )

    def render_game_over(self, board):
        self._render_board(board, LOSE_MESSAGE)

    def render_game_win(self, board):
        self._render_board(board, WIN_MESSAGE)

    def render_text(self, message, x, y, max_width):
        """Draw word-wrapped text centred on (x, y)."""
        if self.font is None:
            log.error("Unable to render text: no font loaded")
            return
        rendered = [self.font.render(line, True, TEXT_COLOR) for line in _wrap_lines(self.font, message, max_width)]
        line_height = self.font.get_linesize()
        width = max(max(surface.get_width() for surface in rendered), 1)
        height = line_height * len(rendered)
        text = pygame.Surface((width, height), pygame.SRCALPHA)
        for row, surface in enumerate(rendered):
            text.blit(surface, (0, row * line_height))
        self.screen.blit(text, (int(x) - width // 2, int(y) - height // 2))