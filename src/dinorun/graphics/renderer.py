"""Draws a FrameSnapshot into a numpy RGB buffer."""

from typing import Dict, Mapping, Optional
import logging

import numpy as np
from numpy.typing import NDArray

from dinorun.core.state import GameState
from dinorun.game import sprites
from dinorun.game.geometry import Hitbox
from dinorun.game.snapshot import FrameSnapshot, SpriteDraw
from dinorun.game.sprites import SpriteAtlas
from dinorun.graphics.primitives import (
    Buffer, Color, clear, draw_hline, draw_image, draw_rect, draw_text, text_width
)

logger = logging.getLogger(__name__)

BACKGROUND = (255, 255, 255)
INK = (83, 83, 83)  # #535353
CLOUD_GREY = (218, 218, 218)
HIGHLIGHT = (255, 170, 0)

# Flat colors used when no artwork is loaded
DEFAULT_PALETTE: Dict[str, Color] = {
    sprites.RUN_1: INK,
    sprites.RUN_2: INK,
    sprites.DUCK_1: INK,
    sprites.DUCK_2: INK,
    sprites.JUMP: INK,
    sprites.DEAD: (150, 60, 60),
    sprites.GROUND_HAZARD_SMALL: (70, 120, 70),
    sprites.GROUND_HAZARD_MEDIUM: (60, 110, 60),
    sprites.GROUND_HAZARD_LARGE: (50, 100, 50),
    sprites.FLYING_HAZARD_1: (110, 90, 140),
    sprites.FLYING_HAZARD_2: (120, 100, 150),
    sprites.CLOUD: CLOUD_GREY,
}


class FrameRenderer:
    """Stateless renderer for game frames.

    With `images` (sprite name -> RGB/RGBA array) it blits artwork,
    otherwise each sprite is a flat box of its atlas size.
    """

    SCORE_SCALE = 3
    TRACK_DASH_SPACING = 37

    def __init__(
        self,
        atlas: SpriteAtlas,
        images: Optional[Mapping[str, NDArray[np.uint8]]] = None,
        palette: Optional[Mapping[str, Color]] = None,
    ) -> None:
        self.atlas = atlas
        self.images: Dict[str, NDArray[np.uint8]] = dict(images or {})
        self.palette: Dict[str, Color] = dict(DEFAULT_PALETTE)
        if palette:
            self.palette.update(palette)

    def render(self, snapshot: FrameSnapshot, buffer: Buffer) -> None:
        """Draw one frame. `buffer` must be (board_height, board_width, 3)."""
        clear(buffer, BACKGROUND)

        for cloud in snapshot.clouds:
            self._draw_sprite(buffer, cloud)

        self._draw_track(buffer, snapshot)
        self._draw_sprite(buffer, snapshot.actor)

        for obstacle in snapshot.obstacles:
            self._draw_sprite(buffer, obstacle)

        self._draw_scores(buffer, snapshot)

        if snapshot.state == GameState.READY:
            self._draw_centered(buffer, "PRESS SPACE", snapshot.board_height // 2 - 40, INK, 2)
        elif snapshot.state == GameState.GAME_OVER:
            self._draw_game_over(buffer, snapshot)

    def _draw_sprite(self, buffer: Buffer, draw: SpriteDraw) -> None:
        x, y = int(draw.x), int(draw.y)
        image = self.images.get(draw.sprite)
        if image is not None:
            draw_image(buffer, image, x, y)
            return
        size = self.atlas.size(draw.sprite)
        draw_rect(buffer, x, y, size.width, size.height, self.palette.get(draw.sprite, INK))

    def _draw_track(self, buffer: Buffer, snapshot: FrameSnapshot) -> None:
        track = self.images.get(sprites.TRACK)
        width = self.atlas.width(sprites.TRACK)
        ground_y = int(snapshot.ground_y)

        for offset in snapshot.ground_offsets:
            x = int(offset)
            if track is not None:
                draw_image(buffer, track, x, ground_y)
                continue
            draw_hline(buffer, x, ground_y, width, INK, thickness=2)
            # Pebbles scroll with the segment
            for px in range(x, x + width, self.TRACK_DASH_SPACING):
                draw_rect(buffer, px, ground_y + 6, 3, 1, INK)

    def _draw_scores(self, buffer: Buffer, snapshot: FrameSnapshot) -> None:
        scale = self.SCORE_SCALE
        width = snapshot.board_width
        draw_text(buffer, f"{snapshot.score:05d}", width - 100, 15, INK, scale)
        draw_text(buffer, f"HI {snapshot.high_score:05d}", width - 220, 15, INK, scale)

    def _draw_game_over(self, buffer: Buffer, snapshot: FrameSnapshot) -> None:
        banner = snapshot.game_over_banner
        button = snapshot.restart_button

        if banner is not None:
            image = self.images.get(sprites.GAME_OVER)
            if image is not None:
                draw_image(buffer, image, int(banner.x), int(banner.y))
            else:
                self._draw_centered(buffer, "GAME OVER", int(banner.y) + 8, INK, 5)

        if button is not None:
            image = self.images.get(sprites.RESET)
            if image is not None:
                draw_image(buffer, image, int(button.x), int(button.y))
            else:
                self._draw_button(buffer, button)

        if snapshot.is_new_high_score:
            self._draw_centered(buffer, "NEW HIGH SCORE!", 50, HIGHLIGHT, 2)

    def _draw_button(self, buffer: Buffer, box: Hitbox) -> None:
        draw_rect(buffer, int(box.x), int(box.y), int(box.width), int(box.height), INK,
                  filled=False, thickness=3)
        # Play triangle
        cx, cy = int(box.x + box.width / 2), int(box.y + box.height / 2)
        for i in range(12):
            draw_rect(buffer, cx - 6 + i, cy - 12 + i, 1, 24 - 2 * i, INK)

    def _draw_centered(self, buffer: Buffer, text: str, y: int, color: Color, scale: int) -> None:
        x = (buffer.shape[1] - text_width(text, scale)) // 2
        draw_text(buffer, text, x, y, color, scale)
