"""
Simulated game screen.

Holds the board's numpy buffer and turns it into a pygame surface,
scaled up for the desktop window.
"""

import pygame
import numpy as np
from numpy.typing import NDArray

from dinorun.graphics.display import Display


class SimulatedScreen(Display):
    """
    Board-sized RGB framebuffer shown in the simulator window.

    Unlike an LED panel the board is drawn with plain scaling,
    no per-pixel gaps.
    """

    def __init__(self, width: int = 750, height: int = 250) -> None:
        self._width = width
        self._height = height
        self._buffer = np.zeros((height, width, 3), dtype=np.uint8)

    @property
    def width(self) -> int:
        return self._width

    @property
    def height(self) -> int:
        return self._height

    @property
    def buffer(self) -> NDArray[np.uint8]:
        """Live buffer; the renderer draws straight into it."""
        return self._buffer

    def set_buffer(self, buffer: NDArray[np.uint8]) -> None:
        if buffer.shape == self._buffer.shape:
            np.copyto(self._buffer, buffer)
        else:
            # Crop or pad to board size
            resized = np.zeros_like(self._buffer)
            h = min(buffer.shape[0], self._height)
            w = min(buffer.shape[1], self._width)
            resized[:h, :w] = buffer[:h, :w]
            np.copyto(self._buffer, resized)

    def get_buffer(self) -> NDArray[np.uint8]:
        return self._buffer.copy()

    def render(self, scale: int = 1) -> pygame.Surface:
        """
        Render buffer to a pygame surface.

        Args:
            scale: Integer scale factor

        Returns:
            pygame.Surface of size (width * scale, height * scale)
        """
        # pygame surfaces are indexed (x, y)
        surface = pygame.surfarray.make_surface(self._buffer.swapaxes(0, 1))
        if scale == 1:
            return surface
        return pygame.transform.scale(surface, (self._width * scale, self._height * scale))
