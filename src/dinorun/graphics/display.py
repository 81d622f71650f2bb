"""
Abstract display interface.

Renderers produce numpy frames; a Display is whatever shows them
(the pygame simulator, a headless capture in tests).
"""

from abc import ABC, abstractmethod
import numpy as np
from numpy.typing import NDArray


class Display(ABC):
    """Abstract base class for display devices."""

    @property
    @abstractmethod
    def width(self) -> int:
        """Display width in pixels."""
        ...

    @property
    @abstractmethod
    def height(self) -> int:
        """Display height in pixels."""
        ...

    @abstractmethod
    def set_buffer(self, buffer: NDArray[np.uint8]) -> None:
        """
        Set entire display buffer.

        Args:
            buffer: numpy array of shape (height, width, 3) with RGB values
        """
        ...

    @abstractmethod
    def get_buffer(self) -> NDArray[np.uint8]:
        """Get copy of current display buffer."""
        ...

    def clear(self, r: int = 0, g: int = 0, b: int = 0) -> None:
        """Clear display to specified color."""
        buffer = np.zeros((self.height, self.width, 3), dtype=np.uint8)
        buffer[:, :] = (r, g, b)
        self.set_buffer(buffer)


class MemoryDisplay(Display):
    """Keeps the last frame in memory. Used headless."""

    def __init__(self, width: int, height: int) -> None:
        self._width = width
        self._height = height
        self._buffer = np.zeros((height, width, 3), dtype=np.uint8)
        self.frames_shown = 0

    @property
    def width(self) -> int:
        return self._width

    @property
    def height(self) -> int:
        return self._height

    def set_buffer(self, buffer: NDArray[np.uint8]) -> None:
        if buffer.shape != self._buffer.shape:
            raise ValueError(f"Expected buffer {self._buffer.shape}, got {buffer.shape}")
        np.copyto(self._buffer, buffer)
        self.frames_shown += 1

    def get_buffer(self) -> NDArray[np.uint8]:
        return self._buffer.copy()
