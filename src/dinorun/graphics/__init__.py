"""Frame rendering for DINORUN."""

from dinorun.graphics.display import Display, MemoryDisplay
from dinorun.graphics.renderer import FrameRenderer

__all__ = ["Display", "MemoryDisplay", "FrameRenderer"]
