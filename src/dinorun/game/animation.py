"""Frame-cycling sprite animations."""

from dataclasses import dataclass, field
from typing import Tuple


def advance_frame(
    frame_index: int,
    last_switch_ms: float,
    frame_count: int,
    delay_ms: float,
    now_ms: float,
) -> Tuple[int, float]:
    """Step a looping animation.

    Args:
        frame_index: Current frame
        last_switch_ms: Timestamp of the last frame switch
        frame_count: Number of frames in the loop
        delay_ms: Minimum time a frame stays on screen
        now_ms: Current timestamp

    Returns:
        (frame_index, last_switch_ms) after the step
    """
    if now_ms - last_switch_ms > delay_ms:
        return (frame_index + 1) % frame_count, now_ms
    return frame_index, last_switch_ms


@dataclass
class Animation:
    """A looping sequence of sprite names switched on a fixed delay.

    Time is always passed in, so the same inputs give the same frame.
    """
    frames: Tuple[str, ...]
    delay_ms: float
    frame_index: int = 0
    last_switch_ms: float = field(default=0.0)

    def __post_init__(self) -> None:
        if not self.frames:
            raise ValueError("Animation needs at least one frame")
        self.frames = tuple(self.frames)

    def advance(self, now_ms: float) -> None:
        self.frame_index, self.last_switch_ms = advance_frame(
            self.frame_index, self.last_switch_ms, len(self.frames), self.delay_ms, now_ms
        )

    @property
    def current_frame(self) -> str:
        return self.frames[self.frame_index]

    def reset(self) -> None:
        self.frame_index = 0
        self.last_switch_ms = 0.0
