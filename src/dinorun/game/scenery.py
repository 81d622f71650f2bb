"""Scrolling ground and parallax clouds."""

from dataclasses import dataclass
from typing import List, Optional, Tuple
import logging

from dinorun.game.rng import RandomSource

logger = logging.getLogger(__name__)


class ScrollingBackground:
    """Two copies of the track sprite leapfrogging each other.

    The segments start at 0 and `segment_width` and always stay exactly
    one width apart, so the track never shows a gap.
    """

    def __init__(self, segment_width: float) -> None:
        if segment_width <= 0:
            raise ValueError("segment_width must be > 0")
        self.segment_width = segment_width
        self.x1 = 0.0
        self.x2 = float(segment_width)

    @property
    def offsets(self) -> Tuple[float, float]:
        return self.x1, self.x2

    def update(self, scroll_speed: float) -> None:
        self.x1 -= scroll_speed
        self.x2 -= scroll_speed

        # A segment that slid fully off-screen moves behind the other one
        if self.x1 < -self.segment_width:
            self.x1 = self.x2 + self.segment_width
        if self.x2 < -self.segment_width:
            self.x2 = self.x1 + self.segment_width


@dataclass
class Cloud:
    """A background cloud."""
    x: float
    y: float
    width: int
    height: int

    def update(self, scroll_speed: float, parallax: float) -> None:
        # Slower than the track for depth
        self.x -= scroll_speed / parallax

    def is_expired(self) -> bool:
        return self.x + self.width < 0


class CloudLayer:
    """Spawns, drifts and prunes background clouds."""

    # Spawn band
    SPAWN_X_JITTER = 200
    SPAWN_Y_MIN = 20
    SPAWN_Y_RANGE = 80

    def __init__(
        self,
        board_width: int,
        cloud_size: Tuple[int, int],
        rng: RandomSource,
        parallax: float = 4.0,
        spawn_odds: int = 200,
    ) -> None:
        self.board_width = board_width
        self.cloud_width, self.cloud_height = cloud_size
        self.parallax = parallax
        self.spawn_odds = spawn_odds
        self._rng = rng
        self.clouds: List[Cloud] = []

    def place_cloud(self) -> Cloud:
        """Add a cloud just past the right edge at a random height."""
        cloud = Cloud(
            x=self.board_width + self._rng.randint(0, self.SPAWN_X_JITTER - 1),
            y=self.SPAWN_Y_MIN + self._rng.randint(0, self.SPAWN_Y_RANGE - 1),
            width=self.cloud_width,
            height=self.cloud_height,
        )
        self.clouds.append(cloud)
        return cloud

    def maybe_place_cloud(self) -> Optional[Cloud]:
        """Independent low-odds roll for an extra cloud this tick."""
        if self._rng.randint(0, self.spawn_odds - 1) == 1:
            return self.place_cloud()
        return None

    def update(self, scroll_speed: float) -> None:
        for cloud in self.clouds:
            cloud.update(scroll_speed, self.parallax)

    def prune(self) -> int:
        before = len(self.clouds)
        self.clouds = [c for c in self.clouds if not c.is_expired()]
        return before - len(self.clouds)
