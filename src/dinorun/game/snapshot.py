"""Read-only view of a session for renderers."""

from dataclasses import dataclass
from typing import Optional, Tuple

from dinorun.core.state import GameState
from dinorun.game.geometry import Hitbox


@dataclass(frozen=True)
class SpriteDraw:
    """One sprite to draw with its top-left corner at (x, y)."""
    sprite: str
    x: float
    y: float


@dataclass(frozen=True)
class FrameSnapshot:
    """Everything needed to draw one frame. Holds no live references."""
    state: GameState
    score: int
    high_score: int
    board_width: int
    board_height: int
    ground_y: float
    actor: SpriteDraw
    obstacles: Tuple[SpriteDraw, ...]
    clouds: Tuple[SpriteDraw, ...]
    ground_offsets: Tuple[float, float]
    game_over_banner: Optional[Hitbox] = None
    restart_button: Optional[Hitbox] = None
    is_new_high_score: bool = False
