"""Obstacles: ground hazards and flying hazards.

Both variants share one dataclass tagged by `ObstacleKind`. Per-kind
behaviour lives in dispatch tables, so a new kind only needs a tag and
a table entry.
"""

from dataclasses import dataclass
from enum import Enum, auto
from typing import Callable, Dict, Optional

from dinorun.game.animation import Animation
from dinorun.game.geometry import Hitbox
from dinorun.game import sprites
from dinorun.game.sprites import SpriteAtlas


class ObstacleKind(Enum):
    """Types of obstacles."""
    GROUND_HAZARD = auto()
    FLYING_HAZARD = auto()


@dataclass
class Obstacle:
    """A hazard scrolling in from the right edge."""
    kind: ObstacleKind
    x: float
    y: float
    width: int
    height: int
    sprite_name: str
    speed_bonus: float = 0.0
    animation: Optional[Animation] = None

    def update(self, scroll_speed: float, now_ms: float) -> None:
        _UPDATERS[self.kind](self, scroll_speed, now_ms)

    @property
    def sprite(self) -> str:
        return _SPRITES[self.kind](self)

    @property
    def hitbox(self) -> Hitbox:
        return Hitbox(self.x, self.y, self.width, self.height)

    def is_expired(self) -> bool:
        """True once fully past the left edge."""
        return self.x + self.width < 0


def _update_ground(obstacle: Obstacle, scroll_speed: float, now_ms: float) -> None:
    obstacle.x -= scroll_speed


def _update_flying(obstacle: Obstacle, scroll_speed: float, now_ms: float) -> None:
    obstacle.x -= scroll_speed + obstacle.speed_bonus
    if obstacle.animation is not None:
        obstacle.animation.advance(now_ms)


def _static_sprite(obstacle: Obstacle) -> str:
    return obstacle.sprite_name


def _animated_sprite(obstacle: Obstacle) -> str:
    if obstacle.animation is None:
        return obstacle.sprite_name
    return obstacle.animation.current_frame


_UPDATERS: Dict[ObstacleKind, Callable[[Obstacle, float, float], None]] = {
    ObstacleKind.GROUND_HAZARD: _update_ground,
    ObstacleKind.FLYING_HAZARD: _update_flying,
}

_SPRITES: Dict[ObstacleKind, Callable[[Obstacle], str]] = {
    ObstacleKind.GROUND_HAZARD: _static_sprite,
    ObstacleKind.FLYING_HAZARD: _animated_sprite,
}

FLYING_FRAME_DELAY_MS = 150.0


def ground_hazard(atlas: SpriteAtlas, sprite_name: str, x: float, ground_y: float) -> Obstacle:
    """A hazard standing on the track."""
    size = atlas.size(sprite_name)
    return Obstacle(
        kind=ObstacleKind.GROUND_HAZARD,
        x=x,
        y=ground_y - size.height,
        width=size.width,
        height=size.height,
        sprite_name=sprite_name,
    )


def flying_hazard(atlas: SpriteAtlas, x: float, y: float, speed_bonus: float = 2.0) -> Obstacle:
    """A hazard flying at height `y`, always faster than the track."""
    if speed_bonus <= 0:
        raise ValueError("Flying hazards must outpace ground hazards")
    size = atlas.size(sprites.FLYING_HAZARD_1)
    return Obstacle(
        kind=ObstacleKind.FLYING_HAZARD,
        x=x,
        y=y,
        width=size.width,
        height=size.height,
        sprite_name=sprites.FLYING_HAZARD_1,
        speed_bonus=speed_bonus,
        animation=Animation((sprites.FLYING_HAZARD_1, sprites.FLYING_HAZARD_2), FLYING_FRAME_DELAY_MS),
    )
