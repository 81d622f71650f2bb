"""Sprite names and sizes.

The game logic never touches image data. It only needs to know how big
each sprite is, keyed by a semantic name, to build hitboxes and anchor
things to the ground line.
"""

from dataclasses import dataclass, field
from typing import Dict, Iterable, Mapping, Tuple

# Actor poses
RUN_1 = "run-1"
RUN_2 = "run-2"
DUCK_1 = "duck-1"
DUCK_2 = "duck-2"
JUMP = "jump"
DEAD = "dead"

# Hazards
GROUND_HAZARD_SMALL = "ground-hazard-small"
GROUND_HAZARD_MEDIUM = "ground-hazard-medium"
GROUND_HAZARD_LARGE = "ground-hazard-large"
FLYING_HAZARD_1 = "flying-hazard-1"
FLYING_HAZARD_2 = "flying-hazard-2"

# Scenery and UI
CLOUD = "cloud"
TRACK = "track"
GAME_OVER = "game-over"
RESET = "reset"

REQUIRED_SPRITES: Tuple[str, ...] = (
    RUN_1, RUN_2, DUCK_1, DUCK_2, JUMP, DEAD,
    GROUND_HAZARD_SMALL, GROUND_HAZARD_MEDIUM, GROUND_HAZARD_LARGE,
    FLYING_HAZARD_1, FLYING_HAZARD_2,
    CLOUD, TRACK, GAME_OVER, RESET,
)

# Sizes of the classic runner artwork, used when no asset directory is set
DEFAULT_SIZES: Dict[str, Tuple[int, int]] = {
    RUN_1: (88, 94),
    RUN_2: (88, 94),
    DUCK_1: (118, 60),
    DUCK_2: (118, 60),
    JUMP: (88, 94),
    DEAD: (88, 94),
    GROUND_HAZARD_SMALL: (34, 70),
    GROUND_HAZARD_MEDIUM: (69, 70),
    GROUND_HAZARD_LARGE: (102, 70),
    FLYING_HAZARD_1: (97, 68),
    FLYING_HAZARD_2: (97, 60),
    CLOUD: (92, 27),
    TRACK: (2404, 28),
    GAME_OVER: (386, 40),
    RESET: (76, 68),
}


@dataclass(frozen=True)
class SpriteSize:
    width: int
    height: int


@dataclass(frozen=True)
class SpriteAtlas:
    """Semantic sprite name -> pixel size."""

    sizes: Mapping[str, SpriteSize] = field(default_factory=dict)

    @classmethod
    def from_sizes(cls, sizes: Mapping[str, Tuple[int, int]]) -> "SpriteAtlas":
        """Build an atlas from (width, height) pairs and check it is complete."""
        atlas = cls({name: SpriteSize(w, h) for name, (w, h) in sizes.items()})
        atlas.validate()
        return atlas

    @classmethod
    def default(cls) -> "SpriteAtlas":
        return cls.from_sizes(DEFAULT_SIZES)

    def validate(self, required: Iterable[str] = REQUIRED_SPRITES) -> None:
        """Raise ValueError if a required sprite is missing or empty."""
        missing = [name for name in required if name not in self.sizes]
        if missing:
            raise ValueError(f"Sprite atlas is missing: {', '.join(missing)}")
        for name, size in self.sizes.items():
            if size.width <= 0 or size.height <= 0:
                raise ValueError(f"Sprite {name!r} has empty size {size.width}x{size.height}")

    def size(self, name: str) -> SpriteSize:
        return self.sizes[name]

    def width(self, name: str) -> int:
        return self.sizes[name].width

    def height(self, name: str) -> int:
        return self.sizes[name].height
