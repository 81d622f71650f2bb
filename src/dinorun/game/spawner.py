"""Score-gated, probability-weighted obstacle spawning."""

from dataclasses import dataclass
from typing import Optional, Sequence, Tuple
import logging

from dinorun.core.state import GameState
from dinorun.game.obstacles import Obstacle, ObstacleKind, flying_hazard, ground_hazard
from dinorun.game.rng import RandomSource
from dinorun.game import sprites
from dinorun.game.sprites import SpriteAtlas

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class SpawnRule:
    """Spawn `kind` when the draw beats `min_draw` and the score beats `min_score`."""
    min_draw: float
    min_score: int
    kind: ObstacleKind
    sprite_name: str


# Checked in order; the first matching rule wins
DEFAULT_RULES: Tuple[SpawnRule, ...] = (
    SpawnRule(0.70, 80, ObstacleKind.GROUND_HAZARD, sprites.GROUND_HAZARD_SMALL),
    SpawnRule(0.50, 200, ObstacleKind.GROUND_HAZARD, sprites.GROUND_HAZARD_MEDIUM),
    SpawnRule(0.30, 400, ObstacleKind.GROUND_HAZARD, sprites.GROUND_HAZARD_LARGE),
    SpawnRule(0.15, 500, ObstacleKind.FLYING_HAZARD, sprites.FLYING_HAZARD_1),
)


class Spawner:
    """Decides, once per spawn tick, whether a new obstacle enters.

    Most early ticks produce nothing: every rule needs a minimum score.
    """

    SPAWN_X_OFFSET = 50  # past the right edge
    FLYING_BAND = 40     # flying hazards pick a height within this band

    def __init__(
        self,
        atlas: SpriteAtlas,
        rng: RandomSource,
        board_width: int,
        ground_y: float,
        flying_speed_bonus: float = 2.0,
        rules: Sequence[SpawnRule] = DEFAULT_RULES,
    ) -> None:
        self._atlas = atlas
        self._rng = rng
        self.spawn_x = board_width + self.SPAWN_X_OFFSET
        self.ground_y = ground_y
        self.flying_speed_bonus = flying_speed_bonus
        self.rules = tuple(rules)

    def select_rule(self, draw: float, score: int) -> Optional[SpawnRule]:
        """First rule whose draw and score thresholds are both exceeded."""
        for rule in self.rules:
            if draw > rule.min_draw and score > rule.min_score:
                return rule
        return None

    def maybe_spawn(self, state: GameState, score: int) -> Optional[Obstacle]:
        """Roll for an obstacle. Returns None when nothing spawns."""
        if state != GameState.PLAYING:
            return None

        draw = self._rng.random()
        rule = self.select_rule(draw, score)
        if rule is None:
            return None

        if rule.kind == ObstacleKind.FLYING_HAZARD:
            height = self._atlas.height(sprites.FLYING_HAZARD_1)
            y = self.ground_y - height - self._rng.randint(0, self.FLYING_BAND - 1)
            obstacle = flying_hazard(self._atlas, self.spawn_x, y, self.flying_speed_bonus)
        else:
            obstacle = ground_hazard(self._atlas, rule.sprite_name, self.spawn_x, self.ground_y)

        logger.debug(f"Spawned {obstacle.sprite} at score {score} (draw={draw:.2f})")
        return obstacle
