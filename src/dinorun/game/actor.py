"""The player character: vertical kinematics, duck/jump state and hitbox."""

import logging

from dinorun.core.state import GameState
from dinorun.game.animation import Animation
from dinorun.game.geometry import Hitbox
from dinorun.game import sprites
from dinorun.game.sprites import SpriteAtlas

logger = logging.getLogger(__name__)


class Actor:
    """Runs in place at a fixed x; jumps and ducks to dodge obstacles.

    Sub-states:
        grounded: resting on the track (y == resting_y)
        airborne: above the track after a jump
        ducking: grounded with the duck pose

    Units are board pixels per tick.
    """

    RUN_FRAME_DELAY_MS = 100.0
    DUCK_FRAME_DELAY_MS = 100.0

    def __init__(
        self,
        atlas: SpriteAtlas,
        ground_y: float,
        x: float = 50,
        gravity: float = 0.8,
        jump_velocity: float = -17.0,
    ) -> None:
        self._atlas = atlas
        self.x = x
        self.gravity = gravity
        self.jump_velocity = jump_velocity

        self.run_animation = Animation((sprites.RUN_1, sprites.RUN_2), self.RUN_FRAME_DELAY_MS)
        self.duck_animation = Animation((sprites.DUCK_1, sprites.DUCK_2), self.DUCK_FRAME_DELAY_MS)

        self._standing_height = atlas.height(sprites.RUN_1)
        self.resting_y = ground_y - self._standing_height
        self.y = self.resting_y
        self.velocity_y = 0.0
        self.is_ducking = False

        self.hitbox = Hitbox(x, self.y, atlas.width(sprites.RUN_1), self._standing_height)

    @property
    def is_grounded(self) -> bool:
        return self.y >= self.resting_y

    @property
    def is_airborne(self) -> bool:
        return not self.is_grounded

    def update(self, state: GameState, now_ms: float) -> None:
        """Integrate gravity for one tick. Does nothing unless PLAYING."""
        if state != GameState.PLAYING:
            return

        self.velocity_y += self.gravity
        self.y += self.velocity_y

        # Ground check
        if self.y >= self.resting_y:
            self.y = self.resting_y
            self.velocity_y = 0.0

        if self.is_ducking:
            self.duck_animation.advance(now_ms)
        else:
            self.run_animation.advance(now_ms)

        self._update_hitbox()

    def jump(self) -> bool:
        """Start a jump. Returns False (no-op) while already in the air."""
        if not self.is_grounded:
            return False
        self.velocity_y = self.jump_velocity
        return True

    def set_ducking(self, ducking: bool) -> None:
        """Duck only from the ground; standing up is always allowed."""
        if ducking and not self.is_grounded:
            return
        self.is_ducking = ducking
        self._update_hitbox()

    def snap_to_ground(self) -> None:
        """Put the actor back on the track, standing still."""
        self.y = self.resting_y
        self.velocity_y = 0.0
        self.is_ducking = False
        self._update_hitbox()

    def current_sprite(self, state: GameState) -> str:
        if state == GameState.GAME_OVER:
            return sprites.DEAD
        return self._pose_sprite()

    def sprite_y(self, state: GameState) -> float:
        """Top of the current sprite, keeping its feet on the hitbox bottom."""
        return self.hitbox.bottom - self._atlas.height(self.current_sprite(state))

    def _pose_sprite(self) -> str:
        if self.is_airborne:
            return sprites.JUMP
        if self.is_ducking:
            return self.duck_animation.current_frame
        return self.run_animation.current_frame

    def _update_hitbox(self) -> None:
        pose = self._atlas.size(self._pose_sprite())
        if self.is_ducking and self.is_grounded:
            # Duck pose is shorter; shift it down so it stays on the floor
            top = self.resting_y + (self._standing_height - pose.height)
        else:
            top = self.y
        self.hitbox = Hitbox(self.x, top, pose.width, pose.height)
