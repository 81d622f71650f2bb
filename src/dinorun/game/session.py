"""Game session: owns every entity, runs the loop and the state machine."""

from typing import List, Optional, Tuple
import logging
import random

from dinorun.config.settings import Settings, get_settings
from dinorun.core.events import Event, EventBus, EventType
from dinorun.core.state import GameState, StateMachine
from dinorun.core.timer import PeriodicTimer
from dinorun.game.actor import Actor
from dinorun.game.geometry import Hitbox
from dinorun.game.obstacles import Obstacle
from dinorun.game.rng import RandomSource
from dinorun.game.scenery import CloudLayer, ScrollingBackground
from dinorun.game.snapshot import FrameSnapshot, SpriteDraw
from dinorun.game.spawner import Spawner
from dinorun.game import sprites
from dinorun.game.sprites import SpriteAtlas
from dinorun.storage.preferences import HIGH_SCORE_KEY, MemoryPreferenceStore, PreferenceStore

logger = logging.getLogger(__name__)


class GameSession:
    """One player's run of the game, from READY through GAME_OVER and back.

    Two periodic timers drive it: a fast frame timer calling `update()`
    and a slower spawn timer calling `spawn_tick()`. Call `tick(delta_ms)`
    once per host frame and it fires both as their periods elapse.

    Lifecycle:
        READY --jump--> PLAYING --collision--> GAME_OVER --jump/restart--> READY

    Usage:
        session = GameSession(store=JsonPreferenceStore(path))

        # In update loop:
        session.tick(delta_ms)
        session.handle_input(event)

        # In render loop:
        renderer.render(session.snapshot(), buffer)
    """

    # Frame catch-up limit per tick() call
    MAX_FRAMES_PER_TICK = 5

    def __init__(
        self,
        settings: Optional[Settings] = None,
        store: Optional[PreferenceStore] = None,
        atlas: Optional[SpriteAtlas] = None,
        rng: Optional[RandomSource] = None,
        event_bus: Optional[EventBus] = None,
    ) -> None:
        self.settings = settings or get_settings()
        self.atlas = atlas or SpriteAtlas.default()
        self.atlas.validate()
        self._rng: RandomSource = rng or random.Random()
        self._store: PreferenceStore = store or MemoryPreferenceStore()
        self.event_bus = event_bus

        board = self.settings.board
        self.board_width = board.width
        self.board_height = board.height
        self.ground_y = board.ground_y

        self._state_machine = StateMachine(GameState.READY)
        self._state_machine.add_listener(self._on_state_changed)

        # Read once; written only when beaten
        self.high_score = self._store.get_int(HIGH_SCORE_KEY, 0)

        self.frame_timer = PeriodicTimer(self.settings.frame_ms, name="frame")
        self.spawn_timer = PeriodicTimer(self.settings.progression.spawn_interval_ms, name="spawn")

        # Game clock for animations, advanced one frame per update
        self.now_ms = 0.0

        self.spawner = Spawner(
            atlas=self.atlas,
            rng=self._rng,
            board_width=self.board_width,
            ground_y=self.ground_y,
            flying_speed_bonus=self.settings.progression.flying_speed_bonus,
        )

        self._reset_world()
        self.frame_timer.start()
        self.spawn_timer.start()

        logger.info(f"GameSession created (high score {self.high_score})")

    # ------------------------------------------------------------------
    # State
    # ------------------------------------------------------------------

    @property
    def state(self) -> GameState:
        return self._state_machine.state

    @property
    def scroll_speed(self) -> float:
        return self._scroll_speed

    @property
    def spawn_interval_ms(self) -> float:
        return self.spawn_timer.delay_ms

    @property
    def is_paused(self) -> bool:
        return not self.frame_timer.is_running

    def _reset_world(self) -> None:
        """Fresh entities, score and pacing. Does not touch the state."""
        physics = self.settings.physics
        progression = self.settings.progression

        self.actor = Actor(
            self.atlas,
            ground_y=self.ground_y,
            x=physics.actor_x,
            gravity=physics.gravity,
            jump_velocity=physics.jump_velocity,
        )
        self.background = ScrollingBackground(self.atlas.width(sprites.TRACK))
        self.clouds = CloudLayer(
            board_width=self.board_width,
            cloud_size=(self.atlas.width(sprites.CLOUD), self.atlas.height(sprites.CLOUD)),
            rng=self._rng,
            parallax=progression.cloud_parallax,
            spawn_odds=progression.cloud_spawn_odds,
        )
        self.obstacles: List[Obstacle] = []
        self.score = 0
        self.is_new_high_score = False
        self._scroll_speed = progression.base_speed
        self.spawn_timer.delay_ms = progression.spawn_interval_ms

    # ------------------------------------------------------------------
    # Timers
    # ------------------------------------------------------------------

    def tick(self, delta_ms: float) -> None:
        """Advance both timers by the host's elapsed time."""
        frames = self.frame_timer.advance(delta_ms, max_fires=self.MAX_FRAMES_PER_TICK)
        for _ in range(frames):
            self.update()

        # Spawn attempts never pile up
        if self.spawn_timer.advance(delta_ms, max_fires=1):
            self.spawn_tick()

    def pause(self) -> None:
        """Stop both timers; the board freezes until resume()."""
        self.frame_timer.stop()
        self.spawn_timer.stop()

    def resume(self) -> None:
        if not self.frame_timer.is_running:
            self.frame_timer.start()
        # Spawning stays off after a crash until restart
        if self.state != GameState.GAME_OVER and not self.spawn_timer.is_running:
            self.spawn_timer.start()

    def update(self) -> None:
        """Advance the world by one frame. Does nothing unless PLAYING."""
        if self.state != GameState.PLAYING:
            return

        self.now_ms += self.settings.frame_ms
        speed = self._scroll_speed

        self.background.update(speed)
        self.clouds.update(speed)
        self.actor.update(self.state, self.now_ms)
        self.clouds.maybe_place_cloud()

        # Move every obstacle before acting on a hit
        hit: Optional[Obstacle] = None
        actor_box = self.actor.hitbox
        for obstacle in self.obstacles:
            obstacle.update(speed, self.now_ms)
            if hit is None and actor_box.intersects(obstacle.hitbox):
                hit = obstacle

        # Clean up off-screen objects
        self.obstacles = [o for o in self.obstacles if not o.is_expired()]
        self.clouds.prune()

        if hit is not None:
            logger.info(f"Collision with {hit.sprite} at x={hit.x:.0f}")
            self._game_over()
            return

        self._advance_score()

    def _advance_score(self) -> None:
        progression = self.settings.progression
        self.score += 1
        if self.score % progression.score_step == 0:
            self._scroll_speed += progression.speed_increment
            self.spawn_timer.delay_ms = max(
                progression.spawn_interval_floor_ms,
                self.spawn_timer.delay_ms - progression.spawn_interval_step_ms,
            )
            logger.debug(
                f"Score {self.score}: speed {self._scroll_speed:.1f}, "
                f"spawn every {self.spawn_timer.delay_ms:.0f}ms"
            )

    def spawn_tick(self) -> Optional[Obstacle]:
        """One spawn attempt. Returns the new obstacle, if any."""
        obstacle = self.spawner.maybe_spawn(self.state, self.score)
        if obstacle is not None:
            self.obstacles.append(obstacle)
        return obstacle

    # ------------------------------------------------------------------
    # Transitions
    # ------------------------------------------------------------------

    def _game_over(self) -> None:
        if not self._state_machine.transition(GameState.GAME_OVER):
            return

        self.spawn_timer.stop()
        self.actor.snap_to_ground()

        if self.score > self.high_score:
            self.high_score = self.score
            self.is_new_high_score = True
            self._store.put_int(HIGH_SCORE_KEY, self.high_score)
            logger.info(f"New high score: {self.high_score}")
            self._emit(EventType.NEW_HIGH_SCORE, {"score": self.high_score})

        logger.info(f"Game over at score {self.score}")
        self._emit(EventType.GAME_OVER, {"score": self.score, "high_score": self.high_score})

    def restart(self) -> bool:
        """Full reset back to READY. Ignored while a run is in progress."""
        if self.state == GameState.PLAYING:
            logger.debug("Restart ignored while PLAYING")
            return False

        self._reset_world()
        if self.state == GameState.GAME_OVER:
            self._state_machine.transition(GameState.READY)
        # A paused session picks spawning back up in resume()
        if not self.is_paused:
            self.spawn_timer.start()
        logger.info("Session restarted")
        return True

    def _on_state_changed(self, old_state: GameState, new_state: GameState) -> None:
        self._emit(EventType.STATE_CHANGED, {"from": old_state, "to": new_state})

    def _emit(self, event_type: EventType, data: dict) -> None:
        if self.event_bus is not None:
            self.event_bus.emit(Event(event_type, data=data, source="session"))

    # ------------------------------------------------------------------
    # Input
    # ------------------------------------------------------------------

    def jump(self) -> bool:
        """Jump input: starts a run, jumps, or restarts depending on state."""
        if self.state == GameState.READY:
            self._state_machine.transition(GameState.PLAYING)
            self.clouds.place_cloud()
            self.actor.jump()
            return True

        if self.state == GameState.PLAYING:
            return self.actor.jump()

        return self.restart()

    def duck(self, ducking: bool) -> bool:
        if self.state != GameState.PLAYING:
            logger.debug(f"Duck input ignored in {self.state.name}")
            return False
        was_ducking = self.actor.is_ducking
        self.actor.set_ducking(ducking)
        return self.actor.is_ducking != was_ducking

    def restart_click(self, pos: Optional[Tuple[float, float]] = None) -> bool:
        """Restart button click. Without a position any click counts."""
        if self.state != GameState.GAME_OVER:
            return False
        if pos is not None and not self.restart_button.contains(*pos):
            return False
        return self.restart()

    def handle_input(self, event: Event) -> bool:
        """Route an input event. Returns True if it changed anything."""
        if event.type == EventType.JUMP:
            return self.jump()
        if event.type == EventType.DUCK_START:
            return self.duck(True)
        if event.type == EventType.DUCK_END:
            return self.duck(False)
        if event.type == EventType.RESTART_CLICK:
            return self.restart_click(event.data.get("pos"))
        return False

    # ------------------------------------------------------------------
    # Read accessors
    # ------------------------------------------------------------------

    @property
    def game_over_banner(self) -> Hitbox:
        size = self.atlas.size(sprites.GAME_OVER)
        return Hitbox(
            self.board_width // 2 - size.width // 2,
            self.board_height // 2 - 50,
            size.width,
            size.height,
        )

    @property
    def restart_button(self) -> Hitbox:
        banner = self.game_over_banner
        size = self.atlas.size(sprites.RESET)
        return Hitbox(
            self.board_width // 2 - size.width // 2,
            banner.bottom + 20,
            size.width,
            size.height,
        )

    def snapshot(self) -> FrameSnapshot:
        state = self.state
        game_over = state == GameState.GAME_OVER
        return FrameSnapshot(
            state=state,
            score=self.score,
            high_score=self.high_score,
            board_width=self.board_width,
            board_height=self.board_height,
            ground_y=self.ground_y,
            actor=SpriteDraw(self.actor.current_sprite(state), self.actor.x, self.actor.sprite_y(state)),
            obstacles=tuple(SpriteDraw(o.sprite, o.x, o.y) for o in self.obstacles),
            clouds=tuple(SpriteDraw(sprites.CLOUD, c.x, c.y) for c in self.clouds.clouds),
            ground_offsets=self.background.offsets,
            game_over_banner=self.game_over_banner if game_over else None,
            restart_button=self.restart_button if game_over else None,
            is_new_high_score=self.is_new_high_score,
        )
