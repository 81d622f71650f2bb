"""Shared fixtures for DINORUN tests."""

from typing import Iterable, List, Optional

import pytest

from dinorun.config.settings import Settings, get_settings
from dinorun.core.events import EventBus
from dinorun.game.session import GameSession
from dinorun.game import sprites
from dinorun.game.obstacles import ground_hazard
from dinorun.game.sprites import SpriteAtlas
from dinorun.storage.preferences import MemoryPreferenceStore


class ScriptedRandom:
    """RandomSource that replays fixed values.

    Once a script runs out, `random()` returns `default_random` and
    `randint(a, b)` returns `a`.
    """

    def __init__(
        self,
        randoms: Iterable[float] = (),
        ints: Iterable[int] = (),
        default_random: float = 0.0,
    ) -> None:
        self.randoms: List[float] = list(randoms)
        self.ints: List[int] = list(ints)
        self.default_random = default_random
        self.int_calls: List[tuple] = []

    def random(self) -> float:
        if self.randoms:
            return self.randoms.pop(0)
        return self.default_random

    def randint(self, a: int, b: int) -> int:
        self.int_calls.append((a, b))
        if self.ints:
            return self.ints.pop(0)
        return a


def start(session: GameSession) -> None:
    """Begin a run with the actor back on the ground."""
    session.jump()
    session.actor.snap_to_ground()


def add_hazard_at_actor(session: GameSession) -> None:
    """Place a hazard that reaches the actor on the next update."""
    x = session.actor.x + session.scroll_speed
    session.obstacles.append(
        ground_hazard(session.atlas, sprites.GROUND_HAZARD_SMALL, x, session.ground_y)
    )


@pytest.fixture(autouse=True)
def _clear_settings_cache():
    get_settings.cache_clear()
    yield
    get_settings.cache_clear()


@pytest.fixture
def settings(tmp_path) -> Settings:
    # 50 fps keeps frame_ms an exact 20.0
    return Settings(fps=50, preferences_path=tmp_path / "prefs.json")


@pytest.fixture
def atlas() -> SpriteAtlas:
    return SpriteAtlas.default()


@pytest.fixture
def rng() -> ScriptedRandom:
    return ScriptedRandom()


@pytest.fixture
def store() -> MemoryPreferenceStore:
    return MemoryPreferenceStore()


@pytest.fixture
def bus() -> EventBus:
    return EventBus()


@pytest.fixture
def make_session(settings, atlas, store, bus):
    def factory(rng: Optional[ScriptedRandom] = None, **overrides) -> GameSession:
        kwargs = dict(
            settings=settings,
            store=store,
            atlas=atlas,
            rng=rng or ScriptedRandom(),
            event_bus=bus,
        )
        kwargs.update(overrides)
        return GameSession(**kwargs)

    return factory
