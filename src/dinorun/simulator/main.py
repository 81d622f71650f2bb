"""
Simulator wiring.

Builds the session, renderer and window from settings and connects
them through the event bus.
"""

from typing import Optional
import logging

from dinorun.config.settings import Settings, get_settings
from dinorun.core.events import Event, EventBus, EventType
from dinorun.game.session import GameSession
from dinorun.game.sprites import SpriteAtlas
from dinorun.graphics.renderer import FrameRenderer
from dinorun.simulator.assets import SpriteImages, load_sprites
from dinorun.simulator.window import GameWindow, WindowConfig
from dinorun.storage.preferences import JsonPreferenceStore

logger = logging.getLogger(__name__)

INPUT_EVENTS = (
    EventType.JUMP,
    EventType.DUCK_START,
    EventType.DUCK_END,
    EventType.RESTART_CLICK,
)


def connect_session(session: GameSession, event_bus: EventBus) -> None:
    """Subscribe the session to input and tick events."""
    for event_type in INPUT_EVENTS:
        event_bus.subscribe(event_type, session.handle_input)

    def on_tick(event: Event) -> None:
        session.tick(event.data.get("delta", 0.0) * 1000.0)

    event_bus.subscribe(EventType.TICK, on_tick)

    def on_game_over(event: Event) -> None:
        logger.info(f"Run ended: score {event.data['score']}, best {event.data['high_score']}")

    event_bus.subscribe(EventType.GAME_OVER, on_game_over)


def build_window(settings: Optional[Settings] = None) -> GameWindow:
    """Create a fully wired simulator window."""
    settings = settings or get_settings()

    atlas: SpriteAtlas
    images: SpriteImages
    if settings.assets_path is not None:
        atlas, images = load_sprites(settings.assets_path)
    else:
        logger.info("No assets path set, drawing placeholder shapes")
        atlas, images = SpriteAtlas.default(), {}

    event_bus = EventBus()
    session = GameSession(
        settings=settings,
        store=JsonPreferenceStore(settings.preferences_path),
        atlas=atlas,
        event_bus=event_bus,
    )
    connect_session(session, event_bus)

    config = WindowConfig(
        title=settings.window_title,
        scale=settings.window_scale,
        fps=settings.fps,
    )
    return GameWindow(
        session=session,
        renderer=FrameRenderer(atlas, images),
        config=config,
        event_bus=event_bus,
    )


async def run_simulator(settings: Optional[Settings] = None) -> None:
    """Run the game in a desktop window until it is closed."""
    window = build_window(settings)
    await window.run()
