"""
Simulator window using pygame.

Shows the board at an integer scale and feeds keyboard and mouse
input to the event bus.
"""

from dataclasses import dataclass
from pathlib import Path
from typing import Optional
import asyncio
import logging

import pygame

from dinorun.core.events import EventBus, tick_event
from dinorun.game.session import GameSession
from dinorun.graphics.renderer import FrameRenderer
from dinorun.simulator.display import SimulatedScreen
from dinorun.simulator.input import translate_event

logger = logging.getLogger(__name__)


@dataclass
class WindowConfig:
    """Simulator window configuration."""
    title: str = "DINORUN"
    scale: int = 1
    fps: int = 60
    screenshot_dir: Path = Path(".")


class GameWindow:
    """
    Desktop window running one GameSession.

    Keyboard Mapping:
        SPACE / UP: Jump
        DOWN: Duck
        P: Pause / resume
        S: Capture screenshot
        ESC / Q: Exit
    """

    def __init__(
        self,
        session: GameSession,
        renderer: FrameRenderer,
        config: Optional[WindowConfig] = None,
        event_bus: Optional[EventBus] = None,
    ) -> None:
        self.session = session
        self.renderer = renderer
        self.config = config or WindowConfig()
        self.event_bus = event_bus or EventBus()

        self.screen = SimulatedScreen(session.board_width, session.board_height)

        self._surface: Optional[pygame.Surface] = None
        self._clock: Optional[pygame.time.Clock] = None
        self._running = False
        self._frame_count = 0

        logger.info("GameWindow created")

    def _init_pygame(self) -> None:
        """Initialize pygame and create window."""
        pygame.init()
        pygame.display.set_caption(self.config.title)

        size = (self.screen.width * self.config.scale, self.screen.height * self.config.scale)
        self._surface = pygame.display.set_mode(size, pygame.DOUBLEBUF)
        self._clock = pygame.time.Clock()

        logger.info(f"Pygame initialized: {size[0]}x{size[1]}")

    def _handle_events(self) -> None:
        """Process pygame events."""
        for event in pygame.event.get():
            if event.type == pygame.QUIT:
                self._running = False
                continue

            if event.type == pygame.KEYDOWN and self._handle_system_key(event.key):
                continue

            game_event = translate_event(event, self.config.scale)
            if game_event is not None:
                self.event_bus.queue_event(game_event)

    def _handle_system_key(self, key: int) -> bool:
        """Window-level keys. Returns True if the key was consumed."""
        if key in (pygame.K_ESCAPE, pygame.K_q):
            self._running = False
        elif key == pygame.K_s:
            self._capture_screenshot()
        elif key == pygame.K_p:
            if self.session.is_paused:
                self.session.resume()
                logger.info("Resumed")
            else:
                self.session.pause()
                logger.info("Paused")
        else:
            return False
        return True

    def _render(self) -> None:
        """Draw the current session state to the window."""
        if not self._surface:
            return
        self.renderer.render(self.session.snapshot(), self.screen.buffer)
        self._surface.blit(self.screen.render(self.config.scale), (0, 0))
        pygame.display.flip()

    def _capture_screenshot(self) -> None:
        """Capture and save a screenshot."""
        if self._surface:
            filename = self.config.screenshot_dir / f"screenshot_{self._frame_count}.png"
            pygame.image.save(self._surface, str(filename))
            logger.info(f"Screenshot saved: {filename}")

    async def run(self) -> None:
        """Main window loop."""
        self._init_pygame()
        self._running = True

        logger.info("Simulator started")

        try:
            while self._running:
                self._handle_events()

                # Emit tick event
                if self._clock:
                    delta = self._clock.get_time() / 1000.0
                    self.event_bus.emit(tick_event(delta, self._frame_count))

                # Queued input is applied after the tick, before drawing
                await self.event_bus.process_queue()

                self._render()

                # Frame timing
                if self._clock:
                    self._clock.tick(self.config.fps)

                self._frame_count += 1

                # Yield to other tasks
                await asyncio.sleep(0)
        finally:
            self._cleanup()

    def _cleanup(self) -> None:
        """Clean up pygame resources."""
        pygame.quit()
        logger.info("Simulator stopped")

    def stop(self) -> None:
        """Stop the window loop."""
        self._running = False
