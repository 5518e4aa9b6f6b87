"""Interactive play in a pygame window."""

import logging
import random

import pygame

from ..config import Settings
from .game_state import GameState
from .input import InputSource, InputState
from .render_context import RenderContext
from .renderer import Renderer
from .session import Session

logger = logging.getLogger(__name__)

WINDOW_TITLE = "Arcade Shooter"


class KeyboardInput(InputSource):
    """Coalesces key press/release events into the set of held keys."""

    def __init__(self) -> None:
        self._held: set[str] = set()

    def press(self, key: str) -> None:
        self._held.add(key)

    def release(self, key: str) -> None:
        self._held.discard(key)

    def clear(self) -> None:
        self._held.clear()

    def handle_event(self, event: pygame.event.Event) -> None:
        """Update held keys from a pygame event; other events are ignored."""
        if event.type == pygame.KEYDOWN:
            self.press(pygame.key.name(event.key))
        elif event.type == pygame.KEYUP:
            self.release(pygame.key.name(event.key))
        elif event.type == pygame.WINDOWFOCUSLOST:
            # Key-up events are not delivered to an unfocused window
            self.clear()

    def poll(self, game_state: GameState) -> InputState:
        return InputState(frozenset(self._held))


class LiveRunner:
    """Frame driver for a window: one tick and one redraw per display frame."""

    def __init__(self, session: Session, keyboard: KeyboardInput, fps: int, scale: int = 1):
        self.session = session
        self.keyboard = keyboard
        self.fps = fps
        self.context = RenderContext(scale=scale)

    def stop(self) -> None:
        """Ask the loop to exit after the current frame."""
        self.session.stop()

    def run(self) -> None:
        """Open the window and play until it is closed, Escape is hit or stop() is called."""
        pygame.init()
        try:
            screen = pygame.display.set_mode(self.context.size)
            pygame.display.set_caption(WINDOW_TITLE)
            clock = pygame.time.Clock()
            renderer = Renderer(self.session.game_state, self.context)
            logger.info("Window opened at %dx%d, %d fps", *self.context.size, self.fps)

            while not self.session.stopped:
                self._pump_events()
                if self.session.stopped:
                    break
                self.session.tick()
                frame = renderer.render_frame()
                screen.blit(pygame.image.frombuffer(frame.tobytes(), frame.size, "RGB"), (0, 0))
                pygame.display.flip()
                clock.tick(self.fps)
        finally:
            pygame.quit()

    def _pump_events(self) -> None:
        for event in pygame.event.get():
            if event.type == pygame.QUIT:
                self.stop()
            elif event.type == pygame.KEYDOWN and event.key == pygame.K_ESCAPE:
                self.stop()
            else:
                self.keyboard.handle_event(event)


def create_live_runner(settings: Settings) -> LiveRunner:
    """Wire a fresh game, keyboard and session into a window runner."""
    keyboard = KeyboardInput()
    game_state = GameState(rng=random.Random(settings.seed))
    session = Session(game_state, keyboard)
    return LiveRunner(session, keyboard, fps=settings.fps, scale=settings.scale)
