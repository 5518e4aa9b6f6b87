"""Animator for generating headless replays driven by an input source."""

from typing import Callable, Iterator

from ..constants import GAME_OVER_HOLD_FRAMES
from .game_state import GameState
from .input import InputSource
from .session import Session
from .simulation_runtime import create_seeded_game_state, derive_simulation_seed

# Upper bound for replays that never end on their own (e.g. a restarting pilot)
MAX_REPLAY_FRAMES = 3600


class Animator:
    """Runs a game session frame by frame and exposes its timeline."""

    def __init__(
        self,
        pilot: InputSource,
        fps: int,
        scale: int = 1,
        seed: int | None = None,
        seed_factory: Callable[[InputSource, int], int] = derive_simulation_seed,
        game_state_factory: Callable[[InputSource, int], GameState] = create_seeded_game_state,
    ):
        """
        Initialize animator.

        Args:
            pilot: Input source playing the game
            fps: Frames per second for the replay
            scale: Pixels per playfield unit in rendered frames
            seed: Optional deterministic seed for random-driven behavior
            seed_factory: Seed policy callable used when seed is not provided
            game_state_factory: Runtime factory for deterministic GameState setup
        """
        self.pilot = pilot
        self.fps = fps
        self.scale = scale
        self.seed_factory = seed_factory
        self.game_state_factory = game_state_factory
        self.seed = seed if seed is not None else self.seed_factory(self.pilot, self.fps)
        self.frame_duration = 1000 // fps

    def create_session(self) -> Session:
        game_state = self.game_state_factory(self.pilot, self.seed)
        return Session(game_state, self.pilot)

    def iter_state_timeline(
        self, max_frames: int | None = None
    ) -> Iterator[tuple[GameState, int]]:
        """Yield mutable game-state frames with elapsed time in milliseconds."""
        session = self.create_session()
        limit = MAX_REPLAY_FRAMES if max_frames is None else max_frames
        rendered = 0
        elapsed_ms = 0
        for _ in self._frame_steps(session):
            if rendered >= limit:
                session.stop()
                break
            yield session.game_state, elapsed_ms
            rendered += 1
            elapsed_ms += self.frame_duration

    def _frame_steps(self, session: Session) -> Iterator[None]:
        """
        Generate frame ticks by advancing the session.

        The replay ends once the game has stayed over for a short hold, so
        the final score remains visible.
        """
        # Initial frame showing starting state
        yield None

        hold_remaining = GAME_OVER_HOLD_FRAMES
        while not session.stopped:
            session.tick()
            yield None

            if session.game_state.is_game_over:
                hold_remaining -= 1
                if hold_remaining <= 0:
                    session.stop()
            else:
                hold_remaining = GAME_OVER_HOLD_FRAMES
