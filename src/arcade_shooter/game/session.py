"""One running game wired to its input source, driven frame by frame from outside."""

import logging

from .game_state import GameState
from .input import InputSource, InputState, NO_INPUT

logger = logging.getLogger(__name__)


class Session:
    """Pairs a game state with the input source that plays it.

    Frame drivers call :meth:`tick` once per frame and :meth:`stop` to shut
    the session down; the session never schedules itself.
    """

    def __init__(self, game_state: GameState, input_source: InputSource):
        self.game_state = game_state
        self.input_source = input_source
        self.stopped = False
        self.last_input: InputState = NO_INPUT

    def tick(self) -> None:
        """Sample input once and advance the game one frame."""
        if self.stopped:
            return
        self.last_input = self.input_source.poll(self.game_state)
        self.game_state.tick(self.last_input)

    def stop(self) -> None:
        if not self.stopped:
            logger.debug("Session stopped at frame %d", self.game_state.frame)
        self.stopped = True
