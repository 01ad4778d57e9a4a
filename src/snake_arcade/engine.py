from __future__ import annotations

import logging
import random
from collections import deque

from . import config
from .errors import ConfigError
from .logic import hits_something, is_direction, is_reversal, place_food
from .state import STOPPED, Cell, Direction, Snapshot, StepResult, add_vectors

logger = logging.getLogger(__name__)


def _check_positive(name: str, value) -> int:
    if type(value) is not int or value < 1:
        raise ConfigError(f"{name} must be a positive integer, got {value!r}")
    return value


class GameEngine:
    """
    Owns the state of one snake game and advances it one tick at a time.

    The engine does no I/O and holds no module-level state: the caller feeds
    it directions and calls ``step`` on its own timer, then reads the state
    back (``snapshot``) to draw it.

    Attributes:
        body: deque of (x, y) from head at index 0 to tail at the end
        direction: current (dx, dy), (0, 0) until the first accepted move
        food: (x, y) of the single food cell, never on the body when placed
        score: foods eaten since the last reset
        running: False before the first move and after a death
    """

    def __init__(
        self,
        grid_size: int = config.GRID_SIZE,
        initial_tick_interval_ms: int = config.TICK_INTERVAL_MS,
        rng: random.Random | None = None,
    ):
        self.rng = rng if rng is not None else random.Random()
        self.configure(grid_size, initial_tick_interval_ms)

    def configure(
        self,
        grid_size: int = config.GRID_SIZE,
        initial_tick_interval_ms: int = config.TICK_INTERVAL_MS,
    ) -> None:
        """Validate and store the board size and base speed, then reset."""
        # Both are checked before anything is stored so a bad call leaves
        # the previous configuration intact.
        grid_size = _check_positive("grid_size", grid_size)
        initial_tick_interval_ms = _check_positive("initial_tick_interval_ms", initial_tick_interval_ms)

        self._grid_size = grid_size
        self._initial_tick_interval_ms = initial_tick_interval_ms
        self.reset()

    def reset(self) -> None:
        center = self._grid_size // 2
        self.body: deque[Cell] = deque([(center, center)])
        self.direction: Direction = STOPPED
        self.score = 0
        self.tick_interval_ms = self._initial_tick_interval_ms
        self.running = False
        self.food: Cell | None = place_food(self.body, self._grid_size, self.rng)
        logger.debug("reset: grid=%d head=%s food=%s", self._grid_size, self.head, self.food)

    @property
    def grid_size(self) -> int:
        return self._grid_size

    @property
    def head(self) -> Cell:
        """Return the head position (first element)."""
        return self.body[0]

    def set_tick_interval(self, interval_ms: int) -> None:
        self.tick_interval_ms = _check_positive("tick_interval_ms", interval_ms)

    def set_direction(self, direction: Direction | None) -> None:
        """
        Request a new heading for the next tick.

        Malformed requests, the stopped sentinel and a straight reversal of
        the current heading are ignored without raising. The first accepted
        move starts the run.
        """
        if direction is None or not is_direction(direction):
            return
        direction = (direction[0], direction[1])
        if direction == STOPPED:
            return
        if is_reversal(self.direction, direction):
            return

        self.direction = direction
        self.running = True

    def step(self) -> StepResult:
        """
        Advance the game by one tick:
          1) If not running, do nothing
          2) Compute the new head from the current direction
          3) Wall or body hit (tail included) ends the run, state untouched
          4) Otherwise move; eating the food grows the body by one
        """
        if not self.running:
            return StepResult(died=False, ate=False)

        new_head = add_vectors(self.body[0], self.direction)

        if hits_something(new_head, self.body, self._grid_size):
            self.running = False
            logger.debug("died at %s with score %d, length %d", new_head, self.score, len(self.body))
            return StepResult(died=True, ate=False)

        self.body.appendleft(new_head)

        if new_head == self.food:
            self.score += 1
            self.food = place_food(self.body, self._grid_size, self.rng)
            logger.debug("ate at %s, score %d, next food %s", new_head, self.score, self.food)
            return StepResult(died=False, ate=True)

        self.body.pop()
        return StepResult(died=False, ate=False)

    def snapshot(self) -> Snapshot:
        return Snapshot(
            grid_size=self._grid_size,
            body=tuple(self.body),
            food=self.food,
            score=self.score,
            running=self.running,
        )

    def __repr__(self):
        return (
            f"<GameEngine grid={self._grid_size}, head={self.head}, length={len(self.body)}, "
            f"score={self.score}, running={self.running}>"
        )
