from __future__ import annotations

from collections import deque

import pygame

from . import config
from .state import DOWN, LEFT, RIGHT, UP, Direction

KEY_DIRECTIONS = {
    pygame.K_UP: UP,
    pygame.K_w: UP,
    pygame.K_DOWN: DOWN,
    pygame.K_s: DOWN,
    pygame.K_LEFT: LEFT,
    pygame.K_a: LEFT,
    pygame.K_RIGHT: RIGHT,
    pygame.K_d: RIGHT,
}


def direction_for_key(key: int) -> Direction | None:
    return KEY_DIRECTIONS.get(key)


class InputAdapter:
    """
    Bounded FIFO of direction requests that arrived between ticks.

    Two quick presses inside one tick (e.g. up then left to U-turn) both get
    through, one per tick, instead of the second overwriting the first.
    """

    def __init__(self, capacity: int = config.INPUT_BUFFER):
        if capacity < 1:
            raise ValueError(f"capacity must be at least 1, got {capacity}")
        self.capacity = capacity
        self._queue: deque[Direction] = deque()

    def __len__(self) -> int:
        return len(self._queue)

    @property
    def pending(self) -> tuple[Direction, ...]:
        return tuple(self._queue)

    def push(self, direction: Direction) -> bool:
        if len(self._queue) >= self.capacity:
            return False
        self._queue.append(direction)
        return True

    def start_with(self, direction: Direction) -> None:
        self._queue.clear()
        self._queue.append(direction)

    def clear(self) -> None:
        self._queue.clear()

    def drain_into(self, engine) -> Direction | None:
        if not self._queue:
            return None
        direction = self._queue.popleft()
        engine.set_direction(direction)
        return direction
