from __future__ import annotations

from collections import namedtuple

Cell = tuple[int, int]
Direction = tuple[int, int]

# Screen coordinates: y grows downward.
UP: Direction = (0, -1)
DOWN: Direction = (0, 1)
LEFT: Direction = (-1, 0)
RIGHT: Direction = (1, 0)
STOPPED: Direction = (0, 0)
DIRECTIONS = (UP, DOWN, LEFT, RIGHT)

StepResult = namedtuple("StepResult", ["died", "ate"])
# died: the head hit a wall or the body this tick; the run is over.
# ate: the head landed on the food; the body grew by one.

Snapshot = namedtuple("Snapshot", ["grid_size", "body", "food", "score", "running"])
# grid_size: int
# body: tuple[(x, y)], head is first element.
# food: (x, y)
# score: int
# running: bool


def add_vectors(a: tuple[int, int], b: tuple[int, int]) -> tuple[int, int]:
    return (a[0] + b[0], a[1] + b[1])
