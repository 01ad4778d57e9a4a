from __future__ import annotations

from collections.abc import Collection

from .state import DIRECTIONS, STOPPED, Cell, Direction


def is_direction(value) -> bool:
    """True for one of the four unit moves or the stopped sentinel."""
    try:
        dx, dy = value
    except (TypeError, ValueError):
        return False
    if type(dx) is not int or type(dy) is not int:
        return False
    return (dx, dy) == STOPPED or (dx, dy) in DIRECTIONS


def is_reversal(current: Direction, requested: Direction) -> bool:
    """A request that would turn the head straight back into the neck."""
    if current[0] != 0 and requested[0] == -current[0]:
        return True
    if current[1] != 0 and requested[1] == -current[1]:
        return True
    return False


def in_bounds(cell: Cell, grid_size: int) -> bool:
    x, y = cell
    return 0 <= x < grid_size and 0 <= y < grid_size


def hits_something(head: Cell, body: Collection[Cell], grid_size: int) -> bool:
    # The tail is still part of body here: a head moving into the cell the
    # tail is about to leave dies.
    if not in_bounds(head, grid_size):
        return True
    return head in body


def place_food(body: Collection[Cell], grid_size: int, rng) -> Cell | None:
    """Sample random cells until one is free of the body.

    Returns None when the body covers the whole grid (only a 1x1 board gets
    there under the current rules) instead of sampling forever.
    """
    if len(set(body)) >= grid_size * grid_size:
        return None
    while True:
        pos = (rng.randrange(grid_size), rng.randrange(grid_size))
        if pos not in body:
            return pos
