"""
Tests for controls.py - key mapping and the direction buffer.
"""

import pygame
import pytest

from snake_arcade.controls import InputAdapter, direction_for_key
from snake_arcade.engine import GameEngine
from snake_arcade.state import DOWN, LEFT, RIGHT, UP


class TestKeyMapping:
    @pytest.mark.parametrize(
        "key, direction",
        [
            (pygame.K_UP, UP),
            (pygame.K_w, UP),
            (pygame.K_DOWN, DOWN),
            (pygame.K_s, DOWN),
            (pygame.K_LEFT, LEFT),
            (pygame.K_a, LEFT),
            (pygame.K_RIGHT, RIGHT),
            (pygame.K_d, RIGHT),
        ],
    )
    def test_arrows_and_wasd(self, key, direction):
        assert direction_for_key(key) == direction

    def test_unmapped_key(self):
        assert direction_for_key(pygame.K_SPACE) is None


class TestInputAdapter:
    def test_capacity_defaults_to_two(self):
        inputs = InputAdapter()
        assert inputs.push(UP)
        assert inputs.push(LEFT)
        assert not inputs.push(DOWN)
        assert inputs.pending == (UP, LEFT)

    def test_rejects_zero_capacity(self):
        with pytest.raises(ValueError):
            InputAdapter(capacity=0)

    def test_drains_one_per_call_in_order(self):
        eng = GameEngine(grid_size=9)
        inputs = InputAdapter()
        inputs.push(UP)
        inputs.push(LEFT)

        assert inputs.drain_into(eng) == UP
        assert eng.direction == UP
        assert len(inputs) == 1

        assert inputs.drain_into(eng) == LEFT
        assert eng.direction == LEFT
        assert inputs.drain_into(eng) is None

    def test_buffer_lets_a_quick_u_turn_through(self):
        """UP then LEFT inside one tick while heading RIGHT turns around over two ticks."""
        eng = GameEngine(grid_size=9)
        eng.food = (0, 0)
        eng.set_direction(RIGHT)
        inputs = InputAdapter()
        inputs.push(UP)
        inputs.push(LEFT)

        inputs.drain_into(eng)
        eng.step()
        inputs.drain_into(eng)
        eng.step()

        assert eng.direction == LEFT
        assert list(eng.body) == [(3, 3)]

    def test_start_with_replaces_queue(self):
        inputs = InputAdapter()
        inputs.push(UP)
        inputs.push(DOWN)
        inputs.start_with(RIGHT)
        assert inputs.pending == (RIGHT,)

    def test_clear(self):
        inputs = InputAdapter()
        inputs.push(UP)
        inputs.clear()
        assert len(inputs) == 0
