"""
Tests for scheduler.py - frame time to tick conversion.
"""

import pytest

from snake_arcade.errors import ConfigError
from snake_arcade.scheduler import Scheduler


@pytest.fixture
def scheduler():
    s = Scheduler()
    s.start()
    return s


def test_idle_scheduler_never_ticks():
    s = Scheduler()
    assert s.advance(1000, 100) == 0


def test_accumulates_partial_frames(scheduler):
    assert scheduler.advance(60, 150) == 0
    assert scheduler.advance(60, 150) == 0
    assert scheduler.advance(60, 150) == 1
    # 30 ms carried over
    assert scheduler.advance(120, 150) == 1


def test_long_frame_yields_several_ticks(scheduler):
    assert scheduler.advance(460, 150) == 3


def test_interval_change_applies_immediately(scheduler):
    scheduler.advance(100, 150)
    assert scheduler.advance(0, 50) == 2


def test_pause_stops_the_clock(scheduler):
    scheduler.advance(100, 150)
    assert scheduler.toggle_pause() is True
    assert scheduler.advance(1000, 150) == 0
    assert scheduler.toggle_pause() is False
    assert scheduler.advance(50, 150) == 1


def test_pause_needs_an_active_timer():
    s = Scheduler()
    assert s.toggle_pause() is False
    assert s.paused is False


def test_stop_clears_pause_and_time(scheduler):
    scheduler.advance(100, 150)
    scheduler.toggle_pause()
    scheduler.stop()
    assert scheduler.active is False
    assert scheduler.paused is False
    scheduler.start()
    assert scheduler.advance(100, 150) == 0


def test_start_twice_keeps_accumulated_time(scheduler):
    scheduler.advance(100, 150)
    scheduler.start()
    assert scheduler.advance(50, 150) == 1


def test_rejects_bad_interval(scheduler):
    with pytest.raises(ConfigError):
        scheduler.advance(10, 0)


def test_rejects_negative_elapsed(scheduler):
    with pytest.raises(ValueError):
        scheduler.advance(-1, 150)
