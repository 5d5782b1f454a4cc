"""Tests for Clock frame counting and time-unit conversion."""

import random

import pytest

from delve.clock import Clock


def test_clock_rejects_non_positive_tps():
    with pytest.raises(ValueError):
        Clock(0)
    with pytest.raises(ValueError):
        Clock(-5)


def test_next_frame_advances():
    clock = Clock(20)
    rng = random.Random(1)
    assert clock.tick_number == 0
    ctx = clock.next_frame(lambda: None, rng)
    assert ctx.tick_number == 1
    assert ctx.tps == 20
    assert ctx.random is rng
    assert clock.next_frame(lambda: None, rng).tick_number == 2
    assert clock.tick_number == 2


# --- Duration conversion ---

def test_ticks_whole_seconds():
    assert Clock(60).ticks(1) == 60
    assert Clock(60).ticks(10) == 600


def test_ticks_fractional_seconds():
    assert Clock(60).ticks(0.5) == 30
    assert Clock(30).ticks(0.1) == 3
    assert Clock(20).ticks(0.05) == 1


def test_ticks_rounds_up_to_at_least_one():
    assert Clock(4).ticks(0.1) == 1
    assert Clock(60).ticks(0.01) == 1


def test_ticks_rejects_non_positive():
    with pytest.raises(ValueError):
        Clock(60).ticks(0)
