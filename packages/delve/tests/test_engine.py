"""Tests for engine stepping, system order, and stop requests."""

from dataclasses import dataclass

from delve.engine import Engine
from delve.world import World


@dataclass
class Counter:
    value: int


def test_engine_init_defaults():
    engine = Engine()
    assert engine.clock.tps == 60
    assert engine.clock.tick_number == 0
    assert isinstance(engine.world, World)


def test_systems_run_in_order():
    engine = Engine()
    order = []

    engine.add_system(lambda w, c: order.append(("first", c.tick_number)))
    engine.add_system(lambda w, c: order.append(("second", c.tick_number)))
    assert engine.step()

    assert order == [("first", 1), ("second", 1)]


def test_run_n_ticks():
    engine = Engine(tps=20)
    engine.add_system(lambda w, c: None)
    assert engine.run(7) == 7
    assert engine.clock.tick_number == 7
    assert engine.run(0) == 0


def test_systems_mutate_world():
    engine = Engine()
    eid = engine.world.spawn(Counter(0))

    def increment(world, ctx):
        for _, (counter,) in world.query(Counter):
            counter.value += 1

    engine.add_system(increment)
    engine.run(3)
    assert engine.world.get(eid, Counter).value == 3


def test_request_stop_halts_run():
    engine = Engine()
    seen = []

    def stopper(world, ctx):
        seen.append(ctx.tick_number)
        if ctx.tick_number == 4:
            ctx.request_stop()

    engine.add_system(stopper)
    assert engine.run(100) == 4
    assert seen == [1, 2, 3, 4]


def test_request_stop_skips_later_systems():
    engine = Engine()
    later = []

    engine.add_system(lambda w, c: c.request_stop())
    engine.add_system(lambda w, c: later.append(c.tick_number))
    assert not engine.step()
    assert later == []


def test_seeded_engines_share_random_stream():
    a = Engine(seed=7)
    b = Engine(seed=7)
    assert [a.random.random() for _ in range(3)] == [b.random.random() for _ in range(3)]


def test_context_carries_engine_random():
    engine = Engine(tps=30, seed=3)
    seen = []
    engine.add_system(lambda w, c: seen.append((c.random, c.tps)))
    engine.step()
    assert seen == [(engine.random, 30)]
