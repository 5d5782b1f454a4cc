"""Tests for Timer/Periodic components and their systems."""

import pytest

from delve import Engine, Periodic, Timer, make_periodic_system, make_timer_system


class TestTimer:

    def test_timer_fires_at_correct_tick(self):
        engine = Engine(tps=20, seed=42)
        fired = []
        engine.add_system(make_timer_system(
            lambda w, ctx, eid, timer: fired.append((ctx.tick_number, timer.name))
        ))
        eid = engine.world.spawn()
        engine.world.attach(eid, Timer(name="countdown", remaining=5))

        engine.run(4)
        assert fired == []
        engine.step()
        assert fired == [(5, "countdown")]

    def test_timer_fires_once_and_detaches(self):
        engine = Engine(tps=20, seed=42)
        fired = []
        engine.add_system(make_timer_system(lambda w, ctx, eid, timer: fired.append(eid)))
        eid = engine.world.spawn()
        engine.world.attach(eid, Timer(name="once", remaining=2))

        engine.run(10)
        assert fired == [eid]
        assert not engine.world.has(eid, Timer)


class TestPeriodic:

    def test_periodic_fires_at_interval(self):
        engine = Engine(tps=20, seed=42)
        fired = []
        engine.add_system(make_periodic_system(
            lambda w, ctx, eid, periodic: fired.append(ctx.tick_number)
        ))
        eid = engine.world.spawn()
        engine.world.attach(eid, Periodic(name="spawn", interval=3))

        engine.run(10)
        assert fired == [3, 6, 9]
        assert engine.world.has(eid, Periodic)

    def test_periodic_rejects_non_positive_interval(self):
        with pytest.raises(ValueError):
            Periodic(name="bad", interval=0)

    def test_despawned_during_pass_is_skipped(self):
        engine = Engine(tps=20, seed=42)
        fired = []
        world = engine.world
        first = world.spawn()
        second = world.spawn()
        world.attach(first, Periodic(name="first", interval=1))
        world.attach(second, Periodic(name="second", interval=1))

        def on_fire(w, ctx, eid, periodic):
            fired.append(periodic.name)
            if periodic.name == "first":
                w.despawn(second)

        engine.add_system(make_periodic_system(on_fire))
        engine.step()
        assert fired == ["first"]
