"""Tests for the Minigame state machine and frame loop."""
from __future__ import annotations

import pytest

from delve_minigame import Box, Falling, Minigame, MinigameConfig, Phase

TPS = 60

# Tall canvas: spawned gas lines cannot reach the player within a short run.
SAFE = MinigameConfig(height=5000.0, duration=1.0)


@pytest.fixture
def results() -> list[Phase]:
    return []


def make_game(results: list[Phase], config: MinigameConfig | None = None) -> Minigame:
    return Minigame(config, on_result=results.append, tps=TPS, seed=7)


def drop_obstacle(game: Minigame, x: float, y: float, width: float = 50.0,
                  speed: float = 1.0) -> int:
    world = game.world
    assert world is not None
    return world.spawn(Box(x=x, y=y, width=width, height=10.0), Falling(speed=speed))


class TestLifecycle:
    def test_starts_idle(self, results: list[Phase]) -> None:
        game = make_game(results)
        assert game.phase is Phase.IDLE
        assert game.world is None
        game.step()
        assert results == []

    def test_activate(self, results: list[Phase]) -> None:
        game = make_game(results)
        assert game.activate(depth=10.0)
        assert game.phase is Phase.ACTIVE
        assert game.seconds_left == 10
        view = game.view()
        assert view.player is not None
        assert (view.player.x, view.player.y) == (200.0, 470.0)
        assert view.obstacles == ()
        assert view.difficulty == pytest.approx(1.2)

    def test_activate_while_active_is_ignored(self, results: list[Phase]) -> None:
        game = make_game(results)
        game.activate(depth=10.0)
        world = game.world
        assert not game.activate(depth=20.0)
        assert game.world is world

    def test_bonus_seconds_extend_countdown(self, results: list[Phase]) -> None:
        game = make_game(results)
        game.activate(depth=10.0, bonus_seconds=3)
        assert game.seconds_left == 13


class TestOutcomes:
    def test_survive_countdown_wins(self, results: list[Phase]) -> None:
        game = make_game(results, SAFE)
        game.activate(depth=10.0)
        for _ in range(TPS - 1):
            game.step()
        assert game.phase is Phase.ACTIVE
        assert results == []
        game.step()
        assert game.phase is Phase.WON
        assert results == [Phase.WON]
        assert game.seconds_left == 0

    def test_overlap_loses_on_that_frame(self, results: list[Phase]) -> None:
        game = make_game(results)
        game.activate(depth=0.0)
        # Player box spans y 470..490; gas line bottom reaches 471 on frame 6.
        drop_obstacle(game, x=190.0, y=455.0, speed=1.0)
        for _ in range(5):
            game.step()
        assert game.phase is Phase.ACTIVE
        game.step()
        assert game.phase is Phase.LOST
        assert results == [Phase.LOST]

    def test_terminal_state_halts_everything(self, results: list[Phase]) -> None:
        game = make_game(results, SAFE)
        game.activate(depth=0.0)
        for _ in range(TPS):
            game.step()
        assert game.world is None
        for _ in range(TPS * 3):
            game.step()
        assert results == [Phase.WON]
        assert game.view().obstacles == ()

    def test_dismiss_active_counts_as_loss(self, results: list[Phase]) -> None:
        game = make_game(results)
        game.activate(depth=10.0)
        game.step()
        game.dismiss()
        assert results == [Phase.LOST]
        assert game.phase is Phase.IDLE
        assert game.world is None

    def test_dismiss_after_result_reports_nothing(self, results: list[Phase]) -> None:
        game = make_game(results, SAFE)
        game.activate(depth=0.0)
        for _ in range(TPS):
            game.step()
        game.dismiss()
        game.dismiss()
        assert results == [Phase.WON]
        assert game.phase is Phase.IDLE

    def test_restart_after_loss(self, results: list[Phase]) -> None:
        game = make_game(results)
        game.activate(depth=0.0)
        game.dismiss()
        assert game.activate(depth=20.0)
        assert game.phase is Phase.ACTIVE
        assert game.view().obstacles == ()
        assert game.seconds_left == 10


class TestFrameUpdate:
    def test_spawner_cadence(self, results: list[Phase]) -> None:
        game = make_game(results, MinigameConfig(height=5000.0))
        game.activate(depth=0.0)
        for _ in range(TPS // 2 - 1):
            game.step()
        assert game.view().obstacles == ()
        game.step()
        assert len(game.view().obstacles) == 1
        for _ in range(TPS // 2):
            game.step()
        assert len(game.view().obstacles) == 2

    def test_spawned_obstacles_within_bounds(self, results: list[Phase]) -> None:
        cfg = MinigameConfig(height=50000.0, duration=30.0)
        game = make_game(results, cfg)
        game.activate(depth=0.0)
        for _ in range(TPS * 20):
            game.step()
        obstacles = game.view().obstacles
        assert len(obstacles) == 40
        for rect in obstacles:
            assert 50.0 <= rect.width < 150.0
            assert rect.x >= 0.0
            assert rect.x + rect.width <= cfg.width
            assert rect.height == 10.0

    def test_fall_speed_scales_with_depth(self, results: list[Phase]) -> None:
        game = make_game(results)
        game.activate(depth=50.0)
        eid = drop_obstacle(game, x=0.0, y=0.0, speed=2.5)
        game.step()
        world = game.world
        assert world is not None
        assert world.get(eid, Box).y == pytest.approx(5.0)

    def test_obstacles_past_bottom_are_discarded(self, results: list[Phase]) -> None:
        game = make_game(results)
        game.activate(depth=0.0)
        eid = drop_obstacle(game, x=0.0, y=498.0, speed=3.0)
        game.step()
        world = game.world
        assert world is not None
        assert not world.has(eid, Box)


class TestMovement:
    def test_left_and_right(self, results: list[Phase]) -> None:
        game = make_game(results)
        game.activate(depth=0.0)
        game.left_pressed()
        view = game.view()
        assert view.player is not None and view.player.x == 190.0
        game.right_pressed()
        game.right_pressed()
        view = game.view()
        assert view.player is not None and view.player.x == 210.0

    def test_clamped_to_canvas(self, results: list[Phase]) -> None:
        game = make_game(results)
        game.activate(depth=0.0)
        for _ in range(100):
            game.left_pressed()
        view = game.view()
        assert view.player is not None and view.player.x == 0.0
        for _ in range(100):
            game.right_pressed()
        view = game.view()
        assert view.player is not None and view.player.x == 380.0

    def test_moves_ignored_when_idle(self, results: list[Phase]) -> None:
        game = make_game(results)
        game.left_pressed()
        game.right_pressed()
        assert game.view().player is None
