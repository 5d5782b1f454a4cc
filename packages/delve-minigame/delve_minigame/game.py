"""Minigame - timed gas-line dodging run on its own short-lived engine."""
from __future__ import annotations

import logging
import math
import random
from typing import TYPE_CHECKING, Callable

from delve import Engine, Periodic, Timer, make_periodic_system, make_timer_system

from delve_minigame.components import Avatar, Box, Falling, MinigameView, Phase, Rect
from delve_minigame.config import MinigameConfig
from delve_minigame.systems import make_collision_system, make_fall_system, spawn_obstacle

if TYPE_CHECKING:
    from delve import EntityId, TickContext, World

logger = logging.getLogger(__name__)

ResultCallback = Callable[[Phase], None]

_SPAWNER = "spawner"
_COUNTDOWN = "countdown"


def _rect(box: Box) -> Rect:
    return Rect(box.x, box.y, box.width, box.height)


class Minigame:
    """State machine IDLE -> ACTIVE -> {WON, LOST}.

    Each activation builds a fresh :class:`~delve.Engine` whose systems are
    the obstacle spawner, the frame updater (fall + collision) and the
    countdown. The host calls :meth:`step` once per display frame. Reaching
    a terminal phase drops the engine, so none of those processes can run
    again, and reports the outcome to ``on_result`` exactly once.
    """

    def __init__(
        self,
        config: MinigameConfig | None = None,
        on_result: ResultCallback | None = None,
        tps: int = 60,
        seed: int | None = None,
    ) -> None:
        self._config = config or MinigameConfig()
        self._on_result = on_result
        self._tps = tps
        self._rng = random.Random(seed)
        self._phase = Phase.IDLE
        self._engine: Engine | None = None
        self._player: EntityId | None = None
        self._timer: Timer | None = None
        self._difficulty = 1.0

    @property
    def phase(self) -> Phase:
        return self._phase

    @property
    def active(self) -> bool:
        return self._phase is Phase.ACTIVE

    @property
    def config(self) -> MinigameConfig:
        return self._config

    @property
    def world(self) -> World | None:
        """The live minigame world, or None when not active."""
        return self._engine.world if self._engine is not None else None

    @property
    def seconds_left(self) -> int:
        if self._timer is None:
            return 0
        return math.ceil(self._timer.remaining / self._tps)

    def on_result(self, callback: ResultCallback) -> None:
        self._on_result = callback

    # --- Lifecycle ---

    def activate(self, depth: float, bonus_seconds: float = 0.0) -> bool:
        """Start a new run. Ignored (returns False) while one is in progress."""
        if self._phase is Phase.ACTIVE:
            return False
        cfg = self._config
        engine = Engine(tps=self._tps, seed=self._rng.getrandbits(64))
        world = engine.world
        self._difficulty = cfg.difficulty(depth)

        player = world.spawn(
            Box(
                x=cfg.width / 2,
                y=cfg.height - cfg.player_bottom_margin,
                width=cfg.player_size,
                height=cfg.player_size,
            ),
            Avatar(),
        )

        timer = Timer(name=_COUNTDOWN, remaining=engine.clock.ticks(cfg.duration + bonus_seconds))
        world.spawn(
            Periodic(name=_SPAWNER, interval=engine.clock.ticks(cfg.spawn_interval)),
            timer,
        )

        engine.add_system(make_periodic_system(self._on_spawn))
        engine.add_system(make_fall_system(self._difficulty, cfg.height))
        engine.add_system(make_collision_system(self._on_hit))
        engine.add_system(make_timer_system(self._on_timeout))

        self._engine = engine
        self._player = player
        self._timer = timer
        self._phase = Phase.ACTIVE
        logger.info(
            "minigame started at depth %.1f (difficulty %.2f, %d seconds)",
            depth, self._difficulty, self.seconds_left,
        )
        return True

    def step(self) -> None:
        """Advance one frame. No-op unless ACTIVE."""
        if self._phase is Phase.ACTIVE and self._engine is not None:
            self._engine.step()

    def dismiss(self) -> None:
        """Close the overlay and return to IDLE.

        Dismissing a run in progress reports a loss before closing.
        """
        if self._phase is Phase.ACTIVE:
            self._finish(Phase.LOST)
        self._phase = Phase.IDLE

    # --- Intents ---

    def left_pressed(self) -> None:
        self._move(-self._config.player_step)

    def right_pressed(self) -> None:
        self._move(self._config.player_step)

    def _move(self, dx: float) -> None:
        if self._phase is not Phase.ACTIVE or self._engine is None or self._player is None:
            return
        box = self._engine.world.get(self._player, Box)
        limit = self._config.width - box.width
        box.x = min(max(box.x + dx, 0.0), limit)

    # --- Callbacks from the engine ---

    def _on_spawn(self, world: World, ctx: TickContext, eid: EntityId, periodic: Periodic) -> None:
        spawn_obstacle(world, ctx.random, self._config)

    def _on_hit(
        self, world: World, ctx: TickContext, player: EntityId, obstacle: EntityId,
    ) -> None:
        logger.debug("player hit gas line %d on tick %d", obstacle, ctx.tick_number)
        self._finish(Phase.LOST)
        ctx.request_stop()

    def _on_timeout(self, world: World, ctx: TickContext, eid: EntityId, timer: Timer) -> None:
        self._finish(Phase.WON)
        ctx.request_stop()

    def _finish(self, outcome: Phase) -> None:
        if self._phase is not Phase.ACTIVE:
            return
        self._phase = outcome
        self._engine = None
        self._player = None
        self._timer = None
        logger.info("minigame %s", outcome.value)
        if self._on_result is not None:
            self._on_result(outcome)

    # --- Rendering ---

    def view(self) -> MinigameView:
        world = self.world
        if world is None:
            return MinigameView(
                phase=self._phase,
                seconds_left=self.seconds_left,
                difficulty=self._difficulty,
                player=None,
                obstacles=(),
            )
        player = None
        if self._player is not None:
            player = _rect(world.get(self._player, Box))
        obstacles = tuple(_rect(box) for _, (box, _) in world.query(Box, Falling))
        return MinigameView(
            phase=self._phase,
            seconds_left=self.seconds_left,
            difficulty=self._difficulty,
            player=player,
            obstacles=obstacles,
        )
