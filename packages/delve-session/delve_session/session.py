"""Session - host-facing facade over the economy and the minigame."""
from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import TYPE_CHECKING

from delve import Engine
from delve_economy import EconomyManager, PlayerState, ResourceId, make_auto_mine_system
from delve_minigame import DepthTrigger, Minigame, MinigameView, Phase

from delve_session.config import SessionConfig

if TYPE_CHECKING:
    from delve import TickContext, World

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class SessionView:
    """Read-only snapshot handed to the renderer after each call."""

    player: PlayerState
    minigame: MinigameView
    tick_number: int


class Session:
    """One play session.

    The host forwards player intents to the methods below and calls
    :meth:`step` once per display frame. Every economy change, manual or
    automatic, is followed by exactly one depth-milestone check against the
    updated state; a new milestone opens the minigame, whose outcome is fed
    back into the economy.
    """

    def __init__(
        self,
        config: SessionConfig | None = None,
        state: PlayerState | None = None,
    ) -> None:
        self._config = config or SessionConfig()
        cfg = self._config
        self._engine = Engine(tps=cfg.tps, seed=cfg.seed)
        rng = self._engine.random
        self._economy = EconomyManager(
            cfg.economy, seed=rng.getrandbits(64), state=state,
        )
        self._minigame = Minigame(
            cfg.minigame,
            on_result=self._on_minigame_result,
            tps=cfg.tps,
            seed=rng.getrandbits(64),
        )
        self._trigger = DepthTrigger(
            cfg.milestone_interval, self._economy.state.depth,
        )
        self._engine.add_system(make_auto_mine_system(
            self._economy, cfg.auto_mine_interval, on_mined=self._after_auto_mine,
        ))
        self._engine.add_system(self._minigame_system)

    @property
    def economy(self) -> EconomyManager:
        return self._economy

    @property
    def minigame(self) -> Minigame:
        return self._minigame

    @property
    def state(self) -> PlayerState:
        return self._economy.state

    @property
    def engine(self) -> Engine:
        return self._engine

    def view(self) -> SessionView:
        return SessionView(
            player=self._economy.state,
            minigame=self._minigame.view(),
            tick_number=self._engine.clock.tick_number,
        )

    # --- Economy intents ---

    def click(self) -> bool:
        return self._checked(self._economy.mine())

    def sell(self, resource_id: ResourceId | str, amount: float) -> bool:
        return self._checked(self._economy.sell(resource_id, amount))

    def sell_all(self, resource_id: ResourceId | str) -> bool:
        return self._checked(self._economy.sell_all(resource_id))

    def buy_equipment(self, equipment_id: str) -> bool:
        return self._checked(self._economy.buy_equipment(equipment_id))

    def buy_upgrade(self, upgrade_id: str) -> bool:
        return self._checked(self._economy.buy_upgrade(upgrade_id))

    def spend_skill_point(self, skill_id: str) -> bool:
        return self._checked(self._economy.spend_skill_point(skill_id))

    # --- Minigame intents ---

    def left(self) -> None:
        self._minigame.left_pressed()

    def right(self) -> None:
        self._minigame.right_pressed()

    def dismiss(self) -> None:
        self._minigame.dismiss()

    # --- Frame clock ---

    def step(self) -> None:
        self._engine.step()

    def run(self, frames: int) -> int:
        return self._engine.run(frames)

    # --- Internals ---

    def _checked(self, accepted: bool) -> bool:
        if accepted:
            self._check_depth()
        return accepted

    def _check_depth(self) -> None:
        state = self._economy.state
        if not self._trigger.observe(state.depth):
            return
        if self._minigame.active:
            logger.debug("milestone at depth %.1f while minigame running", state.depth)
            return
        self._minigame.activate(state.depth, self._economy.minigame_bonus_seconds())

    def _after_auto_mine(self, world: World, ctx: TickContext) -> None:
        self._check_depth()

    def _minigame_system(self, world: World, ctx: TickContext) -> None:
        self._minigame.step()

    def _on_minigame_result(self, outcome: Phase) -> None:
        if outcome is Phase.WON:
            self._economy.grant_minigame_reward()
        else:
            self._economy.trigger_reset()
