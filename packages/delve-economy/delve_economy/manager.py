"""EconomyManager - single owner of the player state."""
from __future__ import annotations

import logging
import random
from typing import Callable

from delve_economy import transitions
from delve_economy.config import EconomyConfig
from delve_economy.state import PlayerState, new_player_state
from delve_economy.types import ResourceId

logger = logging.getLogger(__name__)

ChangeListener = Callable[[PlayerState, PlayerState], None]


class EconomyManager:
    """Holds the current :class:`PlayerState` and applies intents to it.

    Intent methods return True when the state changed and False when the
    request was refused (unknown id, unaffordable, prerequisites unmet).
    Refusals leave the state untouched and are never raised as errors.
    """

    def __init__(
        self,
        config: EconomyConfig | None = None,
        seed: int | None = None,
        state: PlayerState | None = None,
    ) -> None:
        self._config = config or EconomyConfig()
        self._rng = random.Random(seed)
        self._state = state if state is not None else new_player_state(self._config)
        self._listeners: list[ChangeListener] = []

    @property
    def state(self) -> PlayerState:
        return self._state

    @property
    def config(self) -> EconomyConfig:
        return self._config

    def on_change(self, listener: ChangeListener) -> None:
        """Register ``listener(old, new)``, called after every accepted change."""
        self._listeners.append(listener)

    def _commit(self, new: PlayerState, intent: str) -> bool:
        old = self._state
        if new is old:
            logger.debug("rejected %s", intent)
            return False
        self._state = new
        if new.level > old.level:
            logger.debug(
                "level %d -> %d (+%d skill points)",
                old.level, new.level, new.skill_points - old.skill_points,
            )
        for listener in list(self._listeners):
            listener(old, new)
        return True

    # --- Intents ---

    def mine(self) -> bool:
        return self._commit(
            transitions.mine(self._state, self._rng, self._config), "mine"
        )

    def auto_tick(self) -> bool:
        return self._commit(transitions.auto_tick(self._state, self._config), "auto_tick")

    def sell(self, resource_id: ResourceId | str, amount: float) -> bool:
        return self._commit(
            transitions.sell(self._state, resource_id, amount, self._config),
            f"sell {resource_id}",
        )

    def sell_all(self, resource_id: ResourceId | str) -> bool:
        """Sell the entire held quantity of one resource."""
        return self.sell(resource_id, self._state.quantity(resource_id))

    def buy_equipment(self, equipment_id: str) -> bool:
        accepted = self._commit(
            transitions.buy_equipment(self._state, equipment_id, self._config),
            f"buy_equipment {equipment_id}",
        )
        if accepted:
            logger.debug(
                "bought %s (owned=%d, click_power=%s, auto_rate=%s)",
                equipment_id, self._state.owned(equipment_id),
                self._state.click_power, self._state.auto_mine_rate,
            )
        return accepted

    def buy_upgrade(self, upgrade_id: str) -> bool:
        return self._commit(
            transitions.buy_upgrade(self._state, upgrade_id, self._config),
            f"buy_upgrade {upgrade_id}",
        )

    def spend_skill_point(self, skill_id: str) -> bool:
        return self._commit(
            transitions.spend_skill_point(self._state, skill_id),
            f"spend_skill_point {skill_id}",
        )

    def gain_experience(self, amount: float) -> bool:
        return self._commit(
            transitions.gain_experience(self._state, amount, self._config),
            "gain_experience",
        )

    def trigger_reset(self) -> bool:
        return self._commit(transitions.trigger_reset(self._state), "trigger_reset")

    def grant_minigame_reward(self) -> bool:
        return self._commit(
            transitions.grant_minigame_reward(self._state, self._config),
            "grant_minigame_reward",
        )

    # --- Queries ---

    def equipment_cost(self, equipment_id: str) -> float | None:
        return transitions.equipment_cost(self._state, equipment_id, self._config)

    def upgrade_cost(self, upgrade_id: str) -> float | None:
        return transitions.upgrade_cost(self._state, upgrade_id, self._config)

    def skill_cost(self, skill_id: str) -> int | None:
        return transitions.skill_cost(self._state, skill_id)

    def minigame_bonus_seconds(self) -> float:
        return transitions.minigame_bonus_seconds(self._state)
