"""Pure economy transitions: (state, intent) -> state.

Every function returns a new :class:`PlayerState` when the request is
accepted and the *same object* when it is rejected, so callers can test
acceptance with ``new is not old``.
"""
from __future__ import annotations

import dataclasses
import math
import random
from typing import Mapping

from delve_economy import catalog
from delve_economy.config import EconomyConfig
from delve_economy.state import PlayerState
from delve_economy.types import (
    EquipmentCategory,
    Multipliers,
    ResourceDef,
    ResourceId,
    UpgradeDef,
)

_DEFAULT_CONFIG = EconomyConfig()


# --- Queries ---

def current_resource(depth: float) -> ResourceDef:
    """Resource kind mined at *depth* (highest unlock depth <= depth)."""
    return catalog.resource_at_depth(depth)


def equipment_cost(
    state: PlayerState, equipment_id: str, config: EconomyConfig = _DEFAULT_CONFIG,
) -> float | None:
    """Price of the next unit, or None for an unknown id."""
    defn = catalog.equipment(equipment_id)
    if defn is None:
        return None
    return defn.base_cost * config.equipment_cost_growth ** state.owned(equipment_id)


def upgrade_cost(
    state: PlayerState, upgrade_id: str, config: EconomyConfig = _DEFAULT_CONFIG,
) -> float | None:
    """Price of the next upgrade level, or None for an unknown id."""
    defn = catalog.upgrade(upgrade_id)
    if defn is None:
        return None
    return _upgrade_price(defn, state.upgrade_level(upgrade_id), config)


def _upgrade_price(defn: UpgradeDef, level: int, config: EconomyConfig) -> float:
    return defn.base_cost * config.upgrade_cost_growth ** level


def skill_cost(state: PlayerState, skill_id: str) -> int | None:
    defn = catalog.skill(skill_id)
    if defn is None:
        return None
    return defn.cost_at(state.skill_level(skill_id))


def can_spend_skill_point(state: PlayerState, skill_id: str) -> bool:
    """Whether :func:`spend_skill_point` would accept *skill_id* right now."""
    return _affordable_skill_cost(state, skill_id) is not None


def _affordable_skill_cost(state: PlayerState, skill_id: str) -> int | None:
    """Point cost of the next level of *skill_id*, or None when it can't be bought."""
    defn = catalog.skill(skill_id)
    if defn is None or state.skill_points <= 0:
        return None
    level = state.skill_level(skill_id)
    if level >= defn.max_level:
        return None
    if any(state.skill_level(req) <= 0 for req in defn.requires):
        return None
    cost = defn.cost_at(level)
    return cost if state.skill_points >= cost else None


def portfolio_value(state: PlayerState) -> float:
    """Base value of everything held, ignoring the sell multiplier."""
    return sum(state.quantity(r.id) * r.value for r in catalog.RESOURCES)


def minigame_bonus_seconds(state: PlayerState) -> float:
    defn = catalog.skill(catalog.MINIGAME_BONUS_SKILL)
    if defn is None:
        return 0.0
    return defn.effect_at(state.skill_level(defn.id))


# --- Experience ---

def gain_experience(
    state: PlayerState, amount: float, config: EconomyConfig = _DEFAULT_CONFIG,
) -> PlayerState:
    """Add scaled experience and apply every level-up it pays for."""
    if amount <= 0:
        return state
    experience = state.experience + amount * state.multipliers.experience
    level = state.level
    points = state.skill_points
    threshold = state.experience_to_next
    while experience >= threshold:
        experience -= threshold
        level += 1
        points += 1
        threshold = math.floor(threshold * config.level_threshold_growth)
    return dataclasses.replace(
        state,
        experience=experience,
        level=level,
        skill_points=points,
        experience_to_next=threshold,
    )


# --- Mining ---

def _extract(
    state: PlayerState, power: float, depth_rate: float,
) -> PlayerState:
    resource = current_resource(state.depth)
    resources = dict(state.resources)
    resources[resource.id] = resources.get(resource.id, 0.0) + power
    return dataclasses.replace(
        state,
        resources=resources,
        total_mined=state.total_mined + power,
        depth=state.depth + power * depth_rate,
    )


def mine(
    state: PlayerState,
    rng: random.Random,
    config: EconomyConfig = _DEFAULT_CONFIG,
) -> PlayerState:
    """Manual click. A rare find doubles the power of this click only."""
    bundle = state.multipliers
    power = state.click_power * bundle.click
    if rng.random() < bundle.rare_find_chance / 100:
        power *= 2
    mined = _extract(state, power, config.click_depth_rate)
    return gain_experience(mined, power, config)


def auto_tick(
    state: PlayerState, config: EconomyConfig = _DEFAULT_CONFIG,
) -> PlayerState:
    """One automation interval. No rare finds, half experience, half depth."""
    if state.auto_mine_rate <= 0:
        return state
    power = state.auto_mine_rate * state.multipliers.auto
    mined = _extract(state, power, config.auto_depth_rate)
    return gain_experience(mined, power * config.auto_experience_factor, config)


# --- Trading ---

def sell(
    state: PlayerState,
    resource_id: ResourceId | str,
    amount: float,
    config: EconomyConfig = _DEFAULT_CONFIG,
) -> PlayerState:
    defn = catalog.resource(resource_id)
    if defn is None or amount <= 0:
        return state
    held = state.quantity(defn.id)
    if held < amount:
        return state
    earned = amount * defn.value * state.multipliers.sell_price
    resources = dict(state.resources)
    resources[defn.id] = held - amount
    sold = dataclasses.replace(
        state, resources=resources, money=state.money + earned,
    )
    return gain_experience(sold, earned / config.sell_experience_divisor, config)


def _derive_equipment_stats(owned: Mapping[str, int]) -> tuple[float, float]:
    """Recompute (click_power, auto_mine_rate) from ownership counts."""
    click_power = 1.0
    auto_rate = 0.0
    for defn in catalog.EQUIPMENT:
        contribution = defn.power * owned.get(defn.id, 0)
        if defn.category is EquipmentCategory.AUTOMATION:
            auto_rate += contribution
        else:
            click_power += contribution
    return click_power, auto_rate


def buy_equipment(
    state: PlayerState, equipment_id: str, config: EconomyConfig = _DEFAULT_CONFIG,
) -> PlayerState:
    cost = equipment_cost(state, equipment_id, config)
    if cost is None or state.money < cost:
        return state
    owned = dict(state.equipment)
    owned[equipment_id] = owned.get(equipment_id, 0) + 1
    click_power, auto_rate = _derive_equipment_stats(owned)
    return dataclasses.replace(
        state,
        money=state.money - cost,
        equipment=owned,
        click_power=click_power,
        auto_mine_rate=auto_rate,
    )


def buy_upgrade(
    state: PlayerState, upgrade_id: str, config: EconomyConfig = _DEFAULT_CONFIG,
) -> PlayerState:
    defn = catalog.upgrade(upgrade_id)
    if defn is None:
        return state
    cost = _upgrade_price(defn, state.upgrade_level(upgrade_id), config)
    if state.money < cost:
        return state
    levels = dict(state.upgrades)
    levels[upgrade_id] = levels.get(upgrade_id, 0) + 1
    return dataclasses.replace(
        state,
        money=state.money - cost,
        upgrades=levels,
        upgrade_multipliers=defn.effect.apply(state.upgrade_multipliers),
    )


# --- Skills ---

def _derive_skill_multipliers(levels: Mapping[str, int]) -> Multipliers:
    """Absolute bundle for the given skill levels (not cumulative)."""
    bundle = Multipliers()
    for defn in catalog.SKILLS:
        if defn.target is None:
            continue
        bundle = bundle.with_value(defn.target, defn.effect_at(levels.get(defn.id, 0)))
    return bundle


def spend_skill_point(state: PlayerState, skill_id: str) -> PlayerState:
    cost = _affordable_skill_cost(state, skill_id)
    if cost is None:
        return state
    levels = dict(state.skills)
    levels[skill_id] = state.skill_level(skill_id) + 1
    return dataclasses.replace(
        state,
        skill_points=state.skill_points - cost,
        skills=levels,
        skill_multipliers=_derive_skill_multipliers(levels),
    )


# --- Minigame outcomes ---

def trigger_reset(state: PlayerState) -> PlayerState:
    """Minigame-loss penalty: currency to zero, everything else kept."""
    return dataclasses.replace(state, money=0.0)


def grant_minigame_reward(
    state: PlayerState, config: EconomyConfig = _DEFAULT_CONFIG,
) -> PlayerState:
    return gain_experience(state, config.minigame_reward, config)
