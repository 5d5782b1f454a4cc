"""Fixed game catalogs: resources, equipment, upgrades and skills."""
from __future__ import annotations

from delve_economy.types import (
    Combinator,
    Effect,
    EquipmentCategory,
    EquipmentDef,
    MultiplierField,
    ResourceDef,
    ResourceId,
    SkillDef,
    UpgradeDef,
)

RESOURCES: tuple[ResourceDef, ...] = (
    ResourceDef(ResourceId.COAL, "Coal", value=1, unlock_depth=0),
    ResourceDef(ResourceId.IRON, "Iron", value=5, unlock_depth=10),
    ResourceDef(ResourceId.GOLD, "Gold", value=25, unlock_depth=25),
    ResourceDef(ResourceId.DIAMOND, "Diamond", value=100, unlock_depth=50),
)

EQUIPMENT: tuple[EquipmentDef, ...] = (
    EquipmentDef(
        "basic_pickaxe", "Iron Pickaxe", EquipmentCategory.POWER_BOOST,
        power=2, base_cost=50, description="Doubles your mining power",
    ),
    EquipmentDef(
        "steel_pickaxe", "Steel Pickaxe", EquipmentCategory.POWER_BOOST,
        power=5, base_cost=200, description="5x mining power",
    ),
    EquipmentDef(
        "auto_miner", "Auto Miner", EquipmentCategory.AUTOMATION,
        power=1, base_cost=300, description="Mines 1 resource per second",
    ),
    EquipmentDef(
        "mining_cart", "Mining Cart", EquipmentCategory.AUTOMATION,
        power=5, base_cost=1500, description="Mines 5 resources per second",
    ),
    EquipmentDef(
        "excavator", "Excavator", EquipmentCategory.AUTOMATION,
        power=25, base_cost=7500, description="Mines 25 resources per second",
    ),
    EquipmentDef(
        "drill", "Power Drill", EquipmentCategory.POWER_BOOST,
        power=10, base_cost=1000, description="10x mining power",
    ),
    EquipmentDef(
        "mega_drill", "Mega Drill", EquipmentCategory.POWER_BOOST,
        power=50, base_cost=5000, description="50x mining power + depth bonus",
    ),
)

UPGRADES: tuple[UpgradeDef, ...] = (
    UpgradeDef(
        "click_power_1", "Reinforced Clicks", base_cost=100,
        effect=Effect(MultiplierField.CLICK, Combinator.MULTIPLY, 1.1),
        description="Increase click power by 10%",
    ),
    UpgradeDef(
        "auto_speed_1", "Faster Automation", base_cost=250,
        effect=Effect(MultiplierField.AUTO, Combinator.MULTIPLY, 1.1),
        description="Increase auto mining speed by 10%",
    ),
    UpgradeDef(
        "sell_bonus_1", "Better Sales", base_cost=500,
        effect=Effect(MultiplierField.SELL_PRICE, Combinator.MULTIPLY, 1.05),
        description="Increase resource sell price by 5%",
    ),
)

# Skill that lengthens the minigame instead of touching a multiplier.
MINIGAME_BONUS_SKILL = "minigame_bonus"

SKILLS: tuple[SkillDef, ...] = (
    SkillDef(
        "click_power_boost", "Power Strikes", max_level=10,
        target=MultiplierField.CLICK, per_level=0.05,
        description="+5% click power per level",
    ),
    SkillDef(
        "auto_mine_speed", "Tuned Machinery", max_level=10,
        target=MultiplierField.AUTO, per_level=0.05,
        requires=("click_power_boost",),
        description="+5% auto mining per level",
    ),
    SkillDef(
        "xp_gain", "Quick Learner", max_level=10,
        target=MultiplierField.EXPERIENCE, per_level=0.10,
        description="+10% experience per level",
    ),
    SkillDef(
        "rare_resource_chance", "Keen Eye", max_level=10,
        target=MultiplierField.RARE_FIND_CHANCE, per_level=1.0, base=0.0,
        cost_step=1, requires=("click_power_boost",),
        description="+1% chance for a click to mine double",
    ),
    SkillDef(
        MINIGAME_BONUS_SKILL, "Steady Nerves", max_level=5,
        target=None, per_level=1.0, base=0.0, base_cost=2,
        requires=("xp_gain",),
        description="+1 second to dodge gas lines per level",
    ),
)

_RESOURCES_BY_ID = {r.id: r for r in RESOURCES}
_EQUIPMENT_BY_ID = {e.id: e for e in EQUIPMENT}
_UPGRADES_BY_ID = {u.id: u for u in UPGRADES}
_SKILLS_BY_ID = {s.id: s for s in SKILLS}


def _check_catalogs() -> None:
    depths = [r.unlock_depth for r in RESOURCES]
    if any(b <= a for a, b in zip(depths, depths[1:])):
        raise ValueError("resource unlock depths must strictly increase")
    for skill in SKILLS:
        for req in skill.requires:
            if req not in _SKILLS_BY_ID:
                raise ValueError(f"skill {skill.id!r} requires unknown skill {req!r}")


_check_catalogs()


def resource(resource_id: ResourceId | str) -> ResourceDef | None:
    """Look up a resource kind by tag or string id. None if unknown."""
    try:
        return _RESOURCES_BY_ID[ResourceId(resource_id)]
    except ValueError:
        return None


def equipment(equipment_id: str) -> EquipmentDef | None:
    return _EQUIPMENT_BY_ID.get(equipment_id)


def upgrade(upgrade_id: str) -> UpgradeDef | None:
    return _UPGRADES_BY_ID.get(upgrade_id)


def skill(skill_id: str) -> SkillDef | None:
    return _SKILLS_BY_ID.get(skill_id)


def resource_at_depth(depth: float) -> ResourceDef:
    """Return the most recently unlocked resource kind at *depth*."""
    unlocked = [r for r in RESOURCES if depth >= r.unlock_depth]
    return unlocked[-1] if unlocked else RESOURCES[0]
