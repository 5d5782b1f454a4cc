"""delve-economy - Progression and economy rules for Deep Mine."""
from delve_economy import catalog, transitions
from delve_economy.config import EconomyConfig
from delve_economy.manager import EconomyManager
from delve_economy.state import PlayerState, new_player_state
from delve_economy.systems import make_auto_mine_system
from delve_economy.types import (
    Combinator,
    Effect,
    EquipmentCategory,
    EquipmentDef,
    MultiplierField,
    Multipliers,
    ResourceDef,
    ResourceId,
    SkillDef,
    UpgradeDef,
)

__all__ = [
    "Combinator",
    "EconomyConfig",
    "EconomyManager",
    "Effect",
    "EquipmentCategory",
    "EquipmentDef",
    "MultiplierField",
    "Multipliers",
    "PlayerState",
    "ResourceDef",
    "ResourceId",
    "SkillDef",
    "UpgradeDef",
    "catalog",
    "make_auto_mine_system",
    "new_player_state",
    "transitions",
]
