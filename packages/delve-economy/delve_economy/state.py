"""PlayerState - the single immutable record owned by the economy."""
from __future__ import annotations

from dataclasses import dataclass, field
from types import MappingProxyType
from typing import Mapping

from delve_economy import catalog
from delve_economy.config import EconomyConfig
from delve_economy.types import Multipliers, ResourceId


def _zero_resources() -> dict[ResourceId, float]:
    return {r.id: 0.0 for r in catalog.RESOURCES}


_MAPPING_FIELDS = ("resources", "equipment", "upgrades", "skills")


@dataclass(frozen=True)
class PlayerState:
    """Everything the economy knows about the player.

    Transitions never mutate a PlayerState; they build a new one with
    :func:`dataclasses.replace`. The mapping fields are copied into read-only
    views on construction, so a state handed to a renderer cannot be edited
    through them.

    Attributes:
        level: Current player level, starting at 1.
        experience: Experience accumulated toward the next level.
        experience_to_next: Experience threshold for the next level.
        skill_points: Unspent skill points.
        money: Currency balance.
        resources: Quantity held per resource kind (real-valued).
        depth: Progress metric; never decreases.
        total_mined: Cumulative quantity mined; never decreases.
        click_power: Derived from power-boost equipment.
        auto_mine_rate: Derived from automation equipment.
        equipment: Owned count per equipment id.
        upgrades: Purchase level per upgrade id.
        skills: Level per skill id.
        upgrade_multipliers: Bundle compounded by upgrade purchases.
        skill_multipliers: Bundle recomputed from skill levels.
    """

    level: int = 1
    experience: float = 0.0
    experience_to_next: int = 100
    skill_points: int = 0
    money: float = 0.0
    resources: Mapping[ResourceId, float] = field(default_factory=_zero_resources)
    depth: float = 0.0
    total_mined: float = 0.0
    click_power: float = 1.0
    auto_mine_rate: float = 0.0
    equipment: Mapping[str, int] = field(default_factory=dict)
    upgrades: Mapping[str, int] = field(default_factory=dict)
    skills: Mapping[str, int] = field(default_factory=dict)
    upgrade_multipliers: Multipliers = field(default_factory=Multipliers)
    skill_multipliers: Multipliers = field(default_factory=Multipliers)

    def __post_init__(self) -> None:
        for name in _MAPPING_FIELDS:
            object.__setattr__(self, name, MappingProxyType(dict(getattr(self, name))))

    @property
    def multipliers(self) -> Multipliers:
        """Effective bundle: upgrade effects combined with skill effects."""
        return self.upgrade_multipliers.combine(self.skill_multipliers)

    def quantity(self, resource_id: ResourceId | str) -> float:
        defn = catalog.resource(resource_id)
        if defn is None:
            return 0.0
        return self.resources.get(defn.id, 0.0)

    def owned(self, equipment_id: str) -> int:
        return self.equipment.get(equipment_id, 0)

    def upgrade_level(self, upgrade_id: str) -> int:
        return self.upgrades.get(upgrade_id, 0)

    def skill_level(self, skill_id: str) -> int:
        return self.skills.get(skill_id, 0)


def new_player_state(config: EconomyConfig | None = None) -> PlayerState:
    """Fresh session state: level 1, nothing owned, default multipliers."""
    cfg = config or EconomyConfig()
    return PlayerState(experience_to_next=cfg.starting_experience_threshold)
