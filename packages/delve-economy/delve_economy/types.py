"""Catalog entry types and the multiplier bundle."""
from __future__ import annotations

import dataclasses
from dataclasses import dataclass
from enum import Enum


class ResourceId(str, Enum):
    """Fixed set of minable resources, ordered by tier."""

    COAL = "coal"
    IRON = "iron"
    GOLD = "gold"
    DIAMOND = "diamond"


class EquipmentCategory(str, Enum):
    POWER_BOOST = "power_boost"
    AUTOMATION = "automation"


class MultiplierField(str, Enum):
    """Names of the fields on :class:`Multipliers`."""

    CLICK = "click"
    AUTO = "auto"
    EFFICIENCY = "efficiency"
    SELL_PRICE = "sell_price"
    EXPERIENCE = "experience"
    RARE_FIND_CHANCE = "rare_find_chance"


class Combinator(str, Enum):
    MULTIPLY = "multiply"
    ADD = "add"


# Fields that combine additively across bundles; the rest multiply.
_ADDITIVE_FIELDS = frozenset({MultiplierField.RARE_FIND_CHANCE})


@dataclass(frozen=True)
class Multipliers:
    """Six compounding scalar modifiers.

    Attributes:
        click: Applied to click power on manual mining.
        auto: Applied to the auto-mine rate.
        efficiency: General efficiency bonus, reported and held at 1.0.
        sell_price: Applied to the value of sold resources.
        experience: Applied to every experience grant.
        rare_find_chance: Percentage chance that a manual mine doubles.
    """

    click: float = 1.0
    auto: float = 1.0
    efficiency: float = 1.0
    sell_price: float = 1.0
    experience: float = 1.0
    rare_find_chance: float = 0.0

    def value(self, field: MultiplierField) -> float:
        return getattr(self, field.value)

    def with_value(self, field: MultiplierField, value: float) -> Multipliers:
        return dataclasses.replace(self, **{field.value: value})

    def combine(self, other: Multipliers) -> Multipliers:
        """Merge two bundles: additive fields add, the others multiply."""
        merged: dict[str, float] = {}
        for field in MultiplierField:
            a, b = self.value(field), other.value(field)
            merged[field.value] = a + b if field in _ADDITIVE_FIELDS else a * b
        return Multipliers(**merged)


@dataclass(frozen=True)
class Effect:
    """Tagged multiplier transform: ``field <combinator>= operand``."""

    field: MultiplierField
    combinator: Combinator
    operand: float

    def apply(self, bundle: Multipliers) -> Multipliers:
        current = bundle.value(self.field)
        if self.combinator is Combinator.MULTIPLY:
            return bundle.with_value(self.field, current * self.operand)
        return bundle.with_value(self.field, current + self.operand)


@dataclass(frozen=True)
class ResourceDef:
    """Immutable resource kind.

    Attributes:
        id: Enumerated tag.
        name: Display name.
        value: Currency per unit when sold.
        unlock_depth: Depth at which this kind becomes the mined resource.
    """

    id: ResourceId
    name: str
    value: float
    unlock_depth: float

    def __post_init__(self) -> None:
        if self.value <= 0:
            raise ValueError(f"value must be > 0, got {self.value}")
        if self.unlock_depth < 0:
            raise ValueError(f"unlock_depth must be >= 0, got {self.unlock_depth}")


@dataclass(frozen=True)
class EquipmentDef:
    """Immutable equipment kind. Owned counts live on the player state."""

    id: str
    name: str
    category: EquipmentCategory
    power: float
    base_cost: float
    description: str = ""

    def __post_init__(self) -> None:
        if not self.id:
            raise ValueError("EquipmentDef id must be non-empty")
        if self.power < 0:
            raise ValueError(f"power must be >= 0, got {self.power}")
        if self.base_cost <= 0:
            raise ValueError(f"base_cost must be > 0, got {self.base_cost}")


@dataclass(frozen=True)
class UpgradeDef:
    """Immutable upgrade kind. Purchase levels live on the player state."""

    id: str
    name: str
    base_cost: float
    effect: Effect
    description: str = ""

    def __post_init__(self) -> None:
        if not self.id:
            raise ValueError("UpgradeDef id must be non-empty")
        if self.base_cost <= 0:
            raise ValueError(f"base_cost must be > 0, got {self.base_cost}")


@dataclass(frozen=True)
class SkillDef:
    """Immutable skill-tree node.

    Attributes:
        id: Unique identifier.
        name: Display name.
        max_level: Highest reachable level.
        base_cost: Skill points for the first level.
        cost_step: Extra points per level already held.
        target: Multiplier field recomputed from the level, or None for
            skills read directly by other subsystems.
        base: Field value at level 0.
        per_level: Field increment per level.
        requires: Skill ids that must be at level 1 or higher first.
    """

    id: str
    name: str
    max_level: int
    target: MultiplierField | None
    per_level: float
    base: float = 1.0
    base_cost: int = 1
    cost_step: int = 0
    requires: tuple[str, ...] = ()
    description: str = ""

    def __post_init__(self) -> None:
        if not self.id:
            raise ValueError("SkillDef id must be non-empty")
        if self.max_level <= 0:
            raise ValueError(f"max_level must be > 0, got {self.max_level}")
        if self.base_cost <= 0:
            raise ValueError(f"base_cost must be > 0, got {self.base_cost}")
        if self.cost_step < 0:
            raise ValueError(f"cost_step must be >= 0, got {self.cost_step}")
        if self.id in self.requires:
            raise ValueError(f"skill {self.id!r} cannot require itself")

    def cost_at(self, level: int) -> int:
        """Skill points needed to go from *level* to ``level + 1``."""
        return self.base_cost + self.cost_step * level

    def effect_at(self, level: int) -> float:
        """Absolute value of the target field at *level*."""
        return self.base + self.per_level * level
