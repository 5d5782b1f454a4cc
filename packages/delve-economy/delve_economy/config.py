"""Economy tuning dataclass."""
from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class EconomyConfig:
    """Immutable tuning constants for the economy transitions.

    Attributes:
        equipment_cost_growth: Cost factor per equipment unit already owned.
        upgrade_cost_growth: Cost factor per upgrade level already bought.
        click_depth_rate: Depth gained per unit of manual mining power.
        auto_depth_rate: Depth gained per unit of automatic mining power.
        auto_experience_factor: Share of auto-mined power granted as experience.
        sell_experience_divisor: Currency earned per point of sale experience.
        starting_experience_threshold: Experience needed to reach level 2.
        level_threshold_growth: Threshold factor applied at each level-up.
        minigame_reward: Experience granted for surviving the minigame.
    """

    equipment_cost_growth: float = 1.5
    upgrade_cost_growth: float = 2.0
    click_depth_rate: float = 0.1
    auto_depth_rate: float = 0.05
    auto_experience_factor: float = 0.5
    sell_experience_divisor: float = 10.0
    starting_experience_threshold: int = 100
    level_threshold_growth: float = 1.5
    minigame_reward: float = 50.0

    def __post_init__(self) -> None:
        if self.equipment_cost_growth < 1.0:
            raise ValueError(
                f"equipment_cost_growth must be >= 1, got {self.equipment_cost_growth}"
            )
        if self.upgrade_cost_growth < 1.0:
            raise ValueError(
                f"upgrade_cost_growth must be >= 1, got {self.upgrade_cost_growth}"
            )
        if self.sell_experience_divisor <= 0:
            raise ValueError(
                f"sell_experience_divisor must be > 0, got {self.sell_experience_divisor}"
            )
        if self.starting_experience_threshold <= 0:
            raise ValueError(
                "starting_experience_threshold must be > 0, "
                f"got {self.starting_experience_threshold}"
            )
        # A shrinking threshold could reach zero and never end the level-up loop.
        if self.level_threshold_growth <= 1.0:
            raise ValueError(
                f"level_threshold_growth must be > 1, got {self.level_threshold_growth}"
            )
