"""Session configuration dataclass."""
from __future__ import annotations

from dataclasses import dataclass, field

from delve_economy import EconomyConfig
from delve_minigame import MinigameConfig


@dataclass(frozen=True)
class SessionConfig:
    """Immutable configuration for a full game session.

    Attributes:
        tps: Frames per time-unit; the frame clock of the whole session.
        seed: Master seed. None draws one from the OS.
        auto_mine_interval: Time-units between auto-mine ticks.
        milestone_interval: Depth between minigame activations.
        economy: Economy tuning.
        minigame: Minigame tuning.
    """

    tps: int = 60
    seed: int | None = None
    auto_mine_interval: float = 1.0
    milestone_interval: int = 10
    economy: EconomyConfig = field(default_factory=EconomyConfig)
    minigame: MinigameConfig = field(default_factory=MinigameConfig)

    def __post_init__(self) -> None:
        if self.tps <= 0:
            raise ValueError(f"tps must be positive, got {self.tps}")
        if self.auto_mine_interval <= 0:
            raise ValueError(
                f"auto_mine_interval must be positive, got {self.auto_mine_interval}"
            )
        if self.milestone_interval <= 0:
            raise ValueError(
                f"milestone_interval must be positive, got {self.milestone_interval}"
            )
