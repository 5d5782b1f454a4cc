"""Minigame configuration dataclass."""
from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class MinigameConfig:
    """Immutable tuning for the gas-line dodging minigame.

    Distances are canvas units; durations are time-units (seconds at the
    engine's tps). Obstacle speeds are canvas units per frame.

    Attributes:
        width: Canvas width.
        height: Canvas height.
        player_size: Side of the square player.
        player_bottom_margin: Distance from the canvas bottom to the player's top.
        player_step: Horizontal distance per left/right intent.
        duration: Countdown length before any skill bonus.
        spawn_interval: Time between obstacle spawns.
        obstacle_height: Height of every obstacle.
        obstacle_min_width: Smallest obstacle width.
        obstacle_max_width: Largest obstacle width (exclusive).
        obstacle_min_speed: Slowest fall speed.
        obstacle_max_speed: Fastest fall speed (exclusive).
        obstacle_spawn_y: Vertical position of a new obstacle.
        difficulty_depth: Depth that adds 1.0 to the difficulty factor.
    """

    width: float = 400.0
    height: float = 500.0
    player_size: float = 20.0
    player_bottom_margin: float = 30.0
    player_step: float = 10.0
    duration: float = 10.0
    spawn_interval: float = 0.5
    obstacle_height: float = 10.0
    obstacle_min_width: float = 50.0
    obstacle_max_width: float = 150.0
    obstacle_min_speed: float = 1.0
    obstacle_max_speed: float = 3.0
    obstacle_spawn_y: float = -20.0
    difficulty_depth: float = 50.0

    def __post_init__(self) -> None:
        if self.width <= 0 or self.height <= 0:
            raise ValueError(
                f"canvas must have positive size, got {self.width}x{self.height}"
            )
        if not 0 < self.player_size <= self.width:
            raise ValueError(f"player_size must fit the canvas, got {self.player_size}")
        if self.duration <= 0:
            raise ValueError(f"duration must be > 0, got {self.duration}")
        if self.spawn_interval <= 0:
            raise ValueError(f"spawn_interval must be > 0, got {self.spawn_interval}")
        if not 0 < self.obstacle_min_width <= self.obstacle_max_width <= self.width:
            raise ValueError("obstacle widths must satisfy 0 < min <= max <= width")
        if not 0 < self.obstacle_min_speed <= self.obstacle_max_speed:
            raise ValueError("obstacle speeds must satisfy 0 < min <= max")
        if self.difficulty_depth <= 0:
            raise ValueError(f"difficulty_depth must be > 0, got {self.difficulty_depth}")

    def difficulty(self, depth: float) -> float:
        """Fall-speed factor at *depth*; grows linearly with depth."""
        return 1.0 + depth / self.difficulty_depth
