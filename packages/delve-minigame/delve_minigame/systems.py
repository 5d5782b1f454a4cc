"""System factories and spawn helper for the minigame world."""
from __future__ import annotations

import random
from typing import TYPE_CHECKING, Callable

from delve_minigame.collision import boxes_overlap
from delve_minigame.components import Avatar, Box, Falling
from delve_minigame.config import MinigameConfig

if TYPE_CHECKING:
    from delve import EntityId, TickContext, World


def spawn_obstacle(
    world: World, rng: random.Random, config: MinigameConfig,
) -> EntityId:
    """Drop one gas line at a random horizontal position above the canvas."""
    width = config.obstacle_min_width + rng.random() * (
        config.obstacle_max_width - config.obstacle_min_width
    )
    x = rng.random() * (config.width - width)
    speed = config.obstacle_min_speed + rng.random() * (
        config.obstacle_max_speed - config.obstacle_min_speed
    )
    return world.spawn(
        Box(x=x, y=config.obstacle_spawn_y, width=width, height=config.obstacle_height),
        Falling(speed=speed),
    )


def make_fall_system(
    difficulty: float, floor: float,
) -> Callable[[World, TickContext], None]:
    """Move every obstacle down by ``speed * difficulty`` and drop those past *floor*."""

    def fall_system(world: World, ctx: TickContext) -> None:
        for eid, (box, falling) in world.query(Box, Falling):
            box.y += falling.speed * difficulty
            if box.y >= floor:
                world.despawn(eid)

    return fall_system


def make_collision_system(
    on_hit: Callable[[World, TickContext, EntityId, EntityId], None],
) -> Callable[[World, TickContext], None]:
    """Test the player box against every obstacle; report the first overlap.

    ``on_hit(world, ctx, player_eid, obstacle_eid)`` fires at most once per
    frame.
    """

    def collision_system(world: World, ctx: TickContext) -> None:
        obstacles = list(world.query(Box, Falling))
        for player_eid, (player_box, _) in world.query(Box, Avatar):
            for obstacle_eid, (box, _) in obstacles:
                if boxes_overlap(player_box, box):
                    on_hit(world, ctx, player_eid, obstacle_eid)
                    return

    return collision_system
