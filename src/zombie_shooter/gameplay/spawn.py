from __future__ import annotations

import logging

from ..entities import Zombie
from ..entities_constants import ZombieType
from ..models import GameData
from ..rng import RandomSource, get_rng
from ..tuning import DEFAULT_TUNING, Tuning

logger = logging.getLogger(__name__)

__all__ = [
    "determine_zombie_type",
    "random_spawn_position",
    "create_zombie",
    "create_specific_zombie",
    "spawn_rate_for_level",
    "max_zombies_for_level",
    "spawn_zombie",
]


def determine_zombie_type(
    level: int,
    rng: RandomSource | None = None,
    *,
    tuning: Tuning = DEFAULT_TUNING,
) -> ZombieType:
    """Roll one variant from the spawn band covering ``level``."""
    if rng is None:
        rng = get_rng()
    roll = rng.randrange(tuning.spawn_roll_range)
    return tuning.band_for_level(level).pick(roll)


def random_spawn_position(
    rng: RandomSource | None = None, *, tuning: Tuning = DEFAULT_TUNING
) -> tuple[float, float]:
    """Pick a point on one of the four arena edges, uniformly."""
    if rng is None:
        rng = get_rng()
    width = float(tuning.arena_width)
    height = float(tuning.arena_height)
    edge = rng.randrange(4)
    if edge == 0:  # top
        return rng.random() * width, 0.0
    if edge == 1:  # bottom
        return rng.random() * width, height
    if edge == 2:  # left
        return 0.0, rng.random() * height
    return width, rng.random() * height  # right


def create_specific_zombie(
    zombie_type: ZombieType,
    level: int,
    x: float,
    y: float,
    *,
    tuning: Tuning = DEFAULT_TUNING,
) -> Zombie:
    return Zombie(zombie_type, level, x, y, tuning=tuning)


def create_zombie(
    level: int,
    rng: RandomSource | None = None,
    *,
    tuning: Tuning = DEFAULT_TUNING,
) -> Zombie:
    if rng is None:
        rng = get_rng()
    zombie_type = determine_zombie_type(level, rng, tuning=tuning)
    x, y = random_spawn_position(rng, tuning=tuning)
    return create_specific_zombie(zombie_type, level, x, y, tuning=tuning)


def spawn_rate_for_level(level: int, *, tuning: Tuning = DEFAULT_TUNING) -> float:
    """Zombies per second at ``level``."""
    return tuning.initial_spawn_rate + tuning.spawn_rate_increase * max(0, level - 1)


def max_zombies_for_level(level: int, *, tuning: Tuning = DEFAULT_TUNING) -> int:
    return tuning.max_zombies + tuning.max_zombies_increase * max(0, level - 1)


def spawn_zombie(game_data: GameData) -> Zombie | None:
    """Add one zombie for the player's level unless the cap is reached."""
    tuning = game_data.tuning
    level = game_data.player.level
    zombie_group = game_data.groups.zombie_group
    if len(zombie_group) >= max_zombies_for_level(level, tuning=tuning):
        return None
    zombie = create_zombie(level, game_data.rng, tuning=tuning)
    zombie_group.add(zombie)
    logger.debug(
        "Spawned %s zombie (level %d) at (%.0f, %.0f)",
        zombie.zombie_type.name,
        level,
        zombie.x,
        zombie.y,
    )
    return zombie
