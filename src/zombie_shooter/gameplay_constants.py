"""Gameplay-related constants and helpers."""

from __future__ import annotations

# --- Arena settings ---
ARENA_WIDTH = 1920
ARENA_HEIGHT = 1080
FPS = 60
FRAME_RATE_SCALE = 60.0  # movement speeds are tuned in pixels per 60 fps frame
CLOCK_EPSILON = 1e-9  # rounding slack on the summed simulation clock

# --- Progression settings ---
LEVEL_UP_SCORE_THRESHOLD = 500
LEVEL_UP_HEAL_DIVISOR = 10

# --- Zombie spawn settings ---
INITIAL_ZOMBIE_SPAWN_RATE = 2.0  # zombies per second
SPAWN_RATE_INCREASE = 0.2
MAX_ZOMBIES_ON_SCREEN = 50
MAX_ZOMBIES_INCREASE = 5
SPAWN_ROLL_RANGE = 100

# --- Collision settings ---
COLLISION_DISTANCE = 50.0
BULLET_COLLISION_DISTANCE = 20.0
ZOMBIE_ATTACK_INTERVAL = 1.0

# --- Projectile settings ---
EXPLOSION_DURATION = 0.5
OFFSCREEN_MARGIN = 100.0

# --- Weapon upgrade settings ---
UPGRADE_DAMAGE_INCREASE = 5
UPGRADE_COST_MULTIPLIER = 1.5
UPGRADE_BASE_COST_RATIO = 0.3
MAX_UPGRADE_LEVEL = 10

__all__ = [
    "ARENA_WIDTH",
    "ARENA_HEIGHT",
    "FPS",
    "FRAME_RATE_SCALE",
    "CLOCK_EPSILON",
    "LEVEL_UP_SCORE_THRESHOLD",
    "LEVEL_UP_HEAL_DIVISOR",
    "INITIAL_ZOMBIE_SPAWN_RATE",
    "SPAWN_RATE_INCREASE",
    "MAX_ZOMBIES_ON_SCREEN",
    "MAX_ZOMBIES_INCREASE",
    "SPAWN_ROLL_RANGE",
    "COLLISION_DISTANCE",
    "BULLET_COLLISION_DISTANCE",
    "ZOMBIE_ATTACK_INTERVAL",
    "EXPLOSION_DURATION",
    "OFFSCREEN_MARGIN",
    "UPGRADE_DAMAGE_INCREASE",
    "UPGRADE_COST_MULTIPLIER",
    "UPGRADE_BASE_COST_RATIO",
    "MAX_UPGRADE_LEVEL",
]
