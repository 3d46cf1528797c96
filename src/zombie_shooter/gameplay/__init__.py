"""Gameplay helpers and logic utilities."""

# ruff: noqa: F401

from .interactions import resolve_player_contacts, resolve_projectile_hits
from .logic import (
    equip_weapon,
    fire_weapon,
    move_player,
    purchase_weapon,
    update_world,
    upgrade_weapon,
)
from .snapshots import explosion_views, player_stats, projectile_views, zombie_views
from .spawn import (
    create_specific_zombie,
    create_zombie,
    determine_zombie_type,
    max_zombies_for_level,
    random_spawn_position,
    spawn_rate_for_level,
    spawn_zombie,
)
from .state import (
    initialize_game_state,
    mark_game_over,
    pause_game,
    resume_game,
    start_session,
)

__all__ = [
    "initialize_game_state",
    "start_session",
    "pause_game",
    "resume_game",
    "mark_game_over",
    "update_world",
    "fire_weapon",
    "purchase_weapon",
    "upgrade_weapon",
    "equip_weapon",
    "move_player",
    "resolve_projectile_hits",
    "resolve_player_contacts",
    "determine_zombie_type",
    "random_spawn_position",
    "create_zombie",
    "create_specific_zombie",
    "spawn_rate_for_level",
    "max_zombies_for_level",
    "spawn_zombie",
    "player_stats",
    "zombie_views",
    "projectile_views",
    "explosion_views",
]
