"""Per-tick world update and player commands."""

from __future__ import annotations

import logging

from ..entities import Weapon, create_projectile
from ..entities_constants import WeaponType
from ..models import GameData, GameState, TickResult
from .interactions import resolve_player_contacts, resolve_projectile_hits
from .spawn import spawn_rate_for_level, spawn_zombie
from .state import mark_game_over

logger = logging.getLogger(__name__)

__all__ = [
    "update_world",
    "update_projectiles",
    "update_zombies",
    "remove_dead_zombies",
    "remove_spent_projectiles",
    "update_spawn_timer",
    "fire_weapon",
    "purchase_weapon",
    "upgrade_weapon",
    "equip_weapon",
    "move_player",
]


def update_projectiles(game_data: GameData, delta_time: float) -> None:
    scale = game_data.tuning.frame_rate_scale
    for projectile in game_data.projectiles:
        if projectile.active:
            projectile.update(delta_time, scale)


def update_zombies(game_data: GameData, delta_time: float) -> int:
    """Move zombies toward the player and tick burns; return burn damage."""
    player = game_data.player
    now = game_data.state.elapsed
    burned = 0
    for zombie in game_data.groups.zombie_group:
        if zombie.is_dead:
            continue
        zombie.move_towards_player(player.x, player.y, delta_time)
        burned += zombie.update_burn_effect(delta_time, now)
    return burned


def remove_dead_zombies(game_data: GameData, result: TickResult) -> int:
    """Remove dead zombies, crediting their rewards once each."""
    player = game_data.player
    dead = [z for z in game_data.groups.zombie_group if z.is_dead]
    for zombie in dead:
        reward = zombie.get_reward()
        if player.add_score(reward.score):
            result.leveled_up = True
            logger.info("Level up: %d", player.level)
        player.add_gold(reward.gold)
        result.score_gained += reward.score
        result.gold_gained += reward.gold
        zombie.kill()
    game_data.state.zombies_killed += len(dead)
    result.zombies_removed += len(dead)
    return len(dead)


def remove_spent_projectiles(game_data: GameData) -> None:
    arena = game_data.arena
    margin = game_data.tuning.offscreen_margin
    now = game_data.state.elapsed
    game_data.projectiles[:] = [
        p
        for p in game_data.projectiles
        if p.active and not p.is_offscreen(arena, margin)
    ]
    game_data.explosions[:] = [
        e for e in game_data.explosions if not e.is_finished(now)
    ]


def update_spawn_timer(game_data: GameData, delta_time: float) -> int:
    state = game_data.state
    state.spawn_timer += delta_time
    rate = spawn_rate_for_level(game_data.player.level, tuning=game_data.tuning)
    if rate <= 0 or state.spawn_timer <= 1.0 / rate:
        return 0
    if spawn_zombie(game_data) is None:
        return 0
    state.spawn_timer = 0.0
    return 1


def update_world(game_data: GameData, delta_time: float) -> TickResult:
    """Advance the simulation by ``delta_time`` seconds.

    Reads (movement, collisions) all happen before any zombie or projectile
    is removed, so no collision check is skipped or repeated.
    """
    result = TickResult()
    state = game_data.state
    if state.status != GameState.PLAYING:
        return result
    delta_time = max(0.0, float(delta_time))
    state.elapsed += delta_time

    update_projectiles(game_data, delta_time)
    result.burn_damage = update_zombies(game_data, delta_time)
    resolve_projectile_hits(game_data)
    result.damage_taken = resolve_player_contacts(game_data)
    remove_dead_zombies(game_data, result)
    remove_spent_projectiles(game_data)
    result.spawned = update_spawn_timer(game_data, delta_time)

    if not game_data.player.is_alive:
        mark_game_over(game_data)
    return result


def fire_weapon(game_data: GameData, target_x: float, target_y: float) -> bool:
    """Fire the equipped weapon at a point; False while cooling down."""
    if game_data.state.status != GameState.PLAYING:
        return False
    player = game_data.player
    weapon = player.current_weapon
    if weapon is None:
        return False
    now = game_data.state.elapsed
    if not weapon.fire(now, target_x, target_y, player.x, player.y):
        return False
    projectile = create_projectile(weapon, player.x, player.y, target_x, target_y)
    if projectile is not None:
        game_data.projectiles.append(projectile)
    return True


def purchase_weapon(game_data: GameData, weapon_type: WeaponType) -> bool:
    player = game_data.player
    if not player.buy_weapon(weapon_type):
        return False
    logger.info("Bought %s, %d gold left", weapon_type.name, player.gold)
    return True


def upgrade_weapon(game_data: GameData, weapon_type: WeaponType) -> bool:
    player = game_data.player
    if not player.upgrade_weapon(weapon_type):
        return False
    weapon = player.weapon(weapon_type)
    assert weapon is not None
    logger.info("Upgraded %s to level %d", weapon_type.name, weapon.upgrade_level)
    return True


def equip_weapon(game_data: GameData, weapon_type: WeaponType) -> bool:
    weapon: Weapon | None = game_data.player.weapon(weapon_type)
    if weapon is None:
        return False
    game_data.player.equip_weapon(weapon)
    return True


def move_player(game_data: GameData, direction: str) -> bool:
    """Apply one move command ("up", "down", "left" or "right")."""
    if game_data.state.status != GameState.PLAYING:
        return False
    player = game_data.player
    moves = {
        "up": player.move_up,
        "down": player.move_down,
        "left": player.move_left,
        "right": player.move_right,
    }
    move = moves.get(direction)
    if move is None:
        return False
    move()
    return True
