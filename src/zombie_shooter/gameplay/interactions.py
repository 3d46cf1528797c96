"""Collision resolution between projectiles, zombies and the player."""

from __future__ import annotations

from ..entities import Projectile, Zombie, create_explosion
from ..entities_constants import WeaponType
from ..models import GameData


def _apply_explosion(
    game_data: GameData, projectile: Projectile, zombies: list[Zombie]
) -> int:
    explosion = create_explosion(
        projectile.x,
        projectile.y,
        projectile.weapon_type,
        projectile.damage,
        game_data.state.elapsed,
        tuning=game_data.tuning,
    )
    game_data.explosions.append(explosion)
    dealt = 0
    for zombie in zombies:
        if not zombie.is_dead and explosion.is_zombie_in_range(zombie):
            dealt += zombie.take_damage(explosion.damage)
    return dealt


def _apply_projectile_hit(
    game_data: GameData,
    projectile: Projectile,
    target: Zombie,
    zombies: list[Zombie],
) -> int:
    projectile.active = False
    dealt = target.take_damage(projectile.damage)
    if projectile.weapon_type == WeaponType.BAZOOKA:
        dealt += _apply_explosion(game_data, projectile, zombies)
    elif projectile.weapon_type == WeaponType.FLAMETHROWER:
        burn_duration = game_data.tuning.weapons[projectile.weapon_type].burn_duration
        target.apply_burn(projectile.damage, burn_duration, game_data.state.elapsed)
    return dealt


def resolve_projectile_hits(game_data: GameData) -> int:
    """Test every active projectile against live zombies; return damage dealt.

    Zombies killed here stay in the group until the removal pass.
    """
    candidates = list(game_data.groups.zombie_group)
    threshold = game_data.tuning.bullet_collision_distance
    dealt = 0
    for projectile in game_data.projectiles:
        if not projectile.active:
            continue
        for zombie in candidates:
            if zombie.is_dead:
                continue
            if projectile.is_colliding_with(zombie, threshold):
                dealt += _apply_projectile_hit(
                    game_data, projectile, zombie, candidates
                )
                break
    return dealt


def resolve_player_contacts(game_data: GameData) -> int:
    """Apply contact damage from every zombie touching the player."""
    player = game_data.player
    now = game_data.state.elapsed
    taken = 0
    for zombie in game_data.groups.zombie_group:
        if zombie.is_dead or not player.is_alive:
            continue
        if zombie.is_colliding_with_player(player.x, player.y):
            taken += player.take_damage(zombie.try_attack(now))
    return taken


__all__ = [
    "resolve_projectile_hits",
    "resolve_player_contacts",
]
