"""Read-only views of the world for the host renderer and HUD."""

from __future__ import annotations

from ..models import (
    ExplosionView,
    GameData,
    PlayerStats,
    ProjectileView,
    ZombieView,
)


def player_stats(game_data: GameData) -> PlayerStats:
    player = game_data.player
    weapon = player.current_weapon
    return PlayerStats(
        hp=player.current_hp,
        max_hp=player.max_hp,
        score=player.score,
        gold=player.gold,
        level=player.level,
        weapon=weapon.type if weapon else None,
    )


def zombie_views(game_data: GameData) -> list[ZombieView]:
    player = game_data.player
    return [
        ZombieView(
            zombie_type=zombie.zombie_type,
            x=zombie.x,
            y=zombie.y,
            angle_to_player=zombie.get_angle_to_player(player.x, player.y),
            hp=zombie.current_hp,
            max_hp=zombie.max_hp,
            burning=zombie.burning,
        )
        for zombie in game_data.groups.zombie_group
        if not zombie.is_dead
    ]


def projectile_views(game_data: GameData) -> list[ProjectileView]:
    return [
        ProjectileView(x=p.x, y=p.y, weapon_type=p.weapon_type)
        for p in game_data.projectiles
        if p.active
    ]


def explosion_views(game_data: GameData) -> list[ExplosionView]:
    now = game_data.state.elapsed
    views: list[ExplosionView] = []
    for explosion in game_data.explosions:
        if explosion.duration > 0:
            progress = (now - explosion.created_at) / explosion.duration
        else:
            progress = 1.0
        views.append(
            ExplosionView(
                x=explosion.x,
                y=explosion.y,
                radius=explosion.radius,
                progress=max(0.0, min(1.0, progress)),
            )
        )
    return views


__all__ = [
    "player_stats",
    "zombie_views",
    "projectile_views",
    "explosion_views",
]
