"""Entity definitions for zombie_shooter."""

from __future__ import annotations

from .player import Player
from .projectile import Explosion, Projectile, create_explosion, create_projectile
from .weapon import (
    Weapon,
    WeaponInfo,
    all_weapon_types,
    create_weapon,
    weapon_info,
    weapon_price,
)
from .zombie import Zombie, ZombieReward

__all__ = [
    "Player",
    "Zombie",
    "ZombieReward",
    "Weapon",
    "WeaponInfo",
    "Projectile",
    "Explosion",
    "create_weapon",
    "create_projectile",
    "create_explosion",
    "all_weapon_types",
    "weapon_info",
    "weapon_price",
]
