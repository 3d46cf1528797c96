"""Stat tables for characters, weapons and zombies."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from types import MappingProxyType
from typing import Mapping


class CharacterType(str, Enum):
    SPEED = "speed"
    BALANCED = "balanced"
    TANK = "tank"


class WeaponType(str, Enum):
    AK47 = "ak47"
    M4 = "m4"
    A16 = "a16"
    BAZOOKA = "bazooka"
    FLAMETHROWER = "flamethrower"


class ZombieType(str, Enum):
    NORMAL = "normal"
    FAST = "fast"
    STRONG = "strong"
    TANK = "tank"
    BOSS = "boss"


@dataclass(frozen=True)
class CharacterStats:
    name: str
    description: str
    max_hp: int
    speed: float  # pixels per move command


@dataclass(frozen=True)
class WeaponStats:
    name: str
    description: str
    damage: int
    fire_rate: float  # seconds between shots
    range: float
    price: int
    projectile_speed: float
    explosion_radius: float = 0.0
    burn_duration: float = 0.0


@dataclass(frozen=True)
class ZombieStats:
    base_hp: int
    speed: float
    score: int
    gold: int
    contact_damage: int


# --- Entity sizes (hitbox rects handed to the renderer) ---
CHARACTER_SIZE = 80
ZOMBIE_SIZE = 70

# --- Zombie scaling ---
HP_INCREASE_PER_LEVEL = 10

CHARACTER_STATS: Mapping[CharacterType, CharacterStats] = MappingProxyType(
    {
        CharacterType.SPEED: CharacterStats(
            name="Speed",
            description="Outruns the horde, but cannot take many hits.",
            max_hp=70,
            speed=6.0,
        ),
        CharacterType.BALANCED: CharacterStats(
            name="Balanced",
            description="Even stats. Recommended for new players.",
            max_hp=100,
            speed=4.0,
        ),
        CharacterType.TANK: CharacterStats(
            name="Tank",
            description="Soaks up damage but moves slowly.",
            max_hp=150,
            speed=2.8,
        ),
    }
)

WEAPON_STATS: Mapping[WeaponType, WeaponStats] = MappingProxyType(
    {
        WeaponType.AK47: WeaponStats(
            name="AK-47",
            description="Reliable starter rifle with balanced performance.",
            damage=10,
            fire_rate=0.1,
            range=500.0,
            price=0,
            projectile_speed=15.0,
        ),
        WeaponType.M4: WeaponStats(
            name="M4 Carbine",
            description="Accurate tactical rifle.",
            damage=12,
            fire_rate=0.15,
            range=550.0,
            price=500,
            projectile_speed=16.0,
        ),
        WeaponType.A16: WeaponStats(
            name="A16 Rifle",
            description="Hard-hitting assault rifle with a slow cycle.",
            damage=18,
            fire_rate=0.25,
            range=600.0,
            price=1000,
            projectile_speed=17.0,
        ),
        WeaponType.BAZOOKA: WeaponStats(
            name="Bazooka",
            description="Rockets explode and hit everything nearby.",
            damage=50,
            fire_rate=2.0,
            range=800.0,
            price=2000,
            projectile_speed=10.0,
            explosion_radius=150.0,
        ),
        WeaponType.FLAMETHROWER: WeaponStats(
            name="Flamethrower",
            description="Sets zombies on fire for damage over time.",
            damage=5,
            fire_rate=0.05,
            range=250.0,
            price=1500,
            projectile_speed=8.0,
            burn_duration=3.0,
        ),
    }
)

ZOMBIE_STATS: Mapping[ZombieType, ZombieStats] = MappingProxyType(
    {
        ZombieType.NORMAL: ZombieStats(
            base_hp=20, speed=1.5, score=10, gold=5, contact_damage=5
        ),
        ZombieType.FAST: ZombieStats(
            base_hp=15, speed=3.0, score=15, gold=8, contact_damage=3
        ),
        ZombieType.STRONG: ZombieStats(
            base_hp=40, speed=1.0, score=25, gold=15, contact_damage=10
        ),
        ZombieType.TANK: ZombieStats(
            base_hp=80, speed=0.5, score=50, gold=30, contact_damage=15
        ),
        ZombieType.BOSS: ZombieStats(
            base_hp=200, speed=0.8, score=100, gold=50, contact_damage=25
        ),
    }
)

__all__ = [
    "CharacterType",
    "WeaponType",
    "ZombieType",
    "CharacterStats",
    "WeaponStats",
    "ZombieStats",
    "CHARACTER_SIZE",
    "ZOMBIE_SIZE",
    "HP_INCREASE_PER_LEVEL",
    "CHARACTER_STATS",
    "WEAPON_STATS",
    "ZOMBIE_STATS",
]
