"""Weapon model: cooldown gating, upgrades and the shop cost curve."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Self

from ..entities_constants import WeaponStats, WeaponType
from ..gameplay_constants import CLOCK_EPSILON
from ..tuning import DEFAULT_TUNING, Tuning


class Weapon:
    """A single owned weapon.

    Variants differ only in their stat table entry. The fire effect itself
    (projectile, explosion, burn) is resolved by the world update, so
    :meth:`fire` only gates on the cooldown and records the shot time.
    Times are simulation seconds.
    """

    def __init__(
        self: Self, weapon_type: WeaponType, *, tuning: Tuning = DEFAULT_TUNING
    ) -> None:
        self.type = weapon_type
        self.stats: WeaponStats = tuning.weapons[weapon_type]
        self.tuning = tuning
        self.upgrade_level = 0
        self.last_fire_at: float | None = None

    @property
    def base_damage(self: Self) -> int:
        return self.stats.damage

    @property
    def fire_rate(self: Self) -> float:
        return self.stats.fire_rate

    @property
    def range(self: Self) -> float:
        return self.stats.range

    @property
    def price(self: Self) -> int:
        return self.stats.price

    @property
    def explosion_radius(self: Self) -> float:
        return self.stats.explosion_radius

    @property
    def burn_duration(self: Self) -> float:
        return self.stats.burn_duration

    @property
    def damage(self: Self) -> int:
        bonus = self.upgrade_level * self.tuning.upgrade_damage_increase
        return self.base_damage + bonus

    @property
    def is_max_level(self: Self) -> bool:
        return self.upgrade_level >= self.tuning.max_upgrade_level

    def can_fire(self: Self, now: float) -> bool:
        if self.last_fire_at is None:
            return True
        return now - self.last_fire_at >= self.fire_rate - CLOCK_EPSILON

    def fire(
        self: Self,
        now: float,
        target_x: float,
        target_y: float,
        player_x: float,
        player_y: float,
    ) -> bool:
        if not self.can_fire(now):
            return False
        self.last_fire_at = now
        return True

    def upgrade(self: Self) -> bool:
        if self.is_max_level:
            return False
        self.upgrade_level += 1
        return True

    def get_upgrade_cost(self: Self) -> int:
        return int(
            self.price
            * self.tuning.upgrade_base_cost_ratio
            * self.tuning.upgrade_cost_multiplier**self.upgrade_level
        )

    def __repr__(self: Self) -> str:
        return (
            f"Weapon(type={self.type.name}, level={self.upgrade_level}, "
            f"damage={self.damage})"
        )


@dataclass(frozen=True)
class WeaponInfo:
    """Shop listing for one weapon type."""

    type: WeaponType
    name: str
    description: str
    damage: int
    fire_rate: float
    range: float
    price: int


def create_weapon(
    weapon_type: WeaponType, *, tuning: Tuning = DEFAULT_TUNING
) -> Weapon:
    return Weapon(weapon_type, tuning=tuning)


def all_weapon_types() -> list[WeaponType]:
    return list(WeaponType)


def weapon_price(weapon_type: WeaponType, *, tuning: Tuning = DEFAULT_TUNING) -> int:
    return tuning.weapons[weapon_type].price


def weapon_info(
    weapon_type: WeaponType, *, tuning: Tuning = DEFAULT_TUNING
) -> WeaponInfo:
    stats = tuning.weapons[weapon_type]
    return WeaponInfo(
        type=weapon_type,
        name=stats.name,
        description=stats.description,
        damage=stats.damage,
        fire_rate=stats.fire_rate,
        range=stats.range,
        price=stats.price,
    )
