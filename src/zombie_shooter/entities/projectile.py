"""Projectiles and explosions consumed by the world update."""

from __future__ import annotations

from dataclasses import dataclass

import pygame

from ..entities_constants import WeaponType
from ..tuning import DEFAULT_TUNING, Tuning
from .movement import distance
from .weapon import Weapon
from .zombie import Zombie


@dataclass
class Projectile:
    x: float
    y: float
    velocity_x: float
    velocity_y: float
    damage: int
    weapon_type: WeaponType
    max_range: float = float("inf")
    active: bool = True
    origin: tuple[float, float] = (0.0, 0.0)

    def update(self, delta_time: float, frame_rate_scale: float) -> None:
        self.x += self.velocity_x * delta_time * frame_rate_scale
        self.y += self.velocity_y * delta_time * frame_rate_scale
        if self.distance_travelled() > self.max_range:
            self.active = False

    def distance_travelled(self) -> float:
        return distance(self.origin[0], self.origin[1], self.x, self.y)

    def is_offscreen(self, arena: pygame.Rect, margin: float) -> bool:
        return (
            self.x < arena.left - margin
            or self.x > arena.right + margin
            or self.y < arena.top - margin
            or self.y > arena.bottom + margin
        )

    def is_colliding_with(self, zombie: Zombie, threshold: float) -> bool:
        return distance(self.x, self.y, zombie.x, zombie.y) < threshold


@dataclass
class Explosion:
    x: float
    y: float
    radius: float
    damage: int
    created_at: float
    duration: float

    def is_finished(self, now: float) -> bool:
        return now - self.created_at >= self.duration

    def is_zombie_in_range(self, zombie: Zombie) -> bool:
        return distance(self.x, self.y, zombie.x, zombie.y) <= self.radius


def create_projectile(
    weapon: Weapon,
    origin_x: float,
    origin_y: float,
    target_x: float,
    target_y: float,
) -> Projectile | None:
    """Aim a projectile from the origin at the target; None if they coincide."""
    direction = pygame.math.Vector2(target_x - origin_x, target_y - origin_y)
    if direction.length_squared() == 0:
        return None
    direction.scale_to_length(weapon.stats.projectile_speed)
    return Projectile(
        x=origin_x,
        y=origin_y,
        velocity_x=direction.x,
        velocity_y=direction.y,
        damage=weapon.damage,
        weapon_type=weapon.type,
        max_range=weapon.range,
        origin=(origin_x, origin_y),
    )


def create_explosion(
    x: float,
    y: float,
    weapon_type: WeaponType,
    damage: int,
    now: float,
    *,
    tuning: Tuning = DEFAULT_TUNING,
) -> Explosion:
    return Explosion(
        x=x,
        y=y,
        radius=tuning.weapons[weapon_type].explosion_radius,
        damage=damage,
        created_at=now,
        duration=tuning.explosion_duration,
    )
