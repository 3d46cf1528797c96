from __future__ import annotations

import math
from dataclasses import dataclass
from typing import Self

import pygame

from ..entities_constants import ZOMBIE_SIZE, ZombieStats, ZombieType
from ..gameplay_constants import CLOCK_EPSILON
from ..tuning import DEFAULT_TUNING, Tuning
from .movement import clamp_to_arena, distance, sync_rect


@dataclass(frozen=True)
class ZombieReward:
    score: int
    gold: int


class Zombie(pygame.sprite.Sprite):
    """Hostile agent that walks straight at the player.

    All five variants share this class; ``zombie_type`` selects the stat
    table entry. HP scales with the spawn level, rewards do not.
    """

    def __init__(
        self: Self,
        zombie_type: ZombieType,
        level: int,
        x: float,
        y: float,
        *,
        tuning: Tuning = DEFAULT_TUNING,
    ) -> None:
        super().__init__()
        self.tuning = tuning
        self.zombie_type = zombie_type
        self.stats: ZombieStats = tuning.zombies[zombie_type]
        self.level = level
        self.arena = pygame.Rect(0, 0, tuning.arena_width, tuning.arena_height)
        self.x = float(x)
        self.y = float(y)
        self.rect = pygame.Rect(0, 0, ZOMBIE_SIZE, ZOMBIE_SIZE)
        sync_rect(self)
        self.max_hp = self.stats.base_hp + level * tuning.hp_increase_per_level
        self.current_hp = self.max_hp
        self.speed = self.stats.speed
        self.burning = False
        self.burn_expires_at = 0.0
        self.burn_damage_per_second = 0
        self.last_attack_at: float | None = None

    @property
    def is_dead(self: Self) -> bool:
        return self.current_hp <= 0

    def take_damage(self: Self, amount: int) -> int:
        actual = min(max(0, int(amount)), self.current_hp)
        self.current_hp -= actual
        return actual

    def apply_burn(
        self: Self, damage_per_second: int, duration: float, now: float
    ) -> None:
        # A new burn replaces the old one instead of stacking.
        self.burning = True
        self.burn_damage_per_second = max(0, int(damage_per_second))
        self.burn_expires_at = now + duration

    def update_burn_effect(self: Self, delta_time: float, now: float) -> int:
        if not self.burning:
            return 0
        if now >= self.burn_expires_at:
            self.burning = False
            return 0
        # Fractional damage is dropped every tick.
        amount = int(self.burn_damage_per_second * max(0.0, delta_time))
        return self.take_damage(amount)

    def move_towards_player(
        self: Self, player_x: float, player_y: float, delta_time: float
    ) -> None:
        direction = pygame.math.Vector2(player_x - self.x, player_y - self.y)
        if direction.length_squared() == 0:
            return
        direction.scale_to_length(
            self.speed * delta_time * self.tuning.frame_rate_scale
        )
        self.x, self.y = clamp_to_arena(
            self.x + direction.x, self.y + direction.y, self.arena
        )
        sync_rect(self)

    def is_colliding_with_player(
        self: Self, player_x: float, player_y: float
    ) -> bool:
        return (
            distance(self.x, self.y, player_x, player_y)
            < self.tuning.collision_distance
        )

    def get_angle_to_player(self: Self, player_x: float, player_y: float) -> float:
        return math.atan2(player_y - self.y, player_x - self.x)

    def try_attack(self: Self, now: float) -> int:
        """Return contact damage if the attack interval has elapsed, else 0."""
        if (
            self.last_attack_at is not None
            and now - self.last_attack_at
            < self.tuning.zombie_attack_interval - CLOCK_EPSILON
        ):
            return 0
        self.last_attack_at = now
        return self.stats.contact_damage

    def get_reward(self: Self) -> ZombieReward:
        return ZombieReward(self.stats.score, self.stats.gold)

    def __repr__(self: Self) -> str:
        return (
            f"Zombie(type={self.zombie_type.name}, level={self.level}, "
            f"HP={self.current_hp}/{self.max_hp})"
        )
