"""Player entity logic."""

from __future__ import annotations

from typing import Self

import pygame

from ..entities_constants import CHARACTER_SIZE, CharacterType, WeaponType
from ..tuning import DEFAULT_TUNING, Tuning
from .movement import clamp_to_arena, sync_rect
from .weapon import Weapon, create_weapon

STARTING_WEAPON = WeaponType.AK47


class Player(pygame.sprite.Sprite):
    def __init__(
        self: Self,
        character_type: CharacterType,
        x: float | None = None,
        y: float | None = None,
        *,
        tuning: Tuning = DEFAULT_TUNING,
    ) -> None:
        super().__init__()
        self.tuning = tuning
        self.character_type = character_type
        stats = tuning.characters[character_type]
        self.max_hp = stats.max_hp
        self.current_hp = self.max_hp
        self.speed = stats.speed
        self.arena = pygame.Rect(0, 0, tuning.arena_width, tuning.arena_height)
        start_x = self.arena.centerx if x is None else x
        start_y = self.arena.centery if y is None else y
        self.x, self.y = clamp_to_arena(float(start_x), float(start_y), self.arena)
        self.rect = pygame.Rect(0, 0, CHARACTER_SIZE, CHARACTER_SIZE)
        sync_rect(self)
        self.score = 0
        self.gold = 0
        self.level = 1
        self._weapons: dict[WeaponType, Weapon] = {}
        starter = create_weapon(STARTING_WEAPON, tuning=tuning)
        self._weapons[STARTING_WEAPON] = starter
        self.current_weapon: Weapon | None = starter

    @property
    def is_alive(self: Self) -> bool:
        return self.current_hp > 0

    @property
    def owned_weapon_types(self: Self) -> frozenset[WeaponType]:
        return frozenset(self._weapons)

    def has_weapon(self: Self, weapon_type: WeaponType) -> bool:
        return weapon_type in self._weapons

    def weapon(self: Self, weapon_type: WeaponType) -> Weapon | None:
        return self._weapons.get(weapon_type)

    # --- Movement ---

    def _move_by(self: Self, dx: float, dy: float) -> None:
        self.x, self.y = clamp_to_arena(self.x + dx, self.y + dy, self.arena)
        sync_rect(self)

    def move_up(self: Self) -> None:
        self._move_by(0.0, -self.speed)

    def move_down(self: Self) -> None:
        self._move_by(0.0, self.speed)

    def move_left(self: Self) -> None:
        self._move_by(-self.speed, 0.0)

    def move_right(self: Self) -> None:
        self._move_by(self.speed, 0.0)

    def set_position(self: Self, x: float, y: float) -> None:
        self.x, self.y = clamp_to_arena(float(x), float(y), self.arena)
        sync_rect(self)

    # --- Health ---

    def take_damage(self: Self, amount: int) -> int:
        """Apply damage and return how much HP was actually lost."""
        actual = min(max(0, int(amount)), self.current_hp)
        self.current_hp -= actual
        return actual

    def heal(self: Self, amount: int) -> int:
        """Restore HP up to ``max_hp`` and return how much was gained."""
        old_hp = self.current_hp
        self.current_hp = max(0, min(self.max_hp, old_hp + max(0, int(amount))))
        return self.current_hp - old_hp

    # --- Progression and economy ---

    def add_score(self: Self, points: int) -> bool:
        """Add score, returning True when this crossed a level threshold."""
        self.score += max(0, int(points))
        new_level = 1 + self.score // self.tuning.level_up_score_threshold
        if new_level <= self.level:
            return False
        self.level = new_level
        if self.is_alive:
            self.heal(self.max_hp // self.tuning.level_up_heal_divisor)
        return True

    def add_gold(self: Self, amount: int) -> None:
        self.gold += max(0, int(amount))

    def equip_weapon(self: Self, weapon: Weapon) -> None:
        self.current_weapon = weapon

    def buy_weapon(self: Self, weapon_type: WeaponType) -> bool:
        if weapon_type in self._weapons:
            return False
        price = self.tuning.weapons[weapon_type].price
        if self.gold < price:
            return False
        self.gold -= price
        self._weapons[weapon_type] = create_weapon(weapon_type, tuning=self.tuning)
        return True

    def upgrade_weapon(self: Self, weapon_type: WeaponType) -> bool:
        weapon = self._weapons.get(weapon_type)
        if weapon is None or weapon.is_max_level:
            return False
        cost = weapon.get_upgrade_cost()
        if self.gold < cost:
            return False
        self.gold -= cost
        return weapon.upgrade()

    def reset(self: Self) -> None:
        # Gold and owned weapons carry over between sessions.
        self.current_hp = self.max_hp
        self.score = 0
        self.level = 1

    def __repr__(self: Self) -> str:
        return (
            f"Player(type={self.character_type.name}, "
            f"HP={self.current_hp}/{self.max_hp}, score={self.score}, "
            f"gold={self.gold}, level={self.level})"
        )
