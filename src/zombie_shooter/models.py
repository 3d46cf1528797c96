"""Dataclasses that model the live simulation state."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import TYPE_CHECKING

import pygame
from pygame import sprite

from .entities_constants import WeaponType, ZombieType
from .rng import RandomSource
from .tuning import Tuning

if TYPE_CHECKING:  # pragma: no cover - typing-only imports
    from .entities import Explosion, Player, Projectile


class GameState(Enum):
    MENU = "menu"
    CHARACTER_SELECT = "character_select"
    WEAPON_SELECT = "weapon_select"
    PLAYING = "playing"
    PAUSED = "paused"
    SHOP = "shop"
    GAME_OVER = "game_over"


@dataclass
class ProgressState:
    """Session progress and simulation clocks (seconds)."""

    status: GameState
    elapsed: float = 0.0
    spawn_timer: float = 0.0
    game_over_at: float | None = None
    zombies_killed: int = 0


@dataclass
class Groups:
    """Sprite groups container."""

    zombie_group: sprite.Group


@dataclass
class GameData:
    """Aggregated handles for the core game entities."""

    state: ProgressState
    groups: Groups
    player: Player
    tuning: Tuning
    rng: RandomSource
    arena: pygame.Rect
    projectiles: list[Projectile] = field(default_factory=list)
    explosions: list[Explosion] = field(default_factory=list)


@dataclass
class TickResult:
    """What happened during one world update, for HUD and sound triggers."""

    zombies_removed: int = 0
    score_gained: int = 0
    gold_gained: int = 0
    damage_taken: int = 0
    burn_damage: int = 0
    spawned: int = 0
    leveled_up: bool = False


@dataclass(frozen=True)
class PlayerStats:
    hp: int
    max_hp: int
    score: int
    gold: int
    level: int
    weapon: WeaponType | None


@dataclass(frozen=True)
class ZombieView:
    zombie_type: ZombieType
    x: float
    y: float
    angle_to_player: float
    hp: int
    max_hp: int
    burning: bool


@dataclass(frozen=True)
class ProjectileView:
    x: float
    y: float
    weapon_type: WeaponType


@dataclass(frozen=True)
class ExplosionView:
    x: float
    y: float
    radius: float
    progress: float  # 0.0 at detonation, 1.0 when finished


__all__ = [
    "GameState",
    "ProgressState",
    "Groups",
    "GameData",
    "TickResult",
    "PlayerStats",
    "ZombieView",
    "ProjectileView",
    "ExplosionView",
]
