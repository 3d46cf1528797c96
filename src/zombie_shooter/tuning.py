"""Externally configurable tuning values for the combat simulation."""

from __future__ import annotations

from dataclasses import dataclass, field, fields, replace
from types import MappingProxyType
from typing import Any, Mapping

from .entities_constants import (
    CHARACTER_STATS,
    HP_INCREASE_PER_LEVEL,
    WEAPON_STATS,
    ZOMBIE_STATS,
    CharacterStats,
    CharacterType,
    WeaponStats,
    WeaponType,
    ZombieStats,
    ZombieType,
)
from .gameplay_constants import (
    ARENA_HEIGHT,
    ARENA_WIDTH,
    BULLET_COLLISION_DISTANCE,
    COLLISION_DISTANCE,
    EXPLOSION_DURATION,
    FRAME_RATE_SCALE,
    INITIAL_ZOMBIE_SPAWN_RATE,
    LEVEL_UP_HEAL_DIVISOR,
    LEVEL_UP_SCORE_THRESHOLD,
    MAX_UPGRADE_LEVEL,
    MAX_ZOMBIES_INCREASE,
    MAX_ZOMBIES_ON_SCREEN,
    OFFSCREEN_MARGIN,
    SPAWN_RATE_INCREASE,
    SPAWN_ROLL_RANGE,
    UPGRADE_BASE_COST_RATIO,
    UPGRADE_COST_MULTIPLIER,
    UPGRADE_DAMAGE_INCREASE,
    ZOMBIE_ATTACK_INTERVAL,
)


@dataclass(frozen=True)
class SpawnBand:
    """Cumulative spawn table used up to ``max_level`` (``None`` = no limit).

    ``cutpoints`` pairs an exclusive upper roll bound with the variant picked
    when the roll falls below it, in ascending order.
    """

    max_level: int | None
    cutpoints: tuple[tuple[int, ZombieType], ...]

    def covers(self, level: int) -> bool:
        return self.max_level is None or level <= self.max_level

    def pick(self, roll: int) -> ZombieType:
        for bound, zombie_type in self.cutpoints:
            if roll < bound:
                return zombie_type
        return self.cutpoints[-1][1]


DEFAULT_SPAWN_BANDS: tuple[SpawnBand, ...] = (
    SpawnBand(2, ((80, ZombieType.NORMAL), (100, ZombieType.FAST))),
    SpawnBand(
        5,
        (
            (50, ZombieType.NORMAL),
            (75, ZombieType.FAST),
            (100, ZombieType.STRONG),
        ),
    ),
    SpawnBand(
        9,
        (
            (30, ZombieType.NORMAL),
            (50, ZombieType.FAST),
            (80, ZombieType.STRONG),
            (100, ZombieType.TANK),
        ),
    ),
    SpawnBand(
        None,
        (
            (20, ZombieType.NORMAL),
            (35, ZombieType.FAST),
            (60, ZombieType.STRONG),
            (85, ZombieType.TANK),
            (100, ZombieType.BOSS),
        ),
    ),
)


@dataclass(frozen=True)
class Tuning:
    arena_width: int = ARENA_WIDTH
    arena_height: int = ARENA_HEIGHT
    frame_rate_scale: float = FRAME_RATE_SCALE
    characters: Mapping[CharacterType, CharacterStats] = field(
        default_factory=lambda: CHARACTER_STATS
    )
    weapons: Mapping[WeaponType, WeaponStats] = field(
        default_factory=lambda: WEAPON_STATS
    )
    zombies: Mapping[ZombieType, ZombieStats] = field(
        default_factory=lambda: ZOMBIE_STATS
    )
    hp_increase_per_level: int = HP_INCREASE_PER_LEVEL
    level_up_score_threshold: int = LEVEL_UP_SCORE_THRESHOLD
    level_up_heal_divisor: int = LEVEL_UP_HEAL_DIVISOR
    spawn_bands: tuple[SpawnBand, ...] = DEFAULT_SPAWN_BANDS
    spawn_roll_range: int = SPAWN_ROLL_RANGE
    initial_spawn_rate: float = INITIAL_ZOMBIE_SPAWN_RATE
    spawn_rate_increase: float = SPAWN_RATE_INCREASE
    max_zombies: int = MAX_ZOMBIES_ON_SCREEN
    max_zombies_increase: int = MAX_ZOMBIES_INCREASE
    collision_distance: float = COLLISION_DISTANCE
    bullet_collision_distance: float = BULLET_COLLISION_DISTANCE
    zombie_attack_interval: float = ZOMBIE_ATTACK_INTERVAL
    explosion_duration: float = EXPLOSION_DURATION
    offscreen_margin: float = OFFSCREEN_MARGIN
    upgrade_damage_increase: int = UPGRADE_DAMAGE_INCREASE
    upgrade_cost_multiplier: float = UPGRADE_COST_MULTIPLIER
    upgrade_base_cost_ratio: float = UPGRADE_BASE_COST_RATIO
    max_upgrade_level: int = MAX_UPGRADE_LEVEL

    def band_for_level(self, level: int) -> SpawnBand:
        for band in self.spawn_bands:
            if band.covers(level):
                return band
        return self.spawn_bands[-1]


DEFAULT_TUNING = Tuning()


# Divisors, rates and sizes that must stay above zero.
_POSITIVE_FIELDS = frozenset(
    {
        "arena_width",
        "arena_height",
        "frame_rate_scale",
        "level_up_score_threshold",
        "level_up_heal_divisor",
        "spawn_roll_range",
        "initial_spawn_rate",
        "upgrade_cost_multiplier",
    }
)


def _coerce_number(name: str, default: Any, raw: Any, *, positive: bool) -> Any:
    """Cast ``raw`` to the type of ``default`` and check its sign."""
    if isinstance(raw, bool):
        raise ValueError(f"{name}: expected a number, got {raw!r}")
    value = type(default)(raw)
    if positive and not value > 0:
        raise ValueError(f"{name}: must be greater than 0, got {raw!r}")
    if not value >= 0:
        raise ValueError(f"{name}: must not be negative, got {raw!r}")
    return value


def _override_stats(
    table: Mapping[Any, Any], enum_type: type, raw: Any
) -> Mapping[Any, Any]:
    if not isinstance(raw, dict):
        raise ValueError(f"expected a mapping, got {type(raw).__name__}")
    updated = dict(table)
    for name, stat_overrides in raw.items():
        key = enum_type(name)
        if not isinstance(stat_overrides, dict):
            raise ValueError(f"{name}: expected a mapping of stat values")
        current = updated[key]
        valid = {f.name for f in fields(current)}
        changes: dict[str, Any] = {}
        for stat_name, value in stat_overrides.items():
            if stat_name not in valid:
                raise ValueError(f"{name}: unknown stat '{stat_name}'")
            default = getattr(current, stat_name)
            if isinstance(default, str):
                changes[stat_name] = str(value)
            else:
                changes[stat_name] = _coerce_number(
                    f"{name}.{stat_name}", default, value, positive=False
                )
        updated[key] = replace(current, **changes)
    return MappingProxyType(updated)


def _parse_spawn_bands(raw: Any) -> tuple[SpawnBand, ...]:
    if not isinstance(raw, list) or not raw:
        raise ValueError("spawn_bands must be a non-empty list")
    bands: list[SpawnBand] = []
    for entry in raw:
        if not isinstance(entry, dict):
            raise ValueError("spawn band entries must be mappings")
        max_level = entry.get("max_level")
        cutpoints = tuple(
            (int(bound), ZombieType(name)) for bound, name in entry["cutpoints"]
        )
        if not cutpoints:
            raise ValueError("spawn band needs at least one cutpoint")
        bounds = [bound for bound, _ in cutpoints]
        if bounds != sorted(bounds):
            raise ValueError("spawn band cutpoints must be ascending")
        bands.append(
            SpawnBand(None if max_level is None else int(max_level), cutpoints)
        )
    return tuple(bands)


_TABLES: dict[str, type] = {
    "characters": CharacterType,
    "weapons": WeaponType,
    "zombies": ZombieType,
}


def tuning_from_config(config: Mapping[str, Any] | None) -> Tuning:
    """Build tuning values from ``config["tuning"]``, skipping bad entries."""
    tuning = DEFAULT_TUNING
    if not config:
        return tuning
    overrides = config.get("tuning") or {}
    if not isinstance(overrides, dict):
        print(f"Ignoring tuning overrides: expected a mapping, got {overrides!r}")
        return tuning

    scalar_fields = {
        f.name
        for f in fields(Tuning)
        if f.name not in _TABLES and f.name != "spawn_bands"
    }
    for key, raw in overrides.items():
        try:
            if key in _TABLES:
                table = getattr(tuning, key)
                tuning = replace(
                    tuning, **{key: _override_stats(table, _TABLES[key], raw)}
                )
            elif key == "spawn_bands":
                tuning = replace(tuning, spawn_bands=_parse_spawn_bands(raw))
            elif key in scalar_fields:
                value = _coerce_number(
                    key,
                    getattr(DEFAULT_TUNING, key),
                    raw,
                    positive=key in _POSITIVE_FIELDS,
                )
                tuning = replace(tuning, **{key: value})
            else:
                raise ValueError("unknown tuning key")
        except (KeyError, TypeError, ValueError) as exc:
            print(f"Ignoring tuning override '{key}': {exc}")
    return tuning


__all__ = [
    "SpawnBand",
    "DEFAULT_SPAWN_BANDS",
    "Tuning",
    "DEFAULT_TUNING",
    "tuning_from_config",
]
