import pytest

from zombie_shooter.entities import Player, Zombie
from zombie_shooter.entities_constants import (
    ZOMBIE_STATS,
    CharacterType,
    WeaponType,
    ZombieType,
)
from zombie_shooter.tuning import DEFAULT_TUNING, tuning_from_config


def test_tuning_without_overrides_is_default() -> None:
    assert tuning_from_config(None) is DEFAULT_TUNING
    assert tuning_from_config({"tuning": {}}) is DEFAULT_TUNING


def test_tuning_overrides_only_named_values() -> None:
    tuning = tuning_from_config(
        {
            "tuning": {
                "level_up_score_threshold": 300,
                "arena_width": 800,
                "zombies": {"boss": {"base_hp": 300, "gold": 99}},
            }
        }
    )

    assert tuning.level_up_score_threshold == 300
    assert tuning.arena_width == 800
    assert tuning.arena_height == DEFAULT_TUNING.arena_height
    assert tuning.zombies[ZombieType.BOSS].base_hp == 300
    assert tuning.zombies[ZombieType.BOSS].gold == 99
    assert tuning.zombies[ZombieType.BOSS].speed == ZOMBIE_STATS[ZombieType.BOSS].speed
    assert tuning.zombies[ZombieType.NORMAL] == ZOMBIE_STATS[ZombieType.NORMAL]
    assert ZOMBIE_STATS[ZombieType.BOSS].base_hp == 200


def test_tuning_skips_bad_entries_but_keeps_good_ones(capsys) -> None:
    tuning = tuning_from_config(
        {
            "tuning": {
                "no_such_key": 1,
                "max_zombies": "many",
                "zombies": {"dragon": {"base_hp": 1}},
                "weapons": {"m4": {"price": 250}},
            }
        }
    )

    out = capsys.readouterr().out
    assert "no_such_key" in out
    assert "max_zombies" in out
    assert "zombies" in out
    assert tuning.max_zombies == DEFAULT_TUNING.max_zombies
    assert tuning.zombies == DEFAULT_TUNING.zombies
    assert tuning.weapons[WeaponType.M4].price == 250


def test_tuning_parses_spawn_bands() -> None:
    tuning = tuning_from_config(
        {
            "tuning": {
                "spawn_bands": [
                    {"max_level": 3, "cutpoints": [[100, "normal"]]},
                    {"max_level": None, "cutpoints": [[50, "tank"], [100, "boss"]]},
                ]
            }
        }
    )

    assert tuning.band_for_level(1).pick(99) == ZombieType.NORMAL
    assert tuning.band_for_level(4).pick(49) == ZombieType.TANK
    assert tuning.band_for_level(40).pick(50) == ZombieType.BOSS


def test_tuning_rejects_unsorted_spawn_band(capsys) -> None:
    tuning = tuning_from_config(
        {
            "tuning": {
                "spawn_bands": [
                    {"max_level": None, "cutpoints": [[100, "fast"], [50, "normal"]]}
                ]
            }
        }
    )

    assert "spawn_bands" in capsys.readouterr().out
    assert tuning.spawn_bands == DEFAULT_TUNING.spawn_bands


def test_tuning_stat_overrides_are_cast_to_stat_types() -> None:
    tuning = tuning_from_config(
        {"tuning": {"zombies": {"normal": {"base_hp": "30", "speed": "2"}}}}
    )

    stats = tuning.zombies[ZombieType.NORMAL]
    assert stats.base_hp == 30
    assert isinstance(stats.base_hp, int)
    assert stats.speed == 2.0
    assert Zombie(ZombieType.NORMAL, 1, 0, 0, tuning=tuning).max_hp == 40


def test_tuning_rejects_non_numeric_and_negative_stats(capsys) -> None:
    tuning = tuning_from_config(
        {
            "tuning": {
                "zombies": {"normal": {"base_hp": "lots"}},
                "weapons": {"m4": {"damage": -5}},
            }
        }
    )

    out = capsys.readouterr().out
    assert "zombies" in out
    assert "weapons" in out
    assert tuning.zombies == DEFAULT_TUNING.zombies
    assert tuning.weapons == DEFAULT_TUNING.weapons


@pytest.mark.parametrize(
    "key",
    [
        "level_up_score_threshold",
        "level_up_heal_divisor",
        "spawn_roll_range",
        "initial_spawn_rate",
        "arena_width",
    ],
)
def test_tuning_rejects_zero_for_divisors_and_sizes(capsys, key: str) -> None:
    tuning = tuning_from_config({"tuning": {key: 0}})

    assert key in capsys.readouterr().out
    assert getattr(tuning, key) == getattr(DEFAULT_TUNING, key)


def test_tuning_rejects_negative_and_boolean_scalars(capsys) -> None:
    tuning = tuning_from_config(
        {"tuning": {"max_zombies": -1, "collision_distance": True}}
    )

    out = capsys.readouterr().out
    assert "max_zombies" in out
    assert "collision_distance" in out
    assert tuning == DEFAULT_TUNING


def test_zero_score_threshold_override_keeps_scoring_working() -> None:
    tuning = tuning_from_config(
        {"tuning": {"level_up_score_threshold": 0, "level_up_heal_divisor": 0}}
    )
    player = Player(CharacterType.BALANCED, tuning=tuning)

    assert player.add_score(500) is True
    assert player.level == 2
