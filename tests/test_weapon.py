import pytest

from zombie_shooter.entities import all_weapon_types, create_weapon, weapon_info
from zombie_shooter.entities_constants import WeaponType


def test_second_shot_inside_cooldown_is_rejected() -> None:
    weapon = create_weapon(WeaponType.A16)

    assert weapon.fire(10.0, 100, 100, 0, 0) is True
    assert weapon.fire(10.2, 100, 100, 0, 0) is False
    assert weapon.last_fire_at == 10.0
    assert weapon.can_fire(10.25) is True
    assert weapon.fire(10.3, 100, 100, 0, 0) is True
    assert weapon.last_fire_at == 10.3


def test_fresh_weapon_can_fire_immediately() -> None:
    weapon = create_weapon(WeaponType.BAZOOKA)

    assert weapon.can_fire(0.0) is True


def test_upgrade_increases_damage_until_cap() -> None:
    weapon = create_weapon(WeaponType.AK47)

    for _ in range(10):
        assert weapon.upgrade() is True
    assert weapon.upgrade() is False
    assert weapon.upgrade_level == 10
    assert weapon.damage == 10 + 10 * 5


@pytest.mark.parametrize(
    ("weapon_type", "upgrades", "expected"),
    [
        (WeaponType.AK47, 0, 0),
        (WeaponType.M4, 0, 150),
        (WeaponType.M4, 1, 225),
        (WeaponType.BAZOOKA, 2, 1350),
    ],
)
def test_upgrade_cost_grows_exponentially(
    weapon_type: WeaponType, upgrades: int, expected: int
) -> None:
    weapon = create_weapon(weapon_type)
    for _ in range(upgrades):
        weapon.upgrade()

    assert weapon.get_upgrade_cost() == expected


def test_variant_specific_attributes() -> None:
    bazooka = create_weapon(WeaponType.BAZOOKA)
    flamethrower = create_weapon(WeaponType.FLAMETHROWER)

    assert bazooka.explosion_radius == 150.0
    assert bazooka.fire_rate == 2.0
    assert flamethrower.burn_duration == 3.0
    assert flamethrower.range == 250.0


def test_weapon_info_lists_every_weapon() -> None:
    infos = [weapon_info(t) for t in all_weapon_types()]

    assert [info.type for info in infos] == list(WeaponType)
    assert {info.price for info in infos} == {0, 500, 1000, 1500, 2000}
    assert weapon_info(WeaponType.M4).name == "M4 Carbine"
